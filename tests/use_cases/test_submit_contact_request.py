"""Unit tests for contact form and quick-message submissions."""

from __future__ import annotations

from dataclasses import replace
from unittest.mock import Mock

import pytest

from autohaus.domain.errors import ServiceUnavailableError, ValidationError
from autohaus.domain.leads import ContactRequest, ContactType, QuickMessage
from autohaus.ports.email_sender import EmailSender
from autohaus.use_cases.submit_contact_request import SendQuickMessage, SubmitContactRequest

RECEIVER = "sales@autohaus.example"


@pytest.fixture()
def sender() -> Mock:
    sender = Mock(spec=EmailSender)
    sender.send.return_value = True
    return sender


@pytest.fixture()
def inquiry() -> ContactRequest:
    return ContactRequest(
        first_name="Ana",
        last_name="Silva",
        email="ana@example.com",
        phone="(555) 123-4567",
        message="Is the F-150 still available?",
        contact_type=ContactType.INQUIRY,
        data_consent=True,
        accuracy_consent=True,
        vehicle_info="2021 Ford F-150",
    )


def test_notifies_dealership_then_confirms(sender: Mock, inquiry: ContactRequest) -> None:
    SubmitContactRequest(sender, RECEIVER).execute(inquiry)

    notification, confirmation = (call.args[0] for call in sender.send.call_args_list)
    assert notification.to == RECEIVER
    assert notification.subject == "New Vehicle Inquiry - Ana Silva"
    assert notification.reply_to == "ana@example.com"
    assert notification.high_priority is False
    assert "2021 Ford F-150" in notification.html
    assert confirmation.to == "ana@example.com"


def test_test_drive_is_high_priority(sender: Mock, inquiry: ContactRequest) -> None:
    request = replace(
        inquiry,
        contact_type=ContactType.TEST_DRIVE,
        drivers_license="D1234567",
        test_drive_consent=True,
        preferred_date="2026-10-24",
    )

    SubmitContactRequest(sender, RECEIVER).execute(request)

    notification = sender.send.call_args_list[0].args[0]
    assert notification.subject == "New Test Drive Request - Ana Silva"
    assert notification.high_priority is True
    assert "HIGH PRIORITY" in notification.html
    assert "2026-10-24" in notification.html


def test_invalid_request_sends_nothing(sender: Mock, inquiry: ContactRequest) -> None:
    with pytest.raises(ValidationError):
        SubmitContactRequest(sender, RECEIVER).execute(replace(inquiry, data_consent=False))

    sender.send.assert_not_called()


def test_failed_notification_is_service_unavailable(sender: Mock, inquiry: ContactRequest) -> None:
    sender.send.return_value = False

    with pytest.raises(ServiceUnavailableError):
        SubmitContactRequest(sender, RECEIVER).execute(inquiry)

    assert sender.send.call_count == 1


def test_failed_confirmation_is_tolerated(sender: Mock, inquiry: ContactRequest) -> None:
    sender.send.side_effect = [True, False]

    SubmitContactRequest(sender, RECEIVER).execute(inquiry)

    assert sender.send.call_count == 2


def test_missing_receiver_is_service_unavailable(sender: Mock, inquiry: ContactRequest) -> None:
    with pytest.raises(ServiceUnavailableError):
        SubmitContactRequest(sender, None).execute(inquiry)

    sender.send.assert_not_called()


def test_quick_message(sender: Mock) -> None:
    message = QuickMessage(
        name="Bo", email="bo@example.com", phone="(555) 000-1111", message="Call me back please"
    )

    SendQuickMessage(sender, RECEIVER).execute(message)

    sent = sender.send.call_args.args[0]
    assert (sent.to, sent.subject, sent.reply_to) == (RECEIVER, "New message from Bo", "bo@example.com")


def test_quick_message_delivery_failure(sender: Mock) -> None:
    sender.send.return_value = False
    message = QuickMessage(name="Bo", email="bo@example.com", phone="", message="Hello there!")

    with pytest.raises(ServiceUnavailableError):
        SendQuickMessage(sender, RECEIVER).execute(message)
