"""Tests for lead notification e-mail bodies."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import Callable

from autohaus.domain.financing import FinancingApplication, Party
from autohaus.domain.leads import ContactRequest, ContactType, QuickMessage
from autohaus.use_cases.email_templates import (
    render_contact_confirmation,
    render_contact_notification,
    render_financing_notification,
    render_quick_message,
)

CONTACT = ContactRequest(
    first_name="Ana",
    last_name="Silva",
    email="ana@example.com",
    phone="(555) 123-4567",
    message="<script>alert('hi')</script> Is it available?",
    contact_type=ContactType.INQUIRY,
    data_consent=True,
    accuracy_consent=True,
)


def test_form_values_are_escaped() -> None:
    html = render_contact_notification(CONTACT)

    assert "<script>" not in html
    assert "&lt;script&gt;" in html


def test_missing_values_show_placeholder() -> None:
    html = render_contact_notification(CONTACT)

    assert "N/A" in html  # vehicle_info and preferred_contact are empty
    assert "Preferred date" not in html


def test_test_drive_details_are_included() -> None:
    request = replace(
        CONTACT,
        contact_type=ContactType.TEST_DRIVE,
        drivers_license="D1234567",
        preferred_time="10:00",
    )

    html = render_contact_notification(request)

    assert "New Test Drive Request - Ana Silva (HIGH PRIORITY)" in html
    assert "D1234567" in html
    assert "10:00" in html


def test_confirmation_addresses_the_customer() -> None:
    html = render_contact_confirmation(CONTACT)

    assert "Thank you, Ana!" in html
    assert "received your message" in html


def test_quick_message() -> None:
    html = render_quick_message(
        QuickMessage(name="Bo", email="bo@example.com", phone="", message="Call me")
    )

    assert "New message from Bo" in html
    assert "Call me" in html


def test_financing_notification_masks_ssn_and_lists_co_buyer(
    make_application: Callable[..., FinancingApplication],
    make_party: Callable[..., Party],
) -> None:
    application = make_application(
        co_buyer=make_party(first_name="Luis", ssn="987-65-4321"),
        additional_comments="Prefer 60 months",
    )
    application = replace(
        application,
        vehicle=replace(application.vehicle, price=Decimal("45990.5"), down_payment=Decimal("5000")),
    )

    html = render_financing_notification(application)

    assert "New Financing Application #3C4D5E6F" in html
    assert "***-**-6789" in html and "***-**-4321" in html
    assert "123-45-6789" not in html and "987-65-4321" not in html
    assert "Co-Buyer" in html and "Luis Silva" in html
    assert "$45,990.50" in html
    assert "$6,500.00" in html
    assert "May 17, 1990" in html
    assert "Prefer 60 months" in html
