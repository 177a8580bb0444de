"""Contact form and quick-message submissions."""

from __future__ import annotations

import logging

from autohaus.domain.errors import ServiceUnavailableError
from autohaus.domain.leads import ContactRequest, QuickMessage
from autohaus.ports.email_sender import EmailMessage, EmailSender
from autohaus.use_cases.email_templates import (
    render_contact_confirmation,
    render_contact_notification,
    render_quick_message,
)

logger = logging.getLogger(__name__)

DELIVERY_FAILED = (
    "Your message could not be sent right now. Please try again later or call us directly."
)


class SubmitContactRequest:
    """
    Notify the dealership about a contact form, then confirm to the customer.

    The dealership notification must go out; the customer confirmation is
    best effort.
    """

    def __init__(self, email_sender: EmailSender, receiver_email: str | None) -> None:
        self._sender = email_sender
        self._receiver = receiver_email

    def execute(self, request: ContactRequest) -> None:
        """
        Raises:
            ValidationError: If consents or test-drive details are missing
            ServiceUnavailableError: If no receiver is configured or delivery fails
        """
        request.validate()

        if not self._receiver:
            logger.error("Lead receiver e-mail is not configured")
            raise ServiceUnavailableError(DELIVERY_FAILED)

        delivered = self._sender.send(
            EmailMessage(
                to=self._receiver,
                subject=request.subject,
                html=render_contact_notification(request),
                reply_to=request.email,
                high_priority=request.is_test_drive,
            )
        )
        if not delivered:
            raise ServiceUnavailableError(DELIVERY_FAILED)

        confirmed = self._sender.send(
            EmailMessage(
                to=request.email,
                subject="We received your request",
                html=render_contact_confirmation(request),
            )
        )
        if not confirmed:
            logger.warning(
                "Customer confirmation e-mail failed",
                extra={"contact_type": request.contact_type.value},
            )

        logger.info(
            "Contact request submitted",
            extra={"contact_type": request.contact_type.value},
        )


class SendQuickMessage:
    def __init__(self, email_sender: EmailSender, receiver_email: str | None) -> None:
        self._sender = email_sender
        self._receiver = receiver_email

    def execute(self, request: QuickMessage) -> None:
        """
        Raises:
            ServiceUnavailableError: If no receiver is configured or delivery fails
        """
        if not self._receiver:
            logger.error("Lead receiver e-mail is not configured")
            raise ServiceUnavailableError(DELIVERY_FAILED)

        delivered = self._sender.send(
            EmailMessage(
                to=self._receiver,
                subject=f"New message from {request.name}",
                html=render_quick_message(request),
                reply_to=request.email,
            )
        )
        if not delivered:
            raise ServiceUnavailableError(DELIVERY_FAILED)
