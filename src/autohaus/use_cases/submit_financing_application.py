from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from autohaus.domain.errors import ConflictError
from autohaus.domain.financing import DUPLICATE_WINDOW, FinancingApplication
from autohaus.domain.vehicle import utc_now
from autohaus.ports.email_sender import EmailMessage, EmailSender
from autohaus.ports.financing_application_repository import FinancingApplicationRepository
from autohaus.use_cases.email_templates import render_financing_notification

logger = logging.getLogger(__name__)


class SubmitFinancingApplication:
    """
    Store a financing application and notify the finance team.

    Responsibilities:
    - Enforce cross-field rules (ages, model year, consents)
    - Allow one application per e-mail address per 24 hours
    - Persist first; the staff e-mail is best effort once the application is safe
    """

    def __init__(
        self,
        financing_application_repository: FinancingApplicationRepository,
        email_sender: EmailSender,
        receiver_email: str | None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._repository = financing_application_repository
        self._sender = email_sender
        self._receiver = receiver_email
        self._clock = clock

    def execute(self, application: FinancingApplication) -> FinancingApplication:
        """
        Execute the submission.

        Args:
            application: Application built from the submitted form

        Returns:
            The stored application (its reference_id is shown to the customer)

        Raises:
            ValidationError: If a cross-field rule fails
            ConflictError: If the applicant submitted within the last 24 hours
        """
        application.validate(self._clock())

        since = utc_now() - DUPLICATE_WINDOW
        if self._repository.exists_since(application.applicant.email, since):
            raise ConflictError(
                "You have already submitted an application in the last 24 hours. "
                "Please wait before submitting another application."
            )

        saved = self._repository.add(application)
        logger.info(
            "Financing application submitted",
            extra={"reference_id": saved.reference_id, "vehicle": saved.vehicle.summary},
        )

        if not self._receiver:
            logger.error(
                "Lead receiver e-mail is not configured; application stored without notification",
                extra={"reference_id": saved.reference_id},
            )
            return saved

        delivered = self._sender.send(
            EmailMessage(
                to=self._receiver,
                subject=f"New Financing Application - {saved.applicant.full_name}",
                html=render_financing_notification(saved),
                reply_to=saved.applicant.email,
            )
        )
        if not delivered:
            logger.warning(
                "Financing notification e-mail failed",
                extra={"reference_id": saved.reference_id},
            )
        return saved
