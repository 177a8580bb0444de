"""Customer contact requests captured by the public site."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from autohaus.domain.errors import ValidationError


class ContactType(str, Enum):
    INQUIRY = "inquiry"
    TEST_DRIVE = "test-drive"
    MESSAGE = "message"


SUBJECT_BY_TYPE: dict[ContactType, str] = {
    ContactType.INQUIRY: "New Vehicle Inquiry",
    ContactType.TEST_DRIVE: "New Test Drive Request",
    ContactType.MESSAGE: "New Contact Message",
}


@dataclass(frozen=True, slots=True)
class ContactRequest:
    first_name: str
    last_name: str
    email: str
    phone: str
    message: str
    contact_type: ContactType
    data_consent: bool
    accuracy_consent: bool
    preferred_contact: str | None = None
    vehicle_info: str | None = None
    preferred_date: str | None = None
    preferred_time: str | None = None
    drivers_license: str | None = None
    test_drive_consent: bool = False
    communication_consent: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_test_drive(self) -> bool:
        return self.contact_type is ContactType.TEST_DRIVE

    @property
    def subject(self) -> str:
        return f"{SUBJECT_BY_TYPE[self.contact_type]} - {self.full_name}"

    def validate(self) -> None:
        """
        Check consent and test-drive requirements.

        Raises:
            ValidationError: Listing every unmet requirement
        """
        errors: list[dict[str, str]] = []
        if not self.data_consent:
            errors.append({"field": "dataConsent", "message": "Data processing consent is required"})
        if not self.accuracy_consent:
            errors.append(
                {"field": "accuracyConsent", "message": "Information accuracy confirmation is required"}
            )
        if self.is_test_drive:
            if not (self.drivers_license or "").strip():
                errors.append(
                    {
                        "field": "driversLicense",
                        "message": "Driver's license number is required for test drives",
                    }
                )
            if not self.test_drive_consent:
                errors.append(
                    {
                        "field": "testDriveConsent",
                        "message": "Test drive terms must be accepted",
                    }
                )
        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class QuickMessage:
    name: str
    email: str
    phone: str
    message: str
