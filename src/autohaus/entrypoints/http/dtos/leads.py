from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field

from autohaus.entrypoints.http.dtos.base import CamelDTO

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
PHONE_PATTERN = r"^\(\d{3}\)\s\d{3}-\d{4}$"


class ContactRequestDTO(CamelDTO):
    """Contact form: general inquiry, test-drive booking or message."""

    first_name: str = Field(min_length=2, max_length=50, examples=["Ana"])
    last_name: str = Field(min_length=2, max_length=50, examples=["Silva"])
    email: str = Field(max_length=254, pattern=EMAIL_PATTERN, examples=["ana@example.com"])
    phone: str = Field(
        description="US format (XXX) XXX-XXXX",
        pattern=PHONE_PATTERN,
        examples=["(555) 123-4567"],
    )
    message: str = Field(min_length=10, max_length=1000)
    contact_type: Literal["inquiry", "test-drive", "message"] = "inquiry"
    preferred_contact: str | None = Field(default=None, max_length=20, examples=["email"])
    vehicle_info: str | None = Field(default=None, max_length=200)
    preferred_date: str | None = Field(default=None, max_length=20, examples=["2026-11-02"])
    preferred_time: str | None = Field(default=None, max_length=20, examples=["10:30"])
    drivers_license: str | None = Field(default=None, max_length=30)
    data_consent: bool = False
    accuracy_consent: bool = False
    test_drive_consent: bool = False
    communication_consent: bool = False

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            "example": {
                "firstName": "Ana",
                "lastName": "Silva",
                "email": "ana@example.com",
                "phone": "(555) 123-4567",
                "message": "Is the 2021 F-150 still available?",
                "contactType": "test-drive",
                "vehicleInfo": "2021 Ford F-150",
                "preferredDate": "2026-11-02",
                "preferredTime": "10:30",
                "driversLicense": "D1234567",
                "dataConsent": True,
                "accuracyConsent": True,
                "testDriveConsent": True,
            }
        },
    )


class QuickMessageRequestDTO(CamelDTO):
    name: str = Field(min_length=1, max_length=100)
    email: str = Field(max_length=254, pattern=EMAIL_PATTERN)
    phone: str = Field(min_length=1, max_length=30)
    message: str = Field(min_length=1, max_length=1000)

    model_config = ConfigDict(str_strip_whitespace=True)


class ContactSubmittedDTO(CamelDTO):
    success: bool = True
    message: str = Field(examples=["Thank you! We will contact you shortly."])


class RedirectDTO(CamelDTO):
    redirect: str = Field(examples=["/message-sent"])
