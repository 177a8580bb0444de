from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import ConfigDict, Field

from autohaus.entrypoints.http.dtos.base import CamelDTO
from autohaus.entrypoints.http.dtos.leads import EMAIL_PATTERN, PHONE_PATTERN

STATE_PATTERN = r"^[A-Z]{2}$"
ZIP_PATTERN = r"^\d{5}(-\d{4})?$"
SSN_PATTERN = r"^\d{3}-\d{2}-\d{4}$"
VIN_PATTERN = r"^[A-HJ-NPR-Z0-9]{17}$"
LICENSE_EXP_PATTERN = r"^(0[1-9]|1[0-2])/?([0-9]{2})$"

EmployerType = Literal["Employed", "Self-Employed", "Retired", "Student", "Unemployed", "Other"]


class _FinancingDTO(CamelDTO):
    model_config = ConfigDict(str_strip_whitespace=True)


class ResidenceDTO(_FinancingDTO):
    address1: str = Field(min_length=5, max_length=100)
    address2: str | None = Field(default=None, max_length=100)
    city: str = Field(min_length=2, max_length=50)
    state: str = Field(pattern=STATE_PATTERN, examples=["TX"])
    zip_code: str = Field(pattern=ZIP_PATTERN, examples=["75001"])
    years: int = Field(ge=0, le=50)
    months: int = Field(ge=0, le=11)
    residence_type: Literal["Own", "Rent", "Other"]
    rent_mortgage: Decimal = Field(ge=0, description="Monthly rent or mortgage payment")


class EmploymentDTO(_FinancingDTO):
    employer_name: str = Field(min_length=2, max_length=100)
    employer_type: EmployerType
    monthly_income: Decimal = Field(ge=1000, le=1000000)
    occupation: str = Field(min_length=2, max_length=50)
    address1: str = Field(min_length=5, max_length=100)
    address2: str | None = Field(default=None, max_length=100)
    city: str = Field(min_length=2, max_length=50)
    state: str = Field(pattern=STATE_PATTERN)
    zip_code: str = Field(pattern=ZIP_PATTERN)
    years: int = Field(ge=0, le=50)
    months: int = Field(ge=0, le=11)
    work_phone: str | None = Field(default=None, pattern=PHONE_PATTERN)


class PartyDTO(_FinancingDTO):
    first_name: str = Field(min_length=2, max_length=50)
    middle_initial: str | None = Field(default=None, pattern=r"^[A-Za-z]$")
    last_name: str = Field(min_length=2, max_length=50)
    email: str = Field(max_length=254, pattern=EMAIL_PATTERN)
    mobile_phone: str = Field(pattern=PHONE_PATTERN)
    home_phone: str | None = Field(default=None, pattern=PHONE_PATTERN)
    ssn: str = Field(pattern=SSN_PATTERN, examples=["123-45-6789"])
    date_of_birth: date
    driver_license_number: str = Field(min_length=1, max_length=30)
    driver_license_state: str = Field(pattern=STATE_PATTERN)
    driver_license_exp: str = Field(pattern=LICENSE_EXP_PATTERN, examples=["08/29"])
    residence: ResidenceDTO
    employment: EmploymentDTO


class VehicleSelectionDTO(_FinancingDTO):
    year: int = Field(examples=[2022])
    make: str = Field(min_length=1, max_length=50)
    model: str = Field(min_length=1, max_length=50)
    trim: str | None = Field(default=None, max_length=50)
    vin: str = Field(pattern=VIN_PATTERN, examples=["1FTFW1E50MFA00001"])
    stock_number: str | None = Field(default=None, max_length=50)
    mileage: int = Field(ge=0)
    price: Decimal | None = Field(default=None, ge=1000)
    down_payment: Decimal | None = Field(default=None, ge=0)


class FinancingApplicationRequestDTO(_FinancingDTO):
    """Credit application for one vehicle, with an optional co-buyer."""

    applicant: PartyDTO
    co_buyer: PartyDTO | None = None
    vehicle: VehicleSelectionDTO
    acknowledgment_consent: bool = False
    credit_check_consent: bool = False
    text_message_consent: bool = False
    additional_comments: str | None = Field(default=None, max_length=1000)


class FinancingSubmittedDTO(CamelDTO):
    success: bool = True
    message: str
    reference_id: str = Field(description="8-character reference quoted to the customer")
