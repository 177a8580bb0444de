from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from decimal import Decimal

from autohaus.domain.errors import ValidationError
from autohaus.domain.vehicle import utc_now

MINIMUM_AGE = 18
OLDEST_FINANCED_MODEL_YEAR = 2010
DUPLICATE_WINDOW = timedelta(hours=24)


def age_on(birth_date: date, today: date) -> int:
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


def mask_ssn(ssn: str) -> str:
    """Keep only the last four digits: ``123-45-6789`` -> ``***-**-6789``."""
    digits = [ch for ch in ssn if ch.isdigit()]
    if len(digits) < 4:
        return "***-**-****"
    return "***-**-" + "".join(digits[-4:])


@dataclass(frozen=True, slots=True)
class Residence:
    address1: str
    city: str
    state: str
    zip_code: str
    years: int
    months: int
    residence_type: str
    rent_mortgage: Decimal
    address2: str | None = None


@dataclass(frozen=True, slots=True)
class Employment:
    employer_name: str
    employer_type: str
    monthly_income: Decimal
    occupation: str
    address1: str
    city: str
    state: str
    zip_code: str
    years: int
    months: int
    address2: str | None = None
    work_phone: str | None = None


@dataclass(frozen=True, slots=True)
class Party:
    """An applicant or co-buyer on a financing application."""

    first_name: str
    last_name: str
    email: str
    mobile_phone: str
    ssn: str
    date_of_birth: date
    driver_license_number: str
    driver_license_state: str
    driver_license_exp: str
    residence: Residence
    employment: Employment
    middle_initial: str | None = None
    home_phone: str | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True, slots=True)
class VehicleSelection:
    year: int
    make: str
    model: str
    vin: str
    mileage: int
    trim: str | None = None
    stock_number: str | None = None
    price: Decimal | None = None
    down_payment: Decimal | None = None

    @property
    def summary(self) -> str:
        return f"{self.year} {self.make} {self.model}"


@dataclass(frozen=True, slots=True)
class FinancingApplication:
    id: str
    applicant: Party
    vehicle: VehicleSelection
    acknowledgment_consent: bool
    credit_check_consent: bool
    co_buyer: Party | None = None
    text_message_consent: bool = False
    additional_comments: str | None = None
    submitted_at: datetime = field(default_factory=utc_now)

    @property
    def reference_id(self) -> str:
        """Short reference quoted to the customer: last 8 id characters, upper-cased."""
        return self.id.replace("-", "")[-8:].upper()

    def validate(self, today: date) -> None:
        """
        Check the rules that span several fields.

        Field formats (phone, SSN, ZIP, VIN...) are checked at the boundary;
        this covers ages, the vehicle model year and the required consents.

        Raises:
            ValidationError: Listing every failed rule
        """
        errors: list[dict[str, str]] = []

        if age_on(self.applicant.date_of_birth, today) < MINIMUM_AGE:
            errors.append(
                {"field": "applicantDOB", "message": "Applicant must be at least 18 years old"}
            )
        if self.co_buyer is not None and age_on(self.co_buyer.date_of_birth, today) < MINIMUM_AGE:
            errors.append(
                {"field": "coBuyerDOB", "message": "Co-Buyer must be at least 18 years old"}
            )
        if not (OLDEST_FINANCED_MODEL_YEAR <= self.vehicle.year <= today.year + 1):
            errors.append({"field": "vehicleYear", "message": "Invalid vehicle year"})
        if not self.acknowledgment_consent:
            errors.append(
                {"field": "acknowledgmentConsent", "message": "Acknowledgment consent is required"}
            )
        if not self.credit_check_consent:
            errors.append(
                {"field": "creditCheckConsent", "message": "Credit check consent is required"}
            )

        if errors:
            raise ValidationError(errors=errors)
