from __future__ import annotations

import uuid

from autohaus.domain.financing import (
    Employment,
    FinancingApplication,
    Party,
    Residence,
    VehicleSelection,
)
from autohaus.domain.leads import ContactRequest, ContactType, QuickMessage
from autohaus.entrypoints.http.dtos.financing import (
    EmploymentDTO,
    FinancingApplicationRequestDTO,
    FinancingSubmittedDTO,
    PartyDTO,
    ResidenceDTO,
    VehicleSelectionDTO,
)
from autohaus.entrypoints.http.dtos.leads import ContactRequestDTO, QuickMessageRequestDTO


def _blank_to_none(value: str | None) -> str | None:
    return value or None


class ContactMapper:
    """Maps contact and quick-message payloads to domain leads."""

    @staticmethod
    def to_domain(dto: ContactRequestDTO) -> ContactRequest:
        return ContactRequest(
            first_name=dto.first_name,
            last_name=dto.last_name,
            email=dto.email,
            phone=dto.phone,
            message=dto.message,
            contact_type=ContactType(dto.contact_type),
            data_consent=dto.data_consent,
            accuracy_consent=dto.accuracy_consent,
            preferred_contact=_blank_to_none(dto.preferred_contact),
            vehicle_info=_blank_to_none(dto.vehicle_info),
            preferred_date=_blank_to_none(dto.preferred_date),
            preferred_time=_blank_to_none(dto.preferred_time),
            drivers_license=_blank_to_none(dto.drivers_license),
            test_drive_consent=dto.test_drive_consent,
            communication_consent=dto.communication_consent,
        )

    @staticmethod
    def to_quick_message(dto: QuickMessageRequestDTO) -> QuickMessage:
        return QuickMessage(name=dto.name, email=dto.email, phone=dto.phone, message=dto.message)


class FinancingMapper:
    """Maps the nested financing payload to a FinancingApplication."""

    @staticmethod
    def _residence(dto: ResidenceDTO) -> Residence:
        return Residence(
            address1=dto.address1,
            address2=_blank_to_none(dto.address2),
            city=dto.city,
            state=dto.state,
            zip_code=dto.zip_code,
            years=dto.years,
            months=dto.months,
            residence_type=dto.residence_type,
            rent_mortgage=dto.rent_mortgage,
        )

    @staticmethod
    def _employment(dto: EmploymentDTO) -> Employment:
        return Employment(
            employer_name=dto.employer_name,
            employer_type=dto.employer_type,
            monthly_income=dto.monthly_income,
            occupation=dto.occupation,
            address1=dto.address1,
            address2=_blank_to_none(dto.address2),
            city=dto.city,
            state=dto.state,
            zip_code=dto.zip_code,
            years=dto.years,
            months=dto.months,
            work_phone=_blank_to_none(dto.work_phone),
        )

    @staticmethod
    def _party(dto: PartyDTO) -> Party:
        return Party(
            first_name=dto.first_name,
            middle_initial=_blank_to_none(dto.middle_initial),
            last_name=dto.last_name,
            email=dto.email.lower(),
            mobile_phone=dto.mobile_phone,
            home_phone=_blank_to_none(dto.home_phone),
            ssn=dto.ssn,
            date_of_birth=dto.date_of_birth,
            driver_license_number=dto.driver_license_number,
            driver_license_state=dto.driver_license_state,
            driver_license_exp=dto.driver_license_exp,
            residence=FinancingMapper._residence(dto.residence),
            employment=FinancingMapper._employment(dto.employment),
        )

    @staticmethod
    def _vehicle(dto: VehicleSelectionDTO) -> VehicleSelection:
        return VehicleSelection(
            year=dto.year,
            make=dto.make,
            model=dto.model,
            trim=_blank_to_none(dto.trim),
            vin=dto.vin,
            stock_number=_blank_to_none(dto.stock_number),
            mileage=dto.mileage,
            price=dto.price,
            down_payment=dto.down_payment,
        )

    @staticmethod
    def to_domain(dto: FinancingApplicationRequestDTO) -> FinancingApplication:
        """
        Builds the domain application with a fresh id.

        Format checks already ran on the DTO; cross-field rules (ages, model
        year, consents) are left to the domain.
        """
        return FinancingApplication(
            id=str(uuid.uuid4()),
            applicant=FinancingMapper._party(dto.applicant),
            co_buyer=FinancingMapper._party(dto.co_buyer) if dto.co_buyer else None,
            vehicle=FinancingMapper._vehicle(dto.vehicle),
            acknowledgment_consent=dto.acknowledgment_consent,
            credit_check_consent=dto.credit_check_consent,
            text_message_consent=dto.text_message_consent,
            additional_comments=_blank_to_none(dto.additional_comments),
        )

    @staticmethod
    def to_response(application: FinancingApplication) -> FinancingSubmittedDTO:
        return FinancingSubmittedDTO(
            message=(
                "Your application has been received. "
                f"Reference ID: {application.reference_id}"
            ),
            reference_id=application.reference_id,
        )
