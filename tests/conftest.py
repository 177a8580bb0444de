"""Shared fixtures: vehicle and financing application factories, deterministic ids."""

from __future__ import annotations

import uuid
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Callable

import pytest

from autohaus.domain.financing import (
    Employment,
    FinancingApplication,
    Party,
    Residence,
    VehicleSelection,
)
from autohaus.domain.vehicle import Vehicle, VehicleKind, VehicleStatus

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def vehicle_id(n: int) -> str:
    return str(uuid.UUID(int=n))


@pytest.fixture()
def make_vehicle() -> Callable[..., Vehicle]:
    """
    Build vehicles with sensible defaults.

    ``n`` drives the id (``00000000-...-<n>``) and makes later vehicles newer.
    """

    def factory(n: int, **overrides: Any) -> Vehicle:
        values: dict[str, Any] = {
            "id": vehicle_id(n),
            "kind": VehicleKind.GAS,
            "title": f"Vehicle {n}",
            "brand": "Ford",
            "model": "F-150",
            "year": 2020,
            "price": Decimal("30000"),
            "status": VehicleStatus.AVAILABLE,
            "created_at": BASE_TIME + timedelta(minutes=n),
        }
        values.update(overrides)
        return Vehicle(**values)

    return factory


@pytest.fixture()
def make_party() -> Callable[..., Party]:
    """Build an adult applicant living and working in Dallas."""

    def factory(**overrides: Any) -> Party:
        values: dict[str, Any] = {
            "first_name": "Ana",
            "last_name": "Silva",
            "email": "ana@example.com",
            "mobile_phone": "(555) 123-4567",
            "ssn": "123-45-6789",
            "date_of_birth": date(1990, 5, 17),
            "driver_license_number": "D1234567",
            "driver_license_state": "TX",
            "driver_license_exp": "08/29",
            "residence": Residence(
                address1="100 Main Street",
                city="Dallas",
                state="TX",
                zip_code="75001",
                years=4,
                months=2,
                residence_type="Rent",
                rent_mortgage=Decimal("1500"),
            ),
            "employment": Employment(
                employer_name="Acme Corp",
                employer_type="Employed",
                monthly_income=Decimal("6500"),
                occupation="Engineer",
                address1="200 Commerce Street",
                city="Dallas",
                state="TX",
                zip_code="75002",
                years=3,
                months=0,
            ),
        }
        values.update(overrides)
        return Party(**values)

    return factory


@pytest.fixture()
def make_application(make_party: Callable[..., Party]) -> Callable[..., FinancingApplication]:
    def factory(**overrides: Any) -> FinancingApplication:
        values: dict[str, Any] = {
            "id": "3f2b8c1e-4a5d-4c3b-9e8f-1a2b3c4d5e6f",
            "applicant": make_party(),
            "vehicle": VehicleSelection(
                year=2022, make="Ford", model="F-150", vin="1FTFW1E50MFA00001", mileage=12000
            ),
            "acknowledgment_consent": True,
            "credit_check_consent": True,
        }
        values.update(overrides)
        return FinancingApplication(**values)

    return factory
