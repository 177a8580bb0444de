"""Unit tests for GetVehicleDetail use case."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable
from unittest.mock import Mock

import pytest

from autohaus.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from autohaus.domain.errors import NotFoundError
from autohaus.domain.vehicle import Vehicle, VehicleKind, VehicleStatus
from autohaus.ports.vehicle_repository import VehicleRepository
from autohaus.use_cases.get_vehicle_detail import GetVehicleDetail, GetVehicleDetailRequest

MakeVehicle = Callable[..., Vehicle]


@pytest.fixture()
def inventory(make_vehicle: MakeVehicle) -> list[Vehicle]:
    return [
        make_vehicle(1, brand="Ford", model="F-150", year=2021, price=Decimal("45000"),
                     mileage=20000, colour="Black", transmission="Automatic", body="Pickup",
                     vin="1FTFW1E50MFA00001", images=("/images/f150.jpg",),
                     description="One owner. " + "x" * 200),
        make_vehicle(2, brand="Ford", model="Mustang", price=Decimal("99000")),
        make_vehicle(3, brand="BMW", model="330i", price=Decimal("41000")),
        make_vehicle(4, brand="BMW", model="X5", price=Decimal("62000")),
        make_vehicle(5, brand="Ford", model="Ranger", status=VehicleStatus.SOLD),
        make_vehicle(6, kind=VehicleKind.ELECTRIC, brand="Tesla", model="Model Y",
                     price=Decimal("44000"), description="Long range"),
    ]


@pytest.fixture()
def repository(inventory: list[Vehicle]) -> InMemoryVehicleRepository:
    return InMemoryVehicleRepository(inventory)


def test_detail_counts_the_view(
    repository: InMemoryVehicleRepository, inventory: list[Vehicle]
) -> None:
    use_case = GetVehicleDetail(repository)
    request = GetVehicleDetailRequest(vehicle_id=inventory[0].id, kind=VehicleKind.GAS)

    use_case.execute(request)
    response = use_case.execute(request)

    assert response.vehicle.views == 2
    assert repository.get_by_id(inventory[0].id).views == 2  # type: ignore[union-attr]


def test_related_are_same_brand_or_similar_price(
    repository: InMemoryVehicleRepository, inventory: list[Vehicle]
) -> None:
    response = GetVehicleDetail(repository).execute(
        GetVehicleDetailRequest(vehicle_id=inventory[0].id, kind=VehicleKind.GAS)
    )

    # Newest first; X5 is outside the price band, Ranger is sold, Model Y is electric
    assert [v.model for v in response.related] == ["330i", "Mustang"]


def test_structured_data(repository: InMemoryVehicleRepository, inventory: list[Vehicle]) -> None:
    response = GetVehicleDetail(repository, currency="EUR").execute(
        GetVehicleDetailRequest(vehicle_id=inventory[0].id, kind=VehicleKind.GAS)
    )

    data = response.structured_data
    assert data["@type"] == "Car"
    assert data["name"] == "2021 Ford F-150"
    assert data["brand"] == {"@type": "Brand", "name": "Ford"}
    assert data["offers"]["price"] == "45000"
    assert data["offers"]["priceCurrency"] == "EUR"
    assert data["offers"]["availability"] == "https://schema.org/InStock"
    assert data["mileageFromOdometer"]["value"] == 20000
    assert data["vehicleIdentificationNumber"] == "1FTFW1E50MFA00001"
    assert data["image"] == ["/images/f150.jpg"]


def test_page_meta(repository: InMemoryVehicleRepository, inventory: list[Vehicle]) -> None:
    response = GetVehicleDetail(repository, site_name="Autohaus Dallas").execute(
        GetVehicleDetailRequest(
            vehicle_id=inventory[0].id,
            kind=VehicleKind.GAS,
            canonical_url="https://autohaus.example/gas/details/1",
        )
    )

    meta = response.meta
    assert meta.title == "2021 Ford F-150 - Autohaus Dallas"
    assert meta.description == "2021 Ford F-150 - " + ("One owner. " + "x" * 200)[:160]
    assert meta.keywords == "Ford, F-150, 2021, luxury car, premium vehicle"
    assert meta.canonical == "https://autohaus.example/gas/details/1"


def test_electric_keywords_and_missing_optionals(
    repository: InMemoryVehicleRepository, inventory: list[Vehicle]
) -> None:
    response = GetVehicleDetail(repository).execute(
        GetVehicleDetailRequest(vehicle_id=inventory[5].id, kind=VehicleKind.ELECTRIC)
    )

    assert response.meta.keywords.endswith("electric car, EV")
    assert "mileageFromOdometer" not in response.structured_data
    assert response.related == []


def test_other_kind_is_not_found(
    repository: InMemoryVehicleRepository, inventory: list[Vehicle]
) -> None:
    with pytest.raises(NotFoundError):
        GetVehicleDetail(repository).execute(
            GetVehicleDetailRequest(vehicle_id=inventory[0].id, kind=VehicleKind.ELECTRIC)
        )

    assert repository.get_by_id(inventory[0].id).views == 0  # type: ignore[union-attr]


@pytest.mark.parametrize("vehicle_id", ["not-a-uuid", "12345", ""])
def test_malformed_id_is_not_found_without_touching_storage(vehicle_id: str) -> None:
    repository = Mock(spec=VehicleRepository)

    with pytest.raises(NotFoundError):
        GetVehicleDetail(repository).execute(
            GetVehicleDetailRequest(vehicle_id=vehicle_id, kind=VehicleKind.GAS)
        )

    repository.increment_views.assert_not_called()
