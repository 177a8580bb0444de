"""Vehicle detail use case (view tracking, related listings, SEO metadata)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any
from uuid import UUID

from autohaus.domain.errors import NotFoundError
from autohaus.domain.vehicle import Vehicle, VehicleKind
from autohaus.ports.vehicle_repository import VehicleRepository

RELATED_PRICE_BAND = Decimal("0.20")
RELATED_LIMIT = 4
META_DESCRIPTION_LENGTH = 160


@dataclass(frozen=True, slots=True)
class PageMeta:
    title: str
    description: str
    keywords: str
    canonical: str | None = None


@dataclass(frozen=True, slots=True)
class GetVehicleDetailRequest:
    vehicle_id: str
    kind: VehicleKind
    canonical_url: str | None = None


@dataclass(frozen=True, slots=True)
class GetVehicleDetailResponse:
    vehicle: Vehicle
    related: list[Vehicle]
    structured_data: dict[str, Any]
    meta: PageMeta


class GetVehicleDetail:
    """
    Use case for a public vehicle page.

    Responsibilities:
    - Treat malformed ids exactly like unknown ids (NotFoundError)
    - Count the view with one atomic store operation
    - Suggest up to four related vehicles of the same kind
    - Build schema.org structured data and page metadata
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        site_name: str = "Autohaus",
        currency: str = "USD",
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            vehicle_repository: Repository for vehicle data access
            site_name: Appended to page titles
            currency: ISO currency code used in structured data offers
        """
        self._repository = vehicle_repository
        self._site_name = site_name
        self._currency = currency

    def execute(self, request: GetVehicleDetailRequest) -> GetVehicleDetailResponse:
        """
        Execute the vehicle detail use case.

        Args:
            request: Vehicle id (as received in the URL) and expected kind

        Returns:
            GetVehicleDetailResponse with the vehicle after its view was counted

        Raises:
            NotFoundError: If the id is malformed, unknown, or of another kind
        """
        try:
            UUID(request.vehicle_id)
        except ValueError:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        vehicle = self._repository.increment_views(request.vehicle_id, kind=request.kind)
        if vehicle is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        related = self._repository.find_related(vehicle, RELATED_PRICE_BAND, RELATED_LIMIT)

        return GetVehicleDetailResponse(
            vehicle=vehicle,
            related=related,
            structured_data=self._structured_data(vehicle),
            meta=self._meta(vehicle, request.canonical_url),
        )

    def _structured_data(self, vehicle: Vehicle) -> dict[str, Any]:
        data: dict[str, Any] = {
            "@context": "https://schema.org/",
            "@type": "Car",
            "name": f"{vehicle.year} {vehicle.brand} {vehicle.model}",
            "brand": {"@type": "Brand", "name": vehicle.brand},
            "model": vehicle.model,
            "vehicleModelDate": str(vehicle.year),
            "offers": {
                "@type": "Offer",
                "price": str(vehicle.price),
                "priceCurrency": self._currency,
                "availability": (
                    "https://schema.org/InStock"
                    if vehicle.is_available
                    else "https://schema.org/OutOfStock"
                ),
            },
            "image": list(vehicle.images),
        }
        if vehicle.mileage is not None:
            data["mileageFromOdometer"] = {
                "@type": "QuantitativeValue",
                "value": vehicle.mileage,
                "unitCode": "SMI",
            }
        if vehicle.colour:
            data["color"] = vehicle.colour
        if vehicle.transmission:
            data["vehicleTransmission"] = vehicle.transmission
        if vehicle.body:
            data["bodyType"] = vehicle.body
        if vehicle.vin:
            data["vehicleIdentificationNumber"] = vehicle.vin
        return data

    def _meta(self, vehicle: Vehicle, canonical_url: str | None) -> PageMeta:
        headline = f"{vehicle.year} {vehicle.brand} {vehicle.model}"
        summary = (vehicle.description or "")[:META_DESCRIPTION_LENGTH]
        description = f"{headline} - {summary}" if summary else headline
        if vehicle.kind is VehicleKind.ELECTRIC:
            category = "electric car, EV"
        else:
            category = "luxury car, premium vehicle"
        return PageMeta(
            title=f"{headline} - {self._site_name}",
            description=description,
            keywords=f"{vehicle.brand}, {vehicle.model}, {vehicle.year}, {category}",
            canonical=canonical_url,
        )
