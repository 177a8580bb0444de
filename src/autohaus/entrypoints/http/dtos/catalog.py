from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field

from autohaus.entrypoints.http.dtos.base import CamelDTO


class VehicleResponseDTO(CamelDTO):
    """A listing as shown to shoppers and admins. Money and decimals are strings."""

    id: str
    kind: str = Field(examples=["gas"])
    title: str
    brand: str
    model: str
    year: int
    price: str = Field(description="Price as decimal string", examples=["45000.00"])
    price_display: str = Field(examples=["45,000.00"])
    status: str = Field(examples=["available"])
    views: int
    images: list[str]
    created_at: str = Field(description="ISO 8601 timestamp (UTC)")
    description: str | None = None
    colour: str | None = None
    interior: str | None = None
    wheel: str | None = None
    safety: str | None = None
    trim: str | None = None
    stock_number: str | None = None
    vin: str | None = None
    top_speed: str | None = None
    time_to_60: str | None = None
    mileage: int | None = None
    engine: str | None = None
    cylinders: int | None = None
    gearbox: str | None = None
    transmission: str | None = None
    body: str | None = None
    drivetrain: str | None = None
    technology: str | None = None
    subtitle: str | None = None
    range_km: str | None = None
    range_description: str | None = None


class PaginationDTO(CamelDTO):
    current: int = Field(description="Current 1-based page")
    total: int = Field(description="Number of pages (0 when nothing matches)")
    total_count: int = Field(description="Number of matching vehicles")
    has_next: bool
    has_prev: bool
    next: int | None = None
    prev: int | None = None


class PriceRangeDTO(CamelDTO):
    min: str
    max: str


class YearRangeDTO(CamelDTO):
    min: int
    max: int


class FacetsDTO(CamelDTO):
    brands: list[str]
    transmissions: list[str]
    body_types: list[str]
    colors: list[str]
    price_range: PriceRangeDTO
    year_range: YearRangeDTO


class VehicleListResponseDTO(CamelDTO):
    vehicles: list[VehicleResponseDTO]
    pagination: PaginationDTO
    facets: FacetsDTO
    models_by_brand: str = Field(
        description="JSON object mapping each brand to its models, for client-side scripts",
        examples=['{"Ford": ["F-150", "Mustang"]}'],
    )
    current_filters: dict[str, str] = Field(description="Echo of the query parameters")
    result_count: int = Field(description="Same as pagination.totalCount")
    warning: str | None = Field(
        default=None,
        description="Present when filters could not be applied and a default view is shown",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicles": [],
                "pagination": {
                    "current": 3,
                    "total": 3,
                    "totalCount": 30,
                    "hasNext": False,
                    "hasPrev": True,
                    "next": None,
                    "prev": 2,
                },
                "facets": {
                    "brands": ["BMW", "Ford"],
                    "transmissions": ["Automatic"],
                    "bodyTypes": ["Pickup", "SUV"],
                    "colors": ["Black"],
                    "priceRange": {"min": "18000.00", "max": "92000.00"},
                    "yearRange": {"min": 2015, "max": 2024},
                },
                "modelsByBrand": '{"BMW": ["X5"], "Ford": ["F-150"]}',
                "currentFilters": {"page": "3"},
                "resultCount": 30,
            }
        }
    )


class PageMetaDTO(CamelDTO):
    title: str
    description: str
    keywords: str
    canonical: str | None = None


class VehicleDetailResponseDTO(CamelDTO):
    vehicle: VehicleResponseDTO
    related_vehicles: list[VehicleResponseDTO] = Field(description="Up to four suggestions")
    structured_data: dict[str, Any] = Field(description="schema.org Car (JSON-LD)")
    meta: PageMetaDTO
