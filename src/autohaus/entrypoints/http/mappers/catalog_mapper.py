from __future__ import annotations

import json
from decimal import Decimal
from typing import Mapping

from autohaus.domain.facets import FacetOptions
from autohaus.domain.paging import Pagination
from autohaus.domain.vehicle import Vehicle, VehicleKind
from autohaus.entrypoints.http.dtos.catalog import (
    FacetsDTO,
    PageMetaDTO,
    PaginationDTO,
    PriceRangeDTO,
    VehicleDetailResponseDTO,
    VehicleListResponseDTO,
    VehicleResponseDTO,
    YearRangeDTO,
)
from autohaus.use_cases.get_vehicle_detail import (
    GetVehicleDetailRequest,
    GetVehicleDetailResponse,
)
from autohaus.use_cases.list_vehicles import ListVehiclesRequest, ListVehiclesResponse


def _decimal_str(value: Decimal | None) -> str | None:
    return str(value) if value is not None else None


class CatalogMapper:
    """Maps between REST DTOs and domain models for the catalog."""

    @staticmethod
    def to_list_request(
        kind: VehicleKind,
        query_params: Mapping[str, str],
        include_all_statuses: bool = False,
    ) -> ListVehiclesRequest:
        """
        Builds the listing request from raw query parameters.

        Query values are passed through untouched; the filter normaliser
        decides what is usable and silently drops the rest.

        Args:
            kind: Vehicle kind from the route
            query_params: Request query string (last value wins for repeats)
            include_all_statuses: True for admin listings

        Returns:
            ListVehiclesRequest: Domain request
        """
        return ListVehiclesRequest(
            kind=kind,
            params=dict(query_params),
            include_all_statuses=include_all_statuses,
        )

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        """
        Converts domain Vehicle entity to REST response DTO.

        Handles Decimal → str conversion at the boundary.
        """
        return VehicleResponseDTO(
            id=vehicle.id,
            kind=vehicle.kind.value,
            title=vehicle.title,
            brand=vehicle.brand,
            model=vehicle.model,
            year=vehicle.year,
            price=str(vehicle.price),
            price_display=vehicle.price_display,
            status=vehicle.status.value,
            views=vehicle.views,
            images=list(vehicle.images),
            created_at=vehicle.created_at.isoformat(),
            description=vehicle.description,
            colour=vehicle.colour,
            interior=vehicle.interior,
            wheel=vehicle.wheel,
            safety=vehicle.safety,
            trim=vehicle.trim,
            stock_number=vehicle.stock_number,
            vin=vehicle.vin,
            top_speed=_decimal_str(vehicle.top_speed),
            time_to_60=_decimal_str(vehicle.time_to_60),
            mileage=vehicle.mileage,
            engine=_decimal_str(vehicle.engine),
            cylinders=vehicle.cylinders,
            gearbox=vehicle.gearbox,
            transmission=vehicle.transmission,
            body=vehicle.body,
            drivetrain=vehicle.drivetrain,
            technology=vehicle.technology,
            subtitle=vehicle.subtitle,
            range_km=_decimal_str(vehicle.range_km),
            range_description=vehicle.range_description,
        )

    @staticmethod
    def to_pagination_response(pagination: Pagination) -> PaginationDTO:
        return PaginationDTO(
            current=pagination.current,
            total=pagination.total_pages,
            total_count=pagination.total_count,
            has_next=pagination.has_next,
            has_prev=pagination.has_prev,
            next=pagination.next,
            prev=pagination.prev,
        )

    @staticmethod
    def to_facets_response(facets: FacetOptions) -> FacetsDTO:
        return FacetsDTO(
            brands=facets.brands,
            transmissions=facets.transmissions,
            body_types=facets.body_types,
            colors=facets.colors,
            price_range=PriceRangeDTO(
                min=str(facets.price_range.min),
                max=str(facets.price_range.max),
            ),
            year_range=YearRangeDTO(
                min=int(facets.year_range.min),
                max=int(facets.year_range.max),
            ),
        )

    @staticmethod
    def to_list_response(result: ListVehiclesResponse) -> VehicleListResponseDTO:
        """
        Converts the listing result to the REST response.

        ``modelsByBrand`` is serialised to a JSON string so pages can embed it
        in a script tag unchanged.
        """
        return VehicleListResponseDTO(
            vehicles=[CatalogMapper.to_vehicle_response(v) for v in result.vehicles],
            pagination=CatalogMapper.to_pagination_response(result.pagination),
            facets=CatalogMapper.to_facets_response(result.facets),
            models_by_brand=json.dumps(result.facets.models_by_brand),
            current_filters=result.current_filters,
            result_count=result.pagination.total_count,
            warning=result.warning,
        )

    @staticmethod
    def to_detail_request(
        vehicle_id: str, kind: VehicleKind, canonical_url: str | None = None
    ) -> GetVehicleDetailRequest:
        return GetVehicleDetailRequest(
            vehicle_id=vehicle_id,
            kind=kind,
            canonical_url=canonical_url,
        )

    @staticmethod
    def to_detail_response(result: GetVehicleDetailResponse) -> VehicleDetailResponseDTO:
        return VehicleDetailResponseDTO(
            vehicle=CatalogMapper.to_vehicle_response(result.vehicle),
            related_vehicles=[CatalogMapper.to_vehicle_response(v) for v in result.related],
            structured_data=result.structured_data,
            meta=PageMetaDTO(
                title=result.meta.title,
                description=result.meta.description,
                keywords=result.meta.keywords,
                canonical=result.meta.canonical,
            ),
        )
