from fastapi import APIRouter, Depends, Request
from fastapi.responses import RedirectResponse

from autohaus.domain.vehicle import VehicleKind
from autohaus.entrypoints.http.dependencies import (
    get_list_vehicles_use_case,
    get_vehicle_detail_use_case,
)
from autohaus.entrypoints.http.dtos.catalog import (
    VehicleDetailResponseDTO,
    VehicleListResponseDTO,
)
from autohaus.entrypoints.http.error_responses import error_response
from autohaus.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from autohaus.use_cases.get_vehicle_detail import GetVehicleDetail
from autohaus.use_cases.list_vehicles import ListVehicles

router = APIRouter(tags=["Catalog"])

LISTING_DESCRIPTION = """
    Browse available inventory with filters, sorting, pagination and facets.

    ## Filters
    All filters use AND semantics. Invalid or out-of-range values are ignored
    silently; the value `all` (or an empty value) means "no filter".
    - `brand` / `make`, `model`, `bodyType` / `body`, `transmission`,
      `colour` / `color`: case-insensitive substring match
    - `minPrice`, `maxPrice`, `priceRange=<min>-<max>` (`999999` = open end),
      `priceBy=under<N>` (under N thousand, most expensive first)
    - `minYear`, `maxYear`, `year=year<N>` (exact), `yearLt=year<N>`
    - `minMileage`, `maxMileage` (gas only), `rangeLt` (electric only)
    - `search` / `q`: matches title, brand, model, description, trim, stock
      number and VIN

    ## Sorting
    - `sort=price-asc|price-desc|year-asc|year-desc|date-asc|date-desc|`
      `mileage-asc|mileage-desc|range-asc|range-desc|performance-asc|performance-desc`
    - Legacy: `sortBy=latest|highprice|lowprice|highrange|lowrange|highperf|lowperf`
      and `sort=<field>&order=asc|desc` (date, price, year, brand, range, time60)
    - Default: newest first. Ties are always broken by id.

    ## Pagination
    - `page` (1-based), `limit` / `perPage` (default 12, max 50)

    ## Facets
    Options describe all available inventory of the kind, not just the
    current result set.
    """

LISTING_RESPONSES = {
    503: error_response("Catalog unavailable (query and fallback both failed)"),
}

DETAIL_RESPONSES = {
    404: error_response(
        "Unknown or malformed vehicle id",
        example={"detail": "Vehicle with identifier 'abc' not found", "code": "NOT_FOUND"},
    ),
}


@router.get(
    "/gas",
    response_model=VehicleListResponseDTO,
    summary="List gas vehicles",
    description=LISTING_DESCRIPTION,
    responses=LISTING_RESPONSES,
)
def list_gas_vehicles(
    request: Request,
    use_case: ListVehicles = Depends(get_list_vehicles_use_case),
) -> VehicleListResponseDTO:
    # 1. Map to domain request
    domain_request = CatalogMapper.to_list_request(VehicleKind.GAS, request.query_params)

    # 2. Execute use case
    result = use_case.execute(domain_request)

    # 3. Map to response
    return CatalogMapper.to_list_response(result)


@router.get(
    "/electric",
    response_model=VehicleListResponseDTO,
    summary="List electric vehicles",
    description=LISTING_DESCRIPTION,
    responses=LISTING_RESPONSES,
)
def list_electric_vehicles(
    request: Request,
    use_case: ListVehicles = Depends(get_list_vehicles_use_case),
) -> VehicleListResponseDTO:
    # 1. Map to domain request
    domain_request = CatalogMapper.to_list_request(VehicleKind.ELECTRIC, request.query_params)

    # 2. Execute use case
    result = use_case.execute(domain_request)

    # 3. Map to response
    return CatalogMapper.to_list_response(result)


@router.get(
    "/electric/filter",
    summary="Legacy electric filter URL",
    description="Permanent redirect to `/electric`, keeping the query string.",
    response_class=RedirectResponse,
    status_code=301,
)
def legacy_electric_filter(request: Request) -> RedirectResponse:
    target = "/electric"
    if request.url.query:
        target = f"{target}?{request.url.query}"
    return RedirectResponse(target, status_code=301)


@router.get(
    "/gas/details/{vehicle_id}",
    response_model=VehicleDetailResponseDTO,
    summary="Gas vehicle detail",
    description="""
    Full listing with up to four related vehicles, schema.org structured data
    and page metadata. Each call counts one view.

    Unknown ids, malformed ids and ids of electric vehicles all return 404.
    """,
    responses=DETAIL_RESPONSES,
)
def get_gas_vehicle_detail(
    vehicle_id: str,
    request: Request,
    use_case: GetVehicleDetail = Depends(get_vehicle_detail_use_case),
) -> VehicleDetailResponseDTO:
    # 1. Map to domain request
    domain_request = CatalogMapper.to_detail_request(
        vehicle_id, VehicleKind.GAS, str(request.url.replace(query=""))
    )

    # 2. Execute use case
    result = use_case.execute(domain_request)

    # 3. Map to response
    return CatalogMapper.to_detail_response(result)


@router.get(
    "/electric/booknow/{vehicle_id}",
    response_model=VehicleDetailResponseDTO,
    summary="Electric vehicle detail",
    description="""
    Full listing with up to four related vehicles, schema.org structured data
    and page metadata. Each call counts one view.

    Unknown ids, malformed ids and ids of gas vehicles all return 404.
    """,
    responses=DETAIL_RESPONSES,
)
def get_electric_vehicle_detail(
    vehicle_id: str,
    request: Request,
    use_case: GetVehicleDetail = Depends(get_vehicle_detail_use_case),
) -> VehicleDetailResponseDTO:
    # 1. Map to domain request
    domain_request = CatalogMapper.to_detail_request(
        vehicle_id, VehicleKind.ELECTRIC, str(request.url.replace(query=""))
    )

    # 2. Execute use case
    result = use_case.execute(domain_request)

    # 3. Map to response
    return CatalogMapper.to_detail_response(result)


@router.get(
    "/electric/filter/booknow/{vehicle_id}",
    summary="Legacy electric detail URL",
    description="Permanent redirect to `/electric/booknow/{vehicle_id}`.",
    response_class=RedirectResponse,
    status_code=301,
)
def legacy_electric_detail(vehicle_id: str) -> RedirectResponse:
    return RedirectResponse(f"/electric/booknow/{vehicle_id}", status_code=301)
