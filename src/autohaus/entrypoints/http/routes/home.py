from fastapi import APIRouter, Depends

from autohaus.entrypoints.http.dependencies import get_home_showcase_use_case
from autohaus.entrypoints.http.dtos.home import BrandCountDTO, HomeShowcaseResponseDTO
from autohaus.entrypoints.http.mappers.catalog_mapper import CatalogMapper
from autohaus.use_cases.get_home_showcase import GetHomeShowcase

router = APIRouter(tags=["Home"])


@router.get(
    "/",
    response_model=HomeShowcaseResponseDTO,
    summary="Landing page data",
    description="""
    Brands with available-vehicle counts across both kinds, the models of
    each brand, and the six newest available vehicles.
    """,
)
def home(
    use_case: GetHomeShowcase = Depends(get_home_showcase_use_case),
) -> HomeShowcaseResponseDTO:
    showcase = use_case.execute()
    return HomeShowcaseResponseDTO(
        brands=[BrandCountDTO(name=b.name, count=b.count) for b in showcase.brands],
        models_by_brand=showcase.models_by_brand,
        latest_vehicles=[CatalogMapper.to_vehicle_response(v) for v in showcase.latest],
    )
