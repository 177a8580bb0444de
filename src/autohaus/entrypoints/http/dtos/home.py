from autohaus.entrypoints.http.dtos.base import CamelDTO
from autohaus.entrypoints.http.dtos.catalog import VehicleResponseDTO


class BrandCountDTO(CamelDTO):
    name: str
    count: int


class HomeShowcaseResponseDTO(CamelDTO):
    brands: list[BrandCountDTO]
    models_by_brand: dict[str, list[str]]
    latest_vehicles: list[VehicleResponseDTO]
