from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from autohaus.domain.facets import clean_values
from autohaus.domain.filters import FilterQuery
from autohaus.domain.sorting import DEFAULT_SORT
from autohaus.domain.vehicle import Vehicle
from autohaus.ports.vehicle_repository import FacetScope, VehicleRepository

LATEST_LIMIT = 6


@dataclass(frozen=True, slots=True)
class BrandCount:
    name: str
    count: int


@dataclass(frozen=True, slots=True)
class HomeShowcase:
    brands: list[BrandCount]
    models_by_brand: dict[str, list[str]]
    latest: list[Vehicle]


class GetHomeShowcase:
    """Landing page data across both vehicle kinds (available inventory only)."""

    def __init__(self, vehicle_repository: VehicleRepository, max_workers: int = 4) -> None:
        self._repository = vehicle_repository
        self._max_workers = max_workers

    def execute(self) -> HomeShowcase:
        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            counts_future = pool.submit(self._repository.brand_counts, None)
            latest_future = pool.submit(
                self._repository.find, FilterQuery(), DEFAULT_SORT, 0, LATEST_LIMIT
            )

            counts = counts_future.result()
            brands = sorted(
                (BrandCount(name=name, count=count) for name, count in counts.items() if name),
                key=lambda brand: brand.name.lower(),
            )
            model_futures = {
                brand.name: pool.submit(
                    self._repository.distinct_values,
                    "model",
                    FacetScope(kind=None, brand=brand.name),
                )
                for brand in brands
            }
            models_by_brand = {
                name: clean_values(future.result()) for name, future in model_futures.items()
            }
            latest = latest_future.result()

        return HomeShowcase(brands=brands, models_by_brand=models_by_brand, latest=latest)
