from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Callable

from autohaus.domain.facets import (
    FacetOptions,
    ValueRange,
    canonical_body_type,
    clean_values,
    default_price_range,
    default_year_range,
)
from autohaus.domain.vehicle import VehicleKind
from autohaus.ports.vehicle_repository import FacetScope, VehicleRepository


class ComputeFacets:
    """
    Builds the filter options offered next to a listing.

    Facets describe all available inventory of one kind, not the current
    result set, so users can always widen a search. The distinct-value and
    min/max queries run concurrently, then one model query per brand.

    Storage failures propagate as StorageError; the listing decides whether
    to degrade.
    """

    def __init__(
        self,
        vehicle_repository: VehicleRepository,
        max_workers: int = 6,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._repository = vehicle_repository
        self._max_workers = max_workers
        self._clock = clock

    def execute(self, kind: VehicleKind) -> FacetOptions:
        """
        Compute facet options for ``kind``.

        Args:
            kind: Vehicle kind being listed

        Returns:
            FacetOptions, with default price/year ranges when inventory is empty

        Raises:
            StorageError: If any facet query fails
        """
        scope = FacetScope(kind=kind)

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            brands_future = pool.submit(self._repository.distinct_values, "brand", scope)
            transmissions_future = pool.submit(
                self._repository.distinct_values, "transmission", scope
            )
            bodies_future = pool.submit(self._repository.distinct_values, "body", scope)
            colours_future = pool.submit(self._repository.distinct_values, "colour", scope)
            bounds_future = pool.submit(self._repository.numeric_bounds, kind)

            brands = clean_values(brands_future.result())
            model_futures = {
                brand: pool.submit(
                    self._repository.distinct_values,
                    "model",
                    FacetScope(kind=kind, brand=brand),
                )
                for brand in brands
            }

            transmissions = clean_values(transmissions_future.result())
            body_types = clean_values(
                [canonical_body_type(value) for value in bodies_future.result()]
            )
            colors = clean_values(colours_future.result())
            bounds = bounds_future.result()
            models_by_brand = {
                brand: clean_values(future.result()) for brand, future in model_futures.items()
            }

        if bounds is None:
            price_range = default_price_range()
            year_range = default_year_range(self._clock())
        else:
            price_range = ValueRange(min=bounds.price_min, max=bounds.price_max)
            year_range = ValueRange(min=bounds.year_min, max=bounds.year_max)

        return FacetOptions(
            brands=brands,
            transmissions=transmissions,
            body_types=body_types,
            colors=colors,
            price_range=price_range,
            year_range=year_range,
            models_by_brand=models_by_brand,
        )
