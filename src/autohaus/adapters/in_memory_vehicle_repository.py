from __future__ import annotations

import threading
from dataclasses import replace
from decimal import Decimal
from typing import Iterable

from autohaus.domain.filters import FilterQuery
from autohaus.domain.sorting import SortDirection, SortOrder
from autohaus.domain.vehicle import Vehicle, VehicleKind, VehicleStatus
from autohaus.ports.vehicle_repository import (
    FACET_FIELDS,
    FacetScope,
    NumericBounds,
    VehicleRepository,
)


def order_vehicles(vehicles: Iterable[Vehicle], order: SortOrder) -> list[Vehicle]:
    """Apply ``order.keys()`` with missing values last for every key."""
    result = list(vehicles)
    # Stable sorts applied from the least significant key up
    for key in reversed(order.keys()):
        present = [v for v in result if getattr(v, key.field) is not None]
        missing = [v for v in result if getattr(v, key.field) is None]
        present.sort(
            key=lambda v: getattr(v, key.field),
            reverse=key.direction is SortDirection.DESC,
        )
        result = present + missing
    return result


class InMemoryVehicleRepository(VehicleRepository):
    """
    Canonical contract implementation for tests and local development.

    - Text filters use the escaped patterns from FilterQuery
    - Ordering and paging follow the same rules as the SQL adapter
    - A lock makes every operation, including view increments, atomic
    """

    def __init__(self, vehicles: Iterable[Vehicle] = ()) -> None:
        self._vehicles: dict[str, Vehicle] = {vehicle.id: vehicle for vehicle in vehicles}
        self._lock = threading.Lock()

    def find(self, query: FilterQuery, order: SortOrder, skip: int, limit: int) -> list[Vehicle]:
        with self._lock:
            matches = [v for v in self._vehicles.values() if query.matches(v)]
        return order_vehicles(matches, order)[skip : skip + limit]

    def count(self, query: FilterQuery) -> int:
        with self._lock:
            return sum(1 for v in self._vehicles.values() if query.matches(v))

    def distinct_values(self, field: str, scope: FacetScope) -> list[str | None]:
        if field not in FACET_FIELDS:
            raise ValueError(f"Unsupported facet field: {field}")
        with self._lock:
            scoped = self._in_scope(scope)
        return list(dict.fromkeys(getattr(v, field) for v in scoped))

    def numeric_bounds(self, kind: VehicleKind) -> NumericBounds | None:
        with self._lock:
            scoped = self._in_scope(FacetScope(kind=kind))
        if not scoped:
            return None
        prices = [v.price for v in scoped]
        years = [v.year for v in scoped]
        return NumericBounds(
            price_min=min(prices),
            price_max=max(prices),
            year_min=min(years),
            year_max=max(years),
        )

    def brand_counts(self, kind: VehicleKind | None) -> dict[str, int]:
        counts: dict[str, int] = {}
        with self._lock:
            scoped = self._in_scope(FacetScope(kind=kind))
        for vehicle in scoped:
            counts[vehicle.brand] = counts.get(vehicle.brand, 0) + 1
        return counts

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        with self._lock:
            return self._vehicles.get(vehicle_id)

    def increment_views(self, vehicle_id: str, kind: VehicleKind | None = None) -> Vehicle | None:
        with self._lock:
            vehicle = self._vehicles.get(vehicle_id)
            if vehicle is None or (kind is not None and vehicle.kind is not kind):
                return None
            updated = replace(vehicle, views=vehicle.views + 1)
            self._vehicles[vehicle_id] = updated
            return updated

    def find_related(self, vehicle: Vehicle, price_band: Decimal, limit: int) -> list[Vehicle]:
        low = vehicle.price * (1 - price_band)
        high = vehicle.price * (1 + price_band)
        with self._lock:
            candidates = [
                other
                for other in self._vehicles.values()
                if other.id != vehicle.id
                and other.kind is vehicle.kind
                and other.status is VehicleStatus.AVAILABLE
                and (other.brand == vehicle.brand or low <= other.price <= high)
            ]
        newest_first = SortOrder("created_at", SortDirection.DESC)
        return order_vehicles(candidates, newest_first)[:limit]

    def add(self, vehicle: Vehicle) -> Vehicle:
        with self._lock:
            self._vehicles[vehicle.id] = vehicle
        return vehicle

    def update(self, vehicle: Vehicle) -> Vehicle | None:
        with self._lock:
            current = self._vehicles.get(vehicle.id)
            if current is None:
                return None
            # Edits never touch the view counter
            updated = replace(vehicle, views=current.views)
            self._vehicles[vehicle.id] = updated
        return updated

    def delete(self, vehicle_id: str) -> bool:
        with self._lock:
            return self._vehicles.pop(vehicle_id, None) is not None

    def _in_scope(self, scope: FacetScope) -> list[Vehicle]:
        return [
            v
            for v in self._vehicles.values()
            if v.status is VehicleStatus.AVAILABLE
            and (scope.kind is None or v.kind is scope.kind)
            and (scope.brand is None or v.brand == scope.brand)
        ]
