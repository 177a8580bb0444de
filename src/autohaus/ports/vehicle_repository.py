from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from autohaus.domain.filters import FilterQuery
from autohaus.domain.sorting import SortOrder
from autohaus.domain.vehicle import Vehicle, VehicleKind

# Vehicle attributes the facet aggregator may ask distinct values for
FACET_FIELDS = ("brand", "model", "transmission", "body", "colour")


@dataclass(frozen=True, slots=True)
class FacetScope:
    """Available inventory of one kind (None = every kind), optionally one exact brand."""

    kind: VehicleKind | None
    brand: str | None = None


@dataclass(frozen=True, slots=True)
class NumericBounds:
    price_min: Decimal
    price_max: Decimal
    year_min: int
    year_max: int


class VehicleRepository(ABC):
    """
    Port for vehicle inventory access.

    Contract (Preconditions):
        - FilterQuery, SortOrder and paging values are already normalised
        - Vehicle ids passed in are well-formed UUID strings
        - Implementations raise StorageError (ports.errors) when the store fails
    """

    @abstractmethod
    def find(self, query: FilterQuery, order: SortOrder, skip: int, limit: int) -> list[Vehicle]:
        """
        Return one page of vehicles matching ``query``.

        Ordering is ``order.keys()``, so the result is total and repeatable.
        """
        ...

    @abstractmethod
    def count(self, query: FilterQuery) -> int:
        """Number of vehicles matching ``query`` before paging."""
        ...

    @abstractmethod
    def distinct_values(self, field: str, scope: FacetScope) -> list[str | None]:
        """Distinct raw values of ``field`` (one of FACET_FIELDS) within ``scope``."""
        ...

    @abstractmethod
    def numeric_bounds(self, kind: VehicleKind) -> NumericBounds | None:
        """Min/max price and year of available inventory, None when there is none."""
        ...

    @abstractmethod
    def brand_counts(self, kind: VehicleKind | None) -> dict[str, int]:
        """Available vehicles per brand."""
        ...

    @abstractmethod
    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        ...

    @abstractmethod
    def increment_views(self, vehicle_id: str, kind: VehicleKind | None = None) -> Vehicle | None:
        """
        Atomically add one to the view counter and return the updated vehicle.

        Returns None, counting nothing, when no vehicle of ``kind`` has that id.

        Concurrent calls must never lose an increment.
        """
        ...

    @abstractmethod
    def find_related(self, vehicle: Vehicle, price_band: Decimal, limit: int) -> list[Vehicle]:
        """
        Available vehicles of the same kind, excluding ``vehicle`` itself, that
        share its brand or cost within ``price * (1 ± price_band)``.
        """
        ...

    @abstractmethod
    def add(self, vehicle: Vehicle) -> Vehicle:
        ...

    @abstractmethod
    def update(self, vehicle: Vehicle) -> Vehicle | None:
        """Replace every stored field of ``vehicle``; None when it does not exist."""
        ...

    @abstractmethod
    def delete(self, vehicle_id: str) -> bool:
        """Hard delete; False when nothing was deleted."""
        ...
