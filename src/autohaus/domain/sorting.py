"""Sort resolution for catalog listings.

Turns the sort-related query parameters into a single ``SortOrder``. Three
request styles are understood, newest first:

- ``sort=price-asc`` keyword form
- ``sortBy=highprice`` legacy keyword form
- ``sort=price&order=asc`` legacy two-field form (allow-listed fields only)

Anything unrecognised resolves to the default newest-first ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from autohaus.domain.vehicle import VehicleKind


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class SortOrder:
    field: str
    direction: SortDirection

    def keys(self) -> tuple[SortOrder, ...]:
        """
        Full ordering with deterministic tie-breakers appended.

        Listings must page identically for identical requests, so every
        ordering ends in ``created_at desc, id asc``.
        """
        keys = [self]
        if self.field != "created_at":
            keys.append(SortOrder("created_at", SortDirection.DESC))
        keys.append(SortOrder("id", SortDirection.ASC))
        return tuple(keys)


DEFAULT_SORT = SortOrder("created_at", SortDirection.DESC)

_ASC = SortDirection.ASC
_DESC = SortDirection.DESC

SORT_KEYWORDS: dict[str, SortOrder] = {
    "price-asc": SortOrder("price", _ASC),
    "price-desc": SortOrder("price", _DESC),
    "year-asc": SortOrder("year", _ASC),
    "year-desc": SortOrder("year", _DESC),
    "date-asc": SortOrder("created_at", _ASC),
    "date-desc": SortOrder("created_at", _DESC),
    "mileage-asc": SortOrder("mileage", _ASC),
    "mileage-desc": SortOrder("mileage", _DESC),
    "range-asc": SortOrder("range_km", _ASC),
    "range-desc": SortOrder("range_km", _DESC),
    # Acceleration time: ascending is quickest first
    "performance-asc": SortOrder("time_to_60", _ASC),
    "performance-desc": SortOrder("time_to_60", _DESC),
}

LEGACY_SORT_BY: dict[str, SortOrder] = {
    "latest": SortOrder("year", _DESC),
    "highprice": SortOrder("price", _DESC),
    "lowprice": SortOrder("price", _ASC),
    "highrange": SortOrder("range_km", _DESC),
    "lowrange": SortOrder("range_km", _ASC),
    "highperf": SortOrder("time_to_60", _ASC),
    "lowperf": SortOrder("time_to_60", _DESC),
}

# Allow-list for the two-field form: request name -> vehicle attribute
LEGACY_SORT_FIELDS: dict[str, str] = {
    "date": "created_at",
    "price": "price",
    "year": "year",
    "brand": "brand",
    "range": "range_km",
    "time60": "time_to_60",
}

KIND_SPECIFIC_FIELDS: dict[str, VehicleKind] = {
    "mileage": VehicleKind.GAS,
    "range_km": VehicleKind.ELECTRIC,
}


def _supported(order: SortOrder, kind: VehicleKind | None) -> bool:
    required = KIND_SPECIFIC_FIELDS.get(order.field)
    return required is None or kind is None or required is kind


def resolve_sort(
    params: Mapping[str, str],
    kind: VehicleKind | None,
    hint: SortOrder | None = None,
) -> SortOrder:
    """
    Resolve the listing order from query parameters.

    Args:
        params: Raw query parameters
        kind: Vehicle kind being listed; kind-specific fields are ignored
              for the other kind
        hint: Ordering implied by a legacy filter token, used only when the
              request names no explicit ordering

    Returns:
        The primary SortOrder (tie-breakers come from ``SortOrder.keys``)
    """
    sort = (params.get("sort") or "").strip().lower()
    sort_by = (params.get("sortBy") or "").strip().lower()

    if sort in SORT_KEYWORDS and _supported(SORT_KEYWORDS[sort], kind):
        return SORT_KEYWORDS[sort]

    if sort_by in LEGACY_SORT_BY and _supported(LEGACY_SORT_BY[sort_by], kind):
        return LEGACY_SORT_BY[sort_by]

    if sort in LEGACY_SORT_FIELDS:
        order = (params.get("order") or "").strip().lower()
        direction = _ASC if order == "asc" else _DESC
        candidate = SortOrder(LEGACY_SORT_FIELDS[sort], direction)
        if _supported(candidate, kind):
            return candidate

    if hint is not None and not sort and not sort_by:
        return hint

    return DEFAULT_SORT
