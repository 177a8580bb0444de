"""Catalog filter normalisation.

Query strings arrive untrusted. ``normalize_filters`` turns them into a
typed, immutable ``FilterQuery`` that storage adapters can apply without any
further checks. Values that fail to parse or fall outside their domain are
dropped silently: a bad filter widens the result set instead of failing
the request.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping

from autohaus.domain.facets import body_type_spellings
from autohaus.domain.sorting import SortDirection, SortOrder
from autohaus.domain.vehicle import Vehicle, VehicleKind, VehicleStatus

# Value domains
MAX_PRICE = Decimal("10000000")
PRICE_RANGE_OPEN_MAX = "999999"
MIN_YEAR = 1990
YEAR_HEADROOM = 2
MAX_MILEAGE = 2_000_000
MAX_RANGE_KM = Decimal("1000")

IGNORED_VALUES = frozenset({"", "all"})

SEARCH_FIELDS: tuple[str, ...] = (
    "title",
    "brand",
    "model",
    "description",
    "trim",
    "stock_number",
    "vin",
)

# Attribute filters: vehicle attribute -> accepted parameter names
TEXT_FILTER_PARAMS: dict[str, tuple[str, ...]] = {
    "brand": ("brand", "make"),
    "model": ("model",),
    "body": ("bodyType", "body"),
    "transmission": ("transmission",),
    "colour": ("colour", "color"),
}


@dataclass(frozen=True, slots=True)
class TextMatch:
    """Case-insensitive substring match on a literal term.

    ``alternatives`` are other spellings that match as well (OR).
    """

    term: str
    alternatives: tuple[str, ...] = ()

    @property
    def terms(self) -> tuple[str, ...]:
        return (self.term, *self.alternatives)

    @property
    def pattern(self) -> re.Pattern[str]:
        return re.compile("|".join(re.escape(term) for term in self.terms), re.IGNORECASE)

    def matches(self, value: str | None) -> bool:
        if value is None:
            return False
        return self.pattern.search(value) is not None


@dataclass(frozen=True, slots=True)
class NumericRange:
    """Inclusive numeric bounds; either side may be open."""

    minimum: Decimal | int | None = None
    maximum: Decimal | int | None = None

    @property
    def is_open(self) -> bool:
        return self.minimum is None and self.maximum is None

    def contains(self, value: Decimal | int | None) -> bool:
        if self.is_open:
            return True
        if value is None:
            return False
        if self.minimum is not None and value < self.minimum:
            return False
        if self.maximum is not None and value > self.maximum:
            return False
        return True


@dataclass(frozen=True, slots=True)
class FilterQuery:
    """Validated catalog filters (AND semantics across fields).

    ``kind=None`` spans both kinds; ``statuses=None`` spans every status.
    """

    kind: VehicleKind | None = None
    statuses: frozenset[VehicleStatus] | None = frozenset({VehicleStatus.AVAILABLE})
    brand: TextMatch | None = None
    model: TextMatch | None = None
    body: TextMatch | None = None
    transmission: TextMatch | None = None
    colour: TextMatch | None = None
    price: NumericRange = field(default_factory=NumericRange)
    year: NumericRange = field(default_factory=NumericRange)
    mileage: NumericRange = field(default_factory=NumericRange)
    range_km: NumericRange = field(default_factory=NumericRange)
    search: TextMatch | None = None
    sort_hint: SortOrder | None = None

    def text_filters(self) -> dict[str, TextMatch]:
        """Attribute filters that are set, keyed by vehicle attribute."""
        candidates = {name: getattr(self, name) for name in TEXT_FILTER_PARAMS}
        return {name: match for name, match in candidates.items() if match is not None}

    def numeric_filters(self) -> dict[str, NumericRange]:
        candidates = {
            "price": self.price,
            "year": self.year,
            "mileage": self.mileage,
            "range_km": self.range_km,
        }
        return {name: bounds for name, bounds in candidates.items() if not bounds.is_open}

    def scope_only(self) -> FilterQuery:
        """The same kind and status scope with every other filter removed."""
        return FilterQuery(kind=self.kind, statuses=self.statuses)

    def matches(self, vehicle: Vehicle) -> bool:
        """Reference semantics of the query, used by the in-memory store."""
        if self.kind is not None and vehicle.kind is not self.kind:
            return False
        if self.statuses is not None and vehicle.status not in self.statuses:
            return False
        for name, match in self.text_filters().items():
            if not match.matches(getattr(vehicle, name)):
                return False
        for name, bounds in self.numeric_filters().items():
            if not bounds.contains(getattr(vehicle, name)):
                return False
        if self.search is not None:
            if not any(self.search.matches(getattr(vehicle, name)) for name in SEARCH_FIELDS):
                return False
        return True


# ==============================================================================
# Parsing helpers
# ==============================================================================


def _param(params: Mapping[str, Any], *names: str) -> str | None:
    """First non-ignored value among parameter aliases."""
    for name in names:
        raw = params.get(name)
        if raw is None:
            continue
        value = str(raw).strip()
        if value.lower() in IGNORED_VALUES:
            continue
        return value
    return None


def _to_decimal(raw: str | None) -> Decimal | None:
    if raw is None:
        return None
    try:
        value = Decimal(raw)
    except (InvalidOperation, ValueError):
        return None
    return value if value.is_finite() else None


def _to_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _strip_prefix(raw: str | None, prefix: str) -> str | None:
    if raw is None or not raw.lower().startswith(prefix):
        return None
    return raw[len(prefix):]


def _valid_price(value: Decimal | None) -> Decimal | None:
    if value is None or not (0 < value < MAX_PRICE):
        return None
    return value


def _valid_year(value: int | None, today: date) -> int | None:
    if value is None or not (MIN_YEAR <= value <= today.year + YEAR_HEADROOM):
        return None
    return value


def _valid_mileage(value: int | None) -> int | None:
    if value is None or not (0 <= value < MAX_MILEAGE):
        return None
    return value


# ==============================================================================
# Normaliser
# ==============================================================================


def _price_range(params: Mapping[str, Any]) -> tuple[NumericRange, SortOrder | None]:
    minimum: Decimal | None = None
    maximum: Decimal | None = None

    token = _param(params, "priceRange")
    if token is not None and "-" in token:
        low, _, high = token.partition("-")
        minimum = _valid_price(_to_decimal(low.strip() or None))
        if high.strip() != PRICE_RANGE_OPEN_MAX:
            maximum = _valid_price(_to_decimal(high.strip() or None))

    explicit_min = _valid_price(_to_decimal(_param(params, "minPrice")))
    explicit_max = _valid_price(_to_decimal(_param(params, "maxPrice")))
    if explicit_min is not None:
        minimum = explicit_min
    if explicit_max is not None:
        maximum = explicit_max

    # Legacy "under<N>" token, in thousands
    under = _to_decimal(_strip_prefix(_param(params, "priceBy"), "under"))
    if under is not None:
        ceiling = _valid_price(under * 1000)
        if ceiling is not None:
            return NumericRange(maximum=ceiling), SortOrder("price", SortDirection.DESC)

    return NumericRange(minimum=minimum, maximum=maximum), None


def _year_range(params: Mapping[str, Any], today: date) -> NumericRange:
    exact = _valid_year(_to_int(_strip_prefix(_param(params, "year"), "year")), today)
    if exact is not None:
        return NumericRange(minimum=exact, maximum=exact)

    ceiling = _valid_year(_to_int(_strip_prefix(_param(params, "yearLt"), "year")), today)
    if ceiling is not None:
        return NumericRange(maximum=ceiling)

    return NumericRange(
        minimum=_valid_year(_to_int(_param(params, "minYear")), today),
        maximum=_valid_year(_to_int(_param(params, "maxYear")), today),
    )


def _statuses(
    params: Mapping[str, Any], include_all_statuses: bool
) -> frozenset[VehicleStatus] | None:
    if not include_all_statuses:
        return frozenset({VehicleStatus.AVAILABLE})
    requested = _param(params, "status")
    if requested is None:
        return None
    try:
        return frozenset({VehicleStatus(requested.lower())})
    except ValueError:
        return None


def normalize_filters(
    params: Mapping[str, Any],
    kind: VehicleKind | None,
    *,
    include_all_statuses: bool = False,
    today: date | None = None,
) -> FilterQuery:
    """
    Build a FilterQuery from untrusted query parameters.

    Never raises: every unparsable or out-of-domain value is dropped.

    Args:
        params: Raw query parameters
        kind: Vehicle kind being listed (None for every kind)
        include_all_statuses: Admin listings see every status and may narrow
                              with a ``status`` parameter
        today: Reference date for the year domain (defaults to today)

    Returns:
        FilterQuery ready for a repository
    """
    today = today or date.today()

    text = {
        name: TextMatch(value)
        for name, aliases in TEXT_FILTER_PARAMS.items()
        if (value := _param(params, *aliases)) is not None
    }
    # The body facet offers canonical labels; match every spelling they fold
    if "body" in text:
        body = text["body"].term
        text["body"] = TextMatch(body, alternatives=body_type_spellings(body))

    price, sort_hint = _price_range(params)

    mileage = NumericRange()
    if kind is VehicleKind.GAS:
        mileage = NumericRange(
            minimum=_valid_mileage(_to_int(_param(params, "minMileage"))),
            maximum=_valid_mileage(_to_int(_param(params, "maxMileage"))),
        )

    range_km = NumericRange()
    if kind is VehicleKind.ELECTRIC:
        below = _to_decimal(_param(params, "rangeLt"))
        if below is not None and 0 < below < MAX_RANGE_KM:
            range_km = NumericRange(maximum=below)
            sort_hint = sort_hint or SortOrder("range_km", SortDirection.DESC)

    search_term = _param(params, "search", "q")

    return FilterQuery(
        kind=kind,
        statuses=_statuses(params, include_all_statuses),
        price=price,
        year=_year_range(params, today),
        mileage=mileage,
        range_km=range_km,
        search=TextMatch(search_term) if search_term is not None else None,
        sort_hint=sort_hint,
        **text,
    )
