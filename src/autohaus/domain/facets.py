from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

DEFAULT_PRICE_MIN = Decimal("0")
DEFAULT_PRICE_MAX = Decimal("1000000")
DEFAULT_YEAR_MIN = 1990

# Lower-cased spellings seen in listings -> display label
BODY_TYPE_ALIASES: dict[str, str] = {
    "sedan": "Sedan",
    "saloon": "Sedan",
    "4 door": "Sedan",
    "4door": "Sedan",
    "coupe": "Coupe",
    "coupé": "Coupe",
    "2 door": "Coupe",
    "2door": "Coupe",
    "suv": "SUV",
    "crossover": "SUV",
    "hatch": "Hatchback",
    "hatchback": "Hatchback",
    "wagon": "Wagon",
    "estate": "Wagon",
    "convertible": "Convertible",
    "cabriolet": "Convertible",
    "roadster": "Convertible",
    "truck": "Pickup",
    "pickup": "Pickup",
    "pick-up": "Pickup",
    "van": "Van",
    "minivan": "Van",
}

_SEPARATORS = re.compile(r"[\s_-]+")


def canonical_body_type(raw: str | None) -> str | None:
    """
    Collapse free-text body types into one label per shape.

    "4-Door", "4 door" and "Saloon" all become "Sedan". Unknown values are
    title-cased so the facet still groups case variants together.
    """
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    key = _SEPARATORS.sub(" ", text.lower())
    if key in BODY_TYPE_ALIASES:
        return BODY_TYPE_ALIASES[key]
    compact = key.replace(" ", "")
    if compact in BODY_TYPE_ALIASES:
        return BODY_TYPE_ALIASES[compact]
    return text.title()


def body_type_spellings(term: str) -> tuple[str, ...]:
    """
    Every stored spelling that ``canonical_body_type`` folds into the same
    label as ``term``, other than ``term`` itself.

    Multi-word aliases are returned joined by a space, a hyphen, an
    underscore and nothing, so "4 door" also yields "4-door" and "4door".
    Terms outside the alias table have no other spellings.
    """
    label = canonical_body_type(term)
    spellings: set[str] = set()
    for alias, alias_label in BODY_TYPE_ALIASES.items():
        if alias_label != label:
            continue
        words = _SEPARATORS.split(alias)
        spellings.update(joiner.join(words) for joiner in (" ", "-", "_", ""))
    spellings.discard(term.lower())
    return tuple(sorted(spellings))


def clean_values(values: list[str | None]) -> list[str]:
    """Distinct non-blank values, sorted case-insensitively."""
    distinct = {value.strip() for value in values if value and value.strip()}
    return sorted(distinct, key=lambda item: (item.lower(), item))


@dataclass(frozen=True, slots=True)
class ValueRange:
    min: Decimal | int
    max: Decimal | int


def default_price_range() -> ValueRange:
    return ValueRange(min=DEFAULT_PRICE_MIN, max=DEFAULT_PRICE_MAX)


def default_year_range(today: date | None = None) -> ValueRange:
    today = today or date.today()
    return ValueRange(min=DEFAULT_YEAR_MIN, max=today.year + 1)


@dataclass(frozen=True, slots=True)
class FacetOptions:
    """Options offered by the catalog filter UI for one vehicle kind."""

    brands: list[str] = field(default_factory=list)
    transmissions: list[str] = field(default_factory=list)
    body_types: list[str] = field(default_factory=list)
    colors: list[str] = field(default_factory=list)
    price_range: ValueRange = field(default_factory=default_price_range)
    year_range: ValueRange = field(default_factory=default_year_range)
    models_by_brand: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def empty(cls, today: date | None = None) -> FacetOptions:
        return cls(year_range=default_year_range(today))
