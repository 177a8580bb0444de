from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum


class VehicleKind(str, Enum):
    GAS = "gas"
    ELECTRIC = "electric"


class VehicleStatus(str, Enum):
    AVAILABLE = "available"
    RESERVED = "reserved"
    SOLD = "sold"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class Vehicle:
    """A listing in the dealership inventory.

    Gas and electric listings share one record; fields that only make sense
    for one kind stay ``None`` for the other.
    """

    id: str
    kind: VehicleKind
    title: str
    brand: str
    model: str
    year: int
    price: Decimal
    price_display: str = ""
    status: VehicleStatus = VehicleStatus.AVAILABLE
    views: int = 0
    images: tuple[str, ...] = ()
    created_at: datetime = field(default_factory=utc_now)

    description: str | None = None
    colour: str | None = None
    interior: str | None = None
    wheel: str | None = None
    safety: str | None = None
    trim: str | None = None
    stock_number: str | None = None
    vin: str | None = None
    top_speed: Decimal | None = None
    time_to_60: Decimal | None = None

    # Gas only
    mileage: int | None = None
    engine: Decimal | None = None
    cylinders: int | None = None
    gearbox: str | None = None
    transmission: str | None = None
    body: str | None = None
    drivetrain: str | None = None
    technology: str | None = None

    # Electric only
    subtitle: str | None = None
    range_km: Decimal | None = None
    range_description: str | None = None

    @property
    def is_available(self) -> bool:
        return self.status is VehicleStatus.AVAILABLE


_NUMBER_SHAPE = re.compile(r"^[+-]?[\d.,]+$")


def parse_locale_number(raw: str | int | float | Decimal | None) -> Decimal | None:
    """
    Parse a number typed by staff in either decimal-comma or decimal-point style.

    The last separator in the string is the decimal point unless it is
    repeated, in which case every separator groups thousands:

        "12.345,67"  -> Decimal("12345.67")
        "12,5"       -> Decimal("12.5")
        "1,234,567"  -> Decimal("1234567")
        "45000"      -> Decimal("45000")

    Args:
        raw: Submitted value (already-numeric values pass through)

    Returns:
        Parsed Decimal, or None when the value is blank or not a number
    """
    if raw is None:
        return None
    if isinstance(raw, bool):
        return None
    if isinstance(raw, (int, Decimal)):
        return Decimal(raw)
    if isinstance(raw, float):
        return Decimal(str(raw))

    text = raw.strip().replace(" ", "")
    if not text or not _NUMBER_SHAPE.match(text):
        return None

    separators = [ch for ch in text if ch in ".,"]
    if separators:
        last = separators[-1]
        if separators.count(last) > 1:
            # "1,234,567" or "1.234.567": only thousands groups
            normalized = text.replace(".", "").replace(",", "")
        else:
            integral, _, fraction = text.rpartition(last)
            normalized = integral.replace(".", "").replace(",", "") + "." + fraction
    else:
        normalized = text

    try:
        value = Decimal(normalized)
    except InvalidOperation:
        return None

    if not value.is_finite():
        return None
    return value
