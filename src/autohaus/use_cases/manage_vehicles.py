"""Admin inventory use cases: create, edit, delete and load listings."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Mapping, Sequence
from uuid import UUID

from autohaus.domain.errors import NotFoundError, ValidationError
from autohaus.domain.vehicle import (
    Vehicle,
    VehicleKind,
    VehicleStatus,
    parse_locale_number,
    utc_now,
)
from autohaus.ports.file_storage import FileStorage
from autohaus.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)

MAX_IMAGES = 10

REQUIRED_TEXT_FIELDS = ("title", "brand", "model")
COMMON_TEXT_FIELDS = (
    "price_display",
    "description",
    "colour",
    "interior",
    "wheel",
    "safety",
    "trim",
    "stock_number",
    "vin",
)
GAS_TEXT_FIELDS = ("gearbox", "transmission", "body", "drivetrain", "technology")
ELECTRIC_TEXT_FIELDS = ("subtitle", "range_description")

COMMON_DECIMAL_FIELDS = ("top_speed", "time_to_60")
GAS_DECIMAL_FIELDS = ("engine",)
ELECTRIC_DECIMAL_FIELDS = ("range_km",)
GAS_INTEGER_FIELDS = ("mileage", "cylinders")


@dataclass(frozen=True, slots=True)
class ImageUpload:
    filename: str
    content: bytes
    field_name: str = "images"


def _text(fields: Mapping[str, Any], name: str) -> str | None:
    raw = fields.get(name)
    if raw is None:
        return None
    value = str(raw).strip()
    return value or None


def build_vehicle(
    kind: VehicleKind,
    fields: Mapping[str, Any],
    *,
    vehicle_id: str,
    images: tuple[str, ...],
    created_at: datetime | None = None,
    default_status: VehicleStatus = VehicleStatus.AVAILABLE,
) -> Vehicle:
    """
    Build a Vehicle from an admin form, parsing locale-formatted numbers.

    Every field is checked before raising, so the form can show all problems
    at once.

    Raises:
        ValidationError: Listing each missing or unparsable field
    """
    errors: list[dict[str, str]] = []
    values: dict[str, Any] = {}

    for name in REQUIRED_TEXT_FIELDS:
        value = _text(fields, name)
        if value is None:
            errors.append({"field": name, "message": "This field is required"})
        values[name] = value

    text_fields = COMMON_TEXT_FIELDS + (
        GAS_TEXT_FIELDS if kind is VehicleKind.GAS else ELECTRIC_TEXT_FIELDS
    )
    for name in text_fields:
        values[name] = _text(fields, name)

    price = parse_locale_number(_text(fields, "price"))
    if price is None or price <= 0:
        errors.append({"field": "price", "message": "Must be a positive number"})
    values["price"] = price

    year = parse_locale_number(_text(fields, "year"))
    if year is None or year != year.to_integral_value():
        errors.append({"field": "year", "message": "Must be a whole number"})
        values["year"] = None
    else:
        values["year"] = int(year)

    decimal_fields = COMMON_DECIMAL_FIELDS + (
        GAS_DECIMAL_FIELDS if kind is VehicleKind.GAS else ELECTRIC_DECIMAL_FIELDS
    )
    for name in decimal_fields:
        raw = _text(fields, name)
        number = parse_locale_number(raw)
        if raw is not None and number is None:
            errors.append({"field": name, "message": "Must be a number"})
        values[name] = number

    if kind is VehicleKind.GAS:
        for name in GAS_INTEGER_FIELDS:
            raw = _text(fields, name)
            number = parse_locale_number(raw)
            if raw is not None and (number is None or number != number.to_integral_value()):
                errors.append({"field": name, "message": "Must be a whole number"})
                values[name] = None
            else:
                values[name] = int(number) if number is not None else None

    status = default_status
    requested_status = _text(fields, "status")
    if requested_status is not None:
        try:
            status = VehicleStatus(requested_status.lower())
        except ValueError:
            errors.append({"field": "status", "message": "Must be available, reserved or sold"})

    if errors:
        raise ValidationError(errors=errors)

    if values["price_display"] is None:
        values["price_display"] = f"{values['price']:,.2f}"

    return Vehicle(
        id=vehicle_id,
        kind=kind,
        status=status,
        images=images,
        created_at=created_at or utc_now(),
        **values,
    )


def _valid_id(vehicle_id: str) -> bool:
    try:
        UUID(vehicle_id)
    except ValueError:
        return False
    return True


def _store_images(storage: FileStorage, uploads: Sequence[ImageUpload]) -> tuple[str, ...]:
    if len(uploads) > MAX_IMAGES:
        raise ValidationError.for_field("images", f"At most {MAX_IMAGES} images per vehicle")
    return tuple(storage.save(u.field_name, u.filename, u.content) for u in uploads)


@dataclass(frozen=True, slots=True)
class CreateVehicleRequest:
    kind: VehicleKind
    fields: Mapping[str, Any]
    images: Sequence[ImageUpload] = field(default_factory=tuple)


class CreateVehicle:
    def __init__(self, vehicle_repository: VehicleRepository, file_storage: FileStorage) -> None:
        self._repository = vehicle_repository
        self._storage = file_storage

    def execute(self, request: CreateVehicleRequest) -> Vehicle:
        """
        Add a listing.

        The form is validated before any upload is written to storage.

        Raises:
            ValidationError: If the form is incomplete or malformed
        """
        vehicle_id = str(uuid.uuid4())
        # Validate with a placeholder first so bad forms never store files
        build_vehicle(request.kind, request.fields, vehicle_id=vehicle_id, images=())
        images = _store_images(self._storage, request.images)
        vehicle = build_vehicle(request.kind, request.fields, vehicle_id=vehicle_id, images=images)

        created = self._repository.add(vehicle)
        logger.info(
            "Vehicle created",
            extra={"vehicle_id": created.id, "kind": created.kind.value, "images": len(images)},
        )
        return created


@dataclass(frozen=True, slots=True)
class UpdateVehicleRequest:
    vehicle_id: str
    kind: VehicleKind
    fields: Mapping[str, Any]
    images: Sequence[ImageUpload] = field(default_factory=tuple)


class UpdateVehicle:
    """
    Full replacement of a listing's fields.

    Images are replaced only when new files are uploaded; otherwise the
    current gallery is kept. The view counter is never touched.
    """

    def __init__(self, vehicle_repository: VehicleRepository, file_storage: FileStorage) -> None:
        self._repository = vehicle_repository
        self._storage = file_storage

    def execute(self, request: UpdateVehicleRequest) -> Vehicle:
        """
        Raises:
            NotFoundError: If no vehicle of that kind has the id
            ValidationError: If the form is incomplete or malformed
        """
        current = self._load(request.vehicle_id, request.kind)

        candidate = build_vehicle(
            request.kind,
            request.fields,
            vehicle_id=current.id,
            images=current.images,
            created_at=current.created_at,
            default_status=current.status,
        )
        if request.images:
            candidate = replace(candidate, images=_store_images(self._storage, request.images))

        updated = self._repository.update(candidate)
        if updated is None:
            raise NotFoundError(resource="Vehicle", identifier=request.vehicle_id)

        logger.info(
            "Vehicle updated",
            extra={"vehicle_id": updated.id, "images_replaced": bool(request.images)},
        )
        return updated

    def _load(self, vehicle_id: str, kind: VehicleKind) -> Vehicle:
        vehicle = self._repository.get_by_id(vehicle_id) if _valid_id(vehicle_id) else None
        if vehicle is None or vehicle.kind is not kind:
            raise NotFoundError(resource="Vehicle", identifier=vehicle_id)
        return vehicle


class GetVehicleForEdit:
    """Admin lookup: no view counting, any status."""

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, vehicle_id: str, kind: VehicleKind) -> Vehicle:
        vehicle = self._repository.get_by_id(vehicle_id) if _valid_id(vehicle_id) else None
        if vehicle is None or vehicle.kind is not kind:
            raise NotFoundError(resource="Vehicle", identifier=vehicle_id)
        return vehicle


class DeleteVehicle:
    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, vehicle_id: str, kind: VehicleKind) -> None:
        """
        Hard-delete a listing.

        Raises:
            NotFoundError: If no vehicle of that kind has the id
        """
        vehicle = self._repository.get_by_id(vehicle_id) if _valid_id(vehicle_id) else None
        if vehicle is None or vehicle.kind is not kind or not self._repository.delete(vehicle_id):
            raise NotFoundError(resource="Vehicle", identifier=vehicle_id)
        logger.info("Vehicle deleted", extra={"vehicle_id": vehicle_id, "kind": kind.value})
