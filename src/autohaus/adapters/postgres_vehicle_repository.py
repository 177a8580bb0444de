"""SQLAlchemy implementation of VehicleRepository (PostgreSQL in production)."""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import delete, func, or_, select, update
from sqlalchemy.orm import InstrumentedAttribute

from autohaus.adapters.sqlalchemy_support import as_utc, storage_session
from autohaus.domain.filters import SEARCH_FIELDS, FilterQuery
from autohaus.domain.sorting import SortDirection, SortOrder
from autohaus.domain.vehicle import Vehicle, VehicleKind, VehicleStatus
from autohaus.infra.db.models.vehicle import VehicleRow
from autohaus.infra.db.session import Database
from autohaus.ports.vehicle_repository import (
    FACET_FIELDS,
    FacetScope,
    NumericBounds,
    VehicleRepository,
)

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement

# Columns copied verbatim between Vehicle and VehicleRow. The view counter is
# left out: edits must never overwrite concurrent increments.
_PLAIN_FIELDS = (
    "title",
    "brand",
    "model",
    "year",
    "price",
    "price_display",
    "description",
    "colour",
    "interior",
    "wheel",
    "safety",
    "trim",
    "stock_number",
    "vin",
    "top_speed",
    "time_to_60",
    "mileage",
    "engine",
    "cylinders",
    "gearbox",
    "transmission",
    "body",
    "drivetrain",
    "technology",
    "subtitle",
    "range_km",
    "range_description",
)

_SORTABLE = frozenset({"created_at", "id", "price", "year", "mileage", "range_km", "time_to_60", "brand"})


def _column(name: str) -> InstrumentedAttribute:
    return getattr(VehicleRow, name)


class PostgresVehicleRepository(VehicleRepository):
    """
    SQLAlchemy implementation of VehicleRepository.

    - One short session per call, taken from the shared Database
    - Text filters use ILIKE with wildcard characters escaped
    - View increments are a single UPDATE ... RETURNING statement
    - Driver errors surface as StorageError
    """

    def __init__(self, database: Database) -> None:
        """
        Initialize repository with the process-wide Database.

        Args:
            database: Connected Database providing sessions
        """
        self._database = database

    def find(self, query: FilterQuery, order: SortOrder, skip: int, limit: int) -> list[Vehicle]:
        statement = (
            select(VehicleRow)
            .where(*self._conditions(query))
            .order_by(*self._order_by(order))
            .offset(skip)
            .limit(limit)
        )
        with storage_session(self._database, "find") as session:
            rows = session.execute(statement).scalars().all()
            return [self._to_domain(row) for row in rows]

    def count(self, query: FilterQuery) -> int:
        statement = select(func.count()).select_from(VehicleRow).where(*self._conditions(query))
        with storage_session(self._database, "count") as session:
            return session.execute(statement).scalar() or 0

    def distinct_values(self, field: str, scope: FacetScope) -> list[str | None]:
        if field not in FACET_FIELDS:
            raise ValueError(f"Unsupported facet field: {field}")
        column = _column(field)
        statement = select(column).distinct().where(*self._scope_conditions(scope))
        with storage_session(self._database, f"distinct {field}") as session:
            return list(session.execute(statement).scalars().all())

    def numeric_bounds(self, kind: VehicleKind) -> NumericBounds | None:
        statement = select(
            func.min(VehicleRow.price),
            func.max(VehicleRow.price),
            func.min(VehicleRow.year),
            func.max(VehicleRow.year),
        ).where(*self._scope_conditions(FacetScope(kind=kind)))
        with storage_session(self._database, "numeric bounds") as session:
            price_min, price_max, year_min, year_max = session.execute(statement).one()

        if price_min is None:
            return None
        return NumericBounds(
            price_min=Decimal(price_min),
            price_max=Decimal(price_max),
            year_min=int(year_min),
            year_max=int(year_max),
        )

    def brand_counts(self, kind: VehicleKind | None) -> dict[str, int]:
        statement = (
            select(VehicleRow.brand, func.count())
            .where(*self._scope_conditions(FacetScope(kind=kind)))
            .group_by(VehicleRow.brand)
        )
        with storage_session(self._database, "brand counts") as session:
            return {brand: count for brand, count in session.execute(statement).all()}

    def get_by_id(self, vehicle_id: str) -> Vehicle | None:
        try:
            key = UUID(vehicle_id)
        except ValueError:  # Invalid UUID format
            return None
        with storage_session(self._database, "get by id") as session:
            row = session.get(VehicleRow, key)
            return self._to_domain(row) if row else None

    def increment_views(self, vehicle_id: str, kind: VehicleKind | None = None) -> Vehicle | None:
        try:
            key = UUID(vehicle_id)
        except ValueError:
            return None
        conditions = [VehicleRow.id == key]
        if kind is not None:
            conditions.append(VehicleRow.kind == kind.value)
        statement = (
            update(VehicleRow)
            .where(*conditions)
            .values(views=VehicleRow.views + 1)
            .returning(VehicleRow)
        )
        with storage_session(self._database, "increment views") as session:
            row = session.execute(statement).scalar_one_or_none()
            return self._to_domain(row) if row else None

    def find_related(self, vehicle: Vehicle, price_band: Decimal, limit: int) -> list[Vehicle]:
        low = vehicle.price * (1 - price_band)
        high = vehicle.price * (1 + price_band)
        statement = (
            select(VehicleRow)
            .where(
                VehicleRow.id != UUID(vehicle.id),
                VehicleRow.kind == vehicle.kind.value,
                VehicleRow.status == VehicleStatus.AVAILABLE.value,
                or_(VehicleRow.brand == vehicle.brand, VehicleRow.price.between(low, high)),
            )
            .order_by(VehicleRow.created_at.desc(), VehicleRow.id.asc())
            .limit(limit)
        )
        with storage_session(self._database, "find related") as session:
            rows = session.execute(statement).scalars().all()
            return [self._to_domain(row) for row in rows]

    def add(self, vehicle: Vehicle) -> Vehicle:
        with storage_session(self._database, "add") as session:
            session.add(self._to_row(vehicle))
        return vehicle

    def update(self, vehicle: Vehicle) -> Vehicle | None:
        with storage_session(self._database, "update") as session:
            row = session.get(VehicleRow, UUID(vehicle.id))
            if row is None:
                return None
            self._copy_fields(vehicle, row)
            views = row.views
        return replace(vehicle, views=views)

    def delete(self, vehicle_id: str) -> bool:
        statement = delete(VehicleRow).where(VehicleRow.id == UUID(vehicle_id))
        with storage_session(self._database, "delete") as session:
            result = session.execute(statement)
            return bool(result.rowcount)

    # ------------------------------------------------------------------
    # Query building
    # ------------------------------------------------------------------

    def _conditions(self, query: FilterQuery) -> list[ColumnElement[bool]]:
        """Translate a FilterQuery into WHERE clauses (AND semantics)."""
        conditions: list[ColumnElement[bool]] = []

        if query.kind is not None:
            conditions.append(VehicleRow.kind == query.kind.value)
        if query.statuses is not None:
            conditions.append(VehicleRow.status.in_(sorted(s.value for s in query.statuses)))

        for name, match in query.text_filters().items():
            column = _column(name)
            conditions.append(
                or_(*(column.icontains(term, autoescape=True) for term in match.terms))
            )

        for name, bounds in query.numeric_filters().items():
            column = _column(name)
            if bounds.minimum is not None:
                conditions.append(column >= bounds.minimum)
            if bounds.maximum is not None:
                conditions.append(column <= bounds.maximum)

        if query.search is not None:
            conditions.append(
                or_(
                    *(
                        _column(name).icontains(query.search.term, autoescape=True)
                        for name in SEARCH_FIELDS
                    )
                )
            )

        return conditions

    def _scope_conditions(self, scope: FacetScope) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = [
            VehicleRow.status == VehicleStatus.AVAILABLE.value
        ]
        if scope.kind is not None:
            conditions.append(VehicleRow.kind == scope.kind.value)
        if scope.brand is not None:
            conditions.append(VehicleRow.brand == scope.brand)
        return conditions

    def _order_by(self, order: SortOrder) -> list[ColumnElement]:
        clauses: list[ColumnElement] = []
        for key in order.keys():
            if key.field not in _SORTABLE:
                continue
            column = _column(key.field)
            expression = column.asc() if key.direction is SortDirection.ASC else column.desc()
            clauses.append(expression.nulls_last())
        return clauses

    # ------------------------------------------------------------------
    # Mapping
    # ------------------------------------------------------------------

    def _to_domain(self, row: VehicleRow) -> Vehicle:
        """
        Convert database model (VehicleRow) to domain entity (Vehicle).

        Args:
            row: SQLAlchemy VehicleRow model

        Returns:
            Vehicle domain entity
        """
        return Vehicle(
            id=str(row.id),
            kind=VehicleKind(row.kind),
            status=VehicleStatus(row.status),
            images=tuple(row.images or ()),
            views=row.views,
            created_at=as_utc(row.created_at),
            **{name: getattr(row, name) for name in _PLAIN_FIELDS},
        )

    def _to_row(self, vehicle: Vehicle) -> VehicleRow:
        row = VehicleRow(id=UUID(vehicle.id), created_at=vehicle.created_at, views=vehicle.views)
        self._copy_fields(vehicle, row)
        return row

    def _copy_fields(self, vehicle: Vehicle, row: VehicleRow) -> None:
        row.kind = vehicle.kind.value
        row.status = vehicle.status.value
        row.images = list(vehicle.images)
        for name in _PLAIN_FIELDS:
            setattr(row, name, getattr(vehicle, name))
