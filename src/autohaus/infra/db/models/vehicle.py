from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from sqlalchemy import JSON, DateTime, Index, Integer, Numeric, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from autohaus.domain.vehicle import utc_now
from autohaus.infra.db.models.base import Base


class VehicleRow(Base):
    __tablename__ = "vehicles"
    __table_args__ = (
        Index("ix_vehicles_kind_status_created_at", "kind", "status", "created_at"),
        Index("ix_vehicles_kind_brand", "kind", "brand"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    kind: Mapped[str] = mapped_column(String(10), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="available")

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    brand: Mapped[str] = mapped_column(String(50), nullable=False)
    model: Mapped[str] = mapped_column(String(100), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False)
    price_display: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    views: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    colour: Mapped[str | None] = mapped_column(String(50), nullable=True)
    interior: Mapped[str | None] = mapped_column(String(100), nullable=True)
    wheel: Mapped[str | None] = mapped_column(String(100), nullable=True)
    safety: Mapped[str | None] = mapped_column(Text, nullable=True)
    trim: Mapped[str | None] = mapped_column(String(100), nullable=True)
    stock_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    vin: Mapped[str | None] = mapped_column(String(17), nullable=True)
    top_speed: Mapped[Decimal | None] = mapped_column(Numeric(6, 1), nullable=True)
    time_to_60: Mapped[Decimal | None] = mapped_column(Numeric(5, 2), nullable=True)

    # Gas only
    mileage: Mapped[int | None] = mapped_column(Integer, nullable=True)
    engine: Mapped[Decimal | None] = mapped_column(Numeric(4, 1), nullable=True)
    cylinders: Mapped[int | None] = mapped_column(Integer, nullable=True)
    gearbox: Mapped[str | None] = mapped_column(String(50), nullable=True)
    transmission: Mapped[str | None] = mapped_column(String(50), nullable=True)
    body: Mapped[str | None] = mapped_column(String(50), nullable=True)
    drivetrain: Mapped[str | None] = mapped_column(String(50), nullable=True)
    technology: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Electric only
    subtitle: Mapped[str | None] = mapped_column(String(200), nullable=True)
    range_km: Mapped[Decimal | None] = mapped_column(Numeric(7, 1), nullable=True)
    range_description: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
