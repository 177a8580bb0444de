from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from autohaus.domain.vehicle import utc_now
from autohaus.infra.db.models.base import Base


class FinancingApplicationRow(Base):
    """Searchable summary columns plus the full submitted form as JSON."""

    __tablename__ = "financing_applications"
    __table_args__ = (
        Index("ix_financing_applications_email_submitted_at", "applicant_email", "submitted_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    applicant_email: Mapped[str] = mapped_column(String(255), nullable=False)
    applicant_name: Mapped[str] = mapped_column(String(120), nullable=False)
    vehicle_summary: Mapped[str] = mapped_column(String(200), nullable=False)
    payload: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    submitted_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
