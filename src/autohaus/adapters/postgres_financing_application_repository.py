from __future__ import annotations

import dataclasses
from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from sqlalchemy import exists, select

from autohaus.adapters.sqlalchemy_support import storage_session
from autohaus.domain.financing import FinancingApplication
from autohaus.domain.staff import normalize_email
from autohaus.infra.db.models.financing_application import FinancingApplicationRow
from autohaus.infra.db.session import Database
from autohaus.ports.financing_application_repository import FinancingApplicationRepository


def to_json_payload(value: Any) -> Any:
    """Dataclass tree -> JSON-safe structure (Decimal and dates become strings)."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_json_payload(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [to_json_payload(item) for item in value]
    return value


class PostgresFinancingApplicationRepository(FinancingApplicationRepository):
    def __init__(self, database: Database) -> None:
        self._database = database

    def add(self, application: FinancingApplication) -> FinancingApplication:
        row = FinancingApplicationRow(
            id=UUID(application.id),
            applicant_email=normalize_email(application.applicant.email),
            applicant_name=application.applicant.full_name,
            vehicle_summary=application.vehicle.summary,
            payload=to_json_payload(application),
            submitted_at=application.submitted_at,
        )
        with storage_session(self._database, "add financing application") as session:
            session.add(row)
        return application

    def exists_since(self, applicant_email: str, since: datetime) -> bool:
        statement = select(
            exists().where(
                FinancingApplicationRow.applicant_email == normalize_email(applicant_email),
                FinancingApplicationRow.submitted_at >= since,
            )
        )
        with storage_session(self._database, "recent financing application") as session:
            return bool(session.execute(statement).scalar())
