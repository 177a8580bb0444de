from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select

from autohaus.adapters.sqlalchemy_support import as_utc, storage_session
from autohaus.domain.staff import StaffUser, normalize_email
from autohaus.infra.db.models.staff_user import StaffUserRow
from autohaus.infra.db.session import Database
from autohaus.ports.staff_user_repository import StaffUserRepository


class PostgresStaffUserRepository(StaffUserRepository):
    def __init__(self, database: Database) -> None:
        self._database = database

    def get_by_id(self, user_id: str) -> StaffUser | None:
        try:
            key = UUID(user_id)
        except ValueError:
            return None
        with storage_session(self._database, "get staff user") as session:
            row = session.get(StaffUserRow, key)
            return self._to_domain(row) if row else None

    def get_by_email(self, email: str) -> StaffUser | None:
        statement = select(StaffUserRow).where(StaffUserRow.email == normalize_email(email))
        with storage_session(self._database, "get staff user by email") as session:
            row = session.execute(statement).scalar_one_or_none()
            return self._to_domain(row) if row else None

    def list_all(self) -> list[StaffUser]:
        statement = select(StaffUserRow).order_by(StaffUserRow.created_at.asc(), StaffUserRow.id)
        with storage_session(self._database, "list staff users") as session:
            return [self._to_domain(row) for row in session.execute(statement).scalars().all()]

    def add(self, user: StaffUser) -> StaffUser:
        row = StaffUserRow(
            id=UUID(user.id),
            name=user.name,
            email=normalize_email(user.email),
            password_hash=user.password_hash,
            is_admin=user.is_admin,
            created_at=user.created_at,
        )
        with storage_session(self._database, "add staff user") as session:
            session.add(row)
        return user

    def delete(self, user_id: str) -> bool:
        statement = delete(StaffUserRow).where(StaffUserRow.id == UUID(user_id))
        with storage_session(self._database, "delete staff user") as session:
            return bool(session.execute(statement).rowcount)

    def _to_domain(self, row: StaffUserRow) -> StaffUser:
        return StaffUser(
            id=str(row.id),
            name=row.name,
            email=row.email,
            password_hash=row.password_hash,
            is_admin=row.is_admin,
            created_at=as_utc(row.created_at),
        )
