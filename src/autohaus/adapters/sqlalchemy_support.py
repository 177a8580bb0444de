from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from autohaus.infra.db.session import Database
from autohaus.ports.errors import StorageError


@contextmanager
def storage_session(database: Database, operation: str) -> Iterator[Session]:
    """Open a session and re-raise driver failures as StorageError."""
    try:
        with database.session() as session:
            yield session
    except SQLAlchemyError as exc:
        raise StorageError(f"Storage operation '{operation}' failed") from exc


def as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; everything in the domain is UTC-aware."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
