from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from autohaus.domain.vehicle import utc_now


@dataclass(frozen=True, slots=True)
class StaffUser:
    """A back-office account. Only admins may manage inventory and staff."""

    id: str
    name: str
    email: str
    password_hash: str
    is_admin: bool = False
    created_at: datetime = field(default_factory=utc_now)


def normalize_email(email: str) -> str:
    return email.strip().lower()
