from __future__ import annotations

from abc import ABC, abstractmethod

from autohaus.domain.staff import StaffUser


class StaffUserRepository(ABC):
    """Port for back-office accounts. E-mails are stored normalised (lower-case)."""

    @abstractmethod
    def get_by_id(self, user_id: str) -> StaffUser | None:
        ...

    @abstractmethod
    def get_by_email(self, email: str) -> StaffUser | None:
        ...

    @abstractmethod
    def list_all(self) -> list[StaffUser]:
        """Every account, oldest first."""
        ...

    @abstractmethod
    def add(self, user: StaffUser) -> StaffUser:
        ...

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        ...
