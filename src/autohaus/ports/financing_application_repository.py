from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from autohaus.domain.financing import FinancingApplication


class FinancingApplicationRepository(ABC):
    """Port for submitted financing applications."""

    @abstractmethod
    def add(self, application: FinancingApplication) -> FinancingApplication:
        ...

    @abstractmethod
    def exists_since(self, applicant_email: str, since: datetime) -> bool:
        """Whether ``applicant_email`` submitted an application at or after ``since``."""
        ...
