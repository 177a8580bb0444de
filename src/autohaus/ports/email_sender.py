from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EmailMessage:
    to: str
    subject: str
    html: str
    reply_to: str | None = None
    high_priority: bool = False


class EmailSender(ABC):
    """
    Port for outbound e-mail.

    ``send`` reports delivery with a boolean instead of raising, so callers
    decide whether a failed notification should fail the request.
    """

    @abstractmethod
    def send(self, message: EmailMessage) -> bool:
        ...
