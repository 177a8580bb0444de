from __future__ import annotations

from abc import ABC, abstractmethod


class FileStorage(ABC):
    """Port for uploaded listing images."""

    @abstractmethod
    def save(self, field_name: str, filename: str, content: bytes) -> str:
        """
        Persist one upload.

        Args:
            field_name: Form field the file came from (used as name prefix)
            filename: Client-supplied name; only its extension is kept
            content: Raw file bytes

        Returns:
            Public path of the stored file (e.g. "/images/images-1700000000000.jpg")
        """
        ...
