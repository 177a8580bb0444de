from __future__ import annotations

import logging
import time
from pathlib import Path

from autohaus.ports.file_storage import FileStorage

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp", ".gif", ".avif"})


class LocalFileStorage(FileStorage):
    """
    Writes uploads to a local directory served as static files.

    Files are named ``<field>-<epoch millis>[-n]<ext>``; the client's file name
    contributes only its extension.
    """

    def __init__(self, directory: str | Path, url_prefix: str = "/images") -> None:
        self._directory = Path(directory)
        self._url_prefix = url_prefix.rstrip("/")

    def save(self, field_name: str, filename: str, content: bytes) -> str:
        extension = Path(filename).suffix.lower()
        if extension not in ALLOWED_EXTENSIONS:
            raise ValueError(f"Unsupported image type: {extension or filename}")

        self._directory.mkdir(parents=True, exist_ok=True)
        stem = f"{field_name}-{int(time.time() * 1000)}"
        target = self._directory / f"{stem}{extension}"
        suffix = 1
        while target.exists():
            target = self._directory / f"{stem}-{suffix}{extension}"
            suffix += 1

        target.write_bytes(content)
        logger.info("Stored upload", extra={"path": str(target), "size": len(content)})
        return f"{self._url_prefix}/{target.name}"
