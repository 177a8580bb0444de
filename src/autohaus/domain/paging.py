from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

DEFAULT_PAGE_SIZE = 12
MAX_PAGE_SIZE = 50
# Keeps OFFSET inside a 64-bit integer on every backend
MAX_PAGE = 10_000


def _parse_int(raw: Any) -> int | None:
    if raw is None:
        return None
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


@dataclass(frozen=True, slots=True)
class PageRequest:
    """A 1-based page window. Always valid once constructed via from_params."""

    page: int = 1
    size: int = DEFAULT_PAGE_SIZE

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.size

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> PageRequest:
        """
        Coerce ``page`` and ``limit``/``perPage`` query parameters.

        - page: missing, non-numeric or < 1 becomes 1; anything above
          MAX_PAGE becomes MAX_PAGE
        - size: missing or non-numeric becomes the default (12); anything
          else is clamped into [1, 50]
        """
        page = _parse_int(params.get("page"))
        if page is None or page < 1:
            page = 1
        page = min(page, MAX_PAGE)

        raw_size = params.get("limit")
        if raw_size is None:
            raw_size = params.get("perPage")
        size = _parse_int(raw_size)
        if size is None:
            size = DEFAULT_PAGE_SIZE
        size = min(MAX_PAGE_SIZE, max(1, size))

        return cls(page=page, size=size)


@dataclass(frozen=True, slots=True)
class Pagination:
    current: int
    total_pages: int
    total_count: int
    has_next: bool
    has_prev: bool
    next: int | None
    prev: int | None

    @classmethod
    def build(cls, request: PageRequest, total_count: int) -> Pagination:
        total_pages = math.ceil(total_count / request.size) if total_count > 0 else 0
        has_next = request.page < total_pages
        has_prev = request.page > 1
        return cls(
            current=request.page,
            total_pages=total_pages,
            total_count=total_count,
            has_next=has_next,
            has_prev=has_prev,
            next=request.page + 1 if has_next else None,
            prev=request.page - 1 if has_prev else None,
        )
