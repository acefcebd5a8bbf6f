"""Common response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class PaginatedEnvelope(BaseModel):
    """Paginated list wrapper returned by Nautobot collection endpoints.

    Format: ``{"count", "next", "previous", "results"}``. ``results`` is kept
    as plain JSON data; the caller decodes it into its own record type.
    """

    count: int = 0
    next: Any = None
    previous: Any = None
    results: Any = None

    def is_last_page(self) -> bool:
        """A page is the last one unless ``next`` holds a URL string."""
        return not isinstance(self.next, str)


class OptionalFilter(BaseModel):
    """A field/value pair narrowing a collection query.

    Only ``str`` and ``int`` values are sent; other kinds are dropped.
    """

    field: str
    value: Any


class DetailResponse(BaseModel):
    """Error body of the form ``{"detail": "..."}``."""

    detail: str


class Status(BaseModel):
    """Status choice as rendered by the API."""

    value: str | None = None
    label: str | None = None
