# bookstore/adapters/api/schemas/common.py

from __future__ import annotations

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")


# ---------------------------------------------------------------------------
# Base / shared types
# ---------------------------------------------------------------------------


class APIModel(BaseModel):
    """
    Base Pydantic model for all HTTP API schemas.

    Unknown request fields are ignored; responses can be built straight
    from domain objects.
    """

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


# ---------------------------------------------------------------------------
# Response envelope
# ---------------------------------------------------------------------------


class Envelope(APIModel, Generic[DataT]):
    """
    Standard envelope for every JSON response.
    """

    success: bool = Field(True, description="False for every error response.")
    message: str = Field(..., description="Human-readable outcome.")
    data: Optional[DataT] = Field(default=None, description="Payload, if any.")


class PageMeta(APIModel):
    page: int
    limit: int
    prev_page: Optional[int] = None
    next_page: Optional[int] = None
    total: int
    total_pages: int


class PaginatedEnvelope(APIModel, Generic[DataT]):
    """
    Envelope for list endpoints: ``data`` is the current page and ``meta``
    describes the window.
    """

    success: bool = True
    message: str
    data: List[DataT] = Field(default_factory=list)
    meta: PageMeta


class ErrorEnvelope(APIModel):
    success: bool = False
    message: str
    data: Optional[Any] = None


__all__ = [
    "APIModel",
    "Envelope",
    "PageMeta",
    "PaginatedEnvelope",
    "ErrorEnvelope",
]
