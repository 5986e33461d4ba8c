# bookstore/adapters/api/schemas/genres.py

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .common import APIModel


class GenreWrite(APIModel):
    """Payload for creating or renaming a genre."""

    name: str = Field(..., min_length=1, description="Unique among active genres.")


class GenreRead(APIModel):
    id: str
    name: str


class GenreCreated(GenreRead):
    created_at: datetime


class GenreUpdated(GenreRead):
    updated_at: datetime
