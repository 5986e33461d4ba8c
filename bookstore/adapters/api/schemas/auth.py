"""
bookstore/adapters/api/schemas/auth.py

Pydantic models for registration, login and the current-user endpoint.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import APIModel

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterRequest(APIModel):
    username: Optional[str] = Field(default=None, min_length=1)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=8)


class LoginRequest(APIModel):
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1)


class RegisteredUser(APIModel):
    id: str
    email: str
    created_at: datetime


class TokenResponse(APIModel):
    """Returned bare (no envelope) so clients can read ``access_token`` directly."""

    access_token: str


class CurrentUser(APIModel):
    id: str
    username: Optional[str] = None
    email: str
