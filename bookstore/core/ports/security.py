# bookstore/core/ports/security.py
from typing import Protocol

from bookstore.core.domain.models import AuthenticatedUser, User


class IPasswordHasher(Protocol):

    def hash(self, password: str) -> str:
        ...

    def verify(self, password: str, hashed: str) -> bool:
        ...


class ITokenService(Protocol):
    """Issues and verifies bearer tokens."""

    def issue(self, user: User) -> str:
        ...

    def verify(self, token: str) -> AuthenticatedUser:
        """
        Raises:
            InvalidTokenError: the token is malformed, tampered or expired.
        """
        ...
