# bookstore/adapters/security.py
"""
Security adapters: the Auth Gateway primitives.

- ``BcryptPasswordHasher`` implements ``IPasswordHasher`` with bcrypt.
- ``JWTTokenService`` implements ``ITokenService`` with signed JWTs
  carrying the user ``id`` and ``email`` claims.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from bookstore.core.domain.exceptions import InvalidTokenError
from bookstore.core.domain.models import AuthenticatedUser, User


class BcryptPasswordHasher:

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False


class JWTTokenService:

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 2880) -> None:
        self.secret = secret
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes

    def issue(self, user: User) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "id": user.id,
            "email": user.email,
            "iat": now,
            "exp": now + timedelta(minutes=self.expires_minutes),
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> AuthenticatedUser:
        try:
            claims = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            raise InvalidTokenError() from e

        user_id, email = claims.get("id"), claims.get("email")
        if not user_id or not email:
            raise InvalidTokenError()
        return AuthenticatedUser(id=str(user_id), email=str(email))
