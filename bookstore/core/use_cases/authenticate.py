# bookstore/core/use_cases/authenticate.py
from typing import Optional

import structlog

from bookstore.core.domain.exceptions import (
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InvalidInputError,
    UserNotFoundError,
)
from bookstore.core.domain.models import User
from bookstore.core.ports.security import IPasswordHasher, ITokenService
from bookstore.core.ports.user_repository import IUserRepository

logger = structlog.get_logger()

MIN_PASSWORD_LENGTH = 8
# bcrypt only accepts this many bytes of input
MAX_PASSWORD_BYTES = 72


class Authenticate:
    """
    Use Case: registration, login and identity lookup.

    Passwords are only ever handled through the hasher port; the token
    service signs the identity returned by ``login``.
    """

    def __init__(
        self,
        users: IUserRepository,
        hasher: IPasswordHasher,
        tokens: ITokenService,
    ):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens

    def register(self, email: str, password: str, username: Optional[str] = None) -> User:
        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise InvalidInputError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise InvalidInputError(
                f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
            )
        if self.users.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError(email)

        user = self.users.create(
            email=email,
            password_hash=self.hasher.hash(password),
            username=username,
        )
        logger.info("user_registered", user_id=user.id)
        return user

    def login(self, email: str, password: str) -> str:
        """Returns a signed access token."""
        credentials = self.users.get_by_email(email)
        if credentials is None or not self.hasher.verify(password, credentials.password_hash):
            logger.info("login_failed")
            raise InvalidCredentialsError()

        logger.info("login_succeeded", user_id=credentials.id)
        return self.tokens.issue(credentials)

    def me(self, user_id: str) -> User:
        user = self.users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user
