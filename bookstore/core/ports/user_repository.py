# bookstore/core/ports/user_repository.py
from typing import Optional, Protocol

from bookstore.core.domain.models import User, UserCredentials


class IUserRepository(Protocol):

    def get_by_email(self, email: str) -> Optional[UserCredentials]:
        ...

    def get_by_id(self, user_id: str) -> Optional[User]:
        ...

    def create(self, *, email: str, password_hash: str, username: Optional[str] = None) -> User:
        """
        Persist a new user.

        Raises:
            EmailAlreadyRegisteredError: the email is taken (unique constraint).
        """
        ...
