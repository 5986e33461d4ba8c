# bookstore/adapters/persistence/user_repository.py

from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookstore.core.domain.exceptions import EmailAlreadyRegisteredError
from bookstore.core.domain.models import User, UserCredentials

from . import models


class SqlUserRepository:

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def get_by_email(self, email: str) -> Optional[UserCredentials]:
        stmt = select(models.User).where(models.User.email == email)
        user = self.session.execute(stmt).scalar_one_or_none()
        if user is None:
            return None
        return UserCredentials(
            id=user.id,
            email=user.email,
            username=user.username,
            created_at=user.created_at,
            password_hash=user.password,
        )

    def get_by_id(self, user_id: str) -> Optional[User]:
        user = self.session.get(models.User, user_id)
        return User.model_validate(user) if user is not None else None

    def create(self, *, email: str, password_hash: str, username: Optional[str] = None) -> User:
        user = models.User(email=email, username=username, password=password_hash)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError as e:
            # Lost a race with another registration for the same email
            self.session.rollback()
            raise EmailAlreadyRegisteredError(email) from e
        return User.model_validate(user)
