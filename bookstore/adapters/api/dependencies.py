# bookstore/adapters/api/dependencies.py
from __future__ import annotations

from typing import Iterator, Optional

from fastapi import Depends, HTTPException, Request, Security, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from bookstore.adapters.persistence import db_session
from bookstore.core.domain.exceptions import InvalidTokenError
from bookstore.core.domain.models import AuthenticatedUser
from bookstore.core.use_cases import (
    Authenticate,
    BrowseTransactions,
    ComputeStatistics,
    ManageBooks,
    ManageGenres,
    PlaceOrder,
)
from bookstore.shared.container import Container

# -----------------------------------------------------------------------------
# Container & session
# -----------------------------------------------------------------------------


def get_container(request: Request) -> Container:
    """The container attached by ``create_app``; tests pass their own."""
    return request.app.state.container


def get_session(container: Container = Depends(get_container)) -> Iterator[Session]:
    """One SQLAlchemy session per request, closed when the response is sent."""
    with db_session(container.session_factory()) as session:
        yield session


# -----------------------------------------------------------------------------
# Security: bearer token
# -----------------------------------------------------------------------------
bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    container: Container = Depends(get_container),
) -> AuthenticatedUser:
    """
    Validates ``Authorization: Bearer <token>`` and returns the caller.

    Routers that need authentication attach this at router level.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Missing bearer token")
    try:
        return container.token_service().verify(credentials.credentials)
    except InvalidTokenError as e:
        raise _unauthorized(e.message) from e


# -----------------------------------------------------------------------------
# Use case injection
# -----------------------------------------------------------------------------


def get_place_order(
    container: Container = Depends(get_container),
    session: Session = Depends(get_session),
) -> PlaceOrder:
    return container.place_order(store=container.order_store(session=session))


def get_compute_statistics(
    container: Container = Depends(get_container),
    session: Session = Depends(get_session),
) -> ComputeStatistics:
    return container.compute_statistics(store=container.order_store(session=session))


def get_browse_transactions(
    container: Container = Depends(get_container),
    session: Session = Depends(get_session),
) -> BrowseTransactions:
    return container.browse_transactions(store=container.order_store(session=session))


def get_manage_genres(
    container: Container = Depends(get_container),
    session: Session = Depends(get_session),
) -> ManageGenres:
    return container.manage_genres(genres=container.genre_repository(session=session))


def get_manage_books(
    container: Container = Depends(get_container),
    session: Session = Depends(get_session),
) -> ManageBooks:
    return container.manage_books(
        books=container.book_repository(session=session),
        genres=container.genre_repository(session=session),
    )


def get_authenticate(
    container: Container = Depends(get_container),
    session: Session = Depends(get_session),
) -> Authenticate:
    return container.authenticate(users=container.user_repository(session=session))
