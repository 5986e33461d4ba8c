# tests/conftest.py
from decimal import Decimal

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from bookstore.adapters.api.main import create_app
from bookstore.adapters.persistence import (
    SqlBookRepository,
    SqlGenreRepository,
    SqlOrderStore,
    SqlUserRepository,
    build_session_factory,
    create_db_engine,
    init_db,
)
from bookstore.adapters.security import BcryptPasswordHasher
from bookstore.core.domain.models import NewBook
from bookstore.shared.container import Container


@pytest.fixture(scope="function")
def engine(tmp_path):
    """A fresh SQLite file database per test (file-backed so threads share it)."""
    engine = create_db_engine(f"sqlite:///{tmp_path / 'test.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture(scope="function")
def session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture(scope="function")
def store(session):
    return SqlOrderStore(session)


@pytest.fixture(scope="function")
def container(engine):
    """
    Sets up the Dependency Injection Container for testing.
    The database engine points at the per-test SQLite file and bcrypt runs
    at its minimum cost.
    """
    container = Container()
    container.db_engine.override(providers.Object(engine))
    container.password_hasher.override(providers.Singleton(BcryptPasswordHasher, rounds=4))

    yield container

    container.reset_override()


@pytest.fixture
def app(container):
    return create_app(container)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def token(client):
    """Registers a user and returns a valid bearer token."""
    client.post(
        "/auth/register",
        json={"email": "clerk@example.com", "password": "s3cret-pass", "username": "clerk"},
    )
    resp = client.post("/auth/login", json={"email": "clerk@example.com", "password": "s3cret-pass"})
    return resp.json()["access_token"]


@pytest.fixture
def auth_client(client, token):
    """TestClient that sends the bearer token on every request."""
    client.headers.update({"Authorization": f"Bearer {token}"})
    return client


@pytest.fixture
def user(session):
    return SqlUserRepository(session).create(
        email="reader@example.com",
        password_hash="not-a-real-hash",
        username="reader",
    )


@pytest.fixture
def make_genre(session):
    """Factory fixture: ``make_genre("Fantasy")`` -> Genre."""
    repo = SqlGenreRepository(session)

    def _make(name: str):
        return repo.create(name)

    return _make


@pytest.fixture
def make_book(session):
    """Factory fixture: ``make_book(genre, "Title", price="10.00", stock=3)`` -> Book."""
    repo = SqlBookRepository(session)

    def _make(genre, title: str, price="10.00", stock: int = 10, **extra):
        fields = dict(
            title=title,
            writer=extra.pop("writer", "Anonymous"),
            publisher=extra.pop("publisher", "Acme Press"),
            description=extra.pop("description", None),
            publication_year=extra.pop("publication_year", 2020),
            price=Decimal(str(price)),
            stock_quantity=stock,
            genre_id=genre.id,
        )
        return repo.create(NewBook(**fields))

    return _make

