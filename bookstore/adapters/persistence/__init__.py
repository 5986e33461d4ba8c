# bookstore/adapters/persistence/__init__.py
"""
SQLAlchemy persistence adapter.

Implements the storage ports of ``bookstore.core.ports`` on top of a
relational database:

    from bookstore.adapters.persistence import SqlOrderStore, create_db_engine
"""

from .catalog_repository import SqlBookRepository, SqlGenreRepository
from .models import Base
from .order_store import SqlOrderStore
from .session import build_session_factory, create_db_engine, db_session, init_db
from .user_repository import SqlUserRepository

__all__ = [
    "Base",
    "SqlBookRepository",
    "SqlGenreRepository",
    "SqlOrderStore",
    "SqlUserRepository",
    "build_session_factory",
    "create_db_engine",
    "db_session",
    "init_db",
]
