# bookstore/core/ports/__init__.py
"""
Core Ports (Interfaces).

This package defines the Protocols that the infrastructure adapters must
implement. These interfaces allow the use cases to talk to storage and to
the security primitives without knowing the implementation details.
"""

from .catalog_repository import IBookRepository, IGenreRepository
from .order_store import IOrderStore
from .security import IPasswordHasher, ITokenService
from .user_repository import IUserRepository

__all__ = [
    "IBookRepository",
    "IGenreRepository",
    "IOrderStore",
    "IPasswordHasher",
    "ITokenService",
    "IUserRepository",
]
