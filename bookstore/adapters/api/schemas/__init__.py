"""
Top-level export module for HTTP API schemas.
"""
from . import auth, books, common, genres, transactions

from .common import Envelope, ErrorEnvelope, PageMeta, PaginatedEnvelope

__all__ = [
    "auth", "books", "common", "genres", "transactions",
    "Envelope", "ErrorEnvelope", "PageMeta", "PaginatedEnvelope",
]
