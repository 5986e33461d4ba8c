"""
FastAPI routers, one per resource.
"""
from . import auth, books, genres, health, transactions

__all__ = ["auth", "books", "genres", "health", "transactions"]
