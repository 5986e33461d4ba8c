# bookstore/adapters/__init__.py
"""
Infrastructure adapters: HTTP API (FastAPI), persistence (SQLAlchemy) and
security primitives (bcrypt, JWT). Adapters depend on ``bookstore.core``,
never the other way round.
"""
