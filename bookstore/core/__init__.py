# bookstore/core/__init__.py
"""
Core of the bookstore service: domain models, ports and use cases.

Nothing in this package imports FastAPI or SQLAlchemy.
"""
