# bookstore/core/domain/__init__.py
"""
Domain Entities and Value Objects.

These models represent the language of the bookstore (books, genres,
orders, receipts, statistics) and are devoid of any infrastructure logic.
"""
