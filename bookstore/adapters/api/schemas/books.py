"""
bookstore/adapters/api/schemas/books.py

Pydantic models for the book endpoints. Prices travel as JSON numbers;
internally they are ``Decimal``.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from bookstore.core.domain.models import Book

from .common import APIModel


class BookCreate(APIModel):
    title: str = Field(..., min_length=1)
    writer: str = Field(..., min_length=1)
    publisher: str = Field(..., min_length=1)
    description: Optional[str] = None
    publication_year: int
    price: Decimal = Field(..., ge=0)
    stock_quantity: int = Field(..., ge=0)
    genre_id: UUID


class BookUpdate(APIModel):
    """
    Partial update payload. Only these fields can change after creation;
    omitted fields are left untouched.
    """

    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    stock_quantity: Optional[int] = Field(default=None, ge=0)

    @field_validator("price", "stock_quantity")
    @classmethod
    def _not_null(cls, value):
        # Runs only for values present in the payload: omitted is fine, null is not.
        if value is None:
            raise ValueError("must not be null")
        return value


class BookRead(APIModel):
    id: str
    title: str
    writer: str
    publisher: str
    description: Optional[str] = None
    publication_year: int
    price: float
    stock_quantity: int
    genre: Optional[str] = Field(default=None, description="Genre name.")

    @classmethod
    def from_domain(cls, book: Book) -> "BookRead":
        return cls(
            id=book.id,
            title=book.title,
            writer=book.writer,
            publisher=book.publisher,
            description=book.description,
            publication_year=book.publication_year,
            price=float(book.price),
            stock_quantity=book.stock_quantity,
            genre=book.genre_name,
        )


class BookCreated(APIModel):
    id: str
    title: str
    created_at: datetime


class BookUpdated(APIModel):
    id: str
    title: str
    updated_at: datetime
