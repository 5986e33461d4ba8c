# bookstore/core/domain/models.py
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


# --- Enums ---

class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: Optional[str], default: "SortDirection") -> "SortDirection":
        """Lenient parsing: anything that is not 'asc'/'desc' yields the default."""
        if not raw:
            return default
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return default


# --- Paging ---

class PageRequest(BaseModel):
    """1-based page window requested by a list operation."""
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Page(BaseModel, Generic[T]):
    items: List[T] = Field(default_factory=list)
    total: int = 0


# --- Catalog ---

class Genre(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Book(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    writer: str
    publisher: str
    description: Optional[str] = None
    publication_year: int
    price: Decimal
    stock_quantity: int
    genre_id: str
    genre_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class NewBook(BaseModel):
    title: str
    writer: str
    publisher: str
    description: Optional[str] = None
    publication_year: int
    price: Decimal
    stock_quantity: int
    genre_id: str


class BookChanges(BaseModel):
    """Partial update; only these three fields of a book may change."""
    description: Optional[str] = None
    price: Optional[Decimal] = None
    stock_quantity: Optional[int] = None

    def as_dict(self) -> dict:
        return self.model_dump(exclude_unset=True)


class BookQuery(BaseModel):
    """Filters and allow-listed sort keys for book listings."""
    search: Optional[str] = None
    genre_id: Optional[str] = None
    order_by_title: Optional[SortDirection] = None
    order_by_publication_year: Optional[SortDirection] = None


# --- Orders ---

class OrderLine(BaseModel):
    """One requested (book, quantity) pair."""
    book_id: str
    quantity: int


class BookSnapshot(BaseModel):
    """Stock and price of an active book, read before the order transaction."""
    id: str
    title: str
    price: Decimal
    stock_quantity: int


class OrderReceipt(BaseModel):
    order_id: str
    total_quantity: int
    total_price: Decimal


class OrderedItem(BaseModel):
    """A persisted line item joined with its book (and the book's genre)."""
    book_id: str
    title: str
    unit_price: Decimal
    quantity: int
    genre_id: Optional[str] = None
    genre_name: Optional[str] = None

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


class OrderRecord(BaseModel):
    id: str
    user_id: str
    created_at: datetime
    items: List[OrderedItem] = Field(default_factory=list)

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def total_price(self) -> Decimal:
        return sum((item.subtotal for item in self.items), Decimal("0"))


class TransactionStatistics(BaseModel):
    total_transactions: int
    average_nominal_per_transaction: Decimal
    most_sold_genre: Optional[str] = None
    least_sold_genre: Optional[str] = None


# --- Users ---

class User(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    username: Optional[str] = None
    created_at: Optional[datetime] = None


class UserCredentials(User):
    """User together with the stored password hash; never leaves the core."""
    password_hash: str


class AuthenticatedUser(BaseModel):
    """Identity extracted from a verified bearer token."""
    id: str
    email: str
