"""
bookstore/adapters/api/schemas/transactions.py

Pydantic models for orders ("transactions") and sales statistics.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, StrictInt

from bookstore.core.domain.models import OrderRecord, TransactionStatistics

from .common import APIModel


class OrderItemIn(APIModel):
    book_id: UUID
    quantity: StrictInt = Field(..., gt=0)


class CreateTransactionRequest(APIModel):
    items: List[OrderItemIn] = Field(..., min_length=1)


class TransactionCreated(APIModel):
    transaction_id: str
    total_quantity: int
    total_price: float


class TransactionSummary(APIModel):
    """Row of the transaction list."""

    id: str
    amount: int = Field(..., description="Total quantity of books in the order.")
    price: float = Field(..., description="Order total at current book prices.")
    created_at: datetime

    @classmethod
    def from_record(cls, order: OrderRecord) -> "TransactionSummary":
        return cls(
            id=order.id,
            amount=order.total_quantity,
            price=float(order.total_price),
            created_at=order.created_at,
        )


class TransactionItemRead(APIModel):
    book_id: str
    title: str
    price: float
    quantity: int
    subtotal: float


class TransactionDetail(APIModel):
    id: str
    items: List[TransactionItemRead] = Field(default_factory=list)
    total_price: float
    created_at: datetime

    @classmethod
    def from_record(cls, order: OrderRecord) -> "TransactionDetail":
        return cls(
            id=order.id,
            items=[
                TransactionItemRead(
                    book_id=item.book_id,
                    title=item.title,
                    price=float(item.unit_price),
                    quantity=item.quantity,
                    subtotal=float(item.subtotal),
                )
                for item in order.items
            ],
            total_price=float(order.total_price),
            created_at=order.created_at,
        )


class StatisticsRead(APIModel):
    total_transactions: int
    average_nominal_per_transaction: float
    most_sold_genre: Optional[str] = None
    least_sold_genre: Optional[str] = None

    @classmethod
    def from_domain(cls, stats: TransactionStatistics) -> "StatisticsRead":
        return cls(
            total_transactions=stats.total_transactions,
            average_nominal_per_transaction=float(stats.average_nominal_per_transaction),
            most_sold_genre=stats.most_sold_genre,
            least_sold_genre=stats.least_sold_genre,
        )
