# bookstore/core/use_cases/place_order.py
from collections import OrderedDict
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Sequence
from uuid import UUID

import structlog

from bookstore.core.domain.exceptions import (
    BookUnavailableError,
    DomainError,
    InsufficientStockError,
    InvalidOrderError,
    StockConflictError,
)
from bookstore.core.domain.models import BookSnapshot, OrderLine, OrderReceipt
from bookstore.core.ports.order_store import IOrderStore
from bookstore.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class PlaceOrder:
    """
    Use Case: the Order Engine.

    Responsibilities:
    1. Validates the requested lines (non-empty, positive quantities, UUIDs).
    2. Checks every book against a snapshot read (exists, enough stock).
    3. Computes totals with the snapshot prices.
    4. Delegates the atomic create-order / create-items / decrement-stock
       write to the storage gateway, which re-checks stock at commit time.
    """

    def __init__(self, store: IOrderStore):
        self.store = store

    def execute(self, user_id: str, items: Iterable[Any]) -> OrderReceipt:
        """
        Args:
            user_id: Id of the authenticated caller; becomes the order owner.
            items: Sequence of ``OrderLine`` (or objects/dicts exposing
                ``book_id`` and ``quantity``), in request order.

        Returns:
            OrderReceipt with the new order id and its totals.
        """
        with tracer.start_as_current_span("use_case.place_order") as span:
            lines = self._normalize(items)
            span.set_attribute("app.order.lines", len(lines))

            try:
                snapshot = self._check_stock(lines)
            except DomainError as e:
                logger.info("order_rejected", user_id=user_id, reason=e.message)
                raise

            total_quantity = sum(line.quantity for line in lines)
            total_price = sum(
                (snapshot[line.book_id].price * line.quantity for line in lines),
                Decimal("0"),
            )

            try:
                order_id = self.store.create_order(user_id, lines)
            except StockConflictError as e:
                logger.warning("order_conflict", user_id=user_id, book_id=e.book_id)
                raise

            span.set_attribute("app.order.id", order_id)
            logger.info(
                "order_placed",
                order_id=order_id,
                user_id=user_id,
                total_quantity=total_quantity,
                total_price=str(total_price),
            )
            return OrderReceipt(
                order_id=order_id,
                total_quantity=total_quantity,
                total_price=total_price,
            )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _normalize(items: Iterable[Any]) -> List[OrderLine]:
        if items is None:
            raise InvalidOrderError("at least one item is required")

        lines: List[OrderLine] = []
        for raw in items:
            if isinstance(raw, dict):
                book_id, quantity = raw.get("book_id"), raw.get("quantity")
            else:
                book_id, quantity = getattr(raw, "book_id", None), getattr(raw, "quantity", None)

            try:
                book_id = str(UUID(str(book_id)))
            except ValueError:
                raise InvalidOrderError(f"book_id {book_id!r} is not a valid id") from None

            if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
                raise InvalidOrderError(
                    f"quantity for book {book_id} must be a positive integer"
                )
            lines.append(OrderLine(book_id=book_id, quantity=quantity))

        if not lines:
            raise InvalidOrderError("at least one item is required")
        return lines

    def _check_stock(self, lines: Sequence[OrderLine]) -> Dict[str, BookSnapshot]:
        # Several lines may target the same book; stock is checked per book.
        requested: "OrderedDict[str, int]" = OrderedDict()
        for line in lines:
            requested[line.book_id] = requested.get(line.book_id, 0) + line.quantity

        snapshot = self.store.get_active_books(list(requested))

        for line in lines:
            book = snapshot.get(line.book_id)
            if book is None:
                raise BookUnavailableError(line.book_id)
            wanted = requested[line.book_id]
            if wanted > book.stock_quantity:
                raise InsufficientStockError(line.book_id, wanted, book.stock_quantity)
        return snapshot
