# bookstore/core/ports/order_store.py
from typing import Dict, List, Optional, Protocol, Sequence

from bookstore.core.domain.models import (
    BookSnapshot,
    OrderLine,
    OrderRecord,
    Page,
    PageRequest,
    SortDirection,
)


class IOrderStore(Protocol):
    """
    Storage gateway used by the Order Engine and the Statistics Aggregator.
    """

    def get_active_books(self, book_ids: Sequence[str]) -> Dict[str, BookSnapshot]:
        """
        Batch-read the given books in a single query, skipping soft-deleted rows.

        Returns:
            A mapping of book id to snapshot. Missing or deleted ids are absent.
        """
        ...

    def create_order(self, user_id: str, lines: Sequence[OrderLine]) -> str:
        """
        Atomically create the order, one item per line, and decrement stock.

        Each decrement must be conditional (only applied while enough stock
        remains on a non-deleted book). If any decrement cannot be applied the
        whole transaction is rolled back.

        Returns:
            The id of the new order.

        Raises:
            StockConflictError: a concurrent writer consumed the stock first.
        """
        ...

    def load_orders(self) -> List[OrderRecord]:
        """Every order with its items, their books and genres (deleted or not)."""
        ...

    def list_orders(self, page: PageRequest, direction: SortDirection) -> Page[OrderRecord]:
        """A page of orders sorted by creation time."""
        ...

    def get_order(self, order_id: str) -> Optional[OrderRecord]:
        ...
