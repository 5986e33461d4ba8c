# bookstore/core/use_cases/browse_transactions.py
from bookstore.core.domain.exceptions import TransactionNotFoundError
from bookstore.core.domain.models import OrderRecord, Page, PageRequest, SortDirection
from bookstore.core.ports.order_store import IOrderStore


class BrowseTransactions:
    """Use Case: read-side views over placed orders (list and detail)."""

    def __init__(self, store: IOrderStore):
        self.store = store

    def list_transactions(
        self,
        page: PageRequest,
        direction: SortDirection = SortDirection.DESC,
    ) -> Page[OrderRecord]:
        return self.store.list_orders(page, direction)

    def get_transaction(self, order_id: str) -> OrderRecord:
        order = self.store.get_order(order_id)
        if order is None:
            raise TransactionNotFoundError(order_id)
        return order
