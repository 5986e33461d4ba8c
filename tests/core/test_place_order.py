# tests/core/test_place_order.py
from decimal import Decimal
from uuid import uuid4

import pytest

from bookstore.adapters.persistence import SqlBookRepository
from bookstore.core.domain.exceptions import (
    BookUnavailableError,
    InsufficientStockError,
    InvalidInputError,
    InvalidOrderError,
)
from bookstore.core.domain.models import OrderLine
from bookstore.core.use_cases import PlaceOrder
from tests.helpers import count_orders, stock_of


@pytest.fixture
def shelf(make_genre, make_book):
    """Book A (stock 5, price 1000) and Book B (stock 2, price 500)."""
    genre = make_genre("Fiction")
    book_a = make_book(genre, "Book A", price="1000", stock=5)
    book_b = make_book(genre, "Book B", price="500", stock=2)
    return book_a, book_b


@pytest.fixture
def place_order(store):
    return PlaceOrder(store)


class TestPlaceOrder:

    def test_scenario_then_insufficient_stock(self, place_order, user, shelf, session_factory):
        """
        Scenario: [A x3, B x2] is ordered, then [B x1].
        Expected: the first order succeeds with totals 5 / 4000 and leaves
        A=2, B=0; the second fails and writes nothing.
        """
        book_a, book_b = shelf

        # Act
        receipt = place_order.execute(
            user.id,
            [OrderLine(book_id=book_a.id, quantity=3), OrderLine(book_id=book_b.id, quantity=2)],
        )

        # Assert
        assert receipt.total_quantity == 5
        assert receipt.total_price == Decimal("4000")
        assert stock_of(session_factory, book_a.id) == 2
        assert stock_of(session_factory, book_b.id) == 0

        with pytest.raises(InsufficientStockError) as excinfo:
            place_order.execute(user.id, [OrderLine(book_id=book_b.id, quantity=1)])

        assert excinfo.value.book_id == book_b.id
        assert excinfo.value.shortfall == 1
        assert count_orders(session_factory) == 1

    def test_items_match_request(self, place_order, store, user, shelf):
        book_a, book_b = shelf

        receipt = place_order.execute(
            user.id,
            [{"book_id": book_b.id, "quantity": 1}, {"book_id": book_a.id, "quantity": 2}],
        )

        order = store.get_order(receipt.order_id)
        assert order.user_id == user.id
        assert [(i.book_id, i.quantity) for i in order.items] == [(book_b.id, 1), (book_a.id, 2)]
        assert order.total_quantity == receipt.total_quantity == 3

    def test_insufficient_stock_leaves_storage_unchanged(self, place_order, user, shelf, session_factory):
        """
        Scenario: the first line fits, the second asks for more than is left.
        Expected: InsufficientStockError naming the second book, no order, no stock change.
        """
        book_a, book_b = shelf

        with pytest.raises(InsufficientStockError) as excinfo:
            place_order.execute(
                user.id,
                [OrderLine(book_id=book_a.id, quantity=1), OrderLine(book_id=book_b.id, quantity=3)],
            )

        assert excinfo.value.book_id == book_b.id
        assert excinfo.value.requested == 3
        assert excinfo.value.available == 2
        assert stock_of(session_factory, book_a.id) == 5
        assert stock_of(session_factory, book_b.id) == 2
        assert count_orders(session_factory) == 0

    def test_duplicate_lines_are_checked_together(self, place_order, user, shelf, session_factory):
        """Two lines of 1 for a book with stock 2 fit; three do not."""
        _, book_b = shelf

        with pytest.raises(InsufficientStockError):
            place_order.execute(user.id, [{"book_id": book_b.id, "quantity": 1}] * 3)
        assert stock_of(session_factory, book_b.id) == 2

        receipt = place_order.execute(user.id, [{"book_id": book_b.id, "quantity": 1}] * 2)
        assert receipt.total_quantity == 2
        assert receipt.total_price == Decimal("1000")
        assert stock_of(session_factory, book_b.id) == 0

    def test_unknown_book(self, place_order, user, shelf, session_factory):
        missing = str(uuid4())

        with pytest.raises(BookUnavailableError) as excinfo:
            place_order.execute(user.id, [{"book_id": missing, "quantity": 1}])

        assert excinfo.value.book_id == missing
        assert count_orders(session_factory) == 0

    def test_soft_deleted_book_cannot_be_ordered(self, place_order, session, user, shelf):
        book_a, _ = shelf
        SqlBookRepository(session).soft_delete(book_a.id)

        with pytest.raises(BookUnavailableError):
            place_order.execute(user.id, [{"book_id": book_a.id, "quantity": 1}])

    @pytest.mark.parametrize(
        "items",
        [
            None,
            [],
            [{"book_id": "not-a-uuid", "quantity": 1}],
            [{"quantity": 1}],
            [{"book_id": str(uuid4()), "quantity": 0}],
            [{"book_id": str(uuid4()), "quantity": -2}],
            [{"book_id": str(uuid4()), "quantity": 1.5}],
            [{"book_id": str(uuid4()), "quantity": True}],
        ],
    )
    def test_invalid_input_is_rejected_before_any_read(self, items, user):
        """Malformed requests fail fast without touching storage."""

        class ExplodingStore:
            def __getattr__(self, name):
                raise AssertionError(f"store.{name} must not be called")

        with pytest.raises(InvalidOrderError) as excinfo:
            PlaceOrder(ExplodingStore()).execute(user.id, items)

        assert isinstance(excinfo.value, InvalidInputError)
        assert excinfo.value.message.startswith("Invalid order:")

    def test_uses_snapshot_prices_for_the_receipt(self, place_order, user, make_genre, make_book):
        genre = make_genre("Poetry")
        book = make_book(genre, "Odes", price="12.50", stock=4)

        receipt = place_order.execute(user.id, [OrderLine(book_id=book.id, quantity=3)])

        assert receipt.total_price == Decimal("37.50")
