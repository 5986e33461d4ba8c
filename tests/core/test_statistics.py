# tests/core/test_statistics.py
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from bookstore.adapters.persistence import SqlBookRepository, SqlGenreRepository
from bookstore.core.domain.models import OrderedItem, OrderLine, OrderRecord
from bookstore.core.use_cases import ComputeStatistics, PlaceOrder
from bookstore.core.use_cases.compute_statistics import summarize


def _order(order_id, *items):
    return OrderRecord(
        id=order_id,
        user_id="u1",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        items=list(items),
    )


def _item(genre_id, genre_name, price, quantity=1, book_id="b"):
    return OrderedItem(
        book_id=book_id,
        title=f"Title {book_id}",
        unit_price=Decimal(price),
        quantity=quantity,
        genre_id=genre_id,
        genre_name=genre_name,
    )


class TestSummarize:

    def test_no_orders(self):
        stats = summarize([])

        assert stats.total_transactions == 0
        assert stats.average_nominal_per_transaction == Decimal("0")
        assert stats.most_sold_genre is None
        assert stats.least_sold_genre is None

    def test_single_order_of_100(self):
        stats = summarize([_order("o1", _item("g1", "Drama", "25", quantity=4))])

        assert stats.total_transactions == 1
        assert stats.average_nominal_per_transaction == Decimal("100")
        assert stats.most_sold_genre == stats.least_sold_genre == "Drama"

    def test_average_over_several_orders(self):
        orders = [
            _order("o1", _item("g1", "Drama", "10")),
            _order("o2", _item("g1", "Drama", "20")),
            _order("o3", _item("g1", "Drama", "30", quantity=2)),
        ]

        assert summarize(orders).average_nominal_per_transaction == Decimal("30")

    def test_genre_counted_once_per_order(self):
        """
        Scenario: one order holds two Drama books, two other orders hold one Comedy book each.
        Expected: Drama counts 1, Comedy counts 2.
        """
        orders = [
            _order("o1", _item("g1", "Drama", "5", book_id="b1"), _item("g1", "Drama", "5", book_id="b2")),
            _order("o2", _item("g2", "Comedy", "5")),
            _order("o3", _item("g2", "Comedy", "5")),
        ]

        stats = summarize(orders)

        assert stats.most_sold_genre == "Comedy"
        assert stats.least_sold_genre == "Drama"

    def test_ties_break_by_name_then_id(self):
        orders = [
            _order("o1", _item("g-z", "Zen", "1")),
            _order("o2", _item("g-b", "Art", "1")),
            _order("o3", _item("g-a", "Art", "1")),
        ]

        stats = summarize(orders)

        # All three counted once: "Art" wins both rankings, and the two "Art"
        # genres are ordered by id.
        assert stats.most_sold_genre == "Art"
        assert stats.least_sold_genre == "Art"

    def test_tie_is_independent_of_order_sequence(self):
        forward = [
            _order("o1", _item("g1", "Horror", "1")),
            _order("o2", _item("g2", "Fantasy", "1")),
        ]

        assert summarize(forward) == summarize(list(reversed(forward)))
        assert summarize(forward).most_sold_genre == "Fantasy"


class TestComputeStatistics:

    @pytest.fixture
    def catalog(self, make_genre, make_book):
        fantasy = make_genre("Fantasy")
        horror = make_genre("Horror")
        return {
            "fantasy": fantasy,
            "horror": horror,
            "dragon": make_book(fantasy, "Dragon", price="40", stock=10),
            "elves": make_book(fantasy, "Elves", price="10", stock=10),
            "ghost": make_book(horror, "Ghost", price="30", stock=10),
        }

    def test_reads_every_order(self, store, user, catalog):
        place = PlaceOrder(store)
        place.execute(user.id, [OrderLine(book_id=catalog["dragon"].id, quantity=1),
                                OrderLine(book_id=catalog["elves"].id, quantity=2)])
        place.execute(user.id, [OrderLine(book_id=catalog["ghost"].id, quantity=1)])
        place.execute(user.id, [OrderLine(book_id=catalog["dragon"].id, quantity=2)])

        stats = ComputeStatistics(store).execute()

        assert stats.total_transactions == 3
        # (60 + 30 + 80) / 3
        assert stats.average_nominal_per_transaction.quantize(Decimal("0.01")) == Decimal("56.67")
        assert stats.most_sold_genre == "Fantasy"
        assert stats.least_sold_genre == "Horror"

    def test_empty_store(self, store):
        stats = ComputeStatistics(store).execute()

        assert stats.total_transactions == 0
        assert stats.average_nominal_per_transaction == 0

    def test_soft_delete_keeps_history(self, store, session, user, catalog):
        """
        Scenario: an order references a Horror book, then the book and the genre are soft-deleted.
        Expected: the order's items and the statistics are unchanged.
        """
        place = PlaceOrder(store)
        receipt = place.execute(user.id, [OrderLine(book_id=catalog["ghost"].id, quantity=2)])
        place.execute(user.id, [OrderLine(book_id=catalog["dragon"].id, quantity=1)])
        place.execute(user.id, [OrderLine(book_id=catalog["elves"].id, quantity=1)])
        before = ComputeStatistics(store).execute()
        items_before = store.get_order(receipt.order_id).items

        SqlBookRepository(session).soft_delete(catalog["ghost"].id)
        SqlGenreRepository(session).soft_delete(catalog["horror"].id)

        after = ComputeStatistics(store).execute()
        assert after == before
        assert after.least_sold_genre == "Horror"
        assert store.get_order(receipt.order_id).items == items_before
