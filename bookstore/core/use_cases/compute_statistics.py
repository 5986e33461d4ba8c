# bookstore/core/use_cases/compute_statistics.py
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

import structlog

from bookstore.core.domain.models import OrderRecord, TransactionStatistics
from bookstore.core.ports.order_store import IOrderStore
from bookstore.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class ComputeStatistics:
    """
    Use Case: the Statistics Aggregator.

    A read-only scan over every order. Order values use the books' current
    prices, so the figures move if a price changes after the sale.

    Genre ranking counts the number of distinct orders a genre appears in.
    Ties are resolved by genre name, then genre id, both ascending.
    """

    def __init__(self, store: IOrderStore):
        self.store = store

    def execute(self) -> TransactionStatistics:
        with tracer.start_as_current_span("use_case.compute_statistics") as span:
            orders = self.store.load_orders()
            stats = summarize(orders)

            span.set_attribute("app.stats.total_transactions", stats.total_transactions)
            logger.info(
                "statistics_computed",
                total_transactions=stats.total_transactions,
                most_sold_genre=stats.most_sold_genre,
                least_sold_genre=stats.least_sold_genre,
            )
            return stats


def summarize(orders: Iterable[OrderRecord]) -> TransactionStatistics:
    """Pure aggregation over already-loaded orders."""
    total_transactions = 0
    grand_total = Decimal("0")
    # genre_id -> [name, distinct order count]
    genre_counts: Dict[str, List] = {}

    for order in orders:
        total_transactions += 1
        grand_total += order.total_price

        touched = {item.genre_id: item.genre_name for item in order.items if item.genre_id}
        for genre_id, genre_name in touched.items():
            entry = genre_counts.setdefault(genre_id, [genre_name or "", 0])
            entry[1] += 1

    if total_transactions:
        average = grand_total / total_transactions
    else:
        average = Decimal("0")

    most, least = _rank(genre_counts)
    return TransactionStatistics(
        total_transactions=total_transactions,
        average_nominal_per_transaction=average,
        most_sold_genre=most,
        least_sold_genre=least,
    )


def _rank(genre_counts: Dict[str, List]) -> Tuple[Optional[str], Optional[str]]:
    if not genre_counts:
        return None, None

    # (name, id) ordering makes max/min pick a stable winner among ties
    ordered = sorted(genre_counts.items(), key=lambda kv: (kv[1][0], kv[0]))
    most = max(ordered, key=lambda kv: kv[1][1])
    least = min(ordered, key=lambda kv: kv[1][1])
    return most[1][0], least[1][0]
