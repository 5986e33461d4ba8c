# tests/helpers.py
from bookstore.adapters.persistence import SqlBookRepository, SqlOrderStore


def stock_of(session_factory, book_id: str) -> int:
    """Reads committed stock through a brand new session."""
    with session_factory() as db:
        return SqlBookRepository(db).get_active(book_id).stock_quantity


def count_orders(session_factory) -> int:
    with session_factory() as db:
        return len(SqlOrderStore(db).load_orders())
