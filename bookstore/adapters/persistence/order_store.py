# bookstore/adapters/persistence/order_store.py

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import structlog
from sqlalchemy import Select, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from bookstore.core.domain.exceptions import StockConflictError
from bookstore.core.domain.models import (
    BookSnapshot,
    OrderedItem,
    OrderLine,
    OrderRecord,
    Page,
    PageRequest,
    SortDirection,
)

from . import models

logger = structlog.get_logger()


class SqlOrderStore:
    """
    Storage gateway for the Order Engine and the Statistics Aggregator.

    ``create_order`` is the only write path: it runs inside a single
    database transaction and decrements stock with a conditional UPDATE, so
    two orders racing for the same copies can never drive stock negative.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self._session

    def _order_select(self) -> Select[Any]:
        return select(models.Order).options(
            selectinload(models.Order.items)
            .selectinload(models.OrderItem.book)
            .selectinload(models.Book.genre)
        )

    @staticmethod
    def _to_record(order: models.Order) -> OrderRecord:
        items = []
        for item in order.items:
            book = item.book
            genre = book.genre
            items.append(
                OrderedItem(
                    book_id=item.book_id,
                    title=book.title,
                    unit_price=book.price,
                    quantity=item.quantity,
                    genre_id=genre.id if genre is not None else None,
                    genre_name=genre.name if genre is not None else None,
                )
            )
        return OrderRecord(
            id=order.id,
            user_id=order.user_id,
            created_at=order.created_at,
            items=items,
        )

    # ------------------------------------------------------------------
    # Order Engine
    # ------------------------------------------------------------------

    def get_active_books(self, book_ids: Sequence[str]) -> Dict[str, BookSnapshot]:
        ids = list(dict.fromkeys(book_ids))
        if not ids:
            return {}

        # Plain column rows: nothing lands in the identity map, so the
        # snapshot can never be mistaken for the committed state.
        stmt = select(
            models.Book.id,
            models.Book.title,
            models.Book.price,
            models.Book.stock_quantity,
        ).where(
            models.Book.id.in_(ids),
            models.Book.deleted_at.is_(None),
        )
        rows = self.session.execute(stmt).all()
        return {
            row.id: BookSnapshot(
                id=row.id,
                title=row.title,
                price=row.price,
                stock_quantity=row.stock_quantity,
            )
            for row in rows
        }

    def create_order(self, user_id: str, lines: Sequence[OrderLine]) -> str:
        session = self.session
        current_book: Optional[str] = None
        try:
            order = models.Order(user_id=user_id)
            session.add(order)
            session.flush()
            order_id = order.id

            for position, line in enumerate(lines):
                current_book = line.book_id
                session.add(
                    models.OrderItem(
                        order_id=order_id,
                        book_id=line.book_id,
                        quantity=line.quantity,
                        position=position,
                    )
                )

                result = session.execute(
                    update(models.Book)
                    .where(
                        models.Book.id == line.book_id,
                        models.Book.deleted_at.is_(None),
                        models.Book.stock_quantity >= line.quantity,
                    )
                    .values(
                        stock_quantity=models.Book.stock_quantity - line.quantity,
                        updated_at=models.utcnow(),
                    )
                    .execution_options(synchronize_session=False)
                )
                if result.rowcount != 1:
                    raise StockConflictError(line.book_id)

            session.flush()
            session.commit()
        except StockConflictError:
            session.rollback()
            raise
        except IntegrityError as e:
            session.rollback()
            logger.warning("order_integrity_error", book_id=current_book, error=str(e.orig))
            if current_book is None:
                # Failed before any stock was touched (e.g. unknown user)
                raise
            raise StockConflictError(current_book) from e
        except Exception:
            session.rollback()
            raise

        # Stock columns were changed behind the ORM's back.
        session.expire_all()
        return order_id

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    def load_orders(self) -> List[OrderRecord]:
        stmt = self._order_select().order_by(models.Order.created_at.asc())
        orders = self.session.execute(stmt).scalars().all()
        return [self._to_record(o) for o in orders]

    def list_orders(self, page: PageRequest, direction: SortDirection) -> Page[OrderRecord]:
        total = self.session.execute(
            select(func.count()).select_from(models.Order)
        ).scalar_one()

        sort_col = models.Order.created_at
        stmt = (
            self._order_select()
            .order_by(sort_col.asc() if direction == SortDirection.ASC else sort_col.desc())
            .offset(page.offset)
            .limit(page.limit)
        )
        orders = self.session.execute(stmt).scalars().all()
        return Page(items=[self._to_record(o) for o in orders], total=total)

    def get_order(self, order_id: str) -> Optional[OrderRecord]:
        stmt = self._order_select().where(models.Order.id == order_id)
        order = self.session.execute(stmt).scalar_one_or_none()
        if order is None:
            return None
        return self._to_record(order)
