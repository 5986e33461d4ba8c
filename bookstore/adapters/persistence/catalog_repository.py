# bookstore/adapters/persistence/catalog_repository.py

from __future__ import annotations

from typing import Any, List, Optional

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import Session, selectinload

from bookstore.core.domain.models import (
    Book,
    BookQuery,
    Genre,
    NewBook,
    Page,
    PageRequest,
    SortDirection,
)

from . import models


def _contains(column, text: str):
    """Case-insensitive substring match; ``%`` and ``_`` in ``text`` match literally."""
    term = text.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return func.lower(column).like(f"%{term}%", escape="\\")


class SqlGenreRepository:
    """
    Thin data-access layer around the Genre model.

    Every lookup except the raw ones ignores soft-deleted rows.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def _active(self) -> Select[Any]:
        return select(models.Genre).where(models.Genre.deleted_at.is_(None))

    def _load_active(self, genre_id: str) -> Optional[models.Genre]:
        stmt = self._active().where(models.Genre.id == genre_id)
        return self.session.execute(stmt).scalar_one_or_none()

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get_active(self, genre_id: str) -> Optional[Genre]:
        genre = self._load_active(genre_id)
        return Genre.model_validate(genre) if genre is not None else None

    def find_active_by_name(self, name: str, *, exclude_id: Optional[str] = None) -> Optional[Genre]:
        stmt = self._active().where(models.Genre.name == name)
        if exclude_id is not None:
            stmt = stmt.where(models.Genre.id != exclude_id)
        genre = self.session.execute(stmt.limit(1)).scalar_one_or_none()
        return Genre.model_validate(genre) if genre is not None else None

    def list_active(
        self,
        page: PageRequest,
        *,
        search: Optional[str] = None,
        direction: SortDirection = SortDirection.ASC,
    ) -> Page[Genre]:
        stmt = self._active()
        if search:
            stmt = stmt.where(_contains(models.Genre.name, search))

        total = self.session.execute(
            select(func.count()).select_from(stmt.subquery())
        ).scalar_one()

        name_col = models.Genre.name
        stmt = (
            stmt.order_by(name_col.desc() if direction == SortDirection.DESC else name_col.asc())
            .offset(page.offset)
            .limit(page.limit)
        )
        genres = self.session.execute(stmt).scalars().all()
        return Page(items=[Genre.model_validate(g) for g in genres], total=total)

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create(self, name: str) -> Genre:
        genre = models.Genre(name=name)
        self.session.add(genre)
        self.session.commit()
        return Genre.model_validate(genre)

    def rename(self, genre_id: str, name: str) -> Genre:
        genre = self._load_active(genre_id)
        genre.name = name
        self.session.commit()
        return Genre.model_validate(genre)

    def soft_delete(self, genre_id: str) -> None:
        genre = self._load_active(genre_id)
        if genre is None:
            return
        genre.deleted_at = models.utcnow()
        self.session.commit()


class SqlBookRepository:
    """
    Thin data-access layer around the Book model.
    """

    # Allow-listed sort keys: query field -> column
    SORT_COLUMNS = {
        "order_by_title": models.Book.title,
        "order_by_publication_year": models.Book.publication_year,
    }

    SEARCH_COLUMNS = (
        models.Book.title,
        models.Book.writer,
        models.Book.publisher,
    )

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        return self._session

    def _active(self) -> Select[Any]:
        return (
            select(models.Book)
            .options(selectinload(models.Book.genre))
            .where(models.Book.deleted_at.is_(None))
        )

    def _load_active(self, book_id: str) -> Optional[models.Book]:
        stmt = self._active().where(models.Book.id == book_id)
        return self.session.execute(stmt).scalar_one_or_none()

    @staticmethod
    def _to_domain(book: models.Book) -> Book:
        return Book(
            id=book.id,
            title=book.title,
            writer=book.writer,
            publisher=book.publisher,
            description=book.description,
            publication_year=book.publication_year,
            price=book.price,
            stock_quantity=book.stock_quantity,
            genre_id=book.genre_id,
            genre_name=book.genre.name if book.genre is not None else None,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get_active(self, book_id: str) -> Optional[Book]:
        book = self._load_active(book_id)
        return self._to_domain(book) if book is not None else None

    def find_active_by_title(self, title: str) -> Optional[Book]:
        stmt = self._active().where(models.Book.title == title).limit(1)
        book = self.session.execute(stmt).scalar_one_or_none()
        return self._to_domain(book) if book is not None else None

    def list_active(self, page: PageRequest, query: BookQuery) -> Page[Book]:
        stmt = self._active()
        if query.genre_id:
            stmt = stmt.where(models.Book.genre_id == query.genre_id)
        if query.search:
            stmt = stmt.where(or_(*(_contains(col, query.search) for col in self.SEARCH_COLUMNS)))

        total = self.session.execute(
            select(func.count()).select_from(stmt.subquery())
        ).scalar_one()

        order_by: List[Any] = []
        for field, column in self.SORT_COLUMNS.items():
            direction = getattr(query, field)
            if direction is not None:
                order_by.append(column.desc() if direction == SortDirection.DESC else column.asc())
        if not order_by:
            order_by.append(models.Book.created_at.desc())

        stmt = stmt.order_by(*order_by).offset(page.offset).limit(page.limit)
        books = self.session.execute(stmt).scalars().all()
        return Page(items=[self._to_domain(b) for b in books], total=total)

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def create(self, book: NewBook) -> Book:
        row = models.Book(**book.model_dump())
        self.session.add(row)
        self.session.commit()
        return self.get_active(row.id)

    def update(self, book_id: str, fields: dict) -> Book:
        """
        Apply partial updates to an existing Book and commit.
        """
        book = self._load_active(book_id)
        for key, value in fields.items():
            setattr(book, key, value)
        self.session.commit()
        return self._to_domain(book)

    def soft_delete(self, book_id: str) -> None:
        book = self._load_active(book_id)
        if book is None:
            return
        book.deleted_at = models.utcnow()
        self.session.commit()
