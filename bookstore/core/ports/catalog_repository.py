# bookstore/core/ports/catalog_repository.py
from typing import Optional, Protocol

from bookstore.core.domain.models import (
    Book,
    BookQuery,
    Genre,
    NewBook,
    Page,
    PageRequest,
    SortDirection,
)


class IGenreRepository(Protocol):
    """Port for genre persistence. "Active" means not soft-deleted."""

    def create(self, name: str) -> Genre:
        ...

    def get_active(self, genre_id: str) -> Optional[Genre]:
        ...

    def find_active_by_name(self, name: str, *, exclude_id: Optional[str] = None) -> Optional[Genre]:
        ...

    def list_active(
        self,
        page: PageRequest,
        *,
        search: Optional[str] = None,
        direction: SortDirection = SortDirection.ASC,
    ) -> Page[Genre]:
        ...

    def rename(self, genre_id: str, name: str) -> Genre:
        ...

    def soft_delete(self, genre_id: str) -> None:
        ...


class IBookRepository(Protocol):
    """Port for book persistence. "Active" means not soft-deleted."""

    def create(self, book: NewBook) -> Book:
        ...

    def get_active(self, book_id: str) -> Optional[Book]:
        ...

    def find_active_by_title(self, title: str) -> Optional[Book]:
        ...

    def list_active(self, page: PageRequest, query: BookQuery) -> Page[Book]:
        ...

    def update(self, book_id: str, fields: dict) -> Book:
        ...

    def soft_delete(self, book_id: str) -> None:
        ...
