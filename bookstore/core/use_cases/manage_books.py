# bookstore/core/use_cases/manage_books.py
import structlog

from bookstore.core.domain.exceptions import (
    BookNotFoundError,
    DuplicateBookTitleError,
    GenreNotFoundError,
    GenreUnavailableError,
    InvalidInputError,
)
from bookstore.core.domain.models import Book, BookChanges, BookQuery, NewBook, Page, PageRequest
from bookstore.core.ports.catalog_repository import IBookRepository, IGenreRepository

logger = structlog.get_logger()


class ManageBooks:
    """
    Use Case: book CRUD with soft delete.

    Rules enforced here:
    - a book must reference an active genre;
    - titles are unique among active books;
    - only description, price and stock_quantity can be updated;
    - price and stock_quantity are never negative.
    """

    def __init__(self, books: IBookRepository, genres: IGenreRepository):
        self.books = books
        self.genres = genres

    def create(self, new_book: NewBook) -> Book:
        self._check_amounts(new_book.price, new_book.stock_quantity)

        if self.genres.get_active(new_book.genre_id) is None:
            raise GenreUnavailableError(new_book.genre_id)
        if self.books.find_active_by_title(new_book.title) is not None:
            raise DuplicateBookTitleError(new_book.title)

        book = self.books.create(new_book)
        logger.info("book_created", book_id=book.id, title=book.title)
        return book

    def list_books(self, page: PageRequest, query: BookQuery) -> Page[Book]:
        return self.books.list_active(page, query)

    def list_by_genre(self, genre_id: str, page: PageRequest, query: BookQuery) -> Page[Book]:
        if self.genres.get_active(genre_id) is None:
            raise GenreNotFoundError(genre_id)
        scoped = query.model_copy(update={"genre_id": genre_id})
        return self.books.list_active(page, scoped)

    def get(self, book_id: str) -> Book:
        book = self.books.get_active(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def update(self, book_id: str, changes: BookChanges) -> Book:
        self.get(book_id)

        fields = changes.as_dict()
        for name in ("price", "stock_quantity"):
            if name in fields and fields[name] is None:
                raise InvalidInputError(f"{name} must not be null")
        self._check_amounts(fields.get("price"), fields.get("stock_quantity"))
        if not fields:
            return self.get(book_id)

        book = self.books.update(book_id, fields)
        logger.info("book_updated", book_id=book_id, fields=sorted(fields))
        return book

    def delete(self, book_id: str) -> None:
        self.get(book_id)
        # Order items keep pointing at the book.
        self.books.soft_delete(book_id)
        logger.info("book_deleted", book_id=book_id)

    @staticmethod
    def _check_amounts(price, stock_quantity) -> None:
        if price is not None and price < 0:
            raise InvalidInputError("price must not be negative")
        if stock_quantity is not None and stock_quantity < 0:
            raise InvalidInputError("stock_quantity must not be negative")
