# bookstore/adapters/api/routers/books.py

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from bookstore.adapters.api.dependencies import get_current_user, get_manage_books
from bookstore.adapters.api.pagination import build_meta, page_params
from bookstore.adapters.api.schemas.books import (
    BookCreate,
    BookCreated,
    BookRead,
    BookUpdate,
    BookUpdated,
)
from bookstore.adapters.api.schemas.common import Envelope, PaginatedEnvelope
from bookstore.core.domain.models import BookChanges, BookQuery, NewBook, Page, PageRequest, SortDirection
from bookstore.core.use_cases import ManageBooks

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    dependencies=[Depends(get_current_user)],
)


def _direction(raw: Optional[str]) -> Optional[SortDirection]:
    return SortDirection.parse(raw, SortDirection.ASC) if raw else None


def book_query(
    search: Optional[str] = Query(None, description="Substring of title, writer or publisher."),
    order_by_title: Optional[str] = Query(None, alias="orderByTitle", description="asc | desc"),
    order_by_publish_date: Optional[str] = Query(None, alias="orderByPublishDate", description="asc | desc"),
) -> BookQuery:
    """Only allow-listed sort keys exist; a given key sorts ascending unless it says "desc"."""
    return BookQuery(
        search=search or None,
        order_by_title=_direction(order_by_title),
        order_by_publication_year=_direction(order_by_publish_date),
    )


def _paginated(message: str, paging: PageRequest, page: Page) -> PaginatedEnvelope[BookRead]:
    return PaginatedEnvelope(
        message=message,
        data=[BookRead.from_domain(b) for b in page.items],
        meta=build_meta(paging, page.total),
    )


@router.post(
    "",
    response_model=Envelope[BookCreated],
    status_code=status.HTTP_201_CREATED,
    summary="Add a book",
)
def create_book(payload: BookCreate, use_case: ManageBooks = Depends(get_manage_books)):
    new_book = NewBook(**payload.model_dump(exclude={"genre_id"}), genre_id=str(payload.genre_id))
    book = use_case.create(new_book)
    return Envelope(message="Book added successfully", data=BookCreated.model_validate(book))


@router.get("", response_model=PaginatedEnvelope[BookRead], summary="List books")
def list_books(
    *,
    use_case: ManageBooks = Depends(get_manage_books),
    paging: PageRequest = Depends(page_params),
    query: BookQuery = Depends(book_query),
):
    return _paginated("Get all book successfully", paging, use_case.list_books(paging, query))


@router.get(
    "/genre/{genre_id}",
    response_model=PaginatedEnvelope[BookRead],
    summary="List books of one genre",
)
def list_books_by_genre(
    genre_id: str,
    *,
    use_case: ManageBooks = Depends(get_manage_books),
    paging: PageRequest = Depends(page_params),
    query: BookQuery = Depends(book_query),
):
    page = use_case.list_by_genre(genre_id, paging, query)
    return _paginated("Get all book by genre successfully", paging, page)


@router.get("/{book_id}", response_model=Envelope[BookRead], summary="Get a book")
def get_book(book_id: str, use_case: ManageBooks = Depends(get_manage_books)):
    book = use_case.get(book_id)
    return Envelope(message="Get book detail successfully", data=BookRead.from_domain(book))


@router.patch(
    "/{book_id}",
    response_model=Envelope[BookUpdated],
    summary="Update a book",
    description="Only description, price and stock_quantity can change.",
)
def update_book(
    book_id: str,
    payload: BookUpdate,
    use_case: ManageBooks = Depends(get_manage_books),
):
    changes = BookChanges(**payload.model_dump(exclude_unset=True))
    book = use_case.update(book_id, changes)
    return Envelope(message="Book updated successfully", data=BookUpdated.model_validate(book))


@router.delete("/{book_id}", response_model=Envelope[None], summary="Soft-delete a book")
def delete_book(book_id: str, use_case: ManageBooks = Depends(get_manage_books)):
    use_case.delete(book_id)
    return Envelope(message="Book removed successfully")
