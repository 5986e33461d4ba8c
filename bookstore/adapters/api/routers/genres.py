# bookstore/adapters/api/routers/genres.py

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from bookstore.adapters.api.dependencies import get_current_user, get_manage_genres
from bookstore.adapters.api.pagination import build_meta, page_params
from bookstore.adapters.api.schemas.common import Envelope, PaginatedEnvelope
from bookstore.adapters.api.schemas.genres import GenreCreated, GenreRead, GenreUpdated, GenreWrite
from bookstore.core.domain.models import PageRequest, SortDirection
from bookstore.core.use_cases import ManageGenres

router = APIRouter(
    prefix="/genre",
    tags=["Genres"],
    dependencies=[Depends(get_current_user)],
)


@router.post(
    "",
    response_model=Envelope[GenreCreated],
    status_code=status.HTTP_201_CREATED,
    summary="Create a genre",
)
def create_genre(
    payload: GenreWrite,
    use_case: ManageGenres = Depends(get_manage_genres),
):
    genre = use_case.create(payload.name)
    return Envelope(message="Genre created successfully", data=GenreCreated.model_validate(genre))


@router.get(
    "",
    response_model=PaginatedEnvelope[GenreRead],
    summary="List genres",
    description="Active genres, optionally filtered by a case-insensitive name search.",
)
def list_genres(
    *,
    use_case: ManageGenres = Depends(get_manage_genres),
    paging: PageRequest = Depends(page_params),
    search: Optional[str] = Query(None, description="Substring of the genre name."),
    order_by_name: Optional[str] = Query(None, alias="orderByName", description="asc | desc"),
):
    direction = SortDirection.parse(order_by_name, SortDirection.ASC)
    page = use_case.list_genres(paging, search=search, direction=direction)
    return PaginatedEnvelope(
        message="Get all genre successfully",
        data=[GenreRead.model_validate(g) for g in page.items],
        meta=build_meta(paging, page.total),
    )


@router.get("/{genre_id}", response_model=Envelope[GenreRead], summary="Get a genre")
def get_genre(genre_id: str, use_case: ManageGenres = Depends(get_manage_genres)):
    genre = use_case.get(genre_id)
    return Envelope(message="Get genre detail successfully", data=GenreRead.model_validate(genre))


@router.patch("/{genre_id}", response_model=Envelope[GenreUpdated], summary="Rename a genre")
def update_genre(
    genre_id: str,
    payload: GenreWrite,
    use_case: ManageGenres = Depends(get_manage_genres),
):
    genre = use_case.rename(genre_id, payload.name)
    return Envelope(message="Genre updated successfully", data=GenreUpdated.model_validate(genre))


@router.delete("/{genre_id}", response_model=Envelope[None], summary="Soft-delete a genre")
def delete_genre(genre_id: str, use_case: ManageGenres = Depends(get_manage_genres)):
    use_case.delete(genre_id)
    return Envelope(message="Genre removed successfully")
