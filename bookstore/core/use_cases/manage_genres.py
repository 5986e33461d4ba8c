# bookstore/core/use_cases/manage_genres.py
from typing import Optional

import structlog

from bookstore.core.domain.exceptions import (
    DuplicateGenreNameError,
    GenreNotFoundError,
    InvalidInputError,
)
from bookstore.core.domain.models import Genre, Page, PageRequest, SortDirection
from bookstore.core.ports.catalog_repository import IGenreRepository

logger = structlog.get_logger()


class ManageGenres:
    """
    Use Case: genre CRUD with soft delete.

    Names are unique among active genres only, so a deleted genre's name can
    be reused. Deleting a genre leaves its books alone.
    """

    def __init__(self, genres: IGenreRepository):
        self.genres = genres

    def create(self, name: str) -> Genre:
        name = self._clean_name(name)
        if self.genres.find_active_by_name(name) is not None:
            raise DuplicateGenreNameError(name)

        genre = self.genres.create(name)
        logger.info("genre_created", genre_id=genre.id, name=genre.name)
        return genre

    def list_genres(
        self,
        page: PageRequest,
        *,
        search: Optional[str] = None,
        direction: SortDirection = SortDirection.ASC,
    ) -> Page[Genre]:
        return self.genres.list_active(page, search=search or None, direction=direction)

    def get(self, genre_id: str) -> Genre:
        genre = self.genres.get_active(genre_id)
        if genre is None:
            raise GenreNotFoundError(genre_id)
        return genre

    def rename(self, genre_id: str, name: str) -> Genre:
        name = self._clean_name(name)
        self.get(genre_id)

        if self.genres.find_active_by_name(name, exclude_id=genre_id) is not None:
            raise DuplicateGenreNameError(name)

        genre = self.genres.rename(genre_id, name)
        logger.info("genre_renamed", genre_id=genre_id, name=name)
        return genre

    def delete(self, genre_id: str) -> None:
        self.get(genre_id)
        self.genres.soft_delete(genre_id)
        logger.info("genre_deleted", genre_id=genre_id)

    @staticmethod
    def _clean_name(name: str) -> str:
        if not name or not name.strip():
            raise InvalidInputError("Genre name must not be empty")
        return name
