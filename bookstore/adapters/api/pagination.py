# bookstore/adapters/api/pagination.py
from typing import Optional

from fastapi import Query

from bookstore.adapters.api.schemas.common import PageMeta
from bookstore.core.domain.models import PageRequest
from bookstore.shared.config import settings


def _to_int(raw: Optional[str], default: int) -> int:
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError):
        return default


def parse_page(raw_page: Optional[str], raw_limit: Optional[str]) -> PageRequest:
    """
    Lenient paging: unparsable values fall back to the defaults, ``page`` is
    at least 1 and ``limit`` is clamped to [1, PAGE_MAX_LIMIT].
    """
    page = max(1, _to_int(raw_page, 1))
    limit = _to_int(raw_limit, settings.PAGE_DEFAULT_LIMIT)
    limit = min(max(1, limit), settings.PAGE_MAX_LIMIT)
    return PageRequest(page=page, limit=limit)


def page_params(
    page: Optional[str] = Query(None, description="1-based page number."),
    limit: Optional[str] = Query(None, description="Page size (max 50)."),
) -> PageRequest:
    return parse_page(page, limit)


def build_meta(request: PageRequest, total: int) -> PageMeta:
    total_pages = max(1, -(-total // request.limit))
    return PageMeta(
        page=request.page,
        limit=request.limit,
        prev_page=request.page - 1 if request.page > 1 else None,
        next_page=request.page + 1 if request.page < total_pages else None,
        total=total,
        total_pages=total_pages,
    )
