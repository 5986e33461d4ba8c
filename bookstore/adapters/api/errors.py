# bookstore/adapters/api/errors.py
from typing import Any, List, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bookstore.adapters.api.schemas.common import ErrorEnvelope
from bookstore.core.domain.exceptions import (
    AuthenticationError,
    DomainError,
    NotFoundError,
)
from bookstore.shared.config import settings

logger = structlog.get_logger()


def error_response(status_code: int, message: str, data: Optional[Any] = None, headers=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(ErrorEnvelope(message=message, data=data)),
        headers=headers,
    )


def status_for(exc: DomainError) -> int:
    """Domain error kind -> HTTP status code."""
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, AuthenticationError):
        return status.HTTP_401_UNAUTHORIZED
    return status.HTTP_400_BAD_REQUEST


def _simplify(errors: List[dict]) -> List[dict]:
    return [
        {
            "loc": [str(part) for part in err.get("loc", ())],
            "msg": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in errors
    ]


def register_exception_handlers(app: FastAPI) -> None:
    """Renders every failure in the ``{success, message, data}`` envelope."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        code = status_for(exc)
        logger.info(
            "domain_error",
            path=request.url.path,
            status_code=code,
            error=type(exc).__name__,
            message=exc.message,
        )
        headers = {"WWW-Authenticate": "Bearer"} if code == status.HTTP_401_UNAUTHORIZED else None
        return error_response(code, exc.message, exc.details(), headers=headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "Invalid body",
            _simplify(exc.errors()),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Standardizes HTTP errors (including 401 auth failures).
        """
        return error_response(
            exc.status_code,
            str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions so stack traces never leak in production.
        """
        logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(exc) if settings.DEBUG else "Internal Server Error",
        )
