# bookstore/adapters/api/main.py
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookstore import __version__
from bookstore.adapters.api.errors import register_exception_handlers
from bookstore.adapters.api.routers import auth, books, genres, health, transactions
from bookstore.adapters.persistence import init_db
from bookstore.shared.config import AppEnv, settings
from bookstore.shared.container import Container
from bookstore.shared.logging_config import configure_logging
from bookstore.shared.observability import setup_observability

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application Lifecycle Manager.
    Creates missing tables on startup and releases the connection pool on shutdown.
    """
    container: Container = app.state.container
    engine = container.db_engine()

    logger.info("app_starting", app=settings.APP_NAME, env=settings.APP_ENV.value)
    if settings.DB_AUTO_CREATE:
        init_db(engine)

    yield

    logger.info("app_stopping")
    engine.dispose()


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Factory function to create the FastAPI application.

    Tests pass their own ``container`` (e.g. with ``db_engine`` overridden).
    """
    configure_logging()

    app = FastAPI(
        title="Bookstore Backend",
        version=__version__,
        description="Book catalog, orders and sales statistics",
        docs_url="/docs" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url="/redoc" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        lifespan=lifespan,
    )
    app.state.container = container or Container()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_observability(app)
    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(genres.router)
    app.include_router(books.router)
    app.include_router(transactions.router)

    return app


# Entry point for Uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
