# bookstore/shared/container.py
from dependency_injector import containers, providers

from bookstore.adapters.persistence import (
    SqlBookRepository,
    SqlGenreRepository,
    SqlOrderStore,
    SqlUserRepository,
    build_session_factory,
    create_db_engine,
)
from bookstore.adapters.security import BcryptPasswordHasher, JWTTokenService
from bookstore.core.use_cases import (
    Authenticate,
    BrowseTransactions,
    ComputeStatistics,
    ManageBooks,
    ManageGenres,
    PlaceOrder,
)
from bookstore.shared.config import settings


class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    Singletons hold process-wide resources (engine, session factory,
    security primitives). Repositories and use cases are Factories: the
    request-scoped SQLAlchemy ``session`` is supplied at call time, e.g.

        store = container.order_store(session=session)
        use_case = container.place_order(store=store)
    """

    # 1. Configuration
    config = providers.Configuration(pydantic_settings=[settings])

    # 2. Gateways (Infrastructure Adapters)
    db_engine = providers.Singleton(
        create_db_engine,
        config.DATABASE_URL,
        echo=config.DEBUG,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=db_engine,
    )

    password_hasher = providers.Singleton(
        BcryptPasswordHasher,
        rounds=config.BCRYPT_ROUNDS,
    )

    token_service = providers.Singleton(
        JWTTokenService,
        secret=config.JWT_SECRET,
        algorithm=config.JWT_ALGORITHM,
        expires_minutes=config.JWT_EXPIRES_MINUTES,
    )

    order_store = providers.Factory(SqlOrderStore)
    genre_repository = providers.Factory(SqlGenreRepository)
    book_repository = providers.Factory(SqlBookRepository)
    user_repository = providers.Factory(SqlUserRepository)

    # 3. Use Cases (Application Logic)
    place_order = providers.Factory(PlaceOrder)
    compute_statistics = providers.Factory(ComputeStatistics)
    browse_transactions = providers.Factory(BrowseTransactions)
    manage_genres = providers.Factory(ManageGenres)
    manage_books = providers.Factory(ManageBooks)
    authenticate = providers.Factory(
        Authenticate,
        hasher=password_hasher,
        tokens=token_service,
    )
