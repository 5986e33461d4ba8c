# bookstore/shared/config.py
from enum import Enum
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "bookstore-backend"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Comma-separated list, "*" allows every origin
    CORS_ORIGINS: str = "*"

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_ENABLED: bool = False
    OTEL_SERVICE_NAME: str = "bookstore-backend"

    # --- Persistence ---
    DATABASE_URL: str = "sqlite:///./bookstore.db"
    # Create missing tables on startup (no migration tool is shipped)
    DB_AUTO_CREATE: bool = True

    # --- Security ---
    JWT_SECRET: str = "change-me-in-production-not-a-real-secret"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_MINUTES: int = 60 * 24 * 2
    BCRYPT_ROUNDS: int = 10

    # --- Pagination ---
    PAGE_DEFAULT_LIMIT: int = 10
    PAGE_MAX_LIMIT: int = 50

    @property
    def cors_origins(self) -> List[str]:
        raw = (self.CORS_ORIGINS or "").strip()
        if not raw or raw == "*":
            return ["*"]
        return [p.strip() for p in raw.split(",") if p.strip()]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
