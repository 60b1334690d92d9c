"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All settings overridable from environment variables or .env
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - Defaults work out of the box with a local SQLite file
    - postgresql:// URLs rewritten for the asyncpg driver
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from roster.core.domain_types import NotFoundPolicy, StoreBackend


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///./roster.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_create_schema: bool = True

    # Store
    store_backend: StoreBackend = StoreBackend.SQL
    not_found_policy: NotFoundPolicy = NotFoundPolicy.ERROR

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
