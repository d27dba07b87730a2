"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. DATABASE_URL is validated when the first database
session is requested, not at import time.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults; database_url is required only
    once a session is requested (see app.infrastructure.persistence.database).
    """

    # App
    app_name: str = "staff-records"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database (PostgreSQL via asyncpg; schema managed by Alembic)
    database_url: str = ""
    database_echo: bool = False
    # Optional pool/driver overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"

    # Provenance: applied at the HTTP boundary when X-Changed-By is absent.
    changed_by_header: str = "X-Changed-By"
    change_reason_header: str = "X-Change-Reason"
    default_changed_by: str = "system"

    # History pagination
    history_page_size_default: int = 20
    history_page_size_max: int = 100

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("default_changed_by")
    @classmethod
    def _non_empty_default_actor(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("DEFAULT_CHANGED_BY must be a non-empty string")
        return v.strip()

    @field_validator("history_page_size_max")
    @classmethod
    def _positive_page_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError("HISTORY_PAGE_SIZE_MAX must be >= 1")
        return v


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
