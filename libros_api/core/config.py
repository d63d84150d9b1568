"""
Configuration helpers for the Libros backend.

Settings are read once from environment variables and cached; tests call
``get_settings.cache_clear()`` after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    log_level: str
    auto_create_tables: bool
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _csv(value: str | None) -> tuple[str, ...]:
        items = (part.strip().rstrip("/") for part in (value or "").split(","))
        return tuple(item for item in items if item)

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        auto_create_tables=_bool(os.getenv("AUTO_CREATE_TABLES"), True),
        cors_origins=_csv(os.getenv("CORS_ORIGINS")),
    )
