"""
Configuration helpers for the person records backend.

Settings are read once from environment variables so that routers/services do
not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_DATABASE_URL = "sqlite:///./persons.db"
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    log_level: str
    log_file: str | None
    default_page_size: int
    random_seed: int | None


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int | None = 0) -> int | None:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    page_size = _int(os.getenv("DEFAULT_PAGE_SIZE"), DEFAULT_PAGE_SIZE)
    if page_size < 1:
        page_size = DEFAULT_PAGE_SIZE

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE") or None,
        default_page_size=page_size,
        random_seed=_int(os.getenv("RANDOM_SEED"), None),
    )
