"""
Configuration helpers for the users API.

Settings are read once from environment variables so that routers/services
do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

# names understood by both logging and uvicorn
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    project_name: str
    log_level: str
    log_file: str
    host: str
    port: int
    cors_origins: tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _level(value: str | None, default: str = "INFO") -> str:
        level = (value or "").strip().upper()
        return level if level in LOG_LEVELS else default

    def _list(value: str | None) -> tuple[str, ...]:
        if not value:
            return ()
        return tuple(item.strip().rstrip("/") for item in value.split(",") if item.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        project_name=os.getenv("PROJECT_NAME", "Users CRUD API"),
        log_level=_level(os.getenv("LOG_LEVEL")),
        log_file=os.getenv("LOG_FILE", ""),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "8080"), 8080),
        cors_origins=_list(os.getenv("CORS_ORIGINS")),
    )
