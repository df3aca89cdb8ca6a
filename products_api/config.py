"""
Runtime configuration read from environment variables.
"""

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PORT = 8010

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """Settings consumed once at application startup."""
    database_path: str
    db_username: str = ""
    db_password: str = ""
    log_level: str = DEFAULT_LOG_LEVEL
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT


def _log_level() -> str:
    level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in LOG_LEVELS:
        logger.warning("Unknown LOG_LEVEL %r, using %s", level, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


def _port() -> int:
    raw = os.getenv("APP_PORT", str(DEFAULT_PORT))
    try:
        port = int(raw)
    except ValueError:
        port = -1
    if not 0 < port < 65536:
        logger.warning("Invalid APP_PORT %r, using %s", raw, DEFAULT_PORT)
        return DEFAULT_PORT
    return port


def get_settings() -> Settings:
    """
    Build settings from the current environment.

    DATABASE_PATH points at the SQLite file directly. Without it the database
    name from APP_DB_NAME is opened as "<name>.db" in the working directory.
    APP_DB_USERNAME and APP_DB_PASSWORD are accepted so the same environment
    works against a server database; SQLite ignores them. An unusable
    LOG_LEVEL or APP_PORT falls back to its default with a warning.
    """
    database_path = os.getenv("DATABASE_PATH")
    if not database_path:
        database_path = f"{os.getenv('APP_DB_NAME') or 'products'}.db"

    return Settings(
        database_path=database_path,
        db_username=os.getenv("APP_DB_USERNAME", ""),
        db_password=os.getenv("APP_DB_PASSWORD", ""),
        log_level=_log_level(),
        host=os.getenv("APP_HOST", "0.0.0.0"),
        port=_port(),
    )
