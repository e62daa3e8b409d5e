"""
Configuration package.
"""

from .database import (
    close_database_connections,
    create_engine,
    get_async_session_factory,
    get_database_health,
    get_database_url,
    get_db_session,
    get_engine,
)
from .logging import configure_logging, get_logger
from .settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
    # Database
    "get_database_url",
    "create_engine",
    "get_engine",
    "get_async_session_factory",
    "get_db_session",
    "get_database_health",
    "close_database_connections",
    # Logging
    "configure_logging",
    "get_logger",
]
