"""Connection bootstrapping."""

from .database_connector import (
    ConnectionSource,
    create_database_engine,
    open_connection,
    resolve_database_url,
)

__all__ = [
    "ConnectionSource",
    "create_database_engine",
    "open_connection",
    "resolve_database_url",
]
