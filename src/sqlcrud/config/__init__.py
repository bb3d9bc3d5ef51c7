"""Configuration management for sqlcrud.

Usage:
    >>> from sqlcrud.config import get_settings
    >>> settings = get_settings()
    >>> settings.get_database_connection_string()
"""

from sqlcrud.config.schema_loader import TableSchema, load_table_schemas
from sqlcrud.config.settings import DatabaseSettings, Settings, get_settings

__all__ = [
    "Settings",
    "DatabaseSettings",
    "get_settings",
    "TableSchema",
    "load_table_schemas",
]
