"""
SQLite SQL dialect implementation.

SQLite accepts MySQL-style backtick identifiers, so the generated CRUD SQL is
shared with MySQL. DDL differs: no table options, no column comments, and
AUTOINCREMENT is spelled without the underscore.
"""

from .base import BaseDialect


class SQLiteDialect(BaseDialect):
    """SQLite SQL dialect implementation."""

    name = "sqlite"
    positional_placeholder = "?"
    auto_increment_keyword = "AUTOINCREMENT"
    supports_column_comments = False

    def describe_table(self, table: str) -> str:
        return f"PRAGMA table_info({self.quote(table)})"
