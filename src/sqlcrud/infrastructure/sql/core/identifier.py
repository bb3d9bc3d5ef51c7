"""
SQL identifier handling utilities.

Provides functions for quoting table and column names. Both supported
dialects (MySQL and SQLite) accept backtick-quoted identifiers, which also
lets non-ASCII column names pass through unchanged.
"""

from typing import Iterable


def quote_identifier(name: str) -> str:
    """
    Quote a SQL identifier (table or column name) with backticks.

    Args:
        name: The identifier to quote

    Returns:
        Properly quoted identifier

    Examples:
        >>> quote_identifier("user_id")
        '`user_id`'
        >>> quote_identifier("年金计划号")
        '`年金计划号`'
        >>> quote_identifier("column`name")
        '`column``name`'
    """
    escaped = str(name).replace("`", "``")
    return f"`{escaped}`"


def quote_identifiers(names: Iterable[str]) -> str:
    """Quote and comma-join a sequence of identifiers."""
    return ", ".join(quote_identifier(name) for name in names)
