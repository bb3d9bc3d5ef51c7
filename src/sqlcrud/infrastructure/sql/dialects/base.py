"""
Dialect protocol and shared dialect behaviour.

A dialect owns everything that differs between database backends: the
positional placeholder token, table-level DDL options, the column
introspection statement, and which column attributes are spelled how.
"""

from typing import List, Optional, Protocol

from ..core.identifier import quote_identifier, quote_identifiers


class Dialect(Protocol):
    """Protocol for SQL dialects."""

    name: str
    positional_placeholder: str
    auto_increment_keyword: str
    supports_column_comments: bool

    def quote(self, identifier: str) -> str: ...
    def build_insert(self, table: str, columns: List[str], placeholders: List[str]) -> str: ...
    def build_multi_row_insert(self, table: str, columns: List[str], row_count: int) -> str: ...
    def table_options(self, engine: Optional[str], charset: Optional[str]) -> str: ...
    def describe_table(self, table: str) -> str: ...
    def render_named(self, sql: str) -> str: ...


class BaseDialect:
    """Behaviour common to the backtick-quoting dialects."""

    name = "base"
    positional_placeholder = "?"
    auto_increment_keyword = "AUTO_INCREMENT"
    supports_column_comments = True

    def quote(self, identifier: str) -> str:
        """Quote an identifier with backticks."""
        return quote_identifier(identifier)

    def build_insert(
        self,
        table: str,
        columns: List[str],
        placeholders: List[str],
    ) -> str:
        """
        Build a single-row INSERT statement.

        Args:
            table: Table name
            columns: List of column names
            placeholders: List of parameter placeholders

        Returns:
            INSERT SQL statement
        """
        values = ", ".join(placeholders)
        return (
            f"INSERT INTO {self.quote(table)} ({quote_identifiers(columns)}) "
            f"VALUES ({values})"
        )

    def build_multi_row_insert(
        self,
        table: str,
        columns: List[str],
        row_count: int,
    ) -> str:
        """
        Build a multi-row INSERT with positional placeholders.

        Args:
            table: Table name
            columns: Column names, in bind order
            row_count: Number of VALUES tuples

        Returns:
            INSERT SQL statement in the driver's positional paramstyle
        """
        row = "(" + ", ".join([self.positional_placeholder] * len(columns)) + ")"
        values = ", ".join([row] * row_count)
        return (
            f"INSERT INTO {self.quote(table)} ({quote_identifiers(columns)}) "
            f"VALUES {values}"
        )

    def table_options(self, engine: Optional[str], charset: Optional[str]) -> str:
        return ""

    def describe_table(self, table: str) -> str:
        raise NotImplementedError

    def render_named(self, sql: str) -> str:
        """
        Rewrite ``:col_N`` style placeholders into the driver's named paramstyle.

        The statement is handed to the DBAPI cursor as-is, so colons inside
        string literals or verbatim fragments are never taken for bind
        parameters. sqlite3 binds ``:name`` natively.
        """
        return sql
