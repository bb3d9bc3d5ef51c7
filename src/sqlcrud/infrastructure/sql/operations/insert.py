"""
SQL INSERT statement builders.

Provides single-row inserts with indexed named parameters and multi-row
inserts with positional parameters.
"""

from typing import Any, List, Optional, Sequence

from sqlcrud.exceptions import InvalidArgumentError

from ..core.normalization import normalize_row
from ..core.parameters import build_indexed_params, flatten_rows, remap_record
from ..core.statement import Statement
from ..dialects.base import Dialect


class InsertBuilder:
    """
    High-level builder for INSERT statements.

    Example:
        >>> from sqlcrud.infrastructure.sql import InsertBuilder, MySQLDialect
        >>> builder = InsertBuilder(MySQLDialect())
        >>> builder.insert("users", {"name": "Ann", "age": 31}).sql
        'INSERT INTO `users` (`name`, `age`) VALUES (:col_0, :col_1)'
    """

    def __init__(self, dialect: Dialect):
        """
        Initialize the InsertBuilder.

        Args:
            dialect: SQL dialect to use for statement generation
        """
        self.dialect = dialect

    def insert(
        self,
        table: str,
        data: Any,
        columns: Optional[Sequence[str]] = None,
    ) -> Statement:
        """
        Build a single-row INSERT statement.

        Args:
            table: Table name
            data: Mapping, object, or positional sequence
            columns: Column names for positional data

        Returns:
            Statement with named parameters

        Raises:
            InvalidArgumentError: Positional data without columns, or no data
        """
        row = normalize_row(data, columns)
        if not row:
            raise InvalidArgumentError("Insert data must not be empty")

        row_columns = list(row.keys())
        param_map, placeholders = build_indexed_params(row_columns)
        sql = self.dialect.build_insert(table, row_columns, placeholders)
        return Statement(sql, remap_record(row, param_map))

    def batch_insert(
        self,
        table: str,
        rows: Sequence[Any],
        columns: Optional[Sequence[str]] = None,
    ) -> Statement:
        """
        Build one multi-row INSERT statement.

        The column order is fixed by the first row. Every later row is
        normalized against that order (so positional rows line up with it)
        and columns it lacks are bound as NULL; columns that only appear in
        later rows are ignored.

        Args:
            table: Table name
            rows: Row data items, each a mapping, object or positional sequence
            columns: Column names for a positional first row

        Returns:
            Statement with positional parameters

        Raises:
            InvalidArgumentError: If rows is empty or the first row has no columns
        """
        if not rows:
            raise InvalidArgumentError("Batch insert requires at least one row")

        first_row = normalize_row(rows[0], columns)
        column_order: List[str] = list(first_row.keys())
        if not column_order:
            raise InvalidArgumentError("First row of a batch insert must not be empty")

        normalized = [first_row] + [
            normalize_row(row, column_order) for row in rows[1:]
        ]
        sql = self.dialect.build_multi_row_insert(table, column_order, len(normalized))
        return Statement(sql, flatten_rows(normalized, column_order))
