"""
Write operations mixin: insert, batch_insert, update and delete.
"""

from typing import Any, Mapping, Optional, Sequence

from sqlcrud.utils.logging import get_logger

from .models import OperationResult

logger = get_logger(__name__)


def _rowcount(result) -> int:
    return result.rowcount


def _lastrowid(result) -> Any:
    return result.lastrowid


class WriteOpsMixin:
    """Mixin providing data-mutating operations."""

    def insert(
        self,
        table: str,
        data: Any,
        columns: Optional[Sequence[str]] = None,
    ) -> OperationResult:
        """
        Insert one row.

        Args:
            table: Table name
            data: Mapping, dataclass, pydantic model, object, or a positional
                sequence together with ``columns``
            columns: Column names for positional data

        Returns:
            OperationResult whose value is the driver-assigned row id

        Raises:
            InvalidArgumentError: Empty data, or positional data without columns
        """
        statement = self.insert_builder.insert(table, data, columns)
        return self._run("insert", table, statement, _lastrowid)

    def batch_insert(
        self,
        table: str,
        rows: Sequence[Any],
        columns: Optional[Sequence[str]] = None,
    ) -> OperationResult:
        """
        Insert many rows with one multi-row INSERT.

        The first row fixes the column set and order. Later rows that lack a
        column store NULL for it.

        Returns:
            OperationResult whose value is the number of inserted rows
            (0 without a round trip when ``rows`` is empty)
        """
        if not rows:
            logger.debug("table_repository.batch_insert.empty_input", table=table)
            return OperationResult(operation="batch_insert", table=table, success=True, value=0)

        statement = self.insert_builder.batch_insert(table, rows, columns)
        return self._run("batch_insert", table, statement, _rowcount)

    def update(
        self,
        table: str,
        data: Any,
        conditions: Optional[Mapping[str, Any]] = None,
    ) -> OperationResult:
        """
        Update rows matching all conditions.

        Returns:
            OperationResult whose value is the affected row count

        Raises:
            InvalidArgumentError: If ``data`` is empty
        """
        statement = self.update_builder.update(table, data, conditions)
        return self._run("update", table, statement, _rowcount)

    def delete(
        self,
        table: str,
        conditions: Optional[Mapping[str, Any]] = None,
    ) -> OperationResult:
        """
        Delete rows matching all conditions.

        With no conditions every row in the table is deleted. There is no
        guard against this.

        Returns:
            OperationResult whose value is the affected row count
        """
        statement = self.delete_builder.delete(table, conditions)
        if not conditions:
            logger.warning("table_repository.delete.unfiltered", table=table)
        return self._run("delete", table, statement, _rowcount)
