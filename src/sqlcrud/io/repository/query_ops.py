"""
Read operations mixin: find_one, find_all, count and table introspection.

Rows are returned as plain dicts keyed by column name.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from sqlcrud.infrastructure.schema.core import QueryOptions

from .models import OperationResult


def _first_row(result) -> Optional[Dict[str, Any]]:
    row = result.mappings().first()
    return dict(row) if row is not None else None


def _all_rows(result) -> List[Dict[str, Any]]:
    return [dict(row) for row in result.mappings().all()]


def _count_value(result) -> int:
    value = result.scalar()
    return int(value) if value is not None else 0


class QueryOpsMixin:
    """Mixin providing read operations."""

    def find_one(
        self,
        table: str,
        conditions: Optional[Mapping[str, Any]] = None,
        fields: Union[str, Sequence[str]] = "*",
    ) -> OperationResult:
        """
        Fetch at most one row matching all conditions.

        Args:
            table: Table name
            conditions: Column -> value equality filter (AND-combined)
            fields: Projection list, or a raw projection string

        Returns:
            OperationResult whose value is the row dict, or None when
            nothing matches.
        """
        statement = self.select_builder.find_one(table, conditions, fields)
        return self._run("find_one", table, statement, _first_row)

    def find_all(
        self,
        table: str,
        conditions: Optional[Mapping[str, Any]] = None,
        options: Union[QueryOptions, Mapping[str, Any], None] = None,
    ) -> OperationResult:
        """
        Fetch every row matching all conditions.

        ``options`` (fields, order, limit, offset) are placed into the SQL
        text unescaped. They must come from trusted code.

        Returns:
            OperationResult whose value is a list of row dicts.
        """
        statement = self.select_builder.find_all(table, conditions, options)
        return self._run("find_all", table, statement, _all_rows)

    def count(
        self,
        table: str,
        conditions: Optional[Mapping[str, Any]] = None,
    ) -> OperationResult:
        """Count rows matching all conditions; the value is an int."""
        statement = self.select_builder.count(table, conditions)
        return self._run("count", table, statement, _count_value)

    def get_table_structure(self, table: str) -> OperationResult:
        """
        Return the backend's column introspection rows unchanged.

        MySQL: DESCRIBE rows (Field, Type, Null, Key, Default, Extra).
        SQLite: PRAGMA table_info rows (cid, name, type, notnull, dflt_value, pk).
        """
        statement = self.schema_builder.describe(table)
        return self._run("get_table_structure", table, statement, _all_rows)
