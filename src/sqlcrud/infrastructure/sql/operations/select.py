"""
SQL SELECT statement builders.

Conditions are always bound as parameters. Projection, ORDER BY, LIMIT and
OFFSET are copied into the SQL text verbatim; they are the caller's
responsibility and must not carry untrusted input.
"""

from typing import Any, Mapping, Optional, Sequence, Union

from sqlcrud.infrastructure.schema.core import QueryOptions

from ..core.conditions import build_where_clause, join_clauses
from ..core.statement import Statement
from ..dialects.base import Dialect

Fields = Union[str, Sequence[str], None]


def build_field_list(fields: Fields) -> str:
    """
    Render a projection list.

    Examples:
        >>> build_field_list(None)
        '*'
        >>> build_field_list(["id", "name"])
        'id, name'
        >>> build_field_list("COUNT(DISTINCT name)")
        'COUNT(DISTINCT name)'
    """
    if not fields:
        return "*"
    if isinstance(fields, str):
        return fields
    return ", ".join(fields)


class SelectBuilder:
    """Builds find_one, find_all and count statements."""

    def __init__(self, dialect: Dialect):
        self.dialect = dialect

    def find_one(
        self,
        table: str,
        conditions: Optional[Mapping[str, Any]] = None,
        fields: Fields = "*",
    ) -> Statement:
        """
        Build ``SELECT <fields> FROM <table> [WHERE ...] LIMIT 1``.

        Args:
            table: Table name
            conditions: Column -> value equality filter
            fields: Projection list or raw projection string

        Returns:
            Statement with named parameters
        """
        where, params = build_where_clause(conditions)
        sql = join_clauses(
            f"SELECT {build_field_list(fields)} FROM {self.dialect.quote(table)}",
            where,
            "LIMIT 1",
        )
        return Statement(sql, params)

    def find_all(
        self,
        table: str,
        conditions: Optional[Mapping[str, Any]] = None,
        options: Union[QueryOptions, Mapping[str, Any], None] = None,
    ) -> Statement:
        """
        Build ``SELECT ... [WHERE ...] [ORDER BY ...] [LIMIT n] [OFFSET m]``.

        Args:
            table: Table name
            conditions: Column -> value equality filter
            options: QueryOptions, or a mapping with fields/order/limit/offset

        Returns:
            Statement with named parameters
        """
        if options is None:
            options = QueryOptions()
        elif not isinstance(options, QueryOptions):
            options = QueryOptions.from_mapping(options)

        where, params = build_where_clause(conditions)
        sql = join_clauses(
            f"SELECT {build_field_list(options.fields)} FROM {self.dialect.quote(table)}",
            where,
            f"ORDER BY {options.order}" if options.order else "",
            f"LIMIT {options.limit}" if options.limit not in (None, "") else "",
            f"OFFSET {options.offset}" if options.offset not in (None, "") else "",
        )
        return Statement(sql, params)

    def count(
        self,
        table: str,
        conditions: Optional[Mapping[str, Any]] = None,
    ) -> Statement:
        """Build ``SELECT COUNT(*) AS count FROM <table> [WHERE ...]``."""
        where, params = build_where_clause(conditions)
        sql = join_clauses(
            f"SELECT COUNT(*) AS count FROM {self.dialect.quote(table)}",
            where,
        )
        return Statement(sql, params)
