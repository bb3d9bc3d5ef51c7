"""SQL DELETE statement builder."""

from typing import Any, Mapping, Optional

from ..core.conditions import build_where_clause, join_clauses
from ..core.statement import Statement
from ..dialects.base import Dialect


class DeleteBuilder:
    """Builds DELETE statements."""

    def __init__(self, dialect: Dialect):
        self.dialect = dialect

    def delete(
        self,
        table: str,
        conditions: Optional[Mapping[str, Any]] = None,
    ) -> Statement:
        """
        Build ``DELETE FROM <table> [WHERE ...]``.

        An empty condition set produces an unfiltered DELETE that removes
        every row in the table. This is intentional and not guarded.
        """
        where, params = build_where_clause(conditions)
        sql = join_clauses(f"DELETE FROM {self.dialect.quote(table)}", where)
        return Statement(sql, params)
