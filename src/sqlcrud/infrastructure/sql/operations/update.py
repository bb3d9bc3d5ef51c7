"""SQL UPDATE statement builder."""

from typing import Any, Mapping, Optional

from sqlcrud.exceptions import InvalidArgumentError

from ..core.conditions import build_where_clause, join_clauses
from ..core.normalization import normalize_row
from ..core.parameters import SET_PREFIX, WHERE_PREFIX, build_indexed_params, remap_record
from ..core.statement import Statement
from ..dialects.base import Dialect


class UpdateBuilder:
    """Builds UPDATE statements.

    SET values bind as ``set_N`` and conditions as ``where_N``, so a column
    that is both updated and filtered on gets two independent parameters.
    """

    def __init__(self, dialect: Dialect):
        self.dialect = dialect

    def update(
        self,
        table: str,
        data: Any,
        conditions: Optional[Mapping[str, Any]] = None,
    ) -> Statement:
        """
        Build ``UPDATE <table> SET ... [WHERE ...]``.

        Raises:
            InvalidArgumentError: If there is nothing to set
        """
        row = normalize_row(data)
        if not row:
            raise InvalidArgumentError("Update data must not be empty")

        row_columns = list(row.keys())
        set_map, set_placeholders = build_indexed_params(row_columns, prefix=SET_PREFIX)
        assignments = ", ".join(
            f"{self.dialect.quote(col)} = {placeholder}"
            for col, placeholder in zip(row_columns, set_placeholders)
        )
        where, where_params = build_where_clause(conditions, prefix=WHERE_PREFIX)

        params = remap_record(row, set_map)
        params.update(where_params)
        sql = join_clauses(
            f"UPDATE {self.dialect.quote(table)} SET {assignments}",
            where,
        )
        return Statement(sql, params)
