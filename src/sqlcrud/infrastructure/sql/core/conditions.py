"""
Condition set compilation.

A condition set is a mapping of column name to value. Every entry becomes an
equality predicate and the predicates are joined with AND. An empty mapping
compiles to no WHERE clause at all.
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from .identifier import quote_identifier
from .parameters import WHERE_PREFIX, build_indexed_params, remap_record


def build_where_clause(
    conditions: Optional[Mapping[str, Any]],
    prefix: str = WHERE_PREFIX,
) -> Tuple[str, Dict[str, Any]]:
    """
    Compile a condition set into a WHERE clause and its named parameters.

    Args:
        conditions: Mapping of column name to required value
        prefix: Bind parameter prefix

    Returns:
        Tuple of (clause, params). The clause is "" when there are no
        conditions, otherwise it starts with "WHERE ".

    Examples:
        >>> build_where_clause({"id": 7, "status": "active"})
        ('WHERE `id` = :where_0 AND `status` = :where_1', {'where_0': 7, 'where_1': 'active'})
        >>> build_where_clause({})
        ('', {})
    """
    if not conditions:
        return "", {}

    columns = list(conditions.keys())
    param_map, placeholders = build_indexed_params(columns, prefix=prefix)
    predicates = [
        f"{quote_identifier(col)} = {placeholder}"
        for col, placeholder in zip(columns, placeholders)
    ]
    return "WHERE " + " AND ".join(predicates), remap_record(conditions, param_map)


def join_clauses(*parts: str) -> str:
    """Join SQL fragments with single spaces, skipping empty ones."""
    return " ".join(part for part in parts if part)
