"""
SQL parameter binding utilities.

Bind parameters are named by position (col_0, col_1, ...) rather than by
column name, so column names with non-ASCII or punctuation characters never
end up inside a placeholder. Distinct prefixes keep clauses that bind the
same column (UPDATE ... SET x = ... WHERE x = ...) from colliding.
"""

import re
from typing import Any, Dict, List, Mapping, Sequence, Tuple

SET_PREFIX = "set"
WHERE_PREFIX = "where"
VALUES_PREFIX = "col"

# Matches only placeholders produced by build_indexed_params
NAMED_PLACEHOLDER_RE = re.compile(
    rf":((?:{SET_PREFIX}|{WHERE_PREFIX}|{VALUES_PREFIX})_\d+)\b"
)


def build_indexed_params(
    columns: Sequence[str], prefix: str = VALUES_PREFIX
) -> Tuple[Dict[str, str], List[str]]:
    """
    Build indexed parameter mapping for SQL queries.

    Args:
        columns: List of column names
        prefix: Parameter name prefix

    Returns:
        Tuple of (column_to_param mapping, list of placeholder strings)

    Examples:
        >>> col_map, placeholders = build_indexed_params(["年金计划号", "计划全称"])
        >>> col_map
        {'年金计划号': 'col_0', '计划全称': 'col_1'}
        >>> placeholders
        [':col_0', ':col_1']
        >>> build_indexed_params(["id"], prefix="where")
        ({'id': 'where_0'}, [':where_0'])
    """
    col_param_map = {col: f"{prefix}_{i}" for i, col in enumerate(columns)}
    placeholders = [f":{col_param_map[col]}" for col in columns]
    return col_param_map, placeholders


def remap_record(record: Mapping[str, Any], param_map: Mapping[str, str]) -> Dict[str, Any]:
    """
    Remap record keys to indexed parameter names.

    Columns not present in ``param_map`` are dropped.

    Examples:
        >>> remap_record({"id": 1, "name": "A"}, {"id": "col_0", "name": "col_1"})
        {'col_0': 1, 'col_1': 'A'}
    """
    return {param_map[k]: v for k, v in record.items() if k in param_map}


def flatten_rows(
    rows: Sequence[Mapping[str, Any]], columns: Sequence[str]
) -> Tuple[Any, ...]:
    """
    Flatten rows into one positional parameter tuple in ``columns`` order.

    Columns missing from a row are bound as None.

    Examples:
        >>> flatten_rows([{"a": 1, "b": 2}, {"a": 3}], ["a", "b"])
        (1, 2, 3, None)
    """
    return tuple(row.get(col) for row in rows for col in columns)
