"""Core SQL utilities package."""

from .conditions import build_where_clause, join_clauses
from .identifier import quote_identifier, quote_identifiers
from .normalization import MappingRow, PositionalRow, RowData, classify_row, normalize_row
from .parameters import build_indexed_params, flatten_rows, remap_record
from .statement import Statement

__all__ = [
    "quote_identifier",
    "quote_identifiers",
    "build_indexed_params",
    "remap_record",
    "flatten_rows",
    "build_where_clause",
    "join_clauses",
    "MappingRow",
    "PositionalRow",
    "RowData",
    "classify_row",
    "normalize_row",
    "Statement",
]
