"""
SQL module for centralized SQL generation.

This module provides reusable utilities for building parameterized CRUD and
DDL statements with identifier quoting, indexed bind parameters and
dialect-specific syntax.
"""

from .core.conditions import build_where_clause
from .core.identifier import quote_identifier
from .core.normalization import normalize_row
from .core.parameters import build_indexed_params, remap_record
from .core.statement import Statement
from .dialects import MySQLDialect, SQLiteDialect, get_dialect
from .operations import (
    DeleteBuilder,
    InsertBuilder,
    SchemaBuilder,
    SelectBuilder,
    UpdateBuilder,
)

__all__ = [
    "quote_identifier",
    "build_indexed_params",
    "remap_record",
    "build_where_clause",
    "normalize_row",
    "Statement",
    "MySQLDialect",
    "SQLiteDialect",
    "get_dialect",
    "SelectBuilder",
    "InsertBuilder",
    "UpdateBuilder",
    "DeleteBuilder",
    "SchemaBuilder",
]
