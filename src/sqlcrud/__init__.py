"""
sqlcrud - parameterized CRUD and DDL statements from plain data structures.

Builds backtick-quoted, parameterized SQL for find/insert/update/delete/count
and CREATE/ALTER TABLE from mappings and records, and runs it through a
SQLAlchemy connection.
"""

__version__ = "0.1.0"

from sqlcrud.exceptions import (
    DatabaseConnectionError,
    InvalidArgumentError,
    SqlCrudError,
    StatementExecutionError,
    TransactionStateError,
)
from sqlcrud.infrastructure.schema import (
    NOT_SET,
    AlterAction,
    ColumnDefinition,
    QueryOptions,
    TableOptions,
)
from sqlcrud.io.repository import OperationResult, TableRepository

__all__ = [
    "TableRepository",
    "OperationResult",
    "ColumnDefinition",
    "AlterAction",
    "QueryOptions",
    "TableOptions",
    "NOT_SET",
    "SqlCrudError",
    "InvalidArgumentError",
    "DatabaseConnectionError",
    "StatementExecutionError",
    "TransactionStateError",
]
