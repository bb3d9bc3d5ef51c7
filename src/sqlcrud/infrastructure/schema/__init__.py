"""Schema records: column definitions, alter actions and query/table options."""

from .core import NOT_SET, AlterAction, ColumnDefinition, QueryOptions, TableOptions

__all__ = [
    "NOT_SET",
    "ColumnDefinition",
    "AlterAction",
    "QueryOptions",
    "TableOptions",
]
