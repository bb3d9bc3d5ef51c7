"""Statement builders for each CRUD and DDL operation."""

from .ddl import SchemaBuilder, format_default
from .delete import DeleteBuilder
from .insert import InsertBuilder
from .select import SelectBuilder, build_field_list
from .update import UpdateBuilder

__all__ = [
    "SelectBuilder",
    "InsertBuilder",
    "UpdateBuilder",
    "DeleteBuilder",
    "SchemaBuilder",
    "build_field_list",
    "format_default",
]
