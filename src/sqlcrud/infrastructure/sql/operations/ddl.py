"""
DDL SQL generation: CREATE TABLE, ALTER TABLE and column introspection.

Column definitions come either as literal "TYPE ATTRIBUTES" strings or as
structured ColumnDefinition records, which are compiled attribute by
attribute in MySQL column-definition order.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, List, Mapping, Sequence, Union

from sqlcrud.exceptions import InvalidArgumentError
from sqlcrud.infrastructure.schema.core import (
    AlterAction,
    ColumnDefinition,
    TableOptions,
)

from ..core.statement import Statement
from ..dialects.base import Dialect

# Column types whose defaults are always quoted, even when numeric-looking
STRING_TYPES = frozenset(
    {"CHAR", "VARCHAR", "TEXT", "TINYTEXT", "MEDIUMTEXT", "LONGTEXT", "ENUM", "SET"}
)

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")

FieldSpec = Union[str, Mapping[str, Any], ColumnDefinition]
Fields = Union[Mapping[str, FieldSpec], Sequence[Union[Mapping[str, Any], ColumnDefinition]]]


def quote_literal(value: str) -> str:
    """Quote a string literal, doubling embedded single quotes."""
    return "'" + value.replace("'", "''") + "'"


def is_numeric(value: Any) -> bool:
    """True for numbers and numeric strings; False for booleans."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return True
    return isinstance(value, str) and bool(_NUMERIC_RE.match(value))


def base_type(column_type: str) -> str:
    """
    Extract the bare type keyword.

    Examples:
        >>> base_type("varchar")
        'VARCHAR'
        >>> base_type("DECIMAL(10,2)")
        'DECIMAL'
    """
    return re.split(r"[\s(]", column_type.strip(), maxsplit=1)[0].upper()


def format_default(column: ColumnDefinition) -> str:
    """
    Render the value of a DEFAULT clause.

    None becomes NULL, CURRENT_TIMESTAMP (any case) stays a bare keyword,
    booleans become 1/0, numbers stay unquoted unless the column is
    string-typed, and everything else is quoted.
    """
    default = column.default
    if default is None:
        return "NULL"
    if isinstance(default, str) and default.strip().upper() == "CURRENT_TIMESTAMP":
        return "CURRENT_TIMESTAMP"
    if isinstance(default, bool):
        return "1" if default else "0"
    if is_numeric(default) and base_type(column.type) not in STRING_TYPES:
        return str(default).strip()
    return quote_literal(str(default))


class SchemaBuilder:
    """Builds CREATE TABLE, ALTER TABLE and table introspection statements."""

    def __init__(self, dialect: Dialect):
        self.dialect = dialect

    def compile_column(self, column: ColumnDefinition) -> str:
        """
        Compile a structured column definition to SQL.

        Example:
            >>> from sqlcrud.infrastructure.sql import MySQLDialect
            >>> SchemaBuilder(MySQLDialect()).compile_column(
            ...     ColumnDefinition(name="price", type="DECIMAL", length=(10, 2), notnull=True, default=0)
            ... )
            '`price` DECIMAL(10,2) NOT NULL DEFAULT 0'
        """
        parts: List[str] = [f"{self.dialect.quote(column.name)} {column.type}"]

        if column.length is not None and column.length != "":
            if isinstance(column.length, (tuple, list)):
                length = ",".join(str(item) for item in column.length)
            else:
                length = str(column.length)
            parts[0] += f"({length})"

        if column.unsigned:
            parts.append("UNSIGNED")

        if column.notnull is not None:
            parts.append("NOT NULL" if column.notnull else "NULL")
        elif not column.has_default:
            parts.append("NULL")

        if column.has_default:
            parts.append(f"DEFAULT {format_default(column)}")

        if column.primary_key:
            parts.append("PRIMARY KEY")

        if column.auto_increment:
            parts.append(self.dialect.auto_increment_keyword)

        if column.comment is not None and self.dialect.supports_column_comments:
            parts.append(f"COMMENT {quote_literal(str(column.comment))}")

        return " ".join(parts)

    def _field_definitions(self, fields: Fields) -> List[str]:
        definitions: List[str] = []
        if isinstance(fields, Mapping):
            for name, spec in fields.items():
                if isinstance(spec, str):
                    definitions.append(f"{self.dialect.quote(name)} {spec}")
                elif isinstance(spec, ColumnDefinition):
                    definitions.append(self.compile_column(spec))
                elif isinstance(spec, Mapping):
                    definitions.append(
                        self.compile_column(ColumnDefinition.from_mapping(spec, name=name))
                    )
                else:
                    raise InvalidArgumentError(
                        f"Unsupported definition for column '{name}': {type(spec).__name__}"
                    )
            return definitions

        for spec in fields:
            if isinstance(spec, ColumnDefinition):
                definitions.append(self.compile_column(spec))
            elif isinstance(spec, Mapping):
                definitions.append(self.compile_column(ColumnDefinition.from_mapping(spec)))
            else:
                raise InvalidArgumentError(
                    f"Unsupported column definition: {type(spec).__name__}"
                )
        return definitions

    def create_table(
        self,
        table: str,
        fields: Fields,
        options: Union[TableOptions, Mapping[str, Any], None] = None,
    ) -> Statement:
        """
        Build ``CREATE TABLE IF NOT EXISTS``.

        Args:
            table: Table name
            fields: Either ``{name: "TYPE ATTRS" | {...} | ColumnDefinition}``
                or a sequence of mappings / ColumnDefinition records
            options: engine and charset (rendered by the MySQL dialect)

        Raises:
            InvalidArgumentError: No fields, or a structured definition
                lacking name or type
        """
        if not fields:
            raise InvalidArgumentError("create_table requires at least one field")
        if options is None:
            options = TableOptions()
        elif not isinstance(options, TableOptions):
            options = TableOptions.from_mapping(options)

        definitions = self._field_definitions(fields)
        sql = (
            f"CREATE TABLE IF NOT EXISTS {self.dialect.quote(table)} "
            f"({', '.join(definitions)})"
        )
        table_options = self.dialect.table_options(options.engine, options.charset)
        if table_options:
            sql += f" {table_options}"
        return Statement(sql)

    def compile_alter_action(self, action: AlterAction) -> str:
        clause = f"{action.type} {self.dialect.quote(action.field)}"
        if action.definition:
            clause += f" {action.definition}"
        if action.after:
            clause += f" AFTER {self.dialect.quote(action.after)}"
        return clause

    def alter_table(
        self,
        table: str,
        actions: Sequence[Union[AlterAction, Mapping[str, Any]]],
    ) -> Statement:
        """
        Build one ALTER TABLE statement from a list of actions.

        Raises:
            InvalidArgumentError: No actions, or an action lacking type or field
        """
        if not actions:
            raise InvalidArgumentError("alter_table requires at least one action")
        clauses = [
            self.compile_alter_action(
                action if isinstance(action, AlterAction) else AlterAction.from_mapping(action)
            )
            for action in actions
        ]
        return Statement(f"ALTER TABLE {self.dialect.quote(table)} {', '.join(clauses)}")

    def describe(self, table: str) -> Statement:
        """Build the dialect's column introspection statement."""
        return Statement(self.dialect.describe_table(table))
