"""
Schema operations mixin: create_table, alter_table and bulk creation from a
YAML table schema file.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from sqlcrud.config.schema_loader import load_table_schemas
from sqlcrud.config.settings import get_settings
from sqlcrud.exceptions import InvalidArgumentError
from sqlcrud.infrastructure.schema.core import AlterAction, TableOptions
from sqlcrud.infrastructure.sql.operations.ddl import Fields
from sqlcrud.utils.logging import get_logger

from .models import OperationResult

logger = get_logger(__name__)


def _succeeded(result) -> bool:
    return True


class SchemaOpsMixin:
    """Mixin providing DDL operations."""

    def create_table(
        self,
        table: str,
        fields: Fields,
        options: Union[TableOptions, Mapping[str, Any], None] = None,
    ) -> OperationResult:
        """
        Create a table if it does not exist.

        Args:
            table: Table name
            fields: ``{name: "TYPE ATTRS" | {...} | ColumnDefinition}`` or a
                sequence of structured definitions
            options: engine / charset; unset values come from settings

        Returns:
            OperationResult whose value is True on success

        Raises:
            InvalidArgumentError: A structured definition lacks name or type
        """
        if options is None:
            options = TableOptions()
        elif not isinstance(options, TableOptions):
            options = TableOptions.from_mapping(options)
        settings = get_settings()
        options = TableOptions(
            engine=options.engine or settings.table_engine,
            charset=options.charset or settings.table_charset,
        )

        statement = self.schema_builder.create_table(table, fields, options)
        return self._run("create_table", table, statement, _succeeded)

    def alter_table(
        self,
        table: str,
        actions: Sequence[Union[AlterAction, Mapping[str, Any]]],
    ) -> OperationResult:
        """
        Apply a list of alter actions in one ALTER TABLE statement.

        Each action is an AlterAction or a mapping with type, field and
        optional definition / after.

        Raises:
            InvalidArgumentError: No actions, or an action lacks type or field
        """
        statement = self.schema_builder.alter_table(table, actions)
        return self._run("alter_table", table, statement, _succeeded)

    def create_tables_from_file(
        self, path: Union[str, Path, None] = None
    ) -> Dict[str, OperationResult]:
        """
        Create every table described in a YAML table schema file.

        Args:
            path: Schema file; defaults to the table_schemas_file setting

        Returns:
            Mapping of table name to its create_table result

        Raises:
            InvalidArgumentError: No path given or configured, or invalid file
            FileNotFoundError: If the file does not exist
        """
        schema_path: Optional[Union[str, Path]] = path or get_settings().table_schemas_file
        if not schema_path:
            raise InvalidArgumentError(
                "No table schema file given and SQLCRUD_TABLE_SCHEMAS_FILE is not set"
            )

        results: Dict[str, OperationResult] = {}
        for table, schema in load_table_schemas(schema_path).items():
            results[table] = self.create_table(
                table, schema.field_specs(), schema.table_options()
            )

        logger.info(
            "table_repository.create_tables_from_file.completed",
            schema_file=str(schema_path),
            created=[name for name, result in results.items() if result.success],
            failed=[name for name, result in results.items() if not result.success],
        )
        return results
