"""
YAML loader for table definitions.

A table schema file describes tables that create_table can build:

    tables:
      users:
        options: {engine: InnoDB, charset: utf8mb4}
        fields:
          id: {type: INT, unsigned: true, notnull: true, auto_increment: true, primary_key: true}
          name: {type: VARCHAR, length: 64, notnull: true, comment: "Display name"}
          created_at: "TIMESTAMP DEFAULT CURRENT_TIMESTAMP"

Each field is either a literal "TYPE ATTRIBUTES" string or a structured
column definition.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sqlcrud.exceptions import InvalidArgumentError
from sqlcrud.infrastructure.schema.core import ColumnDefinition, TableOptions

logger = structlog.get_logger(__name__)


class ColumnConfig(BaseModel):
    """Schema for a structured column definition."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, description="Column name (defaults to the key)")
    type: str = Field(..., description="SQL type keyword, e.g. VARCHAR")
    length: Optional[Union[int, str, List[Union[int, str]]]] = Field(
        None, description="Length, or [precision, scale]"
    )
    notnull: Optional[bool] = Field(None, description="NOT NULL when true, NULL when false")
    default: Any = Field(None, description="DEFAULT value; omit for no DEFAULT clause")
    auto_increment: bool = False
    unsigned: bool = False
    comment: Optional[str] = None
    primary_key: bool = False

    def to_definition(self, name: str) -> ColumnDefinition:
        # exclude_unset keeps "no default" apart from an explicit null default
        return ColumnDefinition.from_mapping(self.model_dump(exclude_unset=True), name=name)


class TableOptionsConfig(BaseModel):
    """Schema for table-level options."""

    model_config = ConfigDict(extra="forbid")

    engine: Optional[str] = None
    charset: Optional[str] = None


class TableSchema(BaseModel):
    """Schema for one table entry."""

    fields: Dict[str, Union[str, ColumnConfig]] = Field(..., min_length=1)
    options: TableOptionsConfig = Field(default_factory=TableOptionsConfig)

    def field_specs(self) -> Dict[str, Union[str, ColumnDefinition]]:
        """Fields in the shape SchemaBuilder.create_table accepts."""
        return {
            name: spec if isinstance(spec, str) else spec.to_definition(name)
            for name, spec in self.fields.items()
        }

    def table_options(self) -> TableOptions:
        return TableOptions(engine=self.options.engine, charset=self.options.charset)


class TableSchemasFile(BaseModel):
    """Schema for the complete table schema file."""

    tables: Dict[str, TableSchema] = Field(..., min_length=1)


def load_table_schemas(path: Union[str, Path]) -> Dict[str, TableSchema]:
    """
    Load and validate a table schema YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Mapping of table name to TableSchema, in file order

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidArgumentError: If the YAML is malformed or fails validation
    """
    schema_path = Path(path)
    if not schema_path.exists():
        raise FileNotFoundError(f"Table schema file not found: {schema_path}")

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        logger.error(
            "configuration.yaml_parse_error",
            config_path=str(schema_path),
            error=str(e),
        )
        raise InvalidArgumentError(f"Invalid YAML in table schema file: {e}") from e

    try:
        schemas = TableSchemasFile(**raw_config)
    except (ValidationError, TypeError) as e:
        logger.error(
            "configuration.validation_failed",
            config_path=str(schema_path),
            error=str(e),
        )
        raise InvalidArgumentError(f"Table schema validation failed: {e}") from e

    logger.info(
        "configuration.table_schemas_loaded",
        config_path=str(schema_path),
        tables=list(schemas.tables.keys()),
    )
    return schemas.tables
