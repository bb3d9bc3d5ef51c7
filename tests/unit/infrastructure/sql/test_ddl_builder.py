"""
Unit tests for SchemaBuilder DDL generation.
"""

import pytest

from sqlcrud.exceptions import InvalidArgumentError
from sqlcrud.infrastructure.schema.core import AlterAction, ColumnDefinition
from sqlcrud.infrastructure.sql.dialects import MySQLDialect, SQLiteDialect
from sqlcrud.infrastructure.sql.operations.ddl import (
    SchemaBuilder,
    base_type,
    format_default,
    is_numeric,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def builder():
    return SchemaBuilder(MySQLDialect())


class TestFormatDefault:
    @pytest.mark.parametrize(
        "column, expected",
        [
            (ColumnDefinition("c", "INT", default=None), "NULL"),
            (ColumnDefinition("c", "DATETIME", default="current_timestamp"), "CURRENT_TIMESTAMP"),
            (ColumnDefinition("c", "TINYINT", default=True), "1"),
            (ColumnDefinition("c", "TINYINT", default=False), "0"),
            (ColumnDefinition("c", "INT", default=0), "0"),
            (ColumnDefinition("c", "DECIMAL", default="1.50"), "1.50"),
            (ColumnDefinition("c", "VARCHAR", default="0"), "'0'"),
            (ColumnDefinition("c", "varchar", default=5), "'5'"),
            (ColumnDefinition("c", "VARCHAR", default="new"), "'new'"),
            (ColumnDefinition("c", "VARCHAR", default="it's"), "'it''s'"),
        ],
    )
    def test_rendering(self, column, expected):
        assert format_default(column) == expected

    def test_is_numeric_rejects_bool(self):
        assert is_numeric(True) is False
        assert is_numeric("-3.5e2") is True
        assert is_numeric("abc") is False

    def test_base_type(self):
        assert base_type("decimal(10,2)") == "DECIMAL"
        assert base_type(" varchar ") == "VARCHAR"


class TestCompileColumn:
    def test_full_definition(self, builder):
        column = ColumnDefinition(
            name="id",
            type="INT",
            length=11,
            unsigned=True,
            notnull=True,
            auto_increment=True,
            primary_key=True,
            comment="Row id",
        )

        assert builder.compile_column(column) == (
            "`id` INT(11) UNSIGNED NOT NULL PRIMARY KEY AUTO_INCREMENT COMMENT 'Row id'"
        )

    def test_precision_and_scale_length(self, builder):
        column = ColumnDefinition("price", "DECIMAL", length=(10, 2), notnull=True, default=0)

        assert builder.compile_column(column) == "`price` DECIMAL(10,2) NOT NULL DEFAULT 0"

    def test_bare_null_without_nullability_or_default(self, builder):
        assert builder.compile_column(ColumnDefinition("note", "TEXT")) == "`note` TEXT NULL"

    def test_default_only_omits_null(self, builder):
        column = ColumnDefinition("status", "VARCHAR", length=16, default="new")

        assert builder.compile_column(column) == "`status` VARCHAR(16) DEFAULT 'new'"

    def test_explicit_null_default(self, builder):
        column = ColumnDefinition("deleted_at", "DATETIME", notnull=False, default=None)

        assert builder.compile_column(column) == "`deleted_at` DATETIME NULL DEFAULT NULL"

    def test_boolean_default(self, builder):
        column = ColumnDefinition("active", "TINYINT", length=1, notnull=True, default=True)

        assert builder.compile_column(column) == "`active` TINYINT(1) NOT NULL DEFAULT 1"

    def test_current_timestamp_stays_bare(self, builder):
        column = ColumnDefinition("created_at", "TIMESTAMP", default="CURRENT_TIMESTAMP")

        assert builder.compile_column(column) == "`created_at` TIMESTAMP DEFAULT CURRENT_TIMESTAMP"

    def test_comment_quote_is_doubled(self, builder):
        column = ColumnDefinition("name", "VARCHAR", length=32, comment="user's name")

        assert builder.compile_column(column) == (
            "`name` VARCHAR(32) NULL COMMENT 'user''s name'"
        )

    def test_sqlite_drops_comment_and_uses_autoincrement(self):
        column = ColumnDefinition(
            "id", "INTEGER", primary_key=True, auto_increment=True, comment="ignored"
        )

        assert SchemaBuilder(SQLiteDialect()).compile_column(column) == (
            "`id` INTEGER NULL PRIMARY KEY AUTOINCREMENT"
        )


class TestCreateTable:
    def test_string_definitions_with_options(self, builder):
        statement = builder.create_table(
            "users",
            {"id": "INT AUTO_INCREMENT PRIMARY KEY", "name": "VARCHAR(64) NOT NULL"},
            {"engine": "InnoDB", "charset": "utf8mb4"},
        )

        assert statement.sql == (
            "CREATE TABLE IF NOT EXISTS `users` "
            "(`id` INT AUTO_INCREMENT PRIMARY KEY, `name` VARCHAR(64) NOT NULL) "
            "ENGINE=InnoDB DEFAULT CHARSET=utf8mb4"
        )
        assert statement.params == {}

    def test_default_table_options(self, builder):
        statement = builder.create_table("t", {"a": "INT"})

        assert statement.sql.endswith("ENGINE=InnoDB DEFAULT CHARSET=utf8mb4")

    def test_structured_sequence(self, builder):
        statement = builder.create_table(
            "t",
            [
                {"name": "id", "type": "INT", "notnull": True},
                ColumnDefinition("label", "VARCHAR", length=8),
            ],
        )

        assert statement.sql.startswith(
            "CREATE TABLE IF NOT EXISTS `t` (`id` INT NOT NULL, `label` VARCHAR(8) NULL)"
        )

    def test_mapping_of_structured_definitions_takes_key_as_name(self, builder):
        statement = builder.create_table(
            "t", {"score": {"type": "INT", "default": 0}}
        )

        assert "(`score` INT DEFAULT 0)" in statement.sql

    def test_sqlite_has_no_table_options(self):
        statement = SchemaBuilder(SQLiteDialect()).create_table(
            "t", {"a": "INT"}, {"engine": "InnoDB"}
        )

        assert statement.sql == "CREATE TABLE IF NOT EXISTS `t` (`a` INT)"

    def test_structured_definition_without_type_raises(self, builder):
        with pytest.raises(InvalidArgumentError, match="'name' and 'type'"):
            builder.create_table("t", [{"name": "a"}])

    def test_no_fields_raises(self, builder):
        with pytest.raises(InvalidArgumentError):
            builder.create_table("t", {})


class TestAlterTable:
    def test_multiple_actions(self, builder):
        statement = builder.alter_table(
            "users",
            [
                {"type": "ADD", "field": "age", "definition": "INT NULL", "after": "name"},
                AlterAction(type="DROP", field="legacy"),
                {"type": "MODIFY", "field": "name", "definition": "VARCHAR(128) NOT NULL"},
            ],
        )

        assert statement.sql == (
            "ALTER TABLE `users` ADD `age` INT NULL AFTER `name`, "
            "DROP `legacy`, MODIFY `name` VARCHAR(128) NOT NULL"
        )

    def test_action_without_field_raises(self, builder):
        with pytest.raises(InvalidArgumentError, match="'type' and 'field'"):
            builder.alter_table("users", [{"type": "DROP"}])

    def test_no_actions_raises(self, builder):
        with pytest.raises(InvalidArgumentError):
            builder.alter_table("users", [])


def test_describe_uses_dialect(builder):
    assert builder.describe("users").sql == "DESCRIBE `users`"
