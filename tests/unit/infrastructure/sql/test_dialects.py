"""
Unit tests for MySQL and SQLite dialects.
"""

import pytest

from sqlcrud.exceptions import InvalidArgumentError
from sqlcrud.infrastructure.sql.dialects import MySQLDialect, SQLiteDialect, get_dialect

pytestmark = pytest.mark.unit


class TestMySQLDialect:
    """Tests for MySQL dialect."""

    @pytest.fixture
    def dialect(self):
        return MySQLDialect()

    def test_dialect_name(self, dialect):
        assert dialect.name == "mysql"

    def test_quote_identifier(self, dialect):
        assert dialect.quote("年金计划号") == "`年金计划号`"

    def test_build_insert(self, dialect):
        sql = dialect.build_insert("users", ["name", "age"], [":col_0", ":col_1"])

        assert sql == "INSERT INTO `users` (`name`, `age`) VALUES (:col_0, :col_1)"

    def test_build_multi_row_insert_uses_format_placeholders(self, dialect):
        sql = dialect.build_multi_row_insert("users", ["name", "age"], 2)

        assert sql == "INSERT INTO `users` (`name`, `age`) VALUES (%s, %s), (%s, %s)"

    def test_table_options_defaults(self, dialect):
        assert dialect.table_options(None, None) == "ENGINE=InnoDB DEFAULT CHARSET=utf8mb4"

    def test_table_options_override(self, dialect):
        assert dialect.table_options("MyISAM", "latin1") == "ENGINE=MyISAM DEFAULT CHARSET=latin1"

    def test_describe_table(self, dialect):
        assert dialect.describe_table("users") == "DESCRIBE `users`"


class TestSQLiteDialect:
    """Tests for SQLite dialect."""

    @pytest.fixture
    def dialect(self):
        return SQLiteDialect()

    def test_multi_row_insert_uses_qmark_placeholders(self, dialect):
        sql = dialect.build_multi_row_insert("t", ["a"], 3)

        assert sql == "INSERT INTO `t` (`a`) VALUES (?), (?), (?)"

    def test_no_table_options(self, dialect):
        assert dialect.table_options("InnoDB", "utf8mb4") == ""

    def test_describe_table(self, dialect):
        assert dialect.describe_table("users") == "PRAGMA table_info(`users`)"

    def test_ddl_attributes(self, dialect):
        assert dialect.auto_increment_keyword == "AUTOINCREMENT"
        assert dialect.supports_column_comments is False


class TestGetDialect:
    @pytest.mark.parametrize(
        "name, expected",
        [("mysql", MySQLDialect), ("mariadb", MySQLDialect), ("sqlite", SQLiteDialect)],
    )
    def test_known_dialects(self, name, expected):
        assert isinstance(get_dialect(name), expected)

    def test_unknown_dialect_raises(self):
        with pytest.raises(InvalidArgumentError, match="Unsupported database dialect"):
            get_dialect("oracle")


class TestRenderNamed:
    def test_mysql_rewrites_generated_placeholders_to_pyformat(self):
        sql = "SELECT * FROM `t` WHERE `a` = :where_0 AND `b` = :where_1"

        assert MySQLDialect().render_named(sql) == (
            "SELECT * FROM `t` WHERE `a` = %(where_0)s AND `b` = %(where_1)s"
        )

    def test_mysql_leaves_literal_colons_and_doubles_percent(self):
        sql = "SELECT name || ':x', '5%' FROM `t` WHERE `a` = :where_0 ORDER BY name || ':x'"

        assert MySQLDialect().render_named(sql) == (
            "SELECT name || ':x', '5%%' FROM `t` WHERE `a` = %(where_0)s ORDER BY name || ':x'"
        )

    def test_mysql_set_and_values_placeholders(self):
        assert MySQLDialect().render_named("VALUES (:col_0, :col_11)") == (
            "VALUES (%(col_0)s, %(col_11)s)"
        )
        assert MySQLDialect().render_named("SET `a` = :set_0") == "SET `a` = %(set_0)s"

    def test_sqlite_binds_named_placeholders_natively(self):
        sql = "SELECT ':x' FROM `t` WHERE `a` = :where_0"

        assert SQLiteDialect().render_named(sql) == sql
