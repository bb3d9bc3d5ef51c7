"""
Unit tests for UpdateBuilder and DeleteBuilder.
"""

import pytest

from sqlcrud.exceptions import InvalidArgumentError
from sqlcrud.infrastructure.sql.dialects import MySQLDialect
from sqlcrud.infrastructure.sql.operations.delete import DeleteBuilder
from sqlcrud.infrastructure.sql.operations.update import UpdateBuilder

pytestmark = pytest.mark.unit


class TestUpdateBuilder:
    @pytest.fixture
    def builder(self):
        return UpdateBuilder(MySQLDialect())

    def test_set_and_where(self, builder):
        statement = builder.update("users", {"name": "Bea", "age": 30}, {"id": 7})

        assert statement.sql == (
            "UPDATE `users` SET `name` = :set_0, `age` = :set_1 WHERE `id` = :where_0"
        )
        assert statement.params == {"set_0": "Bea", "set_1": 30, "where_0": 7}

    def test_same_column_in_set_and_where_binds_twice(self, builder):
        statement = builder.update("users", {"status": "archived"}, {"status": "active"})

        assert statement.sql == (
            "UPDATE `users` SET `status` = :set_0 WHERE `status` = :where_0"
        )
        assert statement.params == {"set_0": "archived", "where_0": "active"}

    def test_without_conditions_updates_everything(self, builder):
        statement = builder.update("users", {"age": 0})

        assert statement.sql == "UPDATE `users` SET `age` = :set_0"

    def test_empty_data_raises(self, builder):
        with pytest.raises(InvalidArgumentError, match="must not be empty"):
            builder.update("users", {}, {"id": 1})


class TestDeleteBuilder:
    @pytest.fixture
    def builder(self):
        return DeleteBuilder(MySQLDialect())

    def test_with_conditions(self, builder):
        statement = builder.delete("users", {"id": 3, "name": "Cy"})

        assert statement.sql == (
            "DELETE FROM `users` WHERE `id` = :where_0 AND `name` = :where_1"
        )
        assert statement.params == {"where_0": 3, "where_1": "Cy"}

    def test_empty_conditions_are_unfiltered(self, builder):
        statement = builder.delete("users", {})

        assert statement.sql == "DELETE FROM `users`"
        assert statement.params == {}
