"""
Tests for database connection bootstrapping.
"""

import pytest
from sqlalchemy import Connection, Engine, create_engine
from sqlalchemy.engine import URL

from sqlcrud.config.settings import DatabaseSettings
from sqlcrud.exceptions import DatabaseConnectionError, InvalidArgumentError
from sqlcrud.io.connectors.database_connector import (
    create_database_engine,
    open_connection,
    resolve_database_url,
)


class TestResolveDatabaseUrl:
    @pytest.mark.unit
    def test_mapping_builds_mysql_url(self):
        url = resolve_database_url(
            {"host": "db", "port": 3307, "dbname": "app", "username": "u", "password": "p"}
        )

        assert isinstance(url, URL)
        assert url.drivername == "mysql+pymysql"
        assert (url.host, url.port, url.database, url.username) == ("db", 3307, "app", "u")

    @pytest.mark.unit
    def test_string_passes_through(self):
        assert resolve_database_url("sqlite://") == "sqlite://"

    @pytest.mark.unit
    def test_database_settings(self):
        url = resolve_database_url(DatabaseSettings(host="h", db="d"))

        assert url.host == "h"
        assert url.database == "d"

    @pytest.mark.unit
    def test_none_uses_configured_settings(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")

        url = resolve_database_url(None)

        assert url.get_backend_name() == "sqlite"

    @pytest.mark.unit
    def test_unsupported_source_rejected(self):
        with pytest.raises(InvalidArgumentError):
            resolve_database_url(42)


class TestCreateDatabaseEngine:
    @pytest.mark.unit
    def test_engine_passes_through(self):
        engine = create_engine("sqlite://")

        assert create_database_engine(engine) is engine

    @pytest.mark.unit
    def test_sqlite_url(self):
        engine = create_database_engine("sqlite://")

        assert isinstance(engine, Engine)
        assert engine.dialect.name == "sqlite"
        engine.dispose()

    @pytest.mark.unit
    def test_mysql_engine_from_mapping_is_lazy(self):
        # create_engine does not connect, so no server is needed here
        engine = create_database_engine({"host": "db.invalid", "dbname": "app"})

        assert engine.dialect.name == "mysql"
        assert engine.url.query["charset"] == "utf8mb4"
        engine.dispose()

    @pytest.mark.unit
    def test_unknown_driver_raises_connection_error(self):
        with pytest.raises(DatabaseConnectionError, match="Database connection failed"):
            create_database_engine("nosuchdb://host/db")


class TestOpenConnection:
    @pytest.mark.unit
    def test_open_sqlite_connection(self):
        connection = open_connection("sqlite://")

        assert isinstance(connection, Connection)
        connection.close()

    @pytest.mark.unit
    def test_connection_passes_through(self, connection):
        assert open_connection(connection) is connection

    @pytest.mark.unit
    def test_unreachable_database_raises(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'missing' / 'nested' / 'db.sqlite'}"

        with pytest.raises(DatabaseConnectionError, match="Database connection failed"):
            open_connection(url)
