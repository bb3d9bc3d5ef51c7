"""Pytest configuration and shared database fixtures.

Integration tests run against an in-memory SQLite database through
SQLAlchemy; SQLite accepts the backtick-quoted SQL the builders emit.
"""

from __future__ import annotations

import os
from typing import Generator

import pytest
from sqlalchemy import Connection, Engine, create_engine

# Settings must not pick up a developer's production configuration.
os.environ.setdefault("ENVIRONMENT", "test")

from sqlcrud.config.settings import get_settings  # noqa: E402
from sqlcrud.io.repository import TableRepository  # noqa: E402

USERS_FIELDS = {
    "id": "INTEGER PRIMARY KEY AUTOINCREMENT",
    "name": "VARCHAR(64) NOT NULL",
    "email": "VARCHAR(128) NULL",
    "age": "INTEGER NULL",
}


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Reload settings per test so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sqlite_engine() -> Generator[Engine, None, None]:
    engine = create_engine("sqlite:///:memory:")
    yield engine
    engine.dispose()


@pytest.fixture
def connection(sqlite_engine: Engine) -> Generator[Connection, None, None]:
    with sqlite_engine.connect() as conn:
        yield conn


@pytest.fixture
def repository(connection: Connection) -> TableRepository:
    return TableRepository(connection)


@pytest.fixture
def users_table(repository: TableRepository) -> str:
    """Create an empty `users` table and return its name."""
    result = repository.create_table("users", USERS_FIELDS)
    assert result.success, result.error
    return "users"
