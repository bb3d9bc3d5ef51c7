"""
Database connection bootstrapping.

Turns whatever the caller has (an Engine, a URL, a mapping of connection
parameters, DatabaseSettings, or nothing at all) into a SQLAlchemy Engine and
an open Connection. A failure to connect is fatal and raised as
DatabaseConnectionError; there is no retry.
"""

from typing import Any, Mapping, Optional, Union

from sqlalchemy import Connection, Engine, create_engine
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError

from sqlcrud.config.settings import DatabaseSettings, get_settings
from sqlcrud.exceptions import DatabaseConnectionError, InvalidArgumentError
from sqlcrud.utils.logging import get_logger

logger = get_logger(__name__)

ConnectionSource = Union[Engine, URL, str, Mapping[str, Any], DatabaseSettings, None]


def resolve_database_url(source: ConnectionSource = None) -> Union[URL, str]:
    """
    Resolve a connection source to a SQLAlchemy URL.

    Args:
        source: URL / URL string, mapping of connection parameters
            (host, port, dbname, username, password, charset, url),
            DatabaseSettings, or None to use the configured settings

    Returns:
        URL object or URL string accepted by create_engine
    """
    if source is None:
        settings = get_settings()
        return settings.database.get_url()
    if isinstance(source, (URL, str)):
        return source
    if isinstance(source, DatabaseSettings):
        return source.get_url()
    if isinstance(source, Mapping):
        return DatabaseSettings.from_mapping(source).get_url()
    raise InvalidArgumentError(
        "Connection source must be an Engine, URL, mapping or DatabaseSettings, "
        f"got {type(source).__name__}"
    )


def create_database_engine(source: ConnectionSource = None, **engine_kwargs: Any) -> Engine:
    """
    Create (or pass through) a SQLAlchemy Engine.

    Args:
        source: See resolve_database_url; an Engine is returned unchanged
        **engine_kwargs: Extra keyword arguments for create_engine

    Returns:
        SQLAlchemy Engine
    """
    if isinstance(source, Engine):
        return source

    url = resolve_database_url(source)
    if isinstance(url, str):
        url_text = url
    else:
        url_text = url.render_as_string(hide_password=True)
    if url_text.startswith("mysql"):
        connect_args = dict(engine_kwargs.pop("connect_args", {}) or {})
        connect_args.setdefault("connect_timeout", get_settings().connect_timeout)
        engine_kwargs["connect_args"] = connect_args

    try:
        engine = create_engine(url, **engine_kwargs)
    except (SQLAlchemyError, ImportError, ValueError) as e:
        raise DatabaseConnectionError(f"Database connection failed: {e}") from e

    logger.info("database.engine.created", dialect=engine.dialect.name)
    return engine


def open_connection(source: Union[ConnectionSource, Connection] = None, **engine_kwargs: Any) -> Connection:
    """
    Open a connection, creating an engine first when needed.

    Raises:
        DatabaseConnectionError: If the database cannot be reached
    """
    if isinstance(source, Connection):
        return source

    engine = create_database_engine(source, **engine_kwargs)
    try:
        connection = engine.connect()
    except SQLAlchemyError as e:
        logger.error(
            "database.connection.failed",
            dialect=engine.dialect.name,
            error=str(e),
        )
        raise DatabaseConnectionError(f"Database connection failed: {e}") from e

    logger.info("database.connection.opened", dialect=engine.dialect.name)
    return connection
