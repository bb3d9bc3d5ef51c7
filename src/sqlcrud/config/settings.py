"""
Configuration management for sqlcrud.

This module provides environment-based configuration using Pydantic BaseSettings,
so connection parameters and table defaults can be supplied per deployment
without touching code.

Environment variables are loaded with the SQLCRUD_ prefix (for example
SQLCRUD_DATABASE_HOST). DATABASE_URL, ENVIRONMENT and LOG_LEVEL are read
without a prefix.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Mapping, Optional

import structlog
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

logger = structlog.get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("SQLCRUD_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE

MYSQL_DRIVERNAME = "mysql+pymysql"


class DatabaseSettings:
    """
    Connection parameters for a MySQL server.

    Supports both component-based and URI-based connection strings. The
    component form is rendered through SQLAlchemy's URL builder so that
    credentials containing reserved characters are escaped.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 3306,
        user: str = "",
        password: str = "",
        db: str = "",
        charset: str = "utf8mb4",
        uri: Optional[str] = None,
    ):
        """
        Initialize database settings.

        Args:
            host: Database host
            port: Database port
            user: Database user
            password: Database password
            db: Database name
            charset: Connection character set
            uri: Complete database URI (overrides other parameters if provided)
        """
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.db = db
        self.charset = charset
        self.uri = uri

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "DatabaseSettings":
        """
        Build settings from a plain mapping of connection parameters.

        Recognised keys are host, port, dbname, username, password, charset
        and url. Missing keys fall back to localhost:3306 with empty
        database name and credentials.
        """
        port = config.get("port")
        return cls(
            host=config.get("host") or "localhost",
            port=int(port) if port is not None else 3306,
            user=config.get("username") or "",
            password=config.get("password") or "",
            db=config.get("dbname") or "",
            charset=config.get("charset") or "utf8mb4",
            uri=config.get("url"),
        )

    def get_url(self) -> URL:
        """Get the SQLAlchemy URL for these settings."""
        if self.uri:
            return make_url(self.uri)
        return URL.create(
            MYSQL_DRIVERNAME,
            username=self.user or None,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=self.db or None,
            query={"charset": self.charset},
        )

    def get_connection_string(self) -> str:
        """
        Get the connection string.

        Returns:
            Database connection string (DSN), password included
        """
        if self.uri:
            return self.uri
        return self.get_url().render_as_string(hide_password=False)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Connection fields use the SQLCRUD_ prefix; DATABASE_URL, ENVIRONMENT and
    LOG_LEVEL are read as-is. When DATABASE_URL is set it wins over the
    individual database_* components.
    """

    ENVIRONMENT: Literal["dev", "test", "prod"] = Field(
        default="dev",
        validation_alias="ENVIRONMENT",
        description="Deployment environment",
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    DATABASE_URL: Optional[str] = Field(
        default=None,
        validation_alias="DATABASE_URL",
        description="Complete SQLAlchemy database URL",
    )

    database_host: str = Field(default="localhost", description="Database host")
    database_port: int = Field(default=3306, description="Database port")
    database_user: str = Field(default="", description="Database user")
    database_password: str = Field(default="", description="Database password")
    database_db: str = Field(default="", description="Database name")
    database_charset: str = Field(
        default="utf8mb4", description="Connection character set"
    )
    connect_timeout: int = Field(
        default=10, description="Connection timeout in seconds"
    )

    table_engine: str = Field(
        default="InnoDB", description="Storage engine used by create_table"
    )
    table_charset: str = Field(
        default="utf8mb4", description="Default charset used by create_table"
    )
    table_schemas_file: Optional[str] = Field(
        default=None,
        description="Optional YAML file with table definitions",
    )

    @property
    def database(self) -> DatabaseSettings:
        """
        Get database settings assembled from the individual fields.

        Returns:
            DatabaseSettings instance
        """
        return DatabaseSettings(
            host=self.database_host,
            port=self.database_port,
            user=self.database_user,
            password=self.database_password,
            db=self.database_db,
            charset=self.database_charset,
            uri=self.DATABASE_URL,
        )

    def get_database_connection_string(self) -> str:
        """Get the database connection string (DATABASE_URL first, then components)."""
        return self.database.get_connection_string()

    @model_validator(mode="after")
    def validate_production_database_url(self) -> "Settings":
        """Validate that production environment does not point at SQLite.

        SQLite is only a development and test target; the DDL this package
        generates (ENGINE, CHARSET, COMMENT) is MySQL syntax.

        Raises:
            ValueError: If ENVIRONMENT is 'prod' and the URL is a SQLite URL
        """
        db_url = self.get_database_connection_string()
        if self.ENVIRONMENT == "prod" and db_url.startswith("sqlite"):
            raise ValueError(
                "Production environment requires a MySQL database, "
                f"got: {db_url[:20]}..."
            )
        return self

    model_config = SettingsConfigDict(
        env_prefix="SQLCRUD_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    settings = Settings()
    logger.debug(
        "configuration.loaded",
        environment=settings.ENVIRONMENT,
        database_host=settings.database_host,
        database_port=settings.database_port,
    )
    return settings
