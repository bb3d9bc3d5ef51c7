"""SQL dialects and lookup by SQLAlchemy dialect name."""

from typing import Dict, Type

from sqlcrud.exceptions import InvalidArgumentError

from .base import BaseDialect, Dialect
from .mysql import MySQLDialect
from .sqlite import SQLiteDialect

_DIALECTS: Dict[str, Type[BaseDialect]] = {
    "mysql": MySQLDialect,
    "mariadb": MySQLDialect,
    "sqlite": SQLiteDialect,
}


def get_dialect(name: str) -> BaseDialect:
    """
    Get a dialect instance by SQLAlchemy dialect name.

    Raises:
        InvalidArgumentError: If the backend is not supported
    """
    try:
        return _DIALECTS[name.lower()]()
    except KeyError:
        raise InvalidArgumentError(
            f"Unsupported database dialect '{name}'; "
            f"expected one of {sorted(_DIALECTS)}"
        ) from None


__all__ = ["Dialect", "BaseDialect", "MySQLDialect", "SQLiteDialect", "get_dialect"]
