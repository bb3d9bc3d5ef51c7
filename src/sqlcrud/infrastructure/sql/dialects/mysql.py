"""
MySQL-specific SQL dialect implementation.

PyMySQL formats parameters into the statement with ``%``: positional
placeholders are ``%s``, named ones ``%(name)s``, and literal percent signs
are doubled whenever parameters are passed. Table options render as
``ENGINE=... DEFAULT CHARSET=...``.
"""

from typing import Optional

from ..core.parameters import NAMED_PLACEHOLDER_RE
from .base import BaseDialect

DEFAULT_ENGINE = "InnoDB"
DEFAULT_CHARSET = "utf8mb4"


class MySQLDialect(BaseDialect):
    """MySQL SQL dialect implementation."""

    name = "mysql"
    positional_placeholder = "%s"
    auto_increment_keyword = "AUTO_INCREMENT"
    supports_column_comments = True

    def table_options(self, engine: Optional[str], charset: Optional[str]) -> str:
        """Render ENGINE and DEFAULT CHARSET, falling back to InnoDB/utf8mb4."""
        return (
            f"ENGINE={engine or DEFAULT_ENGINE} "
            f"DEFAULT CHARSET={charset or DEFAULT_CHARSET}"
        )

    def describe_table(self, table: str) -> str:
        return f"DESCRIBE {self.quote(table)}"

    def render_named(self, sql: str) -> str:
        """
        Example:
            >>> MySQLDialect().render_named("SELECT '5%' FROM `t` WHERE `a` = :where_0")
            "SELECT '5%%' FROM `t` WHERE `a` = %(where_0)s"
        """
        return NAMED_PLACEHOLDER_RE.sub(r"%(\1)s", sql.replace("%", "%%"))
