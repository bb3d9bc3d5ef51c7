"""
Core TableRepository class.

This module contains the repository class that executes built statements
over a SQLAlchemy Connection. The individual operations are composed from
sibling modules using mixins.
"""

import time
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional

from sqlalchemy import Connection, CursorResult, RootTransaction
from sqlalchemy.exc import SQLAlchemyError, StatementError

from sqlcrud.exceptions import StatementExecutionError, TransactionStateError
from sqlcrud.infrastructure.sql.core.statement import Statement
from sqlcrud.infrastructure.sql.dialects import BaseDialect, get_dialect
from sqlcrud.infrastructure.sql.operations import (
    DeleteBuilder,
    InsertBuilder,
    SchemaBuilder,
    SelectBuilder,
    UpdateBuilder,
)
from sqlcrud.io.connectors.database_connector import ConnectionSource, open_connection
from sqlcrud.utils.logging import bind_context, get_logger

from .models import OperationResult
from .query_ops import QueryOpsMixin
from .schema_ops import SchemaOpsMixin
from .write_ops import WriteOpsMixin

logger = get_logger(__name__)

# Prefix of the human readable failure message, per operation
FAILURE_LABELS = {
    "find_one": "Query",
    "find_all": "Query",
    "count": "Query",
    "get_table_structure": "Query",
    "insert": "Insert",
    "batch_insert": "Batch insert",
    "update": "Update",
    "delete": "Delete",
    "create_table": "Create table",
    "alter_table": "Alter table",
}


def _driver_message(exc: SQLAlchemyError) -> str:
    """Failure text without the SQL and ``[parameters: ...]`` that StatementError appends."""
    if isinstance(exc, StatementError):
        if exc.orig is not None:
            return str(exc.orig)
        return str(exc.args[0]) if exc.args else type(exc).__name__
    return str(exc)


# Statements without parameters must reach the cursor without an argument
# collection, otherwise pyformat drivers treat "%" in DDL literals as markers.
_RAW_EXECUTION = {"no_parameters": True}


class TableRepository(QueryOpsMixin, WriteOpsMixin, SchemaOpsMixin):
    """
    Table-level CRUD and DDL over a single database connection.

    Every operation builds one statement, runs it in one round trip and
    returns an OperationResult. Invalid caller input raises
    InvalidArgumentError before anything is sent to the database.

    Composed using mixins:
    - QueryOpsMixin: find_one, find_all, count, get_table_structure
    - WriteOpsMixin: insert, batch_insert, update, delete
    - SchemaOpsMixin: create_table, alter_table, create_tables_from_file

    Attributes:
        connection: SQLAlchemy Connection for database operations.
        dialect: SQL dialect matching the connection's backend.
        autocommit: Commit each statement run outside an explicit transaction.

    Example:
        >>> from sqlalchemy import create_engine
        >>> engine = create_engine("sqlite:///:memory:")
        >>> with engine.connect() as conn:
        ...     repo = TableRepository(conn)
        ...     repo.insert("users", {"name": "Ann"}).value
    """

    def __init__(
        self,
        connection: Connection,
        dialect: Optional[BaseDialect] = None,
        autocommit: bool = True,
    ) -> None:
        """
        Initialize the repository with a database connection.

        Args:
            connection: SQLAlchemy Connection
            dialect: Override the dialect detected from the connection
            autocommit: When False the caller owns the transaction lifecycle
        """
        self.connection = connection
        self.dialect = dialect or get_dialect(connection.dialect.name)
        self.autocommit = autocommit
        self._transaction: Optional[RootTransaction] = None

        self.select_builder = SelectBuilder(self.dialect)
        self.insert_builder = InsertBuilder(self.dialect)
        self.update_builder = UpdateBuilder(self.dialect)
        self.delete_builder = DeleteBuilder(self.dialect)
        self.schema_builder = SchemaBuilder(self.dialect)

    @classmethod
    def connect(
        cls,
        source: ConnectionSource = None,
        autocommit: bool = True,
        **engine_kwargs: Any,
    ) -> "TableRepository":
        """
        Open a connection and wrap it in a repository.

        Args:
            source: Engine, URL, mapping of connection parameters,
                DatabaseSettings, or None for the configured settings

        Raises:
            DatabaseConnectionError: If the database cannot be reached
        """
        return cls(open_connection(source, **engine_kwargs), autocommit=autocommit)

    def close(self) -> None:
        """Close the underlying connection."""
        self.connection.close()
        self._transaction = None
        logger.info("table_repository.closed")

    # ------------------------------------------------------------------
    # Transactions
    # ------------------------------------------------------------------

    @property
    def in_transaction(self) -> bool:
        return self._transaction is not None and self._transaction.is_active

    def begin_transaction(self) -> None:
        """Start an explicit transaction; statements are not committed individually."""
        if self.in_transaction:
            raise TransactionStateError("A transaction is already active")
        if self.connection.in_transaction():
            if not self.autocommit:
                raise TransactionStateError(
                    "Connection already has an open transaction; "
                    "commit or roll it back first"
                )
            # implicit transaction SQLAlchemy began on first use; nothing pending
            self.connection.commit()
        self._transaction = self.connection.begin()
        logger.debug("table_repository.transaction.begun")

    def commit(self) -> None:
        if not self.in_transaction:
            raise TransactionStateError("No active transaction to commit")
        self._transaction.commit()
        self._transaction = None
        logger.debug("table_repository.transaction.committed")

    def rollback(self) -> None:
        if not self.in_transaction:
            raise TransactionStateError("No active transaction to roll back")
        self._transaction.rollback()
        self._transaction = None
        logger.debug("table_repository.transaction.rolled_back")

    @contextmanager
    def transaction(self) -> Iterator["TableRepository"]:
        """Run a block in a transaction: commit on success, roll back on any exception."""
        self.begin_transaction()
        try:
            yield self
        except BaseException:
            if self.in_transaction:
                self.rollback()
            raise
        else:
            if self.in_transaction:
                self.commit()

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def _execute(self, statement: Statement) -> CursorResult:
        """
        Send a statement straight to the DBAPI cursor.

        Named placeholders are rewritten by the dialect rather than parsed by
        ``text()``, so verbatim fragments (projection, ORDER BY, DDL
        literals) reach the database unchanged whether or not the statement
        also binds parameters.
        """
        if not statement.params:
            return self.connection.exec_driver_sql(
                statement.sql, execution_options=_RAW_EXECUTION
            )
        if statement.is_positional:
            return self.connection.exec_driver_sql(statement.sql, statement.params)
        return self.connection.exec_driver_sql(
            self.dialect.render_named(statement.sql), statement.params
        )

    def _end_implicit_transaction(self, success: bool) -> None:
        if not self.autocommit or self._transaction is not None:
            return
        if success:
            self.connection.commit()
        else:
            self.connection.rollback()

    def _run(
        self,
        operation: str,
        table: str,
        statement: Statement,
        handler: Callable[[CursorResult], Any],
    ) -> OperationResult:
        """Execute a statement and convert the outcome into an OperationResult."""
        log = bind_context(__name__, operation=operation, table=table)
        start_time = time.perf_counter()
        try:
            result = self._execute(statement)
            value = handler(result)
            self._end_implicit_transaction(success=True)
        except SQLAlchemyError as exc:
            try:
                self._end_implicit_transaction(success=False)
            except SQLAlchemyError as rollback_error:
                log.warning(
                    "table_repository.rollback.failed",
                    error=_driver_message(rollback_error),
                )
            duration_ms = (time.perf_counter() - start_time) * 1000
            error = StatementExecutionError(
                f"{FAILURE_LABELS.get(operation, operation)} failed: {_driver_message(exc)}",
                operation=operation,
                table=table,
                sql=statement.sql,
                original_error=exc,
            )
            log.error(
                "table_repository.statement.failed",
                duration_ms=duration_ms,
                **error.to_dict(),
            )
            return OperationResult(
                operation=operation,
                table=table,
                success=False,
                error=str(error),
                sql=statement.sql,
                duration_ms=duration_ms,
                original_error=exc,
            )

        duration_ms = (time.perf_counter() - start_time) * 1000
        log.debug(
            f"table_repository.{operation}.completed",
            sql=statement.sql,
            param_count=statement.param_count,
            duration_ms=duration_ms,
        )
        return OperationResult(
            operation=operation,
            table=table,
            success=True,
            value=value,
            sql=statement.sql,
            duration_ms=duration_ms,
        )
