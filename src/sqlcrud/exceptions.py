"""
Exception hierarchy for statement building and execution.

Caller-input problems are raised immediately as InvalidArgumentError.
Driver failures during execution are not raised by the repository; they are
returned as failed OperationResult values, and StatementExecutionError is
only produced when a caller unwraps such a result.
"""

from typing import Any, Dict, Optional


class SqlCrudError(Exception):
    """Base exception for all sqlcrud errors."""

    pass


class InvalidArgumentError(SqlCrudError, ValueError):
    """Raised when caller-supplied data cannot be turned into a statement."""

    pass


class DatabaseConnectionError(SqlCrudError, RuntimeError):
    """Raised when a connection to the database cannot be established."""

    pass


class TransactionStateError(SqlCrudError, RuntimeError):
    """Raised on commit/rollback without an active transaction, or a nested begin."""

    pass


class StatementExecutionError(SqlCrudError):
    """
    Structured error for a statement the driver rejected.

    Args:
        message: Human readable failure message
        operation: Repository operation name (insert, update, ...)
        table: Target table
        sql: The SQL text that was executed
        original_error: The driver exception, if any
    """

    def __init__(
        self,
        message: str,
        operation: str,
        table: Optional[str] = None,
        sql: str = "",
        original_error: Optional[BaseException] = None,
    ):
        self.operation = operation
        self.table = table
        self.sql = sql
        self.original_error = original_error
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": "StatementExecutionError",
            "operation": self.operation,
            "table": self.table,
            "message": str(self),
            "sql": self.sql,
            "original_error_type": (
                type(self.original_error).__name__ if self.original_error else None
            ),
        }
