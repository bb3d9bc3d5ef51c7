from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from sqlcrud.exceptions import StatementExecutionError

T = TypeVar("T")


@dataclass
class OperationResult(Generic[T]):
    """Structured response for TableRepository operations.

    A failed operation carries ``success=False`` and a human readable
    ``error``; driver exceptions are never raised out of the repository.
    """

    operation: str
    table: str
    success: bool
    value: Optional[T] = None
    error: Optional[str] = None
    sql: str = ""
    duration_ms: float = 0.0
    original_error: Optional[BaseException] = field(default=None, repr=False)

    @property
    def failed(self) -> bool:
        return not self.success

    def unwrap(self) -> T:
        """Return the value, raising StatementExecutionError if the operation failed."""
        if not self.success:
            raise StatementExecutionError(
                self.error or f"{self.operation} failed",
                operation=self.operation,
                table=self.table,
                sql=self.sql,
                original_error=self.original_error,
            )
        return self.value  # type: ignore[return-value]
