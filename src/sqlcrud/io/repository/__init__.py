"""Table repository: executes built statements and returns OperationResult values."""

from .core import TableRepository
from .models import OperationResult

__all__ = ["TableRepository", "OperationResult"]
