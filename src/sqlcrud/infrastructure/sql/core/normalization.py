"""
Row data normalization.

Callers may hand over a row as a mapping, a dataclass, a pydantic model, a
plain object, or a positional sequence accompanied by a column list. All of
those are first classified into the tagged variant ``MappingRow |
PositionalRow`` and then resolved into a single ordered ``dict`` before any
SQL is built.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from pydantic import BaseModel

from sqlcrud.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class MappingRow:
    """Row given as column -> value."""

    values: Mapping[str, Any]


@dataclass(frozen=True)
class PositionalRow:
    """Row given as values paired, by position, with an external column list."""

    values: Tuple[Any, ...]
    columns: Tuple[str, ...]


RowData = Union[MappingRow, PositionalRow]


def classify_row(data: Any, columns: Optional[Sequence[str]] = None) -> RowData:
    """
    Classify caller row data into MappingRow or PositionalRow.

    Raises:
        InvalidArgumentError: Positional data without columns, or an
            unsupported data type
    """
    if isinstance(data, (MappingRow, PositionalRow)):
        return data
    if isinstance(data, Mapping):
        return MappingRow(data)
    if isinstance(data, BaseModel):
        return MappingRow(data.model_dump())
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return MappingRow(
            {f.name: getattr(data, f.name) for f in dataclasses.fields(data)}
        )
    if isinstance(data, (str, bytes)):
        raise InvalidArgumentError(
            f"Row data must be a mapping, object or sequence, got {type(data).__name__}"
        )
    if isinstance(data, Sequence):
        if not columns:
            raise InvalidArgumentError(
                "Positional row data requires a column list (columns argument)"
            )
        return PositionalRow(tuple(data), tuple(columns))
    if hasattr(data, "__dict__"):
        # public attributes only
        return MappingRow(
            {k: v for k, v in vars(data).items() if not k.startswith("_")}
        )
    raise InvalidArgumentError(f"Unsupported row data type: {type(data).__name__}")


def normalize_row(data: Any, columns: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    """
    Resolve row data into a canonical column -> value dict.

    For positional rows, values are paired with ``columns`` by index; columns
    beyond the end of the value sequence are left out. For mapping-like rows
    ``columns`` is ignored.

    Examples:
        >>> normalize_row({"name": "Ann", "age": 31})
        {'name': 'Ann', 'age': 31}
        >>> normalize_row(["Ann", 31], columns=["name", "age"])
        {'name': 'Ann', 'age': 31}
        >>> normalize_row(["Ann"], columns=["name", "age"])
        {'name': 'Ann'}
    """
    row = classify_row(data, columns)
    if isinstance(row, PositionalRow):
        return {
            col: row.values[index]
            for index, col in enumerate(row.columns)
            if index < len(row.values)
        }
    return dict(row.values)
