"""Structured records consumed by the statement builders."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

from sqlcrud.exceptions import InvalidArgumentError


class _NotSet:
    """Marker for "no default given", distinct from an explicit ``None`` default."""

    _instance: Optional["_NotSet"] = None

    def __new__(cls) -> "_NotSet":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_SET"


NOT_SET: Any = _NotSet()

Length = Union[int, str, Tuple[Union[int, str], ...]]


@dataclass
class ColumnDefinition:
    """Definition of a single column for CREATE TABLE.

    ``notnull`` is tri-state: True renders NOT NULL, False renders NULL and
    None leaves nullability unspecified. ``default`` is NOT_SET when the
    column has no DEFAULT clause; ``None`` renders DEFAULT NULL.
    """

    name: str
    type: str
    length: Optional[Length] = None
    notnull: Optional[bool] = None
    default: Any = NOT_SET
    auto_increment: bool = False
    unsigned: bool = False
    comment: Optional[str] = None
    primary_key: bool = False

    @property
    def has_default(self) -> bool:
        return self.default is not NOT_SET

    @classmethod
    def from_mapping(
        cls, definition: Mapping[str, Any], name: Optional[str] = None
    ) -> "ColumnDefinition":
        """Build a definition from a plain mapping.

        ``name`` fills in the column name when the mapping does not carry one
        (used for the ``{"col": {...}}`` form of create_table fields).

        Raises:
            InvalidArgumentError: If name or type is missing
        """
        column_name = definition.get("name", name)
        column_type = definition.get("type")
        if not column_name or not column_type:
            raise InvalidArgumentError(
                "Column definition must include 'name' and 'type'"
            )
        length = definition.get("length")
        if isinstance(length, list):
            length = tuple(length)
        return cls(
            name=str(column_name),
            type=str(column_type),
            length=length,
            notnull=definition.get("notnull"),
            default=definition["default"] if "default" in definition else NOT_SET,
            auto_increment=bool(definition.get("auto_increment", False)),
            unsigned=bool(definition.get("unsigned", False)),
            comment=definition.get("comment"),
            primary_key=bool(definition.get("primary_key", False)),
        )


@dataclass
class AlterAction:
    """One clause of an ALTER TABLE statement, e.g. ADD `col` INT AFTER `id`."""

    type: str
    field: str
    definition: Optional[str] = None
    after: Optional[str] = None

    @classmethod
    def from_mapping(cls, action: Mapping[str, Any]) -> "AlterAction":
        """
        Raises:
            InvalidArgumentError: If type or field is missing
        """
        if not action.get("type") or not action.get("field"):
            raise InvalidArgumentError("ALTER action must include 'type' and 'field'")
        return cls(
            type=str(action["type"]),
            field=str(action["field"]),
            definition=action.get("definition"),
            after=action.get("after"),
        )


@dataclass
class QueryOptions:
    """Projection and paging options for find_all.

    Every value is interpolated into the SQL text as given. Only pass values
    that come from trusted code, never raw user input.
    """

    fields: Union[str, Sequence[str], None] = None
    order: Optional[str] = None
    limit: Union[int, str, None] = None
    offset: Union[int, str, None] = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "QueryOptions":
        return cls(
            fields=options.get("fields"),
            order=options.get("order"),
            limit=options.get("limit"),
            offset=options.get("offset"),
        )


@dataclass
class TableOptions:
    """Table-level options for CREATE TABLE (MySQL only)."""

    engine: Optional[str] = None
    charset: Optional[str] = None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "TableOptions":
        return cls(engine=options.get("engine"), charset=options.get("charset"))


__all__ = [
    "NOT_SET",
    "ColumnDefinition",
    "AlterAction",
    "QueryOptions",
    "TableOptions",
]
