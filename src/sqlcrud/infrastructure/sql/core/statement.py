"""Compiled statement value type."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

Params = Union[Dict[str, Any], Tuple[Any, ...]]


@dataclass(frozen=True)
class Statement:
    """SQL text plus the parameters to bind to it.

    ``params`` is a dict for named (``:name``) placeholders and a tuple for
    positional placeholders in the driver's own paramstyle.
    """

    sql: str
    params: Params = field(default_factory=dict)

    @property
    def is_positional(self) -> bool:
        return isinstance(self.params, tuple)

    @property
    def param_count(self) -> int:
        return len(self.params)
