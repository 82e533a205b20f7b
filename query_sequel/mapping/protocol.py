"""Mapper protocol.

Row mappers turn result rows of a compiled SELECT back into nested
structures. map_one handles a single row, map_many a result set.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class Mapper(Protocol[T]):
    """Base mapper protocol."""

    def map_one(self, row: dict[str, Any]) -> T:
        """Map a single row dict to a target object."""
        ...

    def map_many(self, rows: list[dict[str, Any]]) -> list[T]:
        """Map multiple row dicts to a list of target objects."""
        ...
