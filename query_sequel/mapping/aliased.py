"""Aliased row mapper.

Columns inlined through HAS_FK joins come back as ``parentKey___column``.
AliasedRowMapper splits them into one nested dict per parent key.
"""

from __future__ import annotations

from typing import Any

from query_sequel.core.config import CompilerOptions
from query_sequel.mapping.protocol import Mapper


class AliasedRowMapper(Mapper[dict[str, Any]]):
    """Nests composite-aliased columns under their parent key.

    Example::

        {"id": 1, "owner___name": "Ann", "owner___age": 30}
        -> {"id": 1, "owner": {"name": "Ann", "age": 30}}

    A nested group whose values are all ``None`` (no related row) becomes
    ``None``. Columns without the separator are left untouched.

    Args:
        separator: Composite alias separator. Defaults to the separator of
            the default CompilerOptions.
    """

    def __init__(self, separator: str | None = None) -> None:
        self._separator = separator or CompilerOptions().alias_separator

    def map_one(self, row: dict[str, Any]) -> dict[str, Any]:
        """Split the aliased columns of a single row."""
        result: dict[str, Any] = {}
        nested: dict[str, dict[str, Any]] = {}
        for key, value in row.items():
            parent_key, sep, column = key.partition(self._separator)
            if sep and parent_key and column:
                nested.setdefault(parent_key, {})[column] = value
            else:
                result[key] = value

        for parent_key, fields in nested.items():
            if all(v is None for v in fields.values()):
                result[parent_key] = None
            else:
                result[parent_key] = fields
        return result

    def map_many(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Map all rows via map_one."""
        return [self.map_one(row) for row in rows]
