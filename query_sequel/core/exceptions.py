"""QuerySequel exception hierarchy.

All failures raised by the compiler are QuerySequel-specific. Malformed
input is a programming error, so nothing here is retried or recovered.
"""

from __future__ import annotations


class QuerySequelError(Exception):
    """Base exception for all QuerySequel errors."""


# --- Schema ---


class SchemaError(QuerySequelError):
    """Base for schema lookup errors."""


class SchemaMismatchError(SchemaError):
    """Raised when a physical table name does not resolve to exactly one entity."""

    def __init__(self, table_name: str, candidates: list[str] | None = None) -> None:
        self.table_name = table_name
        self.candidates = candidates or []
        if self.candidates:
            detail = f"matches several entities {self.candidates}"
        else:
            detail = "matches no entity in the schema"
        super().__init__(f"Table '{table_name}' {detail}")


class EntityNotFoundError(SchemaError):
    """Raised when an entity identity is not present in the schema."""

    def __init__(self, identity: str) -> None:
        self.identity = identity
        super().__init__(f"Entity not found: '{identity}'")


# --- Compilation ---


class CompilationError(QuerySequelError):
    """Base for SELECT compilation errors."""


class InvalidAggregationError(CompilationError):
    """Raised when groupBy is requested without sum, average, min or max."""

    def __init__(self) -> None:
        super().__init__("An aggregation was used but no calculations were given")


class DescriptorError(CompilationError):
    """Raised when a raw query descriptor fails validation."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid query descriptor: {detail}")
