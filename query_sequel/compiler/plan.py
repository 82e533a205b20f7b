"""Compilation plan data classes.

Frozen dataclasses describing resolved projections, normalized
aggregation directives, and the compiled result handed to the caller.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from query_sequel.core.enums import CompileMode
from query_sequel.query.descriptor import QueryDescriptor


@dataclass(frozen=True)
class ProjectionEntry:
    """One projected column and where it comes from."""

    table: str
    column: str
    alias: str | None = None  # parent-side join key for inlined child columns


@dataclass(frozen=True)
class AggregateDirectives:
    """Aggregation directives, each an ordered tuple of column names."""

    group_by: tuple[str, ...] = ()
    sum: tuple[str, ...] = ()
    average: tuple[str, ...] = ()
    max: tuple[str, ...] = ()
    min: tuple[str, ...] = ()

    @classmethod
    def from_descriptor(cls, query: QueryDescriptor) -> AggregateDirectives:
        return cls(
            group_by=query.group_by,
            sum=query.sum,
            average=query.average,
            max=query.max,
            min=query.min,
        )

    @property
    def has_calculation(self) -> bool:
        return bool(self.sum or self.average or self.max or self.min)

    @property
    def requested(self) -> bool:
        """True if any aggregation directive is present."""
        return bool(self.group_by) or self.has_calculation


@dataclass(frozen=True)
class CompiledSelect:
    """Result of SELECT compilation.

    ``select`` holds the single SELECT+FROM clause produced here;
    ``clauses`` is the slot sibling builders append WHERE/ORDER/LIMIT
    text to. ``selection_consumed`` tells those builders the explicit
    selection has already been applied.
    """

    select: tuple[str, ...]
    mode: CompileMode
    selection_consumed: bool = False
    columns: tuple[ProjectionEntry, ...] = ()
    clauses: tuple[str, ...] = ()

    def with_clause(self, clause: str) -> CompiledSelect:
        """Return a copy with *clause* appended to the sibling slot."""
        return dataclasses.replace(self, clauses=(*self.clauses, clause))

    @property
    def statement(self) -> str:
        """The full statement: the SELECT clause followed by sibling clauses."""
        return "".join((*self.select, *self.clauses))

    def to_dict(self) -> dict[str, Any]:
        """Return the ``{"select": [...]}`` shape query builders exchange."""
        return {"select": list(self.select)}
