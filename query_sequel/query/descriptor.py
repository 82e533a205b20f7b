"""Query descriptor models.

A QueryDescriptor is the declarative input to SELECT compilation: the
explicit selection, an optional fetch plan, join instructions computed
by the outer query builder, and aggregation directives. Keys owned by
sibling clause builders (``where``, ``sort``, ``limit``...) are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from query_sequel.core.enums import JoinStrategy
from query_sequel.core.exceptions import DescriptorError


def _as_names(value: Any) -> Any:
    """Normalize a single name or a sequence of names to a tuple."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return value


class Population(BaseModel):
    """One single-hop join from a parent entity to a child entity."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    child: str
    parent: str | None = None
    parent_key: str | None = Field(default=None, alias="parentKey")
    child_key: str | None = Field(default=None, alias="childKey")
    alias: str | None = None
    select: tuple[str, ...] | None = None
    criteria: dict[str, Any] = Field(default_factory=dict)
    remove_parent_key: bool = Field(default=False, alias="removeParentKey")

    @field_validator("select", mode="before")
    @classmethod
    def _select_names(cls, value: Any) -> Any:
        return None if value is None else _as_names(value)


class JoinInstruction(BaseModel):
    """Join strategy and populations for one populated attribute."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    strategy: JoinStrategy
    instructions: tuple[Population, ...] = ()

    @field_validator("strategy", mode="before")
    @classmethod
    def _unwrap_strategy(cls, value: Any) -> Any:
        # Query builders emit {"strategy": 1, "meta": {...}}
        if isinstance(value, Mapping):
            return value.get("strategy")
        return value

    @property
    def is_inline(self) -> bool:
        """True when the child row is inlined into the parent via aliasing."""
        return self.strategy == JoinStrategy.HAS_FK


class FetchPlan(BaseModel):
    """Supplementary attributes merged into the selection (eager fields)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    select: tuple[str, ...] = ()

    @field_validator("select", mode="before")
    @classmethod
    def _select_names(cls, value: Any) -> Any:
        return _as_names(value)


class QueryDescriptor(BaseModel):
    """Declarative description of a SELECT.

    Scalar-or-list aggregate fields (``groupBy``, ``sum``, ``average``,
    ``min``, ``max``) are normalized to tuples; an empty tuple means the
    directive is absent.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    select: tuple[str, ...] | None = None
    fetch_plan: FetchPlan | None = Field(default=None, alias="fetchPlan")
    schemaless: bool = False
    instructions: dict[str, JoinInstruction] = Field(default_factory=dict)
    group_by: tuple[str, ...] = Field(default=(), alias="groupBy")
    sum: tuple[str, ...] = ()
    average: tuple[str, ...] = ()
    min: tuple[str, ...] = ()
    max: tuple[str, ...] = ()

    @field_validator("select", mode="before")
    @classmethod
    def _select_names(cls, value: Any) -> Any:
        return None if value is None else _as_names(value)

    @field_validator("group_by", "sum", "average", "min", "max", mode="before")
    @classmethod
    def _aggregate_names(cls, value: Any) -> Any:
        return _as_names(value)

    @field_validator("instructions", mode="before")
    @classmethod
    def _no_instructions(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def has_selection(self) -> bool:
        """True when the caller supplied an explicit attribute list."""
        return self.select is not None


def coerce_descriptor(query: QueryDescriptor | Mapping[str, Any] | None) -> QueryDescriptor:
    """Normalize *query* to a validated QueryDescriptor.

    Raises:
        DescriptorError: If the mapping fails validation.
    """
    if isinstance(query, QueryDescriptor):
        return query
    try:
        return QueryDescriptor.model_validate(dict(query or {}))
    except ValidationError as e:
        raise DescriptorError(str(e)) from e
