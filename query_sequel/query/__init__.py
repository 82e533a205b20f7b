"""Query layer - declarative SELECT descriptors."""

from __future__ import annotations

from query_sequel.query.descriptor import (
    FetchPlan,
    JoinInstruction,
    Population,
    QueryDescriptor,
    coerce_descriptor,
)

__all__ = [
    "QueryDescriptor",
    "JoinInstruction",
    "Population",
    "FetchPlan",
    "coerce_descriptor",
]
