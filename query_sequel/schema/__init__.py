"""Schema layer - entity definitions and table-name resolution."""

from __future__ import annotations

from query_sequel.schema.model import AttributeDefinition, EntityDefinition, Schema
from query_sequel.schema.resolver import SchemaResolver

__all__ = [
    "AttributeDefinition",
    "EntityDefinition",
    "Schema",
    "SchemaResolver",
]
