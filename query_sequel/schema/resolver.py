"""Schema Resolver - maps physical table names to entity identities."""

from __future__ import annotations

import logging

from query_sequel.schema.model import EntityDefinition, Schema

logger = logging.getLogger(__name__)


class SchemaResolver:
    """Resolves physical table names against a read-only Schema.

    Args:
        schema: The schema to search.

    Raises:
        SchemaMismatchError: From lookups whose table name matches zero
            or several entities.
    """

    def __init__(self, schema: Schema) -> None:
        self._schema = schema

    @property
    def schema(self) -> Schema:
        return self._schema

    def identity_for(self, table_name: str) -> str:
        """Return the logical identity of the entity stored in *table_name*."""
        identity = self._schema.resolve_identity(table_name)
        logger.debug("Resolved table %r to identity %r", table_name, identity)
        return identity

    def entity_for(self, table_name: str) -> tuple[str, EntityDefinition]:
        """Return ``(identity, definition)`` for *table_name*."""
        identity = self.identity_for(table_name)
        return identity, self._schema.entity(identity)
