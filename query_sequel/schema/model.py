"""Schema data model.

Pydantic models over the Waterline-style schema mapping::

    {"user": {"tableName": "users", "attributes": {"name": {"type": "string"}}}}

The schema is read-only once built; the compiler never mutates it.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from query_sequel.core.exceptions import EntityNotFoundError, SchemaMismatchError


class AttributeDefinition(BaseModel):
    """A single attribute of an entity."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    column_name: str | None = Field(default=None, alias="columnName")
    collection: str | None = None
    model: str | None = None
    via: str | None = None
    type: str | None = None
    primary_key: bool = Field(default=False, alias="primaryKey")

    @model_validator(mode="before")
    @classmethod
    def _type_shorthand(cls, data: Any) -> Any:
        # "name": "string" is shorthand for "name": {"type": "string"}
        if isinstance(data, str):
            return {"type": data}
        return data

    @property
    def is_collection(self) -> bool:
        """True for has-many relations, which are never projected inline."""
        # Presence of the key marks the relation, even with a null target
        return "collection" in self.model_fields_set

    def physical_name(self, attribute_name: str) -> str:
        """Return the declared column name, or *attribute_name* itself."""
        return self.column_name or attribute_name


class EntityDefinition(BaseModel):
    """An entity: its physical table and declared attributes, in order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    identity: str | None = None
    table_name: str | None = Field(default=None, alias="tableName")
    attributes: dict[str, AttributeDefinition] = Field(default_factory=dict)

    def attribute(self, name: str) -> AttributeDefinition:
        """Look up *name*, falling back to an empty definition.

        Raw physical column names sent in a selection have no declared
        definition; they are passed through unchanged.
        """
        return self.attributes.get(name) or AttributeDefinition()

    def projectable(self) -> Iterator[tuple[str, AttributeDefinition]]:
        """Yield declared ``(name, definition)`` pairs that are not collections."""
        for name, definition in self.attributes.items():
            if not definition.is_collection:
                yield name, definition


class Schema(BaseModel):
    """Mapping of entity identity to entity definition."""

    model_config = ConfigDict(frozen=True)

    entities: dict[str, EntityDefinition] = Field(default_factory=dict)

    @field_validator("entities", mode="before")
    @classmethod
    def _fill_identities(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            return value
        filled: dict[str, Any] = {}
        for identity, definition in value.items():
            if isinstance(definition, EntityDefinition):
                data = definition.model_dump(by_alias=True, exclude_unset=True)
            else:
                data = dict(definition)
            data.setdefault("identity", identity)
            if "tableName" not in data and "table_name" not in data:
                data["tableName"] = identity
            filled[identity] = data
        return filled

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Schema:
        """Build a Schema from a plain ``{identity: definition}`` mapping."""
        return cls(entities=dict(raw))

    def entity(self, identity: str) -> EntityDefinition:
        """Return the definition stored under *identity*.

        Raises:
            EntityNotFoundError: If *identity* is not in the schema.
        """
        try:
            return self.entities[identity]
        except KeyError:
            raise EntityNotFoundError(identity) from None

    def identities_for_table(self, table_name: str) -> list[str]:
        """List every identity whose physical table is *table_name*."""
        return [
            identity
            for identity, definition in self.entities.items()
            if definition.table_name == table_name
        ]

    def resolve_identity(self, table_name: str) -> str:
        """Return the single identity stored for *table_name*.

        Raises:
            SchemaMismatchError: If zero or several entities use *table_name*.
        """
        candidates = self.identities_for_table(table_name)
        if len(candidates) != 1:
            raise SchemaMismatchError(table_name, candidates)
        return candidates[0]

    def __contains__(self, identity: object) -> bool:
        return identity in self.entities

    def __len__(self) -> int:
        return len(self.entities)
