"""Projection Compiler.

Resolves the columns a plain (non-aggregate) SELECT projects: declared or
explicitly selected attributes of the target entity, a wildcard for
schemaless entities, and child columns inlined through HAS_FK joins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from query_sequel.compiler.plan import ProjectionEntry
from query_sequel.compiler.render import render_select
from query_sequel.core.config import CompilerOptions
from query_sequel.query.descriptor import JoinInstruction, QueryDescriptor
from query_sequel.schema.model import EntityDefinition
from query_sequel.schema.resolver import SchemaResolver

logger = logging.getLogger(__name__)


def _union(*groups: Iterable[str]) -> list[str]:
    """Ordered union of name groups; first occurrence wins."""
    return list(dict.fromkeys(name for group in groups for name in group))


class ProjectionCompiler:
    """Builds and renders the projection for a target entity.

    Args:
        resolver: Schema resolver used for the target and join children.
        options: Compiler options.
    """

    def __init__(self, resolver: SchemaResolver, options: CompilerOptions) -> None:
        self._resolver = resolver
        self._options = options

    def attribute_names(self, entity: EntityDefinition, query: QueryDescriptor) -> list[str]:
        """Explicit selection (or every declared attribute) plus the fetch plan."""
        names = query.select if query.select is not None else tuple(entity.attributes)
        if query.fetch_plan is not None:
            return _union(names, query.fetch_plan.select)
        return _union(names)

    def collect(self, identity: str, query: QueryDescriptor) -> list[ProjectionEntry]:
        """Resolve every projection entry for *identity* in declaration order."""
        entity = self._resolver.schema.entity(identity)
        add_wildcard = query.schemaless and not query.has_selection

        entries: list[ProjectionEntry] = []
        for name in self.attribute_names(entity, query):
            definition = entity.attribute(name)
            if definition.is_collection:
                logger.debug("Skipping collection attribute %r on %r", name, identity)
                continue
            column = definition.column_name or self._options.identity_column(name)
            entries.append(ProjectionEntry(table=identity, column=column))

        # Schemaless entities carry undeclared properties
        if add_wildcard:
            entries.append(ProjectionEntry(table=identity, column=self._options.wildcard))

        for attribute, instruction in query.instructions.items():
            entries.extend(self._expand_join(attribute, instruction))

        return entries

    def _expand_join(self, attribute: str, instruction: JoinInstruction) -> list[ProjectionEntry]:
        """Inline the child columns of a HAS_FK join, aliased by the parent key."""
        if not instruction.is_inline:
            logger.debug(
                "Leaving %r to downstream join logic (strategy %s)",
                attribute,
                instruction.strategy.name,
            )
            return []
        if not instruction.instructions:
            return []

        population = instruction.instructions[0]
        child_identity, child = self._resolver.entity_for(population.child)
        if population.alias:
            table = self._options.alias_table_prefix + population.alias
        else:
            table = population.child

        logger.debug("Inlining %r columns into %r as %r", child_identity, attribute, table)
        return [
            ProjectionEntry(
                table=table,
                column=definition.physical_name(name),
                alias=population.parent_key,
            )
            for name, definition in child.projectable()
        ]

    def render(self, entries: Iterable[ProjectionEntry], table_name: str) -> str:
        """Render *entries* as ``SELECT ... FROM <table_name> ``."""
        fragments = []
        for entry in entries:
            column = self._options.escape(entry.column)
            if entry.alias:
                alias = f"{entry.alias}{self._options.alias_separator}{entry.column}"
                fragments.append(f"{column} AS {self._options.quote_alias(alias)}")
            else:
                fragments.append(column)
        return render_select(fragments, self._options.escape(table_name))
