"""SELECT clause builder.

Entry point of the compiler: resolves the target entity once, tries the
aggregate path first and falls through to the projection path only when
no aggregation directive is present.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from query_sequel.compiler.aggregate import AggregateCompiler
from query_sequel.compiler.plan import AggregateDirectives, CompiledSelect
from query_sequel.compiler.projection import ProjectionCompiler
from query_sequel.core.config import CompilerOptions, coerce_options
from query_sequel.core.enums import CompileMode
from query_sequel.query.descriptor import QueryDescriptor, coerce_descriptor
from query_sequel.schema.model import Schema
from query_sequel.schema.resolver import SchemaResolver

logger = logging.getLogger(__name__)


class SelectBuilder:
    """Compiles query descriptors against one target table.

    The schema is never modified and descriptors are never mutated, so one
    builder may compile any number of descriptors, from any thread.

    Args:
        schema: A Schema, or a plain ``{identity: definition}`` mapping.
        table_name: Physical table name of the target entity.
        options: CompilerOptions, a mapping of options, or None for defaults.

    Raises:
        SchemaMismatchError: If *table_name* does not resolve to one entity.
    """

    def __init__(
        self,
        schema: Schema | Mapping[str, Any],
        table_name: str,
        options: CompilerOptions | Mapping[str, Any] | None = None,
    ) -> None:
        self._schema = schema if isinstance(schema, Schema) else Schema.from_dict(schema)
        self._options = coerce_options(options)
        self._resolver = SchemaResolver(self._schema)
        self._identity, self._entity = self._resolver.entity_for(table_name)
        self._aggregates = AggregateCompiler(self._options)
        self._projection = ProjectionCompiler(self._resolver, self._options)

    @property
    def identity(self) -> str:
        """Logical identity of the target entity."""
        return self._identity

    @property
    def options(self) -> CompilerOptions:
        return self._options

    def build(self, query: QueryDescriptor | Mapping[str, Any] | None = None) -> CompiledSelect:
        """Compile *query* into a CompiledSelect.

        Raises:
            InvalidAggregationError: If groupBy is given without a calculation.
            SchemaMismatchError: If a HAS_FK join names an unknown child table.
            DescriptorError: If a raw mapping fails validation.
        """
        descriptor = coerce_descriptor(query)
        table_name = self._entity.table_name or self._identity

        aggregate = self._aggregates.compile(
            AggregateDirectives.from_descriptor(descriptor), table_name
        )
        if aggregate is not None:
            logger.debug("Compiled aggregate SELECT for %r", self._identity)
            return CompiledSelect(select=(aggregate,), mode=CompileMode.AGGREGATE)

        entries = self._projection.collect(self._identity, descriptor)
        logger.debug("Compiled %d projected columns for %r", len(entries), self._identity)
        return CompiledSelect(
            select=(self._projection.render(entries, table_name),),
            mode=CompileMode.PROJECTION,
            selection_consumed=True,
            columns=tuple(entries),
        )


def build_select(
    schema: Schema | Mapping[str, Any],
    table_name: str,
    query: QueryDescriptor | Mapping[str, Any] | None = None,
    options: CompilerOptions | Mapping[str, Any] | None = None,
) -> CompiledSelect:
    """Compile a single SELECT for *table_name*.

    Shorthand for ``SelectBuilder(schema, table_name, options).build(query)``.
    """
    return SelectBuilder(schema, table_name, options).build(query)
