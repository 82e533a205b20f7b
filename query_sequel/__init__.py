"""QuerySequel - SELECT clause compiler for declarative query descriptors."""

from __future__ import annotations

from query_sequel.compiler.plan import CompiledSelect, ProjectionEntry
from query_sequel.compiler.select import SelectBuilder, build_select
from query_sequel.core.config import CompilerOptions
from query_sequel.core.enums import CompileMode, JoinStrategy
from query_sequel.core.escape import escape_name
from query_sequel.core.exceptions import (
    CompilationError,
    DescriptorError,
    EntityNotFoundError,
    InvalidAggregationError,
    QuerySequelError,
    SchemaError,
    SchemaMismatchError,
)
from query_sequel.mapping.aliased import AliasedRowMapper
from query_sequel.query.descriptor import QueryDescriptor
from query_sequel.schema.model import Schema
from query_sequel.schema.resolver import SchemaResolver

__all__ = [
    # Compiler
    "SelectBuilder",
    "build_select",
    "CompiledSelect",
    "ProjectionEntry",
    # Config
    "CompilerOptions",
    "escape_name",
    # Schema
    "Schema",
    "SchemaResolver",
    # Query
    "QueryDescriptor",
    # Mapping
    "AliasedRowMapper",
    # Enums
    "CompileMode",
    "JoinStrategy",
    # Exceptions
    "QuerySequelError",
    "SchemaError",
    "SchemaMismatchError",
    "EntityNotFoundError",
    "CompilationError",
    "InvalidAggregationError",
    "DescriptorError",
]
