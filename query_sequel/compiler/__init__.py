"""Compiler layer - SELECT clause compilation."""

from __future__ import annotations

from query_sequel.compiler.aggregate import AggregateCompiler
from query_sequel.compiler.plan import AggregateDirectives, CompiledSelect, ProjectionEntry
from query_sequel.compiler.projection import ProjectionCompiler
from query_sequel.compiler.render import render_select
from query_sequel.compiler.select import SelectBuilder, build_select

__all__ = [
    "SelectBuilder",
    "build_select",
    "AggregateCompiler",
    "ProjectionCompiler",
    "AggregateDirectives",
    "CompiledSelect",
    "ProjectionEntry",
    "render_select",
]
