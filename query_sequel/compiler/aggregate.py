"""Aggregate Compiler.

Renders groupBy/sum/average/max/min directives into a grouped SELECT.
Aggregation never expands joins: FROM always names the target table.
"""

from __future__ import annotations

import logging

from query_sequel.compiler.plan import AggregateDirectives
from query_sequel.compiler.render import render_select
from query_sequel.core.config import CompilerOptions
from query_sequel.core.exceptions import InvalidAggregationError

logger = logging.getLogger(__name__)


class AggregateCompiler:
    """Compiles aggregation directives into a SELECT clause.

    Fragment order is fixed: group-by columns, then SUM, AVG, MAX, MIN,
    each in the order its columns were given.

    Args:
        options: Compiler options (escape character, cast mode).
    """

    def __init__(self, options: CompilerOptions) -> None:
        self._options = options

    def compile(self, directives: AggregateDirectives, table_name: str) -> str | None:
        """Return the aggregate SELECT for *table_name*, or None if not requested.

        Args:
            directives: Normalized aggregation directives.
            table_name: Physical name of the target table (unescaped).

        Raises:
            InvalidAggregationError: If groupBy is given without a calculation.
        """
        if not directives.requested:
            return None
        if not directives.has_calculation:
            raise InvalidAggregationError()

        fragments: list[str] = [self._options.escape(column) for column in directives.group_by]
        fragments += [self._sum(column) for column in directives.sum]
        fragments += [self._average(column) for column in directives.average]
        fragments += [self._function("MAX", column) for column in directives.max]
        fragments += [self._function("MIN", column) for column in directives.min]

        logger.debug("Compiled %d aggregate fragments for %r", len(fragments), table_name)
        return render_select(fragments, self._options.escape(table_name))

    def _sum(self, column: str) -> str:
        expression = f"SUM({self._options.escape(column)})"
        if self._options.cast:
            expression = f"CAST({expression}.asFloat())"
        return f"{expression} AS {column}"

    def _average(self, column: str) -> str:
        # Cast inside the aggregate so integer columns don't truncate
        expression = f"avg({self._options.escape(column)}.asFloat())"
        if self._options.cast:
            expression = f"CAST( {expression} AS float)"
        return f"{expression} AS {column}"

    def _function(self, name: str, column: str) -> str:
        return f"{name}({self._options.escape(column)}) AS {column}"
