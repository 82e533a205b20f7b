"""SELECT clause rendering."""

from __future__ import annotations

from collections.abc import Sequence


def render_select(fragments: Sequence[str], from_table: str) -> str:
    """Join rendered column *fragments* into ``SELECT ... FROM <table> ``.

    *from_table* must already be escaped. The trailing space lets sibling
    clauses be concatenated directly.
    """
    parts = ("SELECT", ", ".join(fragments), "FROM", from_table)
    return " ".join(part for part in parts if part) + " "
