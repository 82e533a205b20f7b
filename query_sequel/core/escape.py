"""Identifier escaping."""

from __future__ import annotations


def escape_name(name: str | None, escape_character: str = '"') -> str:
    """Wrap *name* in *escape_character*, doubling any embedded delimiter.

    Case and character order are never altered.

    Examples:
        >>> escape_name("amount")
        '"amount"'
        >>> escape_name('odd"name')
        '"odd""name"'
    """
    replaced = (name or "").replace(escape_character, escape_character * 2)
    return f"{escape_character}{replaced}{escape_character}"
