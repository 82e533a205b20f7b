"""Compiler configuration.

CompilerOptions is a Pydantic model so options can come from plain
mappings (snake_case or the camelCase keys used by query builders).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from query_sequel.core.escape import escape_name


class CompilerOptions(BaseModel):
    """Configuration for SELECT compilation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    escape_character: str = Field(default='"', alias="escapeCharacter")
    cast: bool = False
    # Dialect-specific renames, e.g. OrientDB exposes the record id as @rid
    identity_columns: tuple[tuple[str, str], ...] = Field(
        default=(("id", "@rid"),), alias="identityColumns"
    )
    wildcard: str = "*"
    alias_separator: str = Field(default="___", alias="aliasSeparator")
    alias_table_prefix: str = Field(default="__", alias="aliasTablePrefix")

    @field_validator("escape_character")
    @classmethod
    def _single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("escape_character must be a single character")
        return value

    @field_validator("identity_columns", mode="before")
    @classmethod
    def _identity_pairs(cls, value: Any) -> Any:
        # Stored as sorted pairs so the options stay hashable
        if isinstance(value, Mapping):
            return tuple(sorted(value.items()))
        return value

    def identity_column(self, name: str) -> str:
        """Return the reserved pseudo-column for *name*, or *name* itself."""
        return dict(self.identity_columns).get(name, name)

    def escape(self, name: str | None) -> str:
        """Escape *name* with the configured delimiter."""
        return escape_name(name, self.escape_character)

    def quote_alias(self, alias: str) -> str:
        """Wrap *alias* in the delimiter without doubling."""
        return f"{self.escape_character}{alias}{self.escape_character}"


def coerce_options(options: CompilerOptions | Mapping[str, Any] | None) -> CompilerOptions:
    """Normalize *options* to a CompilerOptions instance.

    * ``None`` → all defaults.
    * ``CompilerOptions`` → returned as-is.
    * Any mapping → validated (snake_case or camelCase keys).
    """
    if options is None:
        return CompilerOptions()
    if isinstance(options, CompilerOptions):
        return options
    return CompilerOptions.model_validate(dict(options))
