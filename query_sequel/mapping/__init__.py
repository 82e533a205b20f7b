"""Mapping layer - unmarshal rows produced by compiled SELECTs."""

from __future__ import annotations

from query_sequel.mapping.aliased import AliasedRowMapper
from query_sequel.mapping.protocol import Mapper

__all__ = [
    "Mapper",
    "AliasedRowMapper",
]
