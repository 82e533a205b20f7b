"""Shared test fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from query_sequel.core.config import CompilerOptions
from query_sequel.schema.model import Schema


@pytest.fixture
def raw_schema() -> dict[str, Any]:
    """Waterline-style schema mapping used across compiler tests."""
    return {
        "user": {
            "tableName": "users",
            "attributes": {
                "id": {"type": "string", "primaryKey": True},
                "name": {"type": "string"},
                "email": {"type": "string", "columnName": "email_address"},
                "pets": {"collection": "pet", "via": "owner"},
                "profile": {"model": "profile"},
            },
        },
        "pet": {
            "tableName": "pets",
            "attributes": {
                "id": {"type": "string", "primaryKey": True},
                "name": "string",
                "owner": {"model": "user"},
                "toys": {"collection": "toy", "via": "pet"},
            },
        },
        "profile": {
            "tableName": "profiles",
            "attributes": {
                "id": {"type": "string", "primaryKey": True},
                "bio": "string",
                "avatar": {"type": "string", "columnName": "avatar_url"},
            },
        },
        "order": {
            "tableName": "orders",
            "attributes": {
                "id": {"type": "string", "primaryKey": True},
                "status": "string",
                "amount": "integer",
                "tax": "float",
            },
        },
        "event": {
            "tableName": "events",
            "attributes": {
                "kind": "string",
            },
        },
    }


@pytest.fixture
def schema(raw_schema: dict[str, Any]) -> Schema:
    """Validated Schema built from raw_schema."""
    return Schema.from_dict(raw_schema)


@pytest.fixture
def options() -> CompilerOptions:
    """Default compiler options."""
    return CompilerOptions()


@pytest.fixture
def profile_join() -> dict[str, Any]:
    """HAS_FK join instruction populating user.profile from profiles."""
    return {
        "profile": {
            "strategy": {"strategy": 1, "meta": {"parentFK": "profile"}},
            "instructions": [
                {
                    "parent": "users",
                    "parentKey": "profile",
                    "child": "profiles",
                    "childKey": "id",
                    "select": ["id", "bio", "avatar"],
                    "alias": "profile",
                    "removeParentKey": True,
                    "model": True,
                    "collection": False,
                }
            ],
        }
    }
