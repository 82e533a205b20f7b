"""Unit tests for ProjectionCompiler."""

from __future__ import annotations

from typing import Any

import pytest

from query_sequel.compiler.plan import ProjectionEntry
from query_sequel.compiler.projection import ProjectionCompiler
from query_sequel.core.config import CompilerOptions
from query_sequel.core.exceptions import SchemaMismatchError
from query_sequel.query.descriptor import QueryDescriptor
from query_sequel.schema.model import Schema
from query_sequel.schema.resolver import SchemaResolver


@pytest.fixture
def compiler(schema: Schema, options: CompilerOptions) -> ProjectionCompiler:
    return ProjectionCompiler(SchemaResolver(schema), options)


def _columns(entries: list[ProjectionEntry]) -> list[str]:
    return [entry.column for entry in entries]


class TestAttributeNames:
    def test_declared_attributes_by_default(
        self, compiler: ProjectionCompiler, schema: Schema
    ) -> None:
        names = compiler.attribute_names(schema.entity("user"), QueryDescriptor())
        assert names == ["id", "name", "email", "pets", "profile"]

    def test_explicit_selection(self, compiler: ProjectionCompiler, schema: Schema) -> None:
        query = QueryDescriptor.model_validate({"select": ["email", "name"]})
        assert compiler.attribute_names(schema.entity("user"), query) == ["email", "name"]

    def test_fetch_plan_union_without_duplicates(
        self, compiler: ProjectionCompiler, schema: Schema
    ) -> None:
        query = QueryDescriptor.model_validate(
            {"select": ["name", "name"], "fetchPlan": {"select": ["email", "name"]}}
        )
        assert compiler.attribute_names(schema.entity("user"), query) == ["name", "email"]


class TestCollect:
    def test_all_non_collection_attributes(self, compiler: ProjectionCompiler) -> None:
        entries = compiler.collect("user", QueryDescriptor())
        assert entries == [
            ProjectionEntry(table="user", column="@rid"),
            ProjectionEntry(table="user", column="name"),
            ProjectionEntry(table="user", column="email_address"),
            ProjectionEntry(table="user", column="profile"),
        ]

    def test_collection_never_projected_even_when_selected(
        self, compiler: ProjectionCompiler
    ) -> None:
        query = QueryDescriptor.model_validate({"select": ["name", "pets"]})
        assert _columns(compiler.collect("user", query)) == ["name"]

    def test_undeclared_attribute_passed_through(self, compiler: ProjectionCompiler) -> None:
        query = QueryDescriptor.model_validate({"select": ["name", "legacy_col"]})
        assert _columns(compiler.collect("user", query)) == ["name", "legacy_col"]

    def test_schemaless_adds_one_wildcard(self, compiler: ProjectionCompiler) -> None:
        query = QueryDescriptor.model_validate({"schemaless": True})
        assert _columns(compiler.collect("event", query)) == ["kind", "*"]

    def test_schemaless_with_selection_has_no_wildcard(
        self, compiler: ProjectionCompiler
    ) -> None:
        query = QueryDescriptor.model_validate({"schemaless": True, "select": ["kind"]})
        assert _columns(compiler.collect("event", query)) == ["kind"]

    def test_identity_rename_configurable(self, schema: Schema) -> None:
        compiler = ProjectionCompiler(
            SchemaResolver(schema), CompilerOptions(identity_columns={})
        )
        assert _columns(compiler.collect("order", QueryDescriptor()))[0] == "id"

    def test_null_collection_marker_still_skipped(self, options: CompilerOptions) -> None:
        schema = Schema.from_dict(
            {
                "user": {
                    "tableName": "users",
                    "attributes": {"name": "string", "pets": {"collection": None}},
                }
            }
        )
        compiler = ProjectionCompiler(SchemaResolver(schema), options)
        assert _columns(compiler.collect("user", QueryDescriptor())) == ["name"]

    def test_declared_column_name_beats_identity_rename(self, options: CompilerOptions) -> None:
        schema = Schema.from_dict(
            {"tag": {"tableName": "tags", "attributes": {"id": {"columnName": "tag_id"}}}}
        )
        compiler = ProjectionCompiler(SchemaResolver(schema), options)
        assert _columns(compiler.collect("tag", QueryDescriptor())) == ["tag_id"]


class TestJoinExpansion:
    def test_has_fk_join_inlined_with_alias_table(
        self, compiler: ProjectionCompiler, profile_join: dict[str, Any]
    ) -> None:
        query = QueryDescriptor.model_validate({"select": ["name"], "instructions": profile_join})
        entries = compiler.collect("user", query)
        assert entries == [
            ProjectionEntry(table="user", column="name"),
            ProjectionEntry(table="__profile", column="id", alias="profile"),
            ProjectionEntry(table="__profile", column="bio", alias="profile"),
            ProjectionEntry(table="__profile", column="avatar_url", alias="profile"),
        ]

    def test_join_without_alias_uses_child_table(
        self, compiler: ProjectionCompiler, profile_join: dict[str, Any]
    ) -> None:
        del profile_join["profile"]["instructions"][0]["alias"]
        query = QueryDescriptor.model_validate({"select": [], "instructions": profile_join})
        tables = {entry.table for entry in compiler.collect("user", query)}
        assert tables == {"profiles"}

    def test_child_collections_skipped(self, compiler: ProjectionCompiler) -> None:
        query = QueryDescriptor.model_validate(
            {
                "select": [],
                "instructions": {
                    "pet": {
                        "strategy": {"strategy": 1},
                        "instructions": [{"parentKey": "pet", "child": "pets"}],
                    }
                },
            }
        )
        assert _columns(compiler.collect("user", query)) == ["id", "name", "owner"]

    @pytest.mark.parametrize("strategy", [2, 3])
    def test_other_strategies_not_expanded(
        self, compiler: ProjectionCompiler, strategy: int
    ) -> None:
        query = QueryDescriptor.model_validate(
            {
                "select": ["name"],
                "instructions": {
                    "pets": {
                        "strategy": {"strategy": strategy},
                        "instructions": [{"parentKey": "id", "child": "pets"}],
                    }
                },
            }
        )
        assert _columns(compiler.collect("user", query)) == ["name"]

    def test_only_first_population_expanded(self, compiler: ProjectionCompiler) -> None:
        query = QueryDescriptor.model_validate(
            {
                "select": ["name"],
                "instructions": {
                    "profile": {
                        "strategy": 1,
                        "instructions": [
                            {"parentKey": "profile", "child": "profiles"},
                            {"parentKey": "pet", "child": "pets"},
                        ],
                    }
                },
            }
        )
        entries = compiler.collect("user", query)
        assert entries == [
            ProjectionEntry(table="user", column="name"),
            ProjectionEntry(table="profiles", column="id", alias="profile"),
            ProjectionEntry(table="profiles", column="bio", alias="profile"),
            ProjectionEntry(table="profiles", column="avatar_url", alias="profile"),
        ]

    def test_has_fk_without_populations_adds_nothing(
        self, compiler: ProjectionCompiler
    ) -> None:
        query = QueryDescriptor.model_validate(
            {"select": ["name"], "instructions": {"profile": {"strategy": 1, "instructions": []}}}
        )
        assert compiler.collect("user", query) == [ProjectionEntry(table="user", column="name")]

    def test_unknown_child_table_raises(self, compiler: ProjectionCompiler) -> None:
        query = QueryDescriptor.model_validate(
            {
                "instructions": {
                    "ghost": {
                        "strategy": 1,
                        "instructions": [{"parentKey": "ghost", "child": "ghosts"}],
                    }
                },
            }
        )
        with pytest.raises(SchemaMismatchError, match="ghosts"):
            compiler.collect("user", query)


class TestRender:
    def test_plain_columns(self, compiler: ProjectionCompiler) -> None:
        entries = [
            ProjectionEntry(table="user", column="@rid"),
            ProjectionEntry(table="user", column="name"),
        ]
        assert compiler.render(entries, "users") == 'SELECT "@rid", "name" FROM "users" '

    def test_aliased_columns(self, compiler: ProjectionCompiler) -> None:
        entries = [ProjectionEntry(table="__profile", column="bio", alias="profile")]
        assert compiler.render(entries, "users") == (
            'SELECT "bio" AS "profile___bio" FROM "users" '
        )

    def test_custom_separator_and_escape(self, schema: Schema) -> None:
        compiler = ProjectionCompiler(
            SchemaResolver(schema),
            CompilerOptions(escape_character="`", alias_separator="__"),
        )
        entries = [ProjectionEntry(table="pets", column="name", alias="pet")]
        assert compiler.render(entries, "users") == "SELECT `name` AS `pet__name` FROM `users` "

    def test_empty_projection(self, compiler: ProjectionCompiler) -> None:
        assert compiler.render([], "users") == 'SELECT FROM "users" '
