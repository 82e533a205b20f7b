"""
Example 01: Compiling SELECT clauses

This example compiles plain, joined and aggregate SELECT clauses from
declarative query descriptors, then unmarshals an inlined join row.
"""

from query_sequel import AliasedRowMapper, SelectBuilder, build_select

SCHEMA = {
    "user": {
        "tableName": "users",
        "attributes": {
            "id": {"type": "string", "primaryKey": True},
            "name": "string",
            "email": {"type": "string", "columnName": "email_address"},
            "pets": {"collection": "pet", "via": "owner"},
            "profile": {"model": "profile"},
        },
    },
    "profile": {
        "tableName": "profiles",
        "attributes": {
            "id": {"type": "string", "primaryKey": True},
            "bio": "string",
        },
    },
    "order": {
        "tableName": "orders",
        "attributes": {
            "status": "string",
            "amount": "integer",
        },
    },
}


def main():
    users = SelectBuilder(SCHEMA, "users")

    # All declared, non-collection attributes
    print(users.build().statement)

    # Explicit selection plus a HAS_FK join inlined through column aliases
    joined = users.build(
        {
            "select": ["name", "profile"],
            "instructions": {
                "profile": {
                    "strategy": {"strategy": 1},
                    "instructions": [
                        {"parentKey": "profile", "child": "profiles", "alias": "profile"}
                    ],
                }
            },
        }
    )
    print(joined.with_clause('WHERE "name" = :name ').statement)

    row = {"name": "Alice", "profile": "#12:0", "profile___id": "#12:0", "profile___bio": "Hi!"}
    print(AliasedRowMapper().map_one(row))

    # Aggregation, with and without cast mode
    print(build_select(SCHEMA, "orders", {"groupBy": "status", "average": "amount"}).statement)
    print(build_select(SCHEMA, "orders", {"sum": ["amount"]}, {"cast": True}).statement)


if __name__ == "__main__":
    main()
