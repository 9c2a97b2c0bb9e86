"""Test fixtures: a small users/orders schema expressed with the builders."""

from __future__ import annotations

from sqlchain import CreateTable, Insert

USERS = [
    ("foo", "Foo"),
    ("bar", "Bar"),
    ("baz", "Baz"),
]

ORDERS = [
    (1, 10.0),
    (1, 25.5),
    (2, 7.0),
]


def schema_statements(dialect: str = "sqlite") -> list[CreateTable]:
    """Return the CREATE TABLE builders for the sample schema, parents first.

    Args:
        dialect: Dialect for every returned builder.
    """
    users = (
        CreateTable.new(dialect)
        .create_table("users")
        .column("id INTEGER")
        .column("login TEXT NOT NULL")
        .column("name TEXT")
        .primary_key("id")
    )
    orders = (
        CreateTable.new(dialect)
        .create_table("orders")
        .column("id INTEGER")
        .column("user_id INTEGER")
        .column("total REAL")
        .primary_key("id")
        .foreign_key("(user_id) REFERENCES users(id)")
    )
    return [users, orders]


def seed_statements(dialect: str = "sqlite") -> list[Insert]:
    """Return INSERT builders that populate the sample schema."""
    users = Insert.new(dialect).insert_into("users (login, name)")
    for login, name in USERS:
        users = users.values(f"('{login}', '{name}')")
    orders = Insert.new(dialect).insert_into("orders (user_id, total)")
    for user_id, total in ORDERS:
        orders = orders.values(f"({user_id}, {total})")
    return [users, orders]
