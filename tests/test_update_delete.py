"""Unit tests for the Update and Delete builders."""
from __future__ import annotations

from sqlchain import Delete, Select, Update


# ---------------------------------------------------------------------------
# Update
# ---------------------------------------------------------------------------


def test_update_set() -> None:
    assert Update().update("users").set("login = 'foo'").as_string() == "UPDATE users SET login = 'foo'"


def test_update_set_where() -> None:
    stmt = Update().update("users").set("name = 'Foo'").where_clause("login = 'foo'")
    assert stmt.as_string() == "UPDATE users SET name = 'Foo' WHERE login = 'foo'"


def test_update_from_returning() -> None:
    stmt = (
        Update()
        .update("users")
        .set("name = o.name")
        .from_("others o")
        .where_clause("o.id = users.id")
        .returning("users.id")
    )
    assert stmt.as_string() == (
        "UPDATE users SET name = o.name FROM others o WHERE o.id = users.id RETURNING users.id"
    )


def test_update_with() -> None:
    stmt = (
        Update()
        .with_("vip", Select().select("id").from_("users").where_clause("vip"))
        .update("orders")
        .set("discount = 10")
        .where_clause("user_id IN (SELECT id FROM vip)")
    )
    assert stmt.as_string() == (
        "WITH vip AS (SELECT id FROM users WHERE vip) "
        "UPDATE orders SET discount = 10 WHERE user_id IN (SELECT id FROM vip)"
    )


def test_sqlite_update_or() -> None:
    stmt = Update.new("sqlite").update_or("IGNORE orders").set("qty = 1")
    assert stmt.as_string() == "UPDATE OR IGNORE orders SET qty = 1"


def test_update_replaces_update_or() -> None:
    stmt = Update.new("sqlite").update_or("IGNORE orders").update("orders")
    assert stmt.as_string() == "UPDATE orders"


def test_empty_update_keeps_update_or() -> None:
    stmt = Update.new("sqlite").update_or("IGNORE orders").update("  ").set("qty = 1")
    assert stmt.as_string() == "UPDATE OR IGNORE orders SET qty = 1"


def test_sqlite_join_follows_from() -> None:
    stmt = (
        Update.new("sqlite")
        .update("orders")
        .set("qty = 1")
        .from_("users")
        .inner_join("addresses ON addresses.user_id = users.id")
    )
    assert stmt.as_string() == (
        "UPDATE orders SET qty = 1 FROM users INNER JOIN addresses ON addresses.user_id = users.id"
    )


def test_mysql_update_join_order_limit() -> None:
    stmt = (
        Update.new("mysql")
        .update("users u")
        .inner_join("orders o ON o.user_id = u.id")
        .set("u.total = o.total")
        .where_clause("o.id = 1")
        .order_by("u.id")
        .limit(5)
    )
    assert stmt.as_string() == (
        "UPDATE users u INNER JOIN orders o ON o.user_id = u.id "
        "SET u.total = o.total WHERE o.id = 1 ORDER BY u.id LIMIT 5"
    )


def test_postgres_has_no_update_limit() -> None:
    assert Update().update("users").set("a = 1").limit(1).as_string() == "UPDATE users SET a = 1"


# ---------------------------------------------------------------------------
# Delete
# ---------------------------------------------------------------------------


def test_delete_from_where() -> None:
    stmt = Delete().delete_from("users").where_clause("login = 'foo'")
    assert stmt.as_string() == "DELETE FROM users WHERE login = 'foo'"


def test_delete_where_and() -> None:
    stmt = Delete().delete_from("users").where_clause("name = 'Foo'").where_and("login = 'foo'")
    assert stmt.as_string() == "DELETE FROM users WHERE name = 'Foo' AND login = 'foo'"


def test_delete_returning() -> None:
    assert Delete().delete_from("users").returning("id").as_string() == "DELETE FROM users RETURNING id"


def test_mysql_delete_split_form() -> None:
    stmt = (
        Delete.new("mysql")
        .delete("LOW_PRIORITY")
        .from_("employees")
        .partition("p0")
        .where_clause("id = 1")
        .order_by("id")
        .limit(1)
    )
    assert stmt.as_string() == (
        "DELETE LOW_PRIORITY FROM employees PARTITION (p0) WHERE id = 1 ORDER BY id LIMIT 1"
    )


def test_empty_delete_modifier_keeps_delete_from() -> None:
    stmt = Delete.new("mysql").delete_from("users").delete("")
    assert stmt.as_string() == "DELETE FROM users"

def test_mysql_delete_from_with_partition() -> None:
    stmt = Delete.new("mysql").delete_from("employees").partition("p0")
    assert stmt.as_string() == "DELETE FROM employees PARTITION (p0)"


def test_delete_from_replaces_split_form() -> None:
    stmt = Delete.new("mysql").delete("QUICK").from_("a").delete_from("b")
    assert stmt.as_string() == "DELETE FROM b"


def test_split_form_replaces_delete_from() -> None:
    stmt = Delete.new("mysql").delete_from("b").from_("a")
    assert stmt.as_string() == "FROM a"
