"""Unit tests for the schema builders: tables, indexes and drops."""
from __future__ import annotations

import pytest

from sqlchain import (
    AlterTable,
    AlterTableAction,
    CreateIndex,
    CreateIndexParams,
    CreateTable,
    CreateTableParams,
    DropIndex,
    DropTable,
)


# ---------------------------------------------------------------------------
# CREATE TABLE
# ---------------------------------------------------------------------------


def test_create_table() -> None:
    stmt = (
        CreateTable()
        .create_table("users")
        .column("id serial")
        .column("login varchar(40) not null")
        .primary_key("id")
    )
    assert stmt.as_string() == (
        "CREATE TABLE users (id serial, login varchar(40) not null, PRIMARY KEY(id))"
    )


def test_create_table_composite_primary_key() -> None:
    stmt = CreateTable().create_table("t").column("a int").column("b int").primary_key("(a, b)")
    assert stmt.as_string() == "CREATE TABLE t (a int, b int, PRIMARY KEY(a, b))"


def test_create_table_constraints_and_foreign_keys() -> None:
    stmt = (
        CreateTable()
        .create_table("orders")
        .column("id int")
        .column("user_id int")
        .constraint("orders_pk PRIMARY KEY (id)")
        .foreign_key("(user_id) REFERENCES users(id)")
    )
    assert stmt.as_string() == (
        "CREATE TABLE orders (id int, user_id int, "
        "CONSTRAINT orders_pk PRIMARY KEY (id), "
        "FOREIGN KEY(user_id) REFERENCES users(id))"
    )


def test_create_table_parameter_order_is_fixed() -> None:
    stmt = (
        CreateTable()
        .create_table("t")
        .foreign_key("(a) REFERENCES p(id)")
        .primary_key("a")
        .column("a int")
    )
    assert stmt.as_string() == "CREATE TABLE t (a int, PRIMARY KEY(a), FOREIGN KEY(a) REFERENCES p(id))"


def test_create_table_if_not_exists() -> None:
    stmt = CreateTable().create_table_if_not_exists("users").column("id int")
    assert stmt.as_string() == "CREATE TABLE IF NOT EXISTS users (id int)"


def test_create_table_raw_before_primary_key() -> None:
    stmt = (
        CreateTable()
        .create_table("t")
        .column("id int")
        .primary_key("id")
        .raw_before(CreateTableParams.PRIMARY_KEY, "/* pk */")
    )
    assert stmt.as_string() == "CREATE TABLE t (id int, /* pk */ PRIMARY KEY(id))"


def test_create_table_multiline() -> None:
    stmt = CreateTable().create_table("users").column("id int").column("name text").primary_key("id")
    assert repr(stmt) == (
        "CREATE TABLE users (\n  id int, \n  name text, \n  PRIMARY KEY(id)\n)"
    )


# ---------------------------------------------------------------------------
# ALTER TABLE
# ---------------------------------------------------------------------------


def test_alter_actions_without_table() -> None:
    assert AlterTable().add("COLUMN a int").drop("COLUMN b").as_string() == (
        "ADD COLUMN a int, DROP COLUMN b"
    )


def test_alter_table_actions_in_call_order() -> None:
    stmt = (
        AlterTable()
        .alter_table("users")
        .add("COLUMN age int")
        .rename("COLUMN login TO username")
        .alter("COLUMN name SET NOT NULL")
    )
    assert stmt.as_string() == (
        "ALTER TABLE users ADD COLUMN age int, "
        "RENAME COLUMN login TO username, ALTER COLUMN name SET NOT NULL"
    )


def test_duplicate_action_is_kept_once() -> None:
    stmt = AlterTable().alter_table("t").add("COLUMN a int").add("COLUMN a int")
    assert stmt.as_string() == "ALTER TABLE t ADD COLUMN a int"


def test_rename_to() -> None:
    assert AlterTable().alter_table("users").rename_to("people").as_string() == (
        "ALTER TABLE users RENAME TO people"
    )


def test_postgres_rename_replaces_previous() -> None:
    stmt = AlterTable().alter_table("t").rename("COLUMN a TO b").rename("COLUMN c TO d")
    assert stmt.as_string() == "ALTER TABLE t RENAME COLUMN c TO d"


def test_mysql_rename_accumulates() -> None:
    stmt = AlterTable.new("mysql").alter_table("t").rename("COLUMN a TO b").rename("COLUMN c TO d")
    assert stmt.as_string() == "ALTER TABLE t RENAME COLUMN a TO b, RENAME COLUMN c TO d"


def test_sqlite_drops_alter_action() -> None:
    stmt = AlterTable.new("sqlite").alter_table("t").alter("COLUMN x TYPE int")
    assert stmt.as_string() == "ALTER TABLE t"


def test_ansi_renders_add_and_drop_only() -> None:
    stmt = (
        AlterTable.new("ansi")
        .alter_table("t")
        .add("COLUMN a int")
        .drop("COLUMN b")
        .alter("COLUMN c TYPE int")
    )
    assert stmt.as_string() == "ALTER TABLE t ADD COLUMN a int, DROP COLUMN b"


def test_raw_before_action_precedes_it() -> None:
    stmt = (
        AlterTable()
        .alter_table("t")
        .raw_before(AlterTableAction.DROP, "/* x */")
        .add("COLUMN a int")
        .drop("COLUMN b")
    )
    assert stmt.as_string() == "ALTER TABLE t ADD COLUMN a int, /* x */ DROP COLUMN b"


def test_raw_after_action_follows_first_of_its_kind() -> None:
    stmt = (
        AlterTable()
        .alter_table("t")
        .add("COLUMN a int")
        .add("COLUMN b int")
        .raw_after(AlterTableAction.ADD, "/* first */")
    )
    assert stmt.as_string() == (
        "ALTER TABLE t ADD COLUMN a int /* first */, ADD COLUMN b int"
    )


def test_rename_action_takes_splices() -> None:
    stmt = (
        AlterTable()
        .alter_table("t")
        .raw_before(AlterTableAction.RENAME, "/* r */")
        .rename("COLUMN a TO b")
    )
    assert stmt.as_string() == "ALTER TABLE t /* r */ RENAME COLUMN a TO b"


# ---------------------------------------------------------------------------
# CREATE INDEX
# ---------------------------------------------------------------------------


def test_create_index() -> None:
    stmt = CreateIndex().create_index("users_name_idx").on("users").column("name")
    assert stmt.as_string() == "CREATE INDEX users_name_idx ON users (name)"


def test_postgres_create_index_all_options() -> None:
    stmt = (
        CreateIndex()
        .create_index_if_not_exists("idx")
        .unique()
        .concurrently()
        .on("users")
        .only()
        .using("btree")
        .column("login")
        .include("name")
        .where_clause("active")
    )
    assert stmt.as_string() == (
        "CREATE UNIQUE INDEX CONCURRENTLY IF NOT EXISTS idx "
        "ON ONLY users USING btree (login) INCLUDE (name) WHERE active"
    )


def test_postgres_anonymous_index() -> None:
    assert CreateIndex().unique().on("users").column("login").as_string() == (
        "CREATE UNIQUE INDEX ON users (login)"
    )


def test_postgres_header_needs_a_modifier_or_create_call() -> None:
    assert CreateIndex().on("users").column("login").as_string() == "ON users (login)"


def test_postgres_if_not_exists_needs_a_name() -> None:
    assert CreateIndex().create_index_if_not_exists("").on("users").as_string() == "ON users"


def test_create_index_resets_if_not_exists() -> None:
    stmt = CreateIndex().create_index_if_not_exists("a").create_index("b").on("t")
    assert stmt.as_string() == "CREATE INDEX b ON t"


def test_sqlite_index_requires_name() -> None:
    stmt = CreateIndex.new("sqlite").unique().on("users").column("login")
    assert stmt.as_string() == "ON users (login)"


def test_sqlite_partial_unique_index() -> None:
    stmt = (
        CreateIndex.new("sqlite")
        .create_index("idx")
        .unique()
        .on("users")
        .column("login")
        .where_clause("login IS NOT NULL")
    )
    assert stmt.as_string() == "CREATE UNIQUE INDEX idx ON users (login) WHERE login IS NOT NULL"


def test_mysql_index_options() -> None:
    stmt = (
        CreateIndex.new("mysql")
        .create_index("idx")
        .fulltext()
        .using("BTREE")
        .on("posts")
        .column("body")
        .lock("SHARED")
    )
    assert stmt.as_string() == "CREATE FULLTEXT INDEX idx USING BTREE ON posts (body) LOCK SHARED"


def test_mysql_ignores_if_not_exists() -> None:
    stmt = CreateIndex.new("mysql").create_index_if_not_exists("idx").on("t")
    assert stmt.as_string() == "CREATE INDEX idx ON t"


def test_index_modifier_splice() -> None:
    stmt = CreateIndex().raw_before(CreateIndexParams.UNIQUE, "/* u */").unique().create_index("idx")
    assert stmt.as_string() == "CREATE /* u */ UNIQUE INDEX idx"


# ---------------------------------------------------------------------------
# DROP
# ---------------------------------------------------------------------------


def test_postgres_drop_lists_every_table() -> None:
    assert DropTable().drop_table("users").drop_table("orders").as_string() == (
        "DROP TABLE users, orders"
    )


def test_drop_table_if_exists() -> None:
    assert DropTable().drop_table_if_exists("users").as_string() == "DROP TABLE IF EXISTS users"


@pytest.mark.parametrize("dialect_name", ["sqlite", "mysql", "ansi"])
def test_single_name_dialects_keep_the_last_table(dialect_name: str) -> None:
    stmt = DropTable.new(dialect_name).drop_table("users").drop_table("orders")
    assert stmt.as_string() == "DROP TABLE orders"


def test_drop_index() -> None:
    assert DropIndex().drop_index_if_exists("a").drop_index("b").as_string() == (
        "DROP INDEX IF EXISTS a, b"
    )
