"""CREATE TABLE statement builder."""
from __future__ import annotations

from typing import ClassVar

from sqlchain.clauses import CreateTableParams, StatementKind
from sqlchain.compile.clause_builders import (
    ClauseBuilder,
    CreateTableParamsBuilder,
    ScalarBuilder,
)
from sqlchain.statements.base import Statement


class CreateTable(Statement):
    """Builder for ``CREATE TABLE``.

    Columns, the primary key, constraints and foreign keys render inside one
    parenthesized group in that order, whatever the call order.  Each part
    accepts its own raw splices via :class:`~sqlchain.clauses.CreateTableParams`.

    Example::

        (
            CreateTable()
            .create_table("users")
            .column("id serial")
            .column("login varchar(40) not null")
            .primary_key("id")
        )
        # CREATE TABLE users (id serial, login varchar(40) not null, PRIMARY KEY(id))
    """

    kind: ClassVar[StatementKind] = StatementKind.CREATE_TABLE
    clause_enum: ClassVar[type[CreateTableParams]] = CreateTableParams
    clause_builders: ClassVar[dict[CreateTableParams, ClauseBuilder]] = {
        CreateTableParams.CREATE_TABLE: ScalarBuilder(
            "CREATE TABLE", "create_table_value", line_break=False
        ),
        CreateTableParams.COLUMN: CreateTableParamsBuilder(),
    }

    create_table_value: str = ""
    column_items: tuple[str, ...] = ()
    primary_key_value: str = ""
    constraint_items: tuple[str, ...] = ()
    foreign_key_items: tuple[str, ...] = ()

    def create_table(self, table: str) -> CreateTable:
        return self._assign("create_table_value", table, CreateTableParams.CREATE_TABLE)

    def create_table_if_not_exists(self, table: str) -> CreateTable:
        table = table.strip()
        return self._assign(
            "create_table_value",
            f"IF NOT EXISTS {table}" if table else "",
            CreateTableParams.CREATE_TABLE,
        )

    def column(self, definition: str) -> CreateTable:
        return self._push("column_items", definition, CreateTableParams.COLUMN)

    def primary_key(self, column: str) -> CreateTable:
        """Set the primary key: ``"id"`` or ``"(id, tenant)"``."""
        return self._assign("primary_key_value", column, CreateTableParams.COLUMN)

    def constraint(self, definition: str) -> CreateTable:
        return self._push("constraint_items", definition, CreateTableParams.COLUMN)

    def foreign_key(self, definition: str) -> CreateTable:
        """Add ``FOREIGN KEY<definition>``, e.g. ``"(user_id) REFERENCES users(id)"``."""
        return self._push("foreign_key_items", definition, CreateTableParams.COLUMN)
