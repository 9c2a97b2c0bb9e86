"""ANSI SQL dialect.

The portable core every other dialect builds on.  No ``WITH``, ``LIMIT``,
``OFFSET``, ``RETURNING`` or set operations; those belong to the vendor
dialects.
"""
from __future__ import annotations

from enum import Enum
from typing import ClassVar

from sqlchain.clauses import (
    AlterTableAction,
    CreateIndexParams,
    CreateTableParams,
    DeleteClause,
    DropIndexParams,
    DropTableParams,
    InsertClause,
    SelectClause,
    StatementKind,
    TransactionClause,
    UpdateClause,
    ValuesClause,
)
from sqlchain.compile.base import SQLDialect

Kind = StatementKind
Tx = TransactionClause


class AnsiDialect(SQLDialect):
    """Clause tables for standard SQL.

    Subclasses extend :attr:`CLAUSE_ORDERS` by copying it and overriding the
    statement kinds whose clause set differs.
    """

    CLAUSE_ORDERS: ClassVar[dict[StatementKind, tuple[Enum, ...]]] = {
        Kind.SELECT: (
            SelectClause.SELECT,
            SelectClause.FROM,
            SelectClause.JOIN,
            SelectClause.WHERE,
            SelectClause.GROUP_BY,
            SelectClause.HAVING,
            SelectClause.WINDOW,
            SelectClause.ORDER_BY,
        ),
        Kind.INSERT: (
            InsertClause.INSERT_INTO,
            InsertClause.OVERRIDING,
            InsertClause.VALUES,
            InsertClause.SELECT,
            InsertClause.ON_CONFLICT,
        ),
        Kind.UPDATE: (UpdateClause.UPDATE, UpdateClause.SET, UpdateClause.WHERE),
        Kind.DELETE: (DeleteClause.DELETE_FROM, DeleteClause.WHERE),
        Kind.VALUES: (ValuesClause.VALUES,),
        Kind.CREATE_TABLE: (CreateTableParams.CREATE_TABLE, CreateTableParams.COLUMN),
        Kind.ALTER_TABLE: (AlterTableAction.ALTER_TABLE, AlterTableAction.ADD),
        Kind.CREATE_INDEX: (
            CreateIndexParams.CREATE_INDEX,
            CreateIndexParams.ON,
            CreateIndexParams.COLUMN,
        ),
        Kind.DROP_TABLE: (DropTableParams.DROP_TABLE,),
        Kind.DROP_INDEX: (DropIndexParams.DROP_INDEX,),
        Kind.TRANSACTION: (
            Tx.START_TRANSACTION,
            Tx.SET_TRANSACTION,
            Tx.ORDERED_COMMANDS,
            Tx.COMMIT,
        ),
    }

    @property
    def dialect_name(self) -> str:
        return "ansi"

    def clause_order(self, kind: StatementKind) -> tuple[Enum, ...]:
        return self.CLAUSE_ORDERS[kind]
