"""PostgreSQL dialect."""
from __future__ import annotations

from enum import Enum
from typing import ClassVar

from sqlchain.clauses import (
    AlterTableAction,
    CreateIndexParams,
    DeleteClause,
    InsertClause,
    SelectClause,
    StatementKind,
    TransactionClause,
    UpdateClause,
)
from sqlchain.compile.ansi import AnsiDialect

Kind = StatementKind
Tx = TransactionClause

#: SELECT clause order shared by PostgreSQL and SQLite.
SELECT_ORDER: tuple[Enum, ...] = (
    SelectClause.WITH,
    SelectClause.SELECT,
    SelectClause.FROM,
    SelectClause.JOIN,
    SelectClause.WHERE,
    SelectClause.GROUP_BY,
    SelectClause.HAVING,
    SelectClause.WINDOW,
    SelectClause.ORDER_BY,
    SelectClause.LIMIT,
    SelectClause.OFFSET,
    SelectClause.EXCEPT,
    SelectClause.INTERSECT,
    SelectClause.UNION,
)


class PostgresDialect(AnsiDialect):
    """PostgreSQL: CTEs, RETURNING, set operations and the full CREATE INDEX."""

    CLAUSE_ORDERS: ClassVar[dict[StatementKind, tuple[Enum, ...]]] = {
        **AnsiDialect.CLAUSE_ORDERS,
        Kind.SELECT: SELECT_ORDER,
        Kind.INSERT: (
            InsertClause.WITH,
            InsertClause.INSERT_INTO,
            InsertClause.OVERRIDING,
            InsertClause.VALUES,
            InsertClause.SELECT,
            InsertClause.ON_CONFLICT,
            InsertClause.RETURNING,
        ),
        Kind.UPDATE: (
            UpdateClause.WITH,
            UpdateClause.UPDATE,
            UpdateClause.SET,
            UpdateClause.FROM,
            UpdateClause.WHERE,
            UpdateClause.RETURNING,
        ),
        Kind.DELETE: (
            DeleteClause.WITH,
            DeleteClause.DELETE_FROM,
            DeleteClause.WHERE,
            DeleteClause.RETURNING,
        ),
        Kind.ALTER_TABLE: (
            AlterTableAction.ALTER_TABLE,
            AlterTableAction.RENAME_TO,
            AlterTableAction.ADD,
        ),
        Kind.CREATE_INDEX: (
            CreateIndexParams.CREATE_INDEX,
            CreateIndexParams.ON,
            CreateIndexParams.USING,
            CreateIndexParams.COLUMN,
            CreateIndexParams.INCLUDE,
            CreateIndexParams.WHERE,
        ),
        Kind.TRANSACTION: (
            Tx.BEGIN,
            Tx.START_TRANSACTION,
            Tx.SET_TRANSACTION,
            Tx.ORDERED_COMMANDS,
            Tx.COMMIT,
            Tx.END,
        ),
    }

    alter_actions = (
        AlterTableAction.ADD,
        AlterTableAction.DROP,
        AlterTableAction.RENAME,
        AlterTableAction.ALTER,
    )

    index_suffix_modifiers = (CreateIndexParams.CONCURRENTLY,)
    index_on_modifiers = (CreateIndexParams.ONLY,)
    index_requires_name = False
    drop_lists_every_name = True

    @property
    def dialect_name(self) -> str:
        return "postgresql"
