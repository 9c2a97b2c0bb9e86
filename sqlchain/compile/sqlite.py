"""SQLite dialect.

Differences from PostgreSQL:

- ``INSERT OR <action>`` / ``REPLACE INTO`` and ``DEFAULT VALUES``.
- ``UPDATE OR <action>`` and joins inside ``UPDATE ... FROM``.
- No ``OVERRIDING``, no ``ALTER`` column action, no ``INCLUDE``/``USING`` on
  indexes, and a single name per ``DROP``.
- Transactions open with ``BEGIN`` only.
"""
from __future__ import annotations

from enum import Enum
from typing import ClassVar

from sqlchain.clauses import (
    AlterTableAction,
    CreateIndexParams,
    DeleteClause,
    InsertClause,
    StatementKind,
    TransactionClause,
    UpdateClause,
)
from sqlchain.compile.ansi import AnsiDialect
from sqlchain.compile.postgres import SELECT_ORDER

Kind = StatementKind


class SQLiteDialect(AnsiDialect):
    """SQLite clause tables."""

    CLAUSE_ORDERS: ClassVar[dict[StatementKind, tuple[Enum, ...]]] = {
        **AnsiDialect.CLAUSE_ORDERS,
        Kind.SELECT: SELECT_ORDER,
        Kind.INSERT: (
            InsertClause.WITH,
            InsertClause.INSERT_INTO,
            InsertClause.INSERT_OR,
            InsertClause.REPLACE_INTO,
            InsertClause.VALUES,
            InsertClause.DEFAULT_VALUES,
            InsertClause.SELECT,
            InsertClause.ON_CONFLICT,
            InsertClause.RETURNING,
        ),
        Kind.UPDATE: (
            UpdateClause.WITH,
            UpdateClause.UPDATE,
            UpdateClause.UPDATE_OR,
            UpdateClause.SET,
            UpdateClause.FROM,
            UpdateClause.JOIN,
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
            CreateIndexParams.COLUMN,
            CreateIndexParams.WHERE,
        ),
        Kind.TRANSACTION: (
            TransactionClause.BEGIN,
            TransactionClause.ORDERED_COMMANDS,
            TransactionClause.COMMIT,
            TransactionClause.END,
        ),
    }

    alter_actions = (
        AlterTableAction.ADD,
        AlterTableAction.DROP,
        AlterTableAction.RENAME,
    )

    @property
    def dialect_name(self) -> str:
        return "sqlite"
