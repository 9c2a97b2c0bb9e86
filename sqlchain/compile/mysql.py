"""MySQL dialect.

Differences from the other dialects:

- ``INSERT`` is either ``INSERT INTO ...`` or the split form
  ``INSERT <modifier> INTO <table> PARTITION (..) (columns)``, with
  ``VALUES ROW(..)``, ``INSERT ... SET`` and ``ON DUPLICATE KEY UPDATE``.
- ``DELETE`` and ``UPDATE`` accept joins, ``ORDER BY`` and ``LIMIT``.
- ``CREATE INDEX`` supports ``FULLTEXT``/``SPATIAL``, ``USING`` and ``LOCK``
  but not ``IF NOT EXISTS``.
- ``ALTER TABLE ... RENAME`` accumulates like any other action.
- No ``RETURNING``.
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
    UpdateClause,
)
from sqlchain.compile.ansi import AnsiDialect
from sqlchain.compile.postgres import SELECT_ORDER

Kind = StatementKind


class MySQLDialect(AnsiDialect):
    """MySQL 8 clause tables."""

    CLAUSE_ORDERS: ClassVar[dict[StatementKind, tuple[Enum, ...]]] = {
        **AnsiDialect.CLAUSE_ORDERS,
        Kind.SELECT: SELECT_ORDER,
        Kind.INSERT: (
            InsertClause.INSERT_INTO,
            InsertClause.INSERT,
            InsertClause.INTO,
            InsertClause.PARTITION,
            InsertClause.COLUMN,
            InsertClause.VALUES,
            InsertClause.SET,
            InsertClause.SELECT,
            InsertClause.ON_DUPLICATE_KEY_UPDATE,
        ),
        Kind.UPDATE: (
            UpdateClause.UPDATE,
            UpdateClause.JOIN,
            UpdateClause.SET,
            UpdateClause.WHERE,
            UpdateClause.ORDER_BY,
            UpdateClause.LIMIT,
        ),
        Kind.DELETE: (
            DeleteClause.DELETE,
            DeleteClause.DELETE_FROM,
            DeleteClause.FROM,
            DeleteClause.JOIN,
            DeleteClause.PARTITION,
            DeleteClause.WHERE,
            DeleteClause.ORDER_BY,
            DeleteClause.LIMIT,
        ),
        Kind.CREATE_INDEX: (
            CreateIndexParams.CREATE_INDEX,
            CreateIndexParams.USING,
            CreateIndexParams.ON,
            CreateIndexParams.COLUMN,
            CreateIndexParams.LOCK,
        ),
    }

    alter_actions = (
        AlterTableAction.ADD,
        AlterTableAction.DROP,
        AlterTableAction.RENAME,
        AlterTableAction.ALTER,
    )

    index_prefix_modifiers = (
        CreateIndexParams.UNIQUE,
        CreateIndexParams.FULLTEXT,
        CreateIndexParams.SPATIAL,
    )
    index_if_not_exists = False
    rename_is_ordered_action = True

    @property
    def dialect_name(self) -> str:
        return "mysql"
