"""DROP TABLE and DROP INDEX statement builders.

PostgreSQL drops every accumulated name in one statement; the other dialects
render only the most recently added name.
"""
from __future__ import annotations

from enum import Enum
from typing import ClassVar

from sqlchain.clauses import DropIndexParams, DropTableParams, StatementKind
from sqlchain.compile.clause_builders import ClauseBuilder, DropBuilder
from sqlchain.statements.base import Statement


class _DropStatement(Statement):
    """Shared accumulator for the DROP builders."""

    name_items: tuple[str, ...] = ()
    if_exists_flag: bool = False

    def _drop(self, name: str, clause: Enum, if_exists: bool = False):
        stmt = self._push("name_items", name, clause)
        if if_exists and not stmt.if_exists_flag:
            stmt = stmt._update("if_exists_flag", True)
        return stmt


class DropTable(_DropStatement):
    """Builder for ``DROP TABLE``.

    Example::

        DropTable().drop_table_if_exists("users").drop_table("orders")
        # DROP TABLE IF EXISTS users, orders
    """

    kind: ClassVar[StatementKind] = StatementKind.DROP_TABLE
    clause_enum: ClassVar[type[DropTableParams]] = DropTableParams
    clause_builders: ClassVar[dict[DropTableParams, ClauseBuilder]] = {
        DropTableParams.DROP_TABLE: DropBuilder("DROP TABLE"),
    }

    def drop_table(self, table: str) -> DropTable:
        return self._drop(table, DropTableParams.DROP_TABLE)

    def drop_table_if_exists(self, table: str) -> DropTable:
        return self._drop(table, DropTableParams.DROP_TABLE, if_exists=True)


class DropIndex(_DropStatement):
    """Builder for ``DROP INDEX``."""

    kind: ClassVar[StatementKind] = StatementKind.DROP_INDEX
    clause_enum: ClassVar[type[DropIndexParams]] = DropIndexParams
    clause_builders: ClassVar[dict[DropIndexParams, ClauseBuilder]] = {
        DropIndexParams.DROP_INDEX: DropBuilder("DROP INDEX"),
    }

    def drop_index(self, name: str) -> DropIndex:
        return self._drop(name, DropIndexParams.DROP_INDEX)

    def drop_index_if_exists(self, name: str) -> DropIndex:
        return self._drop(name, DropIndexParams.DROP_INDEX, if_exists=True)
