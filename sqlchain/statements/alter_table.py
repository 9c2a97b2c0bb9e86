"""ALTER TABLE statement builder."""
from __future__ import annotations

from typing import ClassVar

from sqlchain.clauses import AlterTableAction, StatementKind
from sqlchain.compile.clause_builders import (
    ClauseBuilder,
    OrderedActionsBuilder,
    ScalarBuilder,
)
from sqlchain.compile.registry import DialectFactory
from sqlchain.statements.accumulate import push_unique
from sqlchain.statements.base import Statement


class AlterTable(Statement):
    """Builder for ``ALTER TABLE``.

    ``add``, ``drop``, ``alter`` and ``rename`` record actions that render in
    call order.  On MySQL every ``rename`` call adds an action; elsewhere a
    table takes a single ``RENAME`` action and a later call replaces it.

    Example::

        AlterTable().alter_table("users").add("COLUMN age int").drop("COLUMN login")
        # ALTER TABLE users ADD COLUMN age int, DROP COLUMN login
    """

    kind: ClassVar[StatementKind] = StatementKind.ALTER_TABLE
    clause_enum: ClassVar[type[AlterTableAction]] = AlterTableAction
    clause_builders: ClassVar[dict[AlterTableAction, ClauseBuilder]] = {
        AlterTableAction.ALTER_TABLE: ScalarBuilder(
            "ALTER TABLE", "alter_table_value", line_break=False
        ),
        AlterTableAction.RENAME_TO: ScalarBuilder("RENAME TO", "rename_to_value", line_break=False),
        AlterTableAction.ADD: OrderedActionsBuilder("action_items"),
    }

    alter_table_value: str = ""
    rename_to_value: str = ""
    action_items: tuple[tuple[AlterTableAction, str], ...] = ()

    def alter_table(self, table: str) -> AlterTable:
        return self._assign("alter_table_value", table, AlterTableAction.ALTER_TABLE)

    def rename_to(self, table: str) -> AlterTable:
        return self._assign("rename_to_value", table, AlterTableAction.RENAME_TO)

    def add(self, expression: str) -> AlterTable:
        return self._action(AlterTableAction.ADD, expression)

    def drop(self, expression: str) -> AlterTable:
        return self._action(AlterTableAction.DROP, expression)

    def alter(self, expression: str) -> AlterTable:
        return self._action(AlterTableAction.ALTER, expression)

    def rename(self, expression: str) -> AlterTable:
        """Add ``RENAME <expression>``, e.g. ``"COLUMN login TO username"``."""
        if DialectFactory.create(self.dialect).rename_is_ordered_action:
            return self._action(AlterTableAction.RENAME, expression)
        expression = expression.strip()
        if not expression:
            return self
        self._check(AlterTableAction.RENAME)
        kept = tuple(item for item in self.action_items if item[0] is not AlterTableAction.RENAME)
        return self._update("action_items", (*kept, (AlterTableAction.RENAME, expression)))

    def _action(self, action: AlterTableAction, expression: str) -> AlterTable:
        self._check(action)
        items = push_unique(self.action_items, (action, expression.strip()))
        return self._update("action_items", items)
