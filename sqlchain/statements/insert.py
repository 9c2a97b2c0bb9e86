"""INSERT statement builder.

The head of an INSERT can be written three ways, and the last call wins:

- ``insert_into("users (login, name)")``: every dialect.
- ``insert_or("IGNORE INTO users")`` / ``replace_into("users")``: SQLite.
- ``insert("LOW_PRIORITY")``, ``into("users")``, ``partition("p1")`` and
  ``column("login")``: the MySQL split form.  These combine with each other
  but are cleared by ``insert_into`` and clear it in turn.
"""
from __future__ import annotations

from typing import ClassVar

from sqlchain.clauses import InsertClause, StatementKind
from sqlchain.compile.clause_builders import (
    ClauseBuilder,
    FlagBuilder,
    KeywordListBuilder,
    ParenthesizedListBuilder,
    ScalarBuilder,
    SubStatementBuilder,
    ValuesBuilder,
    WithBuilder,
)
from sqlchain.statements.accumulate import push_unique
from sqlchain.statements.base import ReturningMixin, Statement, WithMixin
from sqlchain.statements.select import Select

_SPLIT_FORM_RESET = {
    "insert_modifier": "",
    "into_value": "",
    "partition_items": (),
    "column_items": (),
}


class Insert(WithMixin, ReturningMixin, Statement):
    """Builder for ``INSERT`` commands.

    Example::

        Insert().insert_into("users (login, name)").values("('foo', 'Foo')")
        # INSERT INTO users (login, name) VALUES ('foo', 'Foo')
    """

    kind: ClassVar[StatementKind] = StatementKind.INSERT
    clause_enum: ClassVar[type[InsertClause]] = InsertClause
    clause_builders: ClassVar[dict[InsertClause, ClauseBuilder]] = {
        InsertClause.WITH: WithBuilder("with_items"),
        InsertClause.INSERT_INTO: ScalarBuilder("INSERT INTO", "insert_into_value"),
        InsertClause.INSERT_OR: ScalarBuilder("INSERT OR", "insert_or_value"),
        InsertClause.REPLACE_INTO: ScalarBuilder("REPLACE INTO", "replace_into_value"),
        InsertClause.INSERT: ScalarBuilder("INSERT", "insert_modifier"),
        InsertClause.INTO: ScalarBuilder("INTO", "into_value"),
        InsertClause.PARTITION: ParenthesizedListBuilder("PARTITION", "partition_items"),
        InsertClause.COLUMN: ParenthesizedListBuilder("", "column_items"),
        InsertClause.OVERRIDING: ScalarBuilder("OVERRIDING", "overriding_value"),
        InsertClause.VALUES: ValuesBuilder("values_items", row_field="row_items"),
        InsertClause.DEFAULT_VALUES: FlagBuilder("DEFAULT VALUES", "default_values_flag"),
        InsertClause.SET: KeywordListBuilder("SET", "set_items"),
        InsertClause.SELECT: SubStatementBuilder("select_statement"),
        InsertClause.ON_CONFLICT: ScalarBuilder("ON CONFLICT", "on_conflict_value"),
        InsertClause.ON_DUPLICATE_KEY_UPDATE: KeywordListBuilder(
            "ON DUPLICATE KEY UPDATE", "on_duplicate_key_update_items"
        ),
        InsertClause.RETURNING: KeywordListBuilder("RETURNING", "returning_items"),
    }

    with_items: tuple[tuple[str, Statement], ...] = ()
    insert_into_value: str = ""
    insert_or_value: str = ""
    replace_into_value: str = ""
    insert_modifier: str = ""
    into_value: str = ""
    partition_items: tuple[str, ...] = ()
    column_items: tuple[str, ...] = ()
    overriding_value: str = ""
    values_items: tuple[str, ...] = ()
    row_items: tuple[str, ...] = ()
    default_values_flag: bool = False
    set_items: tuple[str, ...] = ()
    select_statement: Select | None = None
    on_conflict_value: str = ""
    on_duplicate_key_update_items: tuple[str, ...] = ()
    returning_items: tuple[str, ...] = ()

    # ------------------------------------------------------------------
    # Statement head
    # ------------------------------------------------------------------

    def insert_into(self, table: str) -> Insert:
        """Set ``INSERT INTO <table>``, replacing any other head form."""
        return self._assign_head(
            "insert_into_value",
            table,
            InsertClause.INSERT_INTO,
            insert_or_value="",
            replace_into_value="",
            **_SPLIT_FORM_RESET,
        )

    def insert_or(self, expression: str) -> Insert:
        """Set ``INSERT OR <expression>`` (SQLite)."""
        return self._assign_head(
            "insert_or_value",
            expression,
            InsertClause.INSERT_OR,
            insert_into_value="",
            replace_into_value="",
        )

    def replace_into(self, table: str) -> Insert:
        """Set ``REPLACE INTO <table>`` (SQLite)."""
        return self._assign_head(
            "replace_into_value",
            table,
            InsertClause.REPLACE_INTO,
            insert_into_value="",
            insert_or_value="",
        )

    def insert(self, modifier: str) -> Insert:
        """Set ``INSERT <modifier>`` (MySQL), e.g. ``"LOW_PRIORITY"``."""
        return self._assign_head(
            "insert_modifier", modifier, InsertClause.INSERT, insert_into_value=""
        )

    def into(self, table: str) -> Insert:
        """Set ``INTO <table>`` (MySQL)."""
        return self._assign_head("into_value", table, InsertClause.INTO, insert_into_value="")

    def partition(self, name: str) -> Insert:
        """Add a partition name (MySQL)."""
        return self._split_list("partition_items", name, InsertClause.PARTITION)

    def column(self, name: str) -> Insert:
        """Add a column name (MySQL)."""
        return self._split_list("column_items", name, InsertClause.COLUMN)

    def _split_list(self, field: str, value: str, clause: InsertClause) -> Insert:
        self._check(clause)
        items = push_unique(getattr(self, field), value.strip())
        if items is getattr(self, field):
            return self
        return self._update(field, items, insert_into_value="")

    # ------------------------------------------------------------------
    # Payload
    # ------------------------------------------------------------------

    def overriding(self, option: str) -> Insert:
        """Set ``OVERRIDING <option>``, e.g. ``"SYSTEM VALUE"``."""
        return self._assign("overriding_value", option, InsertClause.OVERRIDING)

    def values(self, expression: str) -> Insert:
        return self._push("values_items", expression, InsertClause.VALUES)

    def row(self, expression: str) -> Insert:
        """Add a ``ROW(...)`` constructor to ``VALUES`` (MySQL)."""
        return self._push("row_items", expression, InsertClause.VALUES)

    def default_values(self) -> Insert:
        """Emit ``DEFAULT VALUES`` (SQLite)."""
        self._check(InsertClause.DEFAULT_VALUES)
        return self._update("default_values_flag", True)

    def set(self, assignment: str) -> Insert:
        """Add an ``INSERT ... SET`` assignment (MySQL)."""
        return self._push("set_items", assignment, InsertClause.SET)

    def select(self, select: Select) -> Insert:
        """Insert the rows produced by ``select``; replaces any previous one."""
        self._check(InsertClause.SELECT)
        return self._update("select_statement", select)

    def on_conflict(self, conflict: str) -> Insert:
        return self._assign("on_conflict_value", conflict, InsertClause.ON_CONFLICT)

    def on_duplicate_key_update(self, assignment: str) -> Insert:
        """Add an ``ON DUPLICATE KEY UPDATE`` assignment (MySQL)."""
        return self._push(
            "on_duplicate_key_update_items", assignment, InsertClause.ON_DUPLICATE_KEY_UPDATE
        )
