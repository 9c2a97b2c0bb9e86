"""UPDATE statement builder."""
from __future__ import annotations

from typing import ClassVar

from sqlchain.clauses import LogicalOperator, StatementKind, UpdateClause
from sqlchain.compile.clause_builders import (
    ClauseBuilder,
    JoinBuilder,
    KeywordListBuilder,
    ScalarBuilder,
    WhereBuilder,
    WithBuilder,
)
from sqlchain.statements.base import (
    JoinMixin,
    ReturningMixin,
    Statement,
    WhereMixin,
    WithMixin,
)


class Update(WithMixin, JoinMixin, WhereMixin, ReturningMixin, Statement):
    """Builder for ``UPDATE`` commands.

    Example::

        Update().update("users").set("name = 'Foo'").where_clause("id = $1")
        # UPDATE users SET name = 'Foo' WHERE id = $1
    """

    kind: ClassVar[StatementKind] = StatementKind.UPDATE
    clause_enum: ClassVar[type[UpdateClause]] = UpdateClause
    clause_builders: ClassVar[dict[UpdateClause, ClauseBuilder]] = {
        UpdateClause.WITH: WithBuilder("with_items"),
        UpdateClause.UPDATE: ScalarBuilder("UPDATE", "update_value"),
        UpdateClause.UPDATE_OR: ScalarBuilder("UPDATE OR", "update_or_value"),
        UpdateClause.JOIN: JoinBuilder("join_items"),
        UpdateClause.SET: KeywordListBuilder("SET", "set_items"),
        UpdateClause.FROM: KeywordListBuilder("FROM", "from_items"),
        UpdateClause.WHERE: WhereBuilder("where_items"),
        UpdateClause.ORDER_BY: KeywordListBuilder("ORDER BY", "order_by_items"),
        UpdateClause.LIMIT: ScalarBuilder("LIMIT", "limit_value"),
        UpdateClause.RETURNING: KeywordListBuilder("RETURNING", "returning_items"),
    }

    with_items: tuple[tuple[str, Statement], ...] = ()
    update_value: str = ""
    update_or_value: str = ""
    join_items: tuple[str, ...] = ()
    set_items: tuple[str, ...] = ()
    from_items: tuple[str, ...] = ()
    where_items: tuple[tuple[LogicalOperator, str], ...] = ()
    order_by_items: tuple[str, ...] = ()
    limit_value: str = ""
    returning_items: tuple[str, ...] = ()

    def update(self, table: str) -> Update:
        """Set ``UPDATE <table>``; replaces a previous ``update_or``."""
        return self._assign_head("update_value", table, UpdateClause.UPDATE, update_or_value="")

    def update_or(self, expression: str) -> Update:
        """Set ``UPDATE OR <expression>`` (SQLite); replaces a previous ``update``."""
        return self._assign_head(
            "update_or_value", expression, UpdateClause.UPDATE_OR, update_value=""
        )

    def set(self, assignment: str) -> Update:
        return self._push("set_items", assignment, UpdateClause.SET)

    def from_(self, table: str) -> Update:
        return self._push("from_items", table, UpdateClause.FROM)

    def order_by(self, column: str) -> Update:
        return self._push("order_by_items", column, UpdateClause.ORDER_BY)

    def limit(self, num: str | int) -> Update:
        return self._assign("limit_value", str(num), UpdateClause.LIMIT)
