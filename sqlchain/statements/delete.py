"""DELETE statement builder."""
from __future__ import annotations

from typing import ClassVar

from sqlchain.clauses import DeleteClause, LogicalOperator, StatementKind
from sqlchain.compile.clause_builders import (
    ClauseBuilder,
    JoinBuilder,
    KeywordListBuilder,
    ParenthesizedListBuilder,
    ScalarBuilder,
    WhereBuilder,
    WithBuilder,
)
from sqlchain.statements.accumulate import push_unique
from sqlchain.statements.base import (
    JoinMixin,
    ReturningMixin,
    Statement,
    WhereMixin,
    WithMixin,
)


class Delete(WithMixin, JoinMixin, WhereMixin, ReturningMixin, Statement):
    """Builder for ``DELETE`` commands.

    ``delete_from`` is the portable form.  MySQL also accepts the split form
    ``delete("LOW_PRIORITY").from_("users")``; the two forms replace each
    other.
    """

    kind: ClassVar[StatementKind] = StatementKind.DELETE
    clause_enum: ClassVar[type[DeleteClause]] = DeleteClause
    clause_builders: ClassVar[dict[DeleteClause, ClauseBuilder]] = {
        DeleteClause.WITH: WithBuilder("with_items"),
        DeleteClause.DELETE: ScalarBuilder("DELETE", "delete_modifier"),
        DeleteClause.DELETE_FROM: ScalarBuilder("DELETE FROM", "delete_from_value"),
        DeleteClause.FROM: KeywordListBuilder("FROM", "from_items"),
        DeleteClause.JOIN: JoinBuilder("join_items"),
        DeleteClause.PARTITION: ParenthesizedListBuilder("PARTITION", "partition_items"),
        DeleteClause.WHERE: WhereBuilder("where_items"),
        DeleteClause.ORDER_BY: KeywordListBuilder("ORDER BY", "order_by_items"),
        DeleteClause.LIMIT: ScalarBuilder("LIMIT", "limit_value"),
        DeleteClause.RETURNING: KeywordListBuilder("RETURNING", "returning_items"),
    }

    with_items: tuple[tuple[str, Statement], ...] = ()
    delete_modifier: str = ""
    delete_from_value: str = ""
    from_items: tuple[str, ...] = ()
    join_items: tuple[str, ...] = ()
    partition_items: tuple[str, ...] = ()
    where_items: tuple[tuple[LogicalOperator, str], ...] = ()
    order_by_items: tuple[str, ...] = ()
    limit_value: str = ""
    returning_items: tuple[str, ...] = ()

    def delete_from(self, table: str) -> Delete:
        return self._assign_head(
            "delete_from_value",
            table,
            DeleteClause.DELETE_FROM,
            delete_modifier="",
            from_items=(),
        )

    def delete(self, modifier: str) -> Delete:
        """Set ``DELETE <modifier>`` (MySQL), e.g. ``"QUICK"``."""
        return self._assign_head(
            "delete_modifier", modifier, DeleteClause.DELETE, delete_from_value=""
        )

    def from_(self, table: str) -> Delete:
        """Add a ``FROM`` table (MySQL split form)."""
        self._check(DeleteClause.FROM)
        items = push_unique(self.from_items, table.strip())
        if items is self.from_items:
            return self
        return self._update("from_items", items, delete_from_value="")

    def partition(self, name: str) -> Delete:
        """Add a partition name (MySQL)."""
        return self._push("partition_items", name, DeleteClause.PARTITION)

    def order_by(self, column: str) -> Delete:
        return self._push("order_by_items", column, DeleteClause.ORDER_BY)

    def limit(self, num: str | int) -> Delete:
        return self._assign("limit_value", str(num), DeleteClause.LIMIT)
