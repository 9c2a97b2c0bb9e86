"""SELECT statement builder."""
from __future__ import annotations

from typing import ClassVar

from sqlchain.clauses import LogicalOperator, SelectClause, StatementKind
from sqlchain.compile.clause_builders import (
    ClauseBuilder,
    CombinatorBuilder,
    JoinBuilder,
    KeywordListBuilder,
    ScalarBuilder,
    WhereBuilder,
    WithBuilder,
)
from sqlchain.statements.accumulate import push
from sqlchain.statements.base import JoinMixin, Statement, WhereMixin, WithMixin


class Select(WithMixin, JoinMixin, WhereMixin, Statement):
    """Builder for ``SELECT`` queries.

    Example::

        query = (
            Select()
            .select("id, login")
            .from_("users")
            .where_clause("login = $1")
            .order_by("id")
            .as_string()
        )
        # SELECT id, login FROM users WHERE login = $1 ORDER BY id
    """

    kind: ClassVar[StatementKind] = StatementKind.SELECT
    clause_enum: ClassVar[type[SelectClause]] = SelectClause
    clause_builders: ClassVar[dict[SelectClause, ClauseBuilder]] = {
        SelectClause.WITH: WithBuilder("with_items"),
        SelectClause.SELECT: KeywordListBuilder("SELECT", "select_items"),
        SelectClause.FROM: KeywordListBuilder("FROM", "from_items"),
        SelectClause.JOIN: JoinBuilder("join_items"),
        SelectClause.WHERE: WhereBuilder("where_items"),
        SelectClause.GROUP_BY: KeywordListBuilder("GROUP BY", "group_by_items"),
        SelectClause.HAVING: KeywordListBuilder("HAVING", "having_items", separator=" AND "),
        SelectClause.WINDOW: KeywordListBuilder("WINDOW", "window_items"),
        SelectClause.ORDER_BY: KeywordListBuilder("ORDER BY", "order_by_items"),
        SelectClause.LIMIT: ScalarBuilder("LIMIT", "limit_value"),
        SelectClause.OFFSET: ScalarBuilder("OFFSET", "offset_value"),
        SelectClause.EXCEPT: CombinatorBuilder("EXCEPT", "except_items"),
        SelectClause.INTERSECT: CombinatorBuilder("INTERSECT", "intersect_items"),
        SelectClause.UNION: CombinatorBuilder("UNION", "union_items"),
    }

    with_items: tuple[tuple[str, Statement], ...] = ()
    select_items: tuple[str, ...] = ()
    from_items: tuple[str, ...] = ()
    join_items: tuple[str, ...] = ()
    where_items: tuple[tuple[LogicalOperator, str], ...] = ()
    group_by_items: tuple[str, ...] = ()
    having_items: tuple[str, ...] = ()
    window_items: tuple[str, ...] = ()
    order_by_items: tuple[str, ...] = ()
    limit_value: str = ""
    offset_value: str = ""
    except_items: tuple[Select, ...] = ()
    intersect_items: tuple[Select, ...] = ()
    union_items: tuple[Select, ...] = ()

    def select(self, column: str) -> Select:
        return self._push("select_items", column, SelectClause.SELECT)

    def from_(self, table: str) -> Select:
        return self._push("from_items", table, SelectClause.FROM)

    def group_by(self, column: str) -> Select:
        return self._push("group_by_items", column, SelectClause.GROUP_BY)

    def having(self, condition: str) -> Select:
        """Add a ``HAVING`` condition; conditions are joined with ``AND``."""
        return self._push("having_items", condition, SelectClause.HAVING)

    def window(self, definition: str) -> Select:
        """Add a named window, e.g. ``"win AS (PARTITION BY dept)"``."""
        return self._push("window_items", definition, SelectClause.WINDOW)

    def order_by(self, column: str) -> Select:
        return self._push("order_by_items", column, SelectClause.ORDER_BY)

    def limit(self, num: str | int) -> Select:
        return self._assign("limit_value", str(num), SelectClause.LIMIT)

    def offset(self, num: str | int) -> Select:
        return self._assign("offset_value", str(num), SelectClause.OFFSET)

    # ------------------------------------------------------------------
    # Set operations
    # ------------------------------------------------------------------

    def except_(self, select: Select) -> Select:
        return self._combine("except_items", select, SelectClause.EXCEPT)

    def intersect(self, select: Select) -> Select:
        return self._combine("intersect_items", select, SelectClause.INTERSECT)

    def union(self, select: Select) -> Select:
        return self._combine("union_items", select, SelectClause.UNION)

    def _combine(self, field: str, select: Select, clause: SelectClause) -> Select:
        self._check(clause)
        return self._update(field, push(getattr(self, field), select))
