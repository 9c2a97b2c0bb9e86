"""Standalone VALUES statement builder."""
from __future__ import annotations

from typing import ClassVar

from sqlchain.clauses import StatementKind, ValuesClause
from sqlchain.compile.clause_builders import ClauseBuilder, ValuesBuilder
from sqlchain.statements.base import Statement


class Values(Statement):
    """Builder for a bare ``VALUES`` list, usable on its own or inside ``WITH``.

    Example::

        Values().values("('foo', 'Foo')").values("('bar', 'Bar')")
        # VALUES ('foo', 'Foo'), ('bar', 'Bar')
    """

    kind: ClassVar[StatementKind] = StatementKind.VALUES
    clause_enum: ClassVar[type[ValuesClause]] = ValuesClause
    clause_builders: ClassVar[dict[ValuesClause, ClauseBuilder]] = {
        ValuesClause.VALUES: ValuesBuilder("values_items", row_field="row_items"),
    }

    values_items: tuple[str, ...] = ()
    row_items: tuple[str, ...] = ()

    def values(self, expression: str) -> Values:
        return self._push("values_items", expression, ValuesClause.VALUES)

    def row(self, expression: str) -> Values:
        """Add a ``ROW(...)`` constructor (MySQL)."""
        return self._push("row_items", expression, ValuesClause.VALUES)
