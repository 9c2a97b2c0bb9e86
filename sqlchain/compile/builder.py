"""Statement assembler: the render orchestrator.

:class:`StatementAssembler` owns the render skeleton shared by every
statement kind:

1. the top-of-statement raw prefix,
2. each clause of ``dialect.clause_order(kind)``, rendered by the builder the
   statement registers for it and surrounded by its raw splices,
3. a final right trim.

Clause builders live in :mod:`sqlchain.compile.clause_builders`; the order
lives in the dialect classes.  Rendering is a pure function of the statement
value and the formatter.
"""
from __future__ import annotations

import logging
from typing import Any

from sqlchain.compile.base import SQLDialect
from sqlchain.compile.context import RenderContext
from sqlchain.compile.raw import concat_raw
from sqlchain.fmt import Formatter

logger = logging.getLogger(__name__)


class StatementAssembler:
    """Folds a statement's clause builders into one SQL string.

    Args:
        dialect: Dialect whose clause order drives the fold.
    """

    def __init__(self, dialect: SQLDialect) -> None:
        self._dialect = dialect

    def assemble(self, stmt: Any, fmts: Formatter) -> str:
        """Render ``stmt`` with ``fmts``.

        Args:
            stmt: A statement model exposing ``kind``, ``raw_items`` and a
                ``clause_builders`` table.
            fmts: Whitespace tokens.

        Returns:
            The right-trimmed SQL text; ``""`` for an empty statement.
        """
        ctx = RenderContext(fmts=fmts, dialect=self._dialect)
        query = concat_raw("", fmts, stmt.raw_items)
        for clause in self._dialect.clause_order(stmt.kind):
            query = stmt.clause_builders[clause].render(stmt, clause, query, ctx)
        sql = query.rstrip()
        logger.debug(
            "Rendered %s for %s: %r", stmt.kind.value, self._dialect.dialect_name, sql
        )
        return sql
