"""Statement base model and the setter mixins shared across statement kinds.

Every statement is a frozen pydantic model.  Setters never mutate: they
return ``self`` when the call changes nothing, otherwise a copy produced with
``model_copy(update=...)``.  A partially built statement can therefore be
reused as the common ancestor of several variants.

Rendering is delegated to
:class:`~sqlchain.compile.builder.StatementAssembler` with the dialect named
by the ``dialect`` field.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sqlchain import fmt
from sqlchain.clauses import LogicalOperator, StatementKind
from sqlchain.compile.builder import StatementAssembler
from sqlchain.compile.clause_builders import ClauseBuilder
from sqlchain.compile.registry import DialectFactory
from sqlchain.config import get_config
from sqlchain.statements.accumulate import assign_scalar, push, push_unique

logger = logging.getLogger(__name__)


def _default_dialect() -> str:
    return get_config().default_dialect


class Statement(BaseModel):
    """Base class for every statement builder.

    Subclasses declare:

    - ``kind``: the :class:`~sqlchain.clauses.StatementKind` used to look up
      the dialect's clause order.
    - ``clause_enum``: the clause enum accepted by ``raw_before``/``raw_after``.
    - ``clause_builders``: one :class:`ClauseBuilder` per clause member.

    Attributes:
        dialect: Registered dialect name; defaults to the configured one.
        raw_items: Raw SQL emitted before the first clause.
        raw_before_items: ``(clause, text)`` splices placed before a clause.
        raw_after_items: ``(clause, text)`` splices placed after a clause.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: ClassVar[StatementKind]
    clause_enum: ClassVar[type[Enum]]
    clause_builders: ClassVar[dict[Enum, ClauseBuilder]] = {}

    dialect: str = Field(default_factory=_default_dialect)
    raw_items: tuple[str, ...] = ()
    raw_before_items: tuple[tuple[Any, str], ...] = ()
    raw_after_items: tuple[tuple[Any, str], ...] = ()

    @field_validator("dialect")
    @classmethod
    def _registered_dialect(cls, value: str) -> str:
        return DialectFactory.canonical_name(value)

    @classmethod
    def new(cls, dialect: str | None = None):
        """Create an empty statement, optionally for a specific dialect."""
        return cls() if dialect is None else cls(dialect=dialect)

    # ------------------------------------------------------------------
    # Raw SQL
    # ------------------------------------------------------------------

    def raw(self, raw_sql: str):
        """Prepend raw SQL to the statement.  Duplicate texts are kept once."""
        return self._update("raw_items", push_unique(self.raw_items, raw_sql.strip()))

    def raw_before(self, clause: Enum, raw_sql: str):
        """Splice raw SQL immediately before ``clause``."""
        return self._splice("raw_before_items", clause, raw_sql)

    def raw_after(self, clause: Enum, raw_sql: str):
        """Splice raw SQL immediately after ``clause``."""
        return self._splice("raw_after_items", clause, raw_sql)

    def _splice(self, field: str, clause: Enum, raw_sql: str):
        text = raw_sql.strip()
        if not text:
            return self
        clause = self.clause_enum(clause)
        return self._update(field, push(getattr(self, field), (clause, text)))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def concat(self, fmts: fmt.Formatter) -> str:
        """Render with explicit whitespace tokens."""
        return StatementAssembler(DialectFactory.create(self.dialect)).assemble(self, fmts)

    def as_string(self) -> str:
        """Render as a single line of SQL."""
        return self.concat(fmt.one_line())

    def debug(self):
        """Print the statement one clause per line with keyword highlighting."""
        fmts = fmt.multiline()
        print(fmt.format(self.concat(fmts), fmts))
        return self

    def print(self):
        """Print the one-line rendering with keyword highlighting."""
        fmts = fmt.one_line()
        print(fmt.format(self.concat(fmts), fmts))
        return self

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return self.concat(fmt.multiline())

    # ------------------------------------------------------------------
    # Copy-on-write helpers
    # ------------------------------------------------------------------

    def _update(self, field: str, value: Any, **others: Any):
        if getattr(self, field) == value and not others:
            return self
        return self.model_copy(update={field: value, **others})

    def _check(self, clause: Enum) -> None:
        dialect = DialectFactory.create(self.dialect)
        if not dialect.supports(self.kind, clause):
            logger.warning(
                "%s clause %r is not rendered by the %s dialect",
                type(self).__name__,
                clause.value,
                dialect.dialect_name,
            )

    def _push(self, field: str, value: str, clause: Enum):
        """Add a trimmed value to an ordered unique list."""
        self._check(clause)
        return self._update(field, push_unique(getattr(self, field), value.strip()))

    def _assign(self, field: str, value: str, clause: Enum, **others: Any):
        """Overwrite a scalar; ``others`` resets fields the value replaces."""
        self._check(clause)
        return self._update(field, assign_scalar(value), **others)

    def _assign_head(self, field: str, value: str, clause: Enum, **replaced: Any):
        """Like ``_assign`` for alternative head forms.

        An empty value only clears ``field``; the other head forms in
        ``replaced`` are reset only when a real value takes their place.
        """
        if not value.strip():
            replaced = {}
        return self._assign(field, value, clause, **replaced)


# ---------------------------------------------------------------------------
# Setter mixins
# ---------------------------------------------------------------------------


class WhereMixin:
    """``where_clause``/``where_and``/``where_or`` over a ``where_items`` field."""

    def where_clause(self, condition: str):
        """Add a condition joined with ``AND``."""
        return self._where(LogicalOperator.AND, condition)

    def where_and(self, condition: str):
        """Alias of :meth:`where_clause`."""
        return self._where(LogicalOperator.AND, condition)

    def where_or(self, condition: str):
        """Add a condition joined with ``OR``."""
        return self._where(LogicalOperator.OR, condition)

    def _where(self, op: LogicalOperator, condition: str):
        self._check(self.clause_enum("WHERE"))
        items = push_unique(self.where_items, (op, condition.strip()))
        return self._update("where_items", items)


class JoinMixin:
    """Join setters over a ``join_items`` field."""

    def join(self, fragment: str):
        """Add a complete join fragment, e.g. ``"NATURAL JOIN t"``."""
        return self._push("join_items", fragment, self.clause_enum("JOIN"))

    def cross_join(self, table: str):
        return self._join("CROSS JOIN", table)

    def inner_join(self, table: str):
        return self._join("INNER JOIN", table)

    def left_join(self, table: str):
        return self._join("LEFT JOIN", table)

    def right_join(self, table: str):
        return self._join("RIGHT JOIN", table)

    def full_join(self, table: str):
        return self._join("FULL JOIN", table)

    def _join(self, keyword: str, table: str):
        table = table.strip()
        return self.join(f"{keyword} {table}" if table else "")


class WithMixin:
    """``with_(name, statement)`` over a ``with_items`` field."""

    def with_(self, name: str, query: Statement):
        """Bind ``query`` as a common table expression called ``name``."""
        name = name.strip()
        if not name:
            return self
        self._check(self.clause_enum("WITH"))
        return self._update("with_items", push(self.with_items, (name, query)))


class ReturningMixin:
    """``returning`` over a ``returning_items`` field."""

    def returning(self, output_name: str):
        return self._push("returning_items", output_name, self.clause_enum("RETURNING"))
