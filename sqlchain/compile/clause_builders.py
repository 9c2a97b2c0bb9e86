"""Clause-level SQL builders.

Each class renders exactly one clause from one accumulator field of a
statement.  Builders are configured once (keyword, field name) and attached
to a statement class in its ``clause_builders`` table; the
:class:`~sqlchain.compile.builder.StatementAssembler` looks them up by clause
in the order the dialect dictates.

Every builder has two entry points:

``build(stmt, ctx)``
    The clause's own SQL, or ``""`` when its accumulator is empty.
``render(stmt, clause, query, ctx)``
    Appends ``build()`` to ``query`` surrounded by the raw splices registered
    for ``clause``.  Combinators override this because they wrap the query
    rendered so far.

Classes
-------
KeywordListBuilder        ``KEYWORD a, b, c``
ValuesBuilder             ``VALUES (..), ROW(..)``
ParenthesizedListBuilder  ``KEYWORD (a, b)``
ScalarBuilder             ``KEYWORD value``
FlagBuilder               fixed text when a flag is set
JoinBuilder               join fragments, one per line
WhereBuilder              ``WHERE a AND b OR c``
SubStatementBuilder       an embedded child statement
WithBuilder               ``WITH name AS (child), ...``
CombinatorBuilder         ``(left) UNION (child)``
CreateTableParamsBuilder  ``(columns, PRIMARY KEY, CONSTRAINT, FOREIGN KEY)``
OrderedActionsBuilder     ``ADD .., DROP .., RENAME .., ALTER ..``
IndexHeaderBuilder        ``CREATE [UNIQUE] INDEX [CONCURRENTLY] name``
IndexOnBuilder            ``ON [ONLY] table``
DropBuilder               ``DROP TABLE [IF EXISTS] names``
CommandBuilder            ``COMMAND [arg];``
OrderedCommandsBuilder    transaction commands in call order
"""
from __future__ import annotations

from enum import Enum
from typing import Any

from sqlchain.clauses import CreateIndexParams, CreateTableParams
from sqlchain.compile.context import RenderContext
from sqlchain.compile.raw import concat_raw_before_after, raw_queries


class ClauseBuilder:
    """Base class: renders one clause and splices raw text around it."""

    #: Whether raw splices are applied around this clause.
    splice: bool = True

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        raise NotImplementedError

    def render(self, stmt: Any, clause: Enum, query: str, ctx: RenderContext) -> str:
        sql = self.build(stmt, ctx)
        if not self.splice:
            return f"{query}{sql}"
        return concat_raw_before_after(
            stmt.raw_before_items, stmt.raw_after_items, query, ctx.fmts, clause, sql
        )


def _nested_splice(stmt: Any, ctx: RenderContext, clause: Enum, sql: str) -> str:
    """Render a modifier that sits inside another clause with its own splices."""
    return concat_raw_before_after(
        stmt.raw_before_items, stmt.raw_after_items, "", ctx.fmts, clause, sql
    )


# ---------------------------------------------------------------------------
# List and scalar clauses
# ---------------------------------------------------------------------------


class KeywordListBuilder(ClauseBuilder):
    """Builds ``KEYWORD item, item`` from an ordered unique list.

    Args:
        keyword: Leading SQL keyword.
        field: Name of the tuple field holding the items.
        separator: Item separator; defaults to the formatter's comma.
    """

    def __init__(self, keyword: str, field: str, separator: str | None = None) -> None:
        self._keyword = keyword
        self._field = field
        self._separator = separator

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        items = [item for item in getattr(stmt, self._field) if item]
        if not items:
            return ""
        fmts = ctx.fmts
        separator = fmts.comma if self._separator is None else self._separator
        return f"{self._keyword}{fmts.space}{separator.join(items)}{fmts.space}{fmts.lb}"


class ValuesBuilder(ClauseBuilder):
    """Builds ``VALUES`` from plain value lists and MySQL ``ROW`` constructors."""

    def __init__(self, field: str, row_field: str | None = None) -> None:
        self._field = field
        self._row_field = row_field

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        items = [item for item in getattr(stmt, self._field) if item]
        if self._row_field is not None:
            items += [f"ROW{row}" for row in getattr(stmt, self._row_field) if row]
        if not items:
            return ""
        fmts = ctx.fmts
        return f"VALUES{fmts.space}{fmts.comma.join(items)}{fmts.space}{fmts.lb}"


class ParenthesizedListBuilder(ClauseBuilder):
    """Builds ``KEYWORD (a, b)``, or a bare ``(a, b)`` when ``keyword`` is empty."""

    def __init__(self, keyword: str, field: str) -> None:
        self._keyword = keyword
        self._field = field

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        items = [item for item in getattr(stmt, self._field) if item]
        if not items:
            return ""
        fmts = ctx.fmts
        group = f"({fmts.comma.join(items)}){fmts.space}{fmts.lb}"
        return f"{self._keyword}{fmts.space}{group}" if self._keyword else group


class ScalarBuilder(ClauseBuilder):
    """Builds ``KEYWORD value`` from a last-write-wins string field.

    Args:
        keyword: Leading SQL keyword.
        field: Name of the string field.
        line_break: Emit the formatter's line break after the clause.
    """

    def __init__(self, keyword: str, field: str, line_break: bool = True) -> None:
        self._keyword = keyword
        self._field = field
        self._line_break = line_break

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        value = getattr(stmt, self._field)
        if not value:
            return ""
        fmts = ctx.fmts
        lb = fmts.lb if self._line_break else ""
        return f"{self._keyword}{fmts.space}{value}{fmts.space}{lb}"


class FlagBuilder(ClauseBuilder):
    """Emits fixed SQL (e.g. ``DEFAULT VALUES``) when a boolean field is set."""

    def __init__(self, sql: str, field: str) -> None:
        self._sql = sql
        self._field = field

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        if not getattr(stmt, self._field):
            return ""
        return f"{self._sql}{ctx.fmts.space}{ctx.fmts.lb}"


class JoinBuilder(ClauseBuilder):
    """Builds the join fragments, one per line."""

    def __init__(self, field: str) -> None:
        self._field = field

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        items = [item for item in getattr(stmt, self._field) if item]
        if not items:
            return ""
        fmts = ctx.fmts
        return f"{f'{fmts.space}{fmts.lb}'.join(items)}{fmts.space}{fmts.lb}"


class WhereBuilder(ClauseBuilder):
    """Builds ``WHERE`` from ``(LogicalOperator, condition)`` pairs.

    The first condition's operator is ignored; every later condition is
    preceded by its own operator, so call order decides precedence as written.
    """

    def __init__(self, field: str) -> None:
        self._field = field

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        items = [(op, cond) for op, cond in getattr(stmt, self._field) if cond]
        if not items:
            return ""
        fmts = ctx.fmts
        (_, first), tail = items[0], items[1:]
        conditions = f"{fmts.indent}{first}"
        for op, cond in tail:
            conditions += f"{fmts.space}{fmts.lb}{fmts.indent}{op.value}{fmts.space}{cond}"
        return f"WHERE{fmts.lb}{fmts.space}{conditions}{fmts.space}{fmts.lb}"


# ---------------------------------------------------------------------------
# Nested statements
# ---------------------------------------------------------------------------


class SubStatementBuilder(ClauseBuilder):
    """Embeds a child statement (``INSERT ... SELECT``) rendered with the same formatter."""

    def __init__(self, field: str) -> None:
        self._field = field

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        child = getattr(stmt, self._field)
        if child is None:
            return ""
        sql = child.concat(ctx.fmts)
        if not sql:
            return ""
        return f"{sql}{ctx.fmts.space}{ctx.fmts.lb}"


class WithBuilder(ClauseBuilder):
    """Builds ``WITH name AS (child), ...``.

    Children render with one extra indentation level.  Bindings whose child
    renders empty are dropped; when none remain the clause is empty.
    """

    def __init__(self, field: str) -> None:
        self._field = field

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        fmts = ctx.fmts
        inner = fmts.nested()
        entries = []
        for name, child in getattr(stmt, self._field):
            sql = child.concat(inner)
            if sql:
                entries.append(
                    f"{name}{fmts.space}AS{fmts.space}({fmts.lb}{fmts.indent}{sql}{fmts.lb})"
                )
        if not entries:
            return ""
        body = f"{fmts.comma}{fmts.lb}".join(entries)
        return f"WITH{fmts.space}{fmts.lb}{body}{fmts.space}{fmts.lb}"


class CombinatorBuilder(ClauseBuilder):
    """Builds ``((left) OP (a)) OP (b)`` for UNION / INTERSECT / EXCEPT.

    The query rendered so far, together with any raw text spliced before this
    clause, becomes the left operand.  Every child wraps the expression built
    so far in one more pair of parentheses and appends itself as the right
    operand, so nesting depth equals the number of combinator calls.
    """

    def __init__(self, keyword: str, field: str) -> None:
        self._keyword = keyword
        self._field = field

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        # Nothing renders on its own: the operands need the query on the left.
        return ""

    def render(self, stmt: Any, clause: Enum, query: str, ctx: RenderContext) -> str:
        children = getattr(stmt, self._field)
        if not children:
            return super().render(stmt, clause, query, ctx)

        fmts = ctx.fmts
        left = query.rstrip()
        raw_before = fmts.space.join(raw_queries(stmt.raw_before_items, clause)).strip()
        if left and raw_before:
            left = f"{left}{fmts.space}{raw_before}"
        else:
            left = left or raw_before
        for child in children:
            left = (
                f"({left}){fmts.space}{self._keyword}{fmts.space}"
                f"({fmts.lb}{child.concat(fmts)})"
            )
        return concat_raw_before_after(
            (), stmt.raw_after_items, "", fmts, clause, f"{left}{fmts.space}{fmts.lb}"
        )


# ---------------------------------------------------------------------------
# Schema statements
# ---------------------------------------------------------------------------


class CreateTableParamsBuilder(ClauseBuilder):
    """Builds the parenthesized ``CREATE TABLE`` parameter group.

    Columns, the primary key, constraints and foreign keys each carry their
    own raw splices; the group itself has none.
    """

    splice = False

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        fmts = ctx.fmts
        prefix = f"{fmts.lb}{fmts.indent}"
        columns = fmts.comma.join(f"{prefix}{c}" for c in stmt.column_items)
        primary_key = ""
        if stmt.primary_key_value:
            pk = stmt.primary_key_value
            primary_key = f"{prefix}PRIMARY KEY{pk}" if "(" in pk else f"{prefix}PRIMARY KEY({pk})"
        constraints = fmts.comma.join(
            f"{prefix}CONSTRAINT{fmts.space}{c}" for c in stmt.constraint_items
        )
        foreign_keys = fmts.comma.join(f"{prefix}FOREIGN KEY{fk}" for fk in stmt.foreign_key_items)

        parts = [
            _nested_splice(stmt, ctx, CreateTableParams.COLUMN, columns),
            _nested_splice(stmt, ctx, CreateTableParams.PRIMARY_KEY, primary_key),
            _nested_splice(stmt, ctx, CreateTableParams.CONSTRAINT, constraints),
            _nested_splice(stmt, ctx, CreateTableParams.FOREIGN_KEY, foreign_keys),
        ]
        params = fmts.comma.join(p for p in parts if p).strip()
        if not params:
            return ""
        return f"({fmts.lb}{fmts.indent}{params}{fmts.lb}){fmts.space}{fmts.lb}"


class OrderedActionsBuilder(ClauseBuilder):
    """Builds the ``ALTER TABLE`` actions in call order.

    Actions the dialect does not know are skipped.  Raw splices registered
    for an action tag surround the first action carrying that tag.
    """

    splice = False

    def __init__(self, field: str) -> None:
        self._field = field

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        fmts = ctx.fmts
        spliced: set[Enum] = set()
        actions = []
        for action, content in getattr(stmt, self._field):
            if action not in ctx.dialect.alter_actions:
                continue
            sql = f"{action.value} {content}"
            if action not in spliced:
                spliced.add(action)
                sql = _nested_splice(stmt, ctx, action, f"{sql}{fmts.space}").rstrip()
            actions.append(f"{fmts.lb}{fmts.indent}{sql}")
        return f"{fmts.comma.join(actions)}{fmts.space}"


class IndexHeaderBuilder(ClauseBuilder):
    """Builds ``CREATE [modifiers] INDEX [modifiers] [IF NOT EXISTS] name``.

    Which modifiers exist, and whether a name is mandatory, comes from the
    dialect.  Each modifier carries its own nested raw splices.
    """

    _FLAG_FIELDS = {
        CreateIndexParams.UNIQUE: "unique_flag",
        CreateIndexParams.FULLTEXT: "fulltext_flag",
        CreateIndexParams.SPATIAL: "spatial_flag",
        CreateIndexParams.CONCURRENTLY: "concurrently_flag",
    }

    def _modifiers(self, stmt: Any, ctx: RenderContext, params: tuple) -> str:
        space = ctx.fmts.space
        return "".join(
            _nested_splice(stmt, ctx, param, f"{param.value}{space}")
            for param in params
            if getattr(stmt, self._FLAG_FIELDS[param])
        )

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        dialect, fmts = ctx.dialect, ctx.fmts
        space = fmts.space
        prefix = self._modifiers(stmt, ctx, dialect.index_prefix_modifiers)
        suffix = self._modifiers(stmt, ctx, dialect.index_suffix_modifiers)
        name = f"{stmt.index_name}{space}" if stmt.index_name else ""
        if_not_exists = ""
        if dialect.index_if_not_exists and stmt.if_not_exists_flag:
            if_not_exists = f"IF NOT EXISTS{space}"

        if dialect.index_requires_name:
            if not name:
                return ""
        else:
            modifiers_not_called = not stmt.create_index_flag and not prefix and not suffix
            if modifiers_not_called or (if_not_exists and not name):
                return ""
        return f"CREATE{space}{prefix}INDEX{space}{suffix}{if_not_exists}{name}{fmts.lb}"


class IndexOnBuilder(ClauseBuilder):
    """Builds ``ON [ONLY] table``."""

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        if not stmt.on_value:
            return ""
        space = ctx.fmts.space
        only = ""
        if CreateIndexParams.ONLY in ctx.dialect.index_on_modifiers and stmt.only_flag:
            only = _nested_splice(stmt, ctx, CreateIndexParams.ONLY, f"ONLY{space}")
        return f"ON{space}{only}{stmt.on_value}{space}"


class DropBuilder(ClauseBuilder):
    """Builds ``DROP TABLE|INDEX [IF EXISTS] names``.

    Dialects that cannot drop several objects at once render only the most
    recently added name.
    """

    def __init__(self, keyword: str) -> None:
        self._keyword = keyword

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        names = list(stmt.name_items)
        if not names:
            return ""
        fmts = ctx.fmts
        if not ctx.dialect.drop_lists_every_name:
            names = names[-1:]
        if_exists = f"IF EXISTS{fmts.space}" if stmt.if_exists_flag else ""
        return f"{self._keyword}{fmts.space}{if_exists}{fmts.comma.join(names)}{fmts.space}{fmts.lb}"


# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------


class CommandBuilder(ClauseBuilder):
    """Builds one fixed-slot transaction command terminated by ``;``."""

    def __init__(self, field: str) -> None:
        self._field = field

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        command = getattr(stmt, self._field)
        if command is None:
            return ""
        return f"{command.concat(ctx.fmts)};{ctx.fmts.space}{ctx.fmts.lb}"


class OrderedCommandsBuilder(ClauseBuilder):
    """Builds the transaction body: commands and statements in call order.

    Splices registered for a command such as ``SAVEPOINT`` surround the first
    command of that kind; the body as a whole takes the ``ORDERED COMMANDS``
    splices.
    """

    def __init__(self, field: str) -> None:
        self._field = field

    def build(self, stmt: Any, ctx: RenderContext) -> str:
        fmts = ctx.fmts
        spliced: set[Enum] = set()
        parts = []
        for command in getattr(stmt, self._field):
            sql = f"{command.concat(fmts)};{fmts.space}{fmts.lb}"
            tag = getattr(command, "command", None)
            if tag is not None and tag not in spliced:
                spliced.add(tag)
                sql = _nested_splice(stmt, ctx, tag, sql)
            parts.append(sql)
        return "".join(parts)
