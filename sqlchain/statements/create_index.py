"""CREATE INDEX statement builder."""
from __future__ import annotations

from typing import ClassVar

from sqlchain.clauses import CreateIndexParams, LogicalOperator, StatementKind
from sqlchain.compile.clause_builders import (
    ClauseBuilder,
    IndexHeaderBuilder,
    IndexOnBuilder,
    ParenthesizedListBuilder,
    ScalarBuilder,
    WhereBuilder,
)
from sqlchain.compile.registry import DialectFactory
from sqlchain.statements.base import Statement, WhereMixin

Params = CreateIndexParams


class CreateIndex(WhereMixin, Statement):
    """Builder for ``CREATE INDEX``.

    The header needs an index name on SQLite and MySQL.  PostgreSQL allows an
    anonymous index as long as ``create_index``, ``unique`` or
    ``concurrently`` was called, except with ``IF NOT EXISTS``.

    Example::

        CreateIndex().create_index("users_name_idx").on("users").column("name")
        # CREATE INDEX users_name_idx ON users (name)
    """

    kind: ClassVar[StatementKind] = StatementKind.CREATE_INDEX
    clause_enum: ClassVar[type[CreateIndexParams]] = CreateIndexParams
    clause_builders: ClassVar[dict[CreateIndexParams, ClauseBuilder]] = {
        Params.CREATE_INDEX: IndexHeaderBuilder(),
        Params.ON: IndexOnBuilder(),
        Params.USING: ScalarBuilder("USING", "using_value", line_break=False),
        Params.COLUMN: ParenthesizedListBuilder("", "column_items"),
        Params.INCLUDE: ParenthesizedListBuilder("INCLUDE", "include_items"),
        Params.WHERE: WhereBuilder("where_items"),
        Params.LOCK: ScalarBuilder("LOCK", "lock_value"),
    }

    index_name: str = ""
    create_index_flag: bool = False
    if_not_exists_flag: bool = False
    unique_flag: bool = False
    fulltext_flag: bool = False
    spatial_flag: bool = False
    concurrently_flag: bool = False
    only_flag: bool = False
    on_value: str = ""
    using_value: str = ""
    column_items: tuple[str, ...] = ()
    include_items: tuple[str, ...] = ()
    where_items: tuple[tuple[LogicalOperator, str], ...] = ()
    lock_value: str = ""

    def create_index(self, name: str) -> CreateIndex:
        return self._assign(
            "index_name",
            name,
            Params.CREATE_INDEX,
            create_index_flag=True,
            if_not_exists_flag=False,
        )

    def create_index_if_not_exists(self, name: str) -> CreateIndex:
        return self._assign(
            "index_name",
            name,
            Params.CREATE_INDEX,
            create_index_flag=True,
            if_not_exists_flag=True,
        )

    def on(self, table: str) -> CreateIndex:
        return self._assign("on_value", table, Params.ON)

    def using(self, method: str) -> CreateIndex:
        """Set the index method, e.g. ``"btree"``."""
        return self._assign("using_value", method, Params.USING)

    def column(self, name: str) -> CreateIndex:
        return self._push("column_items", name, Params.COLUMN)

    def include(self, name: str) -> CreateIndex:
        """Add a covering column (PostgreSQL)."""
        return self._push("include_items", name, Params.INCLUDE)

    def lock(self, option: str) -> CreateIndex:
        """Set the ``LOCK`` option (MySQL), e.g. ``"SHARED"``."""
        return self._assign("lock_value", option, Params.LOCK)

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    def unique(self) -> CreateIndex:
        return self._flag("unique_flag", Params.UNIQUE)

    def fulltext(self) -> CreateIndex:
        """``CREATE FULLTEXT INDEX`` (MySQL)."""
        return self._flag("fulltext_flag", Params.FULLTEXT)

    def spatial(self) -> CreateIndex:
        """``CREATE SPATIAL INDEX`` (MySQL)."""
        return self._flag("spatial_flag", Params.SPATIAL)

    def concurrently(self) -> CreateIndex:
        """``CREATE INDEX CONCURRENTLY`` (PostgreSQL)."""
        return self._flag("concurrently_flag", Params.CONCURRENTLY)

    def only(self) -> CreateIndex:
        """``ON ONLY <table>`` (PostgreSQL)."""
        return self._flag("only_flag", Params.ONLY)

    def _check(self, clause: CreateIndexParams) -> None:
        dialect = DialectFactory.create(self.dialect)
        modifiers = (
            dialect.index_prefix_modifiers
            + dialect.index_suffix_modifiers
            + dialect.index_on_modifiers
        )
        if clause in modifiers:
            return
        super()._check(clause)

    def _flag(self, field: str, param: CreateIndexParams) -> CreateIndex:
        self._check(param)
        return self._update(field, True)
