"""Dialect abstraction: the SQLDialect ABC.

The Template Method pattern (GoF) is used:

- :class:`~sqlchain.compile.builder.StatementAssembler` defines the render
  skeleton: raw prefix, then every clause of the statement kind in order,
  then a right trim.
- ``SQLDialect`` subclasses supply the dialect-specific steps: which clauses
  exist for each statement kind and in what order, plus a handful of
  rendering switches for the DDL statements.

A clause absent from :meth:`SQLDialect.clause_order` is never rendered, and
raw splices keyed to it are dropped with it.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from sqlchain.clauses import AlterTableAction, CreateIndexParams, StatementKind


class SQLDialect(ABC):
    """Abstract base for dialect clause tables.

    Class attributes configure the DDL renderers:

    Attributes:
        alter_actions: ``ALTER TABLE`` actions that are rendered.
        index_prefix_modifiers: Flags rendered between ``CREATE`` and
            ``INDEX`` (``UNIQUE``, ``FULLTEXT``, ...).
        index_suffix_modifiers: Flags rendered right after ``INDEX``.
        index_on_modifiers: Flags rendered right after ``ON``.
        index_if_not_exists: Whether ``IF NOT EXISTS`` is emitted.
        index_requires_name: Whether the ``CREATE INDEX`` header needs a name.
        drop_lists_every_name: ``DROP TABLE a, b`` versus only the last name.
        rename_is_ordered_action: ``rename()`` accumulates in the action list
            instead of replacing the previous rename.
    """

    alter_actions: ClassVar[tuple[AlterTableAction, ...]] = (
        AlterTableAction.ADD,
        AlterTableAction.DROP,
    )
    index_prefix_modifiers: ClassVar[tuple[CreateIndexParams, ...]] = (
        CreateIndexParams.UNIQUE,
    )
    index_suffix_modifiers: ClassVar[tuple[CreateIndexParams, ...]] = ()
    index_on_modifiers: ClassVar[tuple[CreateIndexParams, ...]] = ()
    index_if_not_exists: ClassVar[bool] = True
    index_requires_name: ClassVar[bool] = True
    drop_lists_every_name: ClassVar[bool] = False
    rename_is_ordered_action: ClassVar[bool] = False

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Canonical registry name (e.g. ``'postgresql'``)."""

    @abstractmethod
    def clause_order(self, kind: StatementKind) -> tuple[Enum, ...]:
        """Return the clauses rendered for ``kind``, in render order.

        Args:
            kind: The statement family being rendered.

        Returns:
            Clause enum members of the statement's clause enum.
        """

    def supports(self, kind: StatementKind, clause: Enum) -> bool:
        """Return ``True`` if ``clause`` is rendered for ``kind``."""
        if kind is StatementKind.ALTER_TABLE and clause in self.alter_actions:
            return True
        return clause in self.clause_order(kind)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
