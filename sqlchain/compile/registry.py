"""Dialect registry (Open/Closed Principle).

Statements carry a dialect *name*; this registry turns the name into a
:class:`~sqlchain.compile.base.SQLDialect` instance.  Adding a dialect means
registering one class, nothing else changes.

Usage::

    from sqlchain.compile.registry import DialectFactory

    @DialectFactory.register("oracle")
    class OracleDialect(SQLDialect):
        ...
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from sqlchain.compile.base import SQLDialect
from sqlchain.errors import UnknownDialectError


class DialectFactory:
    """Registry mapping dialect target names to :class:`SQLDialect` classes.

    Dialect objects are stateless, so :meth:`create` hands out one cached
    instance per name.

    Example::

        DialectFactory.register_class("sqlite", SQLiteDialect)
        dialect = DialectFactory.create("sqlite")
    """

    _dialects: ClassVar[dict[str, type[SQLDialect]]] = {}
    _aliases: ClassVar[dict[str, str]] = {}
    _instances: ClassVar[dict[str, SQLDialect]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[SQLDialect]], type[SQLDialect]]:
        """Decorator that registers a dialect class under ``name``.

        Args:
            name: The dialect target name (e.g. ``"postgresql"``).

        Returns:
            A decorator that registers and returns the dialect class.
        """

        def decorator(dialect_cls: type[SQLDialect]) -> type[SQLDialect]:
            cls.register_class(name, dialect_cls)
            return dialect_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, dialect_cls: type[SQLDialect]) -> None:
        """Register a dialect class without using the decorator form.

        Args:
            name: The dialect target name.
            dialect_cls: The :class:`SQLDialect` subclass to register.
        """
        cls._dialects[name] = dialect_cls
        cls._instances.pop(name, None)

    @classmethod
    def register_alias(cls, alias: str, name: str) -> None:
        """Make ``alias`` resolve to the dialect registered as ``name``."""
        cls._aliases[alias] = name

    @classmethod
    def canonical_name(cls, name: str) -> str:
        """Resolve aliases and check that ``name`` is registered.

        Raises:
            UnknownDialectError: If no dialect is registered for ``name``.
        """
        key = name.strip().lower()
        key = cls._aliases.get(key, key)
        if key not in cls._dialects:
            raise UnknownDialectError(name, cls.registered_targets())
        return key

    @classmethod
    def create(cls, name: str) -> SQLDialect:
        """Return the dialect registered for ``name``.

        Args:
            name: The dialect target name or one of its aliases.

        Returns:
            A :class:`SQLDialect` instance.

        Raises:
            UnknownDialectError: If no dialect is registered for ``name``.
        """
        key = cls.canonical_name(name)
        instance = cls._instances.get(key)
        if instance is None:
            instance = cls._instances[key] = cls._dialects[key]()
        return instance

    @classmethod
    def registered_targets(cls) -> list[str]:
        """Return the sorted list of registered dialect target names."""
        return sorted(cls._dialects)
