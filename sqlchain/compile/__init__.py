"""Rendering engine: dialects, clause builders and the statement assembler.

Importing this package registers the built-in dialects with
:class:`~sqlchain.compile.registry.DialectFactory`.
"""
from sqlchain.compile.ansi import AnsiDialect
from sqlchain.compile.base import SQLDialect
from sqlchain.compile.builder import StatementAssembler
from sqlchain.compile.context import RenderContext
from sqlchain.compile.mysql import MySQLDialect
from sqlchain.compile.postgres import PostgresDialect
from sqlchain.compile.registry import DialectFactory
from sqlchain.compile.sqlite import SQLiteDialect

DialectFactory.register_class("ansi", AnsiDialect)
DialectFactory.register_class("postgresql", PostgresDialect)
DialectFactory.register_class("sqlite", SQLiteDialect)
DialectFactory.register_class("mysql", MySQLDialect)
DialectFactory.register_alias("postgres", "postgresql")

__all__ = [
    "AnsiDialect",
    "DialectFactory",
    "MySQLDialect",
    "PostgresDialect",
    "RenderContext",
    "SQLDialect",
    "SQLiteDialect",
    "StatementAssembler",
]
