"""sqlchain – fluent, immutable SQL statement builders.

Assemble SQL text clause by clause.  Nothing is parsed, validated or
executed: every fragment is trusted text and the builders only decide where
it goes.

Public API
----------
Statement builders
    ``Select``, ``Insert``, ``Update``, ``Delete``, ``Values``,
    ``CreateTable``, ``AlterTable``, ``CreateIndex``, ``DropTable``,
    ``DropIndex`` and ``Transaction``.  Every setter returns a new value, so
    a partially built statement can be shared and extended safely.

Clause enums
    ``SelectClause``, ``InsertClause``, ... name the clauses of each
    statement for ``raw_before`` / ``raw_after`` splicing.

Rendering
    ``as_string()`` / ``str()`` produce one line; ``repr()`` and ``debug()``
    produce one clause per line.

Dialects
    ``ansi``, ``postgresql`` (alias ``postgres``), ``sqlite`` and ``mysql``
    decide which clauses render and in which order.  The default comes from
    :func:`sqlchain.config.get_config` (``SQLCHAIN_DIALECT``).

Extensibility
-------------
New dialects can be registered via::

    from sqlchain.compile import AnsiDialect, DialectFactory

    @DialectFactory.register("duckdb")
    class DuckDBDialect(AnsiDialect):
        ...

After registration, ``Select.new("duckdb")`` renders with it.
"""

from __future__ import annotations

from sqlchain.clauses import (
    AlterTableAction,
    CreateIndexParams,
    CreateTableParams,
    DeleteClause,
    DropIndexParams,
    DropTableParams,
    InsertClause,
    LogicalOperator,
    SelectClause,
    StatementKind,
    TransactionClause,
    UpdateClause,
    ValuesClause,
)
from sqlchain.compile import (
    AnsiDialect,
    DialectFactory,
    MySQLDialect,
    PostgresDialect,
    SQLDialect,
    SQLiteDialect,
    StatementAssembler,
)
from sqlchain.config import BuilderConfig, configure, get_config, reset_config
from sqlchain.errors import ConfigError, SQLChainError, UnknownDialectError
from sqlchain.fmt import Formatter, multiline, one_line
from sqlchain.statements import (
    AlterTable,
    CreateIndex,
    CreateTable,
    Delete,
    DropIndex,
    DropTable,
    Insert,
    Select,
    Statement,
    Transaction,
    TransactionCommand,
    Update,
    Values,
)

__all__ = [
    # Statements
    "AlterTable",
    "CreateIndex",
    "CreateTable",
    "Delete",
    "DropIndex",
    "DropTable",
    "Insert",
    "Select",
    "Statement",
    "Transaction",
    "TransactionCommand",
    "Update",
    "Values",
    # Clauses
    "AlterTableAction",
    "CreateIndexParams",
    "CreateTableParams",
    "DeleteClause",
    "DropIndexParams",
    "DropTableParams",
    "InsertClause",
    "LogicalOperator",
    "SelectClause",
    "StatementKind",
    "TransactionClause",
    "UpdateClause",
    "ValuesClause",
    # Rendering
    "AnsiDialect",
    "DialectFactory",
    "Formatter",
    "MySQLDialect",
    "PostgresDialect",
    "SQLDialect",
    "SQLiteDialect",
    "StatementAssembler",
    "multiline",
    "one_line",
    # Configuration
    "BuilderConfig",
    "configure",
    "get_config",
    "reset_config",
    # Errors
    "ConfigError",
    "SQLChainError",
    "UnknownDialectError",
]
