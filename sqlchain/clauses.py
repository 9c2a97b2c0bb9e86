"""Clause identifiers shared by the statement builders and the renderer.

Every statement kind owns one enum naming the clauses it can hold.  The
enums double as keys for raw splicing: ``raw_before(SelectClause.WHERE, ...)``
places text immediately before the rendered ``WHERE`` clause.

Member values are the SQL keywords themselves, so ``SelectClause.GROUP_BY``
compares equal to ``"GROUP BY"``.
"""
from __future__ import annotations

from enum import Enum


class StatementKind(str, Enum):
    """The statement families a dialect knows how to order."""

    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
    VALUES = "values"
    CREATE_TABLE = "create_table"
    ALTER_TABLE = "alter_table"
    CREATE_INDEX = "create_index"
    DROP_TABLE = "drop_table"
    DROP_INDEX = "drop_index"
    TRANSACTION = "transaction"


class LogicalOperator(str, Enum):
    """Connective placed before a ``WHERE`` condition."""

    AND = "AND"
    OR = "OR"


# ---------------------------------------------------------------------------
# Query statements
# ---------------------------------------------------------------------------


class SelectClause(str, Enum):
    WITH = "WITH"
    SELECT = "SELECT"
    FROM = "FROM"
    JOIN = "JOIN"
    WHERE = "WHERE"
    GROUP_BY = "GROUP BY"
    HAVING = "HAVING"
    WINDOW = "WINDOW"
    ORDER_BY = "ORDER BY"
    LIMIT = "LIMIT"
    OFFSET = "OFFSET"
    EXCEPT = "EXCEPT"
    INTERSECT = "INTERSECT"
    UNION = "UNION"


class InsertClause(str, Enum):
    WITH = "WITH"
    INSERT_INTO = "INSERT INTO"
    INSERT_OR = "INSERT OR"
    REPLACE_INTO = "REPLACE INTO"
    INSERT = "INSERT"
    INTO = "INTO"
    PARTITION = "PARTITION"
    COLUMN = "COLUMN"
    OVERRIDING = "OVERRIDING"
    VALUES = "VALUES"
    DEFAULT_VALUES = "DEFAULT VALUES"
    SET = "SET"
    SELECT = "SELECT"
    ON_CONFLICT = "ON CONFLICT"
    ON_DUPLICATE_KEY_UPDATE = "ON DUPLICATE KEY UPDATE"
    RETURNING = "RETURNING"


class UpdateClause(str, Enum):
    WITH = "WITH"
    UPDATE = "UPDATE"
    UPDATE_OR = "UPDATE OR"
    JOIN = "JOIN"
    SET = "SET"
    FROM = "FROM"
    WHERE = "WHERE"
    ORDER_BY = "ORDER BY"
    LIMIT = "LIMIT"
    RETURNING = "RETURNING"


class DeleteClause(str, Enum):
    WITH = "WITH"
    DELETE = "DELETE"
    DELETE_FROM = "DELETE FROM"
    FROM = "FROM"
    JOIN = "JOIN"
    PARTITION = "PARTITION"
    WHERE = "WHERE"
    ORDER_BY = "ORDER BY"
    LIMIT = "LIMIT"
    RETURNING = "RETURNING"


class ValuesClause(str, Enum):
    VALUES = "VALUES"


# ---------------------------------------------------------------------------
# Schema statements
# ---------------------------------------------------------------------------


class CreateTableParams(str, Enum):
    CREATE_TABLE = "CREATE TABLE"
    COLUMN = "COLUMN"
    PRIMARY_KEY = "PRIMARY KEY"
    CONSTRAINT = "CONSTRAINT"
    FOREIGN_KEY = "FOREIGN KEY"


class AlterTableAction(str, Enum):
    """``ALTER TABLE`` header clauses and the ordered action tags.

    ``ADD``, ``DROP``, ``RENAME`` and ``ALTER`` tag entries of the ordered
    action list; their raw splices surround the first action with that tag.
    """

    ALTER_TABLE = "ALTER TABLE"
    RENAME_TO = "RENAME TO"
    ADD = "ADD"
    DROP = "DROP"
    RENAME = "RENAME"
    ALTER = "ALTER"


class CreateIndexParams(str, Enum):
    CREATE_INDEX = "CREATE INDEX"
    UNIQUE = "UNIQUE"
    FULLTEXT = "FULLTEXT"
    SPATIAL = "SPATIAL"
    CONCURRENTLY = "CONCURRENTLY"
    ON = "ON"
    ONLY = "ONLY"
    USING = "USING"
    COLUMN = "COLUMN"
    INCLUDE = "INCLUDE"
    WHERE = "WHERE"
    LOCK = "LOCK"


class DropTableParams(str, Enum):
    DROP_TABLE = "DROP TABLE"


class DropIndexParams(str, Enum):
    DROP_INDEX = "DROP INDEX"


class TransactionClause(str, Enum):
    """Transaction control commands.

    ``BEGIN``, ``START TRANSACTION``, ``SET TRANSACTION``, ``COMMIT`` and
    ``END`` occupy fixed slots; the remaining commands and any embedded
    statements render in call order between them.
    """

    BEGIN = "BEGIN"
    START_TRANSACTION = "START TRANSACTION"
    SET_TRANSACTION = "SET TRANSACTION"
    ORDERED_COMMANDS = "ORDERED COMMANDS"
    SAVEPOINT = "SAVEPOINT"
    RELEASE_SAVEPOINT = "RELEASE SAVEPOINT"
    ROLLBACK = "ROLLBACK"
    COMMIT = "COMMIT"
    END = "END"
