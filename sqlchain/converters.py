"""Utilities for building ``CREATE TABLE`` statements from SQLAlchemy schemas.

Install the optional dependency before using this module::

    pip install "sqlchain[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from sqlchain.converters import create_tables_from_engine

    engine = create_engine("sqlite:///app.db")
    for stmt in create_tables_from_engine(engine, dialect="sqlite"):
        print(stmt.as_string())
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlchain.statements.create_table import CreateTable

if TYPE_CHECKING:
    from sqlalchemy import Engine, MetaData, Table


def create_table_from_sqlalchemy(table: Table, *, dialect: str | None = None) -> CreateTable:
    """Build a :class:`CreateTable` mirroring a SQLAlchemy :class:`Table`.

    Each column renders as ``name TYPE`` followed by ``NOT NULL`` when the
    column is declared non-nullable.  The primary key and every foreign-key
    constraint are added as table-level parameters.

    Args:
        table: A declared or reflected :class:`sqlalchemy.Table`.
        dialect: Dialect for the returned builder; the configured default
            when omitted.

    Returns:
        A populated :class:`CreateTable` builder.
    """
    stmt = CreateTable.new(dialect).create_table(table.name)

    for col in table.columns:
        definition = f"{col.name} {col.type}"
        # Reflected columns report nullable=None when unknown; only an explicit
        # False becomes NOT NULL.
        if col.nullable is False:
            definition += " NOT NULL"
        stmt = stmt.column(definition)

    pk_columns = [col.name for col in table.primary_key.columns]
    if len(pk_columns) == 1:
        stmt = stmt.primary_key(pk_columns[0])
    elif pk_columns:
        stmt = stmt.primary_key(f"({', '.join(pk_columns)})")

    for fk in sorted(table.foreign_key_constraints, key=lambda c: c.column_keys):
        local = ", ".join(fk.column_keys)
        remote = ", ".join(element.column.name for element in fk.elements)
        stmt = stmt.foreign_key(f"({local}) REFERENCES {fk.referred_table.name}({remote})")

    return stmt


def create_tables_from_metadata(
    metadata: MetaData, *, dialect: str | None = None
) -> list[CreateTable]:
    """Return one :class:`CreateTable` per table, parents before children.

    Args:
        metadata: Declared or reflected :class:`sqlalchemy.MetaData`.
        dialect: Dialect for every returned builder.

    Returns:
        Builders in :attr:`MetaData.sorted_tables` order, so foreign keys
        only reference tables created earlier.
    """
    return [
        create_table_from_sqlalchemy(table, dialect=dialect)
        for table in metadata.sorted_tables
    ]


def create_tables_from_engine(
    engine: Engine,
    *,
    include_tables: list[str] | None = None,
    schema: str | None = None,
    dialect: str | None = None,
) -> list[CreateTable]:
    """Reflect ``engine`` and build a :class:`CreateTable` for each table.

    Args:
        engine: A connected :class:`sqlalchemy.engine.Engine` instance.
        include_tables: Optional allowlist of table names to reflect.
        schema: Optional database schema name, passed to
            :meth:`sqlalchemy.schema.MetaData.reflect`.
        dialect: Dialect for every returned builder.

    Returns:
        Builders in dependency order.

    Raises:
        ImportError: If ``sqlalchemy`` is not installed.
    """
    try:
        from sqlalchemy import MetaData as _MetaData
    except ImportError as exc:
        raise ImportError(
            "SQLAlchemy is required for create_tables_from_engine(). "
            'Install it with: pip install "sqlchain[sqlalchemy]"'
        ) from exc

    metadata = _MetaData()
    with engine.connect() as conn:
        metadata.reflect(bind=conn, only=include_tables, schema=schema)
    return create_tables_from_metadata(metadata, dialect=dialect)
