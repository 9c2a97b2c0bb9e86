"""Unit tests for the dialect registry, clause gating and configuration."""
from __future__ import annotations

import logging
from typing import ClassVar

import pytest
from pydantic import ValidationError

from sqlchain import (
    AnsiDialect,
    ConfigError,
    DialectFactory,
    Insert,
    PostgresDialect,
    Select,
    SelectClause,
    SQLChainError,
    StatementKind,
    UnknownDialectError,
    configure,
    get_config,
)
from sqlchain.config import ENV_DIALECT, reset_config


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


def test_registered_targets() -> None:
    assert DialectFactory.registered_targets() == ["ansi", "mysql", "postgresql", "sqlite"]


def test_create_returns_cached_instance() -> None:
    dialect = DialectFactory.create("postgresql")
    assert isinstance(dialect, PostgresDialect)
    assert DialectFactory.create("postgresql") is dialect


@pytest.mark.parametrize("name", ["postgres", "PostgreSQL", " postgresql "])
def test_names_are_normalised(name: str) -> None:
    assert DialectFactory.canonical_name(name) == "postgresql"
    assert Select.new(name).dialect == "postgresql"


def test_unknown_dialect_raises() -> None:
    with pytest.raises(UnknownDialectError) as exc_info:
        DialectFactory.create("oracle")
    assert exc_info.value.target == "oracle"
    assert "Registered targets" in str(exc_info.value)
    assert isinstance(exc_info.value, SQLChainError)


def test_statement_rejects_unknown_dialect() -> None:
    with pytest.raises(ValidationError):
        Select.new("oracle")


def test_custom_dialect_registration(monkeypatch: pytest.MonkeyPatch) -> None:
    class TinyDialect(AnsiDialect):
        CLAUSE_ORDERS: ClassVar = {
            **AnsiDialect.CLAUSE_ORDERS,
            StatementKind.SELECT: (SelectClause.SELECT, SelectClause.LIMIT),
        }

        @property
        def dialect_name(self) -> str:
            return "tiny"

    monkeypatch.setattr(DialectFactory, "_dialects", dict(DialectFactory._dialects))
    monkeypatch.setattr(DialectFactory, "_instances", dict(DialectFactory._instances))
    DialectFactory.register("tiny")(TinyDialect)

    stmt = Select.new("tiny").select("id").from_("users").limit(1)
    assert stmt.as_string() == "SELECT id LIMIT 1"


def test_supports() -> None:
    ansi = DialectFactory.create("ansi")
    assert ansi.supports(StatementKind.SELECT, SelectClause.WHERE)
    assert not ansi.supports(StatementKind.SELECT, SelectClause.LIMIT)


# ---------------------------------------------------------------------------
# Gating
# ---------------------------------------------------------------------------


def test_ansi_select_has_no_limit() -> None:
    assert Select.new("ansi").select("id").from_("t").limit(5).as_string() == "SELECT id FROM t"


def test_unsupported_clause_logs_warning(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="sqlchain"):
        Select.new("ansi").limit(1)
    assert len(caplog.records) == 1
    assert "LIMIT" in caplog.records[0].getMessage()
    assert "ansi" in caplog.records[0].getMessage()


def test_supported_clause_logs_nothing(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="sqlchain"):
        Select().select("id").limit(1)
    assert caplog.records == []


def test_ungated_value_renders_after_dialect_change() -> None:
    stmt = Select.new("ansi").select("id").limit(1)
    assert stmt.model_copy(update={"dialect": "postgresql"}).as_string() == "SELECT id LIMIT 1"


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


def test_default_dialect_is_postgresql() -> None:
    assert get_config().default_dialect == "postgresql"
    assert Select().dialect == "postgresql"


def test_default_dialect_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_DIALECT, "sqlite")
    reset_config()
    assert Select().dialect == "sqlite"


def test_invalid_env_dialect(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_DIALECT, "oracle")
    reset_config()
    with pytest.raises(ConfigError) as exc_info:
        get_config()
    assert exc_info.value.setting == "default_dialect"


def test_configure_changes_default() -> None:
    configure(default_dialect="postgres")
    assert Insert().dialect == "postgresql"
    configure(default_dialect="mysql")
    assert Insert().dialect == "mysql"


def test_configure_rejects_unknown_setting() -> None:
    with pytest.raises(ConfigError) as exc_info:
        configure(colour=True)
    assert exc_info.value.setting == "colour"


def test_configure_rejects_unknown_dialect() -> None:
    with pytest.raises(ConfigError):
        configure(default_dialect="oracle")
    assert get_config().default_dialect == "postgresql"


def test_explicit_dialect_overrides_config() -> None:
    configure(default_dialect="mysql")
    assert Select.new("sqlite").dialect == "sqlite"
