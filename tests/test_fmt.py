"""Unit tests for sqlchain.fmt and the print helpers."""
from __future__ import annotations

import pytest

from sqlchain import Select
from sqlchain.fmt import colorize, format, multiline, one_line


def test_one_line_tokens() -> None:
    fmts = one_line()
    assert (fmts.comma, fmts.hr, fmts.indent, fmts.lb, fmts.space) == (", ", "", "", "", " ")


def test_multiline_tokens() -> None:
    fmts = multiline()
    assert fmts.lb == "\n"
    assert fmts.indent == "  "
    assert fmts.hr.startswith("-- ---")


def test_nested_adds_one_indentation_level() -> None:
    assert multiline().nested().lb == "\n  "
    assert multiline().nested().nested().lb == "\n    "
    assert one_line().nested() == one_line()


def test_format_one_line_without_color() -> None:
    assert format("SELECT 1", one_line(), color=False) == "SELECT 1"


def test_format_multiline_wraps_in_rules() -> None:
    text = format("SELECT 1", multiline(), color=False)
    lines = text.split("\n")
    assert lines[1] == multiline().hr
    assert lines[2] == "SELECT 1"
    assert lines[3] == multiline().hr


def test_colorize_keywords() -> None:
    assert colorize("SELECT id") == "\x1b[34;1mSELECT\x1b[0m id"


def test_colorize_null_and_placeholders() -> None:
    text = colorize("a = $1 OR b IS NULL")
    assert "\x1b[0;1m$1\x1b[0m" in text
    assert "\x1b[91;2mNULL\x1b[0m" in text


def test_colorize_leaves_comments_alone() -> None:
    text = colorize("/* SELECT */ x")
    assert text == "\x1b[32;2m/* SELECT */\x1b[0m x"


def test_keywords_inside_identifiers_are_not_highlighted() -> None:
    assert colorize("selected_id") == "selected_id"


def test_lowercase_keywords_are_highlighted() -> None:
    assert colorize("select id") == "\x1b[34;1mselect\x1b[0m id"
    assert colorize("x = null") == "x = \x1b[91;2mnull\x1b[0m"


@pytest.mark.parametrize("method", ["debug", "print"])
def test_print_helpers_return_the_statement(method: str, capsys: pytest.CaptureFixture[str]) -> None:
    stmt = Select().select("id").from_("users")
    assert getattr(stmt, method)() is stmt
    out = capsys.readouterr().out
    assert "users" in out
    assert "SELECT" in out
