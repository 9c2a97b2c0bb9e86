"""Whitespace tokens and terminal output helpers.

A :class:`Formatter` bundles the five tokens every clause renderer glues its
output with.  Two canonical instances exist:

``one_line()``
    Single spaces, no line breaks.  Used by ``as_string()`` and ``str()``.
``multiline()``
    One clause per line with two-space indentation.  Used by ``debug()`` and
    ``repr()``.

:func:`format` wraps a rendered statement in a horizontal-rule banner and
:func:`colorize` highlights keywords with ANSI escape codes.  Neither is part
of the SQL output contract.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace

_RESET = "\x1b[0m"
_BLUE = "\x1b[34;1m"
_RED = "\x1b[91;2m"
_GREEN = "\x1b[32;2m"
_BOLD = "\x1b[0;1m"

_HR = "-- " + "-" * 78 + _RESET

_KEYWORDS = (
    "ADD", "ALTER", "AND", "AS", "BEGIN", "COMMIT", "CONCURRENTLY",
    "CONSTRAINT", "CREATE", "CROSS", "DEFAULT", "DELETE", "DROP", "END",
    "EXCEPT", "EXISTS", "FOREIGN", "FROM", "FULL", "FULLTEXT", "GROUP", "HAVING",
    "IF", "INCLUDE", "INDEX", "INNER", "INSERT", "INTERSECT", "INTO", "JOIN",
    "KEY", "LEFT", "LIMIT", "LOCK", "NOT", "OFFSET", "ON", "ONLY", "OR",
    "ORDER", "OVERRIDING", "PARTITION", "PRIMARY", "RELEASE", "RENAME",
    "REPLACE", "RETURNING", "RIGHT", "ROLLBACK", "ROW", "SAVEPOINT", "SELECT",
    "SET", "SPATIAL", "START", "TABLE", "TO", "TRANSACTION", "UNION", "UNIQUE",
    "UPDATE", "USING", "VALUES", "WHERE", "WINDOW", "WITH", "BY", "DUPLICATE",
)

_KEYWORD_RE = re.compile(r"\b(" + "|".join(_KEYWORDS) + r")\b", re.IGNORECASE)
_NULL_RE = re.compile(r"\bNULL\b", re.IGNORECASE)
_PLACEHOLDER_RE = re.compile(r"\$(10|[1-9])\b")
_COMMENT_RE = re.compile(r"(--[^\n]*|/\*.*?\*/)", re.DOTALL)


@dataclass(frozen=True)
class Formatter:
    """Whitespace tokens used while rendering.

    Attributes:
        comma: Separator between list items.
        hr: Horizontal rule printed around debug output.
        indent: Indentation for nested lines.
        lb: Line break placed after each clause.
        space: Separator between a keyword and its content.
    """

    comma: str = ", "
    hr: str = ""
    indent: str = ""
    lb: str = ""
    space: str = " "

    def nested(self) -> Formatter:
        """Return a copy whose line break carries one more indentation level."""
        return replace(self, lb=f"{self.lb}{self.indent}")


def one_line() -> Formatter:
    return Formatter()


def multiline() -> Formatter:
    return Formatter(comma=", ", hr=_HR, indent="  ", lb="\n", space=" ")


def colorize(query: str) -> str:
    """Highlight keywords, ``NULL``, ``$n`` placeholders and comments."""
    pieces: list[str] = []
    last = 0
    for match in _COMMENT_RE.finditer(query):
        pieces.append(_colorize_code(query[last:match.start()]))
        pieces.append(f"{_GREEN}{match.group(0)}{_RESET}")
        last = match.end()
    pieces.append(_colorize_code(query[last:]))
    return "".join(pieces)


def _colorize_code(text: str) -> str:
    text = _KEYWORD_RE.sub(lambda m: f"{_BLUE}{m.group(1)}{_RESET}", text)
    text = _NULL_RE.sub(lambda m: f"{_RED}{m.group(0)}{_RESET}", text)
    return _PLACEHOLDER_RE.sub(lambda m: f"{_BOLD}{m.group(0)}{_RESET}", text)


def format(query: str, fmts: Formatter, *, color: bool = True) -> str:  # noqa: A001
    """Wrap ``query`` in the formatter's horizontal-rule banner.

    Args:
        query: Rendered SQL.
        fmts: The formatter the query was rendered with.
        color: Apply :func:`colorize` to the result.

    Returns:
        The banner text ready to print.
    """
    lb, hr = fmts.lb, fmts.hr
    text = f"{lb}{hr}{lb}{query}{lb}{hr}{lb}"
    return colorize(text) if color else text
