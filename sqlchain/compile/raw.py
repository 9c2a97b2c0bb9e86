"""Raw SQL splicing at clause boundaries.

Raw text is never parsed.  It is placed verbatim around a clause's rendered
SQL and separated with the formatter's space token.  Splices run even when the
clause itself renders empty, which is how callers supply clauses the builder
has no setter for.
"""
from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from sqlchain.fmt import Formatter

#: ``(clause, text)`` pairs in insertion order.
RawSplices = Iterable[tuple[Enum, str]]


def raw_queries(splices: RawSplices, clause: Enum) -> list[str]:
    """Return the texts registered for ``clause``, in insertion order."""
    return [text for target, text in splices if target == clause]


def concat_raw(query: str, fmts: Formatter, items: Iterable[str]) -> str:
    """Append the top-of-statement raw prefix to ``query``.

    Args:
        query: SQL rendered so far (usually empty).
        fmts: Whitespace tokens.
        items: Raw texts added with ``raw()``.

    Returns:
        ``query`` unchanged when ``items`` is empty, else ``query`` followed by
        the space-joined texts and a trailing separator.
    """
    items = list(items)
    if not items:
        return query
    raw_sql = fmts.space.join(items).strip()
    return f"{query}{raw_sql}{fmts.space}{fmts.lb}"


def concat_raw_before_after(
    before: RawSplices,
    after: RawSplices,
    query: str,
    fmts: Formatter,
    clause: Enum,
    sql: str,
) -> str:
    """Surround ``sql`` with the raw splices registered for ``clause``.

    Args:
        before: Splices placed before their clause.
        after: Splices placed after their clause.
        query: SQL rendered so far; the result starts with it.
        fmts: Whitespace tokens.
        clause: The clause being rendered.
        sql: The clause's own rendering (possibly empty).

    Returns:
        ``query + before + space? + sql + after + space?`` where each space is
        present only when its splice text is non-empty.
    """
    space = fmts.space
    raw_before = space.join(raw_queries(before, clause)).strip()
    raw_after = space.join(raw_queries(after, clause)).strip()
    space_before = space if raw_before else ""
    space_after = space if raw_after else ""
    return f"{query}{raw_before}{space_before}{sql}{raw_after}{space_after}"
