"""Accumulation policy for clause values.

All helpers are pure: they return a new tuple (or the input unchanged) and
never raise.  Empty values are ignored everywhere so a conditional
``stmt.where_clause(cond if flag else "")`` is a no-op when the flag is off.
"""
from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def push_unique(items: tuple[T, ...], value: T) -> tuple[T, ...]:
    """Append ``value`` unless it is empty or already present.

    Args:
        items: Current accumulator.
        value: Trimmed string, or a ``(tag, text)`` pair whose text is checked.

    Returns:
        ``items`` itself when nothing was added, else a longer tuple.
    """
    text = value[-1] if isinstance(value, tuple) else value
    if not text or value in items:
        return items
    return (*items, value)


def push(items: tuple[T, ...], value: T) -> tuple[T, ...]:
    """Append ``value`` unconditionally (splices, combinator operands, commands)."""
    return (*items, value)


def assign_scalar(value: str) -> str:
    """Normalise a last-write-wins value; ``""`` disables the clause."""
    return value.strip()
