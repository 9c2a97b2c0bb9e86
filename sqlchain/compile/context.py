"""Render context value object.

Packages the ``(formatter, dialect)`` pair every clause builder needs into a
single immutable object so builders never reach back into the assembler.
"""
from __future__ import annotations

from dataclasses import dataclass

from sqlchain.compile.base import SQLDialect
from sqlchain.fmt import Formatter


@dataclass(frozen=True)
class RenderContext:
    """Immutable context for a single render pass.

    Attributes:
        fmts: Whitespace tokens for this pass.
        dialect: Dialect that decided the clause order.
    """

    fmts: Formatter
    dialect: SQLDialect
