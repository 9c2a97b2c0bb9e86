"""Custom exception hierarchy for sqlchain.

Rendering never fails: an incomplete builder simply produces incomplete SQL.
The errors below cover the configuration surface, so callers can catch
:class:`SQLChainError` for any sqlchain-specific failure.
"""
from __future__ import annotations


class SQLChainError(Exception):
    """Base exception for all sqlchain errors."""


class UnknownDialectError(SQLChainError, ValueError):
    """Raised when a dialect target name has no registered implementation.

    Args:
        target: The requested dialect name.
        registered: The sorted list of registered dialect names.
    """

    def __init__(self, target: str, registered: list[str]) -> None:
        super().__init__(
            f"Unsupported dialect target: '{target}'. Registered targets: {registered}."
        )
        self.target = target
        self.registered = registered


class ConfigError(SQLChainError):
    """Raised when the process-wide builder configuration is invalid.

    Args:
        message: Human-readable description.
        setting: Name of the offending setting (e.g. ``default_dialect``).
    """

    def __init__(self, message: str, setting: str | None = None) -> None:
        super().__init__(message)
        self.setting = setting
