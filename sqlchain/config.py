"""Process-wide builder configuration.

Statements created without an explicit ``dialect`` use
``get_config().default_dialect``.  The initial value is read from the
``SQLCHAIN_DIALECT`` environment variable the first time the configuration is
requested and falls back to ``"postgresql"``.

Usage::

    from sqlchain.config import configure

    configure(default_dialect="sqlite")
"""
from __future__ import annotations

import logging
import os
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from sqlchain.compile.registry import DialectFactory
from sqlchain.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_DIALECT = "SQLCHAIN_DIALECT"
DEFAULT_DIALECT = "postgresql"


class BuilderConfig(BaseModel):
    """Settings shared by every statement builder.

    Attributes:
        default_dialect: Dialect target used when a statement is created
            without one.  Aliases such as ``"postgres"`` are normalised.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    default_dialect: str = DEFAULT_DIALECT

    @field_validator("default_dialect")
    @classmethod
    def _registered_dialect(cls, value: str) -> str:
        return DialectFactory.canonical_name(value)

    @classmethod
    def from_env(cls) -> BuilderConfig:
        """Build a configuration from ``SQLCHAIN_DIALECT``.

        Raises:
            ConfigError: If the variable names an unregistered dialect.
        """
        raw = os.environ.get(ENV_DIALECT, "").strip()
        if not raw:
            return cls()
        try:
            return cls(default_dialect=raw)
        except ValidationError as exc:
            raise ConfigError(
                f"{ENV_DIALECT}={raw!r} is not a registered dialect. "
                f"Registered targets: {DialectFactory.registered_targets()}.",
                setting="default_dialect",
            ) from exc


_config: BuilderConfig | None = None


def get_config() -> BuilderConfig:
    """Return the active configuration, loading it from the environment once."""
    global _config
    if _config is None:
        _config = BuilderConfig.from_env()
        logger.debug("Loaded builder config: %s", _config)
    return _config


def configure(**changes: Any) -> BuilderConfig:
    """Replace selected settings and return the new configuration.

    Raises:
        ConfigError: If a setting is unknown or its value is invalid.
    """
    global _config
    merged = {**get_config().model_dump(), **changes}
    try:
        _config = BuilderConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(str(exc), setting=", ".join(sorted(changes))) from exc
    logger.debug("Builder config updated: %s", _config)
    return _config


def reset_config() -> None:
    """Forget the active configuration so the next lookup re-reads the environment."""
    global _config
    _config = None
