"""Shared pytest fixtures for sqlchain unit and integration tests."""
from __future__ import annotations

import pytest

from sqlchain.config import ENV_DIALECT, reset_config

ALL_DIALECTS = ["ansi", "mysql", "postgresql", "sqlite"]


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch):
    """Every test starts from the built-in default dialect."""
    monkeypatch.delenv(ENV_DIALECT, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture(params=ALL_DIALECTS)
def dialect(request: pytest.FixtureRequest) -> str:
    """Each registered built-in dialect in turn."""
    return request.param
