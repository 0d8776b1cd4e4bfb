"""Shared test fixtures."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop AI_LINTER_* variables leaking in from the developer shell."""
    for name in list(os.environ):
        if name.startswith("AI_LINTER_"):
            monkeypatch.delenv(name)
