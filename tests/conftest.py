"""Shared pytest fixtures for cuemarkup tests."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from cuemarkup.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Generator

_SETTINGS_ENV_PREFIXES = ("RENDER__", "LOGGING__")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Drop settings env vars from the host and reset the settings cache."""
    for name in list(os.environ):
        if name.upper().startswith(_SETTINGS_ENV_PREFIXES):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
