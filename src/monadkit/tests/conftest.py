"""Shared fixtures."""

import os

import pytest

from monadkit.foundation.config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> object:
    """Reload settings per test, isolated from the host's MONADKIT_* variables."""
    for key in [k for k in os.environ if k.startswith("MONADKIT_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    yield
    clear_settings_cache()
