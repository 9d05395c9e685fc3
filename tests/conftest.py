"""Shared fixtures."""

import os

import pytest

from finpulse.core.config import get_settings

ENV_VARS = (
    "FINPULSE_DEFAULT_RANGE",
    "FINPULSE_THEME",
    "FINPULSE_DERIVE_TREND",
    "FINPULSE_REPORTS_DIR",
    "FINPULSE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Isolate tests from FINPULSE_* variables and the settings cache."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    # load_dotenv() sets variables behind monkeypatch's back
    for name in ENV_VARS:
        os.environ.pop(name, None)
    get_settings.cache_clear()
