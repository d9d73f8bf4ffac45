"""
Minimal Conftest.
"""

import pytest

from fieldcheck.settings import get_settings


@pytest.fixture(autouse=True)
def reset_settings_cache(monkeypatch):
    """Isolate each test from ambient FIELDCHECK_* variables and cached settings."""
    for name in ("FIELDCHECK_LOG_LEVEL", "FIELDCHECK_EMAIL_CHECK_DELIVERABILITY",
                 "FIELDCHECK_EMAIL_ALLOW_SMTPUTF8"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("fieldcheck.settings._DEFAULT_ENV_FILES", ())

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
