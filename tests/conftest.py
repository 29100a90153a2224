"""Shared test fixtures."""

import pytest

from bodycomp.infrastructure.config import reset_settings

_ENV_VARS = (
    "BODYCOMP_STRICT_VALIDATION",
    "BODYCOMP_ENFORCE_GOALS",
    "BODYCOMP_LOG_LEVEL",
    "BODYCOMP_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Isolate tests from local .env files and cached settings."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()
