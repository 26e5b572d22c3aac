"""Shared fixtures for the inetaddr test suite."""

import pytest

from inetaddr.config import reload_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Run every test with default settings and no stray .env.local."""
    for name in ("ADDRESS_BACKEND", "LOG_LEVEL", "APP_ENV", "DEBUG", "APP_NAME"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reload_settings()
    yield
    # Restore the environment first so teardown reloads clean settings
    monkeypatch.undo()
    reload_settings()


@pytest.fixture(params=["text", "socket"])
def backend(request):
    """Storage backend name; tests using it run once per backend."""
    return request.param
