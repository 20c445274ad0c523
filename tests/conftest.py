"""
Pytest fixtures for Wallet Signer tests. The API is stateless, so one TestClient per test is enough.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def client():
    """FastAPI TestClient over the full app (middleware + exception handlers)."""
    from fastapi.testclient import TestClient

    from wallet_signer.api_server.server import app

    return TestClient(app)


@pytest.fixture
def clean_env(monkeypatch):
    """Unset every config variable and reset the cached settings around the test."""
    from wallet_signer.config import get_settings

    for name in ("PORT", "API_HOST", "LOG_LEVEL", "LOG_FORMAT", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
