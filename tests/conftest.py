"""Shared pytest fixtures for monday_graphql tests."""

import pytest

from monday_graphql import MondayClient, get_settings

MONDAY_URL = "https://api.monday.com/v2"
MONDAY_FILES_URL = "https://api.monday.com/v2/file"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep MONDAY_* variables and stray .env files out of the tests."""
    for name in ("TOKEN", "HOST", "FILES_HOST", "VERSION", "OPEN_TIMEOUT", "READ_TIMEOUT"):
        monkeypatch.delenv(f"MONDAY_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def monday_url():
    return MONDAY_URL


@pytest.fixture
def client():
    """Client with a test token and default endpoints."""
    return MondayClient(token="test-token")
