"""Pytest configuration and shared fixtures for platformsh-client tests."""

import os

import pytest

from platformsh_client.testing import MockApi

ACCOUNTS_URL = "https://accounts.example.com/api/platform/"
PROJECT_ENDPOINT = "https://eu.example.com/api/projects/abc123"


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Clear client configuration variables so the host environment cannot leak in."""
    for key in list(os.environ.keys()):
        if key.startswith(("PLATFORMSH_CLIENT_", "TEST_")):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def api():
    """A fake API recording every request."""
    return MockApi()


@pytest.fixture
def transport(api):
    """Transport bound to a project endpoint, answered by the fake API."""
    with api.transport(PROJECT_ENDPOINT) as transport:
        yield transport

