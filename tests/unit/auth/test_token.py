"""Tests for bearer token authentication."""

import httpx
import pytest

from platformsh_client.auth import BearerTokenAuth


@pytest.mark.unit
def test_sets_authorization_header():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200)

    with httpx.Client(transport=httpx.MockTransport(handler), auth=BearerTokenAuth("t0k3n")) as client:
        client.get("https://accounts.example.com/api/platform/me")

    assert seen[0].headers["Authorization"] == "Bearer t0k3n"


@pytest.mark.unit
def test_empty_token_rejected():
    with pytest.raises(ValueError):
        BearerTokenAuth("")


@pytest.mark.unit
def test_repr_hides_token():
    assert "t0k3n" not in repr(BearerTokenAuth("t0k3n"))
