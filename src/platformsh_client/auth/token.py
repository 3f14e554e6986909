"""Bearer token authentication for httpx."""

from collections.abc import Generator

import httpx


class BearerTokenAuth(httpx.Auth):
    """Send an API token as an ``Authorization: Bearer`` header."""

    def __init__(self, token: str):
        if not token:
            raise ValueError("An API token is required")
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request

    def __repr__(self) -> str:
        return f"{type(self).__name__}(token='***')"
