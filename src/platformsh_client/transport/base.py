"""HTTP transport handle shared by resources."""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class Transport:
    """A base URL plus an authenticated ``httpx.Client``.

    Relative URLs are resolved against the base URL following RFC 3986, so
    an href such as ``/api/projects/abc/environments`` replaces the base
    path while ``environments`` is appended to it.

    ``send`` returns the response whatever its status; translating HTTP
    errors is left to the caller (see ``Resource.send``).
    """

    def __init__(self, client: httpx.Client):
        self._client = client

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    @property
    def client(self) -> httpx.Client:
        return self._client

    def resolve_url(self, url: str) -> httpx.URL:
        return self._client.base_url.join(url)

    def create_request(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
        query: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Request:
        """Build a request without sending it.

        Args:
            method: HTTP method, in any case
            url: Absolute URL, or a URL relative to the base URL
            json: Body to serialize as JSON
            query: Query string parameters; None values are dropped
            headers: Extra request headers
        """
        params = None
        if query:
            params = {k: v for k, v in query.items() if v is not None}
        return self._client.build_request(
            method.upper(),
            self.resolve_url(url),
            json=json,
            params=params,
            headers=headers,
        )

    def send(self, request: httpx.Request) -> httpx.Response:
        logger.debug(f"{request.method} {request.url}")
        response = self._client.send(request)
        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return response

    def get(self, url: str, **options) -> httpx.Response:
        return self.send(self.create_request("get", url, **options))

    def post(self, url: str, **options) -> httpx.Response:
        return self.send(self.create_request("post", url, **options))

    def patch(self, url: str, **options) -> httpx.Response:
        return self.send(self.create_request("patch", url, **options))

    def delete(self, url: str, **options) -> httpx.Response:
        return self.send(self.create_request("delete", url, **options))

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.base_url!r})"
