"""Factory for the httpx client stack behind a Transport."""

import httpx

from platformsh_client.transport.base import Transport
from platformsh_client.transport.retry import IdempotentOnlyRetry


def create_transport(
    base_url: str,
    *,
    auth: httpx.Auth | None = None,
    timeout: float = 30.0,
    max_retries: int = 0,
    backoff_factor: float = 1.0,
    user_agent: str | None = None,
    http_transport: httpx.BaseTransport | None = None,
) -> Transport:
    """Create a Transport for one API host.

    Args:
        base_url: Base URL that relative hrefs are resolved against
        auth: Authentication applied to every request
        timeout: Request timeout in seconds
        max_retries: Retries for idempotent requests on 502/503/504; 0 disables
        backoff_factor: Multiplier for the retry backoff
        user_agent: User-Agent header value
        http_transport: Lowest-level httpx transport (e.g. httpx.MockTransport)

    Example:
        ```python
        transport = create_transport(
            "https://eu.platform.sh/api/projects/abc123",
            auth=BearerTokenAuth(token),
        )
        ```
    """
    wrapped = http_transport or httpx.HTTPTransport()
    if max_retries:
        wrapped = IdempotentOnlyRetry(
            wrapped_transport=wrapped,
            max_retries=max_retries,
            backoff_factor=backoff_factor,
        )

    headers = {"Accept": "application/json"}
    if user_agent:
        headers["User-Agent"] = user_agent

    client = httpx.Client(
        base_url=base_url,
        auth=auth,
        headers=headers,
        timeout=timeout,
        transport=wrapped,
    )
    return Transport(client)
