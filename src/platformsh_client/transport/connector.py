"""Connector: hands out one Transport per API host."""

import logging

import httpx

from platformsh_client.auth import BearerTokenAuth
from platformsh_client.config import ClientConfig
from platformsh_client.transport.base import Transport
from platformsh_client.transport.factory import create_transport

logger = logging.getLogger(__name__)


class Connector:
    """Create and cache transports for the accounts API and project endpoints.

    Each project lives on its own regional host, so every endpoint gets a
    Transport of its own. All of them share the configured credentials.

    Args:
        config: Client settings
        http_transport: Lowest-level httpx transport for every client, mainly
            for tests (httpx.MockTransport)
    """

    def __init__(self, config: ClientConfig, http_transport: httpx.BaseTransport | None = None):
        self.config = config
        self._http_transport = http_transport
        self._transports: dict[str, Transport] = {}

    def get_transport(self, endpoint: str | None = None) -> Transport:
        """Get the transport for an endpoint, or the accounts API when None."""
        base_url = endpoint or self.config.accounts_url
        key = base_url.rstrip("/")
        if key not in self._transports:
            logger.debug(f"Creating transport for {base_url}")
            self._transports[key] = self._create(base_url)
        return self._transports[key]

    def _create(self, base_url: str) -> Transport:
        auth = BearerTokenAuth(self.config.api_token) if self.config.api_token else None
        return create_transport(
            base_url,
            auth=auth,
            timeout=self.config.timeout,
            max_retries=self.config.max_retries,
            backoff_factor=self.config.backoff_factor,
            user_agent=self.config.user_agent,
            http_transport=self._http_transport,
        )

    def close(self) -> None:
        for transport in self._transports.values():
            transport.close()
        self._transports.clear()
