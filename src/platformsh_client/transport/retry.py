"""Optional retry transport for idempotent requests.

The resource layer never retries. This transport lets an application opt in
to retrying safe requests at the HTTP level:

```python
from platformsh_client.transport.retry import IdempotentOnlyRetry
import httpx

retry_transport = IdempotentOnlyRetry(
    wrapped_transport=httpx.HTTPTransport(),
    max_retries=3,
)

with httpx.Client(transport=retry_transport) as client:
    response = client.get("https://eu.platform.sh/api/projects/abc123")
```
"""

import logging
import time

import httpx

logger = logging.getLogger(__name__)


class IdempotentOnlyRetry(httpx.BaseTransport):
    """Retry transport that only retries truly idempotent methods on 5xx errors.

    Operations on the API (POST to an operation link, PATCH, DELETE) are
    never retried, since repeating them could start duplicate activities.

    Args:
        wrapped_transport: The underlying transport to wrap
        max_retries: Maximum number of retry attempts (default: 3)
        backoff_factor: Multiplier for exponential backoff (default: 1.0)
        retry_status_codes: Status codes that trigger retries (default: 502, 503, 504)
    """

    # Truly idempotent HTTP methods (per RFC 7231)
    IDEMPOTENT_METHODS: frozenset[str] = frozenset(["HEAD", "GET", "OPTIONS", "TRACE"])

    DEFAULT_RETRY_STATUS_CODES: frozenset[int] = frozenset([502, 503, 504])

    def __init__(
        self,
        *,
        wrapped_transport: httpx.BaseTransport,
        max_retries: int = 3,
        backoff_factor: float = 1.0,
        retry_status_codes: frozenset[int] | None = None,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.retry_status_codes = retry_status_codes or self.DEFAULT_RETRY_STATUS_CODES

    def __enter__(self):
        self._wrapped_transport.__enter__()
        return self

    def __exit__(self, exc_type=None, exc_val=None, exc_tb=None):
        self._wrapped_transport.__exit__(exc_type, exc_val, exc_tb)

    def close(self) -> None:
        self._wrapped_transport.close()

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        """Send the request, retrying idempotent methods on server errors."""
        retries = 0

        while True:
            try:
                response = self._wrapped_transport.handle_request(request)
            except httpx.TransportError as e:
                if retries >= self.max_retries or request.method not in self.IDEMPOTENT_METHODS:
                    raise
                retries += 1
                delay = self._calculate_backoff_delay(retries)
                logger.warning(
                    f"Request {request.method} {request.url} failed with {e!r}, "
                    f"retrying in {delay}s (attempt {retries}/{self.max_retries})"
                )
                time.sleep(delay)
                continue

            if not self._should_retry(request, response, retries):
                return response

            retries += 1
            delay = self._calculate_backoff_delay(retries)
            logger.warning(
                f"Request {request.method} {request.url} failed with {response.status_code}, "
                f"retrying in {delay}s (attempt {retries}/{self.max_retries})"
            )
            response.close()
            time.sleep(delay)

    def _should_retry(self, request: httpx.Request, response: httpx.Response, current_retries: int) -> bool:
        if current_retries >= self.max_retries:
            return False
        if request.method not in self.IDEMPOTENT_METHODS:
            return False
        return response.status_code in self.retry_status_codes

    def _calculate_backoff_delay(self, retry_number: int) -> float:
        """Exponential backoff: backoff_factor * 2 ** (retry_number - 1)."""
        return self.backoff_factor * (2 ** (retry_number - 1))
