"""HTTP transport layer.

- Transport: base URL + authenticated httpx.Client, shared by resources
- Connector: one cached Transport per API host
- create_transport: factory for the httpx client stack
- IdempotentOnlyRetry: opt-in retry of safe requests on 502/503/504

Example:
    ```python
    from platformsh_client.transport import create_transport

    transport = create_transport("https://accounts.platform.sh/api/platform/")
    me = transport.get("me").json()
    ```
"""

from platformsh_client.transport.base import Transport
from platformsh_client.transport.connector import Connector
from platformsh_client.transport.factory import create_transport
from platformsh_client.transport.retry import IdempotentOnlyRetry

__all__ = ["Connector", "IdempotentOnlyRetry", "Transport", "create_transport"]
