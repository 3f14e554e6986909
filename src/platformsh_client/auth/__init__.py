"""Authentication for the Platform.sh API client.

- Multi-source credential resolution (value -> env -> .env -> default)
- Bearer token authentication for httpx
"""

from platformsh_client.auth.credentials import CredentialResolver
from platformsh_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from platformsh_client.auth.token import BearerTokenAuth

__all__ = [
    "BearerTokenAuth",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
]
