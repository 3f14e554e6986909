"""Client configuration.

Every setting can be passed explicitly or read from the environment (or a
.env file) through CredentialResolver.

| Setting        | Environment variable                  | Default                                     |
|----------------|---------------------------------------|---------------------------------------------|
| `accounts_url` | `PLATFORMSH_CLIENT_ACCOUNTS_URL`      | `https://accounts.platform.sh/api/platform/` |
| `api_token`    | `PLATFORMSH_CLIENT_API_TOKEN`         | read from `PLATFORMSH_CLIENT_API_TOKEN_FILE` |
| `timeout`      | `PLATFORMSH_CLIENT_TIMEOUT`           | `30`                                        |
| `max_retries`  | `PLATFORMSH_CLIENT_MAX_RETRIES`       | `0` (no retries)                            |
"""

import logging
from dataclasses import dataclass

from platformsh_client import __version__
from platformsh_client.auth import CredentialResolver

logger = logging.getLogger(__name__)

ENV_PREFIX = "PLATFORMSH_CLIENT_"
DEFAULT_ACCOUNTS_URL = "https://accounts.platform.sh/api/platform/"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = f"platformsh-client-python/{__version__}"


class ConfigError(ValueError):
    """A configuration value is invalid."""

    pass


@dataclass
class ClientConfig:
    """Settings shared by every transport a client creates."""

    accounts_url: str = DEFAULT_ACCOUNTS_URL
    api_token: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = 0
    backoff_factor: float = 1.0
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ConfigError(f"timeout must be positive, got {self.timeout}")
        if self.max_retries < 0:
            raise ConfigError(f"max_retries cannot be negative, got {self.max_retries}")

    @classmethod
    def from_env(
        cls,
        resolver: CredentialResolver | None = None,
        *,
        accounts_url: str | None = None,
        api_token: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
    ) -> "ClientConfig":
        """Build a config from explicit values, falling back to the environment.

        Raises:
            ConfigError: If a numeric setting cannot be parsed.
        """
        resolver = resolver or CredentialResolver()

        url = resolver.resolve(
            value=accounts_url,
            env_var_name=f"{ENV_PREFIX}ACCOUNTS_URL",
            default=DEFAULT_ACCOUNTS_URL,
            secret=False,
        )
        token = resolver.resolve(value=api_token, env_var_name=f"{ENV_PREFIX}API_TOKEN")
        if token is None:
            token = resolver.resolve_from_file(env_var_name=f"{ENV_PREFIX}API_TOKEN_FILE")
        if token is None:
            logger.debug("No API token configured; requests will be unauthenticated")

        return cls(
            accounts_url=url,
            api_token=token,
            timeout=_number(
                resolver,
                timeout,
                f"{ENV_PREFIX}TIMEOUT",
                DEFAULT_TIMEOUT,
                float,
            ),
            max_retries=_number(resolver, max_retries, f"{ENV_PREFIX}MAX_RETRIES", 0, int),
        )


def _number(resolver, value, env_var_name, default, convert):
    if value is not None:
        return convert(value)
    raw = resolver.resolve(env_var_name=env_var_name, secret=False)
    if raw is None:
        return default
    try:
        return convert(raw)
    except ValueError:
        raise ConfigError(f"{env_var_name} must be a number, got {raw!r}") from None
