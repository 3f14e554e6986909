"""Top-level client for the Platform.sh API."""

import logging
from typing import Any

import httpx

from platformsh_client.auth import CredentialResolver
from platformsh_client.config import ClientConfig
from platformsh_client.model import Project, Resource, SshKey
from platformsh_client.transport import Connector

logger = logging.getLogger(__name__)


class PlatformClient:
    """Entry point for the logged-in user's account, projects and SSH keys.

    The account info (``GET me`` on the accounts API) lists the user's
    projects and SSH keys; it is fetched once and cached until ``reset=True``
    is passed. Each project is bound to a transport for its own endpoint.

    Args:
        connector: Source of transports; see ``create_client()`` to build
            one from the environment.
    """

    def __init__(self, connector: Connector):
        self._connector = connector
        self._account_info: dict[str, Any] | None = None

    @property
    def connector(self) -> Connector:
        return self._connector

    def get_account_info(self, reset: bool = False) -> dict[str, Any]:
        """Get account information for the logged-in user."""
        if self._account_info is None or reset:
            transport = self._connector.get_transport()
            request = transport.create_request("get", "me")
            self._account_info = Resource.send(request, transport).json()
        return self._account_info

    def get_projects(self, reset: bool = False) -> dict[str, Project]:
        """Get the user's projects, keyed by project ID.

        The projects are stubs; call ``ensure_full()`` on one for its full
        representation.
        """
        data = self.get_account_info(reset)
        projects = {}
        for item in data.get("projects", []):
            transport = self._connector.get_transport(item["endpoint"])
            project = Project.wrap(item, transport)
            projects[project.id] = project
        return projects

    def get_project(self, id: str) -> Project | None:
        return self.get_projects().get(id)

    def get_project_direct(self, id: str, hostname: str, https: bool = True) -> Project | None:
        """Get a project from a known API host without the account info.

        Args:
            id: The project ID
            hostname: The regional API host, e.g. ``eu.platform.sh``
            https: Whether to use HTTPS
        """
        scheme = "https" if https else "http"
        endpoint = f"{scheme}://{hostname}/api/projects/{id}"
        return Project.get(endpoint, "", self._connector.get_transport(endpoint))

    def get_ssh_keys(self, reset: bool = False) -> list[SshKey]:
        data = self.get_account_info(reset)
        return SshKey.wrap_collection(data.get("ssh_keys", []), self._connector.get_transport())

    def get_ssh_key(self, id: str | int, reset: bool = False) -> SshKey | None:
        """Get one of the user's SSH keys by its key ID."""
        data = self.get_account_info(reset)
        for item in data.get("ssh_keys", []):
            if str(item.get("key_id")) == str(id):
                return SshKey.wrap(item, self._connector.get_transport())
        return None

    def add_ssh_key(self, value: str, title: str | None = None) -> SshKey:
        """Add an SSH public key to the user's account.

        Args:
            value: The public key
            title: A title for the key
        """
        values = {"value": value}
        if title:
            values["title"] = title
        return SshKey.create(values, "ssh_keys", self._connector.get_transport())

    def close(self) -> None:
        self._connector.close()

    def __enter__(self) -> "PlatformClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def create_client(
    *,
    accounts_url: str | None = None,
    api_token: str | None = None,
    timeout: float | None = None,
    max_retries: int | None = None,
    resolver: CredentialResolver | None = None,
    http_transport: httpx.BaseTransport | None = None,
) -> PlatformClient:
    """Create a PlatformClient configured from arguments and the environment.

    Example:
        ```python
        from platformsh_client import create_client

        with create_client() as client:  # reads PLATFORMSH_CLIENT_API_TOKEN
            for project_id, project in client.get_projects().items():
                print(project_id, project["name"])
        ```
    """
    config = ClientConfig.from_env(
        resolver,
        accounts_url=accounts_url,
        api_token=api_token,
        timeout=timeout,
        max_retries=max_retries,
    )
    return PlatformClient(Connector(config, http_transport=http_transport))
