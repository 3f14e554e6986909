"""Platform.sh API client.

A generic hypermedia Resource model over the Platform.sh REST API, plus a
small client for the logged-in user's account, projects and SSH keys.

Example:
    ```python
    from platformsh_client import create_client

    client = create_client(api_token="...")
    project = client.get_project("abc123")
    project.ensure_full()
    for environment in project.get_environments():
        if environment.operation_available("backup"):
            environment.backup().wait()
    ```
"""

__version__ = "0.1.0"

from platformsh_client.client import PlatformClient, create_client  # noqa: E402
from platformsh_client.model import Activity, Environment, Project, Resource, SshKey  # noqa: E402

__all__ = [
    "Activity",
    "Environment",
    "PlatformClient",
    "Project",
    "Resource",
    "SshKey",
    "__version__",
    "create_client",
]
