"""API entity models."""

from platformsh_client.model.activity import Activity
from platformsh_client.model.environment import Environment
from platformsh_client.model.project import Project
from platformsh_client.model.resource import Resource
from platformsh_client.model.ssh_key import SshKey

__all__ = ["Activity", "Environment", "Project", "Resource", "SshKey"]
