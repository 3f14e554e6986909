"""Environments of a project (one per Git branch)."""

import re

from platformsh_client.model.activity import Activity
from platformsh_client.model.resource import Resource


class Environment(Resource):
    """A project environment.

    State-changing actions are long-running operations: each returns the
    Activity the server started, which can be waited on.
    """

    @property
    def id(self) -> str:
        return self.get_property("id")

    def is_active(self) -> bool:
        return self._data.get("status") == "active"

    def branch(self, title: str, id: str | None = None) -> Activity:
        """Branch a new environment from this one.

        Args:
            title: Title of the new environment
            id: Machine name; derived from the title when not given
        """
        id = id or self.sanitize_id(title)
        return self.run_long_operation("branch", body={"name": id, "title": title})

    @staticmethod
    def sanitize_id(proposed: str) -> str:
        """Turn a title into a valid environment ID."""
        return re.sub(r"[^a-z0-9-]+", "-", proposed.lower()).strip("-")

    def activate(self) -> Activity:
        return self.run_long_operation("activate")

    def deactivate(self) -> Activity:
        return self.run_long_operation("deactivate")

    def merge(self) -> Activity:
        """Merge into the parent environment."""
        return self.run_long_operation("merge")

    def synchronize(self, data: bool = False, code: bool = False) -> Activity:
        """Synchronize data and/or code from the parent environment."""
        if not data and not code:
            raise ValueError("Nothing to synchronize: set data or code")
        body = {"synchronize_data": data, "synchronize_code": code}
        return self.run_long_operation("synchronize", body=body)

    def backup(self) -> Activity:
        return self.run_long_operation("backup")

    def get_activities(self, limit: int = 0, type: str | None = None) -> list[Activity]:
        options = {"query": {"type": type}} if type else None
        return Activity.get_collection(f"{self.uri()}/activities", self._transport, limit, options)
