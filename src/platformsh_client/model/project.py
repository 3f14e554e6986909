"""Projects."""

from platformsh_client.model.activity import Activity
from platformsh_client.model.environment import Environment
from platformsh_client.model.resource import Resource


class Project(Resource):
    """A Platform.sh project.

    Projects listed in the account info are stubs that only carry an
    ``endpoint`` (the project's URL on its regional API host) and a few
    summary fields. ``ensure_full()`` fetches the rest from that endpoint.
    """

    @property
    def id(self) -> str:
        if "id" in self._data:
            return self._data["id"]
        # Stubs from the account info have no ID of their own
        return self.get_property("endpoint").rstrip("/").rsplit("/", 1)[-1]

    def uri(self, absolute: bool = False) -> str:
        if self.has_link("self"):
            return self.get_link("self", absolute)
        return self.get_property("endpoint")

    def get_environments(self, limit: int = 0) -> list[Environment]:
        return Environment.get_collection(f"{self.uri()}/environments", self._transport, limit)

    def get_environment(self, id: str) -> Environment | None:
        return Environment.get(id, f"{self.uri()}/environments", self._transport)

    def get_activities(self, limit: int = 0, type: str | None = None) -> list[Activity]:
        """Get the project's recent activities, optionally of a single type."""
        options = {"query": {"type": type}} if type else None
        return Activity.get_collection(f"{self.uri()}/activities", self._transport, limit, options)

    def get_activity(self, id: str) -> Activity | None:
        return Activity.get(id, f"{self.uri()}/activities", self._transport)
