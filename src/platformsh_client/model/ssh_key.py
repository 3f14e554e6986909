"""SSH public keys attached to the user's account."""

from platformsh_client.model.resource import Resource


class SshKey(Resource):
    required = ["value"]

    @property
    def id(self) -> str:
        return str(self.get_property("key_id"))
