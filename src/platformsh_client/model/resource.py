"""Generic hypermedia resource.

A Resource is a read-only view over one JSON object returned by the API,
plus the Transport used to talk about it further. The reserved keys
``_links``, ``_embedded`` and the client-local ``_full`` flag hold metadata
and are never exposed as properties.

Operations are discovered from the links the server includes: a link named
``#edit`` means the ``edit`` operation is available on that instance.

Example:
    ```python
    project = Project.get("abc123", "", transport)
    if project is not None and project.operation_available("edit"):
        project.update({"title": "New title"})
    ```
"""

import logging
from collections.abc import Iterator
from typing import Any, ClassVar, TypeVar

import httpx

from platformsh_client.errors import (
    ActivityNotFoundError,
    ImmutableResourceError,
    LinkNotFoundError,
    NotFoundError,
    OperationNotAvailableError,
    PropertyNotFoundError,
    ResourceValidationError,
    TransportError,
    raise_for_status,
)
from platformsh_client.transport import Transport

logger = logging.getLogger(__name__)

RESERVED_KEYS = frozenset(["_links", "_embedded", "_full"])

R = TypeVar("R", bound="Resource")


class Resource:
    """Base class for every API entity."""

    # Property names that must be present to create the resource
    required: ClassVar[list[str]] = []

    def __init__(self, data: dict[str, Any], transport: Transport):
        self._data = dict(data)
        self._transport = transport

    # =========================================================================
    # Read-only mapping access
    # =========================================================================

    def __getitem__(self, name: str) -> Any:
        return self.get_property(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_property(name)

    def __setitem__(self, name: str, value: Any) -> None:
        raise ImmutableResourceError()

    def __delitem__(self, name: str) -> None:
        raise ImmutableResourceError()

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_property_names())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Resource):
            return NotImplemented
        mine, theirs = self._identity(), other._identity()
        if mine is None or theirs is None:
            return self is other
        return mine == theirs

    def __hash__(self) -> int:
        identity = self._identity()
        return hash(identity) if identity is not None else id(self)

    def __repr__(self) -> str:
        identity = self._identity() or "(no self link)"
        return f"<{type(self).__name__} {identity}{'' if self.is_full else ' stub'}>"

    def _identity(self) -> str | None:
        try:
            return self.uri(absolute=True)
        except (LinkNotFoundError, PropertyNotFoundError):
            return None

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def wrap(cls: type[R], data: dict[str, Any], transport: Transport) -> R:
        """Create an instance from JSON data without any request."""
        return cls(data, transport)

    @classmethod
    def wrap_collection(cls: type[R], data: list[dict[str, Any]], transport: Transport) -> list[R]:
        """Create instances from a collection's JSON data, keeping its order."""
        return [cls.wrap(item, transport) for item in data]

    @classmethod
    def get(cls: type[R], id: str, collection_url: str, transport: Transport) -> R | None:
        """Get a resource by its ID.

        Args:
            id: The resource ID, or its full URL if collection_url is empty
            collection_url: URL of the collection the resource belongs to
            transport: Transport to use for this and later requests

        Returns:
            The full resource, or None if the API answered 404.
        """
        url = f"{collection_url.rstrip('/')}/{id}" if collection_url else id
        request = transport.create_request("get", url)
        try:
            response = cls.send(request, transport)
        except NotFoundError:
            logger.debug(f"{cls.__name__} not found at {request.url}")
            return None
        data = response.json()
        data["_full"] = True
        return cls.wrap(data, transport)

    @classmethod
    def create(cls: type[R], body: dict[str, Any], collection_url: str, transport: Transport) -> R:
        """Create a resource.

        The body is validated locally first; nothing is sent if a required
        property is missing.

        Raises:
            ResourceValidationError: If required properties are missing.
        """
        errors = cls.check(body)
        if errors:
            message = "Cannot create resource due to validation error(s): " + "; ".join(errors)
            raise ResourceValidationError(message, errors=errors)

        request = transport.create_request("post", collection_url, json=body)
        data = cls.send(request, transport).json()
        data["_full"] = True
        return cls.wrap(data, transport)

    @classmethod
    def get_collection(
        cls: type[R],
        url: str,
        transport: Transport,
        limit: int = 0,
        options: dict[str, Any] | None = None,
    ) -> list[R]:
        """Get a collection of resources.

        The API has no page size parameter yet, so ``limit`` is applied on the
        client: the whole collection is fetched and then truncated to the
        first ``limit`` items. This is not pagination.

        Args:
            url: Collection URL
            transport: Transport to use
            limit: Maximum number of items to return; 0 returns all
            options: Request options (``query``, ``headers``)
        """
        request = transport.create_request("get", url, **(options or {}))
        data = cls.send(request, transport).json()

        # TODO: send limit as a query parameter once the API accepts a page size
        if limit:
            data = data[:limit]

        return cls.wrap_collection(data, transport)

    @staticmethod
    def send(request: httpx.Request, transport: Transport) -> httpx.Response:
        """Send a request, translating failures into APIError subclasses.

        Every resource-level request goes through here, so callers only ever
        see this package's exceptions.

        Raises:
            TransportError: If no response was received.
            APIError: For any non-2xx response.
        """
        try:
            response = transport.send(request)
        except httpx.TransportError as e:
            raise TransportError(
                f"{request.method} {request.url} failed: {e}",
                request=request,
            ) from e
        raise_for_status(response)
        return response

    # =========================================================================
    # Validation
    # =========================================================================

    @classmethod
    def get_required(cls) -> list[str]:
        return list(cls.required)

    @classmethod
    def check(cls, data: dict[str, Any]) -> list[str]:
        """Validate data for a new resource.

        Returns:
            A list of validation errors, empty when the data is valid.
        """
        errors = []
        missing = [name for name in cls.get_required() if name not in data]
        if missing:
            errors.append("Missing: " + ", ".join(missing))
        return errors

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def is_full(self) -> bool:
        """Whether this is the full representation rather than a stub."""
        return bool(self._data.get("_full"))

    @property
    def transport(self) -> Transport:
        return self._transport

    def get_data(self) -> dict[str, Any]:
        """Get all of the API data for this resource, metadata included."""
        return dict(self._data)

    def has_property(self, name: str) -> bool:
        return self._is_property(name) and name in self._data

    def get_property(self, name: str) -> Any:
        """Get a property value.

        Raises:
            PropertyNotFoundError: If the property is absent or reserved.
        """
        if not self.has_property(name):
            raise PropertyNotFoundError(name)
        return self._data[name]

    def get_property_names(self) -> list[str]:
        return [key for key in self._data if self._is_property(key)]

    def get_properties(self) -> dict[str, Any]:
        return {key: value for key, value in self._data.items() if self._is_property(key)}

    @staticmethod
    def _is_property(key: str) -> bool:
        return key not in RESERVED_KEYS

    # =========================================================================
    # Links
    # =========================================================================

    def has_link(self, rel: str) -> bool:
        links = self._data.get("_links")
        # An empty link set may be serialized as []
        if not isinstance(links, dict):
            return False
        link = links.get(rel)
        return isinstance(link, dict) and link.get("href") is not None

    def get_link(self, rel: str, absolute: bool = False) -> str:
        """Get the href for a link relation.

        Args:
            rel: Relation name, e.g. ``self`` or ``#edit``
            absolute: Resolve a relative href against the transport's
                base URL, the way requests do

        Raises:
            LinkNotFoundError: If the resource has no such link.
        """
        if not self.has_link(rel):
            raise LinkNotFoundError(rel)
        url = self._data["_links"][rel]["href"]
        if absolute:
            url = self._absolute(url)
        return url

    def _absolute(self, url: str) -> str:
        # Same resolution as the requests themselves
        return str(self._transport.resolve_url(url))

    def uri(self, absolute: bool = False) -> str:
        """The resource's canonical URI (its ``self`` link)."""
        return self.get_link("self", absolute)

    # =========================================================================
    # Requests
    # =========================================================================

    def refresh(self, **options) -> None:
        """Replace the local data with the API's current representation.

        Args:
            **options: Request options (``query``, ``headers``)
        """
        request = self._transport.create_request("get", self.uri(), **options)
        data = self.send(request, self._transport).json()
        data["_full"] = True
        self._data = data

    def ensure_full(self) -> None:
        """Refresh the resource if it is only a stub."""
        if not self.is_full:
            self.refresh()

    def operation_available(self, op: str) -> bool:
        return self.has_link(f"#{op}")

    def run_operation(self, op: str, method: str = "post", body: dict[str, Any] | None = None) -> dict[str, Any]:
        """Execute an operation advertised by the resource's links.

        Returns:
            The decoded response body.

        Raises:
            OperationNotAvailableError: If there is no ``#<op>`` link.
        """
        if not self.operation_available(op):
            raise OperationNotAvailableError(op)
        request = self._transport.create_request(method, self.get_link(f"#{op}"), json=body or None)
        return _decode(self.send(request, self._transport))

    def run_long_operation(self, op: str, method: str = "post", body: dict[str, Any] | None = None):
        """Execute an operation that starts an activity on the server.

        Returns:
            The Activity embedded in the response.

        Raises:
            ActivityNotFoundError: If the response embeds no activity.
        """
        from platformsh_client.model.activity import Activity

        data = self.run_operation(op, method, body)
        try:
            activity = data["_embedded"]["activities"][0]
        except (KeyError, IndexError, TypeError):
            raise ActivityNotFoundError() from None
        return Activity.wrap(activity, self._transport)

    def update(self, values: dict[str, Any]) -> None:
        """Update the resource through its ``edit`` operation.

        The local data is replaced only when the API echoes the updated entity
        in ``_embedded.entity``; otherwise it is left as it was. Call
        ``refresh()`` afterwards if the current state is needed.
        """
        data = self.run_operation("edit", "patch", values)
        embedded = data.get("_embedded") if isinstance(data, dict) else None
        entity = embedded.get("entity") if isinstance(embedded, dict) else None
        if entity is None:
            logger.debug(f"Update of {self!r} returned no entity; local data unchanged")
            return
        self._data = dict(entity)
        self._data["_full"] = True

    def delete(self) -> dict[str, Any]:
        """Delete the resource. The instance should be discarded afterwards."""
        request = self._transport.create_request("delete", self.uri())
        return _decode(self.send(request, self._transport))


def _decode(response: httpx.Response) -> dict[str, Any]:
    # 204 and other empty answers
    if not response.content:
        return {}
    return response.json()
