"""Structured exceptions for API and resource errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from platformsh_client.errors.models import ErrorDetail


class APIError(Exception):
    """Base exception for API errors.

    Carries the request that was sent and, when the server answered, the
    response, so callers never need to inspect httpx's own exceptions.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        request: "httpx.Request | None" = None,
        response: "httpx.Response | None" = None,
        detail: "ErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.request = request
        self.response = response
        self.detail = detail


class TransportError(APIError):
    """The request could not be completed (connection failure, timeout)."""

    pass


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class UnprocessableEntityError(ClientError):
    """422 Unprocessable Entity (server-side validation errors)."""

    def __init__(self, message: str, validation_errors: dict | list | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.validation_errors = validation_errors if validation_errors is not None else {}


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass


class ResourceError(Exception):
    """Base exception for misuse of a resource object.

    These are raised locally, without a round trip, and indicate a caller
    error rather than a transient condition.
    """

    pass


class PropertyNotFoundError(ResourceError, KeyError):
    """The property is missing or is reserved metadata."""

    def __init__(self, name: str):
        super().__init__(f"Property not found: {name}")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class LinkNotFoundError(ResourceError, KeyError):
    """The resource has no link for the relation."""

    def __init__(self, rel: str):
        super().__init__(f"Link not found: {rel}")
        self.rel = rel

    def __str__(self) -> str:
        return self.args[0]


class OperationNotAvailableError(ResourceError, ValueError):
    """The server did not advertise the operation on this resource."""

    def __init__(self, op: str):
        super().__init__(f"Operation not available: {op}")
        self.op = op


class ImmutableResourceError(ResourceError, TypeError):
    """Resource properties are read-only."""

    def __init__(self, message: str = "Properties are read-only"):
        super().__init__(message)


class ResourceValidationError(ResourceError, ValueError):
    """Data for a new resource failed local validation."""

    def __init__(self, message: str, errors: list[str] | None = None):
        super().__init__(message)
        self.errors = errors if errors is not None else []


class ActivityNotFoundError(ResourceError):
    """A long-running operation did not return the expected activity."""

    def __init__(self, message: str = "Expected activity not found"):
        super().__init__(message)


class ActivityTimeoutError(ResourceError):
    """An activity did not complete within the allowed time."""

    def __init__(self, message: str, activity_id: str | None = None):
        super().__init__(message)
        self.activity_id = activity_id
