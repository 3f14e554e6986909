"""Error handling for the Platform.sh API client."""

from platformsh_client.errors.exceptions import (
    ActivityNotFoundError,
    ActivityTimeoutError,
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    ImmutableResourceError,
    LinkNotFoundError,
    NotFoundError,
    OperationNotAvailableError,
    PropertyNotFoundError,
    RateLimitError,
    ResourceError,
    ResourceValidationError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from platformsh_client.errors.handler import raise_for_status
from platformsh_client.errors.models import ErrorDetail

__all__ = [
    "APIError",
    "ActivityNotFoundError",
    "ActivityTimeoutError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ErrorDetail",
    "ForbiddenError",
    "ImmutableResourceError",
    "LinkNotFoundError",
    "NotFoundError",
    "OperationNotAvailableError",
    "PropertyNotFoundError",
    "RateLimitError",
    "ResourceError",
    "ResourceValidationError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "raise_for_status",
]
