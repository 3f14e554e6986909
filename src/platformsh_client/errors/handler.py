"""Translation of HTTP responses into API exceptions."""

import logging

import httpx

from platformsh_client.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    UnprocessableEntityError,
)
from platformsh_client.errors.models import ErrorDetail

logger = logging.getLogger(__name__)


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching APIError subclass for an unsuccessful response.

    Parses the API's JSON error body if present, otherwise falls back to
    the status code and the start of the response text.

    Args:
        response: HTTP response object

    Raises:
        APIError subclass based on status code
    """
    if response.is_success:
        return

    detail = ErrorDetail.from_response(response)
    status_code = response.status_code

    exception_map = {
        400: BadRequestError,
        401: UnauthorizedError,
        403: ForbiddenError,
        404: NotFoundError,
        409: ConflictError,
        422: UnprocessableEntityError,
        429: RateLimitError,
    }

    if status_code in exception_map:
        exc_class = exception_map[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    if detail:
        reason = detail.to_exception_message()
    else:
        response_text = response.text[:200]
        reason = response_text or response.reason_phrase

    request = _request_of(response)
    if request is not None:
        message = f"{request.method} {request.url} failed with HTTP {status_code}"
    else:
        message = f"HTTP {status_code}"
    if reason:
        message = f"{message}: {reason}"

    logger.debug(f"API error {status_code} translated to {exc_class.__name__}")

    kwargs = {
        "status_code": status_code,
        "request": request,
        "response": response,
        "detail": detail,
    }

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        raise RateLimitError(message, retry_after=retry_after, **kwargs)

    if exc_class is UnprocessableEntityError:
        validation_errors = None
        if detail and isinstance(detail.detail, (dict, list)):
            validation_errors = detail.detail
        raise UnprocessableEntityError(message, validation_errors=validation_errors, **kwargs)

    raise exc_class(message, **kwargs)


def _request_of(response: httpx.Response) -> httpx.Request | None:
    # Responses built by hand (e.g. in tests) have no request attached
    try:
        return response.request
    except RuntimeError:
        return None
