"""Error body models for Platform.sh API responses."""

from dataclasses import dataclass
from typing import Any

import httpx


@dataclass
class ErrorDetail:
    """Structured error body returned by the API.

    The API answers failed requests with a JSON object such as::

        {"status": "error", "code": 404, "message": "Not Found", "detail": "..."}

    ``detail`` may be a string or a nested object (e.g. per-field messages).
    """

    code: int | None = None  # HTTP status echoed by the API
    message: str | None = None  # Short, human-readable summary
    title: str | None = None  # Alternative summary used by some endpoints
    detail: Any = None  # String or mapping with further information

    # Any other members of the error object
    extra: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorDetail | None":
        """Parse the error body of an HTTP response.

        Args:
            response: HTTP response object

        Returns:
            ErrorDetail object, or None if the body is not a JSON error object
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            # Empty or non-JSON body
            return None

        if not isinstance(data, dict):
            return None

        known_fields = {"code", "message", "title", "detail", "error"}
        if not any(key in data for key in known_fields):
            return None

        code = data.get("code")
        if not isinstance(code, int):
            code = None

        message = data.get("message")
        # Some endpoints use {"error": "..."} instead of {"message": "..."}
        if message is None and isinstance(data.get("error"), str):
            message = data["error"]

        extra = {k: v for k, v in data.items() if k not in known_fields | {"status"}}

        return cls(
            code=code,
            message=message,
            title=data.get("title"),
            detail=data.get("detail"),
            extra=extra if extra else None,
        )

    def to_exception_message(self) -> str:
        """Convert the error body to an exception message."""
        lines = []

        summary = self.message or self.title
        if summary:
            lines.append(summary)

        if isinstance(self.detail, dict):
            for key, value in self.detail.items():
                lines.append(f"  - {key}: {value}")
        elif self.detail and self.detail != summary:
            lines.append(str(self.detail))

        return "\n".join(lines) if lines else "Unknown API error"
