"""HTTP status code mapping for exceptions.

Maps terminal client-error responses to the typed exception hierarchy, and
exceptions back to the status code they represent.
"""

from typing import Any, Dict, Optional

from .base import MemUError
from .api import (
    ClientError,
    AuthenticationError,
    NotFoundError,
    ValidationError,
    RateLimitError,
    ServerError,
)


# Default status code per exception class, used when an instance carries none
HTTP_STATUS_MAP = {
    AuthenticationError: 401,
    NotFoundError: 404,
    ValidationError: 422,
    RateLimitError: 429,
    ClientError: 400,
    ServerError: 500,
    MemUError: 500,
}


def _body_message(response: Optional[Dict[str, Any]]) -> Optional[str]:
    """Return the body's ``message`` field when it is a non-empty string."""
    if not response:
        return None
    message = response.get("message")
    if isinstance(message, str) and message:
        return message
    return None


def classify_http_error(
    status_code: int,
    path: str,
    response: Optional[Dict[str, Any]] = None,
) -> ClientError:
    """Build the typed error for a terminal 4xx response.

    Args:
        status_code: HTTP status code of the response
        path: Request path, used in synthesized messages
        response: Decoded response body, or None

    Returns:
        The exception instance to raise
    """
    if status_code == 401:
        return AuthenticationError(_body_message(response), status_code, response)
    if status_code == 404:
        return NotFoundError(path, _body_message(response), status_code, response)
    if status_code == 422:
        return ValidationError(_body_message(response), status_code, response)
    # Generic client errors always use the synthesized message
    return ClientError(f"HTTP {status_code}: {path}", status_code, response)


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception.

    Args:
        exception: The exception instance

    Returns:
        The carried status code, or the class default
    """
    status_code = getattr(exception, "status_code", None)
    if status_code is not None:
        return status_code

    for exc_class in type(exception).__mro__:
        if exc_class in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exc_class]
    return 500
