"""API and transport exceptions for memu-client.

Terminal outcomes of a logical API call. Retryable conditions are absorbed by
the request executor; only these cross the client boundary.
"""

from typing import Any, Dict, Optional

from .base import MemUError


# Client (4xx) Errors
class ClientError(MemUError):
    """Raised for a 4xx response without a more specific error class."""
    pass


class AuthenticationError(ClientError):
    """Raised when API authentication fails (401)."""

    DEFAULT_MESSAGE = "Authentication failed. Please check your API key."

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = 401,
        response: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message or self.DEFAULT_MESSAGE, status_code, response)


class NotFoundError(ClientError):
    """Raised when a requested resource is not found (404)."""

    def __init__(
        self,
        path: str,
        message: Optional[str] = None,
        status_code: Optional[int] = 404,
        response: Optional[Dict[str, Any]] = None,
    ):
        self.path = path
        super().__init__(message or f"Resource not found: {path}", status_code, response)


class ValidationError(ClientError):
    """Raised when the API rejects request parameters (422)."""

    DEFAULT_MESSAGE = "Request validation failed. Please check your request parameters."

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = 422,
        response: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message or self.DEFAULT_MESSAGE, status_code, response)


class RateLimitError(ClientError):
    """Raised when the API rate limit is still exceeded after retries (429).

    Attributes:
        retry_after: Seconds the client computed it would have waited next
    """

    def __init__(
        self,
        message: str = "rate limit exceeded",
        retry_after: Optional[float] = None,
        status_code: Optional[int] = 429,
        response: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, status_code, response)
        self.retry_after = retry_after


# Server Errors
class ServerError(MemUError):
    """Raised for a 5xx response once retries are exhausted."""
    pass


# Request Lifecycle Errors
class TransportError(MemUError):
    """Raised when no response could be obtained (connection, DNS, timeout).

    The underlying httpx exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, attempts: int = 1):
        super().__init__(message)
        self.attempts = attempts


class SerializationError(MemUError):
    """Raised when a request body cannot be encoded as JSON. Never retried."""
    pass


class TaskTimeoutError(MemUError):
    """Raised when a memorization task does not finish within the wait timeout."""

    def __init__(self, task_id: str, timeout: float, last_status: Optional[str] = None):
        self.task_id = task_id
        self.timeout = timeout
        self.last_status = last_status
        super().__init__(
            f"Task {task_id} did not complete within {timeout:g}s (last status: {last_status})"
        )
