"""Exceptions module for memu-client.

This module provides the complete exception hierarchy for the client and the
mapping between HTTP status codes and exception classes.
"""

from .base import MemUError

from .api import (
    # Client Errors
    ClientError,
    AuthenticationError,
    NotFoundError,
    ValidationError,
    RateLimitError,

    # Server Errors
    ServerError,

    # Request Lifecycle Errors
    TransportError,
    SerializationError,
    TaskTimeoutError,
)

from .http_mapping import (
    HTTP_STATUS_MAP,
    classify_http_error,
    get_http_status_code,
)

__all__ = [
    "MemUError",
    "ClientError",
    "AuthenticationError",
    "NotFoundError",
    "ValidationError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "SerializationError",
    "TaskTimeoutError",
    "HTTP_STATUS_MAP",
    "classify_http_error",
    "get_http_status_code",
]
