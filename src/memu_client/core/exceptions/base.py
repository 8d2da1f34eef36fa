"""Base exceptions for memu-client.

This module defines the root of the exception hierarchy. Every error the
client raises inherits from MemUError and carries the HTTP status code (when
one was received) and the decoded response body for diagnostics.
"""

from typing import Any, Dict, Optional


class MemUError(Exception):
    """Base exception for all memu-client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code, if a response was received
        response: Decoded response body, or None if there was none
        error_code: Stable error code (defaults to the class name)
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
        self.error_code = error_code or self.__class__.__name__

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"MemU API error (status {self.status_code}): {self.message}"
        return f"MemU API error: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Create a structured representation of the error.

        Returns:
            Error dictionary suitable for logging or API responses
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "status_code": self.status_code,
                "response": self.response,
                "type": self.__class__.__name__,
            }
        }
