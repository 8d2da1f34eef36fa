"""Constants for memu-client.

This module defines the API endpoints, defaults and enums that are used
throughout the client library.
"""

from enum import Enum
from typing import Final

from ..__version__ import __version__


DEFAULT_BASE_URL: Final[str] = "https://api.memu.so"
USER_AGENT: Final[str] = f"memu-python-sdk/{__version__}"


class Defaults:
    """Default client values (seconds where applicable)."""

    TIMEOUT: Final[float] = 60.0
    MAX_RETRIES: Final[int] = 3
    RETRY_BASE_DELAY: Final[float] = 1.0
    RETRY_MAX_DELAY: Final[float] = 32.0
    POLL_INTERVAL: Final[float] = 2.0
    WAIT_TIMEOUT: Final[float] = 300.0
    MAX_CONNECTIONS: Final[int] = 100


class APIPaths:
    """Memory API endpoint paths."""

    MEMORIZE: Final[str] = "/api/v3/memory/memorize"
    MEMORIZE_STATUS: Final[str] = "/api/v3/memory/memorize/status/{task_id}"
    RETRIEVE: Final[str] = "/api/v3/memory/retrieve"
    CATEGORIES: Final[str] = "/api/v3/memory/categories"


# Too Many Requests plus the transient gateway/server failures
RETRYABLE_STATUS_CODES: Final[frozenset] = frozenset({429, 500, 502, 503, 504})


class HTTPMethod(str, Enum):
    """HTTP methods used by the client."""

    GET = "GET"
    POST = "POST"
