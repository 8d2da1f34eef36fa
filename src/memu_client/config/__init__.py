"""Configuration for memu-client: settings, constants and logging."""

from .constants import (
    DEFAULT_BASE_URL,
    USER_AGENT,
    RETRYABLE_STATUS_CODES,
    Defaults,
    APIPaths,
    HTTPMethod,
)
from .settings import MemUSettings, get_settings
from .logging_config import (
    LoggingConfig,
    LogFormat,
    LogLevel,
    LogVerbosity,
    setup_logging,
    get_logger,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "USER_AGENT",
    "RETRYABLE_STATUS_CODES",
    "Defaults",
    "APIPaths",
    "HTTPMethod",
    "MemUSettings",
    "get_settings",
    "LoggingConfig",
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "setup_logging",
    "get_logger",
]
