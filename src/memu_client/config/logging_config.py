"""Centralized logging configuration for memu-client.

Provides consistent, configurable logging for the client library with
environment-based control over verbosity and format. Only the library's own
logger tree is configured; the application's root logger is left alone.
"""

import logging
import logging.config
import os
from enum import Enum


LIBRARY_LOGGER = "memu_client"


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Warnings and above
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging, including every retry


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Transport libraries that should only log errors
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
    ]

    @classmethod
    def build_config(cls, quiet_transport: bool = True) -> dict:
        """Build a ``dictConfig`` mapping from environment variables.

        Args:
            quiet_transport: Also route httpx/httpcore through the library
                handler at ERROR level
        """
        log_level = os.getenv("MEMU_LOG_LEVEL")
        log_verbosity = os.getenv("MEMU_LOG_VERBOSITY", "NORMAL")
        log_format = os.getenv("MEMU_LOG_FORMAT", LogFormat.SIMPLE.value).lower()

        # An explicit level beats the verbosity mode
        if log_level and log_level.upper() in LogLevel.__members__:
            effective_log_level = log_level.upper()
        else:
            effective_log_level = get_log_level_from_verbosity(log_verbosity)

        try:
            format_string = FORMAT_STRINGS[LogFormat(log_format)]
        except ValueError:
            format_string = FORMAT_STRINGS[LogFormat.SIMPLE]

        logging_config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "memu_default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "memu_console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "memu_default",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": {
                LIBRARY_LOGGER: {
                    "level": effective_log_level,
                    "handlers": ["memu_console"],
                    "propagate": False,
                },
            },
        }

        for module in (cls.ERROR_ONLY_MODULES if quiet_transport else []):
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["memu_console"],
                "propagate": False,
            }

        return logging_config

    @classmethod
    def configure(cls, quiet_transport: bool = True) -> None:
        """Configure logging based on environment variables."""
        config = cls.build_config(quiet_transport)
        logging.config.dictConfig(config)

        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured: level={config['loggers'][LIBRARY_LOGGER]['level']}"
        )

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get a configured logger for the given module name.

        Args:
            name: Module name (usually __name__)

        Returns:
            Configured logger instance
        """
        return logging.getLogger(name)

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module."""
        logging.getLogger(module_name).setLevel(getattr(logging, level.upper()))

    @classmethod
    def silence_module(cls, module_name: str) -> None:
        """Silence all logging from a module."""
        cls.set_module_level(module_name, "CRITICAL")


def setup_logging(quiet_transport: bool = True) -> None:
    """Setup logging configuration from environment variables.

    Importing ``memu_client`` configures only the library logger. Call this
    again after changing the ``MEMU_LOG_*`` variables to apply them; an
    explicit call also quiets the httpx/httpcore loggers unless
    ``quiet_transport`` is False.
    """
    LoggingConfig.configure(quiet_transport)


def get_logger(name: str) -> logging.Logger:
    """Get a configured logger."""
    return LoggingConfig.get_logger(name)
