"""Tests for logging configuration."""

import logging

import pytest

from memu_client.config.logging_config import (
    LIBRARY_LOGGER,
    FORMAT_STRINGS,
    LogFormat,
    LoggingConfig,
    get_log_level_from_verbosity,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_logging():
    """Re-apply import-time logging after each test."""
    yield
    for name in LoggingConfig.ERROR_ONLY_MODULES:
        reset_logger(name)
    setup_logging(quiet_transport=False)


def reset_logger(name):
    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


@pytest.mark.parametrize(
    "verbosity,level",
    [("QUIET", "ERROR"), ("normal", "WARNING"), ("VERBOSE", "INFO"), ("debug", "DEBUG"), ("loud", "WARNING")],
)
def test_verbosity_mapping(verbosity, level):
    assert get_log_level_from_verbosity(verbosity) == level


def test_default_config_leaves_root_logger_alone():
    config = LoggingConfig.build_config()
    assert "root" not in config
    assert config["loggers"][LIBRARY_LOGGER]["level"] == "WARNING"
    assert config["loggers"]["httpx"]["level"] == "ERROR"
    assert config["loggers"]["httpcore"]["level"] == "ERROR"


def test_import_time_config_leaves_transport_loggers_alone():
    config = LoggingConfig.build_config(quiet_transport=False)
    assert "httpx" not in config["loggers"]
    assert "httpcore" not in config["loggers"]

    httpx_logger = reset_logger("httpx")
    setup_logging(quiet_transport=False)

    assert httpx_logger.propagate is True
    assert httpx_logger.level == logging.NOTSET
    assert httpx_logger.handlers == []


def test_explicit_setup_quiets_transport_loggers():
    setup_logging()
    httpx_logger = logging.getLogger("httpx")
    assert httpx_logger.level == logging.ERROR
    assert httpx_logger.propagate is False


def test_explicit_level_beats_verbosity(monkeypatch):
    monkeypatch.setenv("MEMU_LOG_VERBOSITY", "QUIET")
    monkeypatch.setenv("MEMU_LOG_LEVEL", "debug")
    config = LoggingConfig.build_config()
    assert config["loggers"][LIBRARY_LOGGER]["level"] == "DEBUG"


@pytest.mark.parametrize("fmt", ["simple", "detailed", "json"])
def test_formats(monkeypatch, fmt):
    monkeypatch.setenv("MEMU_LOG_FORMAT", fmt)
    config = LoggingConfig.build_config()
    assert config["formatters"]["memu_default"]["format"] == FORMAT_STRINGS[LogFormat(fmt)]


def test_unknown_format_falls_back_to_simple(monkeypatch):
    monkeypatch.setenv("MEMU_LOG_FORMAT", "xml")
    config = LoggingConfig.build_config()
    assert config["formatters"]["memu_default"]["format"] == FORMAT_STRINGS[LogFormat.SIMPLE]


def test_configure_applies_level(monkeypatch):
    monkeypatch.setenv("MEMU_LOG_VERBOSITY", "VERBOSE")
    setup_logging()
    assert logging.getLogger(LIBRARY_LOGGER).level == logging.INFO
    assert get_logger("memu_client.http.executor").getEffectiveLevel() == logging.INFO


def test_silence_module():
    LoggingConfig.silence_module("memu_client.client")
    assert logging.getLogger("memu_client.client").level == logging.CRITICAL
    logging.getLogger("memu_client.client").setLevel(logging.NOTSET)
