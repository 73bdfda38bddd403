"""Unit tests for logging configuration."""

import logging

import pytest
import structlog

from web3_error_helper.logging_config import (
    configure_logging,
    get_logger,
    get_structured_logger,
)


@pytest.fixture(autouse=True)
def restore_logging():
    package_logger = logging.getLogger("web3_error_helper")
    level = package_logger.level
    yield
    package_logger.setLevel(level)
    structlog.reset_defaults()


def test_configure_logging_sets_package_level():
    """Test configure_logging applies the level to the package logger."""
    configure_logging("DEBUG")

    assert logging.getLogger("web3_error_helper").level == logging.DEBUG


def test_unknown_level_defaults_to_info():
    configure_logging("chatty")

    assert logging.getLogger("web3_error_helper").level == logging.INFO


def test_level_read_from_settings(monkeypatch):
    """Test configure_logging falls back to the configured log level."""
    from web3_error_helper.utils.config import TranslatorSettings

    monkeypatch.setattr(
        "web3_error_helper.logging_config.get_settings",
        lambda: TranslatorSettings(log_level="ERROR"),
    )

    configure_logging()

    assert logging.getLogger("web3_error_helper").level == logging.ERROR


def test_json_logs_configure_structlog():
    configure_logging("INFO", json_logs=True)

    assert structlog.is_configured()


def test_loggers():
    assert get_logger("web3_error_helper.tests").name == "web3_error_helper.tests"
    assert hasattr(get_structured_logger("web3_error_helper.tests"), "info")
