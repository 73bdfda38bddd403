"""Logging configuration for the Web3 Error Helper.

The library itself only emits records through ``logging.getLogger(__name__)``;
applications call :func:`configure_logging` when they want output.
"""

import logging
import sys
from typing import Optional

import structlog

from web3_error_helper.utils.config import get_settings

# Default log format
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    json_logs: bool = False
) -> None:
    """Configure global logging settings.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL); defaults
            to the configured WEB3_ERROR_HELPER_LOG_LEVEL
        log_format: Log format string, ignored when ``json_logs`` is set
        json_logs: Render records as JSON through structlog
    """
    if log_level is None:
        log_level = get_settings().log_level

    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    if json_logs:
        processors = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ]
        structlog.configure(
            processors=processors,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        log_format = "%(message)s"
    elif log_format is None:
        log_format = DEFAULT_LOG_FORMAT

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        stream=sys.stdout
    )
    logging.getLogger("web3_error_helper").setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger
    """
    return logging.getLogger(name)


def get_structured_logger(name: str):
    """Get a structlog logger bound to ``name``."""
    return structlog.get_logger(name)
