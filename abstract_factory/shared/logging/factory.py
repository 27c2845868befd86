"""
Logging factory with structured logging.
"""

import logging
import os
import sys

import structlog
from structlog.contextvars import merge_contextvars
from structlog.processors import (
    TimeStamper,
    add_log_level,
    CallsiteParameter,
    CallsiteParameterAdder,
    JSONRenderer,
    KeyValueRenderer,
    UnicodeDecoder,
)
from structlog.stdlib import (
    ProcessorFormatter,
    add_logger_name,
    BoundLogger,
)

from abstract_factory import __version__


def get_logger(name: str) -> BoundLogger:
    """
    Get a structured logger with service context.

    The logger always wraps a standard library logger, so events emitted
    before configure_logging() follow stdlib defaults and never reach stdout.

    Args:
        name: Logger name (e.g., "application.client")

    Returns:
        Logger bound to the service name, version and environment
    """
    return structlog.wrap_logger(logging.getLogger(name)).bind(
        service="abstract-factory",
        version=__version__,
        environment=os.getenv("ENVIRONMENT", "development"),
    )


def configure_logging(
    environment: str = "development",
    log_level: str = "WARNING",
    json_logs: bool = False,
    include_caller_info: bool = True,
) -> None:
    """
    Configure structured logging.

    Log records are written to stderr; stdout is reserved for the demo output.

    Args:
        environment: Environment name (development, staging, production, test)
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Whether to output JSON formatted logs
        include_caller_info: Include file, function, and line number
    """

    # Processors shared by structlog and foreign (stdlib) records
    shared_processors = [
        merge_contextvars,
        TimeStamper(fmt="ISO", utc=True),
        add_log_level,
        add_logger_name,
        UnicodeDecoder(),
    ]

    # Caller information only helps while developing
    if include_caller_info and environment == "development":
        shared_processors.append(
            CallsiteParameterAdder(
                parameters=[
                    CallsiteParameter.FILENAME,
                    CallsiteParameter.FUNC_NAME,
                    CallsiteParameter.LINENO,
                ],
                additional_ignores=["structlog", "logging"],
            )
        )

    if json_logs:
        renderer = JSONRenderer(sort_keys=True)
    else:
        renderer = KeyValueRenderer(key_order=["timestamp", "level", "event", "logger"])

    level = _get_log_level_int(log_level)

    structlog.configure(
        processors=shared_processors + [ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # Route the standard library logging through the same renderer
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)


def _get_log_level_int(level: str) -> int:
    """Convert string log level to integer."""
    levels = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return levels.get(level.upper(), logging.WARNING)
