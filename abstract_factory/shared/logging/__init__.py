"""
Structured logging for the Abstract Factory demo.

This module provides:
- structlog configuration routed through the standard library
- Service-bound loggers
- Run ID context binding
"""

from .factory import configure_logging, get_logger
from .context import with_run_context, get_run_id

__all__ = [
    "configure_logging",
    "get_logger",
    "with_run_context",
    "get_run_id",
]
