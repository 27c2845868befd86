"""
Context management for structured logging.
"""

import functools
import uuid
from contextvars import ContextVar
from typing import Any, Callable, Optional, TypeVar

import structlog

_run_id: ContextVar[Optional[str]] = ContextVar("run_id", default=None)

T = TypeVar("T")


def with_run_context(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator binding a fresh run ID to all logs emitted within a function.

    Args:
        func: Function to wrap

    Returns:
        Decorated function with logging context
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        run_id = generate_run_id()
        token = _run_id.set(run_id)
        structlog.contextvars.bind_contextvars(run_id=run_id)

        try:
            return func(*args, **kwargs)
        finally:
            structlog.contextvars.unbind_contextvars("run_id")
            _run_id.reset(token)

    return wrapper


def generate_run_id() -> str:
    """Generate a unique run ID."""
    return f"run_{uuid.uuid4().hex[:12]}"


def get_run_id() -> Optional[str]:
    """Get the current run ID from context."""
    return _run_id.get()
