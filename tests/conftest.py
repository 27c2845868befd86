"""Test configuration and shared fixtures."""

import logging

import pytest
import structlog

from abstract_factory.domain.factories import ConcreteFactory1, ConcreteFactory2
from abstract_factory.domain.products import ConcreteProductA1, ConcreteProductA2


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging configuration a test applied."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    yield

    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def clean_env(monkeypatch):
    """Environment without any of the demo's configuration variables."""
    for key in ("ENVIRONMENT", "LOG_LEVEL", "JSON_LOGS"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def factory_1() -> ConcreteFactory1:
    return ConcreteFactory1()


@pytest.fixture
def factory_2() -> ConcreteFactory2:
    return ConcreteFactory2()


@pytest.fixture
def product_a1() -> ConcreteProductA1:
    return ConcreteProductA1()


@pytest.fixture
def product_a2() -> ConcreteProductA2:
    return ConcreteProductA2()
