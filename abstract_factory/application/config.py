"""Application configuration loaded from environment variables."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from abstract_factory.domain.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no")


class Environment(Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


@dataclass(frozen=True)
class Config:
    """Diagnostics configuration. Never affects what the demo prints."""

    environment: Environment = Environment.DEVELOPMENT
    log_level: str = "WARNING"
    json_logs: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read from, defaults to os.environ

        Returns:
            Parsed Config instance

        Raises:
            ConfigurationError: If any variable holds an unsupported value
        """
        if environ is None:
            environ = os.environ

        raw_environment = environ.get("ENVIRONMENT", "development")
        try:
            environment = Environment(raw_environment.strip().lower())
        except ValueError:
            allowed = ", ".join(e.value for e in Environment)
            raise ConfigurationError(
                "ENVIRONMENT", raw_environment, f"expected one of {allowed}"
            ) from None

        raw_level = environ.get("LOG_LEVEL", "WARNING")
        log_level = raw_level.strip().upper()
        if log_level not in LOG_LEVELS:
            raise ConfigurationError(
                "LOG_LEVEL", raw_level, f"expected one of {', '.join(LOG_LEVELS)}"
            )

        # JSON in deployed environments, key-value while developing
        default_json = environment in (Environment.STAGING, Environment.PRODUCTION)
        raw_json = environ.get("JSON_LOGS")
        json_logs = default_json if raw_json is None else _parse_bool("JSON_LOGS", raw_json)

        return cls(environment=environment, log_level=log_level, json_logs=json_logs)


def _parse_bool(key: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(key, value, "expected a boolean (true/false, 1/0, yes/no)")
