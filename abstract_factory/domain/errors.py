"""Domain errors for the Abstract Factory demo."""


class DomainError(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str) -> None:
        """
        Initialize domain error.

        Args:
            message: Human readable error message
        """
        super().__init__(message)
        self.message = message


class ConfigurationError(DomainError):
    """Raised when a configuration value cannot be understood."""

    def __init__(self, key: str, value: str, reason: str) -> None:
        """
        Initialize configuration error.

        Args:
            key: Configuration key that was rejected
            value: Raw value that was read
            reason: Why the value was rejected
        """
        message = f"Invalid configuration for {key}: {reason}"
        super().__init__(message)
        self.key = key
        self.value = value
        self.reason = reason
