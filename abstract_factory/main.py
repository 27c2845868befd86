"""Demo entry point.

Runs the same client code against both concrete factories.
"""

from abstract_factory.application.client import client_code
from abstract_factory.application.config import Config
from abstract_factory.domain.factories import ConcreteFactory1, ConcreteFactory2
from abstract_factory.shared.logging import configure_logging, get_logger, with_run_context


def setup_logging(config: Config) -> None:
    """Configure logging from the loaded configuration."""
    configure_logging(
        environment=config.environment.value,
        log_level=config.log_level,
        json_logs=config.json_logs,
        include_caller_info=config.environment.value == "development",
    )


@with_run_context
def main() -> int:
    """
    Run the client code with the first factory type, then the second.

    Returns:
        Process exit code

    Raises:
        ConfigurationError: If the environment holds invalid settings
    """
    config = Config.from_env()
    setup_logging(config)

    logger = get_logger(__name__)
    logger.info("client_run_started", environment=config.environment.value)

    print("Client: Testing client code with the first factory type...")
    client_code(ConcreteFactory1())

    print("")

    print("Client: Testing the same client code with the second factory type...")
    client_code(ConcreteFactory2())

    logger.info("demo_finished")
    return 0
