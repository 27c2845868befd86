"""
Client code for the abstract factories.

The client only works with factories and products through their abstract
types, so any factory or product subclass can be passed in without breaking it.
"""

from abstract_factory.domain.factories import AbstractFactory
from abstract_factory.shared.logging import get_logger


def client_code(factory: AbstractFactory) -> None:
    """
    Create a product pair from the factory and print what they produce.

    Args:
        factory: Any AbstractFactory implementation
    """
    logger = get_logger(__name__)

    product_a = factory.create_product_a()
    product_b = factory.create_product_b()

    logger.debug(
        "products_created",
        factory=type(factory).__name__,
        product_a=type(product_a).__name__,
        product_b=type(product_b).__name__,
    )

    print(product_b.label_b())
    print(product_b.collaborate(product_a))
