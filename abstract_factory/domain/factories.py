"""Abstract factory and its concrete variants.

Each concrete factory produces one family of products belonging to a single
variant. Method signatures return the abstract product types while the body
instantiates the concrete ones.
"""

from abc import ABC, abstractmethod

from abstract_factory.domain.products import (
    AbstractProductA,
    AbstractProductB,
    ConcreteProductA1,
    ConcreteProductA2,
    ConcreteProductB1,
    ConcreteProductB2,
)


class AbstractFactory(ABC):
    """Port for creating a matching family of products."""

    @abstractmethod
    def create_product_a(self) -> AbstractProductA:
        """
        Create the A product of this factory's variant.

        Returns:
            New AbstractProductA instance
        """
        pass

    @abstractmethod
    def create_product_b(self) -> AbstractProductB:
        """
        Create the B product of this factory's variant.

        Returns:
            New AbstractProductB instance
        """
        pass


class ConcreteFactory1(AbstractFactory):
    """Factory for the first variant (A1 + B1)."""

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    """Factory for the second variant (A2 + B2)."""

    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB2()
