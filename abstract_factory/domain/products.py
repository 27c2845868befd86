"""Product families built by the abstract factories.

Every distinct product of a family has a base interface, and every variant
of that product implements it. Products of the same variant are designed to
work together; products of different variants can still be combined, the
result just describes a pairing nobody intended.
"""

from abc import ABC, abstractmethod


class AbstractProductA(ABC):
    """Base interface for the A product family."""

    variant: int

    @abstractmethod
    def label_a(self) -> str:
        """Return a label describing this product."""
        pass


class ConcreteProductA1(AbstractProductA):
    variant = 1

    def label_a(self) -> str:
        return "result of product A1."


class ConcreteProductA2(AbstractProductA):
    variant = 2

    def label_a(self) -> str:
        return "result of product A2."


class AbstractProductB(ABC):
    """
    Base interface for the B product family.

    B products can do their own thing, and they can also collaborate with any
    A product.
    """

    variant: int

    @abstractmethod
    def label_b(self) -> str:
        """Return a label describing this product."""
        pass

    @abstractmethod
    def collaborate(self, a: AbstractProductA) -> str:
        """
        Collaborate with an A product.

        The factories guarantee that the products they hand out share a variant,
        but any AbstractProductA is accepted here.

        Args:
            a: Product A instance whose label gets embedded

        Returns:
            Label combining this product with a's result
        """
        pass


class ConcreteProductB1(AbstractProductB):
    """B product of the first variant, meant to work with ConcreteProductA1."""

    variant = 1

    def label_b(self) -> str:
        return "result of product B1."

    def collaborate(self, a: AbstractProductA) -> str:
        result = a.label_a()
        return f"result of B1 collaborating with the ({result})"


class ConcreteProductB2(AbstractProductB):
    """B product of the second variant, meant to work with ConcreteProductA2."""

    variant = 2

    def label_b(self) -> str:
        return "result of product B2."

    def collaborate(self, a: AbstractProductA) -> str:
        result = a.label_a()
        return f"result of B2 collaborating with the ({result})"
