"""Abstract Factory pattern demonstration."""

__version__ = "1.0.0"
