"""Find arithmetic expressions in text, calculate them and replace them with their results."""

__version__ = "0.1.0"

__all__ = ["__version__"]