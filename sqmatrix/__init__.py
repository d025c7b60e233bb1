"""Square integer matrices, their arithmetic, and reading pairs of them from text."""

__version__ = "0.1.0"
__all__ = ["__version__"]