"""Graph explorer with a spring layout, animated traversals and an island-counting grid view."""

__version__ = "0.1.0"
__all__ = ["__version__"]