"""Optimal one-dimensional k-means clustering (Ckmeans) and its error classes."""

__version__ = "1.1.0"
__all__ = ["clustering", "errors"]