"""Fixed-size tuples, zip/unzip and cross-join helpers, and utilities for None, zero values and coalescing."""

__version__ = "0.1.0"