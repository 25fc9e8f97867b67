"""Generic utilities and helpers.

This is a collection of helpers that are not specifically
bound to any component of the benchmark.
"""

from . import tabulate

__all__ = ("tabulate",)
