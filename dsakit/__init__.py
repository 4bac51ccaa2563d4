"""Sorting, combinatorics, sequence helpers, a min-heap, compact and sparse matrices, and Taylor series for e**x."""

__version__ = "0.1.0"