"""Sorting, string search, hashing, trees, heaps, graphs and shortest paths in plain Python."""

__version__ = "0.1.0"