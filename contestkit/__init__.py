"""Data structures and algorithms for competitive programming: range queries, graphs, trees, strings, modular arithmetic and geometry."""

__version__ = "0.1.0"