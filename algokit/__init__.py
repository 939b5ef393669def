"""Algorithms and data structures for contest-style programming: arithmetic, combinatorics, geometry, trees, disjoint sets and string hashing."""

__version__ = "0.1.0"