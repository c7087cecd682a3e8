"""Advent puzzle solvers built around a reusable grid state-space search engine."""

__version__ = "1.0.0"
