"""Benchmark of static versus per-call database sessions."""

__version__ = "0.1.0"
