"""Quantum Link: quantum ID directory, connection requests and pairwise chat."""

__version__ = "1.0.0"
