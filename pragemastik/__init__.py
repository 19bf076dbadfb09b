"""Solvers, constraint checks, test-case generators and scorers for a contest problem set."""

__version__ = "0.1.0"