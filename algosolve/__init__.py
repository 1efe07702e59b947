"""Solvers for classic algorithmic problems, usable as functions or commands."""

__version__ = "0.1.0"