"""Solvers for days 13 to 25 of a daily puzzle series, an input fetcher, a runner and a stone counter."""

__version__ = "0.1.0"

__all__ = ["__version__"]