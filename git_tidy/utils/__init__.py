"""Utility functions for git-tidy.

This package provides utility modules:
- threading: all-or-nothing joins over concurrently running git calls
"""

from .threading import run_all, run_concurrently

__all__ = [
    "run_all",
    "run_concurrently",
]
