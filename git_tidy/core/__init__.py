"""Core functionality for git-tidy."""

from .tidy import BranchTidier

__all__ = ["BranchTidier"]
