"""Data models for git-tidy."""

from .worktree import WorktreeRecord

__all__ = ["WorktreeRecord"]
