"""Worktree data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WorktreeRecord:
    """One entry of `git worktree list --porcelain`."""

    worktree: str = ""  # Filesystem path
    branch: str = ""  # Branch name without refs/heads/, empty when detached
    head: str = ""  # Commit hash

    def __str__(self) -> str:
        """String representation of worktree."""
        branch = self.branch or "(detached)"
        return f"{branch} @ {self.worktree} [{self.head[:7]}]"
