"""Git-related services for git-tidy."""

from .runner import GitRunner
from .branch_queries import BranchQueries
from .worktrees import WorktreeService
from .operations import GitOperations

__all__ = [
    "GitRunner",
    "BranchQueries",
    "WorktreeService",
    "GitOperations",
]
