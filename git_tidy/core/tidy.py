"""Core functionality for git-tidy"""

from typing import List, Optional, Union

from rich.console import Console
from rich.markup import escape

from git_tidy.config import Config
from git_tidy.constants import (
    BRANCH_UPDATED_MESSAGE,
    FETCH_COMMAND,
    LABEL_STYLE,
    REMOVE_BRANCH_LABEL,
    REMOVE_WORKTREE_LABEL,
    SUCCESS_STYLE,
    VALUE_STYLE,
)
from git_tidy.logging_config import get_logger
from git_tidy.models.worktree import WorktreeRecord
from git_tidy.services.git import BranchQueries, GitOperations, GitRunner, WorktreeService
from git_tidy.utils.threading import run_all, run_concurrently

console = Console()
logger = get_logger(__name__)


class BranchTidier:
    """Removes merged branches and their worktrees, or refreshes the current branch."""

    def __init__(self, config: Union[Config, dict], runner: Optional[GitRunner] = None):
        """Initialize BranchTidier.

        Args:
            config: Configuration dict or Config object
            runner: Git runner shared by all services (defaults to one built from config)
        """
        if isinstance(config, dict):
            config = Config.from_dict(config)
        self.config = config
        self.runner = runner or GitRunner(config)

        self.branch_queries = BranchQueries(config, self.runner)
        self.worktree_service = WorktreeService(config, self.runner)
        self.git_operations = GitOperations(config, self.runner)

    def run(self, command: Optional[str] = None) -> None:
        """Dispatch on the positional command: `fetch` or anything else for cleanup."""
        if command == FETCH_COMMAND:
            self.fetch_current_branch()
        else:
            self.cleanup()

    def cleanup(self) -> None:
        """Remove worktrees of merged branches, then delete the branches.

        Raises:
            NoMergedBranchesError: Before anything is removed, if nothing is merged
            CommandExecutionError: If any git call fails; earlier removals are kept
        """
        merged_branches, worktrees = run_concurrently(
            self.branch_queries.get_merged_branches,
            self.worktree_service.get_worktrees,
        )
        logger.info(f"{len(merged_branches)} merged branch(es), {len(worktrees)} worktree(s)")

        run_all(lambda branch: self._remove_worktree(branch, worktrees), merged_branches, name="remove-worktree")
        run_all(self._delete_branch, merged_branches, name="delete-branch")

    def fetch_current_branch(self) -> str:
        """Fetch the checked out branch from the remote and return its name."""
        branch = self.branch_queries.get_current_branch()
        self.git_operations.fetch_branch(branch)
        console.print(
            f"[{SUCCESS_STYLE}]{BRANCH_UPDATED_MESSAGE}{escape(branch)}[/{SUCCESS_STYLE}]",
            highlight=False,
            soft_wrap=True,
        )
        return branch

    def _remove_worktree(self, branch: str, worktrees: List[WorktreeRecord]) -> None:
        worktree = self.worktree_service.find_for_branch(worktrees, branch)
        if worktree is None:
            return

        self.worktree_service.remove_worktree(worktree.worktree)
        self._announce(REMOVE_WORKTREE_LABEL, worktree.worktree)

    def _delete_branch(self, branch: str) -> None:
        self.git_operations.delete_branch(branch)
        self._announce(REMOVE_BRANCH_LABEL, branch)

    def _announce(self, label: str, value: str) -> None:
        console.print(
            f"[{LABEL_STYLE}]{label}[/{LABEL_STYLE}][{VALUE_STYLE}]{escape(value)}[/{VALUE_STYLE}]",
            highlight=False,
            soft_wrap=True,
        )
