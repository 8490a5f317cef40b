"""Worktree operations service for git-tidy."""

from typing import Dict, List, Optional, Union

from git_tidy.config import Config
from git_tidy.constants import BRANCH_KEY, HEAD_KEY, HEADS_REF_PREFIX, WORKTREE_KEY
from git_tidy.logging_config import get_logger
from git_tidy.models.worktree import WorktreeRecord
from git_tidy.services.git.runner import GitRunner

logger = get_logger(__name__)


def _to_record(fields: Dict[str, str]) -> WorktreeRecord:
    return WorktreeRecord(
        worktree=fields.get(WORKTREE_KEY, ""),
        branch=fields.get(BRANCH_KEY, ""),
        head=fields.get(HEAD_KEY, ""),
    )


def parse_worktree_list(output: str) -> List[WorktreeRecord]:
    """Parse `git worktree list --porcelain` output into records.

    Format:
        worktree /path/to/worktree
        HEAD commit_sha
        branch refs/heads/branch-name
        (blank line between worktrees)

    Lines without a "key value" pair (blank lines, bare flags such as
    "detached") are skipped. A record ends when a key already present in it
    shows up again, so the blank separator lines are not relied on.
    """
    groups: List[Dict[str, str]] = []

    for line in output.split("\n"):
        key, _, value = line.partition(" ")
        if not key or not value:
            continue

        if key == BRANCH_KEY and value.startswith(HEADS_REF_PREFIX):
            value = value[len(HEADS_REF_PREFIX):]

        if not groups or key in groups[-1]:
            groups.append({})
        groups[-1][key] = value

    return [_to_record(fields) for fields in groups]


class WorktreeService:
    """Service for listing and removing git worktrees."""

    def __init__(self, config: Union[Config, dict], runner: Optional[GitRunner] = None):
        """Initialize the worktree service.

        Args:
            config: Configuration dictionary or Config object
            runner: Git runner to use (defaults to one built from config)
        """
        self.config = config
        self.runner = runner or GitRunner(config)

    def get_worktrees(self) -> List[WorktreeRecord]:
        """Get all registered worktrees in listing order."""
        worktrees = parse_worktree_list(self.runner.run("worktree", "list", "--porcelain"))

        logger.debug(f"Found {len(worktrees)} worktrees")
        for wt in worktrees:
            logger.debug(f"  {wt}")
        return worktrees

    @staticmethod
    def find_for_branch(worktrees: List[WorktreeRecord], branch_name: str) -> Optional[WorktreeRecord]:
        """Return the first worktree with branch_name checked out, if any."""
        return next((wt for wt in worktrees if wt.branch == branch_name), None)

    def remove_worktree(self, path: str) -> None:
        """Remove the worktree at path.

        Raises:
            CommandExecutionError: If git refuses the removal
        """
        self.runner.run("worktree", "remove", path)
        logger.info(f"Removed worktree at {path}")
