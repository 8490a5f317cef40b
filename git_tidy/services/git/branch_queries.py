"""Branch listing queries for git-tidy."""

import re
from typing import List, Optional, Union

from git_tidy.config import Config
from git_tidy.constants import CURRENT_BRANCH_MARKER, WORKTREE_BRANCH_MARKER
from git_tidy.exceptions import NoMergedBranchesError, NotAGitRepositoryError
from git_tidy.logging_config import get_logger
from git_tidy.services.git.runner import GitRunner

logger = get_logger(__name__)

# Leading indentation and the worktree marker of `git branch` lines
LEADING_MARKERS_RE = re.compile(rf"^[\s{re.escape(WORKTREE_BRANCH_MARKER)}]*")
CURRENT_MARKER_RE = re.compile(r"^\*\s+")
# `git branch` shows "(HEAD detached at ...)" or "(no branch, ...)" when not on a branch
UNNAMED_BRANCH_RE = re.compile(r"^\(.*\)$")


def parse_merged_branches(output: str) -> List[str]:
    """Extract branch names from `git branch --merged` output.

    Blank lines and the line carrying the current-branch marker are dropped;
    leading whitespace and "+" markers are stripped from the rest.

    Raises:
        NoMergedBranchesError: If no branch is left
    """
    lines = [
        line for line in output.split("\n")
        if line.strip() and CURRENT_BRANCH_MARKER not in line
    ]

    if not lines:
        raise NoMergedBranchesError()

    return [LEADING_MARKERS_RE.sub("", line).rstrip() for line in lines]


def parse_current_branch(output: str) -> str:
    """Extract the current branch name from `git branch` output.

    Raises:
        NotAGitRepositoryError: If no line is marked current or HEAD is detached
    """
    current = next((line for line in output.split("\n") if CURRENT_BRANCH_MARKER in line), None)
    if current is None:
        raise NotAGitRepositoryError()

    name = CURRENT_MARKER_RE.sub("", current).strip()
    if not name or UNNAMED_BRANCH_RE.match(name):
        raise NotAGitRepositoryError()
    return name


class BranchQueries:
    """Queries over the repository's local branches."""

    def __init__(self, config: Union[Config, dict], runner: Optional[GitRunner] = None):
        """Initialize the service.

        Args:
            config: Configuration dictionary or Config object
            runner: Git runner to use (defaults to one built from config)
        """
        self.config = config
        self.runner = runner or GitRunner(config)

    def get_merged_branches(self) -> List[str]:
        """Get local branches merged into the current branch, in git's order."""
        output = self.runner.run("branch", "--merged")
        branches = parse_merged_branches(output)
        logger.debug(f"Found {len(branches)} merged branches: {', '.join(branches)}")
        return branches

    def get_current_branch(self) -> str:
        """Get the name of the checked out branch."""
        branch = parse_current_branch(self.runner.run("branch"))
        logger.debug(f"Current branch is {branch}")
        return branch
