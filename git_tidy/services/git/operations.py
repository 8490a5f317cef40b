"""Branch-changing git operations"""

from typing import Optional, Union

from git_tidy.config import Config
from git_tidy.logging_config import get_logger
from git_tidy.services.git.runner import GitRunner

logger = get_logger(__name__)


class GitOperations:
    """Service for fetching and deleting local branches."""

    def __init__(self, config: Union[Config, dict], runner: Optional[GitRunner] = None):
        self.config = config
        self.runner = runner or GitRunner(config)
        self.remote_name = config.get("remote_name", "origin")

    def fetch_branch(self, branch_name: str) -> None:
        """Update the local branch from the same-named branch on the remote.

        Runs `git fetch <remote> <branch>:<branch>`, which creates or
        fast-forwards the local ref.
        """
        self.runner.run("fetch", self.remote_name, f"{branch_name}:{branch_name}")
        logger.info(f"Fetched {branch_name} from {self.remote_name}")

    def delete_branch(self, branch_name: str) -> None:
        """Delete a local branch with `git branch -d`.

        Git refuses to delete a branch that is not fully merged or that is
        checked out in a worktree; the failure is raised, not handled.
        """
        self.runner.run("branch", "-d", branch_name)
        logger.info(f"Deleted branch {branch_name}")
