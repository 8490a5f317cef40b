"""Execution of git commands for git-tidy."""

from typing import Optional, Union

import git

from git_tidy.config import Config
from git_tidy.exceptions import CommandExecutionError
from git_tidy.logging_config import get_logger

logger = get_logger(__name__)


def _clean_stderr(stderr: Optional[str]) -> str:
    """Strip GitPython's "stderr: '...'" decoration from captured output."""
    text = (stderr or "").strip()
    if text.startswith("stderr:"):
        text = text[len("stderr:"):].strip()
        if len(text) >= 2 and text[0] == text[-1] == "'":
            text = text[1:-1]
    return text.strip()


class GitRunner:
    """Runs git in the configured repository and returns its text output."""

    def __init__(self, config: Union[Config, dict]):
        """Initialize the runner.

        Args:
            config: Configuration dictionary or Config object
        """
        self.config = config
        self.repo_path = config.get("repo_path")

    def _get_git(self):
        """Get a fresh git.Git command wrapper.

        A new wrapper per call keeps concurrent invocations independent.

        Returns:
            git.Git: Command wrapper bound to the repository directory
        """
        return git.Git(self.repo_path)

    def run(self, *args: str) -> str:
        """Run `git <args>` and return its standard output.

        Raises:
            CommandExecutionError: git exited non-zero or could not be started
        """
        command = ["git", *args]
        command_line = " ".join(command)
        logger.debug(f"Running: {command_line} (in {self.repo_path})")

        try:
            output = self._get_git().execute(command)
        except git.exc.GitCommandNotFound as e:
            raise CommandExecutionError(command_line, message=f"git executable not found: {e.status}") from e
        except git.exc.GitCommandError as e:
            status = e.status if isinstance(e.status, int) else None
            stderr = _clean_stderr(e.stderr)
            logger.debug(f"{command_line} failed with exit code {status}: {stderr}")
            raise CommandExecutionError(command_line, status, stderr or None) from e

        logger.debug(f"{command_line} returned {len(output.splitlines())} line(s)")
        return output
