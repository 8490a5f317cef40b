"""Custom exceptions for git-tidy"""

from typing import Optional


class GitTidyError(Exception):
    """Base exception for all git-tidy errors."""
    pass


class CommandExecutionError(GitTidyError):
    """Exception raised when a git invocation fails or git cannot be run."""

    def __init__(self, command: str, status: Optional[int] = None, message: Optional[str] = None):
        self.command = command
        self.status = status
        self.message = message

        error_msg = f"Git command '{command}' failed"
        if status is not None:
            error_msg += f" (exit {status})"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class NoMergedBranchesError(GitTidyError):
    """Exception raised when no branch qualifies for deletion."""

    def __init__(self):
        super().__init__("There are no branches to delete")


class NotAGitRepositoryError(GitTidyError):
    """Exception raised when the current branch cannot be determined."""

    def __init__(self):
        super().__init__("This directory is not a valid GIT directory")
