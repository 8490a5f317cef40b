"""Configuration handling for git-tidy"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

TRUTHY_VALUES = ("1", "true", "yes", "on")


def _is_truthy(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in TRUTHY_VALUES


@dataclass
class Config:
    """Ambient context shared by every git invocation."""

    # Repository the git commands run in
    repo_path: str = field(default_factory=os.getcwd)
    remote_name: str = "origin"

    # Output modes
    verbose: bool = False
    debug: bool = False

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_repo_path()
        self._validate_remote_name()

    def _validate_repo_path(self):
        """Validate repo_path is not empty."""
        if not self.repo_path or not str(self.repo_path).strip():
            raise ValueError("repo_path cannot be empty")
        self.repo_path = str(self.repo_path)

    def _validate_remote_name(self):
        """Validate remote_name is not empty."""
        if not self.remote_name or not self.remote_name.strip():
            raise ValueError("remote_name cannot be empty")
        self.remote_name = self.remote_name.strip()

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "repo_path": self.repo_path,
            "remote_name": self.remote_name,
            "verbose": self.verbose,
            "debug": self.debug,
        }

    def get(self, key: str, default=None):
        """Get config value by key."""
        return getattr(self, key, default)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "Config":
        """Create Config from dictionary."""
        known_fields = {"repo_path", "remote_name", "verbose", "debug"}

        filtered = {k: v for k, v in config_dict.items() if k in known_fields}
        return cls(**filtered)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, repo_path: Optional[str] = None) -> "Config":
        """Create Config from GIT_TIDY_* environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            repo_path: Repository directory (defaults to the current directory)
        """
        if environ is None:
            environ = os.environ

        values = {
            "verbose": _is_truthy(environ.get("GIT_TIDY_VERBOSE")),
            "debug": _is_truthy(environ.get("GIT_TIDY_DEBUG")),
        }
        remote = environ.get("GIT_TIDY_REMOTE")
        if remote:
            values["remote_name"] = remote
        if repo_path is not None:
            values["repo_path"] = repo_path

        return cls(**values)
