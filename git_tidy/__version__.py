"""Version information for git-tidy."""

__version__ = "0.1.0"
