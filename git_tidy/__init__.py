"""
git-tidy - Clean up merged branches and their worktrees
"""

from .__version__ import __version__
from .core import BranchTidier
from .cli.main import main

__all__ = ["BranchTidier", "main", "__version__"]
