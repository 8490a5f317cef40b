"""Shared constants for git-tidy."""

# Markers in `git branch` output
CURRENT_BRANCH_MARKER = "*"
WORKTREE_BRANCH_MARKER = "+"

# Prefix of the `branch` value in `git worktree list --porcelain`
HEADS_REF_PREFIX = "refs/heads/"

# Porcelain keys copied into a WorktreeRecord
WORKTREE_KEY = "worktree"
BRANCH_KEY = "branch"
HEAD_KEY = "HEAD"

# Positional argument selecting the fetch flow
FETCH_COMMAND = "fetch"

# Rich styles for console output
LABEL_STYLE = "yellow"
VALUE_STYLE = "blue"
SUCCESS_STYLE = "green"
ERROR_STYLE = "red"

REMOVE_WORKTREE_LABEL = "Remove worktree at: "
REMOVE_BRANCH_LABEL = "Remove branch: "
BRANCH_UPDATED_MESSAGE = "Your branch has been updated: "
