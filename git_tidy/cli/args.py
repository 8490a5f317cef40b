"""Command-line argument parsing for git-tidy."""

import argparse
import sys
from typing import List, Optional


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    The only argument is an optional positional command. `fetch` selects the
    fetch flow; any other value, or none, selects the cleanup flow. Only the
    first argument is read, so an option-like first token such as `-v` also
    selects cleanup.
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(prog="git-tidy", add_help=False)
    parser.add_argument("command", nargs="?", default=None)

    args, _ = parser.parse_known_args(argv[:1])
    return args
