"""Command-line interface for git-tidy"""

import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from git_tidy.cli.args import parse_args
from git_tidy.config import Config
from git_tidy.core import BranchTidier
from git_tidy.logging_config import get_logger, setup_logging

console = Console()
error_console = Console(stderr=True)
logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    config = None
    try:
        parsed_args = parse_args(argv)

        config = Config.from_env()
        setup_logging(verbose=config.verbose, debug=config.debug)

        if config.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            console.print("[yellow]Configuration:[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {escape(str(value))}")

        BranchTidier(config).run(parsed_args.command)
        return 0
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        error_console.print(f"[red]{escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        if config is not None and config.debug:
            error_console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
