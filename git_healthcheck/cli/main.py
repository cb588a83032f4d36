"""Command-line interface for git-healthcheck"""

import os
import sys
from typing import List, Optional

from rich.console import Console

from git_healthcheck.cli.args import parse_args
from git_healthcheck.config import Config
from git_healthcheck.core import HealthChecker
from git_healthcheck.exceptions import FatalCheckError
from git_healthcheck.logging_config import setup_logging
from git_healthcheck.services.display_service import DisplayService

console = Console()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    try:
        config = Config(
            default_remote=parsed_args.default_remote,
            fetch=not parsed_args.no_fetch,
            strict=parsed_args.strict,
            large_diff_threshold=parsed_args.max_added_lines,
            evidence_lines=parsed_args.evidence_lines,
            verbose=parsed_args.verbose,
            debug=parsed_args.debug,
        )
    except ValueError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 2

    if parsed_args.debug:
        console.print("[yellow]Debug mode enabled[/yellow]")
        console.print("[yellow]Configuration:[/yellow]")
        for key, value in config.to_dict().items():
            console.print(f"  {key}: {value}")

    display_service = DisplayService()
    checker = HealthChecker(os.getcwd(), config, display_service=display_service)
    checker.install_signal_handler()

    try:
        report = checker.run()
    except FatalCheckError as e:
        display_service.display_fatal(e)
        return 1
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        if parsed_args.debug:
            console.print_exception()
        return 1

    return report.exit_code(strict=config.strict)


if __name__ == "__main__":
    sys.exit(main())
