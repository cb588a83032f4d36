"""Command-line argument parsing for git-healthcheck."""

import argparse
from typing import List, Optional

from git_healthcheck.__version__ import __version__
from git_healthcheck.constants import DEFAULT_REMOTE, LARGE_DIFF_THRESHOLD


def parse_args(argv: Optional[List[str]] = None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-healthcheck",
        description="Check that a repository is safe to push: branch, remotes, "
        "credentials, Git LFS, commit signing and staged diff size",
        epilog="Use as a pre-push hook by calling git-healthcheck from .git/hooks/pre-push; "
        "a non-zero exit blocks the push.",
    )
    parser.add_argument(
        "default_remote",
        nargs="?",
        default=DEFAULT_REMOTE,
        help=f"Remote to fall back to when the branch config names none (default: {DEFAULT_REMOTE})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    parser.add_argument("--version", action="version", version=f"git-healthcheck {__version__}")
    parser.add_argument(
        "--debug", action="store_true", help="Show debug information for troubleshooting"
    )
    parser.add_argument(
        "--no-fetch",
        action="store_true",
        help="Compare against the last fetched upstream instead of fetching first",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit non-zero when any check fails (e.g. an unreachable remote), not only on aborts",
    )
    parser.add_argument(
        "--max-added-lines",
        type=int,
        default=LARGE_DIFF_THRESHOLD,
        metavar="N",
        help=f"Warn when staged changes add more than N lines (default: {LARGE_DIFF_THRESHOLD})",
    )
    parser.add_argument(
        "--evidence-lines",
        type=int,
        default=3,
        metavar="N",
        help="Lines of signature verification output to show (default: 3)",
    )

    return parser.parse_args(argv)
