"""Command-line argument parsing for git-branch-browser."""

import argparse
from git_branch_browser.__version__ import __version__


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="git-branch-browser",
        description="Browse the local and remote branches of a git repository",
    )
    parser.add_argument(
        "dir",
        nargs="?",
        default=None,
        help="Directory inside the repository to open (default: current directory)",
    )
    parser.add_argument("--version", action="version", version=f"git-branch-browser {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log informational messages")
    parser.add_argument(
        "--debug", action="store_true", help="Log debug information for troubleshooting"
    )

    return parser.parse_args(argv)
