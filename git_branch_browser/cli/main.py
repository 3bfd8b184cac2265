"""Command-line entry point for git-branch-browser"""

import sys
from rich.console import Console
from rich.markup import escape

from git_branch_browser.cli.args import parse_args
from git_branch_browser.config import Config
from git_branch_browser.core import BranchBrowser
from git_branch_browser.exceptions import BranchBrowserError, NotARepositoryError
from git_branch_browser.logging_config import get_log_file, get_logger, setup_logging
from git_branch_browser.services.repository import RepositoryHandle

console = Console(stderr=True)
logger = get_logger(__name__)


def main(argv=None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    # stderr until the TUI takes over the terminal
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    config = Config(verbose=parsed_args.verbose, debug=parsed_args.debug)
    if parsed_args.debug:
        for key, value in config.to_dict().items():
            logger.debug(f"config {key}: {value}")

    try:
        handle = RepositoryHandle.open_current(parsed_args.dir)
    except NotARepositoryError as e:
        logger.debug(f"Startup aborted: {e}")
        console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
        return 1

    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug, tui_mode=True)
    logger.info(f"Logging to {get_log_file()}")

    browser = BranchBrowser(handle, config)
    startup_error = None
    try:
        browser.load_branches()
    except BranchBrowserError as e:
        logger.error(f"Error loading branches: {e}", exc_info=True)
        startup_error = str(e)

    # Imported late so --help and --version stay fast
    from git_branch_browser.tui import BranchBrowserApp

    try:
        BranchBrowserApp(browser, startup_error=startup_error).run()
    except KeyboardInterrupt:
        return 1
    finally:
        browser.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
