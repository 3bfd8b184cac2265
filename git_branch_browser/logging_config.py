"""Logging configuration for git-branch-browser

Until the TUI starts, records go to stderr. Once the TUI owns the terminal
they go to a per-user log file instead.
"""
import logging
import sys
from pathlib import Path

LOG_DIR_NAME = '.git-branch-browser'
LOG_FILE_NAME = 'git-branch-browser.log'

DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
SHORT_FORMAT = '[%(name)s] %(levelname)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in an ANSI color."""

    LEVEL_COLORS = {
        logging.DEBUG: '\033[36m',     # Cyan
        logging.INFO: '\033[32m',      # Green
        logging.WARNING: '\033[33m',   # Yellow
        logging.ERROR: '\033[31m',     # Red
        logging.CRITICAL: '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, fmt=None, datefmt=None, use_color: bool = True):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if not self.use_color or color is None:
            return super().format(record)
        # Other handlers see the same record
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def get_log_file() -> Path:
    return Path.home() / LOG_DIR_NAME / LOG_FILE_NAME


def _level_for(verbose: bool, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def _console_handler(level: int, debug: bool) -> logging.Handler:
    stream = sys.stderr
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(ColoredFormatter(
        fmt=DETAILED_FORMAT if debug else SHORT_FORMAT,
        datefmt=DATE_FORMAT,
        use_color=stream.isatty(),
    ))
    return handler


def _file_handler() -> logging.Handler:
    log_file = get_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')  # Overwrite each run
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(verbose: bool = False, debug: bool = False, tui_mode: bool = False) -> None:
    """
    Configure the root logger, replacing whatever handlers it had.

    Args:
        verbose: If True, show INFO level messages on the console
        debug: If True, show DEBUG level messages with timestamps
        tui_mode: If True, log everything to ``get_log_file()`` and nothing
            to the terminal
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()

    if tui_mode:
        root_logger.setLevel(logging.DEBUG)
        root_logger.addHandler(_file_handler())
    else:
        level = _level_for(verbose, debug)
        root_logger.setLevel(level)
        root_logger.addHandler(_console_handler(level, debug))


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance
    """
    # Strip the package prefix for cleaner log names
    if name.startswith('git_branch_browser.'):
        name = name.replace('git_branch_browser.', '', 1)
    if name.startswith('services.'):
        name = name.replace('services.', '', 1)

    return logging.getLogger(name)
