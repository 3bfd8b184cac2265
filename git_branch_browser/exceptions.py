"""Custom exceptions for git-branch-browser"""

from typing import Optional


class BranchBrowserError(Exception):
    """Base exception for all git-branch-browser errors."""
    pass


class NotARepositoryError(BranchBrowserError):
    """Exception raised when no git repository can be found for a path."""

    def __init__(self, path: Optional[str] = None, message: Optional[str] = None):
        self.path = path
        self.message = message

        error_msg = "Not a git repository"
        if path:
            error_msg += f" (or any parent directory): '{path}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class GitOperationError(BranchBrowserError):
    """Exception raised for errors in Git read operations."""

    def __init__(self, operation: str, branch: Optional[str] = None, message: Optional[str] = None):
        self.operation = operation
        self.branch = branch
        self.message = message

        error_msg = f"Git operation '{operation}' failed"
        if branch:
            error_msg += f" for branch '{branch}'"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)


class EnumerationFailedError(GitOperationError):
    """Exception raised when the branch references cannot be listed."""

    def __init__(self, message: Optional[str] = None):
        super().__init__("list_branches", message=message)


class BranchNotFoundError(GitOperationError):
    """Exception raised when a branch is not found."""

    def __init__(self, branch: str):
        super().__init__("find_branch", branch, "Branch not found")


class HistoryUnreadableError(GitOperationError):
    """Exception raised when a branch's commit ancestry cannot be walked."""

    def __init__(self, branch: str, message: Optional[str] = None):
        super().__init__("load_ancestry", branch, message)


class InvalidEpochError(BranchBrowserError):
    """Exception raised when a commit time cannot be mapped to a calendar instant."""

    def __init__(self, epoch: int, message: Optional[str] = None):
        self.epoch = epoch
        self.message = message

        error_msg = f"No timestamp available for epoch {epoch}"
        if message:
            error_msg += f": {message}"

        super().__init__(error_msg)
