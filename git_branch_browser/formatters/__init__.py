"""Formatting utilities for git-branch-browser.

- branch: Branch name and list-row formatting
- commit: Commit line and author formatting
"""

from .branch import format_branch_name, format_branch_kind, format_last_commit
from .commit import format_author, format_commit_line, format_commit_lines

__all__ = [
    # Branch
    "format_branch_name",
    "format_branch_kind",
    "format_last_commit",
    # Commit
    "format_author",
    "format_commit_line",
    "format_commit_lines",
]
