"""Branch formatting utilities."""

from rich.text import Text

from git_branch_browser.constants import BRANCH_STYLES
from git_branch_browser.models.branch import Branch


def format_branch_name(branch: Branch) -> Text:
    """
    Format a branch name styled by its namespace.

    Args:
        branch: Branch to format

    Returns:
        Styled Rich text
    """
    return Text(branch.name, style=BRANCH_STYLES[branch.kind])


def format_branch_kind(branch: Branch) -> str:
    return branch.kind.value


def format_last_commit(branch: Branch, apply_offset: bool = False) -> str:
    """Timestamp of the newest loaded commit, or an empty string."""
    latest = branch.latest_commit
    if latest is None:
        return ""
    return latest.timestamp.format(apply_offset=apply_offset)
