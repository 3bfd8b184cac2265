"""Shared constants for git-branch-browser."""

from dataclasses import dataclass
from typing import List

from git_branch_browser.models.branch import BranchKind


@dataclass
class ColumnDefinition:
    """Definition of a table column."""

    key: str
    label: str
    width: int = 0  # 0 means auto-width


COLUMNS: List[ColumnDefinition] = [
    ColumnDefinition("branch", "Branch", 40),
    ColumnDefinition("kind", "Type", 8),
    ColumnDefinition("last_commit", "Last Commit", 19),
    ColumnDefinition("summary", "Summary"),
]


# Rich styles per branch namespace
BRANCH_STYLES = {
    BranchKind.LOCAL: "bold grey82",
    BranchKind.REMOTE: "dim light_pink1",
}


HELP_TEXT = """
Keys:
j / down   = Next branch       k / up    = Previous branch
g / home   = First branch      G / end   = Last branch
h / left   = Clear selection   s         = Change sort
f          = Change filter     r         = Reload
q          = Quit

Sort cycle:   name asc -> name desc -> date asc -> date desc
Filter cycle: local -> remote -> all
"""
