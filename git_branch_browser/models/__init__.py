"""Data models for git-branch-browser."""

from .commit import Author, Commit, Timestamp
from .branch import Branch, BranchKind
from .catalog import BranchCatalog, SortMode, TypeFilter

__all__ = [
    "Author",
    "Commit",
    "Timestamp",
    "Branch",
    "BranchKind",
    "BranchCatalog",
    "SortMode",
    "TypeFilter",
]
