"""Repository services for git-branch-browser."""

from .repository import RepositoryHandle

__all__ = ["RepositoryHandle"]
