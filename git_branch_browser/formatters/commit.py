"""Commit formatting utilities."""

from typing import Iterable

from git_branch_browser.models.commit import Author, Commit


def format_author(author: Author, with_email: bool = False) -> str:
    """
    Format an author for display.

    Args:
        author: Commit author
        with_email: Append ``<email>`` when one is known

    Returns:
        Author name, or ``<none>`` when the name is missing
    """
    name = author.display_name
    if with_email and author.email:
        return f"{name} <{author.email}>"
    return name


def format_commit_line(commit: Commit, apply_offset: bool = False) -> str:
    """One-line ``timestamp: author: summary`` rendering."""
    timestamp = commit.timestamp.format(apply_offset=apply_offset)
    return f"{timestamp}: {format_author(commit.author)}: {commit.summary}"


def format_commit_lines(commits: Iterable[Commit], apply_offset: bool = False) -> str:
    return "\n".join(format_commit_line(c, apply_offset) for c in commits)
