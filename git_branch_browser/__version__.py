"""Version information for git-branch-browser."""

__version__ = "0.1.0"
