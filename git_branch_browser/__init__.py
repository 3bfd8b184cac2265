"""
git-branch-browser - An interactive terminal browser for git branches
"""

from .__version__ import __version__
from .core import BranchBrowser
from .cli.main import main

__all__ = ["BranchBrowser", "main", "__version__"]
