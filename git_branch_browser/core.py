"""Core functionality for git-branch-browser"""

from typing import List, Optional, Union

from git_branch_browser.config import Config
from git_branch_browser.logging_config import get_logger
from git_branch_browser.models.branch import Branch
from git_branch_browser.models.catalog import BranchCatalog, SortMode, TypeFilter
from git_branch_browser.services.repository import RepositoryHandle

logger = get_logger(__name__)


class BranchBrowser:
    """Owns the repository handle and the catalog the presentation layer reads.

    All loads are synchronous. A failed load leaves the previous catalog in
    place and re-raises so the caller can display the error.
    """

    def __init__(self, repo: RepositoryHandle, config: Union[Config, dict, None] = None):
        """Initialize BranchBrowser.

        Args:
            repo: Opened repository handle
            config: Configuration dict or Config object
        """
        if config is None:
            config = Config()
        elif isinstance(config, dict):
            config = Config.from_dict(config)
        self.config = config
        self.repo = repo
        self.catalog = BranchCatalog(type_filter=config.type_filter, sort=config.sort_mode)
        # Branches the last successful load had to leave out
        self.load_errors: List[str] = []

    @classmethod
    def open(cls, path: Optional[str] = None, config: Union[Config, dict, None] = None) -> "BranchBrowser":
        """Open the repository at ``path`` (or the current directory) and load its branches.

        Raises:
            NotARepositoryError: If no repository is found
        """
        browser = cls(RepositoryHandle.open_current(path), config)
        browser.load_branches()
        return browser

    @property
    def filter(self) -> TypeFilter:
        return self.catalog.filter

    @property
    def sort(self) -> SortMode:
        return self.catalog.sort

    @property
    def sort_label(self) -> str:
        return self.catalog.sort.label

    @property
    def filter_label(self) -> str:
        return self.catalog.filter.label

    @property
    def items(self):
        return self.catalog.items

    def current(self) -> Optional[Branch]:
        return self.catalog.current()

    def load_branches(self, type_filter: Optional[TypeFilter] = None) -> BranchCatalog:
        """Enumerate and load branches for ``type_filter`` and replace the catalog.

        Branches whose history cannot be decoded are skipped and listed in
        ``load_errors``.
        """
        type_filter = type_filter or self.catalog.filter
        logger.debug(f"Loading {type_filter.label} branches (max depth {self.config.max_depth})")
        errors: List[str] = []
        branches = self.repo.load_branches(type_filter, self.config.max_depth, errors)
        self.catalog = BranchCatalog.build(branches, type_filter, self.catalog.sort)
        self.load_errors = errors
        logger.info(f"Loaded {len(self.catalog)} {type_filter.label} branches")
        return self.catalog

    def toggle_filter(self) -> TypeFilter:
        """Move to the next filter and re-enumerate. The cursor goes to the first branch."""
        self.load_branches(self.catalog.filter.next())
        return self.catalog.filter

    def reload(self) -> BranchCatalog:
        """Rebuild the catalog from the repository, keeping the selected branch if it still exists."""
        selected = self.catalog.current()
        no_selection = self.catalog.cursor is None
        self.load_branches()

        if no_selection:
            self.catalog.select_none()
        elif selected is not None:
            index = self.catalog.find(selected.name, selected.kind)
            if index is not None:
                self.catalog.select(index)
        return self.catalog

    def cycle_sort(self) -> SortMode:
        return self.catalog.cycle_sort()

    def set_sort(self, mode: SortMode) -> None:
        self.catalog.set_sort(mode)

    def select_next(self) -> None:
        self.catalog.select_next()

    def select_previous(self) -> None:
        self.catalog.select_previous()

    def select_first(self) -> None:
        self.catalog.select_first()

    def select_last(self) -> None:
        self.catalog.select_last()

    def select_none(self) -> None:
        self.catalog.select_none()

    def close(self) -> None:
        self.repo.close()
