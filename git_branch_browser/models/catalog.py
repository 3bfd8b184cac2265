"""Sortable, filterable branch list with a cursor"""
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from git_branch_browser.models.branch import Branch, BranchKind


class _Cycle(Enum):
    """Enum whose members form a fixed cycle in declaration order."""

    def next(self):
        members = list(type(self))
        return members[(members.index(self) + 1) % len(members)]


class SortMode(_Cycle):
    """Ordering of the branch list."""
    NAME_ASCENDING = "name-asc"
    NAME_DESCENDING = "name-desc"
    DATE_ASCENDING = "date-asc"
    DATE_DESCENDING = "date-desc"

    @property
    def label(self) -> str:
        return {
            SortMode.NAME_ASCENDING: "name asc",
            SortMode.NAME_DESCENDING: "name desc",
            SortMode.DATE_ASCENDING: "date asc",
            SortMode.DATE_DESCENDING: "date desc",
        }[self]


class TypeFilter(_Cycle):
    """Which reference namespaces are enumerated."""
    LOCAL = "local"
    REMOTE = "remote"
    ALL = "all"

    @property
    def kinds(self) -> Tuple[BranchKind, ...]:
        if self is TypeFilter.LOCAL:
            return (BranchKind.LOCAL,)
        if self is TypeFilter.REMOTE:
            return (BranchKind.REMOTE,)
        return (BranchKind.LOCAL, BranchKind.REMOTE)

    @property
    def label(self) -> str:
        return self.value


DEFAULT_SORT = SortMode.DATE_DESCENDING
DEFAULT_FILTER = TypeFilter.LOCAL


def _date_key(branch: Branch) -> Tuple[int, int]:
    # Branches without commits compare below every dated branch
    epoch = branch.latest_epoch
    return (0, 0) if epoch is None else (1, epoch)


class BranchCatalog:
    """In-memory branch list for one filter.

    ``cursor`` is either ``None`` or a valid index into ``items``. Sorting is
    stable, so branches with equal keys keep their enumeration order.
    """

    def __init__(
        self,
        items: Optional[Iterable[Branch]] = None,
        type_filter: TypeFilter = DEFAULT_FILTER,
        sort: SortMode = DEFAULT_SORT,
    ):
        self.items: List[Branch] = list(items or [])
        self.filter = type_filter
        self.sort = sort
        self.cursor: Optional[int] = None

    @classmethod
    def build(
        cls,
        branches: Iterable[Branch],
        type_filter: TypeFilter = DEFAULT_FILTER,
        sort: SortMode = DEFAULT_SORT,
    ) -> "BranchCatalog":
        """Create a sorted catalog with the cursor on the first branch."""
        catalog = cls(branches, type_filter, sort)
        catalog._apply_sort()
        catalog.select_first()
        return catalog

    def __len__(self) -> int:
        return len(self.items)

    def _apply_sort(self) -> None:
        if self.sort is SortMode.NAME_ASCENDING:
            self.items.sort(key=lambda b: b.name)
        elif self.sort is SortMode.NAME_DESCENDING:
            self.items.sort(key=lambda b: b.name, reverse=True)
        elif self.sort is SortMode.DATE_ASCENDING:
            self.items.sort(key=_date_key)
        else:
            self.items.sort(key=_date_key, reverse=True)

    def set_sort(self, mode: SortMode) -> None:
        """Re-sort in place and move the cursor to the first branch."""
        self.sort = mode
        self._apply_sort()
        self.select_first()

    def cycle_sort(self) -> SortMode:
        self.set_sort(self.sort.next())
        return self.sort

    def current(self) -> Optional[Branch]:
        if self.cursor is None:
            return None
        return self.items[self.cursor]

    def find(self, name: str, kind: BranchKind) -> Optional[int]:
        """Index of the branch identified by ``(name, kind)``, if present."""
        for index, branch in enumerate(self.items):
            if branch.key == (name, kind):
                return index
        return None

    def select(self, index: Optional[int]) -> None:
        if index is not None and not 0 <= index < len(self.items):
            raise IndexError(f"cursor {index} out of range for {len(self.items)} branches")
        self.cursor = index

    def select_next(self) -> None:
        if not self.items:
            self.cursor = None
        elif self.cursor is None:
            self.cursor = 0
        else:
            self.cursor = min(self.cursor + 1, len(self.items) - 1)

    def select_previous(self) -> None:
        if not self.items:
            self.cursor = None
        elif self.cursor is None:
            self.cursor = len(self.items) - 1
        else:
            self.cursor = max(self.cursor - 1, 0)

    def select_first(self) -> None:
        self.cursor = 0 if self.items else None

    def select_last(self) -> None:
        self.cursor = len(self.items) - 1 if self.items else None

    def select_none(self) -> None:
        self.cursor = None
