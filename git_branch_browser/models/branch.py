"""Branch model and related enums"""
from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, Tuple, TYPE_CHECKING

from git_branch_browser.models.commit import Commit

if TYPE_CHECKING:
    from git_branch_browser.services.repository import RepositoryHandle

DEFAULT_MAX_DEPTH = 100


class BranchKind(Enum):
    """Namespace a branch lives in."""
    LOCAL = "local"
    REMOTE = "remote"


@dataclass
class Branch:
    """A local or remote branch with its most recent commits (newest first)."""
    name: str
    kind: BranchKind
    commits: Tuple[Commit, ...] = ()
    repo: Optional["RepositoryHandle"] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if not self.name:
            raise ValueError("branch name cannot be empty")
        self.commits = tuple(self.commits)

    def __str__(self) -> str:
        return self.name

    @property
    def key(self) -> Tuple[str, BranchKind]:
        """Identity of the branch across reloads."""
        return (self.name, self.kind)

    @property
    def latest_commit(self) -> Optional[Commit]:
        return self.commits[0] if self.commits else None

    @property
    def latest_epoch(self) -> Optional[int]:
        latest = self.latest_commit
        return latest.timestamp.epoch if latest else None

    def reload(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        """Re-read this branch's commits through the repository handle it came from."""
        if self.repo is None:
            raise ValueError(f"branch '{self.name}' is not bound to a repository")
        self.commits = tuple(self.repo.load_ancestry(self.name, self.kind, max_depth))
