"""Read-only access to the branches and commits of a git repository"""
import os
from typing import List, Optional, Tuple

import git

from git_branch_browser.exceptions import (
    BranchNotFoundError,
    EnumerationFailedError,
    HistoryUnreadableError,
    InvalidEpochError,
    NotARepositoryError,
)
from git_branch_browser.logging_config import get_logger
from git_branch_browser.models.branch import Branch, BranchKind, DEFAULT_MAX_DEPTH
from git_branch_browser.models.catalog import TypeFilter
from git_branch_browser.models.commit import Author, Commit, Timestamp

logger = get_logger(__name__)

REF_NAMESPACES = {
    BranchKind.LOCAL: "refs/heads",
    BranchKind.REMOTE: "refs/remotes",
}


def decode_branch_name(name) -> Optional[str]:
    """Return ``name`` as text, or None if it is not valid UTF-8.

    Names read from the filesystem carry undecodable bytes as lone
    surrogates, so a ``str`` is re-encoded to check it.
    """
    try:
        if isinstance(name, bytes):
            return name.decode("utf-8")
        name.encode("utf-8")
        return name
    except UnicodeError:
        return None


def _text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def commit_from_git(commit: git.Commit) -> Commit:
    """Decode a GitPython commit.

    Raises:
        InvalidEpochError: If the committer time is out of range
    """
    # committer_tz_offset is seconds west of UTC
    offset_minutes = -commit.committer_tz_offset // 60
    timestamp = Timestamp.from_native(commit.committed_date, offset_minutes)
    author = commit.author
    message = _text(commit.message)
    return Commit(
        summary=_text(commit.summary),
        message=message,
        author=Author(name=author.name or None, email=author.email or None),
        timestamp=timestamp,
        hexsha=commit.hexsha,
    )


class RepositoryHandle:
    """Shared, read-only handle on one repository.

    Every Branch built by ``load_branches`` keeps a reference to the handle
    it came from so it can reload its commits later.
    """

    def __init__(self, repo: git.Repo):
        self.repo = repo
        self.path = repo.working_tree_dir or repo.git_dir
        logger.info(f"Repository opened at {self.path}")

    @classmethod
    def open_current(cls, path: Optional[str] = None) -> "RepositoryHandle":
        """Open the repository containing ``path``.

        With no path, GitPython resolves ``GIT_DIR`` from the environment and
        falls back to the current working directory. Parent directories are
        searched in both cases.

        Raises:
            NotARepositoryError: If no repository is found
        """
        search_from = path or os.environ.get("GIT_DIR") or os.getcwd()
        try:
            repo = git.Repo(path, search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            logger.debug(f"No repository found from {search_from}: {e!r}")
            raise NotARepositoryError(str(search_from)) from e
        return cls(repo)

    def reopen(self) -> None:
        """Re-resolve the repository at the same location."""
        try:
            new_repo = git.Repo(self.path)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise NotARepositoryError(str(self.path)) from e
        self.close()
        self.repo = new_repo
        logger.info(f"Repository reopened at {self.path}")

    def close(self) -> None:
        self.repo.close()

    def _read_ref_names(self, kind: BranchKind) -> List[bytes]:
        """Raw short names under the namespace for ``kind``.

        Read through ``git for-each-ref`` as bytes: GitPython parses
        packed-refs as UTF-8 text and fails on the whole file for one bad name.
        """
        prefix = REF_NAMESPACES[kind].encode() + b"/"
        output = self.repo.git.for_each_ref(
            "--format=%(refname)", REF_NAMESPACES[kind], stdout_as_string=False
        )
        return [line[len(prefix):] for line in output.splitlines() if line.startswith(prefix)]

    def list_branches(self, type_filter: TypeFilter = TypeFilter.LOCAL) -> List[Tuple[str, BranchKind]]:
        """List ``(name, kind)`` pairs for the namespaces selected by ``type_filter``.

        Names that are not valid text are skipped.

        Raises:
            EnumerationFailedError: If the references cannot be read
        """
        branches: List[Tuple[str, BranchKind]] = []
        for kind in type_filter.kinds:
            try:
                raw_names = self._read_ref_names(kind)
            except (git.exc.GitError, OSError) as e:
                raise EnumerationFailedError(f"{REF_NAMESPACES[kind]}: {e}") from e

            for raw_name in raw_names:
                name = decode_branch_name(raw_name)
                if not name:
                    logger.debug(f"Skipping {kind.value} branch with undecodable name {raw_name!r}")
                    continue
                branches.append((name, kind))

        logger.debug(f"Found {len(branches)} branches for filter {type_filter.label}")
        return branches

    def _resolve(self, name: str, kind: BranchKind) -> str:
        path = f"{REF_NAMESPACES[kind]}/{name}"
        try:
            self.repo.git.show_ref("--verify", "--quiet", path)
        except git.exc.GitCommandError as e:
            raise BranchNotFoundError(name) from e
        return path

    def load_ancestry(
        self, name: str, kind: BranchKind, max_depth: int = DEFAULT_MAX_DEPTH
    ) -> List[Commit]:
        """Load at most ``max_depth`` commits reachable from the branch tip, newest first.

        Raises:
            BranchNotFoundError: If the branch reference does not exist
            HistoryUnreadableError: If the tip or its ancestry cannot be read
            InvalidEpochError: If any commit carries an out-of-range time
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {max_depth}")

        ref_path = self._resolve(name, kind)
        if max_depth == 0:
            return []

        try:
            raw_commits = self.repo.iter_commits(ref_path, max_count=max_depth)
            commits = [commit_from_git(c) for c in raw_commits]
        except (git.exc.GitError, ValueError) as e:
            logger.warning(f"Could not walk history of {name}: {e}")
            raise HistoryUnreadableError(name, str(e)) from e

        # rev-list can emit an older parent before a younger sibling under clock skew
        commits.sort(key=lambda c: c.timestamp.epoch, reverse=True)
        logger.debug(f"Loaded {len(commits)} commits for {kind.value} branch {name}")
        return commits

    def load_branches(
        self,
        type_filter: TypeFilter = TypeFilter.LOCAL,
        max_depth: int = DEFAULT_MAX_DEPTH,
        errors: Optional[List[str]] = None,
    ) -> List[Branch]:
        """Enumerate branches and eagerly load each one's commits.

        A branch whose history cannot be decoded is left out. A message naming
        it is appended to ``errors`` when a list is given.

        Raises:
            EnumerationFailedError: If the references cannot be read
        """
        branches = []
        for name, kind in self.list_branches(type_filter):
            try:
                commits = self.load_ancestry(name, kind, max_depth)
            except (BranchNotFoundError, HistoryUnreadableError, InvalidEpochError) as e:
                message = f"{kind.value} branch {name}: {e}"
                logger.warning(f"Skipping {message}")
                if errors is not None:
                    errors.append(message)
                continue
            branches.append(Branch(name=name, kind=kind, commits=commits, repo=self))
        return branches
