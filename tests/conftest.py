"""Pytest fixtures for git-branch-browser tests"""
import os
import tempfile
from pathlib import Path
from unittest.mock import Mock

import git
import pytest

from git_branch_browser.models.branch import Branch, BranchKind
from git_branch_browser.models.commit import Author, Commit, Timestamp

MAIN_EPOCH = 1000
FEATURE_EPOCH = 2000


def make_commit(repo, message, epoch, offset="+0000", filename=None):
    """Commit the current index with fixed author and committer times."""
    if filename:
        path = Path(repo.working_dir) / filename
        path.write_text(f"{message}\n")
        repo.index.add([filename])
    date = f"{epoch} {offset}"
    return repo.index.commit(message, author_date=date, commit_date=date)


def write_raw_ref(repo, raw_name, hexsha):
    """Write a loose branch ref whose name is raw bytes, valid UTF-8 or not."""
    heads = os.path.join(os.fsencode(repo.git_dir), b"refs", b"heads")
    with open(os.path.join(heads, raw_name), "wb") as f:
        f.write(hexsha.encode() + b"\n")


def make_branch(name, kind=BranchKind.LOCAL, epochs=()):
    """Build an in-memory Branch whose commits have the given epochs (newest first)."""
    commits = [
        Commit(
            summary=f"{name} commit {epoch}",
            message=f"{name} commit {epoch}\n",
            author=Author(name="Test User", email="test@example.com"),
            timestamp=Timestamp.from_native(epoch, 0),
        )
        for epoch in epochs
    ]
    return Branch(name=name, kind=kind, commits=commits)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def mock_config():
    """Create a configuration dictionary."""
    return {
        'max_depth': 100,
        'default_filter': 'local',
        'default_sort': 'date-desc',
        'apply_utc_offset': False,
        'verbose': False,
        'debug': False,
    }


@pytest.fixture
def git_repo(temp_dir, monkeypatch):
    """Create a real Git repository with a single commit on main (epoch 1000)."""
    monkeypatch.delenv("GIT_DIR", raising=False)
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    repo = git.Repo.init(repo_path)

    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()

    make_commit(repo, "Initial commit", MAIN_EPOCH, filename="README.md")

    # Rename master to main if needed
    try:
        repo.git.branch('-M', 'main')
    except git.exc.GitCommandError:
        pass

    yield repo

    repo.close()


@pytest.fixture
def git_repo_with_branches(git_repo):
    """Repository with main (tip 1000), feature (tip 2000) and two remote branches."""
    repo = git_repo

    repo.git.checkout('-b', 'feature')
    make_commit(repo, "Add feature", FEATURE_EPOCH, filename="feature.txt")
    repo.git.checkout('main')

    # Remote-tracking refs without any network access
    repo.git.update_ref('refs/remotes/origin/main', repo.heads.main.commit.hexsha)
    repo.git.update_ref('refs/remotes/origin/feature', repo.heads.feature.commit.hexsha)

    yield repo


@pytest.fixture
def long_history_repo(git_repo):
    """Repository whose main branch has 105 commits, one second apart."""
    repo = git_repo
    for i in range(1, 105):
        make_commit(repo, f"Commit {i}", 1000 + i)
    yield repo


@pytest.fixture
def mock_handle():
    """Create a mock RepositoryHandle."""
    from git_branch_browser.services.repository import RepositoryHandle

    handle = Mock(spec=RepositoryHandle)
    handle.load_branches = Mock(return_value=[])
    return handle


@pytest.fixture
def sample_branches():
    """Branches in enumeration order: main (1000), feature (2000), empty (no commits)."""
    return [
        make_branch("main", epochs=[1000, 900]),
        make_branch("feature", epochs=[2000, 1000]),
        make_branch("empty"),
    ]


@pytest.fixture
def repo_with_unrepresentable_date(git_repo_with_branches):
    """Adds a local branch ``far-future`` whose tip commit time no datetime can hold."""
    repo = git_repo_with_branches
    repo.git.checkout('-b', 'far-future')
    make_commit(repo, "Far future", 99999999999999999, filename="future.txt")
    repo.git.checkout('main')
    yield repo
