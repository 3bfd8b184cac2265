"""Integration tests for BranchBrowser"""
from unittest.mock import patch

import pytest

from git_branch_browser.config import Config
from git_branch_browser.core import BranchBrowser
from git_branch_browser.exceptions import EnumerationFailedError, NotARepositoryError
from git_branch_browser.models.branch import BranchKind
from git_branch_browser.models.catalog import SortMode, TypeFilter
from git_branch_browser.services.repository import RepositoryHandle

from conftest import make_branch, make_commit


def names(browser):
    return [b.name for b in browser.items]


class TestBranchBrowserInit:
    """Test BranchBrowser construction."""

    def test_open_loads_local_branches(self, git_repo_with_branches, mock_config):
        browser = BranchBrowser.open(git_repo_with_branches.working_dir, mock_config)
        assert isinstance(browser.config, Config)
        assert browser.filter is TypeFilter.LOCAL
        assert browser.sort is SortMode.DATE_DESCENDING
        assert names(browser) == ["feature", "main"]
        assert browser.current().name == "feature"

    def test_open_outside_repository(self, temp_dir, monkeypatch):
        monkeypatch.delenv("GIT_DIR", raising=False)
        plain = temp_dir / "plain"
        plain.mkdir()
        with pytest.raises(NotARepositoryError):
            BranchBrowser.open(str(plain))

    def test_default_config(self, mock_handle):
        browser = BranchBrowser(mock_handle)
        assert browser.config.max_depth == 100
        assert browser.catalog.items == []

    def test_config_defaults_applied(self, git_repo_with_branches):
        config = Config(default_filter="remote", default_sort="name-asc", max_depth=1)
        browser = BranchBrowser.open(git_repo_with_branches.working_dir, config)
        assert browser.filter is TypeFilter.REMOTE
        assert names(browser) == ["origin/feature", "origin/main"]
        assert all(len(b.commits) == 1 for b in browser.items)

    def test_labels(self, git_repo_with_branches):
        browser = BranchBrowser.open(git_repo_with_branches.working_dir)
        assert browser.sort_label == "date desc"
        assert browser.filter_label == "local"


class TestBranchBrowserNavigation:
    """Test command delegation to the catalog."""

    def test_scenario(self, git_repo_with_branches):
        browser = BranchBrowser.open(git_repo_with_branches.working_dir)
        assert names(browser) == ["feature", "main"]

        assert browser.cycle_sort() is SortMode.NAME_ASCENDING
        assert names(browser) == ["feature", "main"]

        browser.select_last()
        assert browser.catalog.cursor == 1
        assert browser.current().name == "main"

    def test_select_commands(self, git_repo_with_branches):
        browser = BranchBrowser.open(git_repo_with_branches.working_dir)
        browser.select_next()
        assert browser.catalog.cursor == 1
        browser.select_previous()
        assert browser.catalog.cursor == 0
        browser.select_none()
        assert browser.current() is None
        browser.select_first()
        assert browser.catalog.cursor == 0

    def test_set_sort(self, git_repo_with_branches):
        browser = BranchBrowser.open(git_repo_with_branches.working_dir)
        browser.set_sort(SortMode.DATE_ASCENDING)
        assert names(browser) == ["main", "feature"]


class TestBranchBrowserFilter:
    """Test filter changes."""

    def test_toggle_cycle(self, git_repo_with_branches):
        browser = BranchBrowser.open(git_repo_with_branches.working_dir)
        assert browser.toggle_filter() is TypeFilter.REMOTE
        assert {b.kind for b in browser.items} == {BranchKind.REMOTE}

        assert browser.toggle_filter() is TypeFilter.ALL
        assert len(browser.items) == 4

        assert browser.toggle_filter() is TypeFilter.LOCAL
        assert {b.kind for b in browser.items} == {BranchKind.LOCAL}

    def test_local_remote_local_round_trip(self, git_repo_with_branches):
        browser = BranchBrowser.open(git_repo_with_branches.working_dir)
        original = [b.key for b in browser.items]

        browser.load_branches(TypeFilter.REMOTE)
        assert [b.key for b in browser.items] != original
        browser.load_branches(TypeFilter.LOCAL)

        assert [b.key for b in browser.items] == original

    def test_filter_change_keeps_sort_and_resets_cursor(self, git_repo_with_branches):
        browser = BranchBrowser.open(git_repo_with_branches.working_dir)
        browser.set_sort(SortMode.NAME_DESCENDING)
        browser.select_last()

        browser.toggle_filter()

        assert browser.sort is SortMode.NAME_DESCENDING
        assert names(browser) == ["origin/main", "origin/feature"]
        assert browser.catalog.cursor == 0

    def test_failed_filter_change_keeps_catalog(self, git_repo_with_branches):
        browser = BranchBrowser.open(git_repo_with_branches.working_dir)
        previous = browser.catalog

        with patch.object(
            RepositoryHandle, "list_branches", side_effect=EnumerationFailedError("boom")
        ):
            with pytest.raises(EnumerationFailedError):
                browser.toggle_filter()

        assert browser.catalog is previous
        assert browser.filter is TypeFilter.LOCAL


class TestBranchBrowserReload:
    """Test reloading from the repository."""

    def test_reload_picks_up_new_branch(self, git_repo_with_branches):
        browser = BranchBrowser.open(git_repo_with_branches.working_dir)
        git_repo_with_branches.create_head("hotfix")

        browser.reload()

        assert "hotfix" in names(browser)

    def test_reload_keeps_selected_branch(self, git_repo_with_branches):
        browser = BranchBrowser.open(git_repo_with_branches.working_dir)
        browser.select_last()
        assert browser.current().name == "main"

        make_commit(git_repo_with_branches, "Newer main", 5000)
        browser.reload()

        assert names(browser) == ["main", "feature"]
        assert browser.current().name == "main"
        assert browser.catalog.cursor == 0

    def test_reload_keeps_empty_selection(self, git_repo_with_branches):
        browser = BranchBrowser.open(git_repo_with_branches.working_dir)
        browser.select_none()
        browser.reload()
        assert browser.catalog.cursor is None

    def test_reload_with_deleted_selection_selects_first(self, git_repo_with_branches):
        browser = BranchBrowser.open(git_repo_with_branches.working_dir)
        assert browser.current().name == "feature"

        git_repo_with_branches.delete_head("feature", force=True)
        browser.reload()

        assert names(browser) == ["main"]
        assert browser.catalog.cursor == 0

    def test_failed_reload_keeps_catalog(self, mock_handle):
        mock_handle.load_branches.return_value = [make_branch("main", epochs=[1])]
        browser = BranchBrowser(mock_handle)
        browser.load_branches()
        previous = browser.catalog

        mock_handle.load_branches.side_effect = EnumerationFailedError("gone")
        with pytest.raises(EnumerationFailedError):
            browser.reload()

        assert browser.catalog is previous
        assert names(browser) == ["main"]

    def test_close_closes_handle(self, mock_handle):
        browser = BranchBrowser(mock_handle)
        browser.close()
        mock_handle.close.assert_called_once()


class TestBranchBrowserLoadErrors:
    """Branches that fail to load are skipped and reported."""

    def test_open_skips_branch_with_unrepresentable_date(self, repo_with_unrepresentable_date):
        browser = BranchBrowser.open(repo_with_unrepresentable_date.working_dir)
        assert sorted(names(browser)) == ["feature", "main"]
        assert len(browser.load_errors) == 1
        assert "far-future" in browser.load_errors[0]

    def test_successful_reload_clears_errors(self, repo_with_unrepresentable_date):
        browser = BranchBrowser.open(repo_with_unrepresentable_date.working_dir)
        repo_with_unrepresentable_date.git.branch('-D', 'far-future')
        browser.reload()
        assert browser.load_errors == []
        assert sorted(names(browser)) == ["feature", "main"]

    def test_failed_load_keeps_previous_errors(self, repo_with_unrepresentable_date):
        browser = BranchBrowser.open(repo_with_unrepresentable_date.working_dir)
        with patch.object(
            RepositoryHandle, "list_branches", side_effect=EnumerationFailedError("boom")
        ):
            with pytest.raises(EnumerationFailedError):
                browser.reload()
        assert len(browser.load_errors) == 1
