"""Interactive TUI for git-branch-browser using Textual."""

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical, VerticalScroll
from textual.events import Click
from textual.screen import ModalScreen
from textual.widgets import Button, DataTable, Footer, Header, Static
from rich.text import Text

from .__version__ import __version__
from .constants import COLUMNS, HELP_TEXT
from .core import BranchBrowser
from .exceptions import BranchBrowserError
from .formatters import (
    format_author,
    format_branch_kind,
    format_branch_name,
    format_commit_lines,
    format_last_commit,
)
from .logging_config import get_logger

logger = get_logger(__name__)


class InfoScreen(ModalScreen):
    """Modal info display dialog."""

    DEFAULT_CSS = """
    InfoScreen {
        align: center middle;
    }

    #info-dialog {
        width: 80%;
        height: auto;
        border: thick $background 80%;
        background: $surface;
        padding: 1 2;
    }

    #info-content {
        width: 100%;
        height: auto;
        padding: 1 0;
    }

    #info-button-container {
        width: 100%;
        height: auto;
        align: center middle;
        padding: 1 0;
    }
    """

    BINDINGS = [
        Binding("escape", "close", "Close"),
        Binding("enter", "close", "Close", show=False),
    ]

    def __init__(self, info: str):
        super().__init__()
        self.info = info

    def compose(self) -> ComposeResult:
        with Vertical(id="info-dialog"):
            yield Static(Text(self.info), id="info-content")
            with Container(id="info-button-container"):
                yield Button("Close", variant="primary", id="close")

    def action_close(self) -> None:
        self.dismiss()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss()


class NonExpandingHeader(Header):
    """Header widget that doesn't expand/contract on click."""

    def on_click(self, event: Click) -> None:
        event.stop()


class BranchBrowserApp(App):
    """Interactive branch browser.

    The catalog owns the cursor; the table only mirrors it.
    """

    TITLE = "Git Branch Browser"
    SUB_TITLE = f"v{__version__}"

    CSS = """
    Screen {
        background: $surface;
    }

    #branch-table {
        height: 1fr;
    }

    #commit-scroll {
        height: 1fr;
        border-top: solid $accent;
    }

    #commit-detail {
        padding: 0 1;
    }

    #status-bar {
        dock: bottom;
        height: auto;
        background: $panel;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("j", "select_next", "Next", show=False, priority=True),
        Binding("down", "select_next", "Next", show=False, priority=True),
        Binding("k", "select_previous", "Previous", show=False, priority=True),
        Binding("up", "select_previous", "Previous", show=False, priority=True),
        Binding("g", "select_first", "First", show=False, priority=True),
        Binding("home", "select_first", "First", show=False, priority=True),
        Binding("G,shift+g", "select_last", "Last", show=False, priority=True),
        Binding("end", "select_last", "Last", show=False, priority=True),
        Binding("h", "select_none", "Clear", show=False, priority=True),
        Binding("left", "select_none", "Clear", show=False, priority=True),
        Binding("s", "cycle_sort", "Change Sort"),
        Binding("f", "toggle_filter", "Change Filter"),
        Binding("r", "reload", "Reload"),
        Binding("question_mark", "show_help", "Help"),
    ]

    def __init__(self, browser: BranchBrowser, startup_error: Optional[str] = None):
        super().__init__()
        self.browser = browser
        self.startup_error = startup_error

    def compose(self) -> ComposeResult:
        yield NonExpandingHeader(show_clock=False, icon="")
        yield DataTable(id="branch-table", cursor_type="row", zebra_stripes=True)
        with VerticalScroll(id="commit-scroll"):
            yield Static(id="commit-detail")
        yield Static(id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        for col in COLUMNS:
            table.add_column(col.label, width=col.width or None, key=col.key)
        self._refresh_view(repopulate=True)
        if self.startup_error:
            self.notify(self.startup_error, title="Could not load branches", severity="error")
        self._report_load_errors()

    def _populate_table(self) -> None:
        table = self.query_one(DataTable)
        table.clear()
        apply_offset = self.browser.config.apply_utc_offset

        for branch in self.browser.items:
            latest = branch.latest_commit
            table.add_row(
                format_branch_name(branch),
                format_branch_kind(branch),
                format_last_commit(branch, apply_offset),
                Text(latest.summary if latest else ""),
                key=f"{branch.kind.value}:{branch.name}",
            )

    def _sync_cursor(self) -> None:
        table = self.query_one(DataTable)
        cursor = self.browser.catalog.cursor
        if cursor is None:
            table.show_cursor = False
        else:
            table.show_cursor = True
            table.move_cursor(row=cursor)

    def _update_detail(self) -> None:
        detail = self.query_one("#commit-detail", Static)
        branch = self.browser.current()
        if branch is None:
            detail.update("")
            return

        apply_offset = self.browser.config.apply_utc_offset
        text = Text(f"{branch.name} ({branch.kind.value})\n", style="bold")
        if branch.commits:
            latest = branch.latest_commit
            text.append(f"Last author: {format_author(latest.author, with_email=True)}\n\n", style="dim")
            text.append(format_commit_lines(branch.commits, apply_offset))
        else:
            text.append("No commits", style="dim")
        detail.update(text)

    def _update_status(self) -> None:
        status = self.query_one("#status-bar", Static)
        catalog = self.browser.catalog
        position = "-" if catalog.cursor is None else str(catalog.cursor + 1)
        status.update(
            Text(
                f"{position}/{len(catalog)} branches | "
                f"sort: {self.browser.sort_label} | filter: {self.browser.filter_label}"
            )
        )

    def _report_load_errors(self) -> None:
        errors = self.browser.load_errors
        if errors:
            self.notify(
                "\n".join(errors), title=f"Skipped {len(errors)} branch(es)", severity="warning"
            )

    def _refresh_view(self, repopulate: bool = False) -> None:
        if repopulate:
            self._populate_table()
        self._sync_cursor()
        self._update_detail()
        self._update_status()

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        """Follow mouse selection in the table."""
        table = self.query_one(DataTable)
        row = event.cursor_row
        if not table.show_cursor or row is None or not 0 <= row < len(self.browser.items):
            return
        if row != self.browser.catalog.cursor:
            self.browser.catalog.select(row)
            self._update_detail()
            self._update_status()

    def action_select_next(self) -> None:
        self.browser.select_next()
        self._refresh_view()

    def action_select_previous(self) -> None:
        self.browser.select_previous()
        self._refresh_view()

    def action_select_first(self) -> None:
        self.browser.select_first()
        self._refresh_view()

    def action_select_last(self) -> None:
        self.browser.select_last()
        self._refresh_view()

    def action_select_none(self) -> None:
        self.browser.select_none()
        self._refresh_view()

    def action_cycle_sort(self) -> None:
        self.browser.cycle_sort()
        self._refresh_view(repopulate=True)
        self.notify(f"Sorted by {self.browser.sort_label}")

    def action_toggle_filter(self) -> None:
        try:
            self.browser.toggle_filter()
        except BranchBrowserError as e:
            logger.error(f"Error changing filter: {e}", exc_info=True)
            self.notify(str(e), title="Could not load branches", severity="error")
            return
        self._refresh_view(repopulate=True)
        self.notify(f"Showing {self.browser.filter_label} branches")
        self._report_load_errors()

    def action_reload(self) -> None:
        try:
            self.browser.reload()
        except BranchBrowserError as e:
            logger.error(f"Error reloading: {e}", exc_info=True)
            self.notify(str(e), title="Reload failed", severity="error")
            return
        self._refresh_view(repopulate=True)
        self.notify("Branch data reloaded", severity="information")
        self._report_load_errors()

    def action_show_help(self) -> None:
        self.push_screen(InfoScreen(HELP_TEXT))

    async def action_quit(self) -> None:
        """Close the repository handle before exiting."""
        try:
            self.browser.close()
        finally:
            self.exit()
