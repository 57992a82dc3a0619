"""Deck - a TUI for previewing how an archive will be unpacked."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.widgets import (
    Button,
    DataTable,
    Footer,
    Header,
    Input,
    Label,
    Log,
    Rule,
    Static,
    TextArea,
)

from unyek.errors import ArchiveReadError, UnsafePathError
from unyek.models import DEFAULT_FORMAT, ArchiveFormat
from unyek.protocols import JoinPolicy
from unyek.storage import ArchiveIndex
from unyek.writers import FileSystemWriter


@dataclass
class DeckStats:
    """Statistics for the loaded archive."""

    entries: int = 0
    files: int = 0
    chunked_files: int = 0
    total_chars: int = 0
    written: int = 0
    failed: int = 0
    status: str = "idle"

    @classmethod
    def from_index(cls, index: ArchiveIndex) -> DeckStats:
        files = index.list_files()
        return cls(
            entries=index.entry_count,
            files=len(files),
            chunked_files=sum(1 for f in files if f["chunked"]),
            total_chars=sum(f["size_chars"] for f in files),
            status="loaded",
        )


class StatsPanel(Static):
    """Archive statistics display."""

    def compose(self) -> ComposeResult:
        yield Static(id="stats-content")

    def on_mount(self) -> None:
        self.update_display(DeckStats())

    def update_display(self, stats: DeckStats) -> None:
        content = self.query_one("#stats-content", Static)
        status_color = {
            "idle": "dim",
            "loading": "yellow",
            "loaded": "green",
            "written": "cyan",
            "error": "red",
        }.get(stats.status, "white")

        content.update(f"""[b]STATUS[/b]  [{status_color}]{stats.status.upper()}[/]

[b]ARCHIVE[/b]
  Entries     [cyan]{stats.entries:,}[/]
  Files       [green]{stats.files:,}[/]
  Chunked     [magenta]{stats.chunked_files:,}[/]

[b]OUTPUT[/b]
  Written     [blue]{stats.written:,}[/]
  Failed      [red]{stats.failed:,}[/]

[b]SIZE[/b]
  Total       [cyan]{stats.total_chars / 1024:.1f} KB[/]""")


class FileTable(DataTable):
    """Reconstructed files of the loaded archive."""

    def on_mount(self) -> None:
        self.add_columns("File", "Parts", "Size")
        self.cursor_type = "row"

    def show_index(self, index: ArchiveIndex) -> None:
        self.clear()
        for f in index.list_files():
            parts = f"[magenta]{f['part_count']}[/]" if f["chunked"] else "[dim]--[/]"
            size = f["size_chars"]
            size_str = f"{size / 1024:.1f}KB" if size >= 1024 else f"{size}B"
            self.add_row(f["path"], parts, size_str, key=f["path"])


class Deck(App):
    """The unyek Deck - archive preview TUI."""

    # Messages for thread-safe communication
    class ArchiveLoaded(Message):
        def __init__(self, index: ArchiveIndex) -> None:
            self.index = index
            super().__init__()

    class StatsUpdated(Message):
        def __init__(self, stats: DeckStats) -> None:
            self.stats = stats
            super().__init__()

    class LogMessage(Message):
        def __init__(self, message: str) -> None:
            self.message = message
            super().__init__()

    CSS = """
    #main-container {
        layout: horizontal;
        height: 100%;
    }

    #left-panel {
        width: 35;
        background: $surface-darken-1;
        border-right: solid $primary-darken-2;
        padding: 1;
    }

    #center-panel {
        width: 2fr;
        padding: 1;
    }

    #right-panel {
        width: 3fr;
        padding: 1;
    }

    StatsPanel {
        height: auto;
        padding: 1;
        background: $surface-darken-2;
        border: round $primary;
        margin-bottom: 1;
    }

    #action-buttons {
        layout: horizontal;
        height: 3;
        margin-bottom: 1;
    }

    #action-buttons Button {
        margin-right: 1;
    }

    FileTable {
        height: 1fr;
        border: round $primary-darken-1;
    }

    #preview {
        height: 1fr;
        border: round $accent;
    }

    #log-panel {
        height: 10;
        border: round $primary-darken-2;
        background: $surface-darken-2;
    }

    .section-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("l", "load", "Load", show=True),
        Binding("w", "write", "Write", show=True),
        Binding("q", "quit", "Quit", show=True),
        Binding("d", "toggle_dark", "Toggle Dark Mode"),
    ]

    TITLE = "unyek Deck"
    SUB_TITLE = "Archive Preview"

    def __init__(
        self,
        archive: Optional[str] = None,
        fmt: ArchiveFormat = DEFAULT_FORMAT,
        joiner: Optional[JoinPolicy] = None,
    ) -> None:
        super().__init__()
        self.archive = archive
        self.fmt = fmt
        self.joiner = joiner
        self.index: Optional[ArchiveIndex] = None
        self.stats = DeckStats()

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="main-container"):
            with Vertical(id="left-panel"):
                yield Label("ARCHIVE", classes="section-title")
                yield StatsPanel()
                yield Rule()
                yield Label("Archive Path")
                yield Input(
                    value=self.archive or "",
                    placeholder="Enter archive path...",
                    id="archive-input",
                )
                yield Label("Output Directory")
                yield Input(value=".", id="output-input")
                with Horizontal(id="action-buttons"):
                    yield Button("LOAD", id="load-btn", variant="primary")
                    yield Button("WRITE", id="write-btn", variant="success")

            with Vertical(id="center-panel"):
                yield Label("FILES", classes="section-title")
                yield FileTable(id="file-table")
                yield Label("SYSTEM LOG", classes="section-title")
                yield Log(id="log-panel", highlight=True, auto_scroll=True)

            with Vertical(id="right-panel"):
                yield Label("PREVIEW", classes="section-title")
                yield TextArea(id="preview", read_only=True)

        yield Footer()

    def on_mount(self) -> None:
        self._write_log("Deck initialized")
        if self.archive:
            self.action_load()
        else:
            self._write_log("Enter an archive path and press LOAD")

    def _write_log(self, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.query_one("#log-panel", Log).write_line(f"[{timestamp}] {message}")

    def _set_stats(self, stats: DeckStats) -> None:
        self.stats = stats
        self.query_one(StatsPanel).update_display(stats)

    def on_deck_archive_loaded(self, event: ArchiveLoaded) -> None:
        self.index = event.index
        self.query_one("#file-table", FileTable).show_index(event.index)
        self.query_one("#preview", TextArea).load_text("")

    def on_deck_stats_updated(self, event: StatsUpdated) -> None:
        self._set_stats(event.stats)

    def on_deck_log_message(self, event: LogMessage) -> None:
        self._write_log(event.message)

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        """Show the reconstructed content of the highlighted file."""
        if self.index is None or event.row_key.value is None:
            return
        content = self.index.read_file(event.row_key.value)
        self.query_one("#preview", TextArea).load_text(content or "")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "load-btn":
            self.action_load()
        elif event.button.id == "write-btn":
            self.action_write()

    def action_toggle_dark(self) -> None:
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"

    def action_load(self) -> None:
        archive = self.query_one("#archive-input", Input).value.strip()
        if not archive:
            self._write_log("[red]ERROR: No archive path specified[/]")
            return
        self.run_load(archive)

    def action_write(self) -> None:
        if self.index is None:
            self._write_log("[red]ERROR: Load an archive first[/]")
            return
        output = self.query_one("#output-input", Input).value.strip() or "."
        self.run_write(self.index, output, replace(self.stats))

    @work(exclusive=True, thread=True)
    def run_load(self, archive: str) -> None:
        """Parse and group the archive in a background thread."""
        self.post_message(self.StatsUpdated(DeckStats(status="loading")))
        self.post_message(self.LogMessage(f"Loading archive: {archive}"))

        try:
            index = ArchiveIndex.from_source(archive, self.fmt, self.joiner)
        except ArchiveReadError as e:
            self.post_message(self.StatsUpdated(DeckStats(status="error")))
            self.post_message(self.LogMessage(f"[red]ERROR: {e}[/]"))
            return

        self.post_message(self.ArchiveLoaded(index))
        self.post_message(self.StatsUpdated(DeckStats.from_index(index)))
        self.post_message(
            self.LogMessage(f"Found {index.entry_count} entries, {len(index)} files")
        )

    @work(exclusive=True, thread=True)
    def run_write(self, index: ArchiveIndex, output: str, stats: DeckStats) -> None:
        """Write every reconstructed file in a background thread."""
        writer = FileSystemWriter(output)
        stats.written = 0
        stats.failed = 0

        for path in index.paths():
            try:
                writer.write(path, index.read_file(path) or "")
            except (OSError, UnsafePathError) as e:
                stats.failed += 1
                self.post_message(self.LogMessage(f"[red]Failed to write {path}: {e}[/]"))
                continue
            stats.written += 1

        stats.status = "written" if not stats.failed else "error"
        self.post_message(self.StatsUpdated(replace(stats)))
        self.post_message(
            self.LogMessage(
                f"[cyan]COMPLETE: {stats.written} written, {stats.failed} failed -> {output}[/]"
            )
        )


def main(
    archive: Optional[str] = None,
    fmt: ArchiveFormat = DEFAULT_FORMAT,
    joiner: Optional[JoinPolicy] = None,
) -> None:
    """Run the Deck TUI."""
    app = Deck(archive, fmt, joiner)
    app.run()


if __name__ == "__main__":
    main()
