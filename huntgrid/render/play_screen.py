"""Interactive Textual screen that feeds key presses into a Simulation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import Key
from textual.screen import Screen
from textual.widgets import Static

from huntgrid.render.viewer import describe_event, render_board, render_status
from huntgrid.sim.contracts import Event, InputKind, input_for_key
from huntgrid.sim.simulation import Simulation


RIGHT_WIDTH = 40
FEED_LENGTH = 12


@dataclass
class PlayViewState:
    reveal: bool = False
    feed: deque[str] = field(default_factory=lambda: deque(maxlen=FEED_LENGTH))


class PlayScreen(Screen):
    BINDINGS = [
        ("v", "toggle_reveal", "Reveal"),
    ]

    CSS = """
    Screen {
        layout: vertical;
    }
    #main {
        layout: horizontal;
        height: 1fr;
    }
    #status-bar {
        height: 3;
    }
    """

    def __init__(
        self, simulation: Simulation, *, state: PlayViewState | None = None
    ) -> None:
        super().__init__()
        self.simulation = simulation
        self.state = state or PlayViewState()
        self._board: Static | None = None
        self._status: Static | None = None
        self._feed: Static | None = None
        self._status_bar: Static | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            with Horizontal(id="main"):
                yield Static(id="board")
                with Vertical(id="right-pane"):
                    yield Static(id="status")
                    yield Static(id="feed")
            yield Static(id="status-bar")

    def on_mount(self) -> None:
        self._board = self.query_one("#board", Static)
        self._status = self.query_one("#status", Static)
        self._feed = self.query_one("#feed", Static)
        self._status_bar = self.query_one("#status-bar", Static)
        self.query_one("#right-pane").styles.width = RIGHT_WIDTH
        self._refresh_ui()

    def on_key(self, event: Key) -> None:
        command = input_for_key(event.key)
        if command.kind == InputKind.IDLE:
            return
        self._record(self.simulation.handle_input(command))
        self._refresh_ui()
        event.stop()

    def announce(self, message: str) -> None:
        self.state.feed.append(message)
        self._refresh_ui()

    def action_toggle_reveal(self) -> None:
        self.state.reveal = not self.state.reveal
        self._refresh_ui()

    def _record(self, events: list[Event]) -> None:
        for event in events:
            self.state.feed.append(describe_event(event))

    def _refresh_ui(self) -> None:
        snapshot = self.simulation.snapshot()
        if self._board:
            self._board.update(render_board(snapshot, reveal=self.state.reveal))
        if self._status:
            self._status.update(Panel(render_status(snapshot), title="Status"))
        if self._feed:
            self._feed.update(Panel(_render_feed(self.state), title="Events"))
        if self._status_bar:
            self._status_bar.update(Panel(Text(_status_text()), padding=(0, 1)))


def _render_feed(state: PlayViewState) -> Table:
    table = Table(show_header=False, box=None)
    table.add_column("Event")
    for line in state.feed:
        table.add_row(line)
    if not state.feed:
        table.add_row("Nothing has happened yet.")
    return table


def _status_text() -> str:
    return (
        "Controls: arrows/wasd=turn or move | space/f=shoot | "
        "v=reveal | r=restart | q=quit"
    )
