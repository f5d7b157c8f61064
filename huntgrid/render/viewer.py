"""Rich viewer rendering for TurnPayload."""

from __future__ import annotations

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from huntgrid.render.board_map import hint_label, render_board_lines
from huntgrid.sim.contracts import Event, StateSnapshot, TurnPayload


def render_turn(
    payload: TurnPayload, *, reveal: bool = False, max_events: int = 5
) -> RenderableType:
    header = Text(f"Turn {payload.turn}", style="bold")
    board = render_board(payload.state, reveal=reveal)
    status = render_status(payload.state)
    events = render_events(payload.events, max_events=max_events)

    right = Group(header, status, events)
    return Columns([board, Panel(right, title="Status")])


def render_board(state: StateSnapshot, *, reveal: bool = False) -> RenderableType:
    title = "Board (revealed)" if reveal else "Board"
    lines = render_board_lines(state, reveal=reveal)
    return Panel(Group(*lines), title=title, expand=False)


def render_status(state: StateSnapshot) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    player = state.player
    here = state.tile(*player.position)
    table.add_row("Score", f"{state.score} / {state.total_score}")
    table.add_row("Ammo", str(player.ammo))
    table.add_row("Heading", player.heading.value.title())
    table.add_row("Pos", f"{player.position[0]}, {player.position[1]}")
    table.add_row("Senses", hint_label(here.hints))
    table.add_row("Deaths", str(state.deaths))
    if state.won:
        table.add_row("Result", Text("All treasure collected!", style="bold green"))
    return table


def render_events(events: list[Event] | None, *, max_events: int = 5) -> RenderableType:
    table = Table(title="Recent Events", show_header=True, header_style="bold")
    table.add_column("Kind")
    table.add_column("Detail")
    items = list(events or [])
    for event in items[-max_events:]:
        table.add_row(event.kind, _format_payload(event.payload))
    if not items:
        table.add_row("-", "None")
    return table


def describe_event(event: Event) -> str:
    data = event.payload
    kind = event.kind
    if kind == "TURN":
        return f"You turn to face {data.get('heading', '').lower()}."
    if kind == "MOVE":
        return f"You step to {_format_point(data.get('to'))}."
    if kind == "BLOCKED":
        return "A cave wall blocks the way."
    if kind == "COLLECT":
        return f"You pick up treasure ({data.get('score', 0)} collected)."
    if kind == "WIN":
        return "You have collected every treasure!"
    if kind == "DEATH":
        cause = "fell into a hole" if data.get("cause") == "FELL" else "were eaten"
        return f"You {cause} at {_format_point(data.get('at'))}. A new cave awaits."
    if kind == "RESET":
        return f"A new cave hides {data.get('total_score', 0)} treasure(s)."
    if kind == "SHOOT":
        heading = data.get("heading", "").lower()
        return f"You fire {heading} ({data.get('ammo', 0)} left)."
    if kind == "HIT":
        return f"A scream echoes from {_format_point(data.get('at'))}."
    if kind == "MISS":
        return "The shot clatters into the dark."
    if kind == "EMPTY_QUIVER":
        return "You are out of ammunition."
    return kind


def _format_point(point) -> str:
    if not point:
        return "?"
    return f"({point[0]}, {point[1]})"


def _format_payload(payload: dict) -> str:
    if not payload:
        return "-"
    return ", ".join(f"{key}={value}" for key, value in payload.items())
