"""Shared helpers for drawing the board as Rich text."""

from __future__ import annotations

from rich.text import Text

from huntgrid.sim.contracts import (
    Direction,
    StateSnapshot,
    TileContent,
    TileHint,
    TileSnapshot,
)


CONTENT_GLYPHS = {
    TileContent.EMPTY: ".",
    TileContent.HOLE: "O",
    TileContent.HAZARD: "W",
    TileContent.TREASURE: "$",
}

CONTENT_STYLES = {
    TileContent.EMPTY: "grey70",
    TileContent.HOLE: "blue",
    TileContent.HAZARD: "bold red",
    TileContent.TREASURE: "bold yellow",
}

HINT_GLYPHS = {
    TileHint.STENCH: "s",
    TileHint.WIND: "w",
    TileHint.GLITTER: "g",
}

HEADING_GLYPHS = {
    Direction.UP: "^",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.RIGHT: ">",
}

FOG_GLYPH = "#"
FOG_STYLE = "grey35"
PLAYER_STYLE = "bold bright_cyan"
HINT_STYLE = "green3"

CELL_WIDTH = 3


def render_board_lines(snapshot: StateSnapshot, *, reveal: bool = False) -> list[Text]:
    """Render one Text row per board row, top row (highest y) first."""
    player = snapshot.player
    lines: list[Text] = []
    for y in range(snapshot.size - 1, -1, -1):
        line = Text()
        for x in range(snapshot.size):
            tile = snapshot.tile(x, y)
            if (x, y) == player.position:
                glyph, style = _player_cell(player.heading)
            else:
                glyph, style = _tile_cell(tile, reveal=reveal)
            line.append(glyph, style=style)
        lines.append(line)
    return lines


def hint_label(hints: list[TileHint]) -> str:
    if not hints:
        return "None"
    return ", ".join(hint.value.title() for hint in hints)


def _tile_cell(tile: TileSnapshot, *, reveal: bool) -> tuple[str, str]:
    if not tile.discovered and not reveal:
        return FOG_GLYPH.center(CELL_WIDTH), FOG_STYLE
    glyph = CONTENT_GLYPHS[tile.content]
    style = CONTENT_STYLES[tile.content]
    if tile.content == TileContent.EMPTY and tile.hints:
        # Empty tiles show their first hint instead of a dot.
        glyph = HINT_GLYPHS[tile.hints[0]]
        style = HINT_STYLE
    return glyph.center(CELL_WIDTH), style


def _player_cell(heading: Direction) -> tuple[str, str]:
    return HEADING_GLYPHS[heading].center(CELL_WIDTH), PLAYER_STYLE
