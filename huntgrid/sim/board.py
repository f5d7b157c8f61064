"""Square tile board: generation, neighbor queries and hint derivation."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterator

from huntgrid.sim.contracts import TileContent, TileHint

logger = logging.getLogger(__name__)

_FLOAT_SLACK = 1e-9


class OutOfBoundsError(IndexError):
    """Raised when a coordinate outside the board is addressed."""


@dataclass(frozen=True)
class GenerationThresholds:
    """Per-tile probabilities, applied cumulatively in field order."""

    empty: float = 0.70
    hole: float = 0.20
    hazard: float = 0.05
    treasure: float = 0.05

    def __post_init__(self) -> None:
        for name in ("empty", "hole", "hazard", "treasure"):
            if getattr(self, name) < 0:
                raise ValueError(f"Threshold {name} must be non-negative.")
        if self.total > 1.0 + _FLOAT_SLACK:
            raise ValueError(f"Thresholds sum to {self.total:.3f}, above 1.0.")

    @property
    def total(self) -> float:
        return self.empty + self.hole + self.hazard + self.treasure

    def pick(self, sample: float) -> TileContent:
        bound = self.empty
        if sample < bound:
            return TileContent.EMPTY
        bound += self.hole
        if sample < bound:
            return TileContent.HOLE
        bound += self.hazard
        if sample < bound:
            return TileContent.HAZARD
        bound += self.treasure
        if sample <= bound:
            return TileContent.TREASURE
        return TileContent.EMPTY


@dataclass
class Tile:
    content: TileContent = TileContent.EMPTY
    hints: set[TileHint] = field(default_factory=set)
    discovered: bool = False

    def discover(self) -> None:
        self.discovered = True


class Board:
    """N x N grid of tiles. ``contents`` rows are indexed ``[y][x]``."""

    def __init__(
        self, size: int, contents: list[list[TileContent]] | None = None
    ) -> None:
        if size < 1:
            raise ValueError("Board size must be at least 1.")
        self.size = size
        if contents is None:
            self._rows = [[Tile() for _ in range(size)] for _ in range(size)]
        else:
            if len(contents) != size or any(len(row) != size for row in contents):
                raise ValueError(f"Board contents must be {size}x{size}.")
            self._rows = [
                [Tile(content=content) for content in row] for row in contents
            ]
        self.recompute_all_hints()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def tile(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(
                f"({x}, {y}) is outside a {self.size}x{self.size} board."
            )
        return self._rows[y][x]

    def content_at(self, x: int, y: int) -> TileContent:
        return self.tile(x, y).content

    def set_content(self, x: int, y: int, content: TileContent) -> None:
        self.tile(x, y).content = content

    def neighbors(self, x: int, y: int) -> list[tuple[int, int]]:
        """Return in-bounds orthogonal neighbors ordered left, right, up, down."""
        candidates = [(x - 1, y), (x + 1, y), (x, y + 1), (x, y - 1)]
        return [pos for pos in candidates if self.in_bounds(*pos)]

    def recompute_all_hints(self) -> None:
        for _, tile in self.tiles():
            tile.hints.clear()
        for (x, y), tile in self.tiles():
            if tile.content == TileContent.TREASURE:
                tile.hints.add(TileHint.GLITTER)
            for nx, ny in self.neighbors(x, y):
                neighbor = self._rows[ny][nx].content
                if neighbor == TileContent.HOLE:
                    tile.hints.add(TileHint.WIND)
                elif neighbor == TileContent.HAZARD:
                    tile.hints.add(TileHint.STENCH)

    def total_treasure_count(self) -> int:
        return sum(
            1 for _, tile in self.tiles() if tile.content == TileContent.TREASURE
        )

    def tiles(self) -> Iterator[tuple[tuple[int, int], Tile]]:
        for y, row in enumerate(self._rows):
            for x, tile in enumerate(row):
                yield (x, y), tile


def generate_board(
    size: int,
    rng: random.Random,
    thresholds: GenerationThresholds | None = None,
) -> Board:
    thresholds = thresholds or GenerationThresholds()
    contents = [
        [thresholds.pick(rng.random()) for _ in range(size)] for _ in range(size)
    ]
    board = Board(size, contents)
    logger.debug(
        "Generated %dx%d board with %d treasure(s)",
        size,
        size,
        board.total_treasure_count(),
    )
    return board
