"""Turn-before-move state machine and tile effects."""

from __future__ import annotations

import logging
from enum import Enum

from huntgrid.sim.board import Board
from huntgrid.sim.contracts import Direction, TileContent, TileHint
from huntgrid.sim.player import Player

logger = logging.getLogger(__name__)


class MoveResult(str, Enum):
    TURNED = "TURNED"
    MOVED = "MOVED"
    BLOCKED = "BLOCKED"


class TileEffect(str, Enum):
    NONE = "NONE"
    COLLECTED = "COLLECTED"
    FELL = "FELL"
    EATEN = "EATEN"

    @property
    def is_fatal(self) -> bool:
        return self in {TileEffect.FELL, TileEffect.EATEN}


def step(position: tuple[int, int], direction: Direction) -> tuple[int, int]:
    dx, dy = direction.offset
    return position[0] + dx, position[1] + dy


def turn_or_move(player: Player, direction: Direction, board: Board) -> MoveResult:
    """Face a new direction, or advance one tile if already facing it.

    Moves that would leave the board are ignored. The destination tile is
    marked discovered; tile effects are left to :func:`evaluate_tile`.
    """
    if player.heading != direction:
        player.heading = direction
        return MoveResult.TURNED

    destination = step(player.position, direction)
    if not board.in_bounds(*destination):
        return MoveResult.BLOCKED

    player.position = destination
    board.tile(*destination).discover()
    return MoveResult.MOVED


def evaluate_tile(player: Player, board: Board) -> TileEffect:
    x, y = player.position
    tile = board.tile(x, y)
    if tile.content == TileContent.TREASURE:
        tile.content = TileContent.EMPTY
        tile.hints.discard(TileHint.GLITTER)
        logger.info("Treasure collected at (%d, %d)", x, y)
        return TileEffect.COLLECTED
    if tile.content == TileContent.HOLE:
        logger.info("Player fell into a hole at (%d, %d)", x, y)
        return TileEffect.FELL
    if tile.content == TileContent.HAZARD:
        logger.info("Player walked into a hazard at (%d, %d)", x, y)
        return TileEffect.EATEN
    return TileEffect.NONE
