"""Single-direction projectile: trajectory and first-hit resolution."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from huntgrid.sim.board import Board
from huntgrid.sim.contracts import Direction, TileContent
from huntgrid.sim.player import Player

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShotResult:
    fired: bool
    hit: tuple[int, int] | None = None
    path: list[tuple[int, int]] = field(default_factory=list)


def trajectory(
    position: tuple[int, int], heading: Direction, size: int
) -> list[tuple[int, int]]:
    """Cells strictly in front of ``position`` along ``heading``, nearest first."""
    dx, dy = heading.offset
    x, y = position[0] + dx, position[1] + dy
    cells: list[tuple[int, int]] = []
    while 0 <= x < size and 0 <= y < size:
        cells.append((x, y))
        x += dx
        y += dy
    return cells


def shoot(player: Player, board: Board) -> ShotResult:
    if player.ammo <= 0:
        return ShotResult(fired=False)

    player.ammo -= 1
    path = trajectory(player.position, player.heading, board.size)
    for x, y in path:
        if board.content_at(x, y) != TileContent.HAZARD:
            continue
        board.set_content(x, y, TileContent.EMPTY)
        board.recompute_all_hints()
        logger.info("Shot hit hazard at (%d, %d); %d ammo left", x, y, player.ammo)
        return ShotResult(fired=True, hit=(x, y), path=path)

    logger.debug(
        "Shot missed heading %s; %d ammo left", player.heading.value, player.ammo
    )
    return ShotResult(fired=True, path=path)
