"""Player runtime state."""

from __future__ import annotations

from dataclasses import dataclass

from huntgrid.sim.contracts import Direction, PlayerSnapshot

DEFAULT_START: tuple[int, int] = (0, 0)
DEFAULT_HEADING = Direction.UP
DEFAULT_AMMO = 3


@dataclass
class Player:
    position: tuple[int, int]
    heading: Direction = DEFAULT_HEADING
    ammo: int = DEFAULT_AMMO

    def snapshot(self) -> PlayerSnapshot:
        return PlayerSnapshot(
            position=self.position, heading=self.heading, ammo=self.ammo
        )


def new_player(
    start: tuple[int, int] = DEFAULT_START,
    *,
    heading: Direction = DEFAULT_HEADING,
    ammo: int = DEFAULT_AMMO,
) -> Player:
    if ammo < 0:
        raise ValueError("Starting ammo cannot be negative.")
    return Player(position=start, heading=heading, ammo=ammo)
