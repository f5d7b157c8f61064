"""Core data contracts shared by the simulation and its renderers."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    model_validator,
)


class TileHint(str, Enum):
    STENCH = "STENCH"
    WIND = "WIND"
    GLITTER = "GLITTER"


class TileContent(str, Enum):
    EMPTY = "EMPTY"
    HOLE = "HOLE"
    HAZARD = "HAZARD"
    TREASURE = "TREASURE"


class Direction(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self]


# y grows upward: Up-shots from (3, 0) reach (3, 1), Down at the origin is the edge.
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


class InputKind(str, Enum):
    MOVE = "MOVE"
    SHOOT = "SHOOT"
    IDLE = "IDLE"


class InputEvent(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: InputKind
    direction: Direction | None = None

    @model_validator(mode="after")
    def validate_input(self) -> "InputEvent":
        if self.kind == InputKind.MOVE:
            if self.direction is None:
                raise ValueError("MOVE requires a direction")
        elif self.direction is not None:
            raise ValueError(f"{self.kind.value} cannot include a direction")
        return self


IDLE = InputEvent(kind=InputKind.IDLE)


def move(direction: Direction) -> InputEvent:
    return InputEvent(kind=InputKind.MOVE, direction=direction)


def shoot() -> InputEvent:
    return InputEvent(kind=InputKind.SHOOT)


def coerce_input(raw: Any) -> InputEvent:
    """Validate an input event or fall back to IDLE."""
    if isinstance(raw, InputEvent):
        return raw
    try:
        return InputEvent.model_validate(raw)
    except ValidationError:
        return IDLE


KEY_BINDINGS: dict[str, InputEvent] = {
    "up": move(Direction.UP),
    "down": move(Direction.DOWN),
    "left": move(Direction.LEFT),
    "right": move(Direction.RIGHT),
    "w": move(Direction.UP),
    "s": move(Direction.DOWN),
    "a": move(Direction.LEFT),
    "d": move(Direction.RIGHT),
    "space": shoot(),
    "f": shoot(),
}


def input_for_key(key: str) -> InputEvent:
    return KEY_BINDINGS.get(key.lower(), IDLE)


class Event(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: str
    payload: dict[str, Any] = Field(default_factory=dict)


class TileSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    x: int
    y: int
    content: TileContent
    hints: list[TileHint] = Field(default_factory=list)
    discovered: bool = False


class PlayerSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    position: tuple[int, int]
    heading: Direction
    ammo: int = Field(ge=0)


class StateSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    size: int = Field(ge=1)
    tiles: list[TileSnapshot]
    player: PlayerSnapshot
    score: int = Field(ge=0)
    total_score: int = Field(ge=0)
    won: bool
    turn: int = 0
    deaths: int = 0

    @model_validator(mode="after")
    def validate_snapshot(self) -> "StateSnapshot":
        if len(self.tiles) != self.size * self.size:
            raise ValueError("tiles must cover the whole board")
        if self.score > self.total_score:
            raise ValueError("score cannot exceed total_score")
        return self

    def tile(self, x: int, y: int) -> TileSnapshot:
        return self.tiles[y * self.size + x]


class TurnPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    turn: int
    state: StateSnapshot
    events: list[Event] | None = None
