"""Simulation core: board, player, movement, shooting and scoring."""

from huntgrid.sim.board import (
    Board,
    GenerationThresholds,
    OutOfBoundsError,
    Tile,
    generate_board,
)
from huntgrid.sim.config_loader import GameConfig, load_game_config
from huntgrid.sim.contracts import (
    Direction,
    Event,
    InputEvent,
    InputKind,
    PlayerSnapshot,
    StateSnapshot,
    TileContent,
    TileHint,
    TileSnapshot,
    TurnPayload,
    coerce_input,
    input_for_key,
)
from huntgrid.sim.movement import MoveResult, TileEffect, evaluate_tile, turn_or_move
from huntgrid.sim.player import Player, new_player
from huntgrid.sim.shooting import ShotResult, shoot, trajectory
from huntgrid.sim.simulation import Simulation

__all__ = [
    "Board",
    "Direction",
    "Event",
    "GameConfig",
    "GenerationThresholds",
    "InputEvent",
    "InputKind",
    "MoveResult",
    "OutOfBoundsError",
    "Player",
    "PlayerSnapshot",
    "ShotResult",
    "Simulation",
    "StateSnapshot",
    "Tile",
    "TileContent",
    "TileEffect",
    "TileHint",
    "TileSnapshot",
    "TurnPayload",
    "coerce_input",
    "evaluate_tile",
    "generate_board",
    "input_for_key",
    "load_game_config",
    "new_player",
    "shoot",
    "trajectory",
    "turn_or_move",
]
