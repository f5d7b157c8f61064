"""Simulation root: owns the board and player, applies inputs, tracks score."""

from __future__ import annotations

import logging
import random
from typing import Any

from huntgrid.sim.board import Board, generate_board
from huntgrid.sim.config_loader import GameConfig
from huntgrid.sim.contracts import (
    Direction,
    Event,
    InputKind,
    StateSnapshot,
    TileContent,
    TileSnapshot,
    TurnPayload,
    coerce_input,
)
from huntgrid.sim.movement import MoveResult, TileEffect, evaluate_tile, turn_or_move
from huntgrid.sim.player import Player, new_player
from huntgrid.sim.shooting import shoot

logger = logging.getLogger(__name__)


class Simulation:
    """Single-threaded game state advanced one input event at a time.

    The board and player are replaced wholesale on every reset; callers
    should re-read them after each :meth:`handle_input`.
    """

    def __init__(
        self, config: GameConfig | None = None, *, rng: random.Random | None = None
    ) -> None:
        self.config = config or GameConfig()
        self._rng = rng or random.Random(self.config.seed)
        self.turn = 0
        self.deaths = 0
        self.board: Board
        self.player: Player
        self.score = 0
        self.total_score = 0
        self.reset()

    def reset(self) -> None:
        config = self.config
        board = generate_board(config.size, self._rng, config.thresholds)
        if config.safe_start:
            board.set_content(*config.start, TileContent.EMPTY)
            board.recompute_all_hints()
        board.tile(*config.start).discover()
        self.board = board
        self.player = new_player(
            config.start, heading=config.heading, ammo=config.starting_ammo
        )
        self.score = 0
        self.total_score = board.total_treasure_count()
        logger.info(
            "New %dx%d board with %d treasure(s)",
            config.size,
            config.size,
            self.total_score,
        )

    def handle_input(self, raw: Any) -> list[Event]:
        event = coerce_input(raw)
        if event.kind == InputKind.IDLE:
            return []
        self.turn += 1
        if event.kind == InputKind.MOVE and event.direction is not None:
            return self._handle_move(event.direction)
        return self._handle_shoot()

    def is_won(self) -> bool:
        return self.score == self.total_score

    def snapshot(self) -> StateSnapshot:
        tiles = [
            TileSnapshot(
                x=x,
                y=y,
                content=tile.content,
                hints=sorted(tile.hints, key=lambda hint: hint.value),
                discovered=tile.discovered,
            )
            for (x, y), tile in self.board.tiles()
        ]
        return StateSnapshot(
            size=self.board.size,
            tiles=tiles,
            player=self.player.snapshot(),
            score=self.score,
            total_score=self.total_score,
            won=self.is_won(),
            turn=self.turn,
            deaths=self.deaths,
        )

    def payload(self, events: list[Event] | None = None) -> TurnPayload:
        return TurnPayload(turn=self.turn, state=self.snapshot(), events=events)

    def _handle_move(self, direction: Direction) -> list[Event]:
        origin = self.player.position
        result = turn_or_move(self.player, direction, self.board)
        if result == MoveResult.TURNED:
            return [Event(kind="TURN", payload={"heading": direction.value})]
        if result == MoveResult.BLOCKED:
            return [Event(kind="BLOCKED", payload={"heading": direction.value})]

        events = [
            Event(kind="MOVE", payload={"from": origin, "to": self.player.position})
        ]
        effect = evaluate_tile(self.player, self.board)
        if effect == TileEffect.COLLECTED:
            self.score += 1
            events.append(
                Event(
                    kind="COLLECT",
                    payload={"at": self.player.position, "score": self.score},
                )
            )
            if self.is_won():
                events.append(Event(kind="WIN", payload={"score": self.score}))
        elif effect.is_fatal:
            self.deaths += 1
            events.append(
                Event(
                    kind="DEATH",
                    payload={"at": self.player.position, "cause": effect.value},
                )
            )
            self.reset()
            events.append(
                Event(kind="RESET", payload={"total_score": self.total_score})
            )
        return events

    def _handle_shoot(self) -> list[Event]:
        result = shoot(self.player, self.board)
        if not result.fired:
            return [Event(kind="EMPTY_QUIVER")]
        events = [
            Event(
                kind="SHOOT",
                payload={
                    "heading": self.player.heading.value,
                    "ammo": self.player.ammo,
                },
            )
        ]
        if result.hit is None:
            events.append(Event(kind="MISS"))
        else:
            events.append(Event(kind="HIT", payload={"at": result.hit}))
        return events
