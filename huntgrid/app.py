"""Application entry for building and driving a simulation."""

from __future__ import annotations

import logging
from typing import Iterable

from huntgrid.render.textual_app import run_game_app
from huntgrid.sim.config_loader import GameConfig
from huntgrid.sim.contracts import Event, TurnPayload, input_for_key
from huntgrid.sim.simulation import Simulation

logger = logging.getLogger(__name__)


def run_game(config: GameConfig, *, reveal: bool = False) -> Simulation:
    simulation = Simulation(config)
    run_game_app(simulation, reveal=reveal)
    return simulation


def run_script(config: GameConfig, keys: Iterable[str]) -> TurnPayload:
    """Apply key names in order without a UI and return the final payload."""
    simulation = Simulation(config)
    events: list[Event] = []
    for key in keys:
        handled = simulation.handle_input(input_for_key(key))
        if not handled:
            logger.warning("Ignoring unbound key %r", key)
        events.extend(handled)
    return simulation.payload(events)


def parse_keys(script: str) -> list[str]:
    """Split a comma or whitespace separated key script into key names."""
    return [key for key in script.replace(",", " ").split() if key]
