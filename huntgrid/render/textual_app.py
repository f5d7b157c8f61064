"""Textual app that plays one Simulation on a PlayScreen."""

from __future__ import annotations

from textual.app import App

from huntgrid.render.play_screen import PlayScreen, PlayViewState
from huntgrid.sim.simulation import Simulation

RESTART_MESSAGE = "You restart in a fresh cave."


class HuntgridApp(App):
    """Own the simulation for the session; restarts replace its board."""

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("r", "restart", "Restart"),
    ]

    def __init__(self, simulation: Simulation, *, reveal: bool = False) -> None:
        super().__init__()
        self.simulation = simulation
        self.play_screen = PlayScreen(simulation, state=PlayViewState(reveal=reveal))
        size = simulation.config.size
        self.title = f"Huntgrid {size}x{size}"

    def on_mount(self) -> None:
        self.push_screen(self.play_screen)

    def action_restart(self) -> None:
        self.simulation.reset()
        self.play_screen.announce(RESTART_MESSAGE)


def run_game_app(simulation: Simulation, *, reveal: bool = False) -> None:
    HuntgridApp(simulation, reveal=reveal).run()
