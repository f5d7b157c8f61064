"""Module entry point for `python -m huntgrid`."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from huntgrid.app import parse_keys, run_game, run_script
from huntgrid.render.viewer import render_turn
from huntgrid.sim.config_loader import GameConfig, load_game_config
from huntgrid.sim.simulation import Simulation


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Play a Hunt-the-Wumpus style grid world."
    )
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Board width and height in tiles.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for board generation (random when omitted).",
    )
    parser.add_argument(
        "--ammo",
        type=int,
        default=None,
        help="Starting ammunition.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (defaults to ./huntgrid.json when present).",
    )
    parser.add_argument(
        "--keys",
        default=None,
        help="Run headless: apply comma/space separated keys, then print the state.",
    )
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the initial state and exit.",
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="Show undiscovered tiles.",
    )
    parser.add_argument(
        "--safe-start",
        action="store_true",
        default=None,
        help="Clear the start tile so a fresh board never spawns on a hazard.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write logs to a file instead of stderr.",
    )
    args = parser.parse_args()

    _configure_logging(args.log_level, args.log_file)
    config = _resolve_config(args)

    if args.keys is not None:
        payload = run_script(config, parse_keys(args.keys))
        Console().print(render_turn(payload, reveal=args.reveal))
        return

    if args.print_only:
        payload = Simulation(config).payload()
        Console().print(render_turn(payload, reveal=args.reveal))
        return

    run_game(config, reveal=args.reveal)


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    overrides = {
        "size": args.size,
        "seed": args.seed,
        "starting_ammo": args.ammo,
        "safe_start": args.safe_start,
    }
    try:
        return load_game_config(args.config, overrides=overrides)
    except (FileNotFoundError, ValueError) as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc


def _configure_logging(level: str, log_file: Path | None) -> None:
    handler: logging.Handler
    if log_file is not None:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)


if __name__ == "__main__":
    main()
