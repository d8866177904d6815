"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import os

from canvas_rpg.app.config import GameConfig
from canvas_rpg.app.controller import GameController
from canvas_rpg.app.host import run_window
from canvas_rpg.infra.config import load_default_env_files, load_game_config
from canvas_rpg.infra.logging import setup_logging
from frame_engine.runtime.logging import shutdown_engine_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="canvas-rpg", description="Run the canvas RPG front end.")
    parser.add_argument(
        "--start-mode",
        choices=("hud", "login"),
        default=None,
        help="Override CANVAS_RPG_START_MODE.",
    )
    parser.add_argument(
        "--movement-policy",
        choices=("always", "active_play"),
        default=None,
        help="Override CANVAS_RPG_MOVEMENT_POLICY.",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GameConfig:
    """Resolve environment config and apply command-line overrides."""
    overrides: dict[str, str] = {}
    if args.start_mode is not None:
        overrides["CANVAS_RPG_START_MODE"] = args.start_mode
    if args.movement_policy is not None:
        overrides["CANVAS_RPG_MOVEMENT_POLICY"] = args.movement_policy
    if not overrides:
        return load_game_config()
    return load_game_config(env={**os.environ, **overrides})


def main(argv: list[str] | None = None) -> None:
    """Run the canvas RPG application."""
    load_default_env_files()
    setup_logging()
    config = build_config(_parse_args(argv))
    logger.info(
        "app_start start_mode=%s movement_policy=%s",
        config.start_mode.value,
        config.movement_policy.value,
    )
    try:
        run_window(GameController(config))
    finally:
        shutdown_engine_logging()


if __name__ == "__main__":
    main()
