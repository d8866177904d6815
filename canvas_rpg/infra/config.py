"""Environment loading and game configuration resolution."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Mapping

from canvas_rpg.app.config import GameConfig, MovementPolicy, StartMode
from frame_engine.runtime.config import (
    read_float,
    read_float_pair,
    read_int,
    read_raw,
    read_text,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "CANVAS_RPG_"


def load_env_file(path: str = ".env.app", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = Path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue

        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load ``.env.app`` then ``.env.app.local``; later files win."""
    to_load = tuple(paths) if paths is not None else (".env.app", ".env.app.local")
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def load_game_config(*, env: Mapping[str, str] | None = None) -> GameConfig:
    """Build ``GameConfig`` from ``CANVAS_RPG_*`` variables with safe fallbacks."""
    defaults = GameConfig()
    width, height = read_float_pair(
        f"{ENV_PREFIX}WORLD_SIZE",
        (defaults.world_width, defaults.world_height),
        separators=("x", ",", ":"),
        env=env,
    )
    if width <= 0.0 or height <= 0.0:
        logger.warning("config_world_size_invalid width=%s height=%s", width, height)
        width, height = defaults.world_width, defaults.world_height

    start_mode = _enum_value(
        StartMode, read_raw(f"{ENV_PREFIX}START_MODE", env=env), defaults.start_mode
    )
    movement_policy = _enum_value(
        MovementPolicy,
        read_raw(f"{ENV_PREFIX}MOVEMENT_POLICY", env=env),
        defaults.movement_policy,
    )
    return GameConfig(
        world_width=width,
        world_height=height,
        start_mode=start_mode,
        movement_policy=movement_policy,
        movement_speed=read_float(
            f"{ENV_PREFIX}MOVEMENT_SPEED", defaults.movement_speed, minimum=0.0, env=env
        ),
        ball_radius=read_float(
            f"{ENV_PREFIX}BALL_RADIUS", defaults.ball_radius, minimum=0.0, env=env
        ),
        ball_velocity=read_float_pair(
            f"{ENV_PREFIX}BALL_VELOCITY", defaults.ball_velocity, separators=(",",), env=env
        ),
        default_player_name=read_text(
            f"{ENV_PREFIX}PLAYER_NAME", defaults.default_player_name, env=env
        ),
        fps=read_int(f"{ENV_PREFIX}FPS", defaults.fps, minimum=1, env=env),
        font_path=read_text(f"{ENV_PREFIX}FONT_PATH", defaults.font_path, env=env),
    )


def _enum_value[TEnum: (StartMode, MovementPolicy)](
    enum_cls: type[TEnum], raw: str | None, default: TEnum
) -> TEnum:
    if raw is None:
        return default
    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        logger.warning("config_value_unknown value=%s default=%s", raw, default.value)
        return default
