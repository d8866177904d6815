"""Per-frame numeric update: held-key player movement and legacy ball bounce."""

from __future__ import annotations

import logging
import math

from canvas_rpg.app.config import GameConfig, MovementPolicy
from canvas_rpg.core.bounds import clamp, clamp_inset
from canvas_rpg.core.models import BallState, Screen, SessionState
from canvas_rpg.input.translator import InputTranslator

logger = logging.getLogger(__name__)


def move_player(session: SessionState, dx: float, dy: float) -> None:
    """Offset the player and saturate each axis to the world bounds."""
    session.player_x = clamp(session.player_x + dx, 0.0, session.world_width)
    session.player_y = clamp(session.player_y + dy, 0.0, session.world_height)


def step_ball(ball: BallState, width: float, height: float, radius: float) -> None:
    """Advance the ball one frame, reflecting off the inset walls.

    Position is clamped every frame, so an overshoot is pulled back onto the
    wall instead of escaping. Reflection only negates components, so speed is
    preserved exactly.
    """
    ball.x += ball.dx
    ball.y += ball.dy
    if ball.x <= radius or ball.x >= width - radius:
        ball.dx = -ball.dx
    if ball.y <= radius or ball.y >= height - radius:
        ball.dy = -ball.dy
    ball.x = clamp_inset(ball.x, width, radius)
    ball.y = clamp_inset(ball.y, height, radius)


class SimulationStep:
    """Run the per-frame update independently of that frame's events."""

    def __init__(self, config: GameConfig) -> None:
        self._radius = config.ball_radius
        self._policy = config.movement_policy

    @property
    def ball_radius(self) -> float:
        return self._radius

    def moves_player_on(self, screen: Screen) -> bool:
        if self._policy is MovementPolicy.ACTIVE_PLAY:
            return screen is Screen.HUD
        return True

    def step(self, session: SessionState, translator: InputTranslator) -> None:
        dx, dy = (0.0, 0.0)
        if self.moves_player_on(session.screen):
            dx, dy = translator.movement_delta()
        # A zero delta still clamps against the current bounds.
        move_player(session, dx, dy)
        ball = session.ball
        if session.screen.shows_world:
            step_ball(ball, session.world_width, session.world_height, self._radius)
            return
        ball.x = clamp_inset(ball.x, session.world_width, self._radius)
        ball.y = clamp_inset(ball.y, session.world_height, self._radius)


def resize_world(session: SessionState, width: float, height: float) -> bool:
    """Store new world bounds. Existing positions are clamped on the next step only."""
    if not (math.isfinite(width) and math.isfinite(height)) or width <= 0.0 or height <= 0.0:
        logger.warning("world_resize_rejected width=%s height=%s", width, height)
        return False
    session.world_width = float(width)
    session.world_height = float(height)
    logger.debug("world_resized width=%.1f height=%.1f", width, height)
    return True
