"""Session construction, recentring and serializable snapshots."""

from __future__ import annotations

import json
from dataclasses import dataclass

from canvas_rpg.app.config import GameConfig, StartMode
from canvas_rpg.core.models import BallState, Region, Screen, SessionState


def create_session(config: GameConfig) -> SessionState:
    """Create the startup session for the configured start mode."""
    preset = config.start_mode is StartMode.HUD
    session = SessionState(
        screen=config.start_mode.initial_screen,
        region=Region.EU if preset else None,
        player_name=config.default_player_name if preset else None,
        world_width=config.world_width,
        world_height=config.world_height,
        player_x=0.0,
        player_y=0.0,
        ball=BallState(0.0, 0.0, *config.ball_velocity),
    )
    recenter(session, config)
    return session


def recenter(session: SessionState, config: GameConfig) -> None:
    """Centre player and ball in the current world and restore ball velocity."""
    session.player_x = session.world_width / 2.0
    session.player_y = session.world_height / 2.0
    dx, dy = config.ball_velocity
    session.ball = BallState(session.world_width / 2.0, session.world_height / 2.0, dx, dy)


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """View-ready copy of session state for the surrounding UI layer."""

    screen: Screen
    region: Region | None
    player_name: str | None
    is_loading: bool
    error: str | None
    player_position: tuple[float, float]
    ball_position: tuple[float, float]

    def to_dict(self) -> dict[str, object]:
        return {
            "screen": self.screen.value,
            "region": None if self.region is None else self.region.value,
            "player_name": self.player_name,
            "is_loading": self.is_loading,
            "error": self.error,
            "player_position": list(self.player_position),
            "ball_position": list(self.ball_position),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=True)


def snapshot_session(session: SessionState) -> SessionSnapshot:
    return SessionSnapshot(
        screen=session.screen,
        region=session.region,
        player_name=session.player_name,
        is_loading=session.is_loading,
        error=session.error_message,
        player_position=(session.player_x, session.player_y),
        ball_position=(session.ball.x, session.ball.y),
    )
