"""Game configuration values injected at construction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from canvas_rpg.core.models import DEFAULT_PLAYER_NAME, Screen


class StartMode(StrEnum):
    """Which screen set is live.

    ``HUD`` starts in the game with the menu screens unreachable. ``LOGIN``
    starts on the login screen and walks Login, ServerSelect and MainMenu.
    """

    HUD = "hud"
    LOGIN = "login"

    @property
    def initial_screen(self) -> Screen:
        return Screen.LOGIN if self is StartMode.LOGIN else Screen.HUD

    @property
    def menus_enabled(self) -> bool:
        return self is StartMode.LOGIN


class MovementPolicy(StrEnum):
    """Screens on which held movement moves the player.

    Pending product decision: ``ALWAYS`` moves on every screen, including
    overlays; ``ACTIVE_PLAY`` moves only on the HUD.
    """

    ALWAYS = "always"
    ACTIVE_PLAY = "active_play"


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable game configuration."""

    world_width: float = 800.0
    world_height: float = 600.0
    start_mode: StartMode = StartMode.HUD
    movement_policy: MovementPolicy = MovementPolicy.ALWAYS
    movement_speed: float = 5.0
    ball_radius: float = 25.0
    ball_velocity: tuple[float, float] = (3.0, 2.0)
    player_radius: float = 15.0
    default_player_name: str = DEFAULT_PLAYER_NAME
    fps: int = 60
    font_path: str = ""

    def __post_init__(self) -> None:
        if self.world_width <= 0.0 or self.world_height <= 0.0:
            raise ValueError("world size must be > 0")
        if self.movement_speed < 0.0:
            raise ValueError("movement_speed must be >= 0")
        if self.ball_radius < 0.0:
            raise ValueError("ball_radius must be >= 0")
        if self.fps <= 0:
            raise ValueError("fps must be > 0")
