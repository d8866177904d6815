"""Core domain models shared by input, screen flow and simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

DEFAULT_PLAYER_NAME = "Player"


class Screen(StrEnum):
    """Screens of the game front end. Exactly one is current."""

    LOGIN = "Login"
    SERVER_SELECT = "ServerSelect"
    MAIN_MENU = "MainMenu"
    HUD = "HUD"
    INVENTORY = "Inventory"
    SHOP = "Shop"
    HELP_MODAL = "HelpModal"

    @property
    def is_overlay(self) -> bool:
        return self in OVERLAY_SCREENS

    @property
    def is_menu(self) -> bool:
        return self in MENU_SCREENS

    @property
    def shows_world(self) -> bool:
        """Whether the game world is visible (HUD or an overlay drawn above it)."""
        return self is Screen.HUD or self in OVERLAY_SCREENS


OVERLAY_SCREENS = frozenset({Screen.INVENTORY, Screen.SHOP, Screen.HELP_MODAL})
MENU_SCREENS = frozenset({Screen.LOGIN, Screen.SERVER_SELECT, Screen.MAIN_MENU})

_SCREEN_ALIASES: dict[str, Screen] = {
    "LoginScreen": Screen.LOGIN,
    "ServerSelection": Screen.SERVER_SELECT,
    "GameHUD": Screen.HUD,
}


class Region(StrEnum):
    """Cosmetic server region."""

    EU = "EU"
    ASIA = "Asia"
    VIETNAM = "Vietnam"


def parse_screen(name: str) -> Screen | None:
    """Resolve a canonical or legacy screen name; unknown names give ``None``."""
    try:
        return Screen(name)
    except ValueError:
        return _SCREEN_ALIASES.get(name)


def parse_region(name: str) -> Region | None:
    try:
        return Region(name)
    except ValueError:
        return None


@dataclass(slots=True)
class BallState:
    """Legacy bouncing ball position and velocity."""

    x: float
    y: float
    dx: float
    dy: float

    def speed(self) -> float:
        return math.hypot(self.dx, self.dy)


@dataclass(slots=True)
class SessionState:
    """Mutable per-session aggregate owned by the frame driver."""

    screen: Screen
    region: Region | None
    player_name: str | None
    world_width: float
    world_height: float
    player_x: float
    player_y: float
    ball: BallState
    is_loading: bool = False
    error_message: str | None = None


@dataclass(slots=True)
class InputState:
    """Held movement flags and last known pointer state."""

    move_up: bool = False
    move_down: bool = False
    move_left: bool = False
    move_right: bool = False
    pointer_x: float = 0.0
    pointer_y: float = 0.0
    pointer_down: bool = False

    def any_held(self) -> bool:
        return self.move_up or self.move_down or self.move_left or self.move_right
