from __future__ import annotations

import pytest

from canvas_rpg.app.config import GameConfig, MovementPolicy, StartMode
from canvas_rpg.app.controller import GameController


class FakeSurface:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def clear(self, x: float, y: float, w: float, h: float) -> None:
        self.calls.append(("clear", x, y, w, h))

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        self.calls.append(("fill_rect", x, y, w, h, color))

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        self.calls.append(("fill_circle", x, y, radius, color))

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        font_size: float = 18.0,
        color: str = "#ffffff",
    ) -> None:
        self.calls.append(("draw_text", text, x, y, font_size, color))

    def names(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def hud_controller() -> GameController:
    return GameController(GameConfig())


@pytest.fixture
def login_controller() -> GameController:
    return GameController(GameConfig(start_mode=StartMode.LOGIN))


@pytest.fixture
def active_play_config() -> GameConfig:
    return GameConfig(movement_policy=MovementPolicy.ACTIVE_PLAY)
