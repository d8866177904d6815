from __future__ import annotations

from canvas_rpg.app.controller import GameController
from canvas_rpg.app.render import BACKGROUND_COLOR, BALL_COLOR, PLAYER_COLOR


def test_hud_draws_world_without_title(hud_controller: GameController, surface) -> None:
    hud_controller.render(surface)
    assert surface.calls == [
        ("clear", 0.0, 0.0, 800.0, 600.0),
        ("fill_rect", 0.0, 0.0, 800.0, 600.0, BACKGROUND_COLOR),
        ("fill_circle", 400.0, 300.0, 25.0, BALL_COLOR),
        ("fill_circle", 400.0, 300.0, 15.0, PLAYER_COLOR),
    ]


def test_overlay_draws_world_and_title(hud_controller: GameController, surface) -> None:
    hud_controller.handle_input("keydown", "KeyI")
    hud_controller.render(surface)
    assert surface.names() == ["clear", "fill_rect", "fill_circle", "fill_circle", "draw_text"]
    assert surface.calls[-1][1] == "Inventory"


def test_menu_screens_hide_world(login_controller: GameController, surface) -> None:
    login_controller.render(surface)
    assert surface.names() == ["clear", "fill_rect", "draw_text"]
    assert surface.calls[-1][1] == "Login"
