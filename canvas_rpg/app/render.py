"""Frame rendering from session state onto a drawing surface."""

from __future__ import annotations

from canvas_rpg.core.models import Screen, SessionState
from frame_engine.api.render import DrawSurface

BACKGROUND_COLOR = "#1e1e1e"
BALL_COLOR = "#4fc3f7"
PLAYER_COLOR = "#ff6b6b"
TITLE_COLOR = "#ffffff"
TITLE_FONT_SIZE = 24.0

SCREEN_TITLES: dict[Screen, str] = {
    Screen.LOGIN: "Login",
    Screen.SERVER_SELECT: "Select Server",
    Screen.MAIN_MENU: "Main Menu",
    Screen.INVENTORY: "Inventory",
    Screen.SHOP: "Shop",
    Screen.HELP_MODAL: "Help",
}


def render_frame(
    surface: DrawSurface,
    session: SessionState,
    *,
    ball_radius: float,
    player_radius: float,
) -> None:
    """Issue the draw calls for one frame."""
    width = session.world_width
    height = session.world_height
    surface.clear(0.0, 0.0, width, height)
    surface.fill_rect(0.0, 0.0, width, height, BACKGROUND_COLOR)
    if session.screen.shows_world:
        surface.fill_circle(session.ball.x, session.ball.y, ball_radius, BALL_COLOR)
        surface.fill_circle(session.player_x, session.player_y, player_radius, PLAYER_COLOR)
    title = SCREEN_TITLES.get(session.screen)
    if title is not None:
        surface.draw_text(title, 16.0, 16.0, TITLE_FONT_SIZE, TITLE_COLOR)
