"""Host wiring: canvas input routing and the window frame callback."""

from __future__ import annotations

import logging

from canvas_rpg.app.controller import GameController
from canvas_rpg.app.frame_driver import FrameDriver
from frame_engine.api.input_events import KeyEvent, PointerEvent, RawInputEvent, ResizeEvent
from frame_engine.window.bitmap_surface import BitmapSurface
from frame_engine.window.canvas_input import CanvasInputQueue

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Canvas RPG"


def route_raw_event(controller: GameController, raw: RawInputEvent) -> bool:
    """Forward one normalized host event to the controller."""
    if isinstance(raw, KeyEvent):
        event_type = "keydown" if raw.event_type == "key_down" else "keyup"
        return controller.handle_input(event_type, raw.value)
    if isinstance(raw, ResizeEvent):
        controller.resize(raw.width, raw.height)
        return False
    return _route_pointer(controller, raw)


def _route_pointer(controller: GameController, raw: PointerEvent) -> bool:
    coords = (raw.x, raw.y)
    if raw.is_touch:
        if raw.event_type == "pointer_down":
            return controller.handle_input("touch", coords)
        if raw.event_type == "pointer_up":
            return controller.handle_input("touchend", coords)
        return controller.handle_input("mousemove", coords)
    if raw.event_type == "pointer_down":
        return controller.handle_input("mousedown", coords)
    if raw.event_type == "pointer_move":
        return controller.handle_input("mousemove", coords)
    controller.handle_input("mouseup", coords)
    if raw.button == 1:
        return controller.handle_input("mouseclick", coords)
    return False


class GameHost:
    """Drain queued input, tick the driver and hand the frame to a presenter."""

    def __init__(
        self,
        controller: GameController,
        surface: BitmapSurface,
        queue: CanvasInputQueue,
        *,
        driver: FrameDriver | None = None,
    ) -> None:
        self._controller = controller
        self._surface = surface
        self._queue = queue
        self._driver = driver if driver is not None else FrameDriver(controller, surface)

    @property
    def driver(self) -> FrameDriver:
        return self._driver

    def frame(self) -> bool:
        """Process one host frame. Returns whether a new frame was drawn."""
        for raw in self._queue.drain():
            if isinstance(raw, ResizeEvent):
                if self._controller.resize(raw.width, raw.height):
                    self._surface.resize(int(raw.width), int(raw.height))
                continue
            route_raw_event(self._controller, raw)
        return self._driver.tick() is not None


def run_window(controller: GameController) -> None:
    """Open a desktop window and run the game until it is closed."""
    from frame_engine.window.rendercanvas_window import BitmapWindow

    config = controller.config
    width, height = int(config.world_width), int(config.world_height)
    window = BitmapWindow(width=width, height=height, title=WINDOW_TITLE, max_fps=float(config.fps))
    surface = BitmapSurface(width, height, font_path=config.font_path)
    queue = CanvasInputQueue()
    queue.bind(window.canvas)
    host = GameHost(controller, surface, queue)

    def draw_frame() -> None:
        if host.frame():
            window.present(surface.pixels)

    window.run(draw_frame)
    logger.info("window_closed frames=%d", host.driver.frame_index)
