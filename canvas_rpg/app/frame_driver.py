"""Update-then-render frame driver."""

from __future__ import annotations

import logging

from canvas_rpg.app.controller import GameController
from frame_engine.api.render import DrawSurface
from frame_engine.runtime.time import FrameClock, TimeContext

logger = logging.getLogger(__name__)


class FrameDriver:
    """Advance the controller once per host tick and draw the result."""

    def __init__(
        self,
        controller: GameController,
        surface: DrawSurface,
        *,
        clock: FrameClock | None = None,
    ) -> None:
        self._controller = controller
        self._surface = surface
        self._clock = clock if clock is not None else FrameClock()
        self._frame_index = 0
        self._running = True

    @property
    def running(self) -> bool:
        return self._running

    @property
    def frame_index(self) -> int:
        return self._frame_index

    def stop(self) -> None:
        self._running = False

    def resume(self) -> None:
        if self._running:
            return
        self._clock.reset()
        self._running = True

    def tick(self) -> TimeContext | None:
        """Run one frame. A failing frame stops the driver and re-raises."""
        if not self._running:
            return None
        time_ctx = self._clock.next(self._frame_index)
        try:
            self._controller.update()
            self._controller.render(self._surface)
        except Exception as exc:
            self._running = False
            self._controller.set_error(f"Game loop error: {exc}")
            logger.exception(
                "frame_failed frame_index=%d screen=%s",
                self._frame_index,
                self._controller.current_screen().value,
            )
            raise
        self._frame_index += 1
        return time_ctx
