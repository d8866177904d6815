"""Rendercanvas-backed window presenting a bitmap every frame."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import numpy as np

try:
    import rendercanvas.auto as rc_auto
except Exception as exc:  # pragma: no cover - missing GUI backend
    rc_auto = None
    _canvas_import_error: Exception | None = exc
else:
    _canvas_import_error = None

logger = logging.getLogger(__name__)


class BitmapWindow:
    """Desktop window whose frames are numpy RGBA bitmaps."""

    def __init__(self, *, width: int, height: int, title: str, max_fps: float) -> None:
        if rc_auto is None:
            raise RuntimeError(
                "Render canvas backend unavailable. Install a desktop backend such as 'glfw'. "
                f"Original error: {_canvas_import_error!r}"
            )
        canvas_cls = getattr(rc_auto, "RenderCanvas", None)
        if canvas_cls is None:
            raise RuntimeError("rendercanvas.auto did not expose RenderCanvas.")
        self.canvas: Any = canvas_cls(
            size=(width, height),
            title=title,
            update_mode="continuous",
            max_fps=max_fps,
        )
        self._context = self.canvas.get_context("bitmap")
        logger.info("window_opened width=%d height=%d max_fps=%.1f", width, height, max_fps)

    def present(self, pixels: np.ndarray) -> None:
        self._context.set_bitmap(pixels)

    def run(self, draw_frame: Callable[[], None]) -> None:
        """Block in the canvas event loop, calling ``draw_frame`` per frame."""
        self.canvas.request_draw(draw_frame)
        rc_auto.loop.run()

    def close(self) -> None:
        self.canvas.close()
