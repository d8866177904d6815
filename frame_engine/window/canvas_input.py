"""Canvas event capture into a frame-drained raw input queue."""

from __future__ import annotations

import logging
import math
from collections import deque
from collections.abc import Mapping
from typing import Any

from frame_engine.api.input_events import KeyEvent, PointerEvent, RawInputEvent, ResizeEvent

logger = logging.getLogger(__name__)

CANVAS_EVENT_TYPES: tuple[str, ...] = (
    "key_down",
    "key_up",
    "pointer_down",
    "pointer_move",
    "pointer_up",
    "resize",
)


def canvas_event_to_raw(event: Mapping[str, Any]) -> RawInputEvent | None:
    """Normalize one rendercanvas-style event dict; malformed events give ``None``."""
    event_type = event.get("event_type")
    if event_type in {"key_down", "key_up"}:
        key = event.get("key")
        if not isinstance(key, str) or not key:
            return None
        return KeyEvent(str(event_type), key)
    if event_type in {"pointer_down", "pointer_move", "pointer_up"}:
        x = event.get("x")
        y = event.get("y")
        if not _finite(x) or not _finite(y):
            return None
        button = event.get("button")
        ntouches = event.get("ntouches")
        return PointerEvent(
            str(event_type),
            float(x),
            float(y),
            button if isinstance(button, int) else 0,
            is_touch=isinstance(ntouches, int) and ntouches > 0,
        )
    if event_type == "resize":
        width = event.get("width")
        height = event.get("height")
        if not _finite(width) or not _finite(height):
            return None
        return ResizeEvent(float(width), float(height))
    return None


def _finite(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


class CanvasInputQueue:
    """Collect canvas events between frames for draining on the frame thread."""

    def __init__(self) -> None:
        self._events: deque[RawInputEvent] = deque()

    def bind(self, canvas: Any) -> None:
        """Attach handlers to a canvas exposing ``add_event_handler``."""
        if not hasattr(canvas, "add_event_handler"):
            raise RuntimeError("Canvas does not support event handlers.")
        canvas.add_event_handler(self._on_event, *CANVAS_EVENT_TYPES)

    def push(self, event: Mapping[str, Any]) -> bool:
        raw = canvas_event_to_raw(event)
        if raw is None:
            logger.debug("canvas_event_dropped type=%s", event.get("event_type"))
            return False
        self._events.append(raw)
        return True

    def drain(self) -> list[RawInputEvent]:
        """Return and clear queued events in arrival order."""
        items = list(self._events)
        self._events.clear()
        return items

    def _on_event(self, event: dict[str, Any]) -> None:
        self.push(event)
