"""On-screen joystick and touch buttons routed through the translator."""

from __future__ import annotations

import math

from canvas_rpg.input.events import SemanticEvent
from canvas_rpg.input.translator import InputTranslator

DEFAULT_JOYSTICK_SIZE = 120.0
KNOB_RATIO = 0.4
DEAD_ZONE_RATIO = 0.3


def press_virtual_key(translator: InputTranslator, code: str) -> SemanticEvent | None:
    """Tap one key code (press then release), as the touch action buttons do."""
    event = translator.on_key_down(code)
    translator.on_key_up(code)
    return event


class VirtualJoystick:
    """Map knob drags around a centre point to one held arrow key."""

    def __init__(self, translator: InputTranslator, size: float = DEFAULT_JOYSTICK_SIZE) -> None:
        if size <= 0.0:
            raise ValueError("joystick size must be > 0")
        self._translator = translator
        self._size = float(size)
        self._active_code: str | None = None
        # False when the direction was already held, e.g. by a physical key.
        self._owns_press = False
        self._knob = (0.0, 0.0)
        self._dragging = False

    @property
    def max_travel(self) -> float:
        return (self._size - self._size * KNOB_RATIO) / 2.0

    @property
    def knob_offset(self) -> tuple[float, float]:
        return self._knob

    @property
    def active_code(self) -> str | None:
        return self._active_code

    def start(self, dx: float, dy: float) -> SemanticEvent | None:
        """Begin a drag at offset ``(dx, dy)`` from the joystick centre."""
        self._dragging = True
        return self._update(dx, dy)

    def move(self, dx: float, dy: float) -> SemanticEvent | None:
        if not self._dragging:
            return None
        return self._update(dx, dy)

    def end(self) -> None:
        """Recentre the knob and release the held direction."""
        self._dragging = False
        self._knob = (0.0, 0.0)
        self._switch_to(None)

    def _update(self, dx: float, dy: float) -> SemanticEvent | None:
        max_travel = self.max_travel
        distance = math.hypot(dx, dy)
        if distance > max_travel:
            dx = dx / distance * max_travel
            dy = dy / distance * max_travel
        self._knob = (dx, dy)
        threshold = max_travel * DEAD_ZONE_RATIO
        code: str | None = None
        if abs(dx) > threshold or abs(dy) > threshold:
            if abs(dx) > abs(dy):
                code = "ArrowRight" if dx > 0 else "ArrowLeft"
            else:
                code = "ArrowDown" if dy > 0 else "ArrowUp"
        return self._switch_to(code)

    def _switch_to(self, code: str | None) -> SemanticEvent | None:
        if code == self._active_code:
            return None
        if self._active_code is not None and self._owns_press:
            self._translator.on_key_up(self._active_code)
        self._active_code = code
        self._owns_press = False
        if code is None:
            return None
        event = self._translator.on_key_down(code)
        self._owns_press = event is not None
        return event
