"""Raw key, pointer and touch input mapping to semantic game events."""

from __future__ import annotations

import logging
from dataclasses import replace

from canvas_rpg.core.models import InputState
from canvas_rpg.input.events import EventKind, SemanticEvent
from canvas_rpg.input.key_codes import ACTION_KEYS, MOVEMENT_KEYS

logger = logging.getLogger(__name__)

DEFAULT_MOVEMENT_SPEED = 5.0

_HELD_FLAGS: dict[EventKind, str] = {
    EventKind.MOVE_UP: "move_up",
    EventKind.MOVE_DOWN: "move_down",
    EventKind.MOVE_LEFT: "move_left",
    EventKind.MOVE_RIGHT: "move_right",
}


class InputTranslator:
    """Translate canonical host input codes into semantic events.

    Owns the held-movement state read every frame by the simulation step.
    Handlers never raise on unknown input; they report ``None`` instead.
    """

    def __init__(self, movement_speed: float = DEFAULT_MOVEMENT_SPEED) -> None:
        self._state = InputState()
        self._movement_speed = 0.0
        self.set_movement_speed(movement_speed)

    @property
    def movement_speed(self) -> float:
        return self._movement_speed

    def set_movement_speed(self, speed: float) -> None:
        if speed < 0.0:
            raise ValueError("movement speed must be >= 0")
        self._movement_speed = float(speed)

    def state(self) -> InputState:
        """Return a copy of the current input state."""
        return replace(self._state)

    def on_key_down(self, code: str) -> SemanticEvent | None:
        """Handle a key press. Directional events fire once per press."""
        movement = MOVEMENT_KEYS.get(code)
        if movement is not None:
            flag = _HELD_FLAGS[movement]
            if getattr(self._state, flag):
                return None
            setattr(self._state, flag, True)
            return SemanticEvent(movement)
        action = ACTION_KEYS.get(code)
        if action is None:
            logger.debug("input_key_ignored code=%s", code)
            return None
        return SemanticEvent(action)

    def on_key_up(self, code: str) -> None:
        movement = MOVEMENT_KEYS.get(code)
        if movement is not None:
            setattr(self._state, _HELD_FLAGS[movement], False)

    def release_all(self) -> None:
        """Clear every held movement flag."""
        self._state.move_up = False
        self._state.move_down = False
        self._state.move_left = False
        self._state.move_right = False

    def on_pointer_down(self, x: float, y: float) -> None:
        self._state.pointer_down = True
        self._record_pointer(x, y)

    def on_pointer_move(self, x: float, y: float) -> None:
        self._record_pointer(x, y)

    def on_pointer_up(self, x: float, y: float) -> None:
        self._state.pointer_down = False
        self._record_pointer(x, y)

    def on_click(self, x: float, y: float) -> SemanticEvent:
        self._record_pointer(x, y)
        return SemanticEvent.at(EventKind.CLICK, x, y)

    def on_touch(self, x: float, y: float) -> SemanticEvent:
        self._record_pointer(x, y)
        return SemanticEvent.at(EventKind.TOUCH, x, y)

    def movement_delta(self) -> tuple[float, float]:
        """Sum ``+-speed`` per held direction on each axis (not normalized)."""
        speed = self._movement_speed
        dx = 0.0
        dy = 0.0
        if self._state.move_left:
            dx -= speed
        if self._state.move_right:
            dx += speed
        if self._state.move_up:
            dy -= speed
        if self._state.move_down:
            dy += speed
        return dx, dy

    def is_moving(self) -> bool:
        return self._state.any_held()

    def reset(self) -> None:
        """Restore initial input state, keeping the configured speed."""
        self._state = InputState()

    def _record_pointer(self, x: float, y: float) -> None:
        self._state.pointer_x = x
        self._state.pointer_y = y
