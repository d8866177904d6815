"""Game controller facade consumed by the surrounding UI layer and host window."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable, Mapping, Sequence

from canvas_rpg.app.config import GameConfig
from canvas_rpg.app.render import render_frame
from canvas_rpg.app.screen_machine import ScreenStateMachine
from canvas_rpg.app.session import SessionSnapshot, create_session, snapshot_session
from canvas_rpg.app.simulation import SimulationStep, resize_world
from canvas_rpg.core.models import Screen, parse_region, parse_screen
from canvas_rpg.input.events import SemanticEvent
from canvas_rpg.input.key_codes import normalize_key_code
from canvas_rpg.input.translator import InputTranslator
from canvas_rpg.input.virtual_controls import press_virtual_key
from frame_engine.api.render import DrawSurface

logger = logging.getLogger(__name__)


def parse_coordinates(payload: object) -> tuple[float, float] | None:
    """Read ``(x, y)`` from JSON text ``"[x, y]"``, a pair, or an ``x``/``y`` mapping."""
    value = payload
    if isinstance(value, (str, bytes)):
        try:
            value = json.loads(value)
        except (ValueError, RecursionError):
            return None
    if isinstance(value, Mapping):
        value = (value.get("x"), value.get("y"))
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)) or len(value) != 2:
        return None
    x, y = value
    if isinstance(x, bool) or isinstance(y, bool):
        return None
    if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
        return None
    try:
        fx, fy = float(x), float(y)
    except OverflowError:
        return None
    if not (math.isfinite(fx) and math.isfinite(fy)):
        return None
    return fx, fy


class GameController:
    """Wire input translation, screen flow and simulation around one session.

    All mutation happens on the caller's thread; input callbacks and the frame
    tick must be serialized by the host.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config if config is not None else GameConfig()
        self._session = create_session(self._config)
        self._input = InputTranslator(self._config.movement_speed)
        self._screens = ScreenStateMachine(self._session, self._config)
        self._simulation = SimulationStep(self._config)
        self._handlers: dict[str, Callable[[object], bool]] = {
            "keydown": self._on_key_down,
            "keyup": self._on_key_up,
            "mouseclick": self._on_click,
            "click": self._on_click,
            "touch": self._on_touch,
            "touchstart": self._on_touch,
            "touchend": self._on_touch_end,
            "mousedown": self._on_pointer_down,
            "mousemove": self._on_pointer_move,
            "mouseup": self._on_pointer_up,
        }
        logger.info(
            "game_controller_ready width=%.0f height=%.0f start_mode=%s movement_policy=%s",
            self._config.world_width,
            self._config.world_height,
            self._config.start_mode.value,
            self._config.movement_policy.value,
        )

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def input(self) -> InputTranslator:
        return self._input

    def current_screen(self) -> Screen:
        return self._session.screen

    def snapshot(self) -> SessionSnapshot:
        return snapshot_session(self._session)

    def handle_input(self, event_type: str, payload: object = None) -> bool:
        """Route one host input event. Returns whether the screen flow consumed it."""
        handler = self._handlers.get(event_type)
        if handler is None:
            logger.debug("input_event_type_unknown type=%s", event_type)
            return False
        return handler(payload)

    def dispatch(self, event: SemanticEvent | None) -> bool:
        """Apply one semantic event to the screen flow."""
        if event is None:
            return False
        return self._screens.apply(event)

    def tap_virtual_key(self, code: str) -> bool:
        """Handle one on-screen button tap (press then release of ``code``)."""
        return self.dispatch(press_virtual_key(self._input, code))

    def update(self) -> None:
        """Run one simulation frame."""
        self._simulation.step(self._session, self._input)

    def render(self, surface: DrawSurface) -> None:
        render_frame(
            surface,
            self._session,
            ball_radius=self._simulation.ball_radius,
            player_radius=self._config.player_radius,
        )

    def resize(self, width: float, height: float) -> bool:
        return resize_world(self._session, width, height)

    def reset(self) -> None:
        self._screens.reset()
        self._input.reset()
        logger.info("session_reset screen=%s", self._session.screen.value)

    def release_input(self) -> None:
        """Drop held movement keys, e.g. when the host window loses focus."""
        self._input.release_all()

    def transition_to(self, screen_name: str) -> bool:
        """Jump to a screen by name; unknown or disabled names are ignored."""
        screen = parse_screen(screen_name)
        if screen is None:
            logger.debug("screen_name_unknown name=%s", screen_name)
            return False
        return self._screens.transition_to(screen)

    def set_player_name(self, name: str) -> None:
        self._screens.set_player_name(name)

    def set_region(self, region_name: str) -> bool:
        region = parse_region(region_name)
        if region is None:
            logger.debug("region_name_unknown name=%s", region_name)
            return False
        self._screens.set_region(region)
        return True

    def set_loading(self, loading: bool) -> None:
        self._screens.set_loading(loading)

    def set_error(self, message: str) -> None:
        self._screens.set_error(message)

    def clear_error(self) -> None:
        self._screens.clear_error()

    def player_position(self) -> tuple[float, float]:
        return self._session.player_x, self._session.player_y

    def ball_position(self) -> tuple[float, float]:
        return self._session.ball.x, self._session.ball.y

    def ball_velocity(self) -> tuple[float, float]:
        return self._session.ball.dx, self._session.ball.dy

    def is_player_moving(self) -> bool:
        return self._input.is_moving()

    def _on_key_down(self, payload: object) -> bool:
        if not isinstance(payload, str):
            logger.warning("input_payload_malformed type=keydown payload=%r", payload)
            return False
        event = self._input.on_key_down(normalize_key_code(payload))
        if event is None:
            return False
        return self._screens.apply(event)

    def _on_key_up(self, payload: object) -> bool:
        if not isinstance(payload, str):
            logger.warning("input_payload_malformed type=keyup payload=%r", payload)
            return False
        self._input.on_key_up(normalize_key_code(payload))
        return False

    def _on_click(self, payload: object) -> bool:
        coords = self._coordinates("mouseclick", payload)
        if coords is None:
            return False
        return self._screens.apply(self._input.on_click(*coords))

    def _on_touch(self, payload: object) -> bool:
        coords = self._coordinates("touch", payload)
        if coords is None:
            return False
        return self._screens.apply(self._input.on_touch(*coords))

    def _on_touch_end(self, payload: object) -> bool:
        _ = payload
        logger.debug("input_touch_end")
        return False

    def _on_pointer_down(self, payload: object) -> bool:
        coords = self._coordinates("mousedown", payload)
        if coords is not None:
            self._input.on_pointer_down(*coords)
        return False

    def _on_pointer_move(self, payload: object) -> bool:
        coords = self._coordinates("mousemove", payload)
        if coords is not None:
            self._input.on_pointer_move(*coords)
        return False

    def _on_pointer_up(self, payload: object) -> bool:
        coords = self._coordinates("mouseup", payload)
        if coords is not None:
            self._input.on_pointer_up(*coords)
        return False

    @staticmethod
    def _coordinates(event_type: str, payload: object) -> tuple[float, float] | None:
        coords = parse_coordinates(payload)
        if coords is None:
            logger.warning("input_payload_malformed type=%s payload=%r", event_type, payload)
        return coords
