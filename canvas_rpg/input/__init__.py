"""Input translation from host codes to semantic events."""

from canvas_rpg.input.events import EventKind, SemanticEvent
from canvas_rpg.input.key_codes import normalize_key_code
from canvas_rpg.input.translator import InputTranslator
from canvas_rpg.input.virtual_controls import VirtualJoystick, press_virtual_key

__all__ = [
    "EventKind",
    "InputTranslator",
    "SemanticEvent",
    "VirtualJoystick",
    "normalize_key_code",
    "press_virtual_key",
]
