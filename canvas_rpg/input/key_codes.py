"""Host key-code tables and normalization."""

from __future__ import annotations

from canvas_rpg.input.events import EventKind

MOVEMENT_KEYS: dict[str, EventKind] = {
    "KeyW": EventKind.MOVE_UP,
    "ArrowUp": EventKind.MOVE_UP,
    "KeyS": EventKind.MOVE_DOWN,
    "ArrowDown": EventKind.MOVE_DOWN,
    "KeyA": EventKind.MOVE_LEFT,
    "ArrowLeft": EventKind.MOVE_LEFT,
    "KeyD": EventKind.MOVE_RIGHT,
    "ArrowRight": EventKind.MOVE_RIGHT,
}

ACTION_KEYS: dict[str, EventKind] = {
    "KeyI": EventKind.TOGGLE_INVENTORY,
    "KeyT": EventKind.TOGGLE_SHOP,
    "KeyH": EventKind.TOGGLE_HELP,
    "F1": EventKind.TOGGLE_HELP,
    "Enter": EventKind.ENTER,
    "Escape": EventKind.ESCAPE,
    "Space": EventKind.MENU_SELECT,
    "Backspace": EventKind.MENU_BACK,
}

_LETTER_CODES = frozenset("wasdith")


def normalize_key_code(code: str) -> str:
    """Map key values (``"w"``, ``" "``) to canonical codes; pass others through."""
    if code == " ":
        return "Space"
    if len(code) == 1 and code.lower() in _LETTER_CODES:
        return f"Key{code.upper()}"
    return code
