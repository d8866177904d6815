"""Semantic input events produced from raw platform input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class EventKind(StrEnum):
    """Closed set of platform-independent input signals."""

    MOVE_UP = "MoveUp"
    MOVE_DOWN = "MoveDown"
    MOVE_LEFT = "MoveLeft"
    MOVE_RIGHT = "MoveRight"
    MENU_SELECT = "MenuSelect"
    MENU_BACK = "MenuBack"
    TOGGLE_INVENTORY = "ToggleInventory"
    TOGGLE_SHOP = "ToggleShop"
    TOGGLE_HELP = "ToggleHelp"
    CLICK = "Click"
    TOUCH = "Touch"
    ESCAPE = "Escape"
    ENTER = "Enter"

    @property
    def is_movement(self) -> bool:
        return self in MOVEMENT_KINDS

    @property
    def is_positional(self) -> bool:
        return self is EventKind.CLICK or self is EventKind.TOUCH


MOVEMENT_KINDS = frozenset(
    {EventKind.MOVE_UP, EventKind.MOVE_DOWN, EventKind.MOVE_LEFT, EventKind.MOVE_RIGHT}
)


@dataclass(frozen=True, slots=True)
class SemanticEvent:
    """One semantic event; click and touch events carry canvas coordinates."""

    kind: EventKind
    x: float | None = None
    y: float | None = None

    @classmethod
    def at(cls, kind: EventKind, x: float, y: float) -> SemanticEvent:
        return cls(kind=kind, x=x, y=y)
