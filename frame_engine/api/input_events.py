"""Public raw input event types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Raw pointer event in canvas coordinates."""

    event_type: str
    x: float
    y: float
    button: int
    is_touch: bool = False


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Raw key event carrying the host key identifier."""

    event_type: str
    value: str


@dataclass(frozen=True, slots=True)
class ResizeEvent:
    """Logical canvas size change."""

    width: float
    height: float


type RawInputEvent = PointerEvent | KeyEvent | ResizeEvent

__all__ = ["KeyEvent", "PointerEvent", "RawInputEvent", "ResizeEvent"]
