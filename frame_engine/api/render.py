"""Drawing-surface contract consumed by frame renderers."""

from __future__ import annotations

from typing import Protocol


class DrawSurface(Protocol):
    """Primitive 2D drawing capabilities of a canvas-like backend."""

    def clear(self, x: float, y: float, w: float, h: float) -> None:
        """Clear a rectangular region to transparent."""

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        """Fill an axis-aligned rectangle."""

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        """Fill a circle centred at ``(x, y)``."""

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        font_size: float = 18.0,
        color: str = "#ffffff",
    ) -> None:
        """Draw one line of text with its top-left corner at ``(x, y)``."""


def parse_hex_color(color: str) -> tuple[int, int, int, int]:
    """Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` into an RGBA byte tuple."""
    value = color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) == 6:
        value = f"{value}ff"
    if len(value) != 8:
        raise ValueError(f"unsupported color: {color!r}")
    try:
        return (
            int(value[0:2], 16),
            int(value[2:4], 16),
            int(value[4:6], 16),
            int(value[6:8], 16),
        )
    except ValueError as exc:
        raise ValueError(f"unsupported color: {color!r}") from exc
