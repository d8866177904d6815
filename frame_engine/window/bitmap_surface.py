"""CPU drawing surface over a numpy RGBA frame buffer."""

from __future__ import annotations

import logging
import math
from typing import cast

import numpy as np

from frame_engine.api.render import parse_hex_color

logger = logging.getLogger(__name__)


class BitmapSurface:
    """``DrawSurface`` implementation writing into an ``(h, w, 4)`` uint8 array.

    Text needs a font file; without one (or without freetype) text draws are
    skipped and everything else still renders.
    """

    def __init__(self, width: int, height: int, *, font_path: str = "") -> None:
        self._pixels = _allocate(width, height)
        self._face = _try_create_freetype_face(font_path)
        if font_path and self._face is None:
            logger.warning("bitmap_surface_font_unavailable path=%s", font_path)

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    @property
    def size(self) -> tuple[int, int]:
        height, width = self._pixels.shape[:2]
        return int(width), int(height)

    def resize(self, width: int, height: int) -> None:
        if (int(width), int(height)) == self.size:
            return
        self._pixels = _allocate(width, height)

    def clear(self, x: float, y: float, w: float, h: float) -> None:
        region = self._region(x, y, w, h)
        if region is not None:
            x0, y0, x1, y1 = region
            self._pixels[y0:y1, x0:x1] = 0

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        region = self._region(x, y, w, h)
        if region is not None:
            x0, y0, x1, y1 = region
            self._pixels[y0:y1, x0:x1] = parse_hex_color(color)

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        if radius <= 0.0:
            return
        region = self._region(x - radius, y - radius, radius * 2.0, radius * 2.0)
        if region is None:
            return
        x0, y0, x1, y1 = region
        rows, cols = np.ogrid[y0:y1, x0:x1]
        mask = (cols + 0.5 - x) ** 2 + (rows + 0.5 - y) ** 2 <= radius * radius
        self._pixels[y0:y1, x0:x1][mask] = parse_hex_color(color)

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        font_size: float = 18.0,
        color: str = "#ffffff",
    ) -> None:
        if self._face is None or not text:
            return
        rgba = np.array(parse_hex_color(color), dtype=np.float32)
        size_px = max(1, int(round(font_size)))
        pen_x = float(x)
        baseline = float(y) + size_px
        for character in text:
            glyph = _rasterize_glyph(self._face, character, size_px)
            if glyph is None:
                continue
            width, rows, left, top, advance, alpha = glyph
            if width and rows:
                self._blend(alpha, int(round(pen_x)) + left, int(round(baseline)) - top, rgba)
            pen_x += advance

    def _blend(self, alpha: np.ndarray, gx: int, gy: int, rgba: np.ndarray) -> None:
        rows, width = alpha.shape
        height_px, width_px = self._pixels.shape[:2]
        x0, y0 = max(0, gx), max(0, gy)
        x1, y1 = min(width_px, gx + width), min(height_px, gy + rows)
        if x0 >= x1 or y0 >= y1:
            return
        coverage = alpha[y0 - gy : y1 - gy, x0 - gx : x1 - gx, None].astype(np.float32) / 255.0
        coverage *= rgba[3] / 255.0
        dst = self._pixels[y0:y1, x0:x1].astype(np.float32)
        src = np.empty_like(dst)
        src[...] = rgba[:3].tolist() + [255.0]
        self._pixels[y0:y1, x0:x1] = (dst * (1.0 - coverage) + src * coverage).astype(np.uint8)

    def _region(self, x: float, y: float, w: float, h: float) -> tuple[int, int, int, int] | None:
        height_px, width_px = self._pixels.shape[:2]
        if not all(math.isfinite(v) for v in (x, y, w, h)):
            return None
        x0 = max(0, int(math.floor(x)))
        y0 = max(0, int(math.floor(y)))
        x1 = min(width_px, int(math.ceil(x + w)))
        y1 = min(height_px, int(math.ceil(y + h)))
        if x0 >= x1 or y0 >= y1:
            return None
        return x0, y0, x1, y1


def _allocate(width: int, height: int) -> np.ndarray:
    return np.zeros((max(1, int(height)), max(1, int(width)), 4), dtype=np.uint8)


def _try_create_freetype_face(font_path: str) -> object | None:
    if not font_path:
        return None
    try:
        import freetype

        return cast(object, freetype.Face(font_path))
    except Exception:
        return None


def _rasterize_glyph(
    face: object, character: str, size_px: int
) -> tuple[int, int, int, int, float, np.ndarray] | None:
    try:
        face.set_pixel_sizes(0, size_px)  # type: ignore[attr-defined]
        face.load_char(character)  # type: ignore[attr-defined]
        glyph = face.glyph  # type: ignore[attr-defined]
    except Exception:
        return None
    bitmap = glyph.bitmap
    width = int(bitmap.width)
    rows = int(bitmap.rows)
    pitch = int(bitmap.pitch) or width
    advance = float(glyph.advance.x) / 64.0
    if width <= 0 or rows <= 0:
        return (0, 0, 0, 0, max(advance, size_px * 0.3), np.zeros((0, 0), dtype=np.uint8))
    raw = np.frombuffer(bytes(bitmap.buffer), dtype=np.uint8)
    alpha = raw[: abs(pitch) * rows].reshape(rows, abs(pitch))[:, :width]
    if pitch < 0:
        alpha = alpha[::-1]
    return (width, rows, int(glyph.bitmap_left), int(glyph.bitmap_top), max(advance, float(width)), alpha)
