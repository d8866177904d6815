from __future__ import annotations

import numpy as np

from frame_engine.window.bitmap_surface import BitmapSurface


def test_fill_rect_writes_rgba_bytes() -> None:
    surface = BitmapSurface(20, 10)
    surface.fill_rect(0, 0, 20, 10, "#1e1e1e")
    assert surface.size == (20, 10)
    assert tuple(surface.pixels[5, 5]) == (30, 30, 30, 255)


def test_fill_circle_covers_centre_not_corners() -> None:
    surface = BitmapSurface(40, 40)
    surface.fill_circle(20, 20, 10, "#4fc3f7")
    assert tuple(surface.pixels[20, 20]) == (79, 195, 247, 255)
    assert tuple(surface.pixels[11, 11]) == (0, 0, 0, 0)
    assert tuple(surface.pixels[0, 0]) == (0, 0, 0, 0)


def test_clear_resets_region_to_transparent() -> None:
    surface = BitmapSurface(10, 10)
    surface.fill_rect(0, 0, 10, 10, "#ffffff")
    surface.clear(0, 0, 5, 10)
    assert tuple(surface.pixels[0, 0]) == (0, 0, 0, 0)
    assert tuple(surface.pixels[0, 9]) == (255, 255, 255, 255)


def test_out_of_bounds_and_non_finite_draws_are_ignored() -> None:
    surface = BitmapSurface(10, 10)
    surface.fill_rect(50, 50, 5, 5, "#ffffff")
    surface.fill_circle(float("nan"), 5, 3, "#ffffff")
    surface.fill_circle(5, 5, 0, "#ffffff")
    assert not surface.pixels.any()


def test_draw_text_without_font_is_a_no_op() -> None:
    surface = BitmapSurface(50, 20)
    surface.draw_text("Login", 2, 2)
    assert not surface.pixels.any()


def test_resize_reallocates_buffer() -> None:
    surface = BitmapSurface(10, 10)
    surface.fill_rect(0, 0, 10, 10, "#ffffff")
    surface.resize(30, 15)
    assert surface.pixels.shape == (15, 30, 4)
    assert surface.pixels.dtype == np.uint8
    assert not surface.pixels.any()
