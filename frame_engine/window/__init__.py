"""Host window layer: canvas input capture and bitmap presentation."""

from frame_engine.window.bitmap_surface import BitmapSurface
from frame_engine.window.canvas_input import CanvasInputQueue, canvas_event_to_raw

__all__ = ["BitmapSurface", "CanvasInputQueue", "canvas_event_to_raw"]
