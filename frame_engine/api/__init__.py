"""Public engine API contracts."""

from frame_engine.api.flow import (
    FlowContext,
    FlowProgram,
    FlowTransition,
    create_flow_program,
)
from frame_engine.api.input_events import KeyEvent, PointerEvent, RawInputEvent, ResizeEvent
from frame_engine.api.logging import (
    EngineLoggingConfig,
    JsonFormatter,
    configure_logging,
)
from frame_engine.api.render import DrawSurface, parse_hex_color

__all__ = [
    "DrawSurface",
    "EngineLoggingConfig",
    "FlowContext",
    "FlowProgram",
    "FlowTransition",
    "JsonFormatter",
    "KeyEvent",
    "PointerEvent",
    "RawInputEvent",
    "ResizeEvent",
    "configure_logging",
    "create_flow_program",
    "parse_hex_color",
]
