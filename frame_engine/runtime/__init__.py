"""Engine runtime modules."""

from frame_engine.runtime.flow import FlowProgram, RuntimeFlowProgram
from frame_engine.runtime.logging import configure_engine_logging, shutdown_engine_logging
from frame_engine.runtime.time import FrameClock, TimeContext

__all__ = [
    "FlowProgram",
    "FrameClock",
    "RuntimeFlowProgram",
    "TimeContext",
    "configure_engine_logging",
    "shutdown_engine_logging",
]
