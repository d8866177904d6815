"""App-level logging policy over engine logging API."""

from __future__ import annotations

import os

from frame_engine.api.logging import EngineLoggingConfig, JsonFormatter, configure_logging

__all__ = ["JsonFormatter", "build_logging_config", "setup_logging"]


def build_logging_config() -> EngineLoggingConfig:
    """Resolve logging configuration from environment."""
    level_name = os.getenv("CANVAS_RPG_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).upper()
    console_format = os.getenv("LOG_FORMAT", "json").strip().lower()
    file_path = os.getenv("CANVAS_RPG_LOG_FILE", "").strip() or None
    return EngineLoggingConfig(
        level_name=level_name,
        console_format=console_format,
        file_path=file_path,
        file_format="json",
    )


def setup_logging() -> None:
    """Configure application logging via engine logging API."""
    configure_logging(build_logging_config())
