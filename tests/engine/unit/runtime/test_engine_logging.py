from __future__ import annotations

import json
import logging

from frame_engine.api.logging import EngineLoggingConfig, JsonFormatter
from frame_engine.runtime.logging import configure_engine_logging, shutdown_engine_logging


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("frame.test", logging.INFO, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_emits_core_keys_and_extras() -> None:
    payload = json.loads(JsonFormatter().format(_record("frame_ok", frame_index=3)))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "frame.test"
    assert payload["msg"] == "frame_ok"
    assert payload["fields"] == {"frame_index": 3}
    assert "ts" in payload


def test_json_formatter_omits_fields_without_extras() -> None:
    payload = json.loads(JsonFormatter().format(_record("plain")))
    assert "fields" not in payload


def test_configure_engine_logging_streams_to_file(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "logs" / "run.jsonl"
    try:
        configure_engine_logging(
            EngineLoggingConfig(level_name="debug", file_path=str(log_file), file_format="json")
        )
        assert root.level == logging.DEBUG
        logging.getLogger("frame.test").info("file_line value=%d", 7)
        shutdown_engine_logging()
        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["msg"] == "file_line value=7"
    finally:
        shutdown_engine_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_configure_engine_logging_console_only_replaces_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.addHandler(logging.NullHandler())
        configure_engine_logging(EngineLoggingConfig(level_name="WARNING"))
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)
