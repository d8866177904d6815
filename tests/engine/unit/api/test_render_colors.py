from __future__ import annotations

import pytest

from frame_engine.api.render import parse_hex_color


def test_parse_hex_color_supported_forms() -> None:
    assert parse_hex_color("#4fc3f7") == (79, 195, 247, 255)
    assert parse_hex_color("#fff") == (255, 255, 255, 255)
    assert parse_hex_color("#ff6b6b80") == (255, 107, 107, 128)


@pytest.mark.parametrize("color", ["", "#12", "#ggg", "red", "#1234567"])
def test_parse_hex_color_rejects_unsupported(color: str) -> None:
    with pytest.raises(ValueError):
        parse_hex_color(color)
