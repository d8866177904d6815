from __future__ import annotations

import pytest

from canvas_rpg.input.events import EventKind
from canvas_rpg.input.key_codes import ACTION_KEYS, MOVEMENT_KEYS, normalize_key_code


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("w", "KeyW"),
        ("W", "KeyW"),
        ("d", "KeyD"),
        ("i", "KeyI"),
        ("h", "KeyH"),
        (" ", "Space"),
        ("ArrowUp", "ArrowUp"),
        ("Escape", "Escape"),
        ("z", "z"),
    ],
)
def test_normalize_key_code(raw: str, expected: str) -> None:
    assert normalize_key_code(raw) == expected


def test_key_tables_do_not_overlap() -> None:
    assert not set(MOVEMENT_KEYS) & set(ACTION_KEYS)
    assert all(kind.is_movement for kind in MOVEMENT_KEYS.values())
    assert not any(kind.is_movement for kind in ACTION_KEYS.values())


def test_positional_kinds() -> None:
    assert EventKind.CLICK.is_positional
    assert EventKind.TOUCH.is_positional
    assert not EventKind.ENTER.is_positional
