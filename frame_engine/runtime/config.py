"""Tolerant environment readers shared by runtime configuration loaders.

Every reader takes an optional ``env`` mapping so loaders can be exercised
without touching the process environment. Unparseable values fall back to the
default instead of raising.
"""

from __future__ import annotations

import math
import os
from typing import Mapping


def read_raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def read_int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = read_raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def read_float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = read_raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
        if not math.isfinite(value):
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def read_text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = read_raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def read_float_pair(
    name: str,
    default: tuple[float, float],
    *,
    separators: tuple[str, ...] = (",", "x", ":"),
    env: Mapping[str, str] | None = None,
) -> tuple[float, float]:
    """Read two numbers such as ``800x600`` or ``3,2``."""
    raw = read_raw(name, env=env)
    if raw is None:
        return default
    normalized = raw.strip().lower().replace(" ", "")
    for sep in separators:
        if sep not in normalized:
            continue
        left, right = normalized.split(sep, 1)
        try:
            pair = (float(left), float(right))
        except ValueError:
            return default
        if not all(math.isfinite(item) for item in pair):
            return default
        return pair
    return default
