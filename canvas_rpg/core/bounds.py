"""Clamping helpers for world-bounded positions."""

from __future__ import annotations


def clamp(value: float, low: float, high: float) -> float:
    """Saturate ``value`` to ``[low, high]``; an empty interval pins to its midpoint."""
    if low > high:
        return (low + high) / 2.0
    return min(max(value, low), high)


def clamp_inset(value: float, extent: float, inset: float) -> float:
    """Clamp ``value`` to ``[inset, extent - inset]``."""
    return clamp(value, inset, extent - inset)
