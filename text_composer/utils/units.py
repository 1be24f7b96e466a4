"""Unit conversion helpers for attachment and layout measurements."""
from __future__ import annotations

EMU_PER_INCH = 914400
POINTS_PER_INCH = 72


def emu_to_points(value: int) -> float:
    """Convert English Metric Units to typographic points."""
    return (value / EMU_PER_INCH) * POINTS_PER_INCH

