"""
Rift Core Formulas

Purpose
-------
Pure calculation helpers shared by the rift, loot and enemy modules.

Design Notes
------------
All formulas:
- Accept parameters explicitly
- Have no config access and no side effects
- Round half up (``floor(x + 0.5)``), never banker's rounding, so that
  generated numbers match across save files and platforms

Usage
-----
    from riftcore.modules.shared.formulas import round_half_up

    credits = round_half_up(15 * 1.8)  # 27
"""

from __future__ import annotations

import math
from typing import Sequence


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, ties toward positive infinity.

    Python's ``round`` rounds ties to even (``round(2.5) == 2``); game
    numbers always round ties up.

    Example:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(high, value))


def compression_factor(rift_level: float, per_level: float, floor: float) -> float:
    """
    Time compression for a rift level: ``max(floor, 1 - rift_level * per_level)``.

    Example:
        >>> compression_factor(10, 0.01, 0.3)
        0.9
        >>> compression_factor(200, 0.01, 0.3)
        0.3
    """
    return max(floor, 1 - rift_level * per_level)


def scale_thresholds_ms(
    base_seconds: Sequence[float], factor: float
) -> tuple[int, ...]:
    """
    Scale a schedule of seconds by ``factor`` and convert to whole milliseconds.

    Example:
        >>> scale_thresholds_ms([0, 120, 240], 0.9)
        (0, 108000, 216000)
    """
    return tuple(round_half_up(seconds * factor * 1000) for seconds in base_seconds)


def level_credit_multiplier(level: int, growth_per_level: float) -> float:
    """Linear reward growth: ``1 + (level - 1) * growth_per_level``."""
    return 1 + (level - 1) * growth_per_level


__all__ = [
    "round_half_up",
    "clamp",
    "compression_factor",
    "scale_thresholds_ms",
    "level_credit_multiplier",
]
