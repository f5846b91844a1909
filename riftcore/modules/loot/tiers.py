"""
Tier rolling and tier magnitude curves.

Loot modifiers carry a tier from 1 (Faded) to 10 (Perfect). This module
rolls tiers, maps them to magnitudes through fixed curves, and migrates
tiers from the legacy three-tier save format.

Tunables
--------
- ``loot.tiers.base_weights``
- ``loot.tiers.rift_bonus_per_level`` / ``rift_bonus_cap`` / ``rift_bonus_tier_step``
- ``loot.tiers.enemy_shift_levels``
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from riftcore.core.config.manager import ConfigManager
from riftcore.core.exceptions import ConfigurationError
from riftcore.modules.loot.constants import (
    ENEMY_SHIFT_LEVELS,
    INVERSE_EXPONENT,
    LEGACY_TIER_DEFAULT,
    LEGACY_TIER_MAP,
    MAX_TIER,
    MIN_TIER,
    NUMERIC_EXPONENT,
    PERCENT_EXPONENT,
    RIFT_BONUS_CAP,
    RIFT_BONUS_FIRST_INDEX,
    RIFT_BONUS_PER_LEVEL,
    RIFT_BONUS_TIER_STEP,
    TIER_COLORS,
    TIER_COUNT,
    TIER_NAMES,
    TIER_WEIGHTS,
)
from riftcore.modules.shared.formulas import clamp, round_half_up
from riftcore.modules.shared.rng import SeededRandom
from riftcore.modules.shared.validators import validate_finite, validate_non_negative_finite
from riftcore.modules.shared.weighted import pick_index


# ============================================================================
# WEIGHT TABLES
# ============================================================================


def base_tier_weights() -> Tuple[float, ...]:
    """
    Configured base weights for tiers 1..10.

    Raises:
        ConfigurationError: If the table is not ten non-negative numbers
    """
    weights = ConfigManager.get("loot.tiers.base_weights", list(TIER_WEIGHTS))
    if len(weights) != TIER_COUNT or any(w < 0 for w in weights):
        raise ConfigurationError(
            "loot.tiers.base_weights",
            f"expected {TIER_COUNT} non-negative weights, got {list(weights)}",
        )
    return tuple(weights)


def tier_weights_for_level(rift_level: float = 0) -> Tuple[float, ...]:
    """
    Player tier weights at a rift level.

    Tiers 6..10 gain ``min(level * 0.5, 50) * (index - 4) * 0.1``; tiers 1..5
    keep their base weight, so low tiers stay reachable at any level.

    Example
    -------
    >>> tier_weights_for_level(0)[:3]
    (1000, 800, 600)
    """
    level = validate_non_negative_finite("rift_level", rift_level)
    per_level = ConfigManager.get("loot.tiers.rift_bonus_per_level", RIFT_BONUS_PER_LEVEL)
    cap = ConfigManager.get("loot.tiers.rift_bonus_cap", RIFT_BONUS_CAP)
    step = ConfigManager.get("loot.tiers.rift_bonus_tier_step", RIFT_BONUS_TIER_STEP)

    bonus = min(level * per_level, cap)
    return tuple(
        w + bonus * (i - (RIFT_BONUS_FIRST_INDEX - 1)) * step
        if i >= RIFT_BONUS_FIRST_INDEX else w
        for i, w in enumerate(base_tier_weights())
    )


def get_enemy_tier_weights(rift_level: float) -> List[float]:
    """
    Enemy loot weights: the base table read ``floor(level / 10)`` positions lower.

    Example
    -------
    >>> get_enemy_tier_weights(25)[:4]
    [1000, 1000, 1000, 800]
    """
    level = validate_non_negative_finite("rift_level", rift_level)
    shift_levels = ConfigManager.get("loot.tiers.enemy_shift_levels", ENEMY_SHIFT_LEVELS)
    shift = math.floor(level / shift_levels)
    base = base_tier_weights()
    return [base[max(0, i - shift)] for i in range(TIER_COUNT)]


# ============================================================================
# ROLLS
# ============================================================================


def roll_tier(rift_level: float = 0, rng: Optional[SeededRandom] = None) -> int:
    """
    Roll a player loot tier (1..10); one draw from ``rng``.

    Raises:
        InvalidInputError: If ``rift_level`` is negative or not finite
    """
    weights = tier_weights_for_level(rift_level)
    if rng is None:
        rng = SeededRandom.from_entropy()
    return pick_index(weights, rng, fallback=0, pool_name="loot.tiers") + MIN_TIER


def roll_enemy_tier(rift_level: float = 0, rng: Optional[SeededRandom] = None) -> int:
    """Roll an enemy loot tier (1..10) from the shifted enemy table."""
    weights = get_enemy_tier_weights(rift_level)
    if rng is None:
        rng = SeededRandom.from_entropy()
    return pick_index(weights, rng, fallback=0, pool_name="loot.enemy_tiers") + MIN_TIER


def clamp_tier(tier: float) -> int:
    """
    Round half up and clamp into 1..10.

    Raises:
        InvalidInputError: If ``tier`` is not a finite number
    """
    return int(clamp(round_half_up(validate_finite("tier", tier)), MIN_TIER, MAX_TIER))


# ============================================================================
# MAGNITUDE CURVES
# ============================================================================


def _curve(low: float, high: float, exponent: float, name: str) -> List[int]:
    if low > high:
        raise ConfigurationError(name, f"min {low} is greater than max {high}")
    return [
        round_half_up(low + (high - low) * math.pow(i / (TIER_COUNT - 1), exponent))
        for i in range(TIER_COUNT)
    ]


def numeric_tiers(low: float, high: float) -> List[int]:
    """
    Ten magnitudes on a ``t ** 1.8`` curve (flat stats like +ATK/+DEF).

    Raises:
        ConfigurationError: If ``low > high``

    Example
    -------
    >>> numeric_tiers(1, 10)
    [1, 1, 2, 2, 3, 4, 5, 7, 8, 10]
    """
    return _curve(low, high, NUMERIC_EXPONENT, "numeric_tiers")


def percent_tiers(low: float, high: float) -> List[int]:
    """Ten magnitudes on a softer ``t ** 1.5`` curve (percent stats)."""
    return _curve(low, high, PERCENT_EXPONENT, "percent_tiers")


def inverse_tiers(max_penalty: float) -> List[int]:
    """
    Penalty magnitudes: tier 1 is ``max_penalty``, tier 10 is 0.

    Raises:
        ConfigurationError: If ``max_penalty`` is negative
    """
    if max_penalty < 0:
        raise ConfigurationError("inverse_tiers", f"max penalty must be >= 0, got {max_penalty}")
    return [
        round_half_up(max_penalty * (1 - math.pow(i / (TIER_COUNT - 1), INVERSE_EXPONENT)))
        for i in range(TIER_COUNT)
    ]


def tier_value(table: Sequence[int], tier: float) -> int:
    """
    Magnitude for ``tier`` from a ten-entry curve table (tier is clamped).

    Raises:
        ConfigurationError: If the table does not have ten entries
    """
    if len(table) != TIER_COUNT:
        raise ConfigurationError("tier_table", f"expected {TIER_COUNT} entries, got {len(table)}")
    return table[clamp_tier(tier) - MIN_TIER]


# ============================================================================
# SAVE MIGRATION & DISPLAY
# ============================================================================


def migrate_old_tier(old_tier: int) -> int:
    """
    Map a legacy tier (3 = worst .. 1 = best) onto 1..10.

    ``{3: 2, 2: 5, 1: 8}``; anything else becomes 2.
    """
    if isinstance(old_tier, bool) or not isinstance(old_tier, (int, float)):
        return LEGACY_TIER_DEFAULT
    return LEGACY_TIER_MAP.get(old_tier, LEGACY_TIER_DEFAULT)


def get_tier_name(tier: float) -> str:
    return TIER_NAMES[clamp_tier(tier)]


def get_tier_color(tier: float) -> str:
    return TIER_COLORS[clamp_tier(tier)]


__all__ = [
    "base_tier_weights",
    "clamp_tier",
    "get_enemy_tier_weights",
    "get_tier_color",
    "get_tier_name",
    "inverse_tiers",
    "migrate_old_tier",
    "numeric_tiers",
    "percent_tiers",
    "roll_enemy_tier",
    "roll_tier",
    "tier_value",
    "tier_weights_for_level",
]
