"""
Loot system constants.

Single source of truth for:
- Tier range, base weights, names and colors
- Rift-level bonus to high tiers
- Curve exponents for mod magnitude tables
- Crafting drop chances

Balance values here are the code defaults; ConfigManager keys under
``loot.*`` override them.
"""

from types import MappingProxyType
from typing import Mapping, Tuple


# ============================================================================
# TIERS
# ============================================================================

MIN_TIER = 1
MAX_TIER = 10
TIER_COUNT = MAX_TIER - MIN_TIER + 1

# Relative weights for tiers 1..10, strictly decreasing
TIER_WEIGHTS: Tuple[int, ...] = (1000, 800, 600, 450, 300, 180, 90, 35, 10, 2)

TIER_NAMES: Mapping[int, str] = MappingProxyType({
    1: "Faded",
    2: "Dim",
    3: "Basic",
    4: "Stable",
    5: "Tuned",
    6: "Enhanced",
    7: "Superior",
    8: "Prime",
    9: "Apex",
    10: "Perfect",
})

TIER_COLORS: Mapping[int, str] = MappingProxyType({
    1: "#444444",
    2: "#555555",
    3: "#777777",
    4: "#AAAAAA",
    5: "#44CC44",
    6: "#4488FF",
    7: "#AA44FF",
    8: "#FF8C00",
    9: "#FF2222",
    10: "#FFD700",
})

# Tier index (0-based) from which rift level adds weight
RIFT_BONUS_FIRST_INDEX = 5
RIFT_BONUS_PER_LEVEL = 0.5
RIFT_BONUS_CAP = 50
RIFT_BONUS_TIER_STEP = 0.1

# Enemy loot tables shift one tier up per this many rift levels
ENEMY_SHIFT_LEVELS = 10

# Legacy 3-tier saves (1 = best) onto the 10-tier scale. Never change.
LEGACY_TIER_MAP: Mapping[int, int] = MappingProxyType({3: 2, 2: 5, 1: 8})
LEGACY_TIER_DEFAULT = 2


# ============================================================================
# MAGNITUDE CURVES
# ============================================================================

NUMERIC_EXPONENT = 1.8
PERCENT_EXPONENT = 1.5
INVERSE_EXPONENT = 1.5


# ============================================================================
# CRAFTING DROPS
# ============================================================================

BOSS_DROP_CHANCE = 0.8
NORMAL_DROP_CHANCE = 0.3
BOSS_KEY_CHANCE = 0.4
