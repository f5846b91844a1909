"""
Loot Module
===========

Domain: Loot tiers and crafting drops

Exports:
- Tier rolling, enemy tier tables and magnitude curves
- Crafting item catalog and the crafting drop roller
"""

from riftcore.modules.loot.crafting import (
    BOSS_EXCLUSIVE_ITEM_ID,
    CRAFTING_ITEMS,
    CRAFTING_ITEMS_LIST,
    CraftingItem,
    droppable_items,
    get_crafting_item,
    roll_crafting_drop,
)
from riftcore.modules.loot.tiers import (
    base_tier_weights,
    clamp_tier,
    get_enemy_tier_weights,
    get_tier_color,
    get_tier_name,
    inverse_tiers,
    migrate_old_tier,
    numeric_tiers,
    percent_tiers,
    roll_enemy_tier,
    roll_tier,
    tier_value,
    tier_weights_for_level,
)

__all__ = [
    # Crafting
    "BOSS_EXCLUSIVE_ITEM_ID",
    "CRAFTING_ITEMS",
    "CRAFTING_ITEMS_LIST",
    "CraftingItem",
    "droppable_items",
    "get_crafting_item",
    "roll_crafting_drop",
    # Tiers
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
