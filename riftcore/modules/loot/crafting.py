"""
Crafting items: catalog and drop roller.

After an encounter the host calls `roll_crafting_drop`. Two independent
gates decide the result:

1. Occurrence: bosses drop 80% of the time, other enemies 30%.
2. Boss key: a boss drop is the Architect's Key 40% of the time. The key
   has drop weight 0, so this branch is the only way to get it.

Any other drop is a weighted pick over items with ``drop_weight > 0``.

Tunables
--------
- ``loot.crafting.boss_drop_chance``
- ``loot.crafting.normal_drop_chance``
- ``loot.crafting.boss_key_chance``
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from riftcore.core.config.manager import ConfigManager
from riftcore.core.logging.logger import get_logger
from riftcore.modules.loot.constants import (
    BOSS_DROP_CHANCE,
    BOSS_KEY_CHANCE,
    NORMAL_DROP_CHANCE,
)
from riftcore.modules.shared.exceptions import NotFoundError
from riftcore.modules.shared.rng import SeededRandom
from riftcore.modules.shared.weighted import weighted_choice

logger = get_logger(__name__)

BOSS_EXCLUSIVE_ITEM_ID = "architects_key"


@dataclass(frozen=True, slots=True)
class CraftingItem:
    """One static crafting catalog entry."""

    id: str
    name: str
    description: str
    color: str
    icon: str
    drop_weight: int  # 0 = never drops through the weighted path
    is_boss_only: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ============================================================================
# CATALOG
# ============================================================================

CRAFTING_ITEMS_LIST: Tuple[CraftingItem, ...] = (
    CraftingItem(
        id="data_fragment",
        name="Data Fragment",
        description="Add one random mod to a card. The mod type matches the card type.",
        color="#00f0ff",
        icon="◈",
        drop_weight=40,
    ),
    CraftingItem(
        id="wipe_drive",
        name="Wipe Drive",
        description="Remove all mods from a card. Restores it to base stats.",
        color="#ff6622",
        icon="⊘",
        drop_weight=20,
    ),
    CraftingItem(
        id="recompiler",
        name="Recompiler",
        description="Re-roll all mods on a card (same count, new random mods).",
        color="#c850ff",
        icon="⟳",
        drop_weight=15,
    ),
    CraftingItem(
        id="tier_boost",
        name="Tier Boost",
        description="Upgrade one existing mod on a card to the next tier (higher tier = stronger).",
        color="#ffe600",
        icon="▲",
        drop_weight=10,
    ),
    CraftingItem(
        id=BOSS_EXCLUSIVE_ITEM_ID,
        name="Architect's Key",
        description="Add a rare Boss Mod to any card. Only dropped by bosses.",
        color="#ff0044",
        icon="⚿",
        drop_weight=0,
        is_boss_only=True,
    ),
    CraftingItem(
        id="quantum_lock",
        name="Quantum Lock",
        description="Lock one mod on a card so it cannot be rerolled or removed.",
        color="#39ff14",
        icon="🔒",
        drop_weight=5,
    ),
)

CRAFTING_ITEMS: Mapping[str, CraftingItem] = MappingProxyType(
    {item.id: item for item in CRAFTING_ITEMS_LIST}
)


def get_crafting_item(item_id: str) -> CraftingItem:
    """
    Look up a crafting item.

    Raises:
        NotFoundError: If the id is not in the catalog
    """
    try:
        return CRAFTING_ITEMS[item_id]
    except KeyError:
        raise NotFoundError("CraftingItem", item_id) from None


def droppable_items(is_boss: bool) -> Tuple[CraftingItem, ...]:
    """Items reachable through the weighted path, in catalog order."""
    return tuple(
        item for item in CRAFTING_ITEMS_LIST
        if item.drop_weight > 0 and (is_boss or not item.is_boss_only)
    )


# ============================================================================
# DROPS
# ============================================================================


def roll_crafting_drop(
    is_boss: bool,
    rng: Optional[Union[SeededRandom, Callable[[], float]]] = None,
) -> Optional[str]:
    """
    Roll the crafting drop for one defeated enemy.

    Returns an item id, or ``None`` for no drop. Non-boss rolls never
    return a boss-only item. ``rng`` is a `SeededRandom` or any zero-arg
    callable returning ``[0, 1)``. Draws, in order: the occurrence gate, the
    boss-key gate (bosses only), then the weighted pick.

    Example
    -------
    >>> roll_crafting_drop(False, SeededRandom("enc-7")) in (None, "data_fragment",
    ...     "wipe_drive", "recompiler", "tier_boost", "quantum_lock")
    True
    """
    if rng is None:
        rng = SeededRandom.from_entropy()

    if is_boss:
        chance = ConfigManager.get("loot.crafting.boss_drop_chance", BOSS_DROP_CHANCE)
    else:
        chance = ConfigManager.get("loot.crafting.normal_drop_chance", NORMAL_DROP_CHANCE)

    if rng() > chance:
        return None

    if is_boss:
        key_chance = ConfigManager.get("loot.crafting.boss_key_chance", BOSS_KEY_CHANCE)
        if rng() < key_chance:
            logger.debug(
                "Boss-exclusive crafting drop",
                extra={"item_id": BOSS_EXCLUSIVE_ITEM_ID},
            )
            return BOSS_EXCLUSIVE_ITEM_ID

    item = weighted_choice(
        droppable_items(is_boss),
        lambda entry: entry.drop_weight,
        rng,
        pool_name="loot.crafting",
    )
    logger.debug(
        "Crafting drop rolled",
        extra={"item_id": item.id, "is_boss": is_boss},
    )
    return item.id


__all__ = [
    "BOSS_EXCLUSIVE_ITEM_ID",
    "CRAFTING_ITEMS",
    "CRAFTING_ITEMS_LIST",
    "CraftingItem",
    "droppable_items",
    "get_crafting_item",
    "roll_crafting_drop",
]
