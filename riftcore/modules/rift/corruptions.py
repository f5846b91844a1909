"""
Rift corruptions: catalog and roller.

Corruptions are permanent global debuffs that stack as the rift decays.
From ``CORRUPTION_START_STAGE`` on, every newly reached stage rolls one
corruption; a rolled corruption stays active for the rest of the run and
never appears twice.

The catalog is immutable and shared; the active list is owned by the run
(see `riftcore.modules.rift.run.RiftRun`).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from riftcore.core.config.manager import ConfigManager
from riftcore.core.logging.logger import get_logger
from riftcore.modules.rift.constants import CORRUPTION_START_STAGE as _DEFAULT_START_STAGE
from riftcore.modules.shared.exceptions import NotFoundError
from riftcore.modules.shared.rng import SeededRandom
from riftcore.modules.shared.weighted import weighted_choice

logger = get_logger(__name__)

CORRUPTION_START_STAGE = _DEFAULT_START_STAGE

CATEGORIES = frozenset({"deck", "combat", "map", "special"})

# effect type -> what the battle engine does with ``value``
EFFECT_TYPES: Mapping[str, str] = MappingProxyType({
    "cost_increase": "all cards cost +N",
    "hand_size_reduce": "draw N fewer cards per turn",
    "junk_inject": "add N junk cards to the deck",
    "cell_reduce": "N fewer data cells per turn",
    "starting_hand_reduce": "start battles with N fewer cards",
    "shield_drain": "shield reduced by N each turn",
    "fog": "minimap disabled",
    "invisible_enemies": "enemies hidden on the minimap",
    "storms": "random N damage ticks",
    "no_healing": "healing disabled",
    "double_damage": "enemy damage multiplied by N",
    "fragile_mods": "mods degrade N times faster",
})


@dataclass(frozen=True, slots=True)
class CorruptionEffect:
    type: str
    value: int


@dataclass(frozen=True, slots=True)
class Corruption:
    """One static catalog entry."""

    id: str
    name: str
    description: str
    icon: str
    category: str
    min_stage: int
    weight: int
    effect: CorruptionEffect

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _c(
    corruption_id: str,
    name: str,
    description: str,
    icon: str,
    category: str,
    min_stage: int,
    weight: int,
    effect_type: str,
    value: int,
) -> Corruption:
    return Corruption(corruption_id, name, description, icon, category, min_stage, weight,
                      CorruptionEffect(effect_type, value))


# ============================================================================
# CATALOG
# ============================================================================

RIFT_CORRUPTIONS: Tuple[Corruption, ...] = (
    # Deck
    _c("C01", "Inflated Code", "All cards cost +1", "💰", "deck", 2, 80, "cost_increase", 1),
    _c("C02", "Bloated Memory", "All cards cost +2", "💰", "deck", 4, 30, "cost_increase", 2),
    _c("C03", "Buffer Shrink", "Draw 1 fewer card per turn", "📉", "deck", 2, 60, "hand_size_reduce", 1),
    _c("C04", "Data Pollution", "3 junk cards added to deck", "🗑", "deck", 3, 50, "junk_inject", 3),
    _c("C05", "Severe Pollution", "6 junk cards added to deck", "🗑", "deck", 5, 20, "junk_inject", 6),
    _c("C06", "Startup Lag", "Start battles with 1 fewer card", "⏱", "deck", 3, 50, "starting_hand_reduce", 1),
    # Combat
    _c("C07", "Cell Drain", "1 fewer data cell per turn", "⚡", "combat", 2, 70, "cell_reduce", 1),
    _c("C08", "Deep Drain", "2 fewer data cells per turn", "⚡", "combat", 4, 25, "cell_reduce", 2),
    _c("C09", "Shield Erosion", "Shield reduced by 1 each turn", "🛡", "combat", 3, 40, "shield_drain", 1),
    _c("C10", "No Repair", "Healing effects disabled", "❌", "combat", 4, 30, "no_healing", 0),
    _c("C11", "Fragile Mods", "Decay mods degrade 2x faster", "💎", "combat", 3, 35, "fragile_mods", 2),
    _c("C12", "Reduced Bandwidth", "Start with 2 fewer cards", "📉", "combat", 4, 25, "starting_hand_reduce", 2),
    # Map
    _c("C13", "Signal Fog", "Minimap disabled", "🌫", "map", 2, 60, "fog", 0),
    _c("C14", "Ghost Protocol", "Enemies invisible on minimap", "👻", "map", 3, 50, "invisible_enemies", 0),
    _c("C15", "Data Storm", "Random 1 damage every 30s", "⛈", "map", 3, 45, "storms", 1),
    _c("C16", "Severe Storm", "Random 2 damage every 20s", "⛈", "map", 5, 20, "storms", 2),
    _c("C17", "Bandwidth Throttle", "All cards cost +1, draw -1", "🐌", "map", 4, 25, "cost_increase", 1),
    _c("C18", "Stealth Disruptor", "Enemies see through stealth", "👁", "map", 4, 30, "invisible_enemies", 0),
    # Special (stage 5 only)
    _c("C19", "VOID RESONANCE", "Enemies deal double damage", "💀", "special", 5, 20, "double_damage", 2),
    _c("C20", "ENTROPY CASCADE", "All mods degrade 3x faster", "🌀", "special", 5, 15, "fragile_mods", 3),
    _c("C21", "SYSTEM COLLAPSE", "3 fewer data cells per turn", "💥", "special", 5, 15, "cell_reduce", 3),
    _c("C22", "FINAL CORRUPTION", "All cards cost +3", "☠", "special", 5, 10, "cost_increase", 3),
)

CORRUPTION_MAP: Mapping[str, Corruption] = MappingProxyType(
    {c.id: c for c in RIFT_CORRUPTIONS}
)


def corruption_start_stage() -> int:
    """First decay stage that rolls corruptions (``rift.corruption_start_stage``)."""
    return ConfigManager.get("rift.corruption_start_stage", CORRUPTION_START_STAGE)


def get_corruption(corruption_id: str) -> Corruption:
    """
    Look up a catalog entry.

    Raises:
        NotFoundError: If the id is not in the catalog
    """
    try:
        return CORRUPTION_MAP[corruption_id]
    except KeyError:
        raise NotFoundError("Corruption", corruption_id) from None


def eligible_corruptions(stage: int, existing_ids: Iterable[str]) -> Tuple[Corruption, ...]:
    """Catalog entries unlocked at ``stage`` and not already active, in catalog order."""
    active = set(existing_ids)
    return tuple(
        c for c in RIFT_CORRUPTIONS if c.min_stage <= stage and c.id not in active
    )


def roll_corruption(
    stage: int,
    existing_ids: Iterable[str],
    rng: Optional[SeededRandom] = None,
) -> Optional[Corruption]:
    """
    Roll one new corruption for ``stage``.

    Returns ``None`` when every unlocked corruption is already active. The
    caller appends the returned id to its active list.

    Example
    -------
    >>> roll_corruption(2, [], SeededRandom("run-1")).min_stage <= 2
    True
    """
    existing = list(existing_ids)
    eligible = eligible_corruptions(stage, existing)
    if not eligible:
        logger.debug(
            "No eligible corruption",
            extra={"stage": stage, "active_count": len(existing)},
        )
        return None

    if rng is None:
        rng = SeededRandom.from_entropy()
    chosen = weighted_choice(eligible, lambda c: c.weight, rng, pool_name="rift.corruptions")

    logger.info(
        "Corruption rolled",
        extra={
            "stage": stage,
            "corruption_id": chosen.id,
            "corruption_name": chosen.name,
            "eligible_count": len(eligible),
        },
    )
    return chosen


def summarize_corruption_effects(active_ids: Iterable[str]) -> Dict[str, int]:
    """
    Fold active corruptions into ``{effect_type: summed value}`` for the battle engine.

    Flag effects (``fog``, ``no_healing``, ``invisible_enemies``) carry value
    0; their presence in the result is what marks them active.

    Raises:
        NotFoundError: If an id is not in the catalog

    Example
    -------
    >>> summarize_corruption_effects(["C01", "C22", "C13"])
    {'cost_increase': 4, 'fog': 0}
    """
    totals: Counter = Counter()
    summary: Dict[str, int] = {}
    for corruption_id in active_ids:
        effect = get_corruption(corruption_id).effect
        totals[effect.type] += effect.value
        summary[effect.type] = totals[effect.type]
    return summary


__all__ = [
    "CATEGORIES",
    "CORRUPTION_MAP",
    "CORRUPTION_START_STAGE",
    "Corruption",
    "CorruptionEffect",
    "EFFECT_TYPES",
    "RIFT_CORRUPTIONS",
    "corruption_start_stage",
    "eligible_corruptions",
    "get_corruption",
    "roll_corruption",
    "summarize_corruption_effects",
]
