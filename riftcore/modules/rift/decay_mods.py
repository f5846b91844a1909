"""
Decay mods: catalog and roller.

Enemy cards in decayed zones (stage 2 and up) can carry a decay mod. When
an enemy card with a decay mod hits, kills or triggers, it degrades the
player's card mods for the rest of the zone; the battle engine applies the
effect, this module only decides which mod a card gets.

Each mod applies to some card types and unlocks at ``min_stage``. Malware
cards never carry decay mods.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional, Tuple, Union

from riftcore.core.logging.logger import get_logger
from riftcore.modules.cards.models import CARD_TYPES
from riftcore.modules.rift.constants import clamp_stage
from riftcore.modules.shared.exceptions import InvalidInputError, NotFoundError
from riftcore.modules.shared.rng import SeededRandom
from riftcore.modules.shared.weighted import weighted_choice

logger = get_logger(__name__)

# effect type -> what the battle engine does with ``value``
DECAY_EFFECT_TYPES: Mapping[str, str] = MappingProxyType({
    "tier_corrode": "degrade a random mod's tier by N",
    "mod_strip": "remove N random unlocked mods",
    "worm": "spread to N cards in the deck",
    "damage_degrade": "deal damage and degrade N tiers on hit",
    "memory_wipe": "discard N cards from hand",
    "bit_flip": "swap ATK and DEF on a player agent",
    "stack_overflow": "increase the cost of player cards by N",
    "heap_corruption": "reduce max HP by N for the zone",
})


@dataclass(frozen=True, slots=True)
class DecayEffect:
    type: str
    value: int
    description: str


@dataclass(frozen=True, slots=True)
class DecayMod:
    """One static catalog entry."""

    id: str
    name: str
    description: str
    applicable_to: FrozenSet[str]
    min_stage: int
    weight: int
    effect: DecayEffect

    def applies_to(self, card_type: str) -> bool:
        return card_type in self.applicable_to

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["applicable_to"] = sorted(self.applicable_to)
        return data


def _mod(
    mod_id: str,
    name: str,
    description: str,
    card_type: str,
    min_stage: int,
    weight: int,
    effect_type: str,
    value: int,
    effect_description: str,
) -> DecayMod:
    return DecayMod(
        mod_id, name, description, frozenset({card_type}), min_stage, weight,
        DecayEffect(effect_type, value, effect_description),
    )


# ============================================================================
# CATALOG
# ============================================================================

DECAY_MODS: Tuple[DecayMod, ...] = (
    # Agents
    _mod("D01", "Rust Bite", "On hit: corrode 1 mod tier", "agent", 2, 100,
         "tier_corrode", 1, "Corrodes 1 tier from a random mod on hit"),
    _mod("D02", "Deep Rust", "On hit: corrode 2 mod tiers", "agent", 3, 60,
         "tier_corrode", 2, "Corrodes 2 tiers from a random mod on hit"),
    _mod("D03", "Acid Breach", "On hit: corrode 3 mod tiers", "agent", 4, 30,
         "tier_corrode", 3, "Corrodes 3 tiers from a random mod on hit"),
    _mod("D04", "Mod Ripper", "On kill: strip 1 random mod", "agent", 3, 40,
         "mod_strip", 1, "Strips a random unlocked mod on kill"),
    _mod("D05", "Data Worm", "On kill: infect 1 deck card", "agent", 4, 25,
         "worm", 1, "Worm spreads to 1 card in deck, corroding 1 tier"),
    _mod("D06", "Corrosive Touch", "On hit: corrode 1 tier + damage", "agent", 2, 80,
         "damage_degrade", 1, "Corrodes 1 tier and deals bonus damage on hit"),
    _mod("D07", "Decay Aura", "On death: corrode all field agents", "agent", 4, 20,
         "tier_corrode", 2, "On death, corrodes 2 tiers from all player field agents"),
    _mod("D08", "Entropy Spike", "On hit: heavy tier corrode", "agent", 5, 15,
         "tier_corrode", 4, "Corrodes 4 tiers from a random mod on hit"),
    # Scripts
    _mod("D09", "Glitch Bolt", "Damage + degrade target", "script", 2, 80,
         "damage_degrade", 1, "Deals damage and corrodes 1 tier on target"),
    _mod("D10", "Memory Wipe", "Discard 1 card from hand", "script", 3, 50,
         "memory_wipe", 1, "Forces player to discard 1 random card"),
    _mod("D11", "Data Drain", "Discard 2 cards from hand", "script", 4, 30,
         "memory_wipe", 2, "Forces player to discard 2 random cards"),
    _mod("D12", "Cascade Failure", "Heavy degrade + discard", "script", 5, 15,
         "damage_degrade", 3, "Deals damage and corrodes 3 tiers on target"),
    # Traps
    _mod("D13", "Bit Flip", "Swap ATK/DEF on triggered agent", "trap", 3, 40,
         "bit_flip", 0, "Swaps ATK and DEF of the triggering agent"),
    _mod("D14", "Stack Overflow", "Increase cost of hand cards", "trap", 4, 25,
         "stack_overflow", 1, "Increases cost of all cards in hand by 1"),
    _mod("D15", "Heap Corruption", "Reduce player max HP", "trap", 5, 15,
         "heap_corruption", 2, "Reduces player max HP by 2 for this zone"),
)

DECAY_MOD_MAP: Mapping[str, DecayMod] = MappingProxyType({m.id: m for m in DECAY_MODS})


def get_decay_mod(mod_id: str) -> DecayMod:
    """
    Look up a catalog entry.

    Raises:
        NotFoundError: If the id is not in the catalog
    """
    try:
        return DECAY_MOD_MAP[mod_id]
    except KeyError:
        raise NotFoundError("DecayMod", mod_id) from None


def eligible_decay_mods(card_type: str, stage: float) -> Tuple[DecayMod, ...]:
    """
    Mods that can land on ``card_type`` at ``stage``, in catalog order.

    Raises:
        InvalidInputError: If ``card_type`` is unknown or ``stage`` is not a
            finite number
    """
    if card_type not in CARD_TYPES:
        raise InvalidInputError("card_type", f"unknown card type {card_type!r}")
    current = clamp_stage(stage)
    return tuple(m for m in DECAY_MODS if m.applies_to(card_type) and m.min_stage <= current)


# ============================================================================
# ROLLS
# ============================================================================


def pick_decay_mod(
    card_type: str,
    stage: float,
    rng: Optional[Union[SeededRandom, Callable[[], float]]] = None,
) -> Optional[DecayMod]:
    """
    Roll a decay mod for one enemy card.

    Returns ``None`` when nothing is eligible (stages 0 and 1, malware, or
    trap cards below stage 3). Otherwise one weighted draw with last-entry
    fallback.

    Example
    -------
    >>> pick_decay_mod("agent", 2, SeededRandom("card-1")).id in ("D01", "D06")
    True
    """
    eligible = eligible_decay_mods(card_type, stage)
    if not eligible:
        return None

    if rng is None:
        rng = SeededRandom.from_entropy()
    chosen = weighted_choice(eligible, lambda m: m.weight, rng, pool_name="rift.decay_mods")

    logger.debug(
        "Decay mod rolled",
        extra={"card_type": card_type, "stage": stage, "decay_mod_id": chosen.id},
    )
    return chosen


__all__ = [
    "DECAY_EFFECT_TYPES",
    "DECAY_MODS",
    "DECAY_MOD_MAP",
    "DecayEffect",
    "DecayMod",
    "eligible_decay_mods",
    "get_decay_mod",
    "pick_decay_mod",
]
