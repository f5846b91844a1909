"""
Static card catalog.

Read-only after import. Every energy type has common cards so the
enemy deck builder finds a non-empty pool at every zone level.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from riftcore.modules.cards.models import Card, CardEffect
from riftcore.modules.shared.exceptions import NotFoundError


def _agent(
    card_id: str,
    name: str,
    energy: str,
    cost: int,
    rarity: str,
    attack: int,
    defense: int,
    description: str = "",
) -> Card:
    return Card(card_id, name, energy, "agent", cost, rarity, description, attack, defense)


def _spell(
    card_id: str,
    name: str,
    energy: str,
    card_type: str,
    cost: int,
    rarity: str,
    effect_type: str,
    value: Optional[int],
    target: Optional[str],
    description: str,
) -> Card:
    return Card(card_id, name, energy, card_type, cost, rarity, description,
                effect=CardEffect(effect_type, value, target))


# ============================================================================
# CATALOG
# ============================================================================

CARDS: Tuple[Card, ...] = (
    # Volt
    _agent("volt_runner", "Volt Runner", "volt", 1, "common", 2, 1),
    _agent("spark_drone", "Spark Drone", "volt", 2, "common", 3, 1),
    _agent("arc_trooper", "Arc Trooper", "volt", 3, "uncommon", 4, 2),
    _agent("overload_titan", "Overload Titan", "volt", 6, "rare", 7, 5),
    _spell("short_circuit", "Short Circuit", "volt", "script", 1, "common",
           "damage", 2, "any", "Deal 2 damage."),
    _spell("chain_lightning", "Chain Lightning", "volt", "script", 4, "uncommon",
           "damage", 2, "all_enemy_agents", "Deal 2 damage to all enemy agents."),
    _spell("thunder_protocol", "Thunder Protocol", "volt", "script", 7, "legendary",
           "damage", 8, "enemy_player", "Deal 8 damage to the enemy."),
    # Cipher
    _agent("cipher_guard", "Cipher Guard", "cipher", 2, "common", 1, 3),
    _agent("firewall_sentry", "Firewall Sentry", "cipher", 3, "common", 2, 4),
    _agent("crypto_warden", "Crypto Warden", "cipher", 5, "rare", 3, 7),
    _spell("patch_routine", "Patch Routine", "cipher", "script", 2, "common",
           "heal", 3, "player", "Restore 3 health."),
    _spell("hardening", "Hardening", "cipher", "script", 2, "uncommon",
           "buff", 2, "self_agent", "Give an agent +2 defense."),
    _spell("honeypot", "Honeypot", "cipher", "trap", 2, "uncommon",
           "counter", 3, "enemy_agent", "When attacked, deal 3 damage back."),
    # Rust
    _agent("scrap_golem", "Scrap Golem", "rust", 4, "common", 3, 5),
    _agent("corrosion_hound", "Corrosion Hound", "rust", 2, "uncommon", 3, 2),
    _spell("oxidize", "Oxidize", "rust", "malware", 3, "common",
           "debuff", 2, "enemy_agent", "Give an enemy agent -2 attack."),
    _spell("salvage", "Salvage", "rust", "script", 1, "rare",
           "recycle", 1, "self", "Return a discarded card to your hand."),
    # Phantom
    _agent("shade_agent", "Shade Agent", "phantom", 2, "common", 2, 2),
    _agent("specter_lord", "Specter Lord", "phantom", 6, "legendary", 6, 6),
    _spell("mirror_trap", "Mirror Trap", "phantom", "trap", 1, "common",
           "bounce", None, "enemy_agent", "Return an attacking agent to its owner's hand."),
    _spell("echo_call", "Echo Call", "phantom", "script", 4, "rare",
           "resurrect", None, "self_agent", "Return your last destroyed agent."),
    # Synth
    _agent("synth_builder", "Synth Builder", "synth", 3, "common", 2, 3),
    _agent("nano_swarm", "Nano Swarm", "synth", 1, "uncommon", 1, 1),
    _spell("fabricate", "Fabricate", "synth", "script", 3, "uncommon",
           "summon", 2, "self", "Summon two 1/1 drones."),
    # Neutral
    _agent("street_punk", "Street Punk", "neutral", 1, "common", 1, 1),
    _agent("data_courier", "Data Courier", "neutral", 2, "common", 2, 2),
    _agent("heavy_enforcer", "Heavy Enforcer", "neutral", 4, "uncommon", 4, 4),
    _spell("data_spike", "Data Spike", "neutral", "script", 2, "common",
           "damage", 3, "enemy_agent", "Deal 3 damage to an enemy agent."),
    _spell("cache_pull", "Cache Pull", "neutral", "script", 1, "common",
           "draw", 1, "player", "Draw a card."),
    _spell("ping", "Ping", "neutral", "script", 0, "uncommon",
           "reveal", 1, "enemy", "Reveal the top card of the enemy deck."),
    _spell("tripwire", "Tripwire", "neutral", "trap", 2, "rare",
           "damage", 4, "enemy_agent", "When an enemy agent is played, deal 4 damage to it."),
    _spell("system_recall", "System Recall", "neutral", "script", 3, "legendary",
           "recall", None, "all_agents", "Return all agents to their owners' hands."),
)

CARD_MAP: Mapping[str, Card] = MappingProxyType({card.id: card for card in CARDS})


def get_card(card_id: str) -> Card:
    """
    Look up a card definition.

    Raises:
        NotFoundError: If the id is not in the catalog
    """
    try:
        return CARD_MAP[card_id]
    except KeyError:
        raise NotFoundError("Card", card_id) from None


__all__ = ["CARDS", "CARD_MAP", "get_card"]
