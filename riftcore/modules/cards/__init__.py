"""
Cards Module
============

Domain: Static card definitions used as deck-building input

Exports:
- Card, CardEffect: Frozen card model
- CARDS, CARD_MAP, get_card: Read-only catalog
"""

from riftcore.modules.cards.catalog import CARD_MAP, CARDS, get_card
from riftcore.modules.cards.models import (
    CARD_TYPES,
    EFFECT_TYPES,
    ENERGY_TYPES,
    RARITIES,
    Card,
    CardEffect,
)

__all__ = [
    "CARDS",
    "CARD_MAP",
    "CARD_TYPES",
    "Card",
    "CardEffect",
    "EFFECT_TYPES",
    "ENERGY_TYPES",
    "RARITIES",
    "get_card",
]
