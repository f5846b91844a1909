"""
Card data model.

Cards are static catalog entries read by the enemy deck builder. Only the
fields deck building and the battle engine's inputs need are modeled here;
mods and keyword data are owned by the battle layer.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from riftcore.core.exceptions import ConfigurationError

ENERGY_TYPES = frozenset({"volt", "cipher", "rust", "phantom", "synth", "neutral"})
CARD_TYPES = frozenset({"agent", "script", "malware", "trap"})
RARITIES = ("common", "uncommon", "rare", "legendary")
EFFECT_TYPES = frozenset({
    "damage", "heal", "draw", "buff", "debuff", "bounce",
    "counter", "reveal", "summon", "recall", "resurrect", "recycle",
})


@dataclass(frozen=True, slots=True)
class CardEffect:
    type: str
    value: Optional[int] = None
    target: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Card:
    """
    One static card definition.

    ``attack`` and ``defense`` are set on agents only; ``effect`` on
    scripts, malware and traps.
    """

    id: str
    name: str
    energy: str
    type: str
    cost: int
    rarity: str
    description: str = ""
    attack: Optional[int] = None
    defense: Optional[int] = None
    effect: Optional[CardEffect] = None

    def __post_init__(self) -> None:
        if self.energy not in ENERGY_TYPES:
            raise ConfigurationError(f"cards.{self.id}", f"unknown energy {self.energy!r}")
        if self.type not in CARD_TYPES:
            raise ConfigurationError(f"cards.{self.id}", f"unknown type {self.type!r}")
        if self.rarity not in RARITIES:
            raise ConfigurationError(f"cards.{self.id}", f"unknown rarity {self.rarity!r}")
        if self.effect is not None and self.effect.type not in EFFECT_TYPES:
            raise ConfigurationError(f"cards.{self.id}", f"unknown effect {self.effect.type!r}")

    @property
    def is_agent(self) -> bool:
        return self.type == "agent"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "CARD_TYPES",
    "Card",
    "CardEffect",
    "EFFECT_TYPES",
    "ENERGY_TYPES",
    "RARITIES",
]
