"""
Zone configuration and enemy profile models.

`ZoneConfig` is the read-only input describing one zone; `EnemyProfile`
is the immutable output of the generator, consumed by the battle engine.
Both accept and produce plain dicts for persistence.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple

from riftcore.modules.shared.exceptions import InvalidInputError
from riftcore.modules.shared.validators import (
    validate_positive_finite,
    validate_positive_int,
    validate_seed,
)


@dataclass(frozen=True, slots=True)
class ScalingProfile:
    """
    Per-zone stat scaling for one enemy class (normal or boss).

    The generator reads only ``health_multiplier``. The attack and defense
    multipliers and the ``mod_count_min``..``mod_count_max`` range are zone
    data for the battle engine, which applies them when it instantiates the
    enemy's cards. They are validated and persisted here so a zone snapshot
    round-trips whole, but they never change a generated profile.
    """

    health_multiplier: float = 1.0
    atk_multiplier: float = 1.0
    def_multiplier: float = 1.0
    mod_count_min: int = 0
    mod_count_max: int = 0

    def __post_init__(self) -> None:
        validate_positive_finite("health_multiplier", self.health_multiplier)
        validate_positive_finite("atk_multiplier", self.atk_multiplier)
        validate_positive_finite("def_multiplier", self.def_multiplier)
        if self.mod_count_min < 0 or self.mod_count_max < self.mod_count_min:
            raise InvalidInputError(
                "mod_count",
                f"expected 0 <= min <= max, got {self.mod_count_min}..{self.mod_count_max}",
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScalingProfile":
        if not isinstance(data, Mapping):
            raise InvalidInputError("scaling", "expected a mapping")
        known = {k: data[k] for k in cls.__dataclass_fields__ if k in data}
        return cls(**known)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "health_multiplier": self.health_multiplier,
            "atk_multiplier": self.atk_multiplier,
            "def_multiplier": self.def_multiplier,
            "mod_count_min": self.mod_count_min,
            "mod_count_max": self.mod_count_max,
        }


@dataclass(frozen=True, slots=True)
class ZoneConfig:
    """
    Read-only description of one zone.

    Example
    -------
    >>> ZoneConfig(level=5, seed="zone-5").enemy_scaling.health_multiplier
    1.0
    """

    level: int
    seed: str = ""
    enemy_scaling: ScalingProfile = field(default_factory=ScalingProfile)
    boss_scaling: ScalingProfile = field(default_factory=ScalingProfile)

    def __post_init__(self) -> None:
        # frozen: normalize through object.__setattr__
        object.__setattr__(self, "level", validate_positive_int("level", self.level))
        object.__setattr__(self, "seed", validate_seed(self.seed))

    def scaling_for(self, is_boss: bool) -> ScalingProfile:
        return self.boss_scaling if is_boss else self.enemy_scaling

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ZoneConfig":
        """
        Build from a plain mapping; missing scaling blocks default to 1.0.

        Raises:
            InvalidInputError: If ``level`` is missing or any value is invalid
        """
        if not isinstance(data, Mapping) or "level" not in data:
            raise InvalidInputError("zone_config", "expected a mapping with a level")
        return cls(
            level=data["level"],
            seed=data.get("seed", ""),
            enemy_scaling=ScalingProfile.from_dict(data.get("enemy_scaling", {})),
            boss_scaling=ScalingProfile.from_dict(data.get("boss_scaling", {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "seed": self.seed,
            "enemy_scaling": self.enemy_scaling.to_dict(),
            "boss_scaling": self.boss_scaling.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class EnemyRewards:
    credits: int
    xp_gain: int


@dataclass(frozen=True, slots=True)
class EnemyDialogue:
    pre_battle: str
    on_win: str
    on_lose: str


@dataclass(frozen=True, slots=True)
class EnemyProfile:
    """A generated enemy or boss. Never mutated after creation."""

    id: str
    name: str
    title: str
    health: int
    deck: Tuple[str, ...]
    difficulty: int
    ai_type: str
    is_boss: bool
    sprite_color: str
    archetype: str
    rewards: EnemyRewards
    dialogue: EnemyDialogue

    @property
    def deck_size(self) -> int:
        return len(self.deck)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "title": self.title,
            "health": self.health,
            "deck": list(self.deck),
            "difficulty": self.difficulty,
            "ai_type": self.ai_type,
            "is_boss": self.is_boss,
            "sprite_color": self.sprite_color,
            "archetype": self.archetype,
            "rewards": {"credits": self.rewards.credits, "xp_gain": self.rewards.xp_gain},
            "dialogue": {
                "pre_battle": self.dialogue.pre_battle,
                "on_win": self.dialogue.on_win,
                "on_lose": self.dialogue.on_lose,
            },
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EnemyProfile":
        """
        Rebuild a profile from `to_dict` output.

        Raises:
            InvalidInputError: If a required key is missing
        """
        try:
            return cls(
                id=data["id"],
                name=data["name"],
                title=data["title"],
                health=data["health"],
                deck=tuple(data["deck"]),
                difficulty=data["difficulty"],
                ai_type=data["ai_type"],
                is_boss=data["is_boss"],
                sprite_color=data["sprite_color"],
                archetype=data["archetype"],
                rewards=EnemyRewards(**data["rewards"]),
                dialogue=EnemyDialogue(**data["dialogue"]),
            )
        except (KeyError, TypeError) as e:
            raise InvalidInputError("enemy_profile", f"malformed snapshot: {e}") from e


__all__ = [
    "EnemyDialogue",
    "EnemyProfile",
    "EnemyRewards",
    "ScalingProfile",
    "ZoneConfig",
]
