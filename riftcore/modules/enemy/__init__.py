"""
Enemy Module
============

Domain: Procedural enemy and boss profiles

Exports:
- ZoneConfig, ScalingProfile: Zone input models
- EnemyProfile, EnemyRewards, EnemyDialogue: Generated profile models
- generate_enemy_profile: Seeded profile generator
"""

from riftcore.modules.enemy.generator import (
    build_deck,
    card_weight,
    compute_health,
    compute_rewards,
    deck_size_for,
    difficulty_for,
    generate_enemy_profile,
    health_damping,
)
from riftcore.modules.enemy.models import (
    EnemyDialogue,
    EnemyProfile,
    EnemyRewards,
    ScalingProfile,
    ZoneConfig,
)

__all__ = [
    "EnemyDialogue",
    "EnemyProfile",
    "EnemyRewards",
    "ScalingProfile",
    "ZoneConfig",
    "build_deck",
    "card_weight",
    "compute_health",
    "compute_rewards",
    "deck_size_for",
    "difficulty_for",
    "generate_enemy_profile",
    "health_damping",
]
