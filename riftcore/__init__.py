"""
Rift Core
=========

Seeded procedural-content and progression core for a roguelite
card-battle run: rift decay, corruptions, loot tiers, crafting drops and
enemy profiles, all reproducible from a seed.

Layout:
- riftcore.core: configuration, logging, infrastructure exceptions
- riftcore.modules: domain modules (shared, rift, loot, cards, enemy)
"""

__version__ = "0.1.0"
