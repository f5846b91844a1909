"""
Rift Module
===========

Domain: Timed zone runs that decay and accumulate corruptions

Exports:
- RiftDecayEngine: Stage timer with level-compressed thresholds
- Corruption catalog and roller
- Decay-mod catalog and roller for enemy cards
- RiftRun: Run context tying the timer, corruptions and encounters together
"""

from riftcore.modules.rift.constants import STAGE_INFO, DecayStageInfo
from riftcore.modules.rift.corruptions import (
    CORRUPTION_MAP,
    RIFT_CORRUPTIONS,
    Corruption,
    CorruptionEffect,
    eligible_corruptions,
    get_corruption,
    roll_corruption,
    summarize_corruption_effects,
)
from riftcore.modules.rift.decay_mods import (
    DECAY_MOD_MAP,
    DECAY_MODS,
    DecayEffect,
    DecayMod,
    eligible_decay_mods,
    get_decay_mod,
    pick_decay_mod,
)
from riftcore.modules.rift.decay_engine import RiftDecayEngine, compute_thresholds_ms
from riftcore.modules.rift.run import RiftRun

__all__ = [
    "CORRUPTION_MAP",
    "Corruption",
    "CorruptionEffect",
    "DECAY_MODS",
    "DECAY_MOD_MAP",
    "DecayEffect",
    "DecayMod",
    "DecayStageInfo",
    "RIFT_CORRUPTIONS",
    "RiftDecayEngine",
    "RiftRun",
    "STAGE_INFO",
    "compute_thresholds_ms",
    "eligible_corruptions",
    "eligible_decay_mods",
    "get_corruption",
    "get_decay_mod",
    "pick_decay_mod",
    "roll_corruption",
    "summarize_corruption_effects",
]
