"""
Enemy generation constants.

Single source of truth for:
- Name, title and dialogue pools for enemies and bosses
- Deck archetypes with their AI tags and energy bias
- Sprite colors
- Code defaults for stats, deck sizes and rewards (``enemy.*`` in config)

The pools are ordered data: the generator picks by index, so reordering or
inserting entries changes every previously generated profile.
"""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple


# ============================================================================
# NAME POOLS
# ============================================================================

ENEMY_PREFIXES: Tuple[str, ...] = (
    "Rogue", "Glitched", "Chrome", "Neon", "Shadow",
    "Corrupted", "Phantom", "Burned", "Static", "Wired",
    "Void", "Rusted", "Overclocked", "Broken", "Dark",
)

ENEMY_NAMES: Tuple[str, ...] = (
    "Drone", "Runner", "Splicer", "Hacker", "Enforcer",
    "Sentinel", "Agent", "Wraith", "Construct", "Shade",
    "Drifter", "Proxy", "Daemon", "Socket", "Cipher",
)

BOSS_PREFIXES: Tuple[str, ...] = (
    "Lord", "Archon", "Nexus", "Prime", "Omega",
    "Sovereign", "Warden", "Tyrant", "Oracle", "Apex",
)

BOSS_NAMES: Tuple[str, ...] = (
    "Flux", "Vortex", "Neuron", "Entropy", "Recursion",
    "Paradox", "Catalyst", "Oblivion", "Singularity", "Terminus",
)

BOSS_TITLES: Tuple[str, ...] = (
    "of the Grid", "the Uncompiled", "the Recursive", "the Eternal Loop",
    "of the Void Sector", "the Data Eater", "the Last Firewall",
    "the Corrupted", "the Infinite Thread", "of the Rusted Depths",
)

# Non-boss title, formatted with the zone level
ENEMY_TITLE_FORMAT = "Zone {level} Hostile"


# ============================================================================
# DIALOGUE POOLS
# ============================================================================

ENEMY_DIALOGUE_PRE: Tuple[str, ...] = (
    "You shouldn't be here, Drifter.",
    "The Grid will consume you.",
    "Another one for the recycler.",
    "Your code is obsolete.",
    "I've been waiting for you.",
    "This sector is mine.",
    "Let's see what you're made of.",
    "You won't leave this zone alive.",
)

ENEMY_DIALOGUE_WIN: Tuple[str, ...] = (
    "Error... fatal... exception...",
    "How... impossible...",
    "System... shutting down...",
    "You'll pay for this...",
    "The Grid... remembers...",
)

ENEMY_DIALOGUE_LOSE: Tuple[str, ...] = (
    "Pathetic. Try again when you've upgraded.",
    "The Grid always wins.",
    "Your deck is garbage, Drifter.",
    "Come back when you're worth my time.",
)

BOSS_DIALOGUE_PRE: Tuple[str, ...] = (
    "You've collected the shards... impressive. But it ends here.",
    "The Grid Key won't save you from what I am.",
    "I am the final firewall. There is no access beyond me.",
    "Every Drifter who stood here before you... is dead.",
    "Your journey ends at the Rift Gate.",
)

BOSS_DIALOGUE_WIN: Tuple[str, ...] = (
    "The Grid... fractures... you've broken through...",
    "Impossible... my protocols... overwritten...",
    "The deeper levels... they're worse than me...",
)

BOSS_DIALOGUE_LOSE: Tuple[str, ...] = (
    "The Grid is eternal. You are not.",
    "Collect more shards. Get stronger. Then try again.",
    "The Rift Gate remains sealed. You are nothing.",
)


# ============================================================================
# ARCHETYPES
# ============================================================================

ARCHETYPES: Tuple[str, ...] = (
    "aggro", "control", "midrange", "swarm", "burn", "tank", "chaos",
)

AI_TYPES = frozenset({"basic", "aggressive", "defensive", "boss"})
BOSS_AI_TYPE = "boss"

ARCHETYPE_AI: Mapping[str, str] = MappingProxyType({
    "aggro": "aggressive",
    "control": "defensive",
    "midrange": "basic",
    "swarm": "aggressive",
    "burn": "aggressive",
    "tank": "defensive",
    "chaos": "basic",
})

# None = no energy filter
ARCHETYPE_ENERGY_BIAS: Mapping[str, Optional[str]] = MappingProxyType({
    "aggro": "volt",
    "control": "cipher",
    "midrange": None,
    "swarm": "volt",
    "burn": "volt",
    "tank": "cipher",
    "chaos": None,
})

SPRITE_COLORS: Tuple[str, ...] = (
    "#ff4444", "#ff8800", "#ffcc00", "#ff00aa",
    "#aa00ff", "#00aaff", "#44ff88", "#ff6644",
)


# ============================================================================
# STATS & REWARDS (code defaults)
# ============================================================================

BASE_HEALTH = MappingProxyType({"normal": 12, "boss": 20})

# (max_level, multiplier), checked in order; levels above the last get 1.0
HEALTH_DAMPING: Tuple[Tuple[int, float], ...] = ((2, 0.65), (4, 0.8))

BASE_DECK_SIZE = MappingProxyType({"normal": 20, "boss": 25})

# (min_level, bonus); the largest reached bonus applies
DECK_SIZE_BONUS: Tuple[Tuple[int, int], ...] = ((4, 2), (7, 5))

# Level-appropriate rarities: level <= max_level allows only these
RARITY_GATES: Tuple[Tuple[int, frozenset], ...] = (
    (2, frozenset({"common"})),
    (4, frozenset({"common", "uncommon"})),
)

BASE_CREDITS = MappingProxyType({"normal": 15, "boss": 50})
CREDIT_GROWTH_PER_LEVEL = 0.2

XP_REWARDS = MappingProxyType({
    "normal_base": 10,
    "normal_per_level": 3,
    "boss_base": 50,
    "boss_per_level": 10,
})

BOSS_DIFFICULTY = 3
# (max_level, difficulty) for non-boss enemies; higher levels are 3
DIFFICULTY_BANDS: Tuple[Tuple[int, int], ...] = ((3, 1), (6, 2))
