"""
Procedural enemy and boss profiles.

`generate_enemy_profile` is a pure function of its arguments: the same seed,
zone, boss flag and decay stage always give the same profile.

Draw order
----------
Every pick comes from one `SeededRandom(seed)` stream, in this order:

1. name prefix, name
2. title (bosses only; other enemies get ``"Zone {level} Hostile"``)
3. archetype
4. one draw per deck card, then the deck shuffle
5. dialogue: pre-battle, on-win, on-lose
6. sprite color

Changing this order changes every profile generated from an existing seed.

Tunables
--------
- ``enemy.base_health`` / ``enemy.health_damping``
- ``enemy.base_deck_size`` / ``enemy.deck_size_bonus``
- ``enemy.base_credits`` / ``enemy.credit_growth_per_level`` / ``enemy.xp``
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from riftcore.core.config.manager import ConfigManager
from riftcore.core.exceptions import ConfigurationError
from riftcore.core.logging.logger import get_logger
from riftcore.modules.cards.catalog import CARDS
from riftcore.modules.cards.models import Card
from riftcore.modules.enemy.constants import (
    ARCHETYPE_AI,
    ARCHETYPE_ENERGY_BIAS,
    ARCHETYPES,
    BASE_CREDITS,
    BASE_DECK_SIZE,
    BASE_HEALTH,
    BOSS_AI_TYPE,
    BOSS_DIALOGUE_LOSE,
    BOSS_DIALOGUE_PRE,
    BOSS_DIALOGUE_WIN,
    BOSS_DIFFICULTY,
    BOSS_NAMES,
    BOSS_PREFIXES,
    BOSS_TITLES,
    CREDIT_GROWTH_PER_LEVEL,
    DECK_SIZE_BONUS,
    DIFFICULTY_BANDS,
    ENEMY_DIALOGUE_LOSE,
    ENEMY_DIALOGUE_PRE,
    ENEMY_DIALOGUE_WIN,
    ENEMY_NAMES,
    ENEMY_PREFIXES,
    ENEMY_TITLE_FORMAT,
    HEALTH_DAMPING,
    RARITY_GATES,
    SPRITE_COLORS,
    XP_REWARDS,
)
from riftcore.modules.enemy.models import (
    EnemyDialogue,
    EnemyProfile,
    EnemyRewards,
    ZoneConfig,
)
from riftcore.modules.rift.constants import STAGE_INFO, clamp_stage
from riftcore.modules.shared.formulas import level_credit_multiplier, round_half_up
from riftcore.modules.shared.rng import SeededRandom
from riftcore.modules.shared.validators import validate_seed
from riftcore.modules.shared.weighted import weighted_choice

logger = get_logger(__name__)


# ============================================================================
# STATS
# ============================================================================


def _class_key(is_boss: bool) -> str:
    return "boss" if is_boss else "normal"


def health_damping(level: int) -> float:
    """
    Early-zone health multiplier: 0.65 up to level 2, 0.8 up to level 4, else 1.0.

    Entries are checked in ascending ``max_level`` order.
    """
    entries = ConfigManager.get(
        "enemy.health_damping",
        [{"max_level": m, "multiplier": v} for m, v in HEALTH_DAMPING],
    )
    for entry in sorted(entries, key=lambda e: e["max_level"]):
        if level <= entry["max_level"]:
            return entry["multiplier"]
    return 1.0


def deck_size_for(level: int, is_boss: bool) -> int:
    """
    Deck length at a zone level.

    Base 20 (boss 25) plus the largest bonus whose ``min_level`` is reached:
    +2 from level 4, +5 from level 7.
    """
    base = ConfigManager.get(
        f"enemy.base_deck_size.{_class_key(is_boss)}", BASE_DECK_SIZE[_class_key(is_boss)]
    )
    bonuses = ConfigManager.get(
        "enemy.deck_size_bonus",
        [{"min_level": m, "bonus": b} for m, b in DECK_SIZE_BONUS],
    )
    reached = [entry["bonus"] for entry in bonuses if level >= entry["min_level"]]
    return base + max(reached, default=0)


def difficulty_for(level: int, is_boss: bool) -> int:
    if is_boss:
        return BOSS_DIFFICULTY
    for max_level, difficulty in DIFFICULTY_BANDS:
        if level <= max_level:
            return difficulty
    return BOSS_DIFFICULTY


def compute_health(level: int, multiplier: float, is_boss: bool, decay_stage: int) -> int:
    """``round_half_up(base * multiplier * stage stat multiplier * damping)``."""
    base = ConfigManager.get(
        f"enemy.base_health.{_class_key(is_boss)}", BASE_HEALTH[_class_key(is_boss)]
    )
    stat_multiplier = STAGE_INFO[clamp_stage(decay_stage)].stat_multiplier
    return round_half_up(base * multiplier * stat_multiplier * health_damping(level))


def compute_rewards(level: int, is_boss: bool) -> EnemyRewards:
    """
    Credits and XP for defeating an enemy at ``level``.

    Example
    -------
    >>> compute_rewards(5, is_boss=False)
    EnemyRewards(credits=27, xp_gain=25)
    """
    key = _class_key(is_boss)
    base_credits = ConfigManager.get(f"enemy.base_credits.{key}", BASE_CREDITS[key])
    growth = ConfigManager.get("enemy.credit_growth_per_level", CREDIT_GROWTH_PER_LEVEL)
    xp_base = ConfigManager.get(f"enemy.xp.{key}_base", XP_REWARDS[f"{key}_base"])
    xp_per_level = ConfigManager.get(
        f"enemy.xp.{key}_per_level", XP_REWARDS[f"{key}_per_level"]
    )
    return EnemyRewards(
        credits=round_half_up(base_credits * level_credit_multiplier(level, growth)),
        xp_gain=xp_base + xp_per_level * level,
    )


# ============================================================================
# DECK BUILDING
# ============================================================================


def allowed_rarities(level: int) -> Optional[frozenset]:
    """Rarities allowed at ``level``; ``None`` means no restriction."""
    for max_level, rarities in RARITY_GATES:
        if level <= max_level:
            return rarities
    return None


def deck_pool(cards: Iterable[Card], energy_bias: Optional[str], level: int) -> List[Card]:
    """Cards matching the energy bias (or neutral) and the level's rarity gate."""
    rarities = allowed_rarities(level)
    return [
        card for card in cards
        if (energy_bias is None or card.energy in (energy_bias, "neutral"))
        and (rarities is None or card.rarity in rarities)
    ]


def card_weight(card: Card, archetype: str) -> int:
    """
    Draw weight of ``card`` for ``archetype``: 1 plus archetype bonuses.

    - aggro/burn: +2 agents with attack >= 3, +2 damage effects
    - control/tank: +2 agents with defense >= 3, +2 heal/buff effects, +1 traps
    - swarm: +3 agents costing <= 2
    - midrange/chaos: +1 to every card
    """
    weight = 1
    effect_type = card.effect.type if card.effect is not None else None

    if archetype in ("aggro", "burn"):
        if card.is_agent and (card.attack or 0) >= 3:
            weight += 2
        if effect_type == "damage":
            weight += 2
    elif archetype in ("control", "tank"):
        if card.is_agent and (card.defense or 0) >= 3:
            weight += 2
        if effect_type in ("heal", "buff"):
            weight += 2
        if card.type == "trap":
            weight += 1
    elif archetype == "swarm":
        if card.is_agent and card.cost <= 2:
            weight += 3
    elif archetype in ("midrange", "chaos"):
        weight += 1

    return weight


def build_deck(
    size: int,
    archetype: str,
    level: int,
    rng: SeededRandom,
    cards: Sequence[Card] = CARDS,
) -> Tuple[str, ...]:
    """
    Draw ``size`` card ids with replacement, then shuffle.

    Raises:
        ConfigurationError: If no card survives the energy and rarity filters
    """
    energy_bias = ARCHETYPE_ENERGY_BIAS[archetype]
    pool = deck_pool(cards, energy_bias, level)
    if not pool:
        raise ConfigurationError(
            "enemy.deck_pool",
            f"no eligible cards for archetype={archetype} "
            f"energy_bias={energy_bias} level={level}",
        )

    weights = {card.id: card_weight(card, archetype) for card in pool}
    drawn = [
        weighted_choice(pool, lambda c: weights[c.id], rng, pool_name="enemy.deck_pool").id
        for _ in range(size)
    ]
    return tuple(rng.shuffle(drawn))


# ============================================================================
# PROFILE
# ============================================================================


def generate_enemy_profile(
    seed: Union[str, int],
    zone_config: Union[ZoneConfig, Mapping[str, Any]],
    is_boss: bool = False,
    decay_stage: int = 0,
    cards: Optional[Sequence[Card]] = None,
) -> EnemyProfile:
    """
    Generate one enemy (or boss) profile.

    Args:
        seed: Encounter seed; ints are stringified
        zone_config: `ZoneConfig` or its dict form
        is_boss: Boss pools, boss AI, larger deck and rewards
        decay_stage: Current decay stage; clamped to 0..5
        cards: Card catalog override (defaults to the shipped catalog)

    Raises:
        InvalidInputError: On a malformed seed, zone level, multiplier or stage
        ConfigurationError: If the deck pool is empty

    Example
    -------
    >>> profile = generate_enemy_profile("abc", ZoneConfig(level=5))
    >>> profile.rewards.credits, len(profile.deck)
    (27, 22)
    """
    seed = validate_seed(seed)
    if not isinstance(zone_config, ZoneConfig):
        zone_config = ZoneConfig.from_dict(zone_config)
    stage = clamp_stage(decay_stage, "decay_stage")
    level = zone_config.level
    scaling = zone_config.scaling_for(is_boss)

    rng = SeededRandom(seed)

    if is_boss:
        name = f"{rng.pick(BOSS_PREFIXES)} {rng.pick(BOSS_NAMES)}"
        title = rng.pick(BOSS_TITLES)
    else:
        name = f"{rng.pick(ENEMY_PREFIXES)} {rng.pick(ENEMY_NAMES)}"
        title = ENEMY_TITLE_FORMAT.format(level=level)

    archetype = rng.pick(ARCHETYPES)
    ai_type = BOSS_AI_TYPE if is_boss else ARCHETYPE_AI[archetype]

    deck = build_deck(
        deck_size_for(level, is_boss),
        archetype,
        level,
        rng,
        CARDS if cards is None else cards,
    )

    if is_boss:
        dialogue = EnemyDialogue(
            pre_battle=rng.pick(BOSS_DIALOGUE_PRE),
            on_win=rng.pick(BOSS_DIALOGUE_WIN),
            on_lose=rng.pick(BOSS_DIALOGUE_LOSE),
        )
    else:
        dialogue = EnemyDialogue(
            pre_battle=rng.pick(ENEMY_DIALOGUE_PRE),
            on_win=rng.pick(ENEMY_DIALOGUE_WIN),
            on_lose=rng.pick(ENEMY_DIALOGUE_LOSE),
        )

    profile = EnemyProfile(
        id=f"proc_{seed}",
        name=name,
        title=title,
        health=compute_health(level, scaling.health_multiplier, is_boss, stage),
        deck=deck,
        difficulty=difficulty_for(level, is_boss),
        ai_type=ai_type,
        is_boss=is_boss,
        sprite_color=rng.pick(SPRITE_COLORS),
        archetype=archetype,
        rewards=compute_rewards(level, is_boss),
        dialogue=dialogue,
    )

    logger.debug(
        "Enemy profile generated",
        extra={
            "profile_id": profile.id,
            "is_boss": is_boss,
            "zone_level": level,
            "decay_stage": stage,
            "archetype": archetype,
            "health": profile.health,
            "deck_size": profile.deck_size,
        },
    )
    return profile


__all__ = [
    "allowed_rarities",
    "build_deck",
    "card_weight",
    "compute_health",
    "compute_rewards",
    "deck_pool",
    "deck_size_for",
    "difficulty_for",
    "generate_enemy_profile",
    "health_damping",
]
