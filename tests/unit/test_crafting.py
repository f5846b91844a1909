"""
Unit tests for crafting items and the crafting drop roller.
"""

from collections import Counter

import pytest

from riftcore.core.config.manager import ConfigManager
from riftcore.modules.loot.crafting import (
    BOSS_EXCLUSIVE_ITEM_ID,
    CRAFTING_ITEMS,
    CRAFTING_ITEMS_LIST,
    droppable_items,
    get_crafting_item,
    roll_crafting_drop,
)
from riftcore.modules.shared.exceptions import NotFoundError
from riftcore.modules.shared.rng import SeededRandom

pytestmark = [pytest.mark.unit, pytest.mark.loot]


class TestCatalog:
    """Test the crafting catalog."""

    def test_six_items(self):
        assert len(CRAFTING_ITEMS_LIST) == 6
        assert set(CRAFTING_ITEMS) == {
            "data_fragment", "wipe_drive", "recompiler",
            "tier_boost", "architects_key", "quantum_lock",
        }

    def test_architects_key_is_boss_only_and_weightless(self):
        key = get_crafting_item(BOSS_EXCLUSIVE_ITEM_ID)
        assert key.is_boss_only
        assert key.drop_weight == 0

    def test_unknown_item(self):
        with pytest.raises(NotFoundError) as exc_info:
            get_crafting_item("plasma_torch")
        assert exc_info.value.error_code == "CRAFTINGITEM_NOT_FOUND"

    def test_weighted_pool_excludes_key(self):
        for is_boss in (True, False):
            ids = [item.id for item in droppable_items(is_boss)]
            assert BOSS_EXCLUSIVE_ITEM_ID not in ids
            assert ids == ["data_fragment", "wipe_drive", "recompiler", "tier_boost", "quantum_lock"]


class TestScriptedDrops:
    """Test the drop gates with scripted draws."""

    def test_normal_gate_blocks(self, scripted_rng):
        assert roll_crafting_drop(False, scripted_rng(0.9)) is None

    def test_gate_is_inclusive_at_chance(self, scripted_rng):
        """roll == chance still drops; only roll > chance blocks."""
        assert roll_crafting_drop(False, scripted_rng(0.3, 0.0)) == "data_fragment"

    def test_normal_weighted_pick(self, scripted_rng):
        assert roll_crafting_drop(False, scripted_rng(0.1, 0.5)) == "wipe_drive"
        assert roll_crafting_drop(False, scripted_rng(0.1, 0.999)) == "quantum_lock"

    def test_boss_key_branch(self, scripted_rng):
        assert roll_crafting_drop(True, scripted_rng(0.5, 0.1)) == BOSS_EXCLUSIVE_ITEM_ID

    def test_boss_falls_through_to_weighted(self, scripted_rng):
        assert roll_crafting_drop(True, scripted_rng(0.5, 0.5, 0.0)) == "data_fragment"

    def test_boss_gate_blocks(self, scripted_rng):
        assert roll_crafting_drop(True, scripted_rng(0.85)) is None

    def test_stream_and_bound_draw_agree(self):
        """A SeededRandom and its bound next_float give the same drops."""
        for key in range(50):
            seed = f"enc-{key}"
            for is_boss in (False, True):
                assert roll_crafting_drop(is_boss, SeededRandom(seed)) == roll_crafting_drop(
                    is_boss, SeededRandom(seed).next_float
                )


class TestDropRates:
    """Test drop frequencies over seeded streams."""

    def test_boss_key_frequency(self):
        """Boss rolls yield the key about 0.8 * 0.4 = 32% of the time."""
        rng = SeededRandom("boss-keys")
        trials = 100_000
        keys = sum(roll_crafting_drop(True, rng) == BOSS_EXCLUSIVE_ITEM_ID for _ in range(trials))
        assert keys / trials == pytest.approx(0.32, abs=0.01)

    def test_normal_drops_never_give_key(self):
        rng = SeededRandom("normal")
        results = Counter(roll_crafting_drop(False, rng) for _ in range(20_000))
        assert BOSS_EXCLUSIVE_ITEM_ID not in results
        assert results[None] / 20_000 == pytest.approx(0.7, abs=0.015)

    def test_configured_chances(self):
        ConfigManager.set("loot.crafting.normal_drop_chance", 1.0)
        rng = SeededRandom("always")
        assert all(roll_crafting_drop(False, rng) is not None for _ in range(500))

    def test_deterministic(self):
        a = [roll_crafting_drop(True, SeededRandom(f"enc-{i}")) for i in range(100)]
        b = [roll_crafting_drop(True, SeededRandom(f"enc-{i}")) for i in range(100)]
        assert a == b
