"""
Unit tests for the shared weighted choice.

Tests the subtract-in-order walk, fallback on summation drift and pool
validation.
"""

import pytest

from riftcore.core.exceptions import ConfigurationError
from riftcore.modules.shared.rng import SeededRandom
from riftcore.modules.shared.weighted import pick_index, weighted_choice

pytestmark = pytest.mark.unit

ITEMS = [("a", 1), ("b", 2), ("c", 7)]


def _weight(item):
    return item[1]


class TestWeightedChoice:
    """Test weighted_choice selection."""

    @pytest.mark.parametrize(
        "draw, expected",
        [
            (0.0, "a"),
            (0.1, "a"),  # roll 1.0 -> 1 - 1 = 0 <= 0
            (0.15, "b"),
            (0.25, "b"),
            (0.31, "c"),
            (0.999, "c"),
        ],
    )
    def test_walk_boundaries(self, scripted_rng, draw, expected):
        """First item whose running remainder reaches <= 0 wins."""
        assert weighted_choice(ITEMS, _weight, scripted_rng(draw))[0] == expected

    def test_zero_weight_items_never_win_mid_pool(self, rng):
        """A zero-weight item is skipped unless the roll is exactly 0 before it."""
        items = [("x", 5), ("zero", 0), ("y", 5)]
        picks = {weighted_choice(items, _weight, rng)[0] for _ in range(2000)}
        assert "zero" not in picks

    def test_fallback_is_last_item_by_default(self, scripted_rng):
        """Drift past the total returns the last item."""
        items = [("a", 1), ("b", 1)]
        assert weighted_choice(items, _weight, scripted_rng(1.5))[0] == "b"

    def test_explicit_fallback(self, scripted_rng):
        items = [("a", 1), ("b", 1)]
        result = weighted_choice(items, _weight, scripted_rng(1.5), fallback=items[0])
        assert result == items[0]

    def test_consumes_exactly_one_draw(self, rng):
        weighted_choice(ITEMS, _weight, rng)
        assert rng.draws == 1

    def test_empty_pool_raises(self, rng):
        with pytest.raises(ConfigurationError, match="empty pool"):
            weighted_choice([], _weight, rng, pool_name="cards")

    def test_zero_total_weight_raises(self, rng):
        with pytest.raises(ConfigurationError, match="total weight"):
            weighted_choice([("a", 0), ("b", 0)], _weight, rng)

    def test_frequencies_follow_weights(self):
        """Empirical frequencies track the weights."""
        rng = SeededRandom("freq")
        counts = {"a": 0, "b": 0, "c": 0}
        trials = 50_000
        for _ in range(trials):
            counts[weighted_choice(ITEMS, _weight, rng)[0]] += 1
        assert abs(counts["c"] / trials - 0.7) < 0.01
        assert abs(counts["a"] / trials - 0.1) < 0.01


class TestPickIndex:
    """Test pick_index over bare weight tables."""

    def test_returns_position(self, scripted_rng):
        assert pick_index([0, 0, 5], scripted_rng(0.5)) == 2

    def test_fallback_index(self, scripted_rng):
        assert pick_index([1, 1], scripted_rng(2.0), fallback=0) == 0
