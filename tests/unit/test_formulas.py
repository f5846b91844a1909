"""
Unit tests for shared formulas and validators.
"""

import math

import pytest

from riftcore.modules.shared.exceptions import InvalidInputError
from riftcore.modules.shared.formulas import (
    clamp,
    compression_factor,
    level_credit_multiplier,
    round_half_up,
    scale_thresholds_ms,
)
from riftcore.modules.shared.validators import (
    validate_finite,
    validate_non_negative_finite,
    validate_non_negative_int,
    validate_positive_finite,
    validate_positive_int,
    validate_seed,
    validate_stage_index,
)

pytestmark = pytest.mark.unit


class TestRoundHalfUp:
    """Test half-up rounding."""

    @pytest.mark.parametrize(
        "value, expected",
        [(2.5, 3), (3.5, 4), (2.4999, 2), (0.5, 1), (-2.5, -2), (27.000000000000004, 27)],
    )
    def test_ties_round_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_differs_from_builtin_round_on_even_ties(self):
        """Builtin round is banker's rounding; ours is not."""
        assert round(2.5) == 2
        assert round_half_up(2.5) == 3


class TestScheduleFormulas:
    """Test compression and threshold scaling."""

    def test_compression_floor(self):
        assert compression_factor(0, 0.01, 0.3) == 1
        assert compression_factor(70, 0.01, 0.3) == pytest.approx(0.3)
        assert compression_factor(500, 0.01, 0.3) == 0.3

    def test_scale_thresholds(self):
        assert scale_thresholds_ms([0, 120, 900], 1.0) == (0, 120_000, 900_000)
        assert scale_thresholds_ms([0, 120, 900], 0.9) == (0, 108_000, 810_000)

    def test_clamp(self):
        assert clamp(5, 0, 3) == 3
        assert clamp(-1, 0, 3) == 0

    def test_credit_multiplier(self):
        assert level_credit_multiplier(1, 0.2) == 1
        assert level_credit_multiplier(5, 0.2) == pytest.approx(1.8)


class TestValidators:
    """Test boundary validators."""

    @pytest.mark.parametrize("bad", [-1, math.nan, math.inf, "10", None, True])
    def test_non_negative_finite_rejects(self, bad):
        with pytest.raises(InvalidInputError):
            validate_non_negative_finite("delta_ms", bad)

    def test_non_negative_finite_accepts_zero(self):
        assert validate_non_negative_finite("delta_ms", 0) == 0

    def test_non_negative_int_accepts_integral_float(self):
        assert validate_non_negative_int("delta_ms", 16.0) == 16
        assert isinstance(validate_non_negative_int("delta_ms", 16.0), int)

    @pytest.mark.parametrize("bad", [-1, 0.1, 16.67, math.nan, "5", True])
    def test_non_negative_int_rejects(self, bad):
        with pytest.raises(InvalidInputError):
            validate_non_negative_int("delta_ms", bad)

    @pytest.mark.parametrize("bad", [math.nan, -math.inf, "2", None, False])
    def test_finite_rejects(self, bad):
        with pytest.raises(InvalidInputError):
            validate_finite("stage", bad)

    @pytest.mark.parametrize("bad", [0, -0.5, math.nan])
    def test_positive_finite_rejects(self, bad):
        with pytest.raises(InvalidInputError):
            validate_positive_finite("health_multiplier", bad)

    def test_positive_int_accepts_integral_float(self):
        assert validate_positive_int("level", 5.0) == 5
        assert isinstance(validate_positive_int("level", 5.0), int)

    @pytest.mark.parametrize("bad", [0, -3, 2.5, "3", False])
    def test_positive_int_rejects(self, bad):
        with pytest.raises(InvalidInputError):
            validate_positive_int("level", bad)

    @pytest.mark.parametrize("bad", [-1, 6, 2.0, True])
    def test_stage_index_rejects(self, bad):
        with pytest.raises(InvalidInputError):
            validate_stage_index("stage", bad)

    def test_seed_normalization(self):
        assert validate_seed("abc") == "abc"
        assert validate_seed(7) == "7"

    def test_error_carries_field(self):
        with pytest.raises(InvalidInputError) as exc_info:
            validate_non_negative_finite("delta_ms", -5)
        assert exc_info.value.field == "delta_ms"
        assert exc_info.value.error_code == "INVALID_DELTA_MS"
