"""
Unit tests for RiftDecayEngine.

Tests threshold compression, stage advancement, callbacks, progress
reporting, restore and persistence.
"""

import logging

import pytest

from riftcore.core.config.manager import ConfigManager
from riftcore.core.exceptions import ConfigurationError
from riftcore.modules.rift.decay_engine import RiftDecayEngine, compute_thresholds_ms
from riftcore.modules.shared.exceptions import InvalidInputError

pytestmark = [pytest.mark.unit, pytest.mark.rift]


class TestThresholds:
    """Test level-compressed stage thresholds."""

    def test_level_zero_uses_base_schedule(self):
        assert compute_thresholds_ms(0) == (0, 120_000, 240_000, 420_000, 600_000, 900_000)

    def test_level_ten_compresses_by_ten_percent(self):
        assert compute_thresholds_ms(10) == (0, 108_000, 216_000, 378_000, 540_000, 810_000)

    def test_compression_floor_at_thirty_percent(self):
        """Levels past 70 stop compressing."""
        assert compute_thresholds_ms(100) == (0, 36_000, 72_000, 126_000, 180_000, 270_000)
        assert compute_thresholds_ms(1000) == compute_thresholds_ms(100)

    def test_configured_schedule_is_used(self):
        ConfigManager.set("rift.decay.base_thresholds_s", [0, 10, 20, 30, 40, 50])
        assert compute_thresholds_ms(0) == (0, 10_000, 20_000, 30_000, 40_000, 50_000)

    @pytest.mark.parametrize(
        "schedule",
        [[0, 10, 20], [5, 10, 20, 30, 40, 50], [0, 20, 10, 30, 40, 50]],
    )
    def test_invalid_schedule_raises(self, schedule):
        ConfigManager.set("rift.decay.base_thresholds_s", schedule)
        with pytest.raises(ConfigurationError):
            compute_thresholds_ms(0)

    def test_negative_level_rejected(self):
        with pytest.raises(InvalidInputError):
            RiftDecayEngine(rift_level=-1)


class TestAdvance:
    """Test stage advancement."""

    def test_starts_stable(self):
        engine = RiftDecayEngine(0)
        assert engine.current_stage == 0
        assert engine.elapsed_ms == 0
        assert engine.stage_info.name == "STABLE"

    def test_exact_threshold_enters_stage(self):
        engine = RiftDecayEngine(0)
        assert engine.advance(119_999) == 0
        assert engine.advance(1) == 1

    def test_large_delta_skips_stages(self):
        engine = RiftDecayEngine(0)
        assert engine.advance(700_000) == 4
        assert engine.stage_info.name == "COLLAPSING"

    def test_terminal_stage_is_sticky(self):
        engine = RiftDecayEngine(0)
        engine.advance(10_000_000)
        assert engine.current_stage == 5
        assert engine.is_terminal
        assert engine.advance(1_000) == 5

    def test_zero_delta_is_noop(self):
        engine = RiftDecayEngine(0)
        engine.advance(0)
        assert engine.current_stage == 0

    @pytest.mark.parametrize("bad", [-1, float("nan"), float("inf"), "100", 0.1, 16.67])
    def test_invalid_delta_rejected_without_mutation(self, bad):
        engine = RiftDecayEngine(0)
        engine.advance(50_000)
        with pytest.raises(InvalidInputError):
            engine.advance(bad)
        assert engine.elapsed_ms == 50_000

    @pytest.mark.parametrize(
        "chunks",
        [
            [500_000],
            [250_000, 250_000],
            [1] * 10 + [499_990],
            [100_000, 0, 400_000],
            [119_999.0, 1.0, 380_000],
        ],
    )
    def test_chunking_does_not_change_result(self, chunks):
        """Splitting time into chunks gives the same stage and elapsed time."""
        engine = RiftDecayEngine(5)
        for chunk in chunks:
            engine.advance(chunk)
        reference = RiftDecayEngine(5)
        reference.advance(500_000)
        assert engine.current_stage == reference.current_stage
        assert engine.elapsed_ms == reference.elapsed_ms
        assert type(engine.elapsed_ms) is int

    def test_fractional_chunks_rejected_without_drift(self):
        """Sub-millisecond deltas never reach the clock."""
        engine = RiftDecayEngine(0)
        engine.advance(119_999)
        for _ in range(10):
            with pytest.raises(InvalidInputError):
                engine.advance(0.1)
        engine.advance(1)
        assert (engine.current_stage, engine.elapsed_ms) == (1, 120_000)

    def test_stage_never_decreases(self, rng):
        engine = RiftDecayEngine(20)
        previous = 0
        for _ in range(300):
            stage = engine.advance(rng.int_between(0, 10_000))
            assert stage >= previous
            previous = stage


class TestCallbacks:
    """Test the stage-change callback."""

    def test_callback_fires_once_per_call_with_final_stage(self, mocker):
        callback = mocker.Mock()
        engine = RiftDecayEngine(0, on_stage_change=callback)
        engine.advance(450_000)
        callback.assert_called_once_with(3)

    def test_callback_silent_without_change(self, mocker):
        callback = mocker.Mock()
        engine = RiftDecayEngine(0, on_stage_change=callback)
        engine.advance(10)
        callback.assert_not_called()

    def test_stage_change_is_logged(self, caplog):
        engine = RiftDecayEngine(0)
        with caplog.at_level(logging.INFO, logger="riftcore"):
            engine.advance(130_000)
        records = [r for r in caplog.records if r.getMessage() == "Rift decay stage changed"]
        assert len(records) == 1
        assert records[0].new_stage == 1


class TestProgress:
    """Test progress and time-to-next reporting."""

    def test_progress_midway(self):
        engine = RiftDecayEngine(0)
        engine.advance(60_000)
        assert engine.current_stage_progress() == pytest.approx(0.5)
        assert engine.time_to_next_stage() == 60_000

    def test_progress_bounds(self, rng):
        engine = RiftDecayEngine(0)
        for _ in range(200):
            engine.advance(rng.int_between(0, 8_000))
            assert 0.0 <= engine.current_stage_progress() <= 1.0
            assert engine.time_to_next_stage() >= 0

    def test_terminal_progress(self):
        engine = RiftDecayEngine(0)
        engine.advance(900_000)
        assert engine.current_stage_progress() == 1.0
        assert engine.time_to_next_stage() == 0


class TestRestoreAndPersistence:
    """Test restore and dict round trips."""

    def test_restore_sets_state_without_callback(self, mocker):
        callback = mocker.Mock()
        engine = RiftDecayEngine(0, on_stage_change=callback)
        engine.restore(250_000, 2)
        assert engine.current_stage == 2
        assert engine.elapsed_ms == 250_000
        callback.assert_not_called()

    def test_inconsistent_restore_kept_and_warned(self, caplog):
        engine = RiftDecayEngine(0)
        with caplog.at_level(logging.WARNING, logger="riftcore"):
            engine.restore(10_000, 3)
        assert engine.current_stage == 3
        assert any(
            r.getMessage() == "Restored decay stage does not match elapsed time"
            for r in caplog.records
        )

    @pytest.mark.parametrize(
        "elapsed, stage",
        [(-1, 0), (100, 6), (100, -1), (100, 1.0), (100.5, 0)],
    )
    def test_restore_rejects_out_of_range(self, elapsed, stage):
        with pytest.raises(InvalidInputError):
            RiftDecayEngine(0).restore(elapsed, stage)

    def test_round_trip(self):
        engine = RiftDecayEngine(12)
        engine.advance(333_333)
        clone = RiftDecayEngine.from_dict(engine.to_dict(), rift_level=12)
        assert clone.to_dict() == engine.to_dict()
        assert clone.thresholds_ms == engine.thresholds_ms

    def test_from_dict_missing_keys(self):
        with pytest.raises(InvalidInputError):
            RiftDecayEngine.from_dict({"elapsed_ms": 5}, rift_level=0)


class TestStaticLookups:
    """Test stage metadata and spawn caps."""

    @pytest.mark.parametrize("stage, expected", [(-3, "STABLE"), (2, "UNSTABLE"), (99, "VOID BREACH")])
    def test_stage_info_clamps(self, stage, expected):
        assert RiftDecayEngine.get_stage_info(stage).name == expected

    @pytest.mark.parametrize("stage", [float("nan"), float("inf"), "2", None, True])
    def test_stage_info_rejects_non_numbers(self, stage):
        with pytest.raises(InvalidInputError):
            RiftDecayEngine.get_stage_info(stage)

    @pytest.mark.parametrize(
        "level, stage, expected",
        [(1, 0, 1), (1, 2, 2), (3, 2, 3), (6, 4, 8), (10, 5, 8), (4, 3, 6)],
    )
    def test_scaled_enemy_cap(self, level, stage, expected):
        assert RiftDecayEngine.scaled_enemy_cap(level, stage) == expected
