"""
Unit tests for RiftRun.

Tests corruption accumulation across stages, encounter seeding and
snapshot round trips.
"""

import pytest

from riftcore.core.config.manager import ConfigManager
from riftcore.modules.enemy.generator import generate_enemy_profile
from riftcore.modules.rift.run import RiftRun
from riftcore.modules.shared.exceptions import InvalidInputError, NotFoundError

pytestmark = [pytest.mark.unit, pytest.mark.rift]


class TestCorruptionAccumulation:
    """Test corruptions gained as the run decays."""

    def test_no_corruption_before_start_stage(self):
        run = RiftRun(rift_level=0, seed="calm")
        assert run.advance(239_999) == []
        assert run.current_stage == 1
        assert run.active_corruption_ids == ()

    def test_one_corruption_per_new_stage(self):
        run = RiftRun(rift_level=0, seed="steps")
        gained = run.advance(240_000)
        assert len(gained) == 1
        assert gained[0].min_stage <= 2
        assert run.advance(1_000) == []

    def test_skipped_stages_each_roll(self):
        """Jumping from stage 0 to 5 rolls for stages 2, 3, 4 and 5."""
        run = RiftRun(rift_level=0, seed="jump")
        gained = run.advance(900_000)
        assert len(gained) == 4
        assert len(set(run.active_corruption_ids)) == 4

    def test_active_list_is_append_only(self):
        run = RiftRun(rift_level=0, seed="append")
        run.advance(250_000)
        first = run.active_corruption_ids
        run.advance(200_000)
        assert run.active_corruption_ids[: len(first)] == first

    def test_same_seed_same_corruptions(self):
        a = RiftRun(rift_level=3, seed="twin")
        b = RiftRun(rift_level=3, seed="twin")
        for delta in (100_000, 200_000, 300_000, 400_000):
            a.advance(delta)
        b.advance(1_000_000)
        assert a.active_corruption_ids == b.active_corruption_ids

    def test_configured_start_stage(self):
        ConfigManager.set("rift.corruption_start_stage", 4)
        run = RiftRun(rift_level=0, seed="late-start")
        assert run.advance(500_000) == []
        assert len(run.advance(100_000)) == 1

    def test_effects_and_objects(self):
        run = RiftRun(rift_level=0, seed="fx")
        run.advance(900_000)
        assert [c.id for c in run.active_corruptions] == list(run.active_corruption_ids)
        assert isinstance(run.corruption_effects(), dict)
        assert run.stage_info.name == "VOID BREACH"

    def test_invalid_delta(self):
        with pytest.raises(InvalidInputError):
            RiftRun(0, "bad").advance(-1)


class TestEncounters:
    """Test encounter generation from the run."""

    def test_encounter_seed_and_stage(self, zone_config):
        run = RiftRun(rift_level=0, seed="enc")
        run.advance(450_000)
        profile = run.generate_encounter(zone_config, "3_4_0")
        expected = generate_enemy_profile("enc_3_4_0", zone_config, decay_stage=3)
        assert profile == expected

    def test_boss_encounter(self, zone_config):
        run = RiftRun(rift_level=0, seed="enc")
        assert run.generate_encounter(zone_config, "gate", is_boss=True).is_boss


class TestPersistence:
    """Test snapshot round trips."""

    def test_round_trip_continues_identically(self):
        original = RiftRun(rift_level=7, seed="save")
        original.advance(300_000)
        restored = RiftRun.from_dict(original.to_dict())
        assert restored.to_dict() == original.to_dict()

        original.advance(600_000)
        restored.advance(600_000)
        assert restored.to_dict() == original.to_dict()

    def test_snapshot_keys(self):
        snapshot = RiftRun(0, "keys").to_dict()
        assert set(snapshot) == {
            "rift_level", "seed", "elapsed_ms", "current_stage",
            "active_corruption_ids", "rng_state",
        }

    def test_missing_keys(self):
        snapshot = RiftRun(0, "keys").to_dict()
        del snapshot["rng_state"]
        with pytest.raises(InvalidInputError):
            RiftRun.from_dict(snapshot)

    def test_duplicate_ids_rejected(self):
        snapshot = RiftRun(0, "dup").to_dict()
        snapshot["active_corruption_ids"] = ["C01", "C01"]
        with pytest.raises(InvalidInputError):
            RiftRun.from_dict(snapshot)

    def test_unknown_ids_rejected(self):
        snapshot = RiftRun(0, "unknown").to_dict()
        snapshot["active_corruption_ids"] = ["C77"]
        with pytest.raises(NotFoundError):
            RiftRun.from_dict(snapshot)
