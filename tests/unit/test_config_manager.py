"""
Unit tests for ConfigManager and configuration schemas.

Tests YAML default loading, dot-notation reads, validated overrides,
schema enforcement, metrics and health.
"""

import pytest

from riftcore.core.config.errors import (
    ConfigInitializationError,
    ConfigValidationError,
    ConfigWriteError,
)
from riftcore.core.config.manager import ConfigManager
from riftcore.core.config.validator import (
    ConfigSchema,
    get_schema_for_top_key,
    register_schema,
    unregister_schema,
    validate_config_value,
)

pytestmark = [pytest.mark.unit, pytest.mark.config]


class TestDefaults:
    """Test packaged YAML defaults."""

    def test_packaged_defaults_loaded(self):
        assert ConfigManager.get("rift.decay.base_thresholds_s") == [0, 120, 240, 420, 600, 900]
        assert ConfigManager.get("loot.crafting.boss_key_chance") == 0.4
        assert ConfigManager.get("enemy.base_health.boss") == 20

    def test_top_level_keys(self):
        assert ConfigManager.get_all_keys() == ["enemy", "loot", "rift"]

    def test_missing_key_returns_default(self):
        assert ConfigManager.get("rift.nothing.here", 42) == 42
        assert ConfigManager.get("rift.decay.base_thresholds_s.deeper") is None

    def test_custom_directory(self, tmp_path):
        (tmp_path / "a.yaml").write_text("rift:\n  corruption_start_stage: 3\n")
        (tmp_path / "b.yaml").write_text("rift:\n  decay:\n    min_compression: 0.5\n")
        ConfigManager.initialize(tmp_path)
        assert ConfigManager.get("rift.corruption_start_stage") == 3
        assert ConfigManager.get("rift.decay.min_compression") == 0.5

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ConfigInitializationError):
            ConfigManager.initialize(tmp_path / "absent")

    def test_malformed_yaml(self, tmp_path):
        (tmp_path / "bad.yaml").write_text("rift: [unclosed\n")
        with pytest.raises(ConfigInitializationError):
            ConfigManager.initialize(tmp_path)

    def test_schema_violation_in_defaults(self, tmp_path):
        (tmp_path / "bad.yaml").write_text("loot:\n  crafting:\n    boss_key_chance: lots\n")
        with pytest.raises(ConfigInitializationError, match="loot"):
            ConfigManager.initialize(tmp_path)

    def test_empty_directory_is_allowed(self, tmp_path):
        ConfigManager.initialize(tmp_path)
        assert ConfigManager.get("rift.corruption_start_stage", 2) == 2


class TestOverrides:
    """Test runtime overrides."""

    def test_override_wins(self):
        ConfigManager.set("loot.crafting.boss_key_chance", 1.0)
        assert ConfigManager.get("loot.crafting.boss_key_chance") == 1.0
        assert ConfigManager.get("loot.crafting.boss_drop_chance") == 0.8

    def test_clear_override(self):
        ConfigManager.set("enemy.base_health.normal", 99)
        assert ConfigManager.clear_override("enemy.base_health.normal") is True
        assert ConfigManager.get("enemy.base_health.normal") == 12
        assert ConfigManager.clear_override("enemy.base_health.normal") is False

    def test_schema_rejects_wrong_type(self):
        with pytest.raises(ConfigWriteError):
            ConfigManager.set("loot.crafting.boss_key_chance", "high")
        assert ConfigManager.get("loot.crafting.boss_key_chance") == 0.4

    def test_schema_rejects_bool_for_number(self):
        with pytest.raises(ConfigWriteError):
            ConfigManager.set("rift.corruption_start_stage", True)

    @pytest.mark.parametrize("key", ["", "rift..decay", "rift."])
    def test_invalid_keys(self, key):
        with pytest.raises(ConfigWriteError):
            ConfigManager.set(key, 1)

    def test_validator_transforms(self):
        ConfigManager.register_validator("loot.crafting.boss_key_chance", lambda v: min(float(v), 1.0))
        ConfigManager.set("loot.crafting.boss_key_chance", 3)
        assert ConfigManager.get("loot.crafting.boss_key_chance") == 1.0

    def test_validator_blocks(self):
        def _probability(value):
            if not 0 <= value <= 1:
                raise ValueError("probability out of range")
            return value

        ConfigManager.register_validator("loot.crafting.normal_drop_chance", _probability)
        with pytest.raises(ConfigWriteError):
            ConfigManager.set("loot.crafting.normal_drop_chance", 1.5)

    def test_reset_clears_overrides_and_validators(self):
        ConfigManager.register_validator("enemy.base_health.normal", lambda v: v * 2)
        ConfigManager.set("enemy.base_health.normal", 5)
        ConfigManager.reset()
        ConfigManager.set("enemy.base_health.normal", 5)
        assert ConfigManager.get("enemy.base_health.normal") == 5

    def test_unknown_top_level_key_passes(self):
        ConfigManager.set("events.enabled", True)
        assert ConfigManager.get("events.enabled") is True


class TestMetricsAndHealth:
    """Test metrics and health snapshots."""

    def test_metrics_count_sources(self):
        ConfigManager.get("rift.corruption_start_stage")
        ConfigManager.set("rift.corruption_start_stage", 3)
        ConfigManager.get("rift.corruption_start_stage")
        ConfigManager.get("rift.unknown", 1)
        metrics = ConfigManager.get_metrics()
        assert metrics["gets"] == 3
        assert metrics["sets"] == 1
        assert metrics["override_hits"] == 1
        assert metrics["default_hits"] == 1
        assert metrics["misses"] == 1
        assert metrics["override_keys"] == 1

    def test_health(self):
        assert ConfigManager.health_snapshot()["status"] == "not_initialized"
        ConfigManager.initialize()
        assert ConfigManager.health_snapshot()["status"] == "healthy"


class TestSchemas:
    """Test the recursive schema validator."""

    def test_nested_path_in_error(self):
        with pytest.raises(ConfigValidationError, match="rift.decay.min_compression"):
            validate_config_value("rift", {"decay": {"min_compression": "x"}})

    def test_int_accepted_as_float(self):
        assert validate_config_value("loot", {"crafting": {"boss_drop_chance": 1}})

    def test_strict_schema_rejects_extra(self):
        schema = ConfigSchema(fields={"a": int}, allow_extra=False)
        with pytest.raises(ConfigValidationError, match="Unexpected"):
            schema.validate({"a": 1, "b": 2})

    def test_register_and_unregister(self):
        register_schema("events", ConfigSchema(fields={"enabled": bool}))
        try:
            with pytest.raises(ConfigValidationError):
                validate_config_value("events", {"enabled": "yes"})
        finally:
            assert unregister_schema("events") is not None
        assert get_schema_for_top_key("events") is None
