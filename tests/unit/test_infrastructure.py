"""
Unit tests for static configuration, exceptions and logging.
"""

import json
import logging

import pytest

from riftcore.core.config.config import Config, Environment
from riftcore.core.exceptions import (
    ConfigurationError,
    ErrorSeverity,
    RiftInfrastructureException,
    get_error_severity,
    is_transient_error,
    should_alert,
)
from riftcore.core.logging.logger import (
    ContextFilter,
    JSONFormatter,
    LogContext,
    clear_log_context,
    get_log_context,
    get_logger,
    get_logging_health,
    set_log_context,
)
from riftcore.modules.shared.exceptions import InvalidInputError, NotFoundError

pytestmark = [pytest.mark.unit, pytest.mark.config]


@pytest.fixture
def reload_config(monkeypatch):
    """Reload Config from a patched environment, restoring it afterwards."""
    yield monkeypatch
    monkeypatch.undo()
    Config.load()


# ============================================================================
# STATIC CONFIG
# ============================================================================


class TestStaticConfig:
    """Test environment-driven Config."""

    def test_environment_parsing(self):
        assert Environment.from_string("PRODUCTION") is Environment.PRODUCTION
        assert Environment.from_string("nonsense") is Environment.DEVELOPMENT

    def test_load_from_environment(self, reload_config):
        reload_config.setenv("RIFT_ENVIRONMENT", "production")
        reload_config.setenv("RIFT_DEBUG", "yes")
        reload_config.setenv("RIFT_LOG_LEVEL", "debug")
        Config.load()
        assert Config.is_production()
        assert Config.DEBUG is True
        assert Config.LOG_LEVEL == "DEBUG"

    def test_invalid_values_fall_back(self, reload_config):
        reload_config.setenv("RIFT_DEBUG", "maybe")
        reload_config.setenv("RIFT_LOG_LEVEL", "LOUD")
        Config.load()
        assert Config.DEBUG is False
        assert Config.LOG_LEVEL == "INFO"
        assert Config.get_metrics().get_summary()["validation_errors"] >= 2

    def test_validate_missing_config_dir(self, reload_config, tmp_path):
        reload_config.setenv("RIFT_CONFIG_DIR", str(tmp_path / "missing"))
        Config.load()
        with pytest.raises(ValueError):
            Config.validate()

    def test_summary(self):
        summary = Config.get_config_summary()
        assert summary["using_packaged_defaults"] is (Config.CONFIG_DIR == Config.DEFAULTS_DIR)
        assert set(summary) >= {"environment", "log_level", "config_dir"}


# ============================================================================
# EXCEPTIONS
# ============================================================================


class TestExceptions:
    """Test the structured exception contract."""

    def test_configuration_error(self):
        exc = ConfigurationError("enemy.deck_pool", "no eligible cards")
        assert exc.error_code == "CONFIG_ERROR"
        assert exc.severity is ErrorSeverity.CRITICAL
        assert exc.to_dict()["details"] == {
            "config_key": "enemy.deck_pool",
            "message": "no eligible cards",
        }
        assert "CONFIG_ERROR" in str(exc)

    def test_domain_errors(self):
        exc = InvalidInputError("seed", "expected str or int")
        assert str(exc).startswith("[INVALID_SEED] Invalid seed")
        assert exc.severity is ErrorSeverity.INFO
        assert NotFoundError("Card", "x").error_code == "CARD_NOT_FOUND"

    def test_helpers(self):
        assert not is_transient_error(ConfigurationError("k", "m"))
        assert is_transient_error(RiftInfrastructureException("m", is_retryable=True))
        assert not is_transient_error(RuntimeError("plain"))
        assert get_error_severity(RuntimeError("plain")) is ErrorSeverity.ERROR
        assert should_alert(ConfigurationError("k", "m"))
        assert not should_alert(InvalidInputError("f", "m"))


# ============================================================================
# LOGGING
# ============================================================================


def _record(name="riftcore.modules.rift.run", **extra):
    record = logging.LogRecord(name, logging.INFO, __file__, 1, "message", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLogging:
    """Test context propagation, formatting and health."""

    def test_context_filter_defaults(self):
        record = _record()
        ContextFilter().filter(record)
        assert record.component == "rift"
        assert record.seed == "N/A"

    def test_log_context_binds_and_restores(self):
        before = get_log_context()
        with LogContext(run_id="r-1", seed="abc", zone_level=5, operation="advance"):
            context = get_log_context()
            record = _record()
            ContextFilter().filter(record)
        assert context["seed"] == "abc"
        assert record.run_id == "r-1"
        assert record.zone_level == 5
        assert get_log_context() == before

    def test_explicit_extra_wins(self):
        with LogContext(seed="ambient"):
            record = _record(seed="explicit")
            ContextFilter().filter(record)
        assert record.seed == "explicit"

    def test_set_and_clear_context(self):
        set_log_context(run_id="r-2", component="loot")
        assert get_log_context()["component"] == "loot"
        clear_log_context()
        assert get_log_context() == {}

    def test_json_formatter(self):
        record = _record(seed="abc", stage=3)
        payload = json.loads(JSONFormatter().format(record))
        assert payload["message"] == "message"
        assert payload["run"] == {"seed": "abc"}
        assert payload["extra"]["stage"] == 3

    def test_package_logger_initialized(self):
        health = get_logging_health()
        assert health.initialized
        assert health.queue_max_size > 0
        assert get_logger("riftcore.test").name == "riftcore.test"
