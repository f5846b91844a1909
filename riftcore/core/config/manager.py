"""
ConfigManager: dynamic balance configuration access for Rift Core.

Purpose
-------
- Provide hierarchical, dot-notation access to tunable balance values
  (decay thresholds, tier weights, drop chances, enemy base stats).
- Back configuration with YAML defaults plus in-memory runtime overrides.
- Let tools and tests retune balance without touching code.

Responsibilities
----------------
- Load and deep-merge every YAML file from the defaults directory.
- Validate loaded defaults and override writes with recursive schema objects.
- Serve reads from overrides first, then defaults, then the caller's default.
- Apply per-key validators on write.
- Track read/write metrics and expose health snapshots.

Key Design Decisions
--------------------
- YAML is the single source for **defaults**; ``set()`` stores **overrides**
  in memory only (persistence is the caller's concern).
- Every read site passes its own code constant as ``default`` so the core
  keeps working with a sparse or missing YAML tree.
- Lazy initialization: the first ``get()`` loads YAML from ``Config.CONFIG_DIR``.

Dependencies
------------
- ``PyYAML`` for the defaults files.
- ``riftcore.core.config.validator`` for schema validation.
- ``riftcore.core.config.metrics`` for metrics and health snapshots.
- ``riftcore.core.logging.logger.get_logger`` for structured logs.
"""

from __future__ import annotations

import copy
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, MutableMapping, Optional

import yaml

from riftcore.core.config.config import Config
from riftcore.core.config.errors import (
    ConfigInitializationError,
    ConfigValidationError,
    ConfigWriteError,
)
from riftcore.core.config.metrics import (
    ConfigMetrics,
    get_health_snapshot,
    get_metrics_snapshot,
)
from riftcore.core.config.validator import validate_config_value
from riftcore.core.logging.logger import get_logger

logger = get_logger(__name__)

_MISSING = object()


class ConfigManager:
    """
    Dynamic balance configuration with YAML defaults and runtime overrides.

    Features
    --------
    - Hierarchical config access with dot notation (e.g. ``"loot.crafting.boss_drop_chance"``).
    - Runtime overrides validated by per-key validators and per-top-key schemas.
    - Metrics and health snapshots.

    Examples
    --------
    >>> ConfigManager.get("rift.decay.min_compression", 0.3)
    0.3
    >>> ConfigManager.set("loot.crafting.boss_drop_chance", 1.0)
    >>> ConfigManager.reset()
    """

    _defaults: Dict[str, Any] = {}
    _overrides: Dict[str, Any] = {}
    _validators: Dict[str, Callable[[Any], Any]] = {}
    _initialized: bool = False
    _config_dir: Optional[Path] = None
    _metrics: ConfigMetrics = ConfigMetrics()

    # =========================================================================
    # YAML LOADING & DEFAULTS
    # =========================================================================

    @staticmethod
    def _deep_merge_dict(
        target: MutableMapping[str, Any],
        source: MutableMapping[str, Any],
    ) -> None:
        """Recursively merge `source` into `target` (in-place)."""
        for key, value in source.items():
            if isinstance(value, dict) and isinstance(target.get(key), dict):
                ConfigManager._deep_merge_dict(target[key], value)
            else:
                target[key] = value

    @classmethod
    def _load_yaml_configs(cls, config_dir: Path) -> Dict[str, Any]:
        """
        Load and deep-merge every ``*.yaml`` / ``*.yml`` file under ``config_dir``.

        Raises
        ------
        ConfigInitializationError
            If the directory is missing, a file cannot be parsed, or a
            top-level block fails schema validation.
        """
        if not config_dir.is_dir():
            raise ConfigInitializationError(
                f"Config directory not found: {config_dir}"
            )

        yaml_files = sorted(
            list(config_dir.rglob("*.yaml")) + list(config_dir.rglob("*.yml"))
        )
        if not yaml_files:
            logger.info(
                "No YAML config files discovered; using built-in defaults only",
                extra={"config_dir": str(config_dir)},
            )

        merged: Dict[str, Any] = {}
        for yaml_file in yaml_files:
            try:
                with yaml_file.open("r", encoding="utf-8") as handle:
                    data = yaml.safe_load(handle)
            except (OSError, yaml.YAMLError) as exc:
                cls._metrics.record_error()
                raise ConfigInitializationError(
                    f"Failed to load YAML config '{yaml_file}': {exc}"
                ) from exc

            if isinstance(data, dict):
                cls._deep_merge_dict(merged, data)
                cls._metrics.yaml_files_loaded += 1
                logger.debug(
                    "Loaded YAML config",
                    extra={"file": str(yaml_file.relative_to(config_dir))},
                )
            elif data is not None:
                logger.warning(
                    "Ignoring non-dict YAML root object",
                    extra={
                        "file": str(yaml_file.relative_to(config_dir)),
                        "root_type": type(data).__name__,
                    },
                )

        for top_key, value in merged.items():
            try:
                validate_config_value(top_key, value)
            except ConfigValidationError as exc:
                cls._metrics.record_error()
                raise ConfigInitializationError(
                    f"Invalid default config for '{top_key}': {exc}"
                ) from exc

        return merged

    # =========================================================================
    # INITIALIZATION
    # =========================================================================

    @classmethod
    def initialize(cls, config_dir: Optional[Path] = None) -> None:
        """
        Load YAML defaults (idempotent unless ``config_dir`` changes).

        Parameters
        ----------
        config_dir:
            Directory to load from; defaults to ``Config.CONFIG_DIR``.
        """
        target = Path(config_dir) if config_dir is not None else Config.CONFIG_DIR
        if cls._initialized and cls._config_dir == target:
            return

        start = time.perf_counter()
        cls._defaults = cls._load_yaml_configs(target)
        cls._config_dir = target
        cls._initialized = True

        logger.info(
            "ConfigManager initialized",
            extra={
                "config_dir": str(target),
                "yaml_file_count": cls._metrics.yaml_files_loaded,
                "top_level_keys": sorted(cls._defaults.keys()),
                "latency_ms": round((time.perf_counter() - start) * 1000, 2),
            },
        )

    @classmethod
    def reset(cls) -> None:
        """
        Drop all overrides, validators and metrics, and force a reload on next use.

        Intended for tests and tooling.
        """
        cls._defaults = {}
        cls._overrides = {}
        cls._validators = {}
        cls._initialized = False
        cls._config_dir = None
        cls._metrics.reset()
        logger.debug("ConfigManager reset")

    # =========================================================================
    # VALIDATION HOOKS
    # =========================================================================

    @classmethod
    def register_validator(cls, key: str, validator: Callable[[Any], Any]) -> None:
        """
        Register a validator for a specific configuration key path.

        Validators are invoked on write and must either return the (possibly
        transformed) value to store or raise to block the write.
        """
        cls._validators[key] = validator
        logger.info(
            "ConfigManager validator registered",
            extra={
                "config_key": key,
                "validator": getattr(validator, "__name__", "anonymous"),
            },
        )

    @classmethod
    def _apply_validator(cls, key: str, value: Any) -> Any:
        validator = cls._validators.get(key)
        if not validator:
            return value

        try:
            return validator(value)
        except (TypeError, ValueError, ConfigValidationError) as exc:
            cls._metrics.record_error()
            logger.error(
                "Config validation failed",
                extra={
                    "config_key": key,
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                },
            )
            raise ConfigWriteError(f"Validation failed for config key '{key}'") from exc

    # =========================================================================
    # READ API
    # =========================================================================

    @staticmethod
    def _traverse(tree: Dict[str, Any], key: str) -> Any:
        value: Any = tree
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return _MISSING
            value = value[part]
        return value

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """
        Retrieve a configuration value by dot-notation path.

        Overrides win over YAML defaults; ``default`` is returned when neither
        defines the key.

        Examples
        --------
        >>> ConfigManager.get("loot.crafting.normal_drop_chance", 0.3)
        0.3
        """
        start = time.perf_counter()
        if not cls._initialized:
            cls.initialize()

        value = cls._traverse(cls._overrides, key)
        source = "override"
        if value is _MISSING:
            value = cls._traverse(cls._defaults, key)
            source = "default"
        if value is _MISSING:
            value = default
            source = "missing"

        cls._metrics.record_get((time.perf_counter() - start) * 1000, source)
        return value

    @classmethod
    def get_all_keys(cls) -> List[str]:
        """Return all top-level keys known from defaults or overrides."""
        if not cls._initialized:
            cls.initialize()
        return sorted(set(cls._defaults) | set(cls._overrides))

    # =========================================================================
    # WRITE API
    # =========================================================================

    @classmethod
    def set(cls, key: str, value: Any) -> None:
        """
        Store an in-memory override for ``key``.

        The value passes the key's registered validator, then the resulting
        top-level block (defaults merged with overrides) is validated against
        its schema. Failures leave existing overrides untouched.

        Raises
        ------
        ConfigWriteError
            If the key is empty or validation fails.
        """
        start = time.perf_counter()
        if not key or any(not part for part in key.split(".")):
            cls._metrics.record_error()
            raise ConfigWriteError(f"Invalid config key '{key}'")

        if not cls._initialized:
            cls.initialize()

        final_value = cls._apply_validator(key, value)

        parts = key.split(".")
        top_key = parts[0]

        candidate = copy.deepcopy(cls._overrides)
        node = candidate
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = final_value

        merged_top: Any = copy.deepcopy(cls._defaults.get(top_key))
        override_top = candidate[top_key]
        if isinstance(merged_top, dict) and isinstance(override_top, dict):
            cls._deep_merge_dict(merged_top, copy.deepcopy(override_top))
        else:
            merged_top = override_top

        try:
            validate_config_value(top_key, merged_top)
        except ConfigValidationError as exc:
            cls._metrics.record_error()
            logger.error(
                "Config override rejected by schema",
                extra={"config_key": key, "error": str(exc)},
            )
            raise ConfigWriteError(str(exc)) from exc

        cls._overrides = candidate
        cls._metrics.record_set((time.perf_counter() - start) * 1000)
        logger.info(
            "Config override applied",
            extra={"config_key": key, "new_value": final_value},
        )

    @classmethod
    def clear_override(cls, key: str) -> bool:
        """Remove a single override; returns whether one existed."""
        parts = key.split(".")
        node: Any = cls._overrides
        for part in parts[:-1]:
            if not isinstance(node, dict) or part not in node:
                return False
            node = node[part]
        if not isinstance(node, dict) or parts[-1] not in node:
            return False
        del node[parts[-1]]
        logger.info("Config override cleared", extra={"config_key": key})
        return True

    # =========================================================================
    # METRICS
    # =========================================================================

    @classmethod
    def get_metrics(cls) -> Dict[str, Any]:
        return get_metrics_snapshot(
            metrics=cls._metrics,
            initialized=cls._initialized,
            default_keys=len(cls._defaults),
            override_keys=len(cls._overrides),
        )

    @classmethod
    def health_snapshot(cls) -> Dict[str, Any]:
        return get_health_snapshot(
            initialized=cls._initialized,
            default_keys=len(cls._defaults),
            errors=cls._metrics.errors,
        )


__all__ = ["ConfigManager"]
