"""
Configuration management subsystem for Rift Core.

Purpose
-------
Provides static (environment-based) configuration and dynamic balance
configuration backed by YAML defaults with in-memory overrides.

Architecture
------------
- **config.py**: Static configuration from environment variables
- **manager.py**: Dynamic balance configuration (YAML defaults + overrides)
- **validator.py**: Schema-based configuration validation
- **metrics.py**: Read/write metrics and health snapshots
- **errors.py**: Config-specific exception hierarchy

Static vs Dynamic Configuration
--------------------------------
**Static (Config):**
- Loaded from environment variables (and ``.env``) at import
- Includes: environment, log level/format, logs dir, balance defaults dir

**Dynamic (ConfigManager):**
- Loaded from YAML files in ``defaults/`` (or ``RIFT_CONFIG_DIR``)
- Includes: decay thresholds, tier weights, drop chances, enemy base stats
- Runtime overrides via ``ConfigManager.set`` for tooling and tests

Usage Examples
--------------
```python
from riftcore.core.config import Config, ConfigManager

if Config.is_production():
    logger.info("Running in production mode")

boss_chance = ConfigManager.get("loot.crafting.boss_drop_chance", 0.8)
ConfigManager.set("loot.crafting.boss_drop_chance", 1.0)
```

Dependencies
------------
- Config: python-dotenv
- ConfigManager: PyYAML
"""

# Static configuration (environment-based)
from riftcore.core.config.config import Config, Environment

# Dynamic balance configuration
from riftcore.core.config.manager import ConfigManager

# Error hierarchy
from riftcore.core.config.errors import (
    ConfigError,
    ConfigInitializationError,
    ConfigValidationError,
    ConfigWriteError,
)

# Validation and schema management
from riftcore.core.config.validator import (
    ConfigSchema,
    SchemaField,
    get_schema_for_top_key,
    register_schema,
    unregister_schema,
    validate_config_value,
)

# Metrics and monitoring
from riftcore.core.config.metrics import (
    ConfigMetrics,
    get_health_snapshot,
    get_metrics_snapshot,
)

__all__ = [
    # Static configuration
    "Config",
    "Environment",
    # Dynamic configuration manager
    "ConfigManager",
    # Error hierarchy
    "ConfigError",
    "ConfigInitializationError",
    "ConfigValidationError",
    "ConfigWriteError",
    # Validation
    "ConfigSchema",
    "SchemaField",
    "get_schema_for_top_key",
    "register_schema",
    "unregister_schema",
    "validate_config_value",
    # Metrics
    "ConfigMetrics",
    "get_health_snapshot",
    "get_metrics_snapshot",
]
