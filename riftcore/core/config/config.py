"""
Static configuration management for Rift Core.

Purpose
-------
Provides centralized static configuration loaded from environment variables
with sensible defaults and type validation. This module handles
non-dynamic configuration that is set at process startup: environment,
logging behaviour and where balance defaults are read from.

Non-Responsibilities
--------------------
- Game balance values (handled by ConfigManager)
- Runtime balance overrides (handled by ConfigManager)

Architecture Notes
------------------
- Singleton pattern via class methods (no instantiation)
- Auto-loads on module import via Config.load()
- Metrics track which values came from environment vs defaults

Environment Variables
---------------------
- RIFT_ENVIRONMENT: development | testing | staging | production
- RIFT_DEBUG: Debug flag (default: False)
- RIFT_LOG_LEVEL: Logging level (default: INFO)
- RIFT_LOG_JSON: Force JSON console logs (default: production only)
- RIFT_LOG_COLORS: Colored console logs on a TTY (default: True)
- RIFT_LOG_TO_FILE: Also write a daily rotating JSON log file (default: False)
- RIFT_LOGS_DIR: Directory for log files (default: ./logs)
- RIFT_CONFIG_DIR: Directory of YAML balance defaults (default: packaged defaults)
"""

import logging
import os
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

load_dotenv()


class Environment(Enum):
    """Deployment environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def from_string(cls, value: str) -> "Environment":
        """
        Parse environment string safely with fallback.

        Example
        -------
        >>> Environment.from_string("production") == Environment.PRODUCTION
        True
        >>> Environment.from_string("invalid") == Environment.DEVELOPMENT
        True
        """
        try:
            return cls(value.lower())
        except ValueError:
            # Structured logger is not initialized yet during bootstrap
            logging.warning(f"Unknown environment '{value}', defaulting to development")
            return cls.DEVELOPMENT


class _ConfigLoadMetrics:
    """
    Internal metrics tracker for configuration loading.

    Tracks which values came from environment variables versus defaults,
    and any validation errors encountered.
    """

    def __init__(self):
        self.env_vars_loaded: Dict[str, bool] = {}
        self.validation_errors: Dict[str, str] = {}
        self.defaults_used: Dict[str, Any] = {}
        self.last_reload: Optional[str] = None

    def record_env_load(self, key: str, from_env: bool, value: Any, default: Any):
        self.env_vars_loaded[key] = from_env
        if not from_env:
            self.defaults_used[key] = default

    def record_validation_error(self, key: str, error: str):
        self.validation_errors[key] = error

    def get_summary(self) -> Dict[str, Any]:
        return {
            "total_configs": len(self.env_vars_loaded),
            "from_environment": sum(1 for v in self.env_vars_loaded.values() if v),
            "from_defaults": sum(1 for v in self.env_vars_loaded.values() if not v),
            "validation_errors": len(self.validation_errors),
            "defaults_used": list(self.defaults_used.keys()),
            "last_reload": self.last_reload,
        }


class Config:
    """
    Centralized static configuration for Rift Core.

    Usage
    -----
    >>> Config.LOG_LEVEL
    'INFO'
    >>> if Config.is_production():
    ...     logger.info("Running in production mode")
    """

    _metrics: Optional[_ConfigLoadMetrics] = None
    _enable_metrics: bool = True

    # =========================================================================
    # Environment
    # =========================================================================

    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # =========================================================================
    # Logging
    # =========================================================================

    LOG_LEVEL: str = "INFO"
    LOG_JSON: Optional[bool] = None
    LOG_COLORS: bool = True
    LOG_TO_FILE: bool = False

    # =========================================================================
    # Directories
    # =========================================================================

    LOGS_DIR: Path = Path("logs")
    DEFAULTS_DIR: Path = Path(__file__).resolve().parent / "defaults"
    CONFIG_DIR: Path = DEFAULTS_DIR

    # =========================================================================
    # Helper Methods
    # =========================================================================

    @classmethod
    def _init_metrics(cls):
        if cls._enable_metrics and cls._metrics is None:
            cls._metrics = _ConfigLoadMetrics()

    @classmethod
    def _safe_bool(cls, key: str, default: bool) -> bool:
        """
        Safely parse a boolean from the environment.

        Accepts true/yes/1/on and false/no/0/off; anything else falls back
        to ``default`` with a warning.
        """
        cls._init_metrics()

        raw_value = os.getenv(key)

        if raw_value is None:
            if cls._metrics:
                cls._metrics.record_env_load(key, False, default, default)
            return default

        normalized = raw_value.lower().strip()
        if normalized in {"true", "yes", "1", "on"}:
            value = True
        elif normalized in {"false", "no", "0", "off"}:
            value = False
        else:
            error = f"{key}='{raw_value}' is not a valid boolean, using default {default}"
            logging.warning(error)
            if cls._metrics:
                cls._metrics.record_validation_error(key, error)
            return default

        if cls._metrics:
            cls._metrics.record_env_load(key, True, value, default)

        return value

    @classmethod
    def _safe_optional_bool(cls, key: str) -> Optional[bool]:
        """Parse an optional boolean; unset means 'decide from environment'."""
        if os.getenv(key) is None:
            cls._init_metrics()
            if cls._metrics:
                cls._metrics.record_env_load(key, False, None, None)
            return None
        return cls._safe_bool(key, False)

    @classmethod
    def _safe_str(cls, key: str, default: str) -> str:
        cls._init_metrics()

        value = os.getenv(key, default)
        from_env = key in os.environ

        if cls._metrics:
            cls._metrics.record_env_load(key, from_env, value, default)

        return value

    @classmethod
    def _safe_path(cls, key: str, default: Path) -> Path:
        return Path(cls._safe_str(key, str(default)))

    # =========================================================================
    # Loading
    # =========================================================================

    @classmethod
    def load(cls) -> None:
        """
        Load all configuration from environment variables.

        Called automatically on module import; call again to pick up
        environment changes (tests use this with monkeypatched variables).
        """
        cls._init_metrics()

        cls.ENVIRONMENT = Environment.from_string(
            cls._safe_str("RIFT_ENVIRONMENT", "development")
        ).value
        cls.DEBUG = cls._safe_bool("RIFT_DEBUG", False)

        cls.LOG_LEVEL = cls._safe_str("RIFT_LOG_LEVEL", "INFO").upper()
        if cls.LOG_LEVEL not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            error = f"Invalid RIFT_LOG_LEVEL '{cls.LOG_LEVEL}', using INFO"
            logging.warning(error)
            if cls._metrics:
                cls._metrics.record_validation_error("RIFT_LOG_LEVEL", error)
            cls.LOG_LEVEL = "INFO"

        cls.LOG_JSON = cls._safe_optional_bool("RIFT_LOG_JSON")
        cls.LOG_COLORS = cls._safe_bool("RIFT_LOG_COLORS", True)
        cls.LOG_TO_FILE = cls._safe_bool("RIFT_LOG_TO_FILE", False)

        cls.LOGS_DIR = cls._safe_path("RIFT_LOGS_DIR", Path("logs"))
        cls.CONFIG_DIR = cls._safe_path("RIFT_CONFIG_DIR", cls.DEFAULTS_DIR)

        if cls._metrics:
            cls._metrics.last_reload = datetime.now(timezone.utc).isoformat()

    @classmethod
    def validate(cls) -> None:
        """
        Validate settings that would otherwise fail late.

        Raises
        ------
        ValueError:
            If the configured balance defaults directory does not exist.
        """
        if not cls.CONFIG_DIR.is_dir():
            raise ValueError(f"RIFT_CONFIG_DIR does not exist: {cls.CONFIG_DIR}")

        if cls.LOG_TO_FILE:
            cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    # =========================================================================
    # Environment checks
    # =========================================================================

    @classmethod
    def is_production(cls) -> bool:
        return cls.ENVIRONMENT == Environment.PRODUCTION.value

    @classmethod
    def is_development(cls) -> bool:
        return cls.ENVIRONMENT == Environment.DEVELOPMENT.value

    @classmethod
    def is_testing(cls) -> bool:
        return cls.ENVIRONMENT == Environment.TESTING.value

    # =========================================================================
    # Introspection
    # =========================================================================

    @classmethod
    def get_metrics(cls) -> Optional[_ConfigLoadMetrics]:
        return cls._metrics

    @classmethod
    def get_config_summary(cls) -> Dict[str, Any]:
        """
        Return a loggable summary of the active static configuration.

        Example
        -------
        >>> Config.get_config_summary()["environment"]
        'development'
        """
        return {
            "environment": cls.ENVIRONMENT,
            "debug": cls.DEBUG,
            "log_level": cls.LOG_LEVEL,
            "log_json": cls.LOG_JSON,
            "log_to_file": cls.LOG_TO_FILE,
            "logs_dir": str(cls.LOGS_DIR),
            "config_dir": str(cls.CONFIG_DIR),
            "using_packaged_defaults": cls.CONFIG_DIR == cls.DEFAULTS_DIR,
        }


Config.load()
