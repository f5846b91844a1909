"""
Core infrastructure layer for Rift Core.

Purpose
-------
Provide a single import surface for the infrastructure subsystems:

- Configuration management (Config, ConfigManager)
- Logging (structured logging, logger factory)
- Infrastructure exceptions (RiftInfrastructureException hierarchy)

Design Decisions
----------------
- This module is intentionally thin: no logic, no configuration, no I/O.
- ``config`` is imported before ``logging``; the logger reads static Config.
"""

from __future__ import annotations

from riftcore.core.config import Config, ConfigManager
from riftcore.core.exceptions import (
    ConfigurationError,
    ErrorSeverity,
    RiftError,
    RiftInfrastructureException,
    get_error_severity,
    is_transient_error,
    should_alert,
)
from riftcore.core.logging import LogContext, get_logger

__all__ = [
    "Config",
    "ConfigManager",
    "ConfigurationError",
    "ErrorSeverity",
    "RiftError",
    "RiftInfrastructureException",
    "get_error_severity",
    "is_transient_error",
    "should_alert",
    "LogContext",
    "get_logger",
]
