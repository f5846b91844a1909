"""
Configuration error hierarchy for Rift Core.

Purpose
-------
Provides exceptions for configuration management operations with clear
error classification and helpful error messages.

Non-Responsibilities
--------------------
- Error logging (handled by logger)
- Error recovery logic (handled by ConfigManager)

Exception Hierarchy
-------------------
ConfigError (base)
├── ConfigValidationError (schema/type validation failures)
├── ConfigWriteError (override write failures)
└── ConfigInitializationError (startup/init failures)
"""


class ConfigError(Exception):
    """
    Base exception for all configuration-related errors.

    Example
    -------
    >>> try:
    ...     ConfigManager.set("rift.decay.min_compression", "fast")
    ... except ConfigError as e:
    ...     logger.error(f"Config operation failed: {e}")
    """
    pass


class ConfigValidationError(ConfigError):
    """
    Raised when configuration validation fails.

    This exception is raised when:
    - Schema validation fails (wrong type, invalid structure)
    - Value bounds checking fails (out of range)
    """
    pass


class ConfigWriteError(ConfigError):
    """
    Raised when a runtime override cannot be applied.

    Includes validation errors during writes so callers only need to
    catch one type around ``ConfigManager.set``.
    """
    pass


class ConfigInitializationError(ConfigError):
    """
    Raised when ConfigManager initialization fails.

    This exception is raised when:
    - The defaults directory does not exist
    - A YAML defaults file cannot be parsed
    - A loaded default fails schema validation
    """
    pass


__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "ConfigWriteError",
    "ConfigInitializationError",
]
