"""
Infrastructure exceptions for Rift Core.

Purpose
-------
Define the structured exception contract shared by every Rift Core error,
and the infrastructure-level hierarchy: configuration errors and content
catalogs that cannot satisfy a request. These are engineering problems, not
player mistakes.

Design Notes
------------
- `RiftError` carries the contract; domain errors
  (`riftcore.modules.shared.exceptions`) and infrastructure errors both
  derive from it:
  - `message`: human-readable description
  - `details`: additional structured context (dict)
  - `severity`: `ErrorSeverity` value for logging/alerting
  - `is_retryable`: whether the operation can be retried
  - `error_code`: short, stable identifier for programmatic use
- Subclasses set ``DEFAULT_SEVERITY`` / ``DEFAULT_RETRYABLE`` instead of
  passing them on every raise.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Error severity levels for logging and alerting."""

    DEBUG = "debug"
    INFO = "info"  # rejected input
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"  # misconfiguration that blocks generation


class RiftError(Exception):
    """
    Structured base for all Rift Core errors.

    Args:
        message: Human-readable error message
        details: Additional structured data about the error
        severity: Overrides the class ``DEFAULT_SEVERITY``
        is_retryable: Overrides the class ``DEFAULT_RETRYABLE``
        error_code: Stable code; defaults to the class name
    """

    DEFAULT_SEVERITY: ErrorSeverity = ErrorSeverity.ERROR
    DEFAULT_RETRYABLE: bool = False

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        severity: Optional[ErrorSeverity] = None,
        is_retryable: Optional[bool] = None,
        error_code: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.severity = severity or self.DEFAULT_SEVERITY
        self.is_retryable = self.DEFAULT_RETRYABLE if is_retryable is None else is_retryable
        self.error_code = error_code or type(self).__name__

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form for structured log ``extra`` payloads."""
        return {
            "error_type": type(self).__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "severity": self.severity.value,
            "is_retryable": self.is_retryable,
        }

    def __str__(self) -> str:
        if self.details:
            return f"[{self.error_code}] {self.message} | Details: {self.details}"
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, details={self.details!r}, "
            f"severity={self.severity.value!r}, is_retryable={self.is_retryable!r})"
        )


class RiftInfrastructureException(RiftError):
    """
    Base exception for infrastructure-level errors.

    Example:
        >>> raise RiftInfrastructureException(
        ...     "Card catalog is empty",
        ...     {"catalog": "cards"}
        ... )
    """


class ConfigurationError(RiftInfrastructureException):
    """
    Raised when configuration or catalog data cannot serve a request.

    Covers invalid balance values, tier curves with ``min > max`` and
    weighted pools that end up empty after filtering (for example a card
    catalog with no card matching an archetype's energy at a zone level).

    Args:
        config_key: The configuration key or catalog that has issues
        message: Description of the configuration problem
    """

    DEFAULT_SEVERITY = ErrorSeverity.CRITICAL

    def __init__(self, config_key: str, message: str) -> None:
        self.config_key = config_key
        super().__init__(
            f"Configuration error for {config_key}: {message}",
            details={"config_key": config_key, "message": message},
            error_code="CONFIG_ERROR",
        )


# ============================================================================
# HELPERS
# ============================================================================


def is_transient_error(exc: Exception) -> bool:
    """True if ``exc`` is a Rift error marked retryable; plain exceptions never are."""
    return isinstance(exc, RiftError) and exc.is_retryable


def get_error_severity(exc: Exception) -> ErrorSeverity:
    """Severity of a Rift error; anything else counts as ERROR."""
    if isinstance(exc, RiftError):
        return exc.severity
    return ErrorSeverity.ERROR


def should_alert(exc: Exception) -> bool:
    """True if severity is ERROR or CRITICAL."""
    return get_error_severity(exc) in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)


__all__ = [
    "ConfigurationError",
    "ErrorSeverity",
    "RiftError",
    "RiftInfrastructureException",
    "get_error_severity",
    "is_transient_error",
    "should_alert",
]
