"""
Domain exceptions for Rift Core.

Raised at module boundaries when callers pass values the rules cannot
accept, or ask for catalog entries that do not exist. All of them follow
the `riftcore.core.exceptions.RiftError` contract and log at INFO: a
rejected input is the caller's problem, not an incident.

Nothing in the core retries; ``is_retryable`` is informational for hosts.
"""

from __future__ import annotations

from typing import Any, Optional

from riftcore.core.exceptions import (
    ErrorSeverity,
    RiftError,
    get_error_severity,
    is_transient_error,
    should_alert,
)


class RiftDomainException(RiftError):
    """
    Base exception for domain-level errors.

    Example:
        >>> raise RiftDomainException(
        ...     "Run already finished",
        ...     {"stage": 5}
        ... )
    """


class InvalidInputError(RiftDomainException):
    """
    Raised when an input violates a boundary rule.

    Negative or non-finite time deltas, malformed seeds, non-positive zone
    levels and out-of-range restore values all end up here. Inputs are
    rejected, never silently coerced, except where stage indices clamp.

    Args:
        field: The input that failed validation
        message: Description of the validation failure
    """

    DEFAULT_SEVERITY = ErrorSeverity.INFO

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(
            f"Invalid {field}: {message}",
            details={"field": field, "message": message},
            error_code=f"INVALID_{field.upper()}",
        )


class NotFoundError(RiftDomainException):
    """
    Raised when a catalog lookup misses.

    Args:
        resource_type: Type of resource (e.g., "Corruption", "CraftingItem")
        identifier: Optional identifier for the missing resource
    """

    DEFAULT_SEVERITY = ErrorSeverity.INFO

    def __init__(self, resource_type: str, identifier: Optional[Any] = None) -> None:
        self.resource_type = resource_type
        self.identifier = identifier
        suffix = f": {identifier}" if identifier is not None else ""
        super().__init__(
            f"{resource_type} not found{suffix}",
            details={"resource_type": resource_type, "identifier": identifier},
            error_code=f"{resource_type.upper()}_NOT_FOUND",
        )


__all__ = [
    "ErrorSeverity",
    "InvalidInputError",
    "NotFoundError",
    "RiftDomainException",
    "get_error_severity",
    "is_transient_error",
    "should_alert",
]
