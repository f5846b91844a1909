"""
Rift Core Domain Validators

Purpose
-------
Boundary validation for the rift core. Validators raise
`InvalidInputError` when a value breaks a rule and otherwise return the
normalized value, so call sites read as one line.

Design Notes
------------
Validators:
- Accept the value and the public field name used in the error
- Reject ``bool`` where a number is expected (it is an ``int`` subclass)
- Reject NaN and infinities explicitly
- Do no logging; callers log with their own context

Usage
-----
    from riftcore.modules.shared.validators import validate_non_negative_finite

    delta = validate_non_negative_finite("delta_ms", delta_ms)
    # Raises: InvalidInputError for -5, NaN, inf, "10"
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Union

Number = Union[int, float]


def _require_number(field: str, value: Any) -> Number:
    from .exceptions import InvalidInputError

    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidInputError(field, f"expected a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidInputError(field, f"must be finite, got {value}")
    return value


def validate_finite(field: str, value: Any) -> Number:
    """Validate a real, finite number (NaN, infinities, bools and strings are rejected)."""
    return _require_number(field, value)


def validate_non_negative_finite(field: str, value: Any) -> Number:
    """
    Validate a finite number ``>= 0``.

    Raises:
        InvalidInputError: If value is not a real number, is NaN/inf, or negative

    Example:
        >>> validate_non_negative_finite("delta_ms", 250)
        250
    """
    from .exceptions import InvalidInputError

    number = _require_number(field, value)
    if number < 0:
        raise InvalidInputError(field, f"must be >= 0, got {number}")
    return number


def validate_positive_finite(field: str, value: Any) -> Number:
    """Validate a finite number ``> 0`` (scaling multipliers)."""
    from .exceptions import InvalidInputError

    number = _require_number(field, value)
    if number <= 0:
        raise InvalidInputError(field, f"must be > 0, got {number}")
    return number


def validate_non_negative_int(field: str, value: Any) -> int:
    """
    Validate a whole number ``>= 0`` (run clock milliseconds).

    Integral floats such as ``250.0`` are accepted and returned as ``int``;
    fractional values are rejected so the clock only ever holds integers.

    Example:
        >>> validate_non_negative_int("delta_ms", 16.0)
        16
    """
    from .exceptions import InvalidInputError

    number = validate_non_negative_finite(field, value)
    if number != int(number):
        raise InvalidInputError(field, f"must be a whole number of milliseconds, got {number}")
    return int(number)


def validate_positive_int(field: str, value: Any) -> int:
    """
    Validate an integer ``>= 1`` (zone levels).

    Integral floats such as ``5.0`` are accepted and returned as ``int``.
    """
    from .exceptions import InvalidInputError

    number = _require_number(field, value)
    if number != int(number):
        raise InvalidInputError(field, f"must be a whole number, got {number}")
    if number < 1:
        raise InvalidInputError(field, f"must be >= 1, got {number}")
    return int(number)


def validate_stage_index(field: str, value: Any) -> int:
    """Validate a decay stage index in ``0..5`` without clamping (restore path)."""
    from .exceptions import InvalidInputError

    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(field, f"expected an int, got {type(value).__name__}")
    if not 0 <= value <= 5:
        raise InvalidInputError(field, f"must be between 0 and 5, got {value}")
    return value


def validate_seed(seed: Any) -> str:
    """
    Normalize a seed to its string form.

    Strings are used verbatim; integers are stringified. Everything else
    (None, bool, floats, containers) is rejected.

    Example:
        >>> validate_seed(42)
        '42'
    """
    from .exceptions import InvalidInputError

    if isinstance(seed, bool) or seed is None:
        raise InvalidInputError("seed", f"expected str or int, got {seed!r}")
    if isinstance(seed, str):
        return seed
    if isinstance(seed, int):
        return str(seed)
    raise InvalidInputError("seed", f"expected str or int, got {type(seed).__name__}")


__all__ = [
    "validate_finite",
    "validate_non_negative_finite",
    "validate_non_negative_int",
    "validate_positive_finite",
    "validate_positive_int",
    "validate_stage_index",
    "validate_seed",
]
