"""
Rift Core Shared Module

Purpose
-------
Domain-level foundations for the rift, loot, cards and enemy modules:
- Domain exceptions and error handling
- Boundary validators
- Pure formulas (half-up rounding, threshold scaling)
- Seeded random streams and the shared weighted choice

Usage
-----
    from riftcore.modules.shared import (
        InvalidInputError,
        SeededRandom,
        round_half_up,
        weighted_choice,
    )
"""

from riftcore.modules.shared.exceptions import (
    ErrorSeverity,
    InvalidInputError,
    NotFoundError,
    RiftDomainException,
    get_error_severity,
    is_transient_error,
    should_alert,
)
from riftcore.modules.shared.formulas import (
    clamp,
    compression_factor,
    level_credit_multiplier,
    round_half_up,
    scale_thresholds_ms,
)
from riftcore.modules.shared.rng import SeededRandom, hash_seed
from riftcore.modules.shared.validators import (
    validate_finite,
    validate_non_negative_finite,
    validate_non_negative_int,
    validate_positive_finite,
    validate_positive_int,
    validate_seed,
    validate_stage_index,
)
from riftcore.modules.shared.weighted import pick_index, weighted_choice

__all__ = [
    # Exceptions
    "ErrorSeverity",
    "RiftDomainException",
    "InvalidInputError",
    "NotFoundError",
    "is_transient_error",
    "get_error_severity",
    "should_alert",
    # Formulas
    "round_half_up",
    "clamp",
    "compression_factor",
    "scale_thresholds_ms",
    "level_credit_multiplier",
    # Random
    "SeededRandom",
    "hash_seed",
    "weighted_choice",
    "pick_index",
    # Validators
    "validate_finite",
    "validate_non_negative_finite",
    "validate_non_negative_int",
    "validate_positive_finite",
    "validate_positive_int",
    "validate_seed",
    "validate_stage_index",
]
