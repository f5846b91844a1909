"""
Rift system constants.

Single source of truth for:
- Decay stage metadata (names, colors, spawn and stat multipliers)
- Default decay schedule and compression
- Corruption start stage and chunk spawn caps

Balance values here are the code defaults; ConfigManager keys under
``rift.*`` override them.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

from riftcore.modules.shared.formulas import clamp
from riftcore.modules.shared.validators import validate_finite


# ============================================================================
# DECAY STAGES
# ============================================================================


@dataclass(frozen=True, slots=True)
class DecayStageInfo:
    """Display and scaling metadata for one decay stage."""

    index: int
    name: str
    color: str
    spawn_multiplier: float  # enemy count multiplier
    stat_multiplier: float  # enemy health/ATK/DEF multiplier

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


STAGE_INFO: Tuple[DecayStageInfo, ...] = (
    DecayStageInfo(0, "STABLE", "#44cc44", 1.0, 1.0),
    DecayStageInfo(1, "FLICKERING", "#88cc44", 1.0, 1.0),
    DecayStageInfo(2, "UNSTABLE", "#cccc00", 1.5, 1.1),
    DecayStageInfo(3, "FRACTURING", "#ff8c00", 2.0, 1.2),
    DecayStageInfo(4, "COLLAPSING", "#ff4444", 3.0, 1.4),
    DecayStageInfo(5, "VOID BREACH", "#cc00ff", 4.0, 1.6),
)

STAGE_COUNT = len(STAGE_INFO)
MAX_STAGE = STAGE_COUNT - 1


def clamp_stage(stage: float, field: str = "stage") -> int:
    """
    Clamp a stage index into ``[0, MAX_STAGE]``; fractions truncate.

    Raises:
        InvalidInputError: If ``stage`` is not a finite number
    """
    return int(clamp(validate_finite(field, stage), 0, MAX_STAGE))


# ============================================================================
# DECAY SCHEDULE
# ============================================================================

# Stage entry times in seconds at rift level 0
BASE_THRESHOLDS_S: Tuple[int, ...] = (0, 120, 240, 420, 600, 900)
COMPRESSION_PER_LEVEL = 0.01
MIN_COMPRESSION = 0.3


# ============================================================================
# CORRUPTIONS
# ============================================================================

CORRUPTION_START_STAGE = 2


# ============================================================================
# CHUNK SPAWNS
# ============================================================================

CHUNK_SPAWN_CAP = 4
CHUNK_SPAWN_HARD_CAP = 8
