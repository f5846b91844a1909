"""
Rift Decay Engine.

Tracks elapsed time in one zone run and moves it through the six decay
stages (STABLE .. VOID BREACH). Higher rift levels compress the schedule,
down to 30% of the base timeline.

State machine
-------------
- Stages 0..5, initial 0, terminal 5.
- ``advance`` only moves forward and may skip stages in one call; the
  stage-change callback fires at most once per call with the final stage.
- ``restore`` is the only way to set the stage directly.

Tunables
--------
- ``rift.decay.base_thresholds_s``
- ``rift.decay.compression_per_level``
- ``rift.decay.min_compression``
- ``rift.decay.chunk_spawn_cap`` / ``rift.decay.chunk_spawn_hard_cap``
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

from riftcore.core.config.manager import ConfigManager
from riftcore.core.exceptions import ConfigurationError
from riftcore.core.logging.logger import get_logger
from riftcore.modules.rift.constants import (
    BASE_THRESHOLDS_S,
    CHUNK_SPAWN_CAP,
    CHUNK_SPAWN_HARD_CAP,
    COMPRESSION_PER_LEVEL,
    MAX_STAGE,
    MIN_COMPRESSION,
    STAGE_COUNT,
    STAGE_INFO,
    DecayStageInfo,
    clamp_stage,
)
from riftcore.modules.shared.exceptions import InvalidInputError
from riftcore.modules.shared.formulas import (
    compression_factor,
    round_half_up,
    scale_thresholds_ms,
)
from riftcore.modules.shared.validators import (
    validate_non_negative_finite,
    validate_non_negative_int,
    validate_positive_int,
    validate_stage_index,
)

logger = get_logger(__name__)

StageChangeCallback = Callable[[int], None]


def compute_thresholds_ms(rift_level: float) -> Tuple[int, ...]:
    """
    Stage entry times in milliseconds for a rift level.

    Raises:
        ConfigurationError: If the configured schedule is not six
            non-decreasing, non-negative values starting at 0
    """
    base = ConfigManager.get("rift.decay.base_thresholds_s", list(BASE_THRESHOLDS_S))
    per_level = ConfigManager.get("rift.decay.compression_per_level", COMPRESSION_PER_LEVEL)
    floor = ConfigManager.get("rift.decay.min_compression", MIN_COMPRESSION)

    if len(base) != STAGE_COUNT:
        raise ConfigurationError(
            "rift.decay.base_thresholds_s",
            f"expected {STAGE_COUNT} thresholds, got {len(base)}",
        )
    if base[0] != 0 or any(b < a for a, b in zip(base, base[1:])):
        raise ConfigurationError(
            "rift.decay.base_thresholds_s",
            f"thresholds must start at 0 and never decrease, got {list(base)}",
        )

    return scale_thresholds_ms(base, compression_factor(rift_level, per_level, floor))


class RiftDecayEngine:
    """
    Decay timer for a single zone run.

    Example
    -------
    >>> engine = RiftDecayEngine(rift_level=0)
    >>> engine.advance(130_000)
    1
    >>> engine.stage_info.name
    'FLICKERING'
    """

    STAGE_COUNT = STAGE_COUNT

    def __init__(
        self,
        rift_level: float,
        on_stage_change: Optional[StageChangeCallback] = None,
    ) -> None:
        self._rift_level = validate_non_negative_finite("rift_level", rift_level)
        self._thresholds_ms = compute_thresholds_ms(self._rift_level)
        self._on_stage_change = on_stage_change
        self._elapsed_ms: int = 0
        self._stage: int = 0

    # ========================================================================
    # STATE
    # ========================================================================

    @property
    def rift_level(self) -> float:
        return self._rift_level

    @property
    def elapsed_ms(self) -> int:
        return self._elapsed_ms

    @property
    def current_stage(self) -> int:
        return self._stage

    @property
    def thresholds_ms(self) -> Tuple[int, ...]:
        return self._thresholds_ms

    @property
    def is_terminal(self) -> bool:
        return self._stage >= MAX_STAGE

    @property
    def stage_info(self) -> DecayStageInfo:
        return STAGE_INFO[self._stage]

    def stage_for_elapsed(self, elapsed_ms: float) -> int:
        """Highest stage whose threshold ``elapsed_ms`` has reached."""
        for stage in range(MAX_STAGE, 0, -1):
            if elapsed_ms >= self._thresholds_ms[stage]:
                return stage
        return 0

    # ========================================================================
    # TIME
    # ========================================================================

    def advance(self, delta_ms: int) -> int:
        """
        Add ``delta_ms`` to the run clock and return the resulting stage.

        The clock counts whole milliseconds, so any split of the same total
        time gives the same clock and stage.

        Raises:
            InvalidInputError: If ``delta_ms`` is negative, not finite or
                fractional
        """
        delta = validate_non_negative_int("delta_ms", delta_ms)
        self._elapsed_ms += delta

        previous = self._stage
        for stage in range(MAX_STAGE, previous, -1):
            if self._elapsed_ms >= self._thresholds_ms[stage]:
                self._stage = stage
                break

        if self._stage != previous:
            logger.info(
                "Rift decay stage changed",
                extra={
                    "previous_stage": previous,
                    "new_stage": self._stage,
                    "stage_name": self.stage_info.name,
                    "elapsed_ms": self._elapsed_ms,
                    "rift_level": self._rift_level,
                },
            )
            if self._on_stage_change is not None:
                self._on_stage_change(self._stage)

        return self._stage

    def current_stage_progress(self) -> float:
        """Fraction of the way from this stage's threshold to the next, in [0, 1]."""
        if self.is_terminal:
            return 1.0
        current = self._thresholds_ms[self._stage]
        total = self._thresholds_ms[self._stage + 1] - current
        if total <= 0:
            return 1.0
        return max(0.0, min(1.0, (self._elapsed_ms - current) / total))

    def time_to_next_stage(self) -> int:
        """Milliseconds until the next stage; 0 at the terminal stage."""
        if self.is_terminal:
            return 0
        return max(0, self._thresholds_ms[self._stage + 1] - self._elapsed_ms)

    # ========================================================================
    # PERSISTENCE
    # ========================================================================

    def restore(self, elapsed_ms: int, stage: int) -> None:
        """
        Overwrite the timer state from a save.

        Values are range-checked but the stage is trusted: a stage that does
        not match ``elapsed_ms`` is kept as given and logged as a warning. No
        stage-change callback fires.

        Raises:
            InvalidInputError: If ``elapsed_ms`` is not a whole number >= 0 or
                ``stage`` is not an int in 0..5
        """
        elapsed = validate_non_negative_int("elapsed_ms", elapsed_ms)
        stage = validate_stage_index("stage", stage)

        expected = self.stage_for_elapsed(elapsed)
        if expected != stage:
            logger.warning(
                "Restored decay stage does not match elapsed time",
                extra={
                    "elapsed_ms": elapsed,
                    "restored_stage": stage,
                    "expected_stage": expected,
                },
            )

        self._elapsed_ms = elapsed
        self._stage = stage

    def to_dict(self) -> Dict[str, Any]:
        return {"elapsed_ms": self._elapsed_ms, "current_stage": self._stage}

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        rift_level: float,
        on_stage_change: Optional[StageChangeCallback] = None,
    ) -> "RiftDecayEngine":
        """
        Rebuild an engine from `to_dict` output.

        Raises:
            InvalidInputError: If keys are missing or values out of range
        """
        if not isinstance(data, dict) or "elapsed_ms" not in data or "current_stage" not in data:
            raise InvalidInputError(
                "decay_state", "expected a mapping with elapsed_ms and current_stage"
            )
        engine = cls(rift_level, on_stage_change)
        engine.restore(data["elapsed_ms"], data["current_stage"])
        return engine

    # ========================================================================
    # STATIC LOOKUPS
    # ========================================================================

    @staticmethod
    def get_stage_info(stage: int) -> DecayStageInfo:
        """
        Metadata for any stage index, clamped to 0..5.

        Raises:
            InvalidInputError: If ``stage`` is not a finite number
        """
        return STAGE_INFO[clamp_stage(stage)]

    @staticmethod
    def scaled_enemy_cap(zone_level: int, stage: int) -> int:
        """
        Maximum enemies per map chunk at a zone level and decay stage.

        ``min(hard_cap, round(min(cap, 1 + level // 2) * spawn_multiplier))``

        Example
        -------
        >>> RiftDecayEngine.scaled_enemy_cap(zone_level=6, stage=4)
        8
        """
        level = validate_positive_int("zone_level", zone_level)
        cap = ConfigManager.get("rift.decay.chunk_spawn_cap", CHUNK_SPAWN_CAP)
        hard_cap = ConfigManager.get("rift.decay.chunk_spawn_hard_cap", CHUNK_SPAWN_HARD_CAP)

        base_max = min(cap, 1 + level // 2)
        multiplier = RiftDecayEngine.get_stage_info(stage).spawn_multiplier
        return min(hard_cap, round_half_up(base_max * multiplier))

    def __repr__(self) -> str:
        return (
            f"RiftDecayEngine(rift_level={self._rift_level!r}, "
            f"elapsed_ms={self._elapsed_ms!r}, stage={self._stage})"
        )


__all__ = ["RiftDecayEngine", "compute_thresholds_ms", "StageChangeCallback"]
