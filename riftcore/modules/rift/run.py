"""
Rift run context.

`RiftRun` is the single owner of a zone run's mutable state: the decay
timer, the corruption RNG stream and the ordered list of active
corruptions. Hosts advance it once per time step, ask it for encounters,
and persist it through `to_dict` / `from_dict`.

Corruptions
-----------
Each newly reached stage at or above the corruption start stage rolls one
corruption at that stage, so a single large ``advance`` that skips stages
still rolls once per skipped stage, lowest stage first.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Tuple, Union

from riftcore.core.logging.logger import LogContext, get_logger
from riftcore.modules.rift.constants import DecayStageInfo
from riftcore.modules.rift.corruptions import (
    Corruption,
    corruption_start_stage,
    get_corruption,
    roll_corruption,
    summarize_corruption_effects,
)
from riftcore.modules.rift.decay_engine import RiftDecayEngine
from riftcore.modules.shared.exceptions import InvalidInputError
from riftcore.modules.shared.rng import SeededRandom
from riftcore.modules.shared.validators import validate_seed

if TYPE_CHECKING:
    from riftcore.modules.enemy.models import EnemyProfile, ZoneConfig

logger = get_logger(__name__)

CORRUPTION_STREAM_LABEL = "corruptions"

_SNAPSHOT_KEYS = (
    "rift_level",
    "seed",
    "elapsed_ms",
    "current_stage",
    "active_corruption_ids",
    "rng_state",
)


class RiftRun:
    """
    State of one rift zone run.

    Example
    -------
    >>> run = RiftRun(rift_level=0, seed="run-1")
    >>> gained = run.advance(250_000)
    >>> run.current_stage, len(gained)
    (2, 1)
    """

    def __init__(self, rift_level: float, seed: Union[str, int]) -> None:
        self._seed = validate_seed(seed)
        self._engine = RiftDecayEngine(rift_level)
        self._corruption_rng = SeededRandom(self._seed).fork(CORRUPTION_STREAM_LABEL)
        self._active_ids: List[str] = []

    # ========================================================================
    # STATE
    # ========================================================================

    @property
    def seed(self) -> str:
        return self._seed

    @property
    def rift_level(self) -> float:
        return self._engine.rift_level

    @property
    def engine(self) -> RiftDecayEngine:
        return self._engine

    @property
    def current_stage(self) -> int:
        return self._engine.current_stage

    @property
    def elapsed_ms(self) -> int:
        return self._engine.elapsed_ms

    @property
    def stage_info(self) -> DecayStageInfo:
        return self._engine.stage_info

    @property
    def active_corruption_ids(self) -> Tuple[str, ...]:
        return tuple(self._active_ids)

    @property
    def active_corruptions(self) -> Tuple[Corruption, ...]:
        return tuple(get_corruption(cid) for cid in self._active_ids)

    def corruption_effects(self) -> Dict[str, int]:
        """Summed effect values of the active corruptions."""
        return summarize_corruption_effects(self._active_ids)

    # ========================================================================
    # TIME
    # ========================================================================

    def advance(self, delta_ms: int) -> List[Corruption]:
        """
        Advance the decay timer and roll corruptions for new stages.

        Returns the corruptions gained during this call, in roll order.

        Raises:
            InvalidInputError: If ``delta_ms`` is negative, not finite or
                fractional
        """
        with LogContext(seed=self._seed, component="rift_run", operation="advance"):
            previous = self._engine.current_stage
            current = self._engine.advance(delta_ms)

            gained: List[Corruption] = []
            start = corruption_start_stage()
            for stage in range(max(previous + 1, start), current + 1):
                corruption = roll_corruption(stage, self._active_ids, self._corruption_rng)
                if corruption is not None:
                    self._active_ids.append(corruption.id)
                    gained.append(corruption)

            if gained:
                logger.info(
                    "Rift corruptions gained",
                    extra={
                        "gained_ids": [c.id for c in gained],
                        "active_count": len(self._active_ids),
                        "stage": current,
                    },
                )
            return gained

    # ========================================================================
    # ENCOUNTERS
    # ========================================================================

    def encounter_seed(self, encounter_key: str) -> str:
        return f"{self._seed}_{encounter_key}"

    def generate_encounter(
        self,
        zone_config: Union[ZoneConfig, Mapping[str, Any]],
        encounter_key: str,
        is_boss: bool = False,
    ) -> EnemyProfile:
        """Enemy profile for ``encounter_key`` at the current decay stage."""
        # enemy.generator imports rift.constants; import here to avoid a cycle
        from riftcore.modules.enemy.generator import generate_enemy_profile

        with LogContext(seed=self._seed, component="rift_run", operation="generate_encounter"):
            return generate_enemy_profile(
                self.encounter_seed(encounter_key),
                zone_config,
                is_boss=is_boss,
                decay_stage=self._engine.current_stage,
            )

    # ========================================================================
    # PERSISTENCE
    # ========================================================================

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rift_level": self._engine.rift_level,
            "seed": self._seed,
            "elapsed_ms": self._engine.elapsed_ms,
            "current_stage": self._engine.current_stage,
            "active_corruption_ids": list(self._active_ids),
            "rng_state": self._corruption_rng.get_state(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RiftRun":
        """
        Rebuild a run from `to_dict` output.

        Raises:
            InvalidInputError: If keys are missing, values are out of range or
                corruption ids repeat
            NotFoundError: If a corruption id is not in the catalog
        """
        if not isinstance(data, Mapping):
            raise InvalidInputError("run_state", "expected a mapping")
        missing = [key for key in _SNAPSHOT_KEYS if key not in data]
        if missing:
            raise InvalidInputError("run_state", f"missing keys: {', '.join(missing)}")

        active_ids = list(data["active_corruption_ids"])
        if len(set(active_ids)) != len(active_ids):
            raise InvalidInputError("active_corruption_ids", "corruption ids must be unique")
        for corruption_id in active_ids:
            get_corruption(corruption_id)

        run = cls(data["rift_level"], data["seed"])
        run._engine.restore(data["elapsed_ms"], data["current_stage"])
        run._corruption_rng = SeededRandom.from_state(data["rng_state"])
        run._active_ids = active_ids
        return run

    def __repr__(self) -> str:
        return (
            f"RiftRun(seed={self._seed!r}, rift_level={self._engine.rift_level!r}, "
            f"stage={self._engine.current_stage}, corruptions={len(self._active_ids)})"
        )


__all__ = ["CORRUPTION_STREAM_LABEL", "RiftRun"]
