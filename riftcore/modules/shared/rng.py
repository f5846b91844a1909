"""
Seeded pseudo-random streams for Rift Core.

Purpose
-------
Every random decision in the core (enemy identity, deck draws, corruption
and loot rolls) comes from a `SeededRandom` stream so that the same seed
reproduces the same content on every platform and in every saved game.

Algorithm
---------
- Seed strings are hashed with djb2 over UTF-16 code units into 32 bits.
- The stream is Mulberry32: a 32-bit counter stepped by ``0x6D2B79F5`` and
  mixed with integer multiplies. All arithmetic is masked to 32 bits, so no
  floating point is involved until the final division by 2**32.

Design Notes
------------
- Streams are explicit objects passed into generators, never a module global.
- ``fork(label)`` derives an independent stream from the seed and a label,
  not from the current position, so forks are stable however far the parent
  has advanced.
- ``get_state()`` / ``from_state()`` persist a stream mid-run.
"""

from __future__ import annotations

import secrets
from typing import Any, Dict, List, MutableSequence, Sequence, TypeVar

from riftcore.modules.shared.exceptions import InvalidInputError
from riftcore.modules.shared.validators import validate_seed

T = TypeVar("T")

_MASK32 = 0xFFFFFFFF
_GOLDEN = 0x6D2B79F5
_TWO_POW_32 = 4294967296.0


def hash_seed(seed: str) -> int:
    """
    djb2 hash of ``seed`` over UTF-16 code units, as an unsigned 32-bit int.

    Characters outside the BMP contribute their two surrogate units.

    Example:
        >>> hash_seed("")
        5381
    """
    data = seed.encode("utf-16-le", "surrogatepass")
    h = 5381
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        h = ((h << 5) + h + code_unit) & _MASK32
    return h


class SeededRandom:
    """
    Deterministic float stream in ``[0, 1)`` built from a string seed.

    Example:
        >>> rng = SeededRandom("abc")
        >>> a = rng.next_float()
        >>> SeededRandom("abc").next_float() == a
        True
    """

    __slots__ = ("_seed", "_state", "_draws")

    def __init__(self, seed: Any) -> None:
        self._seed: str = validate_seed(seed)
        self._state: int = hash_seed(self._seed)
        self._draws: int = 0

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_entropy(cls) -> "SeededRandom":
        """Fresh stream seeded from the OS entropy pool."""
        return cls(secrets.token_hex(8))

    @classmethod
    def from_state(cls, data: Dict[str, Any]) -> "SeededRandom":
        """
        Rebuild a stream persisted with `get_state`.

        Raises:
            InvalidInputError: If the snapshot is malformed
        """
        if not isinstance(data, dict):
            raise InvalidInputError("rng_state", "expected a mapping")
        state = data.get("state")
        if isinstance(state, bool) or not isinstance(state, int) or not 0 <= state <= _MASK32:
            raise InvalidInputError("rng_state", f"state must be a uint32, got {state!r}")
        draws = data.get("draws", 0)
        if isinstance(draws, bool) or not isinstance(draws, int) or draws < 0:
            raise InvalidInputError("rng_state", f"draws must be an int >= 0, got {draws!r}")

        rng = cls(data.get("seed"))
        rng._state = state
        rng._draws = draws
        return rng

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def seed(self) -> str:
        return self._seed

    @property
    def draws(self) -> int:
        """Number of floats drawn so far."""
        return self._draws

    def get_state(self) -> Dict[str, Any]:
        return {"seed": self._seed, "state": self._state, "draws": self._draws}

    # ------------------------------------------------------------------
    # Core stream
    # ------------------------------------------------------------------

    def next_float(self) -> float:
        """Next float in ``[0, 1)`` (Mulberry32 step)."""
        self._state = (self._state + _GOLDEN) & _MASK32
        s = self._state
        t = ((s ^ (s >> 15)) * (s | 1)) & _MASK32
        t = ((t + (((t ^ (t >> 7)) * (t | 61)) & _MASK32)) & _MASK32) ^ t
        self._draws += 1
        return ((t ^ (t >> 14)) & _MASK32) / _TWO_POW_32

    __call__ = next_float

    # ------------------------------------------------------------------
    # Derived draws
    # ------------------------------------------------------------------

    def pick(self, items: Sequence[T]) -> T:
        """
        Uniform pick from a non-empty sequence (one draw).

        Raises:
            InvalidInputError: If ``items`` is empty
        """
        if not items:
            raise InvalidInputError("items", "cannot pick from an empty sequence")
        return items[int(self.next_float() * len(items))]

    def int_between(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]`` inclusive (one draw)."""
        if low > high:
            raise InvalidInputError("range", f"low {low} is greater than high {high}")
        return low + int(self.next_float() * (high - low + 1))

    def chance(self, probability: float) -> bool:
        """True with the given probability (one draw)."""
        return self.next_float() < probability

    def shuffle(self, items: Sequence[T]) -> List[T]:
        """
        Fisher-Yates shuffle returning a new list; ``items`` is untouched.

        Draws ``len(items) - 1`` floats.
        """
        result: MutableSequence[T] = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = int(self.next_float() * (i + 1))
            result[i], result[j] = result[j], result[i]
        return list(result)

    def fork(self, label: str) -> "SeededRandom":
        """Independent stream derived from this stream's seed and ``label``."""
        return SeededRandom(f"{self._seed}::{label}")

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self._seed!r}, draws={self._draws})"


__all__ = ["SeededRandom", "hash_seed"]
