"""
Weighted choice shared by every roller in Rift Core.

Tier rolls, corruption rolls, crafting drops and enemy deck draws all use
this one routine so that floating-point edge cases resolve the same way
everywhere: accumulate the total weight, scale one draw by it, subtract
weights in pool order and return the first item whose remainder is
``<= 0``. If summation drift leaves the remainder positive after the last
item, the fallback (the last item unless told otherwise) is returned.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, TypeVar, Union

from riftcore.core.exceptions import ConfigurationError
from riftcore.modules.shared.rng import SeededRandom

T = TypeVar("T")

_LAST = object()


def weighted_choice(
    items: Sequence[T],
    weight_of: Callable[[T], float],
    rng: Union[SeededRandom, Callable[[], float]],
    fallback: Union[T, object] = _LAST,
    pool_name: str = "weighted_pool",
) -> T:
    """
    Pick one item with probability proportional to ``weight_of(item)``.

    Consumes exactly one draw from ``rng``.

    Args:
        items: Candidate pool, in the order weights are subtracted
        weight_of: Weight accessor; weights must be ``>= 0``
        rng: A `SeededRandom` or any zero-arg callable returning ``[0, 1)``
        fallback: Item returned on floating-point drift (default: last item)
        pool_name: Name used in the error when the pool is empty

    Raises:
        ConfigurationError: If the pool is empty or its total weight is 0

    Example:
        >>> weighted_choice(["a", "b"], lambda _: 1, SeededRandom("x")) in ("a", "b")
        True
    """
    if not items:
        raise ConfigurationError(pool_name, "cannot draw from an empty pool")

    weights = [weight_of(item) for item in items]
    total = sum(weights)
    if total <= 0:
        raise ConfigurationError(pool_name, "total weight must be positive")

    roll = rng() * total
    for item, weight in zip(items, weights):
        roll -= weight
        if roll <= 0:
            return item

    if fallback is _LAST:
        return items[-1]
    return fallback  # type: ignore[return-value]


def pick_index(weights: Sequence[float], rng: Union[SeededRandom, Callable[[], float]],
               fallback: Optional[int] = None, pool_name: str = "weights") -> int:
    """`weighted_choice` over positions of a bare weight table."""
    indices = range(len(weights))
    if fallback is None:
        return weighted_choice(indices, lambda i: weights[i], rng, pool_name=pool_name)
    return weighted_choice(indices, lambda i: weights[i], rng, fallback=fallback,
                           pool_name=pool_name)


__all__ = ["weighted_choice", "pick_index"]
