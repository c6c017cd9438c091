"""
Order strategies for a session queue.

A strategy is any callable taking a list of items and returning a new list.
KeepOrder is deterministic; RandomOrder gives a uniform random permutation.
"""

from __future__ import annotations
import random
from typing import Callable, Optional, TypeVar


T = TypeVar("T")

OrderStrategy = Callable[[list], list]


class KeepOrder:
    """Leave the queue in builder order."""

    def __call__(self, items: list[T]) -> list[T]:
        return list(items)


class RandomOrder:
    """
    Fisher-Yates shuffle of a copy of the queue.

    Pass a seeded random.Random for reproducible orders.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def __call__(self, items: list[T]) -> list[T]:
        shuffled = list(items)
        self._rng.shuffle(shuffled)
        return shuffled


def fill_in_order(
    pools: dict[str, list[T]],
    order: list[str],
    target_size: int
) -> list[T]:
    """
    Fill a session by walking pools in order until target_size is reached.
    """
    session: list[T] = []
    for name in order:
        for item in pools.get(name, []):
            if len(session) >= target_size:
                return session
            session.append(item)
    return session
