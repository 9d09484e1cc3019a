"""Random source shared by the engine and the impure actions."""

from __future__ import annotations

import random
from threading import Lock
from typing import MutableSequence, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """The subset of :class:`random.Random` the puzzle relies on."""

    def randint(self, a: int, b: int) -> int: ...

    def shuffle(self, x: MutableSequence[T]) -> None: ...

    def sample(self, population: Sequence[T], k: int) -> list[T]: ...


class SharedRandom:
    """Thread-safe wrapper around a single :class:`random.Random` generator."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._lock = Lock()

    def randint(self, a: int, b: int) -> int:
        with self._lock:
            return self._rng.randint(a, b)

    def shuffle(self, x: MutableSequence[T]) -> None:
        with self._lock:
            self._rng.shuffle(x)

    def sample(self, population: Sequence[T], k: int) -> list[T]:
        with self._lock:
            return self._rng.sample(population, k)


__all__ = ["RandomSource", "SharedRandom"]
