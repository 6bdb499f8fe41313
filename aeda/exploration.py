"""Exploration functions: the offset tried on the i-th collision of a key."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from .dispersion import PseudorandomDispersion


class ExplorationFunction(ABC):
    """Offset added to a key's home position on a given attempt."""

    @abstractmethod
    def __call__(self, key: int, attempt: int) -> int:
        """Offset for ``key`` on exploration attempt ``attempt``."""


class LinearExploration(ExplorationFunction):
    """Offset equal to the attempt number."""

    def __call__(self, key: int, attempt: int) -> int:
        return attempt


class QuadraticExploration(ExplorationFunction):
    """Offset equal to the square of the attempt number."""

    def __call__(self, key: int, attempt: int) -> int:
        return attempt * attempt


class DoubleExploration(ExplorationFunction):
    """Attempt number times a second, pseudorandom dispersion of the key."""

    def __init__(self, cells: int) -> None:
        self.cells = cells
        self._dispersion = PseudorandomDispersion(cells)

    def __call__(self, key: int, attempt: int) -> int:
        return attempt * self._dispersion(key)


class RedispersionExploration(ExplorationFunction):
    """A fresh pseudorandom position for each attempt, seeded with the key.

    Attempt ``i`` yields the ``i``-th draw of a generator seeded with the key;
    attempt 0 yields no offset.
    """

    def __init__(self, cells: int) -> None:
        if cells < 1:
            raise ValueError(f"number of cells must be positive, got {cells}")
        self.cells = cells

    def __call__(self, key: int, attempt: int) -> int:
        if attempt < 0:
            raise ValueError(f"attempt must not be negative, got {attempt}")
        generator = random.Random(key)
        offset = 0
        for _ in range(attempt):
            offset = generator.randrange(self.cells)
        return offset