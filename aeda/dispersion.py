"""Dispersion (hash) functions that map a key to a table position."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod


def _check_size(table_size: int) -> int:
    if table_size < 1:
        raise ValueError(f"table size must be positive, got {table_size}")
    return table_size


class DispersionFunction(ABC):
    """Maps a key to a position in ``range(table_size)``."""

    table_size: int

    @abstractmethod
    def __call__(self, key: int) -> int:
        """Position of ``key`` in the table."""


class ModuleDispersion(DispersionFunction):
    """The key modulo the table size."""

    def __init__(self, table_size: int) -> None:
        self.table_size = _check_size(table_size)

    def __call__(self, key: int) -> int:
        return key % self.table_size


class SumDispersion(DispersionFunction):
    """The sum of the key's decimal digits modulo the table size.

    Keys that are not positive have a digit sum of zero.
    """

    def __init__(self, table_size: int) -> None:
        self.table_size = _check_size(table_size)

    def __call__(self, key: int) -> int:
        digits = sum(int(digit) for digit in str(key)) if key > 0 else 0
        return digits % self.table_size


class PseudorandomDispersion(DispersionFunction):
    """A pseudorandom position drawn from a generator seeded with the key."""

    def __init__(self, table_size: int) -> None:
        self.table_size = _check_size(table_size)

    def __call__(self, key: int) -> int:
        return random.Random(key).randrange(self.table_size)

    def __repr__(self) -> str:
        return f"PseudorandomDispersion({self.table_size})"