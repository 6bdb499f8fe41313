"""Containers that hold the keys stored at one position of a hash table."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator


class Sequence(ABC):
    """Keys stored at one table position."""

    @abstractmethod
    def search(self, key: int) -> bool:
        """Whether ``key`` is stored here."""

    @abstractmethod
    def insert(self, key: int) -> bool:
        """Store ``key``; False when it cannot be stored here."""

    @abstractmethod
    def is_full(self) -> bool:
        """Whether no more keys fit."""

    @abstractmethod
    def __iter__(self) -> Iterator[int]:
        """The stored keys in insertion order."""

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key)

    def __len__(self) -> int:
        return sum(1 for _ in self)


class Block(Sequence):
    """A fixed-capacity block used by closed dispersion."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"block size must be positive, got {size}")
        self.size = size
        self._keys: list[int] = []

    def search(self, key: int) -> bool:
        return key in self._keys

    def insert(self, key: int) -> bool:
        if self.is_full():
            return False
        self._keys.append(key)
        return True

    def is_full(self) -> bool:
        return len(self._keys) >= self.size

    def __iter__(self) -> Iterator[int]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __str__(self) -> str:
        return " ".join(str(key) for key in self._keys)


class ChainedList(Sequence):
    """An unbounded chain of distinct keys used by open dispersion."""

    def __init__(self) -> None:
        self._keys: list[int] = []

    def search(self, key: int) -> bool:
        return key in self._keys

    def insert(self, key: int) -> bool:
        if self.search(key):
            return False
        self._keys.append(key)
        return True

    def is_full(self) -> bool:
        return False

    def __iter__(self) -> Iterator[int]:
        return iter(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __str__(self) -> str:
        return "".join(f"{key}-> " for key in self._keys)