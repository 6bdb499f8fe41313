"""A hash table with open (chained) or closed (block and exploration) dispersion."""

from __future__ import annotations

from typing import Iterator

from .dispersion import DispersionFunction
from .exploration import ExplorationFunction
from .sequence import Block, ChainedList, Sequence


class TableFullError(Exception):
    """Raised when a key finds no free position along its exploration path."""


class HashTable:
    """Keys spread over ``size`` positions by a dispersion function.

    Without an exploration function every position holds an unbounded chain
    (open dispersion). With one, every position holds a block of
    ``block_size`` keys and collisions are resolved by exploring further
    positions (closed dispersion).
    """

    def __init__(
        self,
        size: int,
        dispersion: DispersionFunction,
        exploration: ExplorationFunction | None = None,
        block_size: int = 0,
    ) -> None:
        if size < 1:
            raise ValueError(f"table size must be positive, got {size}")
        self.size = size
        self.dispersion = dispersion
        self.exploration = exploration
        self._positions_table: list[Sequence]
        if exploration is None:
            self._positions_table = [ChainedList() for _ in range(size)]
        else:
            self._positions_table = [Block(block_size) for _ in range(size)]

    def _positions(self, key: int) -> Iterator[int]:
        home = self.dispersion(key) % self.size
        yield home
        if self.exploration is None:
            return
        for attempt in range(1, self.size):
            yield (home + self.exploration(key, attempt)) % self.size

    def search(self, key: int) -> bool:
        """Whether ``key`` is stored in the table."""
        for position in self._positions(key):
            sequence = self._positions_table[position]
            if sequence.search(key):
                return True
            if not sequence.is_full():
                return False
        return False

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.search(key)

    def insert(self, key: int) -> bool:
        """Store ``key``; False if it was already there.

        Raises TableFullError when no position on the key's path has room.
        """
        if self.search(key):
            return False
        for position in self._positions(key):
            if self._positions_table[position].insert(key):
                return True
        raise TableFullError(f"no room for key {key}")

    def is_full(self) -> bool:
        """Whether every position is full."""
        return all(sequence.is_full() for sequence in self._positions_table)

    def __len__(self) -> int:
        return sum(len(sequence) for sequence in self._positions_table)

    def render(self) -> str:
        """Every position's contents followed by a bar."""
        return "".join(f"{sequence}|" for sequence in self._positions_table)