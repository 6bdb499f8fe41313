"""Cells of a Game of Life board and the rules that make them evolve."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Protocol

_OFFSETS = tuple(
    (drow, dcol)
    for drow in (-1, 0, 1)
    for dcol in (-1, 0, 1)
    if (drow, dcol) != (0, 0)
)


def _check_offset(drow: int, dcol: int) -> None:
    if (drow, dcol) not in _OFFSETS:
        raise ValueError(f"({drow}, {dcol}) is not a neighbour offset")


class CellState(Enum):
    """Whether a cell is dead or alive."""

    DEAD = 0
    ALIVE = 1

    @property
    def symbol(self) -> str:
        """Character used when a board is drawn."""
        return "X" if self is CellState.ALIVE else " "


class Rules(ABC):
    """How neighbours are weighted and how a cell's next state is chosen."""

    @abstractmethod
    def weight(self, drow: int, dcol: int) -> int:
        """Contribution of a live neighbour at offset (drow, dcol)."""

    @abstractmethod
    def next_state(self, state: CellState, neighbors: int) -> CellState:
        """State of a cell in the next generation."""


class ClassicRules(Rules):
    """Conway's rules: birth on 3, survival on 2 or 3."""

    def weight(self, drow: int, dcol: int) -> int:
        """Every neighbour counts once; raises ValueError for a non-neighbour offset."""
        _check_offset(drow, dcol)
        return 1

    def next_state(self, state: CellState, neighbors: int) -> CellState:
        if state is CellState.DEAD:
            return CellState.ALIVE if neighbors == 3 else CellState.DEAD
        return CellState.ALIVE if neighbors in (2, 3) else CellState.DEAD


class WeightedRules(Rules):
    """Orthogonal neighbours count double: birth on 4, survival on 3 or 4."""

    def weight(self, drow: int, dcol: int) -> int:
        """Orthogonal neighbours weigh 2, diagonal ones 1."""
        _check_offset(drow, dcol)
        orthogonal = drow == 0 or dcol == 0
        return 2 if orthogonal else 1

    def next_state(self, state: CellState, neighbors: int) -> CellState:
        if state is CellState.DEAD:
            return CellState.ALIVE if neighbors == 4 else CellState.DEAD
        return CellState.ALIVE if neighbors in (3, 4) else CellState.DEAD


class _Board(Protocol):
    rules: Rules

    def cell(self, row: int, col: int) -> "Cell": ...


class Cell:
    """A single cell at a fixed position on a board."""

    def __init__(
        self,
        state: CellState = CellState.DEAD,
        position: tuple[int, int] = (0, 0),
    ) -> None:
        self.state = state
        self.position = position
        self.neighbors = 0

    @property
    def alive(self) -> bool:
        return self.state is CellState.ALIVE

    def count_neighbors(self, grid: _Board) -> int:
        """Count (weighted) live neighbours on ``grid`` and remember the count."""
        row, col = self.position
        rules = grid.rules
        self.neighbors = sum(
            rules.weight(drow, dcol)
            for drow, dcol in _OFFSETS
            if grid.cell(row + drow, col + dcol).alive
        )
        return self.neighbors

    def update_state(self, rules: Rules) -> CellState:
        """Move to the next state using the last neighbour count."""
        self.state = rules.next_state(self.state, self.neighbors)
        return self.state

    def __str__(self) -> str:
        return self.state.symbol

    def __repr__(self) -> str:
        return f"Cell({self.state.name}, {self.position})"