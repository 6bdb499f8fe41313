"""A bordered Game of Life board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from .cell import Cell, CellState, ClassicRules, Rules

_OFFSETS = tuple(
    (drow, dcol)
    for drow in (-1, 0, 1)
    for dcol in (-1, 0, 1)
    if (drow, dcol) != (0, 0)
)


class Border(Enum):
    """How the frame around the playing area behaves."""

    OPEN = "open"  # frame cells are fixed and never evolve
    PERIODIC = "periodic"  # opposite edges are joined
    REFLECTIVE = "reflective"  # the frame mirrors the nearest edge


@dataclass(frozen=True)
class NeighborCounts:
    """Live neighbours of a cell split by direction."""

    orthogonal: int
    diagonal: int

    @property
    def total(self) -> int:
        return self.orthogonal + self.diagonal


class Grid:
    """A rows x cols board; rows 1..rows and cols 1..cols evolve, 0 and n+1 form the frame."""

    def __init__(
        self,
        rows: int,
        cols: int,
        border: Border = Border.OPEN,
        rules: Rules | None = None,
    ) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"grid size must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.border = border
        self.rules = rules if rules is not None else ClassicRules()
        self._cells = [
            [Cell(CellState.DEAD, (row, col)) for col in range(cols + 2)]
            for row in range(rows + 2)
        ]

    @staticmethod
    def _wrap(index: int, size: int) -> int:
        if index == 0:
            return size
        if index == size + 1:
            return 1
        return index

    def _resolve(self, row: int, col: int) -> tuple[int, int]:
        if not (0 <= row <= self.rows + 1 and 0 <= col <= self.cols + 1):
            raise IndexError(
                f"position ({row}, {col}) outside rows [0 - {self.rows + 1}] "
                f"cols [0 - {self.cols + 1}]"
            )
        if self.border is Border.PERIODIC:
            return self._wrap(row, self.rows), self._wrap(col, self.cols)
        if self.border is Border.REFLECTIVE:
            return min(max(row, 1), self.rows), min(max(col, 1), self.cols)
        return row, col

    def _interior(self) -> Iterator[Cell]:
        for line in self._cells[1:-1]:
            yield from line[1:-1]

    def cell(self, row: int, col: int) -> Cell:
        """The cell at (row, col); frame positions resolve according to the border."""
        resolved_row, resolved_col = self._resolve(row, col)
        return self._cells[resolved_row][resolved_col]

    def set_alive(self, row: int, col: int) -> None:
        """Bring the cell at (row, col) to life."""
        self.cell(row, col).state = CellState.ALIVE

    def next_generation(self) -> None:
        """Advance the playing area by one generation."""
        cells = list(self._interior())
        for cell in cells:
            cell.count_neighbors(self)
        for cell in cells:
            cell.update_state(self.rules)

    def alive_cells(self) -> list[tuple[int, int]]:
        """Positions of live cells in the playing area, in row-major order."""
        return [cell.position for cell in self._interior() if cell.alive]

    def neighbor_counts(self, row: int, col: int) -> NeighborCounts:
        """Live neighbours of an inner cell, orthogonal and diagonal apart."""
        if not (1 <= row <= self.rows and 1 <= col <= self.cols):
            raise IndexError(f"position ({row}, {col}) is not inside the playing area")
        orthogonal = diagonal = 0
        for drow, dcol in _OFFSETS:
            if self.cell(row + drow, col + dcol).alive:
                if drow == 0 or dcol == 0:
                    orthogonal += 1
                else:
                    diagonal += 1
        return NeighborCounts(orthogonal, diagonal)

    def render(self) -> str:
        """The playing area as text, one line per row."""
        return "".join(
            "".join(str(cell) for cell in line[1:-1]) + "\n"
            for line in self._cells[1:-1]
        )