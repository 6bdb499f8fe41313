# aeda

Two data-structure exercises as a small Python package with no runtime
dependencies:

* **Game of Life** on a rectangular board surrounded by a frame of extra
  cells, with pluggable rules and three kinds of border.
* **Hash tables** of integer keys with a choice of dispersion function and
  either open dispersion (a chain in every position) or closed dispersion
  (fixed-size blocks plus an exploration function).

## Installation

```
pip install .
```

Python 3.10 or later is required.

## Command line

### `aeda-life`

Plays the Game of Life interactively. It asks, in this order, for the number
of rows and columns, the number of turns, the border type
(1 periodic, 2 reflective, 3 open) and then the positions of live cells, one
`row col` pair at a time, answering 1 to add another cell or 0 to stop.
Positions from 0 to rows+1 and 0 to cols+1 are accepted, so frame cells can be
set too. It then prints the starting board and the board after every turn,
with `X` for a live cell and a space for a dead one.

```
aeda-life
aeda-life --weighted
```

`--weighted` switches to the weighted rules described below. Prompts are
partly in Spanish. Input ends cleanly at end of file.

### `aeda-hash`

Builds a hash table from menu choices and then offers search, insert, show
and quit. It asks for the table size, the dispersion function
(1 modulo, 2 digit sum, 3 pseudorandom) and the technique
(1 open, 2 closed); for closed dispersion it also asks for the exploration
function (1 linear, 2 quadratic, 3 double, 4 redispersion) and the block
size. Prompts are in Spanish.

```
aeda-hash
```

## Library use

### Game of Life

`aeda.cell` holds `CellState` (`DEAD`, `ALIVE`), `Cell` and the rules:

* `ClassicRules` – every neighbour counts once; a dead cell is born with 3,
  a live cell survives with 2 or 3.
* `WeightedRules` – orthogonal neighbours count 2 and diagonal ones 1; a dead
  cell is born with 4, a live cell survives with 3 or 4.

`aeda.grid.Grid(rows, cols, border, rules)` builds a board whose playing area
is rows 1..rows and columns 1..cols, framed by row/column 0 and n+1. `Border`
chooses how the frame behaves:

* `Border.OPEN` – frame cells are ordinary cells that never evolve.
* `Border.PERIODIC` – frame positions refer to the cells on the opposite edge.
* `Border.REFLECTIVE` – frame positions refer to the nearest edge cell.

```python
from aeda.grid import Grid, Border
from aeda.cell import ClassicRules
from aeda.life_cli import run

grid = Grid(5, 5, Border.PERIODIC, ClassicRules())
for row, col in [(2, 1), (2, 2), (2, 3)]:
    grid.set_alive(row, col)
grid.next_generation()
print(grid.render())
print(grid.alive_cells())            # live positions, row-major order
print(grid.neighbor_counts(2, 2))    # NeighborCounts(orthogonal=..., diagonal=...)

for frame in run(grid, 3):           # board text after each of three turns
    print(frame)
```

`Grid.cell(row, col)` returns a cell and raises `IndexError` outside the
frame; `Grid` raises `ValueError` for a non-positive size.

### Hash tables

* `aeda.dispersion`: `ModuleDispersion` (key modulo size), `SumDispersion`
  (decimal digit sum modulo size), `PseudorandomDispersion` (a generator
  seeded with the key).
* `aeda.exploration`: `LinearExploration` (offset i), `QuadraticExploration`
  (offset i²), `DoubleExploration` (i times a pseudorandom dispersion of the
  key), `RedispersionExploration` (the i-th pseudorandom draw seeded with the
  key).
* `aeda.sequence`: `Block` (fixed capacity) and `ChainedList` (unbounded,
  distinct keys), the per-position containers.
* `aeda.hashtable`: `HashTable` and `TableFullError`.

```python
from aeda.hashtable import HashTable
from aeda.dispersion import ModuleDispersion
from aeda.exploration import LinearExploration

table = HashTable(10, ModuleDispersion(10), LinearExploration(), 2)
table.insert(42)          # True; False if the key was already stored
assert 42 in table
print(len(table), table.is_full())
print(table.render())     # each position's contents followed by "|"
```

Without an exploration function the table uses chained lists. With one, a
key tries its home position and then up to size-1 explored positions;
`insert` raises `TableFullError` when none has room.

`aeda.hash_cli.build_table(size, dispersion_choice, exploration_choice,
block_size)` builds a table from the same numeric choices the menu offers and
raises `ValueError` for an unknown choice.

## What it does not do

Tables live in memory only: keys are neither saved nor loaded, and there is
no way to remove a key. Boards are entered by hand or in code; there is no
file format for patterns.

## Tests

```
pip install .[test]
pytest
```