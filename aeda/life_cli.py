"""Interactive Game of Life."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator

from .cell import ClassicRules, WeightedRules
from .grid import Border, Grid

_BORDERS = {1: Border.PERIODIC, 2: Border.REFLECTIVE, 3: Border.OPEN}


def run(grid: Grid, turns: int) -> Iterator[str]:
    """Advance ``grid`` ``turns`` times, yielding the board after each turn."""
    if turns < 0:
        raise ValueError(f"turns must not be negative, got {turns}")
    return _frames(grid, turns)


def _frames(grid: Grid, turns: int) -> Iterator[str]:
    for _ in range(turns):
        grid.next_generation()
        yield grid.render()


class _Prompter:
    def __init__(self, stream) -> None:
        self._tokens: Iterator[str] = (tok for line in stream for tok in line.split())

    def ask_int(self, prompt: str = "") -> int:
        if prompt:
            print(prompt, end="", flush=True)
        for token in self._tokens:
            try:
                return int(token)
            except ValueError:
                print(f"\n'{token}' no es un número.")
                if prompt:
                    print(prompt, end="", flush=True)
        raise EOFError


def _populate(prompter: _Prompter, grid: Grid) -> None:
    print(
        "\n------------------Insert cell state process-----------------\n"
        "Introduce the cell with state ALIVE:"
    )
    print(f"the range is: rows [ 0 - {grid.rows + 1} ] cols [ 0 - {grid.cols + 1} ]")
    more = 1
    while more == 1:
        row = prompter.ask_int("pos: ")
        col = prompter.ask_int()
        try:
            grid.set_alive(row, col)
        except IndexError:
            print("Posicion error\nPlease, introduce a correct position.")
            continue
        print(f"pos[{row}][{col}] = 1")
        more = prompter.ask_int(
            "Do you want to insert more positions with state ALIVE "
            "(yes, write 1 / no, write 0):"
        )


def main(argv: list[str] | None = None) -> int:
    """Ask for the board and the live cells, then play the requested turns."""
    parser = argparse.ArgumentParser(description="Play the Game of Life.")
    parser.add_argument(
        "--weighted",
        action="store_true",
        help="orthogonal neighbours count double (birth on 4, survival on 3 or 4)",
    )
    args = parser.parse_args(argv)
    rules = WeightedRules() if args.weighted else ClassicRules()
    prompter = _Prompter(sys.stdin)

    print("------------------------Game Start--------------------------")
    try:
        while True:
            rows = prompter.ask_int("Introduzca el numero de filas y columnas (rows, cols):")
            cols = prompter.ask_int()
            if rows >= 1 and cols >= 1:
                break
            print("Las dimensiones deben ser positivas.")
        while True:
            turns = prompter.ask_int("Introduzca el numero de turnos:")
            if turns >= 0:
                break
            print("El numero de turnos no puede ser negativo.")
        print("------------------------Grid created------------------------")
        while True:
            choice = prompter.ask_int(
                "Introduzca que tipo de rejilla quiere elegir:"
                "\n1. Frontera periodica"
                "\n2. Frontera reflectora"
                "\n3. Sin fronteras\n"
            )
            if choice in _BORDERS:
                break
            print("No es una opcion valida. Vuelva a elegir un tipo de rejilla.")
        grid = Grid(rows, cols, _BORDERS[choice], rules)
        _populate(prompter, grid)
    except EOFError:
        print()
        return 1

    print(grid.render(), end="")
    for turn, frame in enumerate(run(grid, turns)):
        print(f"-----------------Iteracion:{turn}----------------")
        print(frame, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())