"""Interactive menu over a hash table."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterator

from .dispersion import (
    DispersionFunction,
    ModuleDispersion,
    PseudorandomDispersion,
    SumDispersion,
)
from .exploration import (
    DoubleExploration,
    ExplorationFunction,
    LinearExploration,
    QuadraticExploration,
    RedispersionExploration,
)
from .hashtable import HashTable, TableFullError

_DISPERSIONS: dict[int, Callable[[int], DispersionFunction]] = {
    1: ModuleDispersion,
    2: SumDispersion,
    3: PseudorandomDispersion,
}

_EXPLORATIONS: dict[int, Callable[[int], ExplorationFunction]] = {
    1: lambda cells: LinearExploration(),
    2: lambda cells: QuadraticExploration(),
    3: DoubleExploration,
    4: RedispersionExploration,
}


def build_table(
    size: int,
    dispersion_choice: int,
    exploration_choice: int | None = None,
    block_size: int = 0,
) -> HashTable:
    """A table for the menu choices; no exploration choice means open dispersion."""
    try:
        dispersion = _DISPERSIONS[dispersion_choice](size)
    except KeyError:
        raise ValueError(f"unknown dispersion choice {dispersion_choice}") from None
    if exploration_choice is None:
        return HashTable(size, dispersion)
    try:
        make_exploration = _EXPLORATIONS[exploration_choice]
    except KeyError:
        raise ValueError(f"unknown exploration choice {exploration_choice}") from None
    return HashTable(size, dispersion, make_exploration(block_size), block_size)


class _Prompter:
    def __init__(self, stream) -> None:
        self._tokens: Iterator[str] = (tok for line in stream for tok in line.split())

    def ask_int(self, prompt: str) -> int:
        print(prompt, end="", flush=True)
        for token in self._tokens:
            try:
                return int(token)
            except ValueError:
                print(f"\n'{token}' no es un número.")
                print(prompt, end="", flush=True)
        raise EOFError


def _configure(prompter: _Prompter) -> HashTable | None:
    size = prompter.ask_int("Introduzca el tamaño de la tabla:")
    if size < 1:
        print("El tamaño de la tabla debe ser positivo.")
        return None
    dispersion_choice = prompter.ask_int(
        "\nElijas una funcion de dispersion:"
        "\n1. Modulo"
        "\n2. Basada en la suma"
        "\n3. Pseudoaleatorio"
        "\nTu elección es:"
    )
    if dispersion_choice not in _DISPERSIONS:
        print("No es una opción valida, vuelva a ejecutar el programa.")
        return None
    while True:
        technique = prompter.ask_int(
            "\nQué tecnica de dispersion desea:"
            "\n1. Dispersion abierta"
            "\n2. Dispersion cerrada"
            "\nTu elección es:"
        )
        if technique == 1:
            return build_table(size, dispersion_choice)
        if technique == 2:
            break
        print("No es una opcion correcta, vuelva a indicar")
    while True:
        exploration_choice = prompter.ask_int(
            "\nQué funcion de exploracion desea:"
            "\n1. Exploración Lineal"
            "\n2. Exploración Cuadratica"
            "\n3. Doble exploración"
            "\n4. Exploración Redispersion"
            "\nTu elección es:"
        )
        if exploration_choice in _EXPLORATIONS:
            break
        print("No es una opcion correcta, vuelva a indicar")
    while True:
        block_size = prompter.ask_int("\nQué tamaño de bloque deseas:")
        if block_size >= 1:
            return build_table(size, dispersion_choice, exploration_choice, block_size)
        print("El tamaño de bloque debe ser positivo.")


def _menu(prompter: _Prompter, table: HashTable) -> None:
    while True:
        choice = prompter.ask_int(
            "\nQué operacion deseas realizar:"
            "\n1. Buscar()"
            "\n2. Insertar()"
            "\n3. Mostrar()"
            "\n4. Salir del programa"
            "\nTu seleccion:"
        )
        if choice == 1:
            key = prompter.ask_int("Qué clave deseas buscar:")
            if key in table:
                print(f"La clave {key} está dentro de la secuencia.")
            else:
                print(f"La clave {key} no está dentro de la secuencia.")
        elif choice == 2:
            key = prompter.ask_int("Qué clave deseas insertar:")
            try:
                inserted = table.insert(key)
            except TableFullError:
                print(f"No hay sitio para la clave {key}.")
            else:
                if inserted:
                    print(f"Clave {key} insertada.")
                else:
                    print(f"La clave {key} ya estaba en la tabla.")
        elif choice == 3:
            print("----------------Mostrado la tabla Hash---------------")
            print(table.render())
        elif choice == 4:
            print("----------------Terminando el programa---------------")
            return
        else:
            print("No es una opcion correcta, vuelva a elegir una opcion.")


def main(argv: list[str] | None = None) -> int:
    """Ask for a table configuration, then run the operations menu."""
    parser = argparse.ArgumentParser(
        description="Interactive hash table with open or closed dispersion."
    )
    parser.parse_args(argv)
    prompter = _Prompter(sys.stdin)
    try:
        table = _configure(prompter)
        if table is None:
            return 1
        _menu(prompter, table)
    except EOFError:
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())