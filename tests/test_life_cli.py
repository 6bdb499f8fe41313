import io

import pytest

from aeda.grid import Border, Grid
from aeda.life_cli import main, run


def _blinker():
    grid = Grid(5, 5)
    for col in (2, 3, 4):
        grid.set_alive(3, col)
    return grid


def test_run_yields_one_frame_per_turn():
    grid = _blinker()
    frames = list(run(grid, 4))
    assert len(frames) == 4
    assert frames[-1] == grid.render()


def test_blinker_has_period_two():
    grid = _blinker()
    initial = grid.render()
    frames = list(run(grid, 2))
    assert frames[0] != initial
    assert frames[1] == initial
    assert grid.alive_cells() == [(3, 2), (3, 3), (3, 4)]


def test_blinker_turns_vertical():
    grid = _blinker()
    list(run(grid, 1))
    assert grid.alive_cells() == [(2, 3), (3, 3), (4, 3)]


def test_run_zero_turns_leaves_grid():
    grid = _blinker()
    before = grid.render()
    assert list(run(grid, 0)) == []
    assert grid.render() == before


def test_run_rejects_negative_turns():
    with pytest.raises(ValueError):
        run(Grid(2, 2), -1)


def _run(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    return main([])


def test_main_plays_blinker(monkeypatch, capsys):
    code = _run(monkeypatch, "3 3\n1\n3\n2 1\n1\n2 2\n1\n2 3\n0\n")
    out = capsys.readouterr().out
    assert code == 0
    assert "\nXXX\n" in out
    assert "Iteracion:0" in out
    assert out.endswith(" X \n X \n X \n")


def test_main_reports_bad_position(monkeypatch, capsys):
    code = _run(monkeypatch, "2 2\n0\n3\n9 9\n1 1\n0\n")
    out = capsys.readouterr().out
    assert code == 0
    assert "Posicion error" in out
    assert "pos[1][1] = 1" in out


def test_main_reprompts_for_border(monkeypatch, capsys):
    code = _run(monkeypatch, "2 2\n0\n7\n1\n1 1\n0\n")
    out = capsys.readouterr().out
    assert code == 0
    assert "No es una opcion valida" in out


def test_main_incomplete_input(monkeypatch, capsys):
    assert _run(monkeypatch, "3 3\n") == 1


def test_periodic_grid_from_cli_border_mapping():
    grid = Grid(3, 3, Border.PERIODIC)
    grid.set_alive(0, 1)
    assert grid.alive_cells() == [(3, 1)]