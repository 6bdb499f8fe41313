import pytest

from aeda.dispersion import ModuleDispersion, SumDispersion
from aeda.exploration import LinearExploration, QuadraticExploration
from aeda.hashtable import HashTable, TableFullError


def test_open_insert_and_search():
    table = HashTable(5, ModuleDispersion(5))
    for key in (3, 8, 13, 21):
        assert table.insert(key) is True
    for key in (3, 8, 13, 21):
        assert table.search(key)
        assert key in table
    assert not table.search(4)
    assert len(table) == 4


def test_open_duplicate_rejected():
    table = HashTable(3, ModuleDispersion(3))
    assert table.insert(7) is True
    assert table.insert(7) is False
    assert len(table) == 1


def test_open_never_full():
    table = HashTable(2, SumDispersion(2))
    for key in range(50):
        table.insert(key)
    assert table.is_full() is False
    assert len(table) == 50


def test_open_render():
    table = HashTable(3, ModuleDispersion(3))
    table.insert(1)
    table.insert(4)
    assert table.render() == "|1-> 4-> ||"


def test_closed_linear_collisions_are_found():
    table = HashTable(5, ModuleDispersion(5), LinearExploration(), 1)
    for key in (0, 5, 10):
        assert table.insert(key)
    assert all(key in table for key in (0, 5, 10))
    assert 15 not in table
    assert table.render() == "0|5|10|||"


def test_closed_duplicate_rejected():
    table = HashTable(4, ModuleDispersion(4), LinearExploration(), 2)
    assert table.insert(9)
    assert table.insert(9) is False
    assert len(table) == 1


def test_closed_fills_and_raises():
    table = HashTable(3, ModuleDispersion(3), LinearExploration(), 1)
    for key in (0, 3, 6):
        table.insert(key)
    assert table.is_full()
    with pytest.raises(TableFullError):
        table.insert(9)
    assert 9 not in table


def test_quadratic_path_can_run_out_before_table_is_full():
    table = HashTable(4, ModuleDispersion(4), QuadraticExploration(), 1)
    for key in (0, 4):
        table.insert(key)
    with pytest.raises(TableFullError):
        table.insert(8)
    assert table.is_full() is False


def test_closed_block_holds_several_keys():
    table = HashTable(3, ModuleDispersion(3), LinearExploration(), 2)
    table.insert(1)
    table.insert(4)
    assert len(table) == 2
    assert "1 4|" in table.render()


def test_invalid_sizes():
    with pytest.raises(ValueError):
        HashTable(0, ModuleDispersion(1))
    with pytest.raises(ValueError):
        HashTable(3, ModuleDispersion(3), LinearExploration(), 0)