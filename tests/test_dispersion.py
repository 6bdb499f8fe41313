import pytest

from aeda.dispersion import (
    ModuleDispersion,
    PseudorandomDispersion,
    SumDispersion,
)

KEYS = [0, 1, 7, 42, 1234, 99999, 123456789]


@pytest.mark.parametrize("key", KEYS)
def test_module_result_within_table(key):
    assert 0 <= ModuleDispersion(11)(key) < 11


@pytest.mark.parametrize("key", KEYS)
def test_sum_result_within_table(key):
    assert 0 <= SumDispersion(11)(key) < 11


@pytest.mark.parametrize("key", KEYS)
def test_pseudorandom_result_within_table(key):
    assert 0 <= PseudorandomDispersion(11)(key) < 11


@pytest.mark.parametrize("key, expected", [(0, 0), (13, 0), (27, 1), (50, 11)])
def test_module_known_values(key, expected):
    assert ModuleDispersion(13)(key) == expected


@pytest.mark.parametrize("key, expected", [(1234, 10), (99999, 6), (7, 7)])
def test_sum_known_values(key, expected):
    assert SumDispersion(13)(key) == expected


def test_pseudorandom_repeated_calls_agree():
    function = PseudorandomDispersion(13)
    first = function(4242)
    assert 0 <= first < 13
    assert all(function(4242) == first for _ in range(20))
    assert len({function(k) for k in range(50)}) > 1


@pytest.mark.parametrize("size", [0, -3])
def test_module_invalid_size(size):
    with pytest.raises(ValueError):
        ModuleDispersion(size)


@pytest.mark.parametrize("size", [0, -3])
def test_sum_invalid_size(size):
    with pytest.raises(ValueError):
        SumDispersion(size)


@pytest.mark.parametrize("size", [0, -3])
def test_pseudorandom_invalid_size(size):
    with pytest.raises(ValueError):
        PseudorandomDispersion(size)


def test_module_periodic_in_table_size():
    function = ModuleDispersion(7)
    for key in range(30):
        assert function(key + 7) == function(key)


def test_module_keys_below_size_map_to_themselves():
    function = ModuleDispersion(10)
    assert [function(k) for k in range(10)] == list(range(10))


def test_sum_ignores_digit_order():
    function = SumDispersion(10)
    assert function(1234) == function(4321) == function(3142)


def test_sum_ignores_zero_digits():
    function = SumDispersion(50)
    assert function(105) == function(15) == function(1005)


def test_sum_of_non_positive_key_is_zero():
    function = SumDispersion(10)
    assert function(0) == 0
    assert function(-123) == 0


def test_sum_single_digit_below_size():
    function = SumDispersion(10)
    assert [function(k) for k in range(1, 10)] == list(range(1, 10))


def test_pseudorandom_spreads_keys():
    function = PseudorandomDispersion(5)
    positions = {function(k) for k in range(200)}
    assert positions == set(range(5))


def test_pseudorandom_same_key_same_position_across_instances():
    first = [PseudorandomDispersion(17)(k) for k in range(100, 140)]
    second = [PseudorandomDispersion(17)(k) for k in range(100, 140)]
    assert all(0 <= position < 17 for position in first)
    assert first == second