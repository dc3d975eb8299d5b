"""Tests for the sample data source."""
import random

from zoomchart import DataSource, random_values


def test_random_values_range():
    values = random_values(500, rng=random.Random(1))
    assert len(values) == 500
    assert all(50 <= v < 200 for v in values)


def test_random_values_custom_range():
    values = random_values(100, low=-1, high=1, rng=random.Random(2))
    assert all(-1 <= v < 1 for v in values)


def test_random_values_empty():
    assert random_values(0) == []


def test_same_seed_same_values():
    assert list(DataSource(count=20, seed=5)) == list(DataSource(count=20, seed=5))


def test_data_source_is_list_like():
    source = DataSource(count=10, seed=1)
    assert len(source) == 10
    assert source[0] == source.data_list[0]
    assert list(source) == source.data_list


def test_regenerate_emits_and_replaces(qtbot):
    source = DataSource(count=15, seed=4)
    before = list(source)
    with qtbot.waitSignal(source.data_replaced, timeout=1000):
        source.regenerate()
    assert len(source) == 15
    assert list(source) != before


def test_set_values(qtbot):
    source = DataSource(count=3, seed=4)
    with qtbot.waitSignal(source.data_replaced, timeout=1000):
        source.set_values([1, None, 3])
    assert list(source) == [1, None, 3]
