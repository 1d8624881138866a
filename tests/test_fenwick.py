import random

import pytest

from algokit.fenwick import FenwickTree


def _filled(values):
    tree = FenwickTree(len(values))
    for position, value in enumerate(values, start=1):
        tree.update(position, value)
    return tree


def test_empty_tree_sums_to_zero():
    tree = FenwickTree(10)
    assert tree.prefix_sum(10) == 0
    assert tree.range_sum(3, 7) == 0


def test_prefix_sums_match_running_totals():
    rng = random.Random(1)
    values = [rng.randint(-100, 100) for _ in range(40)]
    tree = _filled(values)
    for index in range(len(values) + 1):
        assert tree.prefix_sum(index) == sum(values[:index])


def test_range_sums_after_updates():
    rng = random.Random(2)
    values = [0] * 25
    tree = FenwickTree(25)
    for _ in range(100):
        position = rng.randint(1, 25)
        delta = rng.randint(-10, 10)
        values[position - 1] += delta
        tree.update(position, delta)
    for low in range(1, 26):
        for high in range(low, 26):
            assert tree.range_sum(low, high) == sum(values[low - 1 : high])


def test_single_position_range():
    tree = _filled([4, 9, 2])
    assert tree.range_sum(2, 2) == 9
    assert tree.range_sum(1, 3) == 15


@pytest.mark.parametrize("index", [0, 6, -1])
def test_update_out_of_range(index):
    tree = FenwickTree(5)
    with pytest.raises(IndexError):
        tree.update(index, 1)


def test_query_out_of_range():
    tree = FenwickTree(5)
    with pytest.raises(IndexError):
        tree.prefix_sum(6)
    with pytest.raises(IndexError):
        tree.range_sum(0, 3)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        FenwickTree(-1)