import random

import pytest

from algokit.sorting import check_order, insertion_sort, merge_sort, radix_sort


def _random_ints(seed, count, low=-1000, high=1000):
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(count)]


@pytest.mark.parametrize("sorter", [insertion_sort, merge_sort])
@pytest.mark.parametrize("seed", range(5))
def test_comparison_sorts_match_sorted(sorter, seed):
    data = _random_ints(seed, 57)
    assert sorter(data) == sorted(data)


@pytest.mark.parametrize("sorter", [insertion_sort, merge_sort])
def test_comparison_sorts_leave_input_untouched(sorter):
    data = [5, 3, 9, 1]
    sorter(data)
    assert data == [5, 3, 9, 1]


@pytest.mark.parametrize("sorter", [insertion_sort, merge_sort])
@pytest.mark.parametrize("data", [[], [7], [2, 2, 2], [3, 2, 1]])
def test_comparison_sorts_small_inputs(sorter, data):
    assert sorter(data) == sorted(data)


def test_merge_sort_example_from_description():
    data = [-10, 32, 45, -78, 91, 1, 0, -16]
    assert merge_sort(data) == sorted(data)


def test_insertion_sort_strings():
    words = ["pear", "apple", "fig", "banana"]
    assert insertion_sort(words) == sorted(words)


@pytest.mark.parametrize("seed", range(3))
def test_radix_sort_full_range(seed):
    data = _random_ints(seed, 200, 0, 0xFFFFFFFF)
    result = radix_sort(data)
    assert result == sorted(data)


def test_radix_sort_extremes():
    data = [0xFFFFFFFF, 0, 256, 255, 65536, 1]
    assert radix_sort(data) == sorted(data)


@pytest.mark.parametrize("bad", [-1, 0x100000000])
def test_radix_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        radix_sort([1, bad, 2])


def test_check_order_accepts_sorted_output():
    data = radix_sort(_random_ints(9, 50, 0, 10_000))
    check_order(data)
    assert data == sorted(data)


def test_check_order_rejects_unsorted():
    with pytest.raises(ValueError, match="position 1"):
        check_order([1, 5, 3])