import pytest

from algodrills.searching import membership
from algodrills.two_pointers import (
    membership_scan,
    min_difference_at_least,
    shortest_subarray,
)


def test_shortest_subarray_worked_example():
    assert shortest_subarray([5, 1, 3, 5, 10, 7, 4, 9, 2, 8], 15) == 2


def test_shortest_subarray_none_reaches_target():
    assert shortest_subarray([1, 2, 3], 100) == 0


def test_shortest_subarray_empty():
    assert shortest_subarray([], 5) == 0


@pytest.mark.parametrize(
    "values,target",
    [([3, 1, 4, 1, 5, 9, 2, 6], 12), ([1, 1, 1, 1], 3), ([7, 2, 2, 2, 2], 7), ([2, 4, 6, 8], 11)],
)
def test_shortest_subarray_is_minimal_window(values, target):
    length = shortest_subarray(values, target)
    windows = [sum(values[i : i + length]) for i in range(len(values) - length + 1)]
    assert max(windows) >= target
    if length > 1:
        shorter = [
            sum(values[i : i + length - 1]) for i in range(len(values) - length + 2)
        ]
        assert max(shorter) < target


def test_shortest_subarray_rejects_negative_values():
    with pytest.raises(ValueError):
        shortest_subarray([1, -2, 3], 2)


def test_membership_scan_worked_example():
    assert membership_scan([4, 1, 5, 2, 3], [1, 3, 7, 9, 5]) == [True, True, False, False, True]


@pytest.mark.parametrize(
    "cards,queries",
    [
        ([-5, 0, 5, 10], [10, -5, 3, 0, 11, -6]),
        ([], [1, 2]),
        ([2, 2, 2], [2, 2, 1, 3]),
        ([9, -1, 4], []),
    ],
)
def test_membership_scan_agrees_with_binary_search(cards, queries):
    assert membership_scan(cards, queries) == membership(cards, queries)


def test_membership_scan_keeps_query_order():
    result = membership_scan([1, 2, 3], [3, 100, 1])
    assert result == [True, False, True]


def test_min_difference_worked_example():
    assert min_difference_at_least([1, 5, 3], 3) == 4


def test_min_difference_zero_minimum():
    assert min_difference_at_least([8, 3, 6], 0) == 0


@pytest.mark.parametrize(
    "values,minimum",
    [([10, 1, 7, 4, 20], 5), ([1, 2, 3, 4, 5], 2), ([-10, 0, 10], 15)],
)
def test_min_difference_is_smallest_qualifying(values, minimum):
    result = min_difference_at_least(values, minimum)
    assert result >= minimum
    differences = {abs(a - b) for a in values for b in values}
    assert result in differences
    assert all(d >= result for d in differences if d >= minimum)


def test_min_difference_no_pair_raises():
    with pytest.raises(ValueError):
        min_difference_at_least([1, 2, 3], 10)


def test_min_difference_negative_minimum_raises():
    with pytest.raises(ValueError):
        min_difference_at_least([1, 2], -1)