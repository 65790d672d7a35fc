"""Tests for algorithms/sorting.py"""

import operator
import random
from collections import UserList

import pytest

from algorithms.sorting import bubble_sort, is_sorted, merge_sort

SORTS = [bubble_sort, merge_sort]


def by_key(a: tuple[int, str], b: tuple[int, str]) -> bool:
    """Orders pairs on their first component only."""
    return a[0] < b[0]


class CountingCompare:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, a: int, b: int) -> bool:
        self.calls += 1
        return a < b


@pytest.mark.parametrize("sort", SORTS)
class TestSorts:
    def test_basic(self, sort):
        values = [5, 2, 9, 1, 5, 6]
        sort(values)
        assert values == [1, 2, 5, 5, 6, 9]

    def test_reverse_compare(self, sort):
        values = [5, 2, 9, 1, 5, 6]
        sort(values, operator.gt)
        assert values == [9, 6, 5, 5, 2, 1]
        assert is_sorted(values, operator.gt)

    def test_returns_none(self, sort):
        assert sort([3, 1, 2]) is None

    @pytest.mark.parametrize("values", [[], [42], [2, 1], [1, 2], [3, 3, 3]])
    def test_small_inputs(self, sort, values):
        expected = sorted(values)
        sort(values)
        assert values == expected

    def test_random_permutation(self, sort):
        rng = random.Random(7)
        values = [rng.randint(-50, 50) for _ in range(200)]
        expected = sorted(values)
        sort(values)
        assert values == expected

    def test_idempotent(self, sort):
        values = [4, -1, 7, 7, 0, 3]
        sort(values)
        once = list(values)
        sort(values)
        assert values == once

    def test_stable(self, sort):
        """Equal keys keep their input order."""
        values = [(2, "a"), (1, "b"), (2, "c"), (1, "d"), (0, "e"), (2, "f")]
        sort(values, by_key)
        assert values == [(0, "e"), (1, "b"), (1, "d"), (2, "a"), (2, "c"), (2, "f")]

    def test_stable_reversed(self, sort):
        values = [(1, "a"), (2, "b"), (1, "c"), (2, "d")]
        sort(values, lambda a, b: a[0] > b[0])
        assert values == [(2, "b"), (2, "d"), (1, "a"), (1, "c")]

    def test_subrange_only(self, sort):
        values = [9, 8, 3, 1, 2, 0, -1]
        sort(values, first=2, last=5)
        assert values == [9, 8, 1, 2, 3, 0, -1]

    def test_strings(self, sort):
        values = ["pear", "apple", "fig", "banana"]
        sort(values)
        assert values == ["apple", "banana", "fig", "pear"]

    def test_generic_mutable_sequence(self, sort):
        values = UserList([3, 1, 2])
        sort(values)
        assert list(values) == [1, 2, 3]

    @pytest.mark.parametrize("first, last", [(-1, 2), (0, 4), (2, 1)])
    def test_invalid_bounds(self, sort, first, last):
        values = [3, 2, 1]
        with pytest.raises(ValueError):
            sort(values, first=first, last=last)
        assert values == [3, 2, 1]


class TestBubbleSort:
    def test_sorted_input_single_pass(self):
        """A sorted range stops after one pass of n - 1 comparisons."""
        compare = CountingCompare()
        values = list(range(10))
        bubble_sort(values, compare)
        assert compare.calls == 9

    def test_reversed_input_shrinking_passes(self):
        """Each pass ends one position earlier than the previous one."""
        compare = CountingCompare()
        values = list(range(5, 0, -1))
        bubble_sort(values, compare)
        assert values == [1, 2, 3, 4, 5]
        assert compare.calls == 4 + 3 + 2 + 1


class TestMergeSort:
    def test_odd_length(self):
        values = [7, 3, 5, 1, 9, 2, 8]
        merge_sort(values)
        assert values == [1, 2, 3, 5, 7, 8, 9]

    def test_large_input(self):
        rng = random.Random(11)
        values = [rng.random() for _ in range(5000)]
        expected = sorted(values)
        merge_sort(values)
        assert values == expected


class TestIsSorted:
    def test_empty_and_single(self):
        assert is_sorted([])
        assert is_sorted([1])

    def test_non_decreasing(self):
        assert is_sorted([1, 1, 2, 3])
        assert not is_sorted([1, 3, 2])

    def test_subrange(self):
        assert is_sorted([5, 1, 2, 3, 0], first=1, last=4)
