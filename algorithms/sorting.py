"""
Comparison sorts working in place on mutable sequences.

Functions:
    bubble_sort(seq, compare) - Adjacent swaps with early exit, stable, O(n²)
    merge_sort(seq, compare)  - Top-down merge sort, stable, O(n log n)
    is_sorted(seq, compare)   - Checks that no adjacent pair is out of order

All of them accept optional `first`/`last` bounds and only touch `seq[first:last]`.
The ordering `compare(a, b)` must be a strict-weak order meaning "a goes
before b"; it defaults to `<`. Passing `operator.gt` sorts in decreasing order.
"""

import logging
import operator
from collections.abc import MutableSequence, Sequence

from algorithms.ranges import resolve_bounds
from algorithms.types import Compare, T

logger = logging.getLogger(__name__)


def bubble_sort(
    seq: MutableSequence[T],
    compare: Compare[T] = operator.lt,
    first: int = 0,
    last: int | None = None,
) -> None:
    """
    Sorts `seq[first:last]` in place with bubble sort.

    Each pass bubbles the largest remaining element to the end of the unsorted
    suffix, so the next pass stops one position earlier. A pass without any swap
    ends the sort, which makes an already sorted range cost a single pass.
    Elements are only swapped when strictly out of order: the sort is stable.
    """
    first, end = resolve_bounds(seq, first, last)
    if end - first < 2:
        return

    swapped = True
    while swapped and end - first > 1:
        swapped = False
        for i in range(first, end - 1):
            if compare(seq[i + 1], seq[i]):
                seq[i], seq[i + 1] = seq[i + 1], seq[i]
                swapped = True
        end -= 1


def _merge(
    seq: MutableSequence[T], first: int, mid: int, last: int, compare: Compare[T]
) -> None:
    """Merges the sorted runs `seq[first:mid]` and `seq[mid:last]`."""
    merged: list[T] = []
    left, right = first, mid

    while left < mid and right < last:
        # Ties take the left run, which keeps equal elements in input order
        if compare(seq[right], seq[left]):
            merged.append(seq[right])
            right += 1
        else:
            merged.append(seq[left])
            left += 1

    merged.extend(seq[i] for i in range(left, mid))
    merged.extend(seq[i] for i in range(right, last))
    for offset, item in enumerate(merged):
        seq[first + offset] = item


def _merge_sort(seq: MutableSequence[T], first: int, last: int, compare: Compare[T]) -> None:
    if last - first <= 1:
        return
    mid = first + (last - first) // 2
    _merge_sort(seq, first, mid, compare)
    _merge_sort(seq, mid, last, compare)
    _merge(seq, first, mid, last, compare)


def merge_sort(
    seq: MutableSequence[T],
    compare: Compare[T] = operator.lt,
    first: int = 0,
    last: int | None = None,
) -> None:
    """
    Sorts `seq[first:last]` in place with a stable top-down merge sort.

    The range is split at `first + length // 2` (the upper half takes the
    extra element on odd lengths), both halves are sorted
    recursively, then merged through a temporary list the size of the range.
    Recursion depth is logarithmic in the range length.
    """
    first, last = resolve_bounds(seq, first, last)
    logger.debug(f"Merge sort over [{first}, {last})")
    _merge_sort(seq, first, last, compare)


def is_sorted(
    seq: Sequence[T],
    compare: Compare[T] = operator.lt,
    first: int = 0,
    last: int | None = None,
) -> bool:
    """True if no element of `seq[first:last]` strictly precedes its predecessor."""
    first, last = resolve_bounds(seq, first, last)
    return not any(compare(seq[i + 1], seq[i]) for i in range(first, last - 1))


__all__ = [
    "bubble_sort",
    "merge_sort",
    "is_sorted",
]
