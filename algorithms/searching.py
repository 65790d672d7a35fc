"""
Search routines over sequences addressed by index.

Linear (any order):
    linear_search(seq, value)        - First position equal to value
    linear_search_if(seq, predicate) - First position satisfying predicate

Binary (range sorted under `compare`):
    binary_search(seq, value) - Any position equivalent to value
    lower_bound(seq, value)   - First position not preceding value
    upper_bound(seq, value)   - First position that value precedes
    equal_range(seq, value)   - (lower_bound, upper_bound)

Every function takes optional `first`/`last` bounds. A miss is not an error:
point searches return `last` (the end of the searched range), and
`equal_range` returns an empty range located at the insertion point.

Binary searches trust the caller that the range is sorted under `compare`;
an unsorted range gives unspecified (but bounded) results.
"""

import operator
from collections.abc import Sequence

from algorithms.ranges import resolve_bounds
from algorithms.types import Compare, Predicate, T


def linear_search(
    seq: Sequence[T], value: T, first: int = 0, last: int | None = None
) -> int:
    """Returns the first index in `[first, last)` holding an element `== value`, else `last`."""
    first, last = resolve_bounds(seq, first, last)
    for i in range(first, last):
        if seq[i] == value:
            return i
    return last


def linear_search_if(
    seq: Sequence[T], predicate: Predicate[T], first: int = 0, last: int | None = None
) -> int:
    """Returns the first index in `[first, last)` whose element satisfies `predicate`, else `last`."""
    first, last = resolve_bounds(seq, first, last)
    for i in range(first, last):
        if predicate(seq[i]):
            return i
    return last


def binary_search(
    seq: Sequence[T],
    value: T,
    compare: Compare[T] = operator.lt,
    first: int = 0,
    last: int | None = None,
) -> int:
    """
    Returns an index of an element equivalent to `value`, or `last` if none.

    Two elements are equivalent when neither precedes the other under
    `compare`. With duplicates, whichever equivalent element the midpoints hit
    first is returned; use `lower_bound` for the first one.
    """
    first, end = resolve_bounds(seq, first, last)
    low, high = first, end
    while low < high:
        mid = low + (high - low) // 2
        if compare(seq[mid], value):
            low = mid + 1
        elif compare(value, seq[mid]):
            high = mid
        else:
            return mid
    return end


def lower_bound(
    seq: Sequence[T],
    value: T,
    compare: Compare[T] = operator.lt,
    first: int = 0,
    last: int | None = None,
) -> int:
    """First index in `[first, last)` whose element does not precede `value`."""
    low, high = resolve_bounds(seq, first, last)
    while low < high:
        mid = low + (high - low) // 2
        if compare(seq[mid], value):
            low = mid + 1
        else:
            high = mid
    return low


def upper_bound(
    seq: Sequence[T],
    value: T,
    compare: Compare[T] = operator.lt,
    first: int = 0,
    last: int | None = None,
) -> int:
    """First index in `[first, last)` whose element `value` precedes."""
    low, high = resolve_bounds(seq, first, last)
    while low < high:
        mid = low + (high - low) // 2
        if compare(value, seq[mid]):
            high = mid
        else:
            low = mid + 1
    return low


def equal_range(
    seq: Sequence[T],
    value: T,
    compare: Compare[T] = operator.lt,
    first: int = 0,
    last: int | None = None,
) -> tuple[int, int]:
    """
    Returns the half-open index range of all elements equivalent to `value`.

    The width of the range is the number of occurrences. When `value` is
    absent both bounds are its insertion point.

    Example:
        >>> equal_range([1, 3, 5, 5, 5, 7, 9], 5)
        (2, 5)
        >>> equal_range([1, 3, 5, 7, 9], 4)
        (2, 2)
    """
    return (
        lower_bound(seq, value, compare, first, last),
        upper_bound(seq, value, compare, first, last),
    )


__all__ = [
    "linear_search",
    "linear_search_if",
    "binary_search",
    "lower_bound",
    "upper_bound",
    "equal_range",
]
