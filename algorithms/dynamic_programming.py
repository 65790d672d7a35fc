"""
Two-term linear recurrences.

Functions:
    fibonacci(n, start_value, next_value) - n-th term of x(k+2) = x(k) + x(k+1)
"""

import operator

from algorithms.constants import FIBONACCI_NEXT, FIBONACCI_START
from algorithms.types import A


def fibonacci(n: int, start_value: A = FIBONACCI_START, next_value: A = FIBONACCI_NEXT) -> A:
    """
    Returns the n-th term of the sequence seeded by `start_value`, `next_value`.

    Term 0 is `start_value`, term 1 is `next_value`, and each following term is
    `older + newer`. The left operand is always the older term, which matters
    for non-commutative `+`. Runs in O(n) additions with two live values.

    Raises:
        TypeError: If `n` is not an integer.
        ValueError: If `n` is negative.

    Example:
        >>> fibonacci(10)
        55
        >>> fibonacci(4, 2, 1)  # Lucas numbers
        7
    """
    if isinstance(n, bool):
        raise TypeError("n must be an integer, got bool")
    try:
        n = operator.index(n)
    except TypeError:
        raise TypeError(f"n must be an integer, got {type(n).__name__}") from None
    if n < 0:
        raise ValueError("n must be non-negative")

    if n == 0:
        return start_value

    current, upcoming = start_value, next_value
    for _ in range(n - 1):
        current, upcoming = upcoming, current + upcoming
    return upcoming


__all__ = ["fibonacci"]
