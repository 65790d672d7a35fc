"""
Half-open index ranges over sequences.

Every sequence algorithm works on `seq[first:last]` addressed by integer
positions, with `last` doubling as the "not found" sentinel of the searches.
"""

from collections.abc import Sized


def resolve_bounds(seq: Sized, first: int = 0, last: int | None = None) -> tuple[int, int]:
    """
    Returns the concrete `(first, last)` pair for `seq`.

    `last` defaults to `len(seq)`. Bounds are validated before any element is
    touched.

    Raises:
        ValueError: If the range is not contained in `[0, len(seq)]` or is reversed.
    """
    size = len(seq)
    if last is None:
        last = size
    if first < 0 or last > size:
        raise ValueError(f"Range [{first}, {last}) is outside of [0, {size})")
    if first > last:
        raise ValueError(f"Range [{first}, {last}) is reversed")
    return first, last
