"""Locating the point where a monotone predicate flips, and searching sorted data."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Sequence
from itertools import count

THRESHOLD = 500_000
INT_MAX = 2**31 - 1

Predicate = Callable[[int], bool]


def threshold_predicate(x: int) -> bool:
    """Return True once ``x`` reaches the fixed threshold of 500000."""
    return x >= THRESHOLD


def first_true_linear(predicate: Predicate, start: int = 0) -> int:
    """Return the first integer after ``start`` for which ``predicate`` holds.

    Integers are tried one at a time, starting at ``start + 1``.
    """
    return next(i for i in count(start + 1) if predicate(i))


def first_true_bisect(
    predicate: Predicate, low: int = 0, high: int = INT_MAX
) -> int:
    """Bisect ``(low, high]`` for the first value where ``predicate`` holds.

    ``predicate`` is assumed false at ``low`` and true at ``high``; the
    interval is narrowed until the two ends are adjacent and ``high`` is
    returned.
    """
    if low >= high:
        raise ValueError(f"empty search interval: low={low}, high={high}")
    while low + 1 != high:
        mid = (low + high) // 2
        if predicate(mid):
            high = mid
        else:
            low = mid
    return high


def last_false_jump(predicate: Predicate, n: int) -> int:
    """Return the largest position below ``n`` reached by jumps over false values.

    Starting at 0, jumps of ``n // 2``, ``n // 4``, ... 1 are taken as long
    as the landing position is below ``n`` and ``predicate`` is false there.
    """
    k = 0
    step = n // 2
    while step > 0:
        while k + step < n and not predicate(k + step):
            k += step
        step //= 2
    return k


def jump_search(values: Sequence[int], target: int) -> int | None:
    """Find ``target`` in the ascending sequence ``values`` by halving jumps.

    Returns an index holding ``target``, or None when it is absent.
    """
    n = len(values)
    if n == 0:
        return None
    k = 0
    step = n // 2
    while step >= 1:
        while k + step < n and values[k + step] <= target:
            k += step
        step //= 2
    return k if values[k] == target else None


def count_equal(values: Sequence[int], target: int) -> int:
    """Count occurrences of ``target`` by sorting and taking its equal range."""
    ordered = sorted(values)
    return bisect_right(ordered, target) - bisect_left(ordered, target)