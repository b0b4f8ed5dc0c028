"""Sums of consecutive subarrays and the maximum subarray sum."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from itertools import accumulate, chain


def subarray_sums(values: Sequence[int]) -> Iterator[tuple[int, int, int]]:
    """Yield ``(start, end, total)`` for every consecutive subarray of ``values``.

    ``end`` is inclusive. Subarrays are produced by start index, and for each
    start by increasing end index, with the total built up incrementally.
    """
    for start in range(len(values)):
        running = accumulate(values[start:])
        for end, total in enumerate(running, start):
            yield start, end, total


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a consecutive subarray using Kadane's method.

    The empty subarray counts, so the result is never below 0.
    """
    best = 0
    current = 0
    for x in values:
        current = max(x, current + x)
        best = max(best, current)
    return best


def max_subarray_sum_brute(values: Sequence[int]) -> int:
    """Return the largest subarray sum by trying every consecutive subarray.

    The empty subarray counts, so the result is never below 0.
    """
    return max(chain([0], (total for _, _, total in subarray_sums(values))))