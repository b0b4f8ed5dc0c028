"""Deciding whether some subset of numbers adds up to a target."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def subset_sums(items: Iterable[int]) -> list[int]:
    """Return the sum of every subset of ``items``, one entry per subset.

    Sums are listed in the order a recursive search produces them when it
    explores leaving an item out before taking it.
    """
    sums = [0]
    for item in reversed(list(items)):
        sums = sums + [s + item for s in sums]
    return sums


def has_subset_sum(items: Iterable[int], target: int) -> bool:
    """Return True if some subset of ``items`` adds up to ``target``."""
    return target in subset_sums(items)


def has_subset_sum_meet_in_middle(items: Sequence[int], target: int) -> bool:
    """Decide subset sum by splitting ``items`` in two halves.

    The subset sums of both halves are sorted and scanned from opposite ends
    towards each other looking for a pair adding up to ``target``.
    """
    pool = list(items)
    middle = len(pool) // 2
    left = sorted(subset_sums(pool[:middle]))
    right = sorted(subset_sums(pool[middle:]))
    i, j = 0, len(right) - 1
    while i < len(left) and j >= 0:
        total = left[i] + right[j]
        if total == target:
            return True
        if total < target:
            i += 1
        else:
            j -= 1
    return False