"""Counting elements shared by two collections."""

from __future__ import annotations

from collections.abc import Iterable


def count_common_two_pointers(first: Iterable[int], second: Iterable[int]) -> int:
    """Count matching pairs between two collections by walking both in sorted order.

    Each element can be matched at most once, so duplicates are paired up.
    """
    left = sorted(first)
    right = sorted(second)
    i = j = 0
    matches = 0
    while i < len(left) and j < len(right):
        a, b = left[i], right[j]
        if a == b:
            matches += 1
            i += 1
            j += 1
        elif a < b:
            i += 1
        else:
            j += 1
    return matches


def count_common_set(first: Iterable[int], second: Iterable[int]) -> int:
    """Count the elements of ``second`` that also occur in ``first``."""
    seen = set(first)
    return sum(1 for x in second if x in seen)