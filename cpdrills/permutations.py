"""Enumerating permutations lexicographically and by backtracking."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")


def next_permutation(seq: Sequence[T]) -> list[T] | None:
    """Return the lexicographically next arrangement of ``seq``.

    Returns None when ``seq`` is already the last arrangement (in descending
    order). The input is left unchanged.
    """
    perm = list(seq)
    pivot = len(perm) - 2
    while pivot >= 0 and not perm[pivot] < perm[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        return None
    swap = len(perm) - 1
    while not perm[pivot] < perm[swap]:
        swap -= 1
    perm[pivot], perm[swap] = perm[swap], perm[pivot]
    perm[pivot + 1 :] = reversed(perm[pivot + 1 :])
    return perm


def lexicographic_permutations(items: Iterable[T]) -> Iterator[list[T]]:
    """Yield every distinct arrangement of ``items`` in lexicographic order.

    Enumeration starts from the sorted arrangement, so repeated items give
    each distinct arrangement once.
    """
    current: list[T] | None = sorted(items)
    while current is not None:
        yield current
        current = next_permutation(current)


def permutations_backtracking(n: int) -> Iterator[tuple[int, ...]]:
    """Yield the permutations of ``0 .. n-1`` by choosing unused values in turn."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    chosen = [False] * n
    permutation: list[int] = []

    def search() -> Iterator[tuple[int, ...]]:
        if len(permutation) == n:
            yield tuple(permutation)
            return
        for value in range(n):
            if chosen[value]:
                continue
            chosen[value] = True
            permutation.append(value)
            yield from search()
            permutation.pop()
            chosen[value] = False

    return search()