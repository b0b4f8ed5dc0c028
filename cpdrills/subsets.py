"""Generating the subsets of a collection in several classic ways."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from math import comb
from typing import TypeVar

T = TypeVar("T")
F = TypeVar("F")


def subsets_by_bits(items: Iterable[T]) -> Iterator[list[T]]:
    """Yield every subset of ``items``, one per bit mask from 0 to 2**n - 1.

    Bit ``j`` of the mask selects ``items[j]``; each subset keeps the
    original order of the items.
    """
    pool = list(items)
    for mask in range(1 << len(pool)):
        yield [item for j, item in enumerate(pool) if mask & (1 << j)]


def subsets_recursive(items: Iterable[T]) -> Iterator[list[T]]:
    """Yield every subset of ``items`` by deciding each item in turn.

    At each position the branch that includes the item is explored before
    the branch that leaves it out, so the full set comes first and the empty
    set last.
    """
    pool = list(items)
    chosen: list[T] = []

    def search(k: int) -> Iterator[list[T]]:
        if k == len(pool):
            yield list(chosen)
            return
        chosen.append(pool[k])
        yield from search(k + 1)
        chosen.pop()
        yield from search(k + 1)

    return search(0)


def subsets_top_down(items: Iterable[T]) -> list[list[T]]:
    """Build all subsets by extending every subset found so far with each item."""
    result: list[list[T]] = [[]]
    for item in items:
        result.extend([*subset, item] for subset in list(result))
    return result


def masked_subsets(items: Iterable[T], fill: F = 0) -> Iterator[list[T | F]]:
    """Yield each subset as a full-length list with left-out items replaced by ``fill``."""
    pool = list(items)
    for mask in range(1 << len(pool)):
        yield [item if mask & (1 << j) else fill for j, item in enumerate(pool)]


def subsets_with_sum(items: Iterable[int], target: int) -> Iterator[list[int]]:
    """Yield the subsets of ``items`` whose elements add up to ``target``."""
    return (subset for subset in subsets_recursive(items) if sum(subset) == target)


def choose(n: int, r: int) -> int:
    """Return the number of ways to choose ``r`` items from ``n``."""
    if n < 0 or r < 0:
        raise ValueError(f"n and r must be non-negative, got n={n}, r={r}")
    if r > n:
        raise ValueError(f"cannot choose {r} items from {n}")
    return comb(n, r)