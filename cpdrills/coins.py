"""Fewest coins adding up to a target, by plain recursion and by pruned search."""

from __future__ import annotations

import math
from collections.abc import Iterable

DEFAULT_COINS = (1, 3, 4)


def _validated(target: int, coins: Iterable[int]) -> tuple[int, ...]:
    if target < 0:
        raise ValueError(f"target must be non-negative, got {target}")
    denominations = tuple(coins)
    if not denominations:
        raise ValueError("at least one coin value is required")
    if any(coin <= 0 for coin in denominations):
        raise ValueError(f"coin values must be positive, got {denominations}")
    return denominations


def min_coins_recursive(
    target: int, coins: Iterable[int] = DEFAULT_COINS
) -> tuple[int | None, int]:
    """Return ``(fewest coins, calls made)`` by unmemoised recursion.

    The fewest-coins value is None when ``target`` cannot be formed. The
    second value counts every recursive call, including those that overshoot.
    """
    denominations = _validated(target, coins)
    calls = 0

    def solve(x: int) -> float:
        nonlocal calls
        calls += 1
        if x < 0:
            return math.inf
        if x == 0:
            return 0
        return min(solve(x - coin) for coin in denominations) + 1

    result = solve(target)
    return (None if math.isinf(result) else int(result)), calls


def min_coins_search(
    target: int, coins: Iterable[int] = DEFAULT_COINS
) -> tuple[int | None, int]:
    """Return ``(fewest coins, calls made)`` by depth-first search with pruning.

    Coins are added one at a time in the given order. After each branch, the
    remaining distance from the reached sum is recorded as the best total so
    far minus the current depth; later branches that arrive at a recorded sum
    stop there and use that figure instead of searching further.
    """
    denominations = _validated(target, coins)
    best = math.inf
    calls = 0
    remaining = [math.inf] * (target + 1)

    def search(total: int, depth: int) -> None:
        nonlocal best, calls
        calls += 1
        if total > target:
            return
        if total == target:
            best = min(best, depth)
            return
        if not math.isinf(remaining[total]):
            best = min(best, depth + remaining[total])
            return
        for coin in denominations:
            reached = total + coin
            search(reached, depth + 1)
            if reached <= target:
                remaining[reached] = best - (depth + 1)

    search(0, 0)
    return (None if math.isinf(best) else int(best)), calls