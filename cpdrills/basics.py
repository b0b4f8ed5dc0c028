"""Small numeric and string drills: recursion, modular arithmetic, tolerances."""

from __future__ import annotations

from dataclasses import dataclass

MOD = 1_000_000_007
EPSILON = 1e-9


@dataclass
class CallCounter:
    """Recursive callable that counts how many times it has been invoked.

    Calling it with ``n`` recurses twice on ``n - 1`` until ``n`` is 1.
    """

    times: int = 0

    def __call__(self, n: int) -> None:
        if n < 1:
            raise ValueError(f"n must be at least 1, got {n}")
        self.times += 1
        if n == 1:
            return
        self(n - 1)
        self(n - 1)


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def nearly_equal(a: float, b: float, eps: float = EPSILON) -> bool:
    """Return True when ``a`` and ``b`` differ by less than ``eps``."""
    return abs(a - b) < eps


def positive_mod(a: int, m: int) -> int:
    """Return the remainder of ``a`` modulo ``m`` in the range ``[0, m)``."""
    if m <= 0:
        raise ValueError(f"modulus must be positive, got {m}")
    return a % m


def factorial_mod(n: int, mod: int = MOD) -> int:
    """Return ``n!`` modulo ``mod``, reducing after every multiplication."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if mod <= 0:
        raise ValueError(f"modulus must be positive, got {mod}")
    answer = 1 % mod
    for i in range(1, n + 1):
        answer = answer * i % mod
    return answer


def squares_of_doubles(n: int) -> list[int]:
    """Return ``(i + i) ** 2`` for ``i`` from 1 to ``n``."""
    return [(i + i) ** 2 for i in range(1, n + 1)]


def find_substring(haystack: str, needle: str) -> int | None:
    """Return the first index of ``needle`` in ``haystack``, or None if absent."""
    index = haystack.find(needle)
    return None if index == -1 else index