import math

import pytest

from cpdrills.basics import (
    CallCounter,
    factorial_mod,
    fib,
    find_substring,
    nearly_equal,
    positive_mod,
    squares_of_doubles,
)


def test_fib_base_cases():
    assert fib(0) == 0
    assert fib(1) == 1


def test_fib_seven():
    assert fib(7) == 13


@pytest.mark.parametrize("n", range(2, 30))
def test_fib_recurrence(n):
    assert fib(n) == fib(n - 1) + fib(n - 2)


def test_fib_negative_raises():
    with pytest.raises(ValueError):
        fib(-1)


def test_nearly_equal_floating_sum():
    x = 0.3 * 3 + 0.1
    assert nearly_equal(x, 1.0)


def test_nearly_equal_distinct_values():
    assert not nearly_equal(1.0, 1.1)


def test_nearly_equal_custom_tolerance():
    assert nearly_equal(1.0, 1.05, eps=0.1)
    assert not nearly_equal(1.0, 1.05, eps=0.01)


def test_positive_mod_negative_dividend():
    assert positive_mod(-17, 5) == 3


@pytest.mark.parametrize("a", [-100, -17, -5, -1, 0, 1, 4, 17, 123456])
@pytest.mark.parametrize("m", [1, 2, 5, 7, 1000])
def test_positive_mod_invariants(a, m):
    r = positive_mod(a, m)
    assert 0 <= r < m
    assert (a - r) % m == 0


@pytest.mark.parametrize("m", [0, -3])
def test_positive_mod_rejects_bad_modulus(m):
    with pytest.raises(ValueError):
        positive_mod(10, m)


@pytest.mark.parametrize("n", [0, 1, 5, 20, 100])
def test_factorial_mod_matches_exact_factorial(n):
    assert factorial_mod(n) == math.factorial(n) % 1000000007


def test_factorial_mod_divisible():
    assert factorial_mod(10, 7) == 0


def test_factorial_mod_in_range():
    value = factorial_mod(100)
    assert 0 <= value < 1000000007


def test_factorial_mod_negative_raises():
    with pytest.raises(ValueError):
        factorial_mod(-1)


def test_squares_of_doubles_shape():
    values = squares_of_doubles(10)
    assert len(values) == 10
    assert values == sorted(set(values))
    for v in values:
        root = math.isqrt(v)
        assert root * root == v
        assert root % 2 == 0


def test_squares_of_doubles_empty():
    assert squares_of_doubles(0) == []


def test_find_substring_missing():
    assert find_substring("alby" + "alby", "ay") is None


@pytest.mark.parametrize("needle", ["yal", "alby", "by"])
def test_find_substring_present(needle):
    haystack = "albyalby"
    idx = find_substring(haystack, needle)
    assert haystack[idx:idx + len(needle)] == needle
    assert needle not in haystack[:idx + len(needle) - 1]


def test_call_counter_single():
    counter = CallCounter()
    counter(1)
    assert counter.times == 1


@pytest.mark.parametrize("n", range(2, 12))
def test_call_counter_doubles(n):
    smaller = CallCounter()
    smaller(n - 1)
    larger = CallCounter()
    larger(n)
    assert larger.times == 2 * smaller.times + 1


def test_call_counter_accumulates():
    counter = CallCounter()
    counter(1)
    counter(1)
    assert counter.times == 2


def test_call_counter_rejects_zero():
    with pytest.raises(ValueError):
        CallCounter()(0)