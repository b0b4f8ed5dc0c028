import pytest

from cpdrills.coins import min_coins_recursive, min_coins_search


def test_recursive_worked_example():
    best, calls = min_coins_recursive(6, (1, 3, 4))
    assert best == 2
    assert calls > 1


def test_default_coins_match_explicit_ones():
    assert min_coins_recursive(6) == min_coins_recursive(6, (1, 3, 4))
    assert min_coins_search(6) == min_coins_search(6, (1, 3, 4))


@pytest.mark.parametrize("target", [0, 1, 5, 9])
def test_only_unit_coins_need_target_many(target):
    best, calls = min_coins_recursive(target, (1,))
    assert best == target
    assert calls == target + 1
    search_best, _ = min_coins_search(target, (1,))
    assert search_best == target


@pytest.mark.parametrize("target", range(0, 7))
def test_search_agrees_with_recursion(target):
    assert min_coins_search(target)[0] == min_coins_recursive(target)[0]


def test_zero_target_needs_no_coins():
    assert min_coins_recursive(0)[0] == 0
    assert min_coins_search(0)[0] == 0


def test_unreachable_target_gives_none():
    assert min_coins_recursive(3, (2,))[0] is None
    assert min_coins_search(3, (2,))[0] is None


def test_single_coin_matching_target():
    assert min_coins_recursive(4, (1, 3, 4))[0] == min_coins_recursive(4, (4,))[0]
    assert min_coins_search(4, (4,))[0] == min_coins_recursive(4, (4,))[0]


@pytest.mark.parametrize("func", [min_coins_recursive, min_coins_search])
def test_negative_target_rejected(func):
    with pytest.raises(ValueError):
        func(-1)


@pytest.mark.parametrize("func", [min_coins_recursive, min_coins_search])
@pytest.mark.parametrize("coins", [(), (0, 1), (-2, 3)])
def test_bad_coins_rejected(func, coins):
    with pytest.raises(ValueError):
        func(5, coins)