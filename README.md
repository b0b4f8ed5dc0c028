# cpdrills

A collection of classic competitive-programming techniques written as plain,
tested Python functions: binary search variants, subset and permutation
generation, backtracking, maximum subarray sums, the coin problem and
subset sum by meet-in-the-middle. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpdrills.search` | `threshold_predicate`, `first_true_linear`, `first_true_bisect`, `last_false_jump`, `jump_search`, `count_equal` |
| `cpdrills.basics` | `CallCounter`, `fib`, `nearly_equal`, `positive_mod`, `factorial_mod`, `squares_of_doubles`, `find_substring` |
| `cpdrills.pairs` | `count_common_two_pointers`, `count_common_set` |
| `cpdrills.subsets` | `subsets_by_bits`, `subsets_recursive`, `subsets_top_down`, `masked_subsets`, `subsets_with_sum`, `choose` |
| `cpdrills.permutations` | `next_permutation`, `lexicographic_permutations`, `permutations_backtracking` |
| `cpdrills.backtracking` | `n_queens`, `count_grid_paths`, `count_hamiltonian_paths` |
| `cpdrills.subarrays` | `subarray_sums`, `max_subarray_sum`, `max_subarray_sum_brute` |
| `cpdrills.coins` | `min_coins_recursive`, `min_coins_search` |
| `cpdrills.subset_sum` | `subset_sums`, `has_subset_sum`, `has_subset_sum_meet_in_middle` |
| `cpdrills.cli` | `main`, the `cpdrills` command |

Generators such as `subsets_by_bits`, `lexicographic_permutations`,
`n_queens` and `subarray_sums` yield their results lazily; wrap them in
`list()` to collect everything. Functions raise `ValueError` for arguments
they cannot work with, such as a negative `n` or a non-positive modulus.

## Examples

```python
from cpdrills.basics import fib, positive_mod
from cpdrills.pairs import count_common_set
from cpdrills.subarrays import max_subarray_sum

fib(7)                                               # 13
positive_mod(-17, 5)                                 # 3
count_common_set([5, 2, 8, 9, 4], [3, 2, 9, 5])      # 3
max_subarray_sum([-1, 2, 4, -3, 5, 2, -5, 2])        # 10
```

Searching for the point where a monotone predicate flips, and searching a
sorted list:

```python
from cpdrills.search import threshold_predicate, first_true_linear, jump_search

first_true_linear(threshold_predicate, 1)            # 500000
jump_search([1, 3, 5, 7, 9, 11, 13], 11)             # 5
jump_search([1, 3, 5, 7, 9, 11, 13], 4)              # None
```

The coin problem with coins 1, 3 and 4. Both solvers return a pair: the
fewest coins (or `None` if the target cannot be formed) and the number of
calls the search made.

```python
from cpdrills.coins import min_coins_recursive

best, calls = min_coins_recursive(10, (1, 3, 4))
best                                                 # 3
```

## Command line

Installing the package provides a `cpdrills` command with three
sub-commands, each taking one integer `n`:

```
cpdrills calls 5          # times a doubly recursive CallCounter(5) is invoked
cpdrills coins 10         # fewest coins of 1, 3, 4 by plain recursion, and the call count
cpdrills coin-search 10   # fewest coins of 1, 3, 4 by pruned search, and the call count
cpdrills --help
```

Invalid values (for example a negative target) print an error to standard
error and exit with status 1. The command covers only these three drills;
everything else is used from Python.