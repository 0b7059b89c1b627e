# dsakit

A small collection of classic algorithms on arrays, strings, matrices,
binary search trees, greedy problems and bits. Each is a plain Python
function that takes and returns ordinary Python values. There are no
runtime dependencies.

## Installation

```
pip install .
```

Run the test suite with:

```
pip install ".[test]"
pytest
```

## Modules

- `dsakit.arrays`: pair and triplet sums, common elements of three
  ascending lists, duplicates, the majority element and longest
  consecutive runs. The functions are `count_pairs_with_sum`,
  `get_pairs_count`, `common_elements`, `has_triplet_sum`,
  `find_duplicate`, `duplicates`, `majority_element`,
  `longest_consecutive_run` and `longest_consecutive_subsequence`.
  `find_duplicate` raises `ValueError` when nothing repeats.
  `majority_element` returns `None` when there is no majority.
- `dsakit.sequences`: string and list reversal, moving negatives to the
  front, even/odd alternation, insertion at an index, Kadane's maximum
  subarray sum (never below zero), minimum jumps (`None` if the end cannot
  be reached), trapped rain water, the decimal digits of `n!` and
  conversion from 12-hour to 24-hour time. The functions are
  `reverse_word`, `reverse_chars`, `move_negatives_left`,
  `sort_by_parity_alternating`, `insert_at`, `max_subarray_sum`,
  `min_jumps`, `trapping_water`, `factorial_digits` and `to_24_hour`.
- `dsakit.sorting`: `bubble_sort_adaptive` and `bubble_sort` each return
  the sorted copy together with the number of passes made.
  `selection_sort` returns a sorted copy.
- `dsakit.strings`: `is_palindrome` and `longest_repeating_subsequence`.
- `dsakit.bits`: `bits_to_flip`, `count_set_bits` and `is_power_of_two`.
- `dsakit.bst`:
  - `Node`.
  - `build_tree`, which builds a tree from level-order text and uses `N`
    for a missing child.
  - `insert` for search trees.
  - `lowest_common_ancestor`.
  - `count_nodes_in_range`.
  - `is_dead_end`.
- `dsakit.greedy`: `Job` and `job_scheduling`, which returns the number
  of jobs done and the total profit; `Item` and `fractional_knapsack`.
- `dsakit.matrix`:
  - `median` of a matrix whose rows are sorted.
  - `common_in_all_rows`.
  - `max_pair_difference`.
  - `max_histogram_area`.
  - `max_rectangle_area` of ones in a 0/1 matrix.
  - `spiral_order`.
- `dsakit.array_menu`: `ArrayList`, a list of integers with `insert`,
  `remove_key`, `remove_at` and `render`. Also `run_menu`, an
  interactive menu over it, and `main`.

## Example

```python
from dsakit.sequences import trapping_water, factorial_digits
from dsakit.matrix import median, spiral_order

trapping_water([3, 0, 0, 2, 0, 4])        # 10
factorial_digits(5)                       # [1, 2, 0]
median([[1, 3, 5], [2, 6, 9], [3, 6, 9]])  # 5
spiral_order([[1, 2], [3, 4]])            # [1, 2, 4, 3]
```

## Interactive array editor

The package installs one command:

```
dsakit-array-menu
```

It reads the array size and the elements from standard input. It then
repeatedly offers these options:

- insertion (1)
- deletion by position or by key (2)
- display (3)
- exit (0)

It stops at option 0 or at the end of input. To drive the same menu from
any text streams, call `run_menu(stdin, stdout)`. It returns the resulting
`ArrayList`.

The other modules are libraries only and have no command of their own.