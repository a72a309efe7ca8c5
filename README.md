# problemset

A collection of solved algorithm problems as importable Python functions, for
study, practice and reference. Each function takes ordinary Python values
(integers, strings, lists, tree and list nodes) and returns the answer.
Invalid input, such as a negative count or an empty sequence where values
are needed, raises `ValueError` or `IndexError`.

## Installation

```
pip install .
pip install ".[test]"   # to run the tests
```

## Modules

- `problemset.codechef_sequences`: `can_pay` (subset sum),
  `alternating_prefix_lengths`, `can_bench_press`, `even_game_winner`,
  `min_horse_difference`, `or_after_updates` (the OR of a list before and
  after each 1-based point update), `count_non_decreasing_subarrays`,
  `shuffling_parties`, `smallest_pair_sum`.
- `problemset.codechef_strings`: `decreasing_string`, `surviving_buildings`,
  `fits_in_memory`, `good_prefix_length`, `ship_class`.
- `problemset.codechef_math`: `dice_combinations` (modulo 10**9 + 7),
  `steel_grade`, `best_box_volume`, `longest_and_subarray`, `count_fours`,
  `rcb_qualifies`, `divisible_by_three`, `mex_or`, and the constant `MOD`.
- `problemset.train_maintenance`: `train_maintenance`, which reports how many
  trains are in maintenance after each day's add or remove operation.
- `problemset.arrays`: `four_sum`, `first_missing_positive`,
  `median_of_sorted`, `trapped_water`, `sliding_window_max`, `plus_one`.
- `problemset.strings`: `count_concatenation_pairs`, `add_strings`,
  `count_distinct_subsequences`, `is_balanced`, `open_lock`,
  `is_perfect_square`.
- `problemset.grids`: `count_islands`, `rot_oranges`, `is_valid_placement`,
  `solve_sudoku` (returns a solved copy; the board passed in is not changed).
- `problemset.trees`: the `TreeNode` dataclass, `build_tree` (from level-order
  values with `None` for missing children), `max_path_sum`, `has_path_sum`,
  `diameter` (counted in nodes), `leaf_values`, `leaf_similar`.
- `problemset.linked_list`: the `ListNode` dataclass with
  `ListNode.from_values` and `ListNode.to_list`, `list_length`,
  `reverse_k_group`.

## Example

```python
from problemset.arrays import trapped_water, four_sum
from problemset.linked_list import ListNode, reverse_k_group
from problemset.trees import build_tree, diameter

trapped_water([0, 2, 1, 3, 0, 1, 2, 1, 2, 1])    # 5
four_sum([1, 0, -1, 0, -2, 2], 0)

head = ListNode.from_values([1, 2, 3, 4, 5])
reverse_k_group(head, 2).to_list()               # [2, 1, 4, 3, 5]

diameter(build_tree([1, 2, 3, 4, 5]))            # 4
```

## What the package does not do

There is no command-line program. The functions do not read problem input
from standard input or print answers in a judge's output format; parse the
input yourself and call the functions with Python values.

## Running the tests

```
pytest
```