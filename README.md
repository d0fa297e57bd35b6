# algodrills

A collection of well-known algorithm drills written as small, plain Python
functions and classes: number tricks, linked lists, stacks, strings, two
pointers, greedy scheduling, recursion and backtracking, hashing, binary
search, binary trees, binary search trees and bit manipulation. No
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `algodrills.maths` | `power_mod`, `unique_paths`, `unique_paths_memo`, `majority_element`, `majority_elements`, `reverse_pairs`, `staircase_search`, `search_matrix` |
| `algodrills.stacks` | `is_valid_parentheses`, `next_greater_element`, `next_greater_elements` |
| `algodrills.linked_list` | `ListNode`, `FlatNode`, `RandomNode`, `build_list`, `to_list`, `add_two_numbers`, `delete_node`, `merge_two_lists`, `middle_node`, `remove_nth_from_end`, `reverse_list`, `detect_cycle`, `has_cycle`, `flatten`, `get_intersection_node`, `is_palindrome`, `reverse_k_group`, `rotate_right`, `copy_random_list` |
| `algodrills.strings` | `int_to_roman`, `roman_to_int`, `longest_palindrome`, `reverse_words` |
| `algodrills.two_pointers` | `three_sum`, `max_consecutive_ones`, `remove_duplicates`, `trapping_water` |
| `algodrills.greedy` | `Item`, `Job`, `max_meetings`, `activity_selection`, `coin_change`, `fractional_knapsack`, `job_scheduling`, `find_platform` |
| `algodrills.recursion` | `combination_sum`, `combination_sum2`, `get_permutation`, `palindrome_partition`, `subsets_with_dup`, `subset_sums` |
| `algodrills.hashing` | `four_sum`, `longest_consecutive`, `two_sum`, `length_of_longest_substring`, `max_zero_sum_length`, `count_xor_subarrays` |
| `algodrills.backtracking` | `graph_coloring`, `solve_n_queens`, `permute`, `find_path`, `solve_sudoku`, `word_break` |
| `algodrills.monotonic` | `LRUCache`, `MinStack`, `largest_rectangle_area`, `prev_smaller`, `oranges_rotting`, `max_of_subarrays` |
| `algodrills.binary_tree` | `TreeNode`, `tree_from_level_order`, `inorder_traversal`, `preorder_traversal`, `postorder_traversal`, `level_order`, `zigzag_level_order`, `left_view`, `right_side_view`, `top_view`, `bottom_view`, `lowest_common_ancestor`, `diameter`, `height`, `is_balanced`, `is_same_tree` |
| `algodrills.binary_search` | `aggressive_cows`, `find_pages`, `find_median_sorted_arrays`, `search_rotated`, `single_non_duplicate` |
| `algodrills.tree_structure` | `is_symmetric`, `flatten_tree`, `max_path_sum`, `build_tree_in_post`, `build_tree_pre_in` |
| `algodrills.bst` | `BSTIterator`, `lca_bst`, `sorted_array_to_bst`, `is_valid_bst`, `inorder_successor`, `connect`, `search_bst`, `find_ceil`, `find_floor`, `kth_largest`, `kth_smallest`, `largest_bst`, `serialize`, `deserialize` |
| `algodrills.bits` | `count_total_set_bits`, `count_bits`, `divide`, `is_power_of_two`, `all_possible_strings`, `square` |

## Examples

```python
from algodrills.strings import int_to_roman, roman_to_int
from algodrills.two_pointers import three_sum
from algodrills.linked_list import build_list, reverse_list, to_list
from algodrills.binary_tree import tree_from_level_order, level_order
from algodrills.bst import serialize, deserialize
from algodrills.monotonic import LRUCache

int_to_roman(1994)        # 'MCMXCIV'
roman_to_int("MCMXCIV")   # 1994

three_sum([-1, 0, 1, 2, -1, -4])
# [[-1, -1, 2], [-1, 0, 1]]

to_list(reverse_list(build_list([1, 2, 3])))
# [3, 2, 1]

root = tree_from_level_order([3, 9, 20, None, None, 15, 7])
level_order(root)
# [[3], [9, 20], [15, 7]]
level_order(deserialize(serialize(root)))
# [[3], [9, 20], [15, 7]]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)   # 1
cache.put(3, 3)
cache.get(2)   # -1, evicted as least recently used
```

## Notes

- `ListNode`, `FlatNode`, `RandomNode` and `TreeNode` are dataclasses whose
  instances compare by identity, so functions such as `detect_cycle`,
  `get_intersection_node` and `lowest_common_ancestor` return the very node
  objects of the structure you passed in.
- Several functions change their input in place: `solve_sudoku` fills the
  board, `remove_duplicates` compacts the list, `flatten_tree` rewires the
  tree, `connect` sets a `next` attribute on every tree node, and the linked
  list functions (`reverse_list`, `reverse_k_group`, `rotate_right`,
  `merge_two_lists`, `is_palindrome`, `delete_node`, ...) relink the nodes
  they are given.
- Invalid arguments raise `ValueError` (or `ZeroDivisionError` for `divide`
  by zero); empty containers raise `IndexError` in `MinStack.top` and
  `MinStack.get_min`.

## What the package does not do

It is a library only: there is no command-line program and nothing reads
problem input from standard input. It also has no drills on plain array
manipulation such as sorting colours, merging intervals or rotating a
matrix; the modules listed above are all it holds.