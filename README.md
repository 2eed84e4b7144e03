# algosolve

Solutions to classic algorithm and data-structure problems, grouped by
topic into plain Python modules. It needs nothing beyond the standard
library and supports Python 3.10 and later.

## Installation

```
pip install .
```

## Modules

| Module | Contents |
| --- | --- |
| `algosolve.tree` | `TreeNode` and `from_level_order`, which builds a tree from a heap-layout list where `None` marks a missing slot |
| `algosolve.tree_traversal` | `average_of_levels`, `level_order`, `zigzag_level_order`, `right_side_view`, `count_nodes`, `max_depth`, `invert_tree` (in place), `flatten` (in place, into a right-linked preorder chain) |
| `algosolve.tree_build` | `build_tree_from_preorder_inorder`, `build_tree_from_inorder_postorder` for trees with unique values |
| `algosolve.bst` | `BSTIterator` (an in-order iterator that leaves the tree unchanged, with `has_next`), `kth_smallest`, `minimum_difference` |
| `algosolve.tree_paths` | `max_path_sum`, `lowest_common_ancestor` |
| `algosolve.linked_lists` | `ListNode`, `RandomListNode`, `from_values`, `to_values`, `add_two_numbers`, `merge_two_lists`, `has_cycle`, `build_random_list`, `copy_random_list` |
| `algosolve.structures` | `MinStack` (`push`, `pop`, `top`, `get_min`), `LRUCache` (`get`, `put`), `RandomizedSet` (`insert`, `remove`, `get_random`) |
| `algosolve.expression` | `eval_rpn` for reverse Polish tokens, `calculate` for infix `+`/`-` expressions with parentheses and unary minus |
| `algosolve.strings` | `add_binary`, `int_to_roman`, `length_of_last_word`, `longest_common_prefix`, `length_of_longest_substring`, `min_window`, `is_isomorphic` |
| `algosolve.anagrams` | `group_anagrams` |
| `algosolve.intervals` | `insert_interval`, `merge_intervals`, `find_min_arrow_shots` for closed intervals |
| `algosolve.grid` | `game_of_life`, which advances a 0/1 board one generation in place |
| `algosolve.geometry` | `max_points` |
| `algosolve.numbers` | `range_bitwise_and`, `trailing_zeroes`, `is_happy` |
| `algosolve.sequences` | `climb_stairs`, `coin_change`, `max_area`, `contains_nearby_duplicate`, `h_index`, `rob`, `jump`, `length_of_lis`, `max_profit` |

Tree and list nodes compare by identity, so they can be passed around and
checked by reference (for example `lowest_common_ancestor(root, p, q)`
returns one of the tree's own nodes).

Invalid input raises the usual Python exceptions: `ValueError` for bad
arguments (a non-binary string, a negative amount, an unreachable last
position in `jump`, mismatched traversals), `IndexError` for reading an
empty `MinStack` or drawing from an empty `RandomizedSet`, and
`ZeroDivisionError` for division by zero in `eval_rpn`.

## Examples

```python
from algosolve.tree import from_level_order
from algosolve.tree_traversal import level_order, average_of_levels

root = from_level_order([3, 9, 20, None, None, 15, 7])
level_order(root)        # [[3], [9, 20], [15, 7]]
average_of_levels(root)  # [3.0, 14.5, 11.0]
```

```python
from algosolve.bst import BSTIterator
from algosolve.tree import from_level_order

root = from_level_order([7, 3, 15, None, None, 9, 20])
list(BSTIterator(root))  # [3, 7, 9, 15, 20]
```

```python
from algosolve.structures import LRUCache

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)     # 1
cache.put(3, 3)  # evicts key 2
cache.get(2)     # -1
```

```python
from algosolve.expression import eval_rpn, calculate

eval_rpn(["2", "1", "+", "3", "*"])   # 9
calculate("(1+(4+5+2)-3)+(6+8)")      # 23
```

```python
from algosolve.strings import add_binary, int_to_roman

add_binary("1010", "1011")  # "10101"
int_to_roman(1994)          # "MCMXCIV"
```

## What it does not do

The package is a library only: it has no command-line program, and every
function works on values passed to it in Python.

## Running the tests

```
pip install .[test]
pytest
```