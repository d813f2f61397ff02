# algodrills

A library of classic algorithm exercises written as plain Python functions
and small classes. It has no dependencies outside the standard library.

## Modules

| Module | Contents |
| --- | --- |
| `algodrills.structures` | `Deque`, `Queue`, `Stack`, `PriorityQueue`, `DisjointSet`, and the node types `BTNode`, `LinkNode`, `BiLinkNode`, `LinkNodeWithRand`, `HeapNode` |
| `algodrills.stack_queue` | `StackWithMin`, `QueueByStack`, `sort_stack`, `sort_stack2`, `max_value_in_window`, `make_max_tree`, `get_area`, `max_matrix` |
| `algodrills.linked_list` | reversal (`reverse1`, `reverse2`, `reverse_part`, `reverse_every_k`), `josephus_last`, `is_palindrome`, `copy_link`, `sum_link`, `loop_entry`, `get_intersect_node`, duplicate and value removal, `merge_link_list`, `merge_lr` |
| `algodrills.binary_tree` | recursive, iterative and Morris traversals, `serialize_tree` / `deserialize_tree`, reconstruction from traversal sequences, `is_bst`, `is_cbt`, `is_balanced_tree`, `biggest_sub_bst`, `is_sub_tree`, `contains_topo`, `find_lowest_common_ancestor`, `max_distance`, `count_tree`, `count_nodes` |
| `algodrills.dynamic_programming` | Fibonacci three ways, `min_path_sum`, `coin_changes1`, `coin_changes2`, `longest_increasing_subsequence`, `hanoi_moves`, `hanoi_step`, `common_sub_seq`, `edit_distance`, `get_init_health`, `convert_count`, `winner_score`, `jump_count`, `longest_consecutive`, `n_queen` |
| `algodrills.bit_operation` | swaps without a temporary, comparison-free `get_max1`, 32-bit `bit_add` / `bit_subtract` / `bit_multiply` / `bit_divide`, odd-occurrence finders |
| `algodrills.string_problems` | anagram and uniqueness checks, digit-run sums, run replacement, `str_to_int32`, parenthesis checks, palindromes, `match` (`.` and `*` patterns), and a counting `Trie` |
| `algodrills.arrays` | matrix rotation and search, subarray sums and lengths, local minimum, missing positive, maximum gap, shortest grid path |
| `algodrills.misc` | `gcd`, factorial zero and low-bit counts, `SetAllHashMap`, `LRUCache`, bijective numeration (`str_to_num`, `num_to_str`), `one_count`, `find_min`, `dispense_candy` |

## Installation

```
pip install .
```

## Usage

```python
from algodrills.structures import PriorityQueue
from algodrills.stack_queue import max_value_in_window
from algodrills.dynamic_programming import edit_distance, n_queen
from algodrills.string_problems import Trie
from algodrills.misc import LRUCache

pq = PriorityQueue(lambda a, b: a - b)   # largest value on top
for x in (3, 1, 4, 1, 5):
    pq.push(x)
print(pq.top())                          # 5

print(max_value_in_window([4, 3, 5, 4, 3, 3, 6, 7], 3))  # [5, 5, 5, 4, 6, 7]
print(n_queen(8))                        # 92
print(edit_distance("abc", "adc", 5, 3, 2))              # 2

trie = Trie()
for word in ("abc", "abd", "abc"):
    trie.insert(word)
print(trie.prefix_number("ab"))          # 3

cache = LRUCache(2)
cache.set(1, 10)
cache.set(2, 20)
cache.get(1)
cache.set(3, 30)                         # evicts key 2
print(2 in cache)                        # False
```

Tree traversals return lists of nodes in visiting order. `serialize_tree`
writes a tree level by level as text, each value or `#` for an empty child
followed by `!`; `deserialize_tree` reads it back.

Reading from an empty container (`Stack.top()`, `Queue.front()`,
`Deque.back()`, `PriorityQueue.top()`, `StackWithMin.pop()`) raises
`IndexError`; dropping an element from an empty `Stack`, `Queue`, `Deque` or
`PriorityQueue` does nothing. `LRUCache.get` and `SetAllHashMap.get` raise
`KeyError` for an unknown key.

## What it does not do

There is no command-line tool and nothing is printed: every exercise is a
function or class to import, and results come back as return values.

## Running the tests

```
pip install .[test]
pytest
```