# algobox

A small library of well-known algorithms. They are written as plain functions
over Python lists, strings and two simple node classes, `ListNode` and
`TreeNode`. The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the test extra with `pip install ".[test]"` and then
run `pytest`.

## Modules

### `algobox.linked_list`

- `ListNode(val=0, next=None)` is a singly linked list node. Iterating over a
  node yields that node and every node after it.
- `linked_from(values)` builds a list from an iterable. It returns `None` when
  the iterable is empty.
- `linked_values(head)` returns the values from head to tail.
- `merge_k_lists(lists)` merges several sorted lists into one sorted list. It
  relinks the nodes it is given rather than copying them.

### `algobox.tree`

`TreeNode(val=0, left=None, right=None)` is a binary tree node. The module
provides these functions for it:

- `inorder(root)` and `preorder(root)` return the values in traversal order.
- `build_from_preorder_inorder(preorder, inorder)` rebuilds a tree from those
  two traversals. It raises `ValueError` when they do not match.
- `build_from_inorder_postorder(inorder, postorder)` rebuilds a tree from those
  two traversals. It returns `None` when their lengths differ and raises
  `ValueError` when a value does not fit.
- `flatten(root)` relinks the tree in place into a right-leaning chain in
  preorder, and returns the root.
- `serialize(root)` writes the tree in level order as comma-terminated tokens,
  with `#` for an empty child. `deserialize(data)` reads that form back.
- `distance_k(root, target, k)` returns the values of every node exactly `k`
  edges from `target`.

### `algobox.bst`

Binary search tree operations on `TreeNode`:

- `search(root, val)` returns the node that holds `val`, or `None`.
- `insert(root, val)` adds a new leaf and returns the root. Equal values go to
  the right.
- `delete_node(root, key)` removes `key` and returns the new root.
- `from_preorder(preorder)` builds the BST with that preorder traversal.
- `is_valid_bst(root)` checks that the inorder values are strictly increasing.
- `kth_smallest(root, k)` returns the k-th smallest value, counting from 1. It
  raises `IndexError` when `k` is out of range.
- `lowest_common_ancestor(root, p, q)` returns the lowest node that is an
  ancestor of both `p` and `q`, where a node counts as its own ancestor.
- `find_target(root, k)` tells whether two distinct nodes sum to `k`.
- `generate_trees(n)` returns every structurally distinct BST on the values
  1..n. The returned trees share subtrees.
- `count_trees(n)` returns how many such trees there are. It raises
  `ValueError` when `n` is negative.
- `BSTIterator(root)` yields the values in ascending order, lazily. Use it as a
  Python iterator, or call `next()` and `has_next()` on it.

### `algobox.search`

Binary search over answer spaces:

- `guess_number(n, guess)` finds a number in 1..n with a guess oracle.
- `maximum_candies(candies, k)` returns the largest equal share of the candy
  piles that each of `k` children can receive.
- `target_indices(nums, target)` returns the positions that `target` takes once
  `nums` is sorted.
- `maximum_count(nums)` takes a sorted sequence and returns whichever is larger:
  the count of negative values or the count of positive values.
- `repair_cars(ranks, cars)` returns the least time for mechanics of the given
  ranks to repair `cars` cars.
- `min_capability(nums, k)` returns the least capability that robs at least
  `k` houses, no two of them adjacent.
- `min_zero_array(nums, queries)` returns how many leading range-decrement
  queries bring `nums` to all zeros. It returns -1 when all of them together
  are not enough.

### `algobox.graphs`

- `find_all_recipes(recipes, ingredients, supplies)` returns the recipes that
  can be made, in the order they become available.
- `count_complete_components(n, edges)` counts the connected components that
  are cliques.
- `minimum_cost(n, edges, queries)` answers each query with the least bitwise
  AND cost of a walk between its two nodes. The answer is 0 for a node to
  itself and -1 for nodes that are not connected.

### `algobox.arrays`

Counting and rearranging helpers over sequences:

- `has_groups_size_x`
- `busy_student`
- `most_visited`
- `count_good_rectangles`
- `min_operations_boxes`
- `get_concatenation`
- `final_value_after_operations`
- `count_pairs`
- `divide_array`
- `longest_nice_subarray`
- `sort_people`
- `min_operations_binary`
- `stable_mountains`

### `algobox.text`

- `defang_ip(address)` replaces every `.` with `[.]`.
- `convert_temperature(celsius)` returns `[kelvin, fahrenheit]`.
- `score_of_string(s)` sums the absolute code-point differences between
  adjacent characters.
- `minimum_operations_k_periodic(word, k)` counts the k-blocks that must be
  overwritten to make `word` k-periodic.

### `algobox.grid`

- `min_flips(grid)` returns the fewest cell flips that make every row and
  column of a binary grid a palindrome, with the total number of ones divisible
  by four.

## Example

```python
from algobox.bst import BSTIterator, from_preorder
from algobox.tree import deserialize, serialize
from algobox.linked_list import linked_from, linked_values, merge_k_lists

root = from_preorder([8, 5, 1, 7, 10, 12])
print(list(BSTIterator(root)))        # [1, 5, 7, 8, 10, 12]

text = serialize(root)
print(serialize(deserialize(text)) == text)   # True

merged = merge_k_lists([linked_from([1, 4, 5]), linked_from([1, 3, 4]), linked_from([2, 6])])
print(linked_values(merged))          # [1, 1, 2, 3, 4, 4, 5, 6]
```

## What it does not do

This is a library only. It has no command-line program, and it does not read
or write files.