# algokit

A small collection of classic data structures and algorithms in plain Python.
It depends on nothing outside the standard library.

## Installation

```
pip install .
```

## Modules

### `algokit.bst`

`BinarySearchTree(values=())` holds unique integers; `TreeNode` is its node,
with `value`, `left`, `right` and `parent` attributes.

- `insert(value)` adds a value and returns `False` if it was already there.
- `find(target)` (recursive) and `find_iterative(target)` return the node
  holding the value, or `None`.
- `remove(node)` unlinks a node, replacing a node with two children by its
  in-order successor. `None` is ignored; a node from another tree raises
  `ValueError`.
- `discard(value)` removes the node holding a value and says whether it did.
- `in`, `len()` and iteration (ascending order) are supported.

### `algokit.median`

`MedianFinder` keeps a running median with two heaps: `add_num(num)` and
`find_median()`, which returns a float and raises `IndexError` before any
number has been added.

### `algokit.dynamic`

- `fibonacci(n)`
- `longest_increasing_subsequence(values)` – length of the longest strictly
  increasing subsequence
- `frog_jump_cost(heights, k)` – least cost from the first to the last stone,
  jumping 1 to `k` stones at a time
- `knapsack(capacity, values, weights)` – 0/1 knapsack
- `longest_common_subsequence(first, second)` – length of the LCS
- `cut_rod(prices)` – best revenue for a rod of length `len(prices)`

Invalid arguments (negative `n`, empty `heights`, `k < 1`, mismatched
lengths, negative capacity or weights) raise `ValueError`.

### `algokit.binary_tree`

`Node(data, left=None, right=None)` and functions over a tree root:
`preorder`, `level_order`, `sum_at_level(root, k)` (root is level 0; an empty
tree raises `ValueError`, a level past the bottom gives 0), `sum_of_nodes`,
`count_nodes`, `height`, `diameter` and `diameter_and_height`, which returns
`(diameter, height)` in one pass. Heights and diameters count nodes.

### `algokit.linked_list`

`LinkedList(values=())` built from `ListNode` objects (`data`, `next`):
`append`, `prepend`, `pop_front` (`IndexError` when empty), `remove(value)`
(`ValueError` when absent), `reverse`, `reverse_recursive`,
`reverse_in_groups(k)`, `rotate(k)` (moves the last `k` nodes to the front),
`in`, `len()`, iteration, and `str()` in the form `1->2->NULL`.

`has_cycle(head)` and `remove_cycle(head)` work on raw `ListNode` chains;
`remove_cycle` returns whether it broke a cycle.

### `algokit.graph`

`build_adjacency(vertex_count, edges)` builds an undirected adjacency list for
vertices `1..vertex_count` (index 0 is unused). `bfs_traversal(adjacency,
vertex_count)` returns a breadth-first order covering every component,
starting each from its lowest unvisited vertex.

### `algokit.puzzles`

- `digit_word_sum(text)` – sum of the digits whose English names are jumbled
  together in `text`
- `most_occurred(values)` – the most frequent values, in order of first
  appearance

### `algokit.recursion`

`balanced_brackets(open_count, close_count)`, `combination_sum(values,
target)`, `power_set(values)`, `kth_grammar(n, k)`, `grid_paths(n, m)`,
`letter_combinations(digits)` and `josephus(n, k)` (0-based survivor).

## Examples

```python
from algokit.bst import BinarySearchTree
from algokit.median import MedianFinder
from algokit.dynamic import knapsack, longest_common_subsequence
from algokit.linked_list import LinkedList
from algokit.recursion import balanced_brackets, josephus

tree = BinarySearchTree([8, 3, 10, 1, 6])
print(6 in tree)            # True
print(list(tree))           # [1, 3, 6, 8, 10]

finder = MedianFinder()
for number in (5, 15, 1, 3):
    finder.add_num(number)
print(finder.find_median())  # 4.0

print(knapsack(50, [60, 100, 120], [10, 20, 30]))   # 220
print(longest_common_subsequence("abcde", "ace"))   # 3

numbers = LinkedList([1, 2, 3, 4, 5, 6, 7, 8])
numbers.reverse_in_groups(2)
print(numbers)              # 2->1->4->3->6->5->8->7->NULL

print(balanced_brackets(2, 2))  # ['(())', '()()']
print(josephus(5, 3))           # 3
```

## What it does not do

algokit is a library only. It has no command-line program and does not read
problem input from standard input; call the functions from Python.

## Running the tests

```
pip install ".[test]"
pytest
```