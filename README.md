# dsakit

Classic data structures and algorithms as plain, dependency-free Python.
Functions take and return ordinary Python values (lists, tuples, dicts,
ints, strings), so they are easy to use in scripts, in teaching material or
as reference implementations.

## Installation

```
pip install dsakit
```

To run the test suite from a checkout:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | linear search, largest / second largest, `min_max`, prefix and suffix sums, sliding-window sums, Pascal's triangle, spiral matrix, stock profit, maximum subarray sum, two-sum indices, moving zeros, missing number |
| `dsakit.sorting` | `bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`, `quick_sort` (each returns a new list) |
| `dsakit.basics` | digit counts, factorials, trailing zeros of n!, GCD, LCM, primality tests, number palindromes |
| `dsakit.binary_search` | `binary_search`, `first_occurrence`, `last_occurrence`, counting helpers, `grid_search` |
| `dsakit.segment_tree` | `SegmentTree`, `max_segment_tree`, `min_segment_tree` for inclusive range queries |
| `dsakit.stacks` | `Stack`, `QueueUsingStacks`, `StackUsingQueues`, `is_balanced`, `check_redundant_parentheses`, `next_greater_elements`, `smallest_nine_zero_multiple` |
| `dsakit.recursion` | subsets, subsequences, permutations, subset sums, combination sum, Josephus, Towers of Hanoi, rope cutting |
| `dsakit.dynamic_programming` | memoised and tabulated Fibonacci, step jumps, frog jumps, `grid_paths` |
| `dsakit.linked_list` | `Node`, `LinkedList` with cycle detection, reversal, group reversal, rotation, merging, palindrome check |
| `dsakit.bst` | `BSTNode`, `BinarySearchTree` with `floor`, `ceil`, membership and validation; `is_bst` |
| `dsakit.binary_tree` | `TreeNode` and level-order, preorder, inorder and postorder traversals (recursive and iterative) |
| `dsakit.tree_properties` | height, diameter, balance, symmetry, identity, top/bottom/left/right views, vertical order, boundary traversal, root-to-node path |
| `dsakit.graph` | `Graph` (directed, weighted) and `Edge` |
| `dsakit.graph_search` | BFS, DFS, cycle checks, bipartiteness, unit-weight shortest paths, Dijkstra, Bellman–Ford, topological sort |
| `dsakit.graph_algorithms` | `DisjointSet`, articulation points, bridges, strongly connected components, Kruskal and Prim |
| `dsakit.graph_grid` | Floyd–Warshall on a weight matrix, island counting on a 0/1 grid |

## Examples

```python
from dsakit.arrays import max_stock_profit, pascal_triangle
from dsakit.sorting import merge_sort
from dsakit.binary_search import first_occurrence

max_stock_profit([2, 4, 5, 3, 7, 1, 8])   # 14
pascal_triangle(3)                        # [[1], [1, 1], [1, 2, 1]]
merge_sort([2, 4, 8, 3, 20, 1, -8])       # [-8, 1, 2, 3, 4, 8, 20]
first_occurrence([3, 6, 7, 7, 7, 8], 7)   # 2
```

```python
from dsakit.segment_tree import min_segment_tree

tree = min_segment_tree(range(10))
tree.query(3, 8)                          # 3
```

```python
from dsakit.linked_list import LinkedList

items = LinkedList([10, 20, 30, 40])
items.reverse()
list(items)                               # [40, 30, 20, 10]
```

```python
from dsakit.graph import Graph
from dsakit.graph_search import bfs

g = Graph()
for key in range(3):
    g.add_vertex(key)
g.add_edge(0, 1, 1)
g.add_edge(1, 2, 1)
bfs(g, 0)                                 # [0, 1, 2]
```

## Errors

Searches that may legitimately find nothing (for example `linear_search`,
`binary_search`, `first_occurrence`, `BinarySearchTree.ceil`) return `None`.
Input that an operation cannot work with raises an exception instead:
`ValueError` for bad values (an empty sequence where one is needed, a
duplicate edge, a negative cycle), `KeyError` for an unknown graph vertex and
`IndexError` for popping an empty stack or querying outside a segment tree.

## What it does not do

dsakit is a library only: it has no command-line tool, and all structures
live in memory with no saving or loading. Graphs are always directed; model
an undirected graph by adding each edge in both directions.