# algokit

Classic algorithms and data structures in plain Python, using only the
standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `insertion_sort`, `merge_sort`, `radix_sort` (unsigned 32-bit integers only, `ValueError` otherwise), `check_order` (raises `ValueError` on the first out-of-order pair) |
| `algokit.arrays` | `remove_duplicates` (keeps first occurrences), `max_subarray` (Kadane's algorithm, returns a `Subarray` of inclusive `begin`, `end` and `total`) |
| `algokit.strings` | Knuth–Morris–Pratt (`kmp_table`, `kmp_search`), longest common subsequence (`lcs_length`, `lcs_backtrack`, `lcs`), 32-bit string hashes (`hash_string`, `hash_fnv1a`) |
| `algokit.queens` | Eight queens: `solve_eight_queens` yields all solutions as column tuples, `format_board` renders one as rows of `0`/`1` |
| `algokit.fenwick` | `FenwickTree` over positions `1..size` with `update`, `prefix_sum` and `range_sum` |
| `algokit.trie` | `Trie` over the letters a–z (input folded to lower case) with `add`, `count` and `count_prefix` |
| `algokit.disjoint_set` | `DisjointSet` with `make_set`, `find`, `union`, `link` and `rank` (union by rank, path compression) |
| `algokit.bitset` | Fixed-size `BitSet` with `set`, `unset` and `test`; out-of-range positions are ignored |
| `algokit.heap` | Bounded binary min-heap `Heap` of `HeapItem(key, data)`, with `push`, `pop`, `remove` and `decrease_key` |
| `algokit.priority_queue` | `PriorityQueue` kept in ascending priority; a value queued with a priority equal to existing ones goes ahead of them |
| `algokit.array2d` | Fixed-shape `Array2D` indexed as `grid[row, col]` |
| `algokit.sha1` | Incremental `SHA1` hasher with `update`, `words`, `digest` and `hexdigest` |
| `algokit.avl` | `AVLTree` that keeps repeated values, with GraphViz export |
| `algokit.rbtree` | Red-black tree core (`RBTreeBase`, `RBNode`, `Color`) with `check_invariants` |
| `algokit.dos_tree` | Order-statistic tree `DosTree`: `index(i)` finds the i-th smallest key |
| `algokit.interval_tree` | `IntervalTree` of closed ranges; `lookup` returns one overlapping range |
| `algokit.graph`, `algokit.directed_graph` | Abstract adjacency-list `Graph` and the weighted `DirectedGraph` |
| `algokit.dijkstra` | `dijkstra` predecessor table from one source, and `shortest_path` to read a path from it |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Sorting:

```python
from algokit.sorting import merge_sort, radix_sort

merge_sort([5, 2, 9, 1])           # [1, 2, 5, 9]
radix_sort([300, 7, 65536, 42])    # [7, 42, 300, 65536]
```

String search and subsequences:

```python
from algokit.strings import kmp_search, lcs

kmp_search("ABC ABCDAB ABCDABCDABDE", "ABCDABD")   # 15
lcs("XMJYAUZ", "MZJAWXU")                           # ['M', 'J', 'A', 'U']
```

Counting words with a trie:

```python
from algokit.trie import Trie

trie = Trie()
for word in ["sap", "sat", "sad", "rat", "ram", "rag", "rap", "sat"]:
    trie.add(word)

trie.count("sat")         # 2
trie.count_prefix("ra")   # 4
```

Prefix sums:

```python
from algokit.fenwick import FenwickTree

tree = FenwickTree(10)
tree.update(3, 5)
tree.update(7, 2)
tree.range_sum(1, 7)      # 7
```

A balanced search tree:

```python
from algokit.avl import AVLTree

tree = AVLTree()
for value in [10, 20, 30, 40, 50]:
    tree.insert(value)

30 in tree                # True
tree.erase(30)            # True
print(tree.to_graphviz("example"))
```

Order statistics and intervals:

```python
from algokit.dos_tree import DosTree
from algokit.interval_tree import IntervalTree

ranks = DosTree()
for key in [40, 10, 30, 20]:
    ranks.insert(key)
ranks.index(2).key        # 20

ranges = IntervalTree()
ranges.insert(1, 5)
ranges.insert(10, 15)
ranges.lookup(12, 20)     # the node holding [10, 15]
```

Shortest paths in a directed graph:

```python
from algokit.directed_graph import DirectedGraph
from algokit.dijkstra import dijkstra, shortest_path

graph = DirectedGraph()
for vertex in range(4):
    graph.add_vertex(vertex)
graph.add_edge(0, 1, 4)
graph.add_edge(0, 2, 1)
graph.add_edge(2, 1, 2)
graph.add_edge(1, 3, 5)

previous = dijkstra(graph, 0)
shortest_path(previous, 3)   # [0, 2, 1, 3]
print(graph.to_dot())
```

SHA-1 hashing:

```python
from algokit.sha1 import SHA1

hasher = SHA1(b"abc")
hasher.hexdigest()   # 'a9993e364706816aba3e25717850c26c9cd0d89d'
```

After the digest has been read, further `update` calls raise `SHA1Error`
until `reset()` is called.

## Command line

Installing the package provides one command:

```
algokit-sha1 [TEXT ...]
```

For each argument it prints `sha TEXT --> ` followed by the five digest
words in hexadecimal, each without leading zeros. With no arguments it
hashes the sample text `"abc\n"`.

## Limits

- The only concrete graph is `DirectedGraph`; there is no undirected
  graph class, and no graph search, spanning tree or flow algorithms.
- Everything lives in memory; nothing is saved to disk.