# contestkit

Ready-made data structures and algorithms for competitive programming,
written as plain Python classes and functions.

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

Range queries
- `contestkit.seg_tree.SegmentTree`: point assignment, range sum over 1-based positions.
- `contestkit.lazy_propagation.LazySegmentTree`: range assignment, range minimum.
- `contestkit.sparse_table.SparseTable`: static range minimum, O(1) or O(log n) queries.
- `contestkit.sqrt_decomp.SqrtDecomposition`: block-based range minimum with point updates.
- `contestkit.fenwick.FenwickTree`, `FenwickTree2D`: point add, prefix and rectangle sums.
- `contestkit.prefix_sum.PrefixSum2D`: rectangle sums over a fixed matrix.
- `contestkit.partial_sum.PartialSum2D`: how many rectangles cover each cell.
- `contestkit.pst.PersistentSegmentTree`: k-th smallest value over a range of versions.
- `contestkit.mo.process_queries`: offline range queries in Mo's order, driven by
  your own `add`, `remove` and `answer` callbacks.

Numbers
- `contestkit.power_inverse`: `fast_power`, `mod_inverse` and `PowerInverse`
  (factorial-based `ncr` / `npr` modulo a prime).
- `contestkit.modint.ModInt`: residues modulo a fixed modulus, mixing with plain `int`.
- `contestkit.bigint.BigInt`: non-negative integers stored in base-10**9 limbs,
  with `+`, `-`, `*`, and `//` / `%` by a small `int`.

Graphs and trees
- `contestkit.graph.Graph`: DFS, BFS distance, cycle check, bipartite check,
  leaf peeling (`topology`) and parent paths.
- `contestkit.dsu.DSU`: disjoint set union by size with path compression.
- `contestkit.dijkstra.Dijkstra`: shortest paths; `min_cost` gives `None` when unreachable.
- `contestkit.floyd.Floyd`: all-pairs shortest paths.
- `contestkit.lca.LCA`: binary lifting for ancestors, LCA and path weights.
- `contestkit.hld.HLD`: heavy-light decomposition into position ranges.

Strings
- `contestkit.trie.Trie` with `Alphabet` (lowercase, uppercase or digits).
- `contestkit.binary_trie.BinaryTrie`: multiset of fixed-width integers.
- `contestkit.strings`: `prefix_function`, `kmp_search`, `longest_palindrome`.

Geometry and misc
- `contestkit.convex_hull`: `convex_hull` of complex-number points, plus `cross` and `dcmp`.
- `contestkit.convex_hull_trick.ConvexHullTrick` and `Line`: minimum of lines
  inserted with strictly decreasing slopes.
- `contestkit.kadane`: `min_subarray_sum`, `max_subarray_sum`.
- `contestkit.monotonic_stacks`: `next_greater`, `previous_greater`,
  `next_smaller`, `previous_smaller` (indices; `len(nums)` or `-1` when missing).
- `contestkit.coordinate_compression.CoordinateCompressor`: 1-based ranks of values.
- `contestkit.ordered_multiset.OrderedMultiset`: sorted multiset with index and
  rank queries, ascending or descending.
- `contestkit.ternary_search`: `ternary_search_int`, `ternary_search_float`
  for the minimum of a unimodal function.

## Example

```python
from contestkit.seg_tree import SegmentTree
from contestkit.dsu import DSU

tree = SegmentTree(5, [1, 2, 3, 4, 5])
print(tree.query(2, 4))   # 9

sets = DSU(4)
sets.union(1, 2)
print(sets.same(1, 2), sets.size(2))   # True 2
```

## What it does not do

contestkit is a library only: it has no command-line program and reads no
input on its own. Build each structure from Python values and call its
methods. It has no prime sieve, no minimum spanning tree, no 2D point class
and no centroid decomposition.