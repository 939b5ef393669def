# algokit

A collection of algorithms and data structures aimed at contest-style
programming, written in plain Python. It is a library only: there is no
command to run.

## Installation

```
pip install .
```

Install the extra to run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.arith` | `floor_div`, `ceil_div`: integer division rounding down or up |
| `algokit.modnum` | `ModNum` integers modulo a fixed modulus, `mod_inverse`, `bin_pow` |
| `algokit.combinatorics` | `Combinatorics` tables: factorials, binomials, permutations, Catalan counts modulo a prime |
| `algokit.point` | `Point` 2D vectors with dot and cross products, complex-style rotation, angle ordering; free `dot`, `cross`, `cross3` |
| `algokit.hull` | `convex_hull`, `convex_inclusion` (point in convex polygon in O(log n)), `minkowski_sum` |
| `algokit.halfplane` | `HalfPlane`, `half_plane_intersect` |
| `algokit.segtree` | Index arithmetic for bottom-up segment trees: `Node`, `Range`, `InOrderTree`, `CircularTree`, `floor_log_2`, `ceil_log_2`, `next_pow_2` |
| `algokit.cartesian` | `build_cartesian_tree` (parent array via a monotonic stack) |
| `algokit.order_statistic` | `OrderStatisticSet`, `OrderStatisticMap` with rank (`order_of_key`) and select (`find_by_order`) |
| `algokit.zfunction` | `z_function`, `period`, `count_prefix` |
| `algokit.disjoint_set` | `DisjointSet` (union by size, optional path callbacks), `BipartiteGraph`, `AncestorSet` |
| `algokit.sparse_ancestor` | `SparseAncestor` binary lifting: k-th ancestor and lowest common ancestor |
| `algokit.tensor` | `Tensor` dense row-major arrays and `TensorView` strided views |
| `algokit.splay_tree` | `SplayNode` base class and splay-tree operations: `splay`, `find`, `find_implicit`, `split`, `split_implicit`, `merge`, `insert`, `erase`, `next_node`, `previous_node`, `split_and_merge`, `build`, ... |
| `algokit.hashing` | `HashNum` (modulo 2**64 - 2**32 + 1), `PairNum`, `BasePower`, `PrefixHash`, `hash_string`, `find_lcp`, `compare`, `merge_hash` |

The only third-party dependency is `sortedcontainers`, used by
`algokit.order_statistic`.

## Examples

Rounding division and modular arithmetic:

```python
from algokit.arith import floor_div, ceil_div
from algokit.modnum import ModNum

floor_div(-7, 2)               # -4
ceil_div(-7, 2)                # -3
ModNum(3, 7).inverse()         # ModNum(5, 7)
```

Binomials modulo a prime:

```python
from algokit.combinatorics import Combinatorics

comb = Combinatorics(100, 1_000_000_007)
comb.choose(10, 3)             # 120
comb.catalan(3)                # 5
```

Convex hull:

```python
from algokit.point import Point
from algokit.hull import convex_hull

pts = [Point(0, 0), Point(2, 0), Point(1, 1), Point(2, 2), Point(0, 2)]
hull, kinds = convex_hull(pts)  # order defaults to the points sorted by (x, y)
kinds[2]                        # 6 == len(pts) + 1: the point is strictly inside
```

`hull` lists the indices of the hull counterclockwise; `kinds[i]` is `i` for a
hull vertex, the index of an identical vertex for a duplicate, `len(points)`
for a point lying only on an edge and `len(points) + 1` otherwise.

Disjoint sets and binary lifting:

```python
from algokit.disjoint_set import DisjointSet
from algokit.sparse_ancestor import SparseAncestor

ds = DisjointSet(5)
ds.merge(0, 1)                 # True
ds.size_of(1)                  # 2
ds.components                  # 4

tree = SparseAncestor([-1, 0, 0, 1])
tree.find_ancestor(3, 2)       # 0
tree.find_lca(3, 2, [0, 1, 1, 2])   # 0
```

Rank and select:

```python
from algokit.order_statistic import OrderStatisticSet

s = OrderStatisticSet([5, 1, 3])
s.find_by_order(1)             # 3
s.order_of_key(4)              # 2
```

Strings:

```python
from algokit.zfunction import z_function, period
from algokit.hashing import BasePower, HashNum, PrefixHash, find_lcp

z = z_function("abcabcabc")
period(z)                      # 3

powers = BasePower(HashNum(131))
h = PrefixHash("abcab", powers)
h.range_hash(0, 2) == h.range_hash(3, 5)   # True
find_lcp(h, 0, h, 3)           # 2
```

Tensors and Cartesian trees:

```python
from algokit.tensor import Tensor
from algokit.cartesian import build_cartesian_tree

t = Tensor((2, 3))
t[1, 2] = 7
t.tolist()                     # [[0, 0, 0], [0, 0, 7]]

build_cartesian_tree([3, 1, 2])   # [1, -1, 1]
```

## What it does not do

The package has no primality testing or prime sieves, no Euler totient
functions, no network-flow or bipartite-matching algorithms, no Hilbert-curve
ordering for offline range queries and no debug-printing or timing helpers.
`SplayNode` keeps only subset size and reversal; further aggregates and lazy
updates are added by subclassing it.