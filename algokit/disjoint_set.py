"""Disjoint-set forests: union by size, bipartiteness tracking, fixed-leader sets."""

from __future__ import annotations

from typing import Any, Callable, Optional

PathCallback = Callable[[int, int], Any]
MergeCallback = Callable[[int, int], Any]


class DisjointSet:
    """Union-find over ``0 .. n-1`` with union by size.

    ``find`` and ``merge`` accept ``on_path(parent, child)``, called for every
    edge on the way to the root, root side first, so that values kept relative
    to a parent (distances, parities) can be carried along. ``on_merge(a, b)``
    is called with both roots just before root ``b`` is hung under root ``a``.
    """

    def __init__(self, n: int, path_compression: bool = True) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._data = [-1] * n
        self.components = n
        self.path_compression = path_compression

    def __len__(self) -> int:
        return len(self._data)

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._data):
            raise IndexError(f"element {x} outside [0, {len(self._data)})")

    def find(self, x: int, on_path: Optional[PathCallback] = None) -> int:
        """Return the root of the set holding ``x``."""
        self._check(x)
        data = self._data
        path = []
        while data[x] >= 0:
            path.append(x)
            x = data[x]
        root = x
        for child in reversed(path):
            if on_path is not None:
                on_path(data[child], child)
            if self.path_compression:
                data[child] = root
        return root

    def size_of(self, x: int) -> int:
        """Number of elements in the set holding ``x``."""
        return -self._data[self.find(x)]

    def _link(self, a: int, b: int) -> None:
        self._data[a] += self._data[b]
        self._data[b] = a
        self.components -= 1

    def merge(
        self,
        a: int,
        b: int,
        on_merge: Optional[MergeCallback] = None,
        on_path: Optional[PathCallback] = None,
    ) -> bool:
        """Join the sets of ``a`` and ``b``; return False if they were already one."""
        a = self.find(a, on_path)
        b = self.find(b, on_path)
        if a == b:
            return False
        if self._data[a] > self._data[b]:
            a, b = b, a
        if on_merge is not None:
            on_merge(a, b)
        self._link(a, b)
        return True


class BipartiteGraph(DisjointSet):
    """Connected components of a growing graph, each known to be bipartite or not."""

    def __init__(self, n: int) -> None:
        super().__init__(n, path_compression=True)
        self._ok = [True] * n
        # Colour of each vertex relative to its parent; roots always hold 0.
        self._parity = [0] * n

    def find(self, x: int, on_path: Optional[PathCallback] = None) -> int:
        def relabel(parent: int, child: int) -> None:
            self._parity[child] ^= self._parity[parent]
            if on_path is not None:
                on_path(parent, child)

        return super().find(x, relabel)

    def is_same(self, x: int, y: int) -> bool:
        """Tell whether ``x`` and ``y`` lie in one component."""
        return self.find(x) == self.find(y)

    def add_edge(self, a: int, b: int) -> None:
        """Add the edge ``a - b``, noting an odd cycle if it closes one."""
        ra = self.find(a)
        rb = self.find(b)
        pa, pb = self._parity[a], self._parity[b]
        if ra == rb:
            if pa == pb:
                self._ok[ra] = False
            return
        if self._data[ra] > self._data[rb]:
            ra, rb = rb, ra
        self._parity[rb] = pa ^ pb ^ 1
        self._ok[ra] = self._ok[ra] and self._ok[rb]
        self._link(ra, rb)

    def is_bipartite(self, v: int) -> bool:
        """Tell whether the component of ``v`` has no odd cycle."""
        return self._ok[self.find(v)]


class AncestorSet:
    """Union-find whose merges always keep the first argument's leader."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self._data = list(range(n))
        self.components = n

    def __len__(self) -> int:
        return len(self._data)

    def find(self, x: int, on_path: Optional[PathCallback] = None) -> int:
        """Return the leader of the set holding ``x``, compressing the path."""
        if not 0 <= x < len(self._data):
            raise IndexError(f"element {x} outside [0, {len(self._data)})")
        data = self._data
        path = []
        while data[x] != x:
            path.append(x)
            x = data[x]
        for child in reversed(path):
            if on_path is not None:
                on_path(data[child], child)
            data[child] = x
        return x

    def merge(
        self,
        a: int,
        b: int,
        on_merge: Optional[MergeCallback] = None,
        on_path: Optional[PathCallback] = None,
    ) -> bool:
        """Put the set of ``b`` under the leader of ``a``; False if already joined."""
        a = self.find(a, on_path)
        b = self.find(b, on_path)
        if a == b:
            return False
        if on_merge is not None:
            on_merge(a, b)
        self._data[b] = a
        self.components -= 1
        return True