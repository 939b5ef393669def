"""Binary lifting over a rooted forest given by parent links."""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

Visit = Callable[[int, int], Any]


class SparseAncestor:
    """Jump tables: ``table[i][u]`` is the ``2**i``-th ancestor of ``u`` or -1.

    The optional ``visit(i, u)`` callback is called before each jump of
    ``2**i`` steps from ``u``, so path aggregates can be combined from tables
    built alongside.
    """

    def __init__(self, parents: Sequence[int]) -> None:
        base = list(parents)
        n = len(base)
        if n == 0:
            raise ValueError("need at least one node")
        for p in base:
            if not -1 <= p < n:
                raise ValueError(f"parent {p} outside [-1, {n})")
        table = [base]
        for _ in range(1, n.bit_length()):
            prev = table[-1]
            table.append([-1 if p < 0 else prev[p] for p in prev])
        self.table = table

    def __len__(self) -> int:
        return len(self.table)

    def find_ancestor(self, u: int, depth: int, visit: Optional[Visit] = None) -> int:
        """The ancestor ``depth`` steps above ``u``, or -1 if there is none."""
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")
        for i in range(depth.bit_length()):
            if (depth >> i) & 1:
                if i >= len(self.table):
                    return -1
                if visit is not None:
                    visit(i, u)
                u = self.table[i][u]
                if u == -1:
                    return -1
        return u

    def find_lca(
        self, u: int, v: int, depth: Sequence[int], visit: Optional[Visit] = None
    ) -> int:
        """Lowest common ancestor of ``u`` and ``v``; -1 if they lie in different trees."""
        if depth[u] < depth[v]:
            u, v = v, u
        u = self.find_ancestor(u, depth[u] - depth[v], visit)
        if u == -1:
            raise ValueError("depths do not match the parent links")
        if u == v:
            return u
        top = min(depth[v].bit_length(), len(self.table))
        for i in range(top - 1, -1, -1):
            row = self.table[i]
            if row[u] != row[v]:
                if visit is not None:
                    visit(i, u)
                    visit(i, v)
                u, v = row[u], row[v]
        if visit is not None:
            visit(0, u)
            visit(0, v)
        return self.table[0][u]