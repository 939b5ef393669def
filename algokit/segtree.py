"""Index arithmetic for bottom-up segment trees stored in ``2 * n`` slots.

Nodes are numbered from 1 (the root) and node ``v`` has children ``2v`` and
``2v + 1``. A range of the array decomposes into O(log n) nodes, and the
iterators here walk those nodes, or their ancestors, in the orders needed for
point updates, range queries and lazy propagation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator


def floor_log_2(a: int) -> int:
    """Index of the highest set bit of ``a``, or -1 when ``a`` is 0."""
    if a < 0:
        raise ValueError(f"expected a non-negative integer, got {a}")
    return a.bit_length() - 1


def ceil_log_2(a: int) -> int:
    """Smallest ``k`` with ``2**k >= a``, or -1 when ``a`` is 0."""
    return floor_log_2((a << 1) - 1) if a else -1


def next_pow_2(a: int) -> int:
    """Smallest power of two not less than ``a``; ``a`` must be positive."""
    if a < 1:
        raise ValueError(f"expected a positive integer, got {a}")
    return 1 << ceil_log_2(a)


def _ctz(v: int) -> int:
    return (v & -v).bit_length() - 1


def _low_mask(depth: int) -> int:
    return (1 << depth) - 1 if depth >= 0 else 0


@dataclass(frozen=True, order=True, slots=True)
class Node:
    """A node of the tree, identified by its slot number."""

    index: int

    def __int__(self) -> int:
        return self.index

    def __index__(self) -> int:
        return self.index

    def __bool__(self) -> bool:
        return self.index != 0

    def child(self, z: bool | int) -> Node:
        """Left child for ``z`` false, right child for ``z`` true."""
        return Node((self.index << 1) | int(bool(z)))

    def parent(self) -> Node:
        return Node(self.index >> 1)

    def self_and_ancestors(self) -> Iterator[Node]:
        """This node, then each ancestor up to the root."""
        v = self.index
        while v > 0:
            yield Node(v)
            v >>= 1

    def ancestors_down(self) -> Iterator[Node]:
        """Strict ancestors from the root down to the parent."""
        a = self.index
        for level in range(floor_log_2(a), 0, -1):
            yield Node(a >> level)

    def ancestors_up(self) -> Iterator[Node]:
        """Strict ancestors from the parent up to the root."""
        v = self.index >> 1
        while v > 0:
            yield Node(v)
            v >>= 1


@dataclass(frozen=True, slots=True)
class Range:
    """A half-open run of slots ``[lo, hi)`` on one level of the tree."""

    lo: int = 1
    hi: int = 1

    def outside_in(self) -> Iterator[Node]:
        """Decomposed nodes, alternating from the two ends towards the middle."""
        for node, _ in self.outside_in_with_side():
            yield node

    def outside_in_with_side(self) -> Iterator[tuple[Node, bool]]:
        """Like ``outside_in``, paired with True for nodes taken from the right end."""
        x, y = self.lo, self.hi
        while x < y:
            if x & 1:
                yield Node(x), False
                x += 1
            if y & 1:
                y -= 1
                yield Node(y), True
            x >>= 1
            y >>= 1

    def _mask(self) -> int:
        return _low_mask(floor_log_2((self.lo - 1) ^ self.hi))

    def left_to_right(self) -> Iterator[Node]:
        """Decomposed nodes in array order."""
        a, b = self.lo, self.hi
        mask = self._mask()
        v = (-a) & mask
        while v:
            yield Node(((a - 1) >> _ctz(v)) + 1)
            v &= v - 1
        v = b & mask
        while v:
            i = floor_log_2(v)
            yield Node((b >> i) - 1)
            v ^= 1 << i

    def right_to_left(self) -> Iterator[Node]:
        """Decomposed nodes in reverse array order."""
        a, b = self.lo, self.hi
        mask = self._mask()
        v = b & mask
        while v:
            yield Node((b >> _ctz(v)) - 1)
            v &= v - 1
        v = (-a) & mask
        while v:
            i = floor_log_2(v)
            yield Node(((a - 1) >> i) + 1)
            v ^= 1 << i

    def find_first(self, pred: Callable[[Node], bool]) -> Node | None:
        """First decomposed node, left to right, satisfying ``pred``."""
        return next((node for node in self.left_to_right() if pred(node)), None)

    def find_last(self, pred: Callable[[Node], bool]) -> Node | None:
        """First decomposed node, right to left, satisfying ``pred``."""
        return next((node for node in self.right_to_left() if pred(node)), None)

    def _anchors(self) -> tuple[int, int, int, int, int]:
        x, y = self.lo, self.hi
        if (x ^ y) > x:
            x <<= 1
            x, y = y, x
        return x, y, _ctz(x), _ctz(y), floor_log_2((x - 1) ^ y)

    def ancestors_down(self) -> Iterator[Node]:
        """Ancestors of the decomposed nodes, each after its own ancestors."""
        x, y, dx, dy, depth = self._anchors()
        for i in range(floor_log_2(x), dx, -1):
            yield Node(x >> i)
        for i in range(depth, dy, -1):
            yield Node(y >> i)

    def ancestors_up(self) -> Iterator[Node]:
        """Ancestors of the decomposed nodes, each after its descendants."""
        x, y, dx, dy, depth = self._anchors()
        for i in range(dx + 1, depth + 1):
            yield Node(x >> i)
        v = y >> (dy + 1)
        while v:
            yield Node(v)
            v >>= 1


class InOrderTree:
    """Segment tree layout over ``n`` leaves whose nodes cover contiguous ranges."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self.n = n
        self.s = next_pow_2(n) if n else 0

    def __len__(self) -> int:
        return self.n << 1

    def _check(self, node: Node) -> int:
        a = int(node)
        if not 1 <= a < (self.n << 1):
            raise IndexError(f"node {a} outside [1, {self.n << 1})")
        return a

    def _to_index(self, x: int) -> int:
        return ((x >> 1) + self.n if x >= (self.n << 1) else x) - self.s

    def is_leaf(self, node: Node) -> bool:
        return int(node) >= self.n

    def point(self, index: int) -> Node:
        """Leaf node holding array element ``index``."""
        a = index + self.s
        return Node(a - self.n if a >= (self.n << 1) else a)

    def range(self, a: int, b: int) -> Range:
        """Slots spanning the array range ``[a, b)``."""
        if self.n == 0:
            return Range()
        a += self.s
        b += self.s
        two_n = self.n << 1
        if a >= two_n:
            a = (a - self.n) << 1
        if b >= two_n:
            b = (b - self.n) << 1
        return Range(a, b)

    def leaf_index(self, node: Node) -> int:
        """Array index held by a leaf node."""
        a = int(node)
        return (a + self.n if a < self.s else a) - self.s

    def node_bound(self, node: Node) -> tuple[int, int]:
        """Array range ``[lo, hi)`` covered by ``node``."""
        a = self._check(node)
        shift = ((self.n << 1) - 1).bit_length() - a.bit_length()
        return self._to_index(a << shift), self._to_index((a + 1) << shift)

    def node_split(self, node: Node) -> int:
        """Boundary between the ranges of the two children of ``node``."""
        a = self._check(node)
        right = (a << 1) + 1
        shift = ((self.n << 1) - 1).bit_length() - right.bit_length()
        return self._to_index(right << shift)

    def node_size(self, node: Node) -> int:
        lo, hi = self.node_bound(node)
        return hi - lo

    def descend(self, node: Node, check: Callable[[Node], bool]) -> int | None:
        """Walk down from ``node``, preferring the left child that passes ``check``.

        Returns the array index of the leaf reached, or None when neither child
        of some node passes.
        """
        a = int(node)
        while a < self.n:
            if check(Node(a << 1)):
                a <<= 1
            elif check(Node((a << 1) + 1)):
                a = (a << 1) + 1
            else:
                return None
        return self.leaf_index(Node(a))

    def descend_reverse(self, node: Node, check: Callable[[Node], bool]) -> int | None:
        """Like ``descend`` but trying the right child first."""
        a = int(node)
        while a < self.n:
            if check(Node((a << 1) + 1)):
                a = (a << 1) + 1
            elif check(Node(a << 1)):
                a <<= 1
            else:
                return None
        return self.leaf_index(Node(a))


class CircularTree:
    """Segment tree layout with leaf ``i`` stored in slot ``n + i``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"size must be non-negative, got {n}")
        self.n = n

    def __len__(self) -> int:
        return self.n << 1

    def is_leaf(self, node: Node) -> bool:
        return int(node) >= self.n

    def point(self, index: int) -> Node:
        return Node(self.n + index)

    def range(self, a: int, b: int) -> Range:
        if self.n == 0:
            return Range()
        return Range(self.n + a, self.n + b)

    def leaf_index(self, node: Node) -> int:
        return int(node) - self.n

    def node_bound(self, node: Node) -> tuple[int, int]:
        """Range ``(lo, hi)`` of ``node`` with ``0 <= lo < n`` and ``1 <= hi <= n``.

        For a node whose leaves wrap around the end of the array ``hi <= lo``.
        """
        a = int(node)
        two_n = self.n << 1
        if not 1 <= a < two_n:
            raise IndexError(f"node {a} outside [1, {two_n})")
        shift = (two_n - 1).bit_length() - a.bit_length()
        x, y = a << shift, (a + 1) << shift
        lo = (x >> 1 if x >= two_n else x) - self.n
        hi = (y >> 1 if y > two_n else y) - self.n
        return lo, hi

    def node_split(self, node: Node) -> int:
        """Boundary between the children of ``node``, in ``[1, n]``."""
        return self.node_bound(node.child(0))[1]

    def node_size(self, node: Node) -> int:
        lo, hi = self.node_bound(node)
        r = hi - lo
        return r if r > 0 else r + self.n