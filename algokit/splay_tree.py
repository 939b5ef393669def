"""Splay trees over user-defined nodes, ordered implicitly or by key.

Subclass ``SplayNode`` and override ``push_lazy`` (pass pending lazy updates
to the children) and ``update`` (recompute aggregates from the children,
calling ``SplayNode.update`` first). The functions below restructure the tree
so that the node they touch ends up at the root.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

Direction = Callable[["SplayNode"], int]
Predicate = Callable[["SplayNode"], bool]


class SplayNode:
    """A node with two children, a parent link, a reversal flag and a subtree size."""

    def __init__(self) -> None:
        self.children: list[Optional[SplayNode]] = [None, None]
        self.par: Optional[SplayNode] = None
        self.flip = False
        self.sz = 1

    def push_lazy(self) -> None:
        """Pass lazy updates other than reversal down to the children."""

    def update(self) -> None:
        """Recompute the subtree size and re-link the children to this node."""
        self.sz = 1
        for child in self.children:
            if child is not None:
                child.par = self
                self.sz += child.sz

    def reverse(self) -> None:
        """Reverse the order of this subtree, lazily for the descendants."""
        self.push_lazy()
        self.flip = not self.flip
        self.children.reverse()
        self.update()

    def downdate(self) -> None:
        """Push pending reversal and lazy updates to the children."""
        if self.flip:
            for child in self.children:
                if child is not None:
                    child.reverse()
            self.flip = False
        self.push_lazy()


def _left_size(v: SplayNode) -> int:
    left = v.children[0]
    return left.sz if left is not None else 0


def is_root(v: Optional[SplayNode]) -> bool:
    """Tell whether ``v`` is the root of its tree."""
    if v is None:
        return False
    p = v.par
    return p is None or (p.children[0] is not v and p.children[1] is not v)


def rotate(v: SplayNode) -> None:
    """Move ``v`` one level up, above its parent."""
    u = v.par
    if u is None:
        raise ValueError("cannot rotate a node without a parent")
    u.downdate()
    v.downdate()
    v.par = u.par
    g = v.par
    if g is not None:
        for side in (0, 1):
            if g.children[side] is u:
                g.children[side] = v
    if v is u.children[0]:
        u.children[0] = v.children[1]
        v.children[1] = u
    else:
        u.children[1] = v.children[0]
        v.children[0] = u
    u.update()
    v.update()


def splay(v: Optional[SplayNode]) -> None:
    """Rotate ``v`` up until it is the root of its tree."""
    if v is None:
        return
    while not is_root(v):
        u = v.par
        if not is_root(u):
            if (u.children[0] is v) ^ (u.par.children[0] is u):
                rotate(v)
            else:
                rotate(u)
        rotate(v)


def find(v: Optional[SplayNode], direction: Direction) -> tuple[Optional[SplayNode], int]:
    """Walk down from the root of ``v``'s tree guided by ``direction``.

    ``direction(node)`` returns -1 to go left, 1 to go right, 0 to stop. The
    last node visited is splayed and returned with the last direction.
    """
    if v is None:
        return None, 0
    splay(v)
    while True:
        v.downdate()
        d = direction(v)
        if d == 0:
            break
        u = v.children[0] if d == -1 else v.children[1]
        if u is None:
            break
        v = u
    splay(v)
    return v, d


def find_first(v: Optional[SplayNode]) -> Optional[SplayNode]:
    """Leftmost node of the tree, made root."""
    return find(v, lambda _: -1)[0]


def find_last(v: Optional[SplayNode]) -> Optional[SplayNode]:
    """Rightmost node of the tree, made root."""
    return find(v, lambda _: 1)[0]


def find_implicit(v: Optional[SplayNode], k: int) -> Optional[SplayNode]:
    """Node at 0-based position ``k`` in order, or None when out of range."""

    def direction(u: SplayNode) -> int:
        nonlocal k
        left = u.children[0]
        if left is not None:
            if left.sz > k:
                return -1
            k -= left.sz
        if k == 0:
            return 0
        k -= 1
        return 1

    node, d = find(v, direction)
    return node if d == 0 else None


def find_pos(v: SplayNode) -> int:
    """0-based position of ``v`` in its tree."""
    splay(v)
    return _left_size(v)


def find_root(v: SplayNode) -> SplayNode:
    splay(v)
    return v


def split(
    v: Optional[SplayNode], is_right: Predicate
) -> tuple[Optional[SplayNode], Optional[SplayNode]]:
    """Split into the nodes before and the nodes from the first one with ``is_right`` true.

    ``is_right`` must be monotone along the order: false, then true.
    """
    if v is None:
        return None, None
    v, d = find(v, lambda u: -1 if is_right(u) else 1)
    v.downdate()
    if d == -1:
        u = v.children[0]
        if u is None:
            return None, v
        v.children[0] = None
        u.par = v.par
        u = find_last(u)
        v.par = u
        v.update()
        return u, v
    u = v.children[1]
    if u is None:
        return v, None
    v.children[1] = None
    v.update()
    return v, u


def split_implicit(
    v: Optional[SplayNode],
    k: int,
    is_right: Optional[Callable[[SplayNode, int], bool]] = None,
) -> tuple[Optional[SplayNode], Optional[SplayNode]]:
    """Split off the first ``k`` nodes.

    With ``is_right(node, k)``, a node within the first ``k`` may still go to
    the right part when the predicate holds for it; ``k`` is then the remaining
    count measured from that node.
    """

    def goes_right(u: SplayNode) -> bool:
        nonlocal k
        hold_left = _left_size(u) + 1
        if k < hold_left and (is_right is None or is_right(u, k)):
            return True
        k -= hold_left
        return False

    return split(v, goes_right)


def merge(v: Optional[SplayNode], u: Optional[SplayNode]) -> Optional[SplayNode]:
    """Join two trees, all of ``v`` before all of ``u``, and return the new root."""
    if v is None:
        return u
    if u is None:
        return v
    v = find_last(v)
    splay(u)
    v.downdate()
    v.children[1] = u
    v.update()
    return v


def count_left(v: Optional[SplayNode], is_right: Predicate) -> int:
    """Number of nodes before the first one with ``is_right`` true."""
    if v is None:
        return 0
    u, d = find(v, lambda node: -1 if is_right(node) else 1)
    return _left_size(u) + (1 if d == 1 else 0)


def insert(root: Optional[SplayNode], v: SplayNode, is_right: Predicate) -> SplayNode:
    """Insert the tree ``v`` before the first node of ``root`` with ``is_right`` true."""
    left, right = split(root, is_right)
    return merge(left, merge(v, right))


def erase(v: SplayNode) -> Optional[SplayNode]:
    """Remove ``v`` from its tree and return the root of what remains."""
    splay(v)
    v.downdate()
    x, y = v.children
    v.children[0] = v.children[1] = None
    z = merge(x, y)
    if z is not None:
        z.par = v.par
    v.par = None
    v.downdate()
    v.update()
    return z


def next_node(v: SplayNode) -> Optional[SplayNode]:
    """The node after ``v`` in order, made root, or None for the last node."""
    splay(v)
    v.downdate()
    if v.children[1] is None:
        return None
    v = v.children[1]
    while True:
        v.downdate()
        if v.children[0] is None:
            break
        v = v.children[0]
    splay(v)
    return v


def previous_node(v: SplayNode) -> Optional[SplayNode]:
    """The node before ``v`` in order, made root, or None for the first node."""
    splay(v)
    v.downdate()
    if v.children[0] is None:
        return None
    v = v.children[0]
    while True:
        v.downdate()
        if v.children[1] is None:
            break
        v = v.children[1]
    splay(v)
    return v


def size(v: Optional[SplayNode]) -> int:
    """Number of nodes in the tree holding ``v``."""
    splay(v)
    return v.sz if v is not None else 0


def split_and_merge(
    v: Optional[SplayNode],
    left: int,
    do_node: Callable[..., Any],
    right: Optional[int] = None,
) -> Optional[SplayNode]:
    """Split out a part, hand the pieces to ``do_node`` and join them back.

    Without ``right`` the tree splits before position ``left`` and ``do_node``
    receives the two parts. With ``right`` it receives three parts, the middle
    one holding positions ``left .. right`` inclusive.
    """
    first, rest = split_implicit(v, left)
    if right is None:
        do_node(first, rest)
        return merge(first, rest)
    middle, last = split_implicit(rest, right - left + 1)
    do_node(first, middle, last)
    return merge(first, merge(middle, last))


def dfs_implicit(
    v: Optional[SplayNode], visit: Callable[[int, SplayNode], Any], offset: int = 0
) -> None:
    """Call ``visit(position, node)`` for every node in pre-order, without pushing lazies."""
    stack: list[tuple[Optional[SplayNode], int]] = [(v, offset)]
    while stack:
        node, base = stack.pop()
        if node is None:
            continue
        cur = base + _left_size(node)
        visit(cur, node)
        stack.append((node.children[1], cur + 1))
        stack.append((node.children[0], base))


def _build(nodes: Sequence[SplayNode], lo: int, hi: int) -> Optional[SplayNode]:
    if hi < lo:
        return None
    mid = (lo + hi) >> 1
    node = nodes[mid]
    node.children[0] = _build(nodes, lo, mid - 1)
    node.children[1] = _build(nodes, mid + 1, hi)
    node.update()
    return node


def build(nodes: Sequence[SplayNode]) -> int:
    """Link ``nodes`` into a balanced tree in list order; return the root's index."""
    _build(nodes, 0, len(nodes) - 1)
    return (len(nodes) - 1) >> 1