from itertools import pairwise

import pytest

from algokit.segtree import (
    CircularTree,
    InOrderTree,
    Node,
    Range,
    ceil_log_2,
    floor_log_2,
    next_pow_2,
)


def test_floor_log_2_of_zero_is_minus_one():
    assert floor_log_2(0) == -1
    assert ceil_log_2(0) == -1


@pytest.mark.parametrize("k", range(0, 20))
def test_log_helpers_on_powers(k):
    assert floor_log_2(1 << k) == k
    assert ceil_log_2(1 << k) == k
    if k > 0:
        assert ceil_log_2((1 << k) + 1) == k + 1
        assert floor_log_2((1 << k) + 1) == k


@pytest.mark.parametrize("n", range(1, 100))
def test_next_pow_2_bounds(n):
    p = next_pow_2(n)
    assert p & (p - 1) == 0
    assert n <= p < 2 * n or p == 1


def test_next_pow_2_rejects_zero():
    with pytest.raises(ValueError):
        next_pow_2(0)


def test_node_ancestors_orders():
    node = Node(45)
    up = list(node.ancestors_up())
    assert list(node.ancestors_down()) == up[::-1]
    assert list(node.self_and_ancestors()) == [node] + up
    assert up[-1] == Node(1)
    for child, par in pairwise([node] + up):
        assert child.parent() == par
        assert par.child(child.index & 1) == child


def test_node_int_conversion():
    node = Node(7)
    assert int(node.child(1)) == 15
    assert [10, 20][Node(1)] == 20
    assert not Node(0)


def _check_cover(tree, n):
    for lo in range(n + 1):
        for hi in range(lo, n + 1):
            rng = tree.range(lo, hi)
            nodes = list(rng.left_to_right())
            assert list(rng.right_to_left()) == nodes[::-1]
            assert sorted(rng.outside_in()) == sorted(nodes)
            assert [v for v, _ in rng.outside_in_with_side()] == list(rng.outside_in())
            if lo == hi:
                assert nodes == []
                continue
            bounds = [tree.node_bound(v) for v in nodes]
            assert bounds[0][0] == lo
            assert bounds[-1][1] == hi
            assert all(a[1] == b[0] for a, b in pairwise(bounds))


def _check_ancestors(tree, n):
    for lo in range(n + 1):
        for hi in range(lo, n + 1):
            rng = tree.range(lo, hi)
            needed = {a for v in rng.left_to_right() for a in v.ancestors_up()}
            assert needed <= set(rng.ancestors_down())
            assert needed <= set(rng.ancestors_up())


@pytest.mark.parametrize("n", range(1, 13))
def test_in_order_decomposition_covers_range(n):
    _check_cover(InOrderTree(n), n)


@pytest.mark.parametrize("n", range(1, 10))
def test_circular_decomposition_covers_range(n):
    _check_cover(CircularTree(n), n)


@pytest.mark.parametrize("n", range(1, 13))
def test_in_order_ancestors_cover_decomposition(n):
    _check_ancestors(InOrderTree(n), n)


@pytest.mark.parametrize("n", range(1, 10))
def test_circular_ancestors_cover_decomposition(n):
    _check_ancestors(CircularTree(n), n)


@pytest.mark.parametrize("tree_type", [InOrderTree, CircularTree])
@pytest.mark.parametrize("n", range(1, 13))
def test_leaves_round_trip(tree_type, n):
    tree = tree_type(n)
    assert len(tree) == 2 * n
    for i in range(n):
        leaf = tree.point(i)
        assert tree.is_leaf(leaf)
        assert tree.leaf_index(leaf) == i
        assert tree.node_bound(leaf) == (i, i + 1)
        assert tree.node_size(leaf) == 1


@pytest.mark.parametrize("n", range(2, 13))
def test_in_order_internal_nodes_split(n):
    tree = InOrderTree(n)
    assert tree.node_bound(Node(1)) == (0, n)
    for v in range(1, n):
        node = Node(v)
        assert not tree.is_leaf(node)
        lo, hi = tree.node_bound(node)
        left, right = tree.node_bound(node.child(0)), tree.node_bound(node.child(1))
        assert left[0] == lo and right[1] == hi
        assert tree.node_split(node) == left[1] == right[0]
        assert tree.node_size(node) == hi - lo


@pytest.mark.parametrize("n", [1, 2, 4, 8])
def test_circular_power_of_two_root(n):
    tree = CircularTree(n)
    assert tree.node_bound(Node(1)) == (0, n)
    assert tree.node_size(Node(1)) == n
    if n > 1:
        assert tree.node_split(Node(1)) == n // 2


@pytest.mark.parametrize("n", range(1, 12))
def test_descend_reaches_target(n):
    tree = InOrderTree(n)
    for target in range(n):

        def contains(node, t=target):
            lo, hi = tree.node_bound(node)
            return lo <= t < hi

        assert tree.descend(Node(1), contains) == target
        assert tree.descend_reverse(Node(1), contains) == target


def test_descend_fails_when_nothing_passes():
    tree = InOrderTree(6)
    assert tree.descend(Node(1), lambda node: False) is None
    assert tree.descend_reverse(Node(1), lambda node: False) is None


def test_find_first_and_last():
    tree = InOrderTree(11)
    rng = tree.range(2, 9)
    nodes = list(rng.left_to_right())
    assert rng.find_first(lambda node: True) == nodes[0]
    assert rng.find_last(lambda node: True) == nodes[-1]
    assert rng.find_first(lambda node: node == nodes[1]) == nodes[1]
    assert rng.find_first(lambda node: False) is None
    assert rng.find_last(lambda node: False) is None


def test_empty_tree():
    tree = InOrderTree(0)
    assert tree.range(0, 0) == Range()
    assert list(tree.range(0, 0).left_to_right()) == []
    assert len(tree) == 0


def test_node_bound_rejects_out_of_range_node():
    with pytest.raises(IndexError):
        InOrderTree(5).node_bound(Node(10))