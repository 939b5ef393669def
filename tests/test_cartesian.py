import operator
import random

import pytest

from algokit.cartesian import build_cartesian_tree


def _subtrees(parents):
    children = {i: [] for i in range(len(parents))}
    for i, p in enumerate(parents):
        if p != -1:
            children[p].append(i)

    def collect(v):
        nodes = [v]
        for c in children[v]:
            nodes.extend(collect(c))
        return nodes

    return {v: sorted(collect(v)) for v in children}


def _random_values(seed, n):
    rng = random.Random(seed)
    return [rng.randint(0, 5) for _ in range(n)]


@pytest.mark.parametrize("seed", range(20))
def test_heap_and_contiguous_subtrees(seed):
    values = _random_values(seed, 30)
    parents = build_cartesian_tree(values)
    assert parents.count(-1) == 1
    for i, p in enumerate(parents):
        if p != -1:
            assert values[p] <= values[i]
    for v, nodes in _subtrees(parents).items():
        assert nodes == list(range(nodes[0], nodes[-1] + 1))
        assert nodes[0] <= v <= nodes[-1]


@pytest.mark.parametrize("seed", range(10))
@pytest.mark.parametrize(
    "comp,pick",
    [
        (operator.lt, lambda vs: vs.index(min(vs))),
        (operator.le, lambda vs: len(vs) - 1 - vs[::-1].index(min(vs))),
        (operator.gt, lambda vs: vs.index(max(vs))),
        (operator.ge, lambda vs: len(vs) - 1 - vs[::-1].index(max(vs))),
    ],
)
def test_root_choice(seed, comp, pick):
    values = _random_values(seed, 25)
    parents = build_cartesian_tree(values, comp)
    assert parents.index(-1) == pick(values)


def test_empty_and_single():
    assert build_cartesian_tree([]) == []
    assert build_cartesian_tree([7]) == [-1]


def test_equal_values_chain():
    values = [4, 4, 4]
    left = build_cartesian_tree(values, operator.lt)
    right = build_cartesian_tree(values, operator.le)
    assert left[0] == -1
    assert right[2] == -1