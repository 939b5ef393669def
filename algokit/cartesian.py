"""Cartesian trees built with a monotonic stack."""

from __future__ import annotations

import operator
from typing import Any, Callable, Sequence


def build_cartesian_tree(
    values: Sequence[Any], comp: Callable[[Any, Any], bool] = operator.lt
) -> list[int]:
    """Return the parent index of every element, -1 for the root.

    ``comp`` chooses the tree: ``lt`` gives the leftmost-minimum tree, ``le``
    the rightmost-minimum tree, ``gt`` and ``ge`` the maximum trees.
    """
    parents = [-1] * len(values)
    stack: list[int] = []
    for i, value in enumerate(values):
        last = -1
        while stack and comp(value, values[stack[-1]]):
            last = stack.pop()
        if last != -1:
            parents[last] = i
        if stack:
            parents[i] = stack[-1]
        stack.append(i)
    return parents