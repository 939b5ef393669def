"""Convex hulls, point-in-convex-polygon queries and Minkowski sums."""

from __future__ import annotations

from itertools import pairwise
from typing import Sequence

from .point import Point, cross, cross3


def convex_hull(
    points: Sequence[Point], order: Sequence[int] | None = None
) -> tuple[list[int], list[int]]:
    """Compute the convex hull of ``points``.

    ``order`` lists the point indices sorted by coordinates; when omitted the
    indices are sorted stably by point. Returns ``(hull, kind)``: ``hull`` holds
    the indices of the hull in counterclockwise order, collinear boundary points
    included and duplicates left out; ``kind[i]`` is ``i`` for a hull vertex, the
    index of an identical hull vertex for a duplicate, ``len(points)`` for a
    point only on an edge and ``len(points) + 1`` for any other point.
    """
    n = len(points)
    if n == 0:
        return [], []
    if order is None:
        order = sorted(range(n), key=points.__getitem__)
    if len(order) != n:
        raise ValueError("order must list every point index exactly once")
    outside = n + 1
    kind = [0] * n
    kind[order[0]] = outside
    for prv, cur in pairwise(order):
        if points[cur] == points[prv]:
            kind[cur] = prv if kind[prv] == outside else kind[prv]
        else:
            kind[cur] = outside

    hull: list[int] = []

    def extend(candidates, floor: int) -> None:
        for p in candidates:
            if kind[p] != outside:
                continue
            while len(hull) > floor + 1:
                c = cross3(points[hull[-2]], points[hull[-1]], points[p])
                if c < 0:
                    kind[hull.pop()] = outside
                    continue
                if c == 0:
                    # On an edge of the polygon but not one of its vertices.
                    kind[hull[-1]] = n
                break
            kind[p] = p
            hull.append(p)

    extend(reversed(order), 0)
    kind[hull[-1]] = outside
    kind[hull[0]] = outside
    if len(hull) > 1:
        hull.pop()
    start = len(hull)
    extend(order, start)
    if len(hull) > start + 1:
        hull.pop()
    if len(hull) == 2 and hull[0] == hull[1]:
        hull.pop()
    for i in range(n):
        r = kind[i]
        if r < n and r != i:
            kind[i] = kind[r]
    return hull, kind


def convex_inclusion(p: Point, root: int, points: Sequence[Point]) -> tuple[int, int]:
    """Locate ``p`` against a counterclockwise convex polygon in O(log n).

    Returns ``(inclusion, idx)`` with ``inclusion`` -1 inside, 0 on the boundary
    and 1 outside. The triangle ``points[root], points[idx], points[idx + 1]`` is
    the one the search ends in; on the boundary ``p`` lies on the segment
    ``[points[idx], points[idx + 1])``.
    """
    n = len(points)
    if n < 3:
        raise ValueError(f"need at least 3 points, got {n}")
    if not 0 <= root < n:
        raise IndexError(f"root {root} outside [0, {n})")

    def wrap(v: int) -> int:
        return v - n if v >= n else v

    lo = root + 1
    hi = lo + n - 2
    a = cross3(points[root], points[wrap(lo)], p)
    if a < 0:
        return 1, root
    wrapped_hi = wrap(hi)
    b = cross3(points[root], points[wrapped_hi], p)
    if b > 0:
        return 1, wrapped_hi
    while lo + 1 < hi:
        mid = (lo + hi) >> 1
        if cross3(points[root], points[wrap(mid)], p) >= 0:
            lo = mid
        else:
            hi = mid
    wrapped_lo, wrapped_hi = wrap(lo), wrap(hi)
    c = cross3(points[wrapped_lo], points[wrapped_hi], p)
    if c < 0:
        return 1, wrapped_lo
    if c == 0:
        return 0, wrapped_lo
    if lo == root + 1 and a == 0:
        return 0, root
    if hi == root + n - 1 and b == 0:
        return 0, wrapped_hi
    return -1, wrapped_lo


def minkowski_sum(a: Sequence[Point], b: Sequence[Point], i: int, j: int) -> list[Point]:
    """Minkowski sum of two counterclockwise convex polygons.

    ``a[i]`` and ``b[j]`` must be extreme in the same sense (for instance both
    bottom-leftmost); the result starts at ``a[i] + b[j]``.
    """
    n, m = len(a), len(b)
    if not 0 <= i < n:
        raise IndexError(f"i={i} outside [0, {n})")
    if not 0 <= j < m:
        raise IndexError(f"j={j} outside [0, {m})")
    result: list[Point] = []
    steps_a = steps_b = 0
    while steps_a < n or steps_b < m:
        result.append(a[i] + b[j])
        ni = (i + 1) % n
        nj = (j + 1) % m
        c = cross(a[ni] - a[i], b[nj] - b[j])
        if c >= 0:
            i = ni
            steps_a += 1
        if c <= 0:
            j = nj
            steps_b += 1
    return result