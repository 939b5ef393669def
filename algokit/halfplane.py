"""Intersection of half-planes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Sequence

from .point import Point, cross, dot


@dataclass(frozen=True, slots=True)
class HalfPlane:
    """The closed half-plane to the left of the directed line ``start -> end``."""

    start: Point
    end: Point

    def direction(self) -> Point:
        return self.end - self.start


def _is_not_good(u: HalfPlane, v: HalfPlane, t: HalfPlane) -> bool:
    """Tell whether the intersection of the lines of ``u`` and ``v`` lies outside ``t``."""
    du, dv, dt = u.direction(), v.direction(), t.direction()
    s = cross(du, dv)
    if s == 0:
        return False
    p = cross(dt, u.start * s + du * cross(v.start - u.start, dv) - t.start * s)
    return p < 0 if s > 0 else p > 0


def half_plane_intersect(
    planes: Sequence[HalfPlane], order: Sequence[int] | None = None
) -> list[int]:
    """Indices of the half-planes bounding their intersection, counterclockwise.

    ``order`` lists the plane indices sorted counterclockwise by direction; when
    omitted they are sorted by angle from the positive x axis. The region is
    unbounded when fewer than three planes remain or when the cross product of
    the first and last directions is non-negative.
    """
    if order is None:
        key = Point(1, 0).angle_key()
        order = sorted(range(len(planes)), key=lambda i: key(planes[i].direction()))
    q: deque[int] = deque()
    for o in order:
        plane = planes[o]
        while len(q) > 1 and _is_not_good(planes[q[-2]], planes[q[-1]], plane):
            q.pop()
        while len(q) > 1 and _is_not_good(planes[q[0]], planes[q[1]], plane):
            q.popleft()
        if not q:
            q.append(o)
            continue
        back = planes[q[-1]]
        du, dv = back.direction(), plane.direction()
        if cross(du, dv) != 0:
            q.append(o)
        elif dot(du, dv) > 0:
            # Parallel and same direction: keep the stricter one.
            if cross(du, plane.start - back.start) > 0:
                q[-1] = o
        elif cross(du, plane.start - back.start) <= 0:
            q.append(o)
        else:
            q.pop()
    while len(q) > 2 and _is_not_good(planes[q[-2]], planes[q[-1]], planes[q[0]]):
        q.pop()
    while len(q) > 2 and _is_not_good(planes[q[0]], planes[q[1]], planes[q[-1]]):
        q.popleft()
    return list(q)