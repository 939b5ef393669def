"""Two-dimensional points and vectors with exact arithmetic on their coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True, order=True, slots=True)
class Point:
    """A point (or vector) in the plane, ordered by ``(x, y)``."""

    x: Number = 0
    y: Number = 0

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x},{self.y})"

    def __add__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        if isinstance(scalar, Point):
            return NotImplemented
        return Point(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar):
        if isinstance(scalar, Point):
            return NotImplemented
        return Point(scalar * self.x, scalar * self.y)

    def __truediv__(self, scalar):
        if isinstance(scalar, Point):
            return NotImplemented
        return Point(self.x / scalar, self.y / scalar)

    def __floordiv__(self, scalar):
        if isinstance(scalar, Point):
            return NotImplemented
        return Point(self.x // scalar, self.y // scalar)

    def __neg__(self) -> Point:
        return Point(-self.x, -self.y)

    def __pos__(self) -> Point:
        return Point(+self.x, +self.y)

    def norm(self, other: Point | None = None) -> Number:
        """Squared length, or squared distance to ``other``."""
        if other is None:
            return self.x * self.x + self.y * self.y
        dx, dy = self.x - other.x, self.y - other.y
        return dx * dx + dy * dy

    def abs(self, other: Point | None = None) -> float:
        """Euclidean length, or distance to ``other``."""
        return math.sqrt(self.norm(other))

    def arg(self, other: Point | None = None) -> float:
        """Polar angle, or the signed angle from this vector to ``other``."""
        if other is None:
            return math.atan2(self.y, self.x)
        return math.atan2(self.cross(other), self.dot(other))

    def unit(self) -> Point:
        """The vector scaled to length one."""
        return self / self.abs()

    def int_norm(self) -> int:
        """Greatest common divisor of the integer coordinates."""
        return math.gcd(self.x, self.y)

    def int_unit(self) -> Point:
        """The shortest integer vector with the same direction."""
        if not self.x and not self.y:
            return self
        return self // self.int_norm()

    def perp_cw(self) -> Point:
        """Rotate by a quarter turn clockwise."""
        return Point(self.y, -self.x)

    def perp_ccw(self) -> Point:
        """Rotate by a quarter turn counterclockwise."""
        return Point(-self.y, self.x)

    def dot(self, other: Point) -> Number:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Point) -> Number:
        return self.x * other.y - self.y * other.x

    def cross3(self, b: Point, c: Point) -> Number:
        """Cross product of ``b - self`` and ``c - self``; positive for a left turn."""
        return (b - self).cross(c - self)

    def conj(self) -> Point:
        return Point(self.x, -self.y)

    def dot_cross(self, other: Point) -> Point:
        """``conj(self) * other`` as a complex product."""
        return Point(self.dot(other), self.cross(other))

    def cmul(self, other: Point) -> Point:
        """Complex multiplication."""
        return self.conj().dot_cross(other)

    def cdiv(self, other: Point) -> Point:
        """Complex division."""
        return other.dot_cross(self) / other.norm()

    def rotate(self, other: Point) -> Point:
        """Rotate by the angle of ``other``, scaling by its length."""
        return other.conj().dot_cross(self)

    def unrotate(self, other: Point) -> Point:
        """Rotate by minus the angle of ``other``, scaling by its length."""
        return other.dot_cross(self)

    def same_dir(self, other: Point) -> bool:
        return self.cross(other) == 0 and self.dot(other) > 0

    def is_reflex(self, other: Point) -> bool:
        """Tell whether the angle from this vector to ``other`` lies in ``[pi, 2pi)``."""
        c = self.cross(other)
        return c < 0 or (c == 0 and self.dot(other) < 0)

    def less_angle(self, s: Point, t: Point) -> bool:
        """Order ``s`` before ``t`` by angle measured from this direction."""
        r = int(self.is_reflex(s)) - int(self.is_reflex(t))
        return r < 0 or (r == 0 and s.cross(t) > 0)

    def angle_key(self) -> Callable[[Point], object]:
        """Sort key ordering vectors by angle in ``[base, base + 2pi)``."""

        def compare(s: Point, t: Point) -> int:
            if self.less_angle(s, t):
                return -1
            if self.less_angle(t, s):
                return 1
            return 0

        return cmp_to_key(compare)


def dot(a: Point, b: Point) -> Number:
    return a.dot(b)


def cross(a: Point, b: Point) -> Number:
    return a.cross(b)


def cross3(a: Point, b: Point, c: Point) -> Number:
    return a.cross3(b, c)