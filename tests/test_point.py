import math
import random

import pytest

from algokit.point import Point, cross, cross3, dot


def test_arithmetic_and_ordering():
    a, b = Point(1, 2), Point(3, -1)
    assert a + b - b == a
    assert 2 * a == a * 2 == a + a
    assert -a + a == Point(0, 0)
    assert (a * 4) / 2 == a * 2
    assert sorted([b, a, Point(1, 1)]) == [Point(1, 1), a, b]
    assert tuple(a) == (1, 2)


def test_norm_and_distance():
    p = Point(3, 4)
    assert p.norm() == 25
    assert p.abs() == 5.0
    assert p.norm(Point(3, 4)) == 0
    assert math.isclose(p.unit().abs(), 1.0)
    assert Point(1, 1).abs(Point(4, 5)) == p.abs()


def test_dot_cross_free_functions():
    a, b = Point(2, 5), Point(-3, 7)
    assert dot(a, b) == a.dot(b) == b.dot(a)
    assert cross(a, b) == -cross(b, a)
    assert cross(a, a) == 0
    o = Point(0, 0)
    assert cross3(o, a, b) == cross(a, b)
    assert cross3(Point(1, 1), a + Point(1, 1), b + Point(1, 1)) == cross(a, b)


def test_perpendiculars_and_rotation():
    p = Point(3, 7)
    assert p.perp_ccw().perp_cw() == p
    assert p.dot(p.perp_ccw()) == 0
    assert p.rotate(Point(0, 1)) == p.perp_ccw()
    assert p.unrotate(Point(0, 1)) == p.perp_cw()
    q = Point(2, -5)
    assert p.rotate(q).unrotate(q) == p * q.norm()


def test_complex_operations_match_complex_numbers():
    rng = random.Random(7)
    for _ in range(20):
        a = Point(rng.randint(-9, 9), rng.randint(-9, 9))
        b = Point(rng.randint(1, 9), rng.randint(-9, 9))
        prod = complex(a.x, a.y) * complex(b.x, b.y)
        assert a.cmul(b) == Point(prod.real, prod.imag)
        back = a.cmul(b).cdiv(b)
        assert math.isclose(back.x, a.x, abs_tol=1e-9)
        assert math.isclose(back.y, a.y, abs_tol=1e-9)
        assert a.conj().conj() == a


def test_int_unit():
    assert Point(4, 6).int_unit() == Point(2, 3)
    assert Point(0, 0).int_unit() == Point(0, 0)
    assert Point(-8, 0).int_unit() == Point(-1, 0)
    assert Point(9, 12).int_norm() == math.gcd(9, 12)


def test_arg():
    assert math.isclose(Point(1, 0).arg(Point(0, 1)), math.pi / 2)
    assert math.isclose(Point(0, 1).arg(), math.pi / 2)
    assert math.isclose(Point(1, 0).arg(Point(0, -1)), -math.pi / 2)


def test_same_dir_and_reflex():
    assert Point(1, 2).same_dir(Point(2, 4))
    assert not Point(1, 2).same_dir(Point(-1, -2))
    assert Point(1, 0).is_reflex(Point(-1, 0))
    assert Point(1, 0).is_reflex(Point(0, -1))
    assert not Point(1, 0).is_reflex(Point(0, 1))
    assert not Point(1, 0).is_reflex(Point(1, 0))


def test_angle_key_sorts_by_angle_from_base():
    base = Point(1, 0)
    rng = random.Random(3)
    vectors = {Point(rng.randint(-5, 5), rng.randint(-5, 5)) for _ in range(40)}
    vectors.discard(Point(0, 0))
    ordered = sorted(vectors, key=base.angle_key())
    angles = [math.atan2(v.y, v.x) % (2 * math.pi) for v in ordered]
    assert angles == sorted(angles)
    assert base.less_angle(Point(0, 1), Point(-1, 0))
    assert not base.less_angle(Point(0, -1), Point(0, 1))


def test_division_by_non_point_only():
    with pytest.raises(TypeError):
        Point(1, 1) / Point(1, 1)