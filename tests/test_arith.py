from fractions import Fraction
import math

import pytest

from algokit.arith import ceil_div, floor_div


@pytest.mark.parametrize("a", range(-12, 13))
@pytest.mark.parametrize("b", [-5, -3, -2, -1, 1, 2, 3, 7])
def test_floor_div_matches_exact_floor(a, b):
    assert floor_div(a, b) == math.floor(Fraction(a, b))


@pytest.mark.parametrize("a", range(-12, 13))
@pytest.mark.parametrize("b", [-5, -3, -2, -1, 1, 2, 3, 7])
def test_ceil_div_matches_exact_ceil(a, b):
    assert ceil_div(a, b) == math.ceil(Fraction(a, b))


def test_pinned_values():
    assert floor_div(-7, 2) == -4
    assert ceil_div(-7, 2) == -3
    assert ceil_div(7, 2) == 4


@pytest.mark.parametrize("a", [-9, -4, 0, 4, 9])
@pytest.mark.parametrize("b", [-3, -2, 2, 3])
def test_floor_and_ceil_bracket_quotient(a, b):
    lo, hi = floor_div(a, b), ceil_div(a, b)
    assert lo <= Fraction(a, b) <= hi
    assert hi - lo == (0 if a % b == 0 else 1)


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        floor_div(3, 0)
    with pytest.raises(ZeroDivisionError):
        ceil_div(3, 0)