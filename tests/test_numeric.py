import math

import pytest

from minitrace.numeric import degtorad, find_min_value, isequal, quad_solver


def test_degtorad_half_turn_is_pi():
    assert degtorad(180) == pytest.approx(math.pi)


def test_degtorad_zero():
    assert degtorad(0) == 0


def test_degtorad_is_linear():
    assert degtorad(90) * 2 == pytest.approx(degtorad(180))


@pytest.mark.parametrize("a, b, expected", [(2, 5, 2), (5, 2, 2), (3, 3, 3), (-4, -4, -4)])
def test_find_min_value_picks_smaller_or_equal(a, b, expected):
    assert find_min_value(a, b) == expected


@pytest.mark.parametrize("a, b", [(-1, -2), (-2, 4), (0, -3), (-5, 0)])
def test_find_min_value_without_positive_candidate(a, b):
    assert find_min_value(a, b) == -1


def test_find_min_value_positive_b_when_a_negative():
    assert find_min_value(-3, 7) == -1
    assert find_min_value(7, -3) == -1


def test_quad_solver_returns_smallest_positive_root():
    a, b, c = 1.0, -4.0, 3.0
    root = quad_solver(a, b, c)
    assert a * root * root + b * root + c == pytest.approx(0.0, abs=1e-9)
    assert root > 0
    assert root < -b / a


def test_quad_solver_negative_discriminant():
    assert quad_solver(1.0, 0.0, 1.0) == 0


def test_quad_solver_touching_discriminant():
    assert quad_solver(1.0, 2.0, 1.0) == 0


def test_quad_solver_both_roots_behind():
    assert quad_solver(1.0, 5.0, 6.0) == -1


def test_isequal_within_tolerance():
    assert isequal(1.0, 1.000001)
    assert isequal(2.5, 2.5)


def test_isequal_outside_tolerance():
    assert not isequal(1.0, 1.1)
    assert not isequal(0.0, -0.001)