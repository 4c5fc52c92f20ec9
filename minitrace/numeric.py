"""Small numeric helpers shared by the renderer."""

import math

EPSILON = 1e-6
"""Threshold below which a discriminant counts as zero."""

_EQUAL_TOLERANCE = 0.00001


def _divide(numerator: float, denominator: float) -> float:
    """Divide following IEEE rules instead of raising on a zero denominator."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def degtorad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * math.pi / 180


def find_min_value(a: float, b: float) -> float:
    """Return the smaller positive value of the two, or -1 when neither fits.

    Two equal values are returned as they are, whatever their sign.
    """
    if (a < b and a > 0) or a == b:
        return a
    if b < a and b > 0:
        return b
    return -1


def quad_solver(a: float, b: float, c: float) -> float:
    """Solve a*t^2 + b*t + c = 0 and return the smallest positive root.

    A discriminant that is negative or within EPSILON of zero gives 0;
    two roots that are both non-positive give -1.
    """
    delta = b * b - 4 * (a * c)
    if abs(delta) < EPSILON or delta < 0:
        return 0
    root = math.sqrt(delta)
    near = _divide(-b - root, 2 * a)
    far = _divide(-b + root, 2 * a)
    return find_min_value(near, far)


def isequal(a: float, b: float) -> bool:
    """Tell whether two values are equal within a fixed tolerance."""
    return a - _EQUAL_TOLERANCE <= b and a + _EQUAL_TOLERANCE >= b