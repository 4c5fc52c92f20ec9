import pytest

from minitrace.ray import RAY_T_MAX, Ray
from minitrace.vector import Vec


def test_point_at_zero_is_origin():
    ray = Ray(Vec(1.0, 2.0, 3.0), Vec(0.0, 0.0, 1.0))
    assert ray.point_at(0.0) == Vec(1.0, 2.0, 3.0)


def test_point_at_moves_along_direction():
    origin = Vec(1.0, -2.0, 0.5)
    direction = Vec(0.0, 1.0, 0.0)
    ray = Ray(origin, direction)
    point = ray.point_at(2.5)
    assert point.x == pytest.approx(1.0)
    assert point.y == pytest.approx(0.5)
    assert point.z == pytest.approx(0.5)


def test_new_ray_has_no_hit():
    ray = Ray(Vec(), Vec(0.0, 0.0, 1.0))
    assert ray.tmax == RAY_T_MAX
    assert ray.hit is None
    assert ray.cap_hit is False


def test_point_at_is_linear():
    ray = Ray(Vec(0.0, 0.0, 0.0), Vec(1.0, 2.0, 3.0))
    first = ray.point_at(1.0)
    second = ray.point_at(2.0)
    assert second.x == pytest.approx(2 * first.x)
    assert second.y == pytest.approx(2 * first.y)
    assert second.z == pytest.approx(2 * first.z)


def test_tmax_can_be_lowered():
    ray = Ray(Vec(), Vec(1.0, 0.0, 0.0))
    ray.tmax = 3.0
    assert ray.point_at(ray.tmax) == Vec(3.0, 0.0, 0.0)