from types import SimpleNamespace

import pytest

from minitrace.color import Color
from minitrace.ray import Ray
from minitrace.shapes import (
    Cylinder,
    Plane,
    Sphere,
    light_not_reached,
    set_tmax_shadow,
)
from minitrace.vector import Vec

RED = Color(255, 0, 0)


def make_scene(light_pos):
    return SimpleNamespace(
        light=SimpleNamespace(position=light_pos),
        camera=SimpleNamespace(position=Vec(0.0, 0.0, 0.0)),
    )


def forward_ray():
    return Ray(Vec(0.0, 0.0, 0.0), Vec(0.0, 0.0, 1.0))


def make_cylinder():
    return Cylinder(Vec(0.0, -1.0, 5.0), Vec(0.0, 1.0, 0.0), 2.0, 2.0, RED)


# helpers


def test_light_not_reached():
    scene = make_scene(Vec(0.0, 0.0, 5.0))
    ray = forward_ray()
    ray.tmax = 3.0
    assert light_not_reached(ray, scene) is True
    ray.tmax = 6.0
    assert light_not_reached(ray, scene) is False


def test_set_tmax_shadow_measures_to_light():
    scene = make_scene(Vec(0.0, 0.0, 10.0))
    ray = forward_ray()
    set_tmax_shadow(scene, ray, 4.0)
    assert ray.tmax == pytest.approx(6.0)


def test_set_tmax_shadow_ignores_ray_from_light():
    light = Vec(1.0, 2.0, 3.0)
    scene = make_scene(light)
    ray = Ray(light, Vec(0.0, 0.0, 1.0), tmax=7.0)
    set_tmax_shadow(scene, ray, 4.0)
    assert ray.tmax == 7.0


# spheres


def test_sphere_hit_lies_on_near_surface():
    scene = make_scene(Vec(0.0, 5.0, 0.0))
    sphere = Sphere(Vec(0.0, 0.0, 5.0), 2.0, RED)
    ray = forward_ray()
    assert sphere.intersect(ray, scene, 3) is True
    assert ray.hit == 3
    point = ray.point_at(ray.tmax)
    assert (point - sphere.position).length() == pytest.approx(1.0)
    assert point.z < sphere.position.z


def test_sphere_miss_leaves_ray_untouched():
    scene = make_scene(Vec(0.0, 5.0, 0.0))
    sphere = Sphere(Vec(0.0, 0.0, 5.0), 2.0, RED)
    ray = Ray(Vec(0.0, 0.0, 0.0), Vec(0.0, 1.0, 0.0))
    before = ray.tmax
    assert sphere.intersect(ray, scene, 0) is False
    assert ray.hit is None
    assert ray.tmax == before


def test_sphere_beyond_light_recorded_but_not_counted():
    scene = make_scene(Vec(0.0, 0.0, 1.0))
    sphere = Sphere(Vec(0.0, 0.0, 5.0), 2.0, RED)
    ray = forward_ray()
    assert sphere.intersect(ray, scene, 2) is False
    assert ray.hit == 2


def test_sphere_farther_than_tmax_not_hit():
    scene = make_scene(Vec(0.0, 5.0, 0.0))
    sphere = Sphere(Vec(0.0, 0.0, 5.0), 2.0, RED)
    ray = forward_ray()
    ray.tmax = 1.0
    assert sphere.intersect(ray, scene, 0) is False
    assert ray.hit is None


def test_sphere_shadow_matches_intersect():
    scene = make_scene(Vec(0.0, 5.0, 0.0))
    sphere = Sphere(Vec(0.0, 0.0, 5.0), 2.0, RED)
    first, second = forward_ray(), forward_ray()
    assert sphere.intersect(first, scene, 0) == sphere.intersect_shadow(second, scene, 0)
    assert first.tmax == second.tmax


def test_sphere_normal_is_outward_unit():
    scene = make_scene(Vec(0.0, 5.0, 0.0))
    sphere = Sphere(Vec(0.0, 0.0, 5.0), 2.0, RED)
    ray = forward_ray()
    sphere.intersect(ray, scene, 0)
    point = ray.point_at(ray.tmax)
    normal = sphere.surface_normal(ray, point)
    assert normal.length() == pytest.approx(1.0)
    assert normal.dot(point - sphere.position) > 0


# planes


def test_plane_hit_lies_on_plane():
    scene = make_scene(Vec(0.0, 10.0, 0.0))
    plane = Plane(Vec(0.0, 0.0, 5.0), Vec(0.0, 0.0, -1.0), RED)
    ray = forward_ray()
    assert plane.intersect(ray, scene, 1) is True
    assert ray.hit == 1
    point = ray.point_at(ray.tmax)
    assert (point - plane.position).dot(plane.orientation) == pytest.approx(0.0)


def test_plane_parallel_ray_misses():
    scene = make_scene(Vec(0.0, 10.0, 0.0))
    plane = Plane(Vec(0.0, 0.0, 5.0), Vec(0.0, 0.0, -1.0), RED)
    ray = Ray(Vec(0.0, 0.0, 0.0), Vec(1.0, 0.0, 0.0))
    assert plane.intersect(ray, scene, 0) is False
    assert ray.hit is None


def test_plane_beyond_light_recorded_but_not_counted():
    scene = make_scene(Vec(0.0, 1.0, 0.0))
    plane = Plane(Vec(0.0, 0.0, 5.0), Vec(0.0, 0.0, -1.0), RED)
    ray = forward_ray()
    assert plane.intersect(ray, scene, 4) is False
    assert ray.hit == 4


def test_plane_behind_ray_misses():
    scene = make_scene(Vec(0.0, 10.0, 0.0))
    plane = Plane(Vec(0.0, 0.0, -5.0), Vec(0.0, 0.0, 1.0), RED)
    ray = forward_ray()
    assert plane.intersect(ray, scene, 0) is False
    assert ray.hit is None


def test_plane_normal_is_orientation():
    plane = Plane(Vec(0.0, 0.0, 5.0), Vec(0.0, 0.0, -1.0), RED)
    assert plane.surface_normal(forward_ray(), Vec(0.0, 0.0, 5.0)) == plane.orientation


# cylinders


def test_cylinder_side_discriminant_sign():
    cylinder = make_cylinder()
    a, b, c = cylinder.side_coefficients(forward_ray())
    assert b * b - 4 * a * c > 0
    a, b, c = cylinder.side_coefficients(Ray(Vec(), Vec(1.0, 0.0, 0.0)))
    assert b * b - 4 * a * c < 0


def test_cylinder_side_hit():
    scene = make_scene(Vec(0.0, 10.0, 0.0))
    cylinder = make_cylinder()
    ray = forward_ray()
    assert cylinder.intersect(ray, scene, 5) is True
    assert ray.hit == 5
    assert ray.cap_hit is False
    point = ray.point_at(ray.tmax)
    normal = cylinder.surface_normal(ray, point)
    assert normal.length() == pytest.approx(1.0)
    assert normal.dot(cylinder.orientation) == pytest.approx(0.0)
    along = (point - cylinder.position).dot(cylinder.orientation)
    radial = point - (cylinder.position + cylinder.orientation * along)
    assert radial.length() == pytest.approx(cylinder.diameter / 2)


def test_cylinder_miss():
    scene = make_scene(Vec(0.0, 10.0, 0.0))
    cylinder = make_cylinder()
    ray = Ray(Vec(), Vec(1.0, 0.0, 0.0))
    assert cylinder.intersect(ray, scene, 0) is False
    assert ray.hit is None


def test_cylinder_top_disk_hit():
    cylinder = make_cylinder()
    ray = Ray(Vec(0.0, 5.0, 5.0), Vec(0.0, -1.0, 0.0))
    t = cylinder.intersect_disk(ray, 2, 1)
    assert t == ray.tmax
    assert ray.cap_hit is True
    assert ray.hit == 2
    top = cylinder.position + cylinder.orientation * cylinder.height
    assert (ray.point_at(t) - top).dot(cylinder.orientation) == pytest.approx(0.0)


def test_cylinder_disk_parallel_ray_misses():
    cylinder = make_cylinder()
    ray = forward_ray()
    assert cylinder.intersect_disk(ray, 0, 0) == -1
    assert ray.cap_hit is False


def test_cylinder_disks_pick_nearest_cap():
    cylinder = make_cylinder()
    ray = Ray(Vec(0.0, 5.0, 5.0), Vec(0.0, -1.0, 0.0))
    nearest = cylinder.disks(ray, 0)
    assert nearest == ray.tmax
    assert ray.cap_hit is True
    assert ray.point_at(nearest).y == pytest.approx(
        cylinder.position.y + cylinder.height
    )
    normal = cylinder.surface_normal(ray, ray.point_at(nearest))
    assert normal == cylinder.orientation


def test_cylinder_intersect_records_cap_hit():
    scene = make_scene(Vec(0.0, 10.0, 0.0))
    cylinder = make_cylinder()
    ray = Ray(Vec(0.0, 5.0, 5.0), Vec(0.0, -1.0, 0.0))
    cylinder.intersect(ray, scene, 7)
    assert ray.hit == 7
    assert ray.cap_hit is True


def test_cylinder_shadow_cap_blocks_light():
    cylinder = make_cylinder()
    far_light = make_scene(Vec(0.0, -10.0, 5.0))
    ray = Ray(Vec(0.0, 5.0, 5.0), Vec(0.0, -1.0, 0.0))
    assert cylinder.intersect_shadow(ray, far_light, 0) is True
    near_light = make_scene(Vec(0.0, 3.0, 5.0))
    ray = Ray(Vec(0.0, 5.0, 5.0), Vec(0.0, -1.0, 0.0))
    assert cylinder.intersect_shadow(ray, near_light, 0) is False


def test_cylinder_shadow_side_blocks_light():
    cylinder = make_cylinder()
    far_light = make_scene(Vec(0.0, 0.0, 20.0))
    ray = forward_ray()
    assert cylinder.intersect_shadow(ray, far_light, 0) is True
    near_light = make_scene(Vec(0.0, 0.0, 2.0))
    ray = forward_ray()
    assert cylinder.intersect_shadow(ray, near_light, 0) is False