"""Spheres, planes and cylinders: ray intersection and surface normals.

Each ``intersect`` method lowers ``ray.tmax`` and records the object's index
in ``ray.hit`` when it finds a nearer hit, and returns whether the hit
counts. The scene provides ``light.position`` and ``camera.position``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from minitrace.color import Color
from minitrace.numeric import EPSILON, find_min_value, isequal, quad_solver
from minitrace.ray import RAY_T_MIN, Ray
from minitrace.shading import ShadowInfo, make_shadow_plane, make_shadow_sphere
from minitrace.vector import Vec


def light_not_reached(ray: Ray, scene: Any) -> bool:
    """Tell whether the ray's hit lies no farther than the light."""
    distance = (scene.light.position - ray.origin).length()
    return not ray.tmax > distance


def set_tmax_shadow(scene: Any, ray: Ray, t: float) -> None:
    """Set ``ray.tmax`` to the distance from the point at ``t`` to the light.

    Nothing changes when the ray starts at the light itself.
    """
    light_pos = scene.light.position
    if not ray.origin.same_as(light_pos):
        ray.tmax = (ray.point_at(t) - light_pos).length()


def _record_hit(ray: Ray, index: int, t: float, cap: bool) -> None:
    ray.hit = index
    ray.tmax = t
    ray.cap_hit = cap


@dataclass
class Sphere:
    """A sphere given by its centre and diameter."""

    position: Vec
    diameter: float
    color: Color

    def intersect(self, ray: Ray, scene: Any, index: int) -> bool:
        """Intersect the ray; a hit beyond the light does not count."""
        offset = ray.origin - self.position
        a = ray.direction.length_squared()
        b = 2 * ray.direction.dot(offset)
        c = offset.length_squared() - (self.diameter / 2) ** 2
        if b ** 2 - 4 * a * c < 0.0:
            return False
        t = quad_solver(a, b, c)
        found = False
        if RAY_T_MIN < t < ray.tmax:
            ray.tmax = t
            ray.hit = index
            found = True
        to_light = (ray.origin - scene.light.position).length()
        to_hit = (ray.origin - ray.point_at(ray.tmax)).length()
        if to_light < to_hit:
            found = False
        return found

    def intersect_shadow(self, ray: Ray, scene: Any, index: int) -> bool:
        """Shadow test; the same as a camera-ray intersection."""
        return self.intersect(ray, scene, index)

    def surface_normal(self, ray: Ray, intersection: Vec) -> Vec:
        """Outward unit normal at ``intersection``."""
        return (intersection - self.position).normalised()

    def make_shadow(self, scene: Any, ray: Ray) -> ShadowInfo:
        return make_shadow_sphere(scene, ray, self)


@dataclass
class Plane:
    """An infinite plane through ``position`` with normal ``orientation``."""

    position: Vec
    orientation: Vec
    color: Color

    def intersect(self, ray: Ray, scene: Any, index: int) -> bool:
        """Intersect the ray.

        The hit is recorded even when it lies beyond the light or on the
        side of the plane facing away from the camera, but then it does not
        count.
        """
        n_dot_ray = self.orientation.dot(ray.direction)
        if abs(n_dot_ray) < EPSILON:
            return False
        t = self.orientation.dot(self.position - ray.origin) / n_dot_ray
        if t <= RAY_T_MIN or t >= ray.tmax:
            return False
        ray.hit = index
        ray.tmax = t
        if t > (scene.light.position - ray.origin).length():
            return False
        c_dot_n = self.orientation.dot(
            (ray.point_at(t) - scene.camera.position).normalised()
        )
        if (n_dot_ray < 0 and c_dot_n > 0) or (n_dot_ray > 0 and c_dot_n < 0):
            return False
        return True

    def intersect_shadow(self, ray: Ray, scene: Any, index: int) -> bool:
        """Shadow test; the same as a camera-ray intersection."""
        return self.intersect(ray, scene, index)

    def surface_normal(self, ray: Ray, intersection: Vec) -> Vec:
        """The plane's orientation."""
        return self.orientation * 1

    def make_shadow(self, scene: Any, ray: Ray) -> ShadowInfo:
        return make_shadow_plane(scene, ray, self)


@dataclass
class Cylinder:
    """A capped cylinder starting at ``position`` and running ``height``
    along ``orientation``."""

    position: Vec
    orientation: Vec
    diameter: float
    height: float
    color: Color

    def side_coefficients(self, ray: Ray) -> tuple[float, float, float]:
        """Quadratic coefficients for the ray meeting the infinite side."""
        axis = self.orientation
        d_dot_axis = ray.direction.dot(axis)
        w = ray.origin - self.position
        w_dot_axis = w.dot(axis)
        a = ray.direction.dot(ray.direction) - d_dot_axis ** 2
        b = 2 * (ray.direction.dot(w) - d_dot_axis * w_dot_axis)
        c = w.dot(w) - w_dot_axis ** 2 - (self.diameter / 2) ** 2
        return a, b, c

    def intersect_disk(self, ray: Ray, index: int, cap: int) -> float:
        """Intersect the bottom (``cap`` 0) or top (``cap`` 1) disk.

        Returns the distance of a nearer hit, recording it on the ray, or -1.
        """
        denominator = ray.direction.dot(self.orientation)
        if isequal(denominator, 0):
            return -1
        centre = self.position + self.orientation * (self.height * cap)
        t = self.orientation.dot(centre - ray.origin) / denominator
        if t <= 0:
            return -1
        offset = ray.point_at(t) - centre
        if math.sqrt(offset.dot(offset)) < self.diameter / 2 and (
            t < ray.tmax or ray.tmax < 0
        ):
            _record_hit(ray, index, t, True)
            return t
        return -1

    def disks(self, ray: Ray, index: int) -> float:
        """Nearest positive hit on either cap, or -1."""
        bottom = self.intersect_disk(ray, index, 0)
        top = self.intersect_disk(ray, index, 1)
        return find_min_value(bottom, top)

    def _side_height(self, ray: Ray, t: float) -> float:
        return (ray.point_at(t) - self.position).dot(self.orientation)

    def intersect(self, ray: Ray, scene: Any, index: int) -> bool:
        """Intersect the caps and the side of the cylinder."""
        disk = self.disks(ray, index)
        a, b, c = self.side_coefficients(ray)
        if b ** 2 - 4.0 * a * c <= 0 and disk < 0:
            return False
        t = quad_solver(a, b, c)
        if (disk > 0 and disk < t) or t < 0:
            return False
        if t >= 0:
            along = self._side_height(ray, t)
            if along >= 0 and t < ray.tmax and along <= self.height:
                _record_hit(ray, index, t, False)
                return bool(disk or along)
        return False

    def intersect_shadow(self, ray: Ray, scene: Any, index: int) -> bool:
        """Tell whether the cylinder blocks the way to the light."""
        disk = self.disks(ray, index)
        a, b, c = self.side_coefficients(ray)
        if b ** 2 - 4.0 * a * c <= 0 and disk < 0:
            return False
        if ray.cap_hit:
            return light_not_reached(ray, scene)
        t = quad_solver(a, b, c)
        if (disk > 0 and disk < t) or t < 0:
            return False
        if t >= 0:
            along = self._side_height(ray, t)
            if along >= 0 and t < ray.tmax and along <= self.height:
                _record_hit(ray, index, t, False)
                return light_not_reached(ray, scene)
        return False

    def surface_normal(self, ray: Ray, intersection: Vec) -> Vec:
        """Cap normal for a cap hit, otherwise the normal away from the axis."""
        if ray.cap_hit:
            return self.orientation
        t = (intersection - self.position).dot(self.orientation)
        on_axis = self.position + self.orientation * t
        return (intersection - on_axis).normalised()

    def make_shadow(self, scene: Any, ray: Ray) -> ShadowInfo:
        return make_shadow_sphere(scene, ray, self)