"""Phong shading: ambient, diffuse and specular parts of a surface colour.

The scene handed to these functions provides ``ambient`` (``ratio``,
``color``), ``light`` (``position``, ``ratio``, ``color``) and ``camera``
(``position``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from minitrace.color import Color
from minitrace.ray import Ray
from minitrace.vector import Vec

SHININESS = 10


@dataclass(frozen=True)
class ShadowInfo:
    """Directions at a hit point needed to shade it."""

    intersection: Vec
    normal: Vec
    to_light: Vec
    cos_theta: float
    from_light: Vec
    reflection: Vec
    to_cam: Vec


def _shadow_info(scene: Any, intersection: Vec, normal: Vec) -> ShadowInfo:
    light_pos = scene.light.position
    to_light = (light_pos - intersection).normalised()
    cos_theta = normal.dot(to_light)
    if cos_theta < 0.0:
        cos_theta = 0.0
    from_light = (intersection - light_pos).normalised()
    reflection = (normal * (normal.dot(to_light) * 2) - to_light).normalised()
    to_cam = (scene.camera.position - intersection).normalised()
    return ShadowInfo(
        intersection=intersection,
        normal=normal,
        to_light=to_light,
        cos_theta=cos_theta,
        from_light=from_light,
        reflection=reflection,
        to_cam=to_cam,
    )


def make_shadow_sphere(scene: Any, ray: Ray, obj: Any) -> ShadowInfo:
    """Shading directions at the ray's hit, using the object's own normal."""
    intersection = ray.point_at(ray.tmax)
    normal = obj.surface_normal(ray, intersection)
    return _shadow_info(scene, intersection, normal)


def make_shadow_plane(scene: Any, ray: Ray, obj: Any) -> ShadowInfo:
    """Shading directions at the ray's hit on a plane."""
    intersection = ray.point_at(ray.tmax)
    return _shadow_info(scene, intersection, obj.orientation)


def ambient_color(scene: Any, obj: Any) -> Color:
    """Object colour filtered through the ambient light and scaled by its ratio."""
    return obj.color.mult(scene.ambient.color).scaled(scene.ambient.ratio)


def specular_color(scene: Any, shadow: ShadowInfo) -> Color:
    """Specular highlight colour, falling off with distance to the light."""
    cos_theta = shadow.reflection.dot(shadow.to_cam)
    if cos_theta < 0.0:
        cos_theta = 0.0
    cos_theta = cos_theta ** SHININESS
    distance = (scene.light.position - shadow.intersection).length()
    return scene.light.color.scaled(cos_theta * scene.light.ratio / distance)


def light_object(scene: Any, ray: Ray, obj: Any, in_shadow: bool) -> int:
    """Pixel value for the object hit by ``ray``.

    A point in shadow gets only the ambient part; otherwise the diffuse and
    specular parts are added and every channel is capped at 255.
    """
    shadow = obj.make_shadow(scene, ray)
    ambient = ambient_color(scene, obj)
    if in_shadow:
        return ambient.to_trgb(1)
    distance = (scene.light.position - shadow.intersection).length()
    diffuse = obj.color.scaled(shadow.cos_theta * scene.light.ratio / distance)
    specular = specular_color(scene, shadow)
    result = (specular + (ambient + diffuse)).limited()
    return result.to_trgb(1)