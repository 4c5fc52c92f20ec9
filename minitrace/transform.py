"""Object-to-world transformation matrices."""

from __future__ import annotations

from minitrace.vector import Vec

Matrix = tuple[tuple[float, float, float, float], ...]

_WORLD_UP = Vec(0.0, -1.0, 0.0)


def make_mat44(forward: Vec, up: Vec, right: Vec, position: Vec) -> Matrix:
    """Build a 4x4 row-major matrix from the basis vectors and a position."""
    return (
        (right.x, right.y, right.z, 0.0),
        (up.x, up.y, up.z, 0.0),
        (forward.x, forward.y, forward.z, 0.0),
        (position.x, position.y, position.z, 1.0),
    )


def obj_to_world_matrix(orientation: Vec, position: Vec) -> Matrix:
    """Build the matrix taking object space into world space.

    The forward axis is ``orientation``; right and up are derived from a
    fixed world up direction of (0, -1, 0).
    """
    forward = orientation
    right = _WORLD_UP.cross(forward).normalised()
    up = forward.cross(right)
    return make_mat44(forward, up, right, position)