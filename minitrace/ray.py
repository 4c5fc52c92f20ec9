"""Rays cast from the camera or from surface points towards the light."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from minitrace.vector import Vec

RAY_T_MIN = 0.0001
"""Smallest distance along a ray at which a hit counts."""

RAY_T_MAX = 1.0e30
"""Distance used for a ray that has not hit anything yet."""


@dataclass
class Ray:
    """A half-line with the nearest hit found so far.

    ``tmax`` is the distance to the nearest hit, ``hit`` the index of the
    object that was hit, and ``cap_hit`` tells whether that hit was on a
    cylinder's end cap.
    """

    origin: Vec
    direction: Vec
    tmax: float = RAY_T_MAX
    cap_hit: bool = False
    hit: Optional[int] = None

    def point_at(self, t: float) -> Vec:
        """Point reached after travelling ``t`` along the direction."""
        return Vec(
            self.origin.x + t * self.direction.x,
            self.origin.y + t * self.direction.y,
            self.origin.z + t * self.direction.z,
        )