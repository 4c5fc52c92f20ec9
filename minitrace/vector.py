"""Three-dimensional vectors and points."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from minitrace.numeric import degtorad


@dataclass(frozen=True)
class Vec:
    """A vector or point; ``valid`` marks whether it was read correctly."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    valid: bool = True

    def __add__(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vec:
        return Vec(self.x * factor, self.y * factor, self.z * factor)

    def __neg__(self) -> Vec:
        return Vec(-self.x, -self.y, -self.z)

    def dot(self, other: Vec) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length_squared(self) -> float:
        """Square of the length."""
        return self.x ** 2 + self.y ** 2 + self.z ** 2

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.length_squared())

    def cross(self, other: Vec) -> Vec:
        """Cross product."""
        return Vec(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalised(self) -> Vec:
        """Unit vector in the same direction; a zero vector gives NaN parts."""
        length = self.length()
        if length == 0:
            return Vec(math.nan, math.nan, math.nan)
        return Vec(self.x / length, self.y / length, self.z / length)

    def rotate_x(self, alpha: float) -> Vec:
        """Rotate about the x axis by ``alpha`` degrees."""
        cos_a, sin_a = math.cos(degtorad(alpha)), math.sin(degtorad(alpha))
        return Vec(
            self.x,
            self.y * cos_a - self.z * sin_a,
            self.y * sin_a + self.z * cos_a,
        )

    def rotate_y(self, alpha: float) -> Vec:
        """Rotate about the y axis by ``alpha`` degrees."""
        cos_a, sin_a = math.cos(degtorad(alpha)), math.sin(degtorad(alpha))
        return Vec(
            self.x * cos_a + self.z * sin_a,
            self.y,
            -self.x * sin_a + self.z * cos_a,
        )

    def rotate_z(self, alpha: float) -> Vec:
        """Rotate about the z axis by ``alpha`` degrees."""
        cos_a, sin_a = math.cos(degtorad(alpha)), math.sin(degtorad(alpha))
        return Vec(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
            self.z,
        )

    def mult_matrix(self, matrix: Sequence[Sequence[float]]) -> Vec:
        """Transform as a point by a 4x4 row-major matrix (row vector on the left)."""
        return Vec(
            self.x * matrix[0][0] + self.y * matrix[1][0] + self.z * matrix[2][0] + matrix[3][0],
            self.x * matrix[0][1] + self.y * matrix[1][1] + self.z * matrix[2][1] + matrix[3][1],
            self.x * matrix[0][2] + self.y * matrix[1][2] + self.z * matrix[2][2] + matrix[3][2],
        )

    def same_as(self, other: Vec) -> bool:
        """Exact comparison of coordinates and validity."""
        return (
            self.valid == other.valid
            and self.x == other.x
            and self.y == other.y
            and self.z == other.z
        )