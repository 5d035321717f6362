"""Three-dimensional vectors and the operations on them."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real

EPSILON = 0.0001
"""Largest difference at which two floats still count as close."""


def float_close(a: float, b: float) -> bool:
    """Return True if *a* and *b* differ by no more than EPSILON."""
    return abs(a - b) <= EPSILON


def _sin_cos_degrees(theta: float) -> tuple[float, float]:
    radians = math.radians(theta)
    return math.sin(radians), math.cos(radians)


@dataclass(frozen=True)
class Vector:
    """An immutable vector in three dimensions."""

    x: float
    y: float
    z: float

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> Vector:
        if not isinstance(k, Real):
            return NotImplemented
        return Vector(self.x * k, self.y * k, self.z * k)

    def __rmul__(self, k: float) -> Vector:
        return self.__mul__(k)

    def dot(self, other: Vector) -> float:
        """Return the dot product with *other*."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Return the cross product of this vector with *other*."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def rotate_x(self, theta: float) -> Vector:
        """Return this vector rotated by *theta* degrees about the x-axis."""
        sin, cos = _sin_cos_degrees(theta)
        return Vector(
            self.x,
            self.y * cos - self.z * sin,
            self.y * sin + self.z * cos,
        )

    def rotate_y(self, theta: float) -> Vector:
        """Return this vector rotated by *theta* degrees about the y-axis."""
        sin, cos = _sin_cos_degrees(theta)
        return Vector(
            self.x * cos + self.z * sin,
            self.y,
            -self.x * sin + self.z * cos,
        )

    def rotate_z(self, theta: float) -> Vector:
        """Return this vector rotated by *theta* degrees about the z-axis."""
        sin, cos = _sin_cos_degrees(theta)
        return Vector(
            self.x * cos - self.y * sin,
            self.x * sin + self.y * cos,
            self.z,
        )

    def length_squared(self) -> float:
        """Return the squared length of the vector."""
        return self.dot(self)

    def length(self) -> float:
        """Return the length of the vector."""
        return math.sqrt(self.length_squared())

    def normalised(self) -> Vector:
        """Return the unit vector in the same direction.

        Raises ZeroDivisionError for the zero vector.
        """
        return self * (1 / self.length())

    def is_parallel(self, other: Vector) -> bool:
        """Return True if *other* points in the same direction as this vector."""
        return float_close(self.dot(other), self.length() * other.length())

    def is_close(self, other: Vector) -> bool:
        """Return True if every component is within EPSILON of *other*'s."""
        return (
            float_close(self.x, other.x)
            and float_close(self.y, other.y)
            and float_close(self.z, other.z)
        )