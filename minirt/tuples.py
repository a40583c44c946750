"""Homogeneous tuples used as points, vectors and colours."""

from __future__ import annotations

import math
from dataclasses import dataclass

VECTOR = 0
POINT = 1
COLOR = 2
EPS = 0.00001


def _truncate(value: float) -> int:
    """Convert a float to an integer weight, dropping the fractional part."""
    if not math.isfinite(value):
        return 0
    return int(value)


@dataclass(frozen=True)
class Tuple:
    """A 3D tuple with an integer weight: 0 vector, 1 point, 2 colour."""

    x: float
    y: float
    z: float
    w: int = VECTOR

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        w = COLOR if self.w == COLOR and other.w == COLOR else self.w + other.w
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, w)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        w = COLOR if self.w == COLOR and other.w == COLOR else self.w - other.w
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, w)

    def __mul__(self, factor: float) -> Tuple:
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        w = COLOR if self.w == COLOR else _truncate(self.w * factor)
        return Tuple(self.x * factor, self.y * factor, self.z * factor, w)

    def dot(self, other: Tuple) -> float:
        """Dot product over all four components."""
        return (
            self.x * other.x
            + self.y * other.y
            + self.z * other.z
            + self.w * other.w
        )

    def cross(self, other: Tuple) -> Tuple:
        """Cross product; the result is always a vector."""
        return Tuple(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
            VECTOR,
        )

    def hadamard(self, other: Tuple) -> Tuple:
        """Component-wise product, used for blending colours."""
        w = COLOR if self.w == COLOR and other.w == COLOR else self.w * other.w
        return Tuple(self.x * other.x, self.y * other.y, self.z * other.z, w)

    def magnitude(self) -> float:
        """Length of the tuple, weight included."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)

    def normalize(self) -> Tuple:
        """Unit-length copy; a zero tuple is returned unchanged."""
        length = self.magnitude()
        if length == 0:
            return self
        return Tuple(
            self.x / length,
            self.y / length,
            self.z / length,
            _truncate(self.w / length),
        )

    def approx_eq(self, other: Tuple) -> bool:
        """True when x, y and z agree within EPS."""
        return (
            abs(self.x - other.x) < EPS
            and abs(self.y - other.y) < EPS
            and abs(self.z - other.z) < EPS
        )


def point(x: float, y: float, z: float) -> Tuple:
    """A point in space."""
    return Tuple(x, y, z, POINT)


def vector(x: float, y: float, z: float) -> Tuple:
    """A direction in space."""
    return Tuple(x, y, z, VECTOR)


def color(r: float, g: float, b: float) -> Tuple:
    """An RGB colour with channels nominally in [0, 1]."""
    return Tuple(r, g, b, COLOR)