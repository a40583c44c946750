"""Rays cast through a scene."""

from __future__ import annotations

from dataclasses import dataclass

from minirt.matrix import Matrix
from minirt.tuples import Tuple


@dataclass(frozen=True)
class Ray:
    """A half-line from an origin point along a direction vector."""

    origin: Tuple
    direction: Tuple

    def position(self, t: float) -> Tuple:
        """The point at distance t along the ray."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """The ray with both origin and direction multiplied by a matrix."""
        return Ray(matrix.apply(self.origin), matrix.apply(self.direction))