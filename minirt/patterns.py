"""Surface patterns and the materials that carry them."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from minirt.matrix import Matrix, identity
from minirt.tuples import Tuple, color

_WHITE = color(1, 1, 1)
_BLACK = color(0, 0, 0)


class PatternType(enum.IntEnum):
    """Kinds of procedural pattern a material may use."""

    NONE = 0
    STRIPE = 1
    GRADIENT = 2
    RING = 3
    CHECKER = 4


def _to_int(value: float) -> int:
    """Drop the fractional part; non-finite values count as zero."""
    if not math.isfinite(value):
        return 0
    return int(value)


def _round_half_away(value: float) -> float:
    """Round to nearest integer, halves away from zero."""
    if not math.isfinite(value):
        return value
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class Pattern:
    """A two-colour pattern with its own transform."""

    enabled: bool = False
    type: PatternType = PatternType.NONE
    transform: Matrix = field(default_factory=lambda: identity(4))
    a: Tuple = _WHITE
    b: Tuple = _BLACK

    def color_at(self, object_transform: Matrix, world_point: Tuple) -> Tuple:
        """Colour of the pattern at a point on an object with the given transform."""
        object_point = object_transform.apply(world_point)
        pattern_point = self.transform.apply(object_point)
        if self.type == PatternType.STRIPE:
            return stripe_at(self, pattern_point)
        if self.type == PatternType.GRADIENT:
            return gradient_at(self, pattern_point)
        if self.type == PatternType.RING:
            return ring_at(self, pattern_point)
        if self.type == PatternType.CHECKER:
            total = (
                math.floor(world_point.x)
                + math.floor(world_point.z)
                + math.floor(world_point.y)
            )
            return self.a if _to_int(total) % 2 == 0 else self.b
        return _BLACK


@dataclass(frozen=True)
class Material:
    """Surface appearance of an object."""

    color: Tuple = _WHITE
    pattern: Pattern = field(default_factory=Pattern)
    diffuse: float = 0.9
    specular: float = 0.7
    shininess: float = 200.0
    reflective: float = 0.0


def stripe_at(pattern: Pattern, p: Tuple) -> Tuple:
    """Alternating stripes along x, one unit wide."""
    if _to_int(_round_half_away(p.x)) % 2 == 0:
        return pattern.a
    return pattern.b


def gradient_at(pattern: Pattern, p: Tuple) -> Tuple:
    """Linear blend from a to b repeating every unit along x."""
    distance = pattern.b - pattern.a
    fraction = p.x - math.floor(p.x)
    return pattern.a + distance * fraction


def ring_at(pattern: Pattern, p: Tuple) -> Tuple:
    """Concentric rings around the y axis."""
    radius = math.sqrt(p.x**2 + p.z**2)
    if _to_int(math.floor(radius)) % 2 == 0:
        return pattern.a
    return pattern.b