"""Scene primitives: ray intersection and surface normals."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field, replace
from typing import Callable

from minirt.matrix import Matrix, identity
from minirt.patterns import Material
from minirt.ray import Ray
from minirt.tuples import EPS, POINT, Tuple, point, vector


class ShapeKind(enum.IntEnum):
    """Kinds of primitive the renderer knows."""

    SPHERE = 0
    CYLINDER = 1
    PLANE = 2
    CONE = 3


@dataclass(frozen=True)
class Intersection:
    """A ray parameter t at which a ray meets a shape."""

    t: float
    shape: Shape


@dataclass(eq=False)
class Shape:
    """A unit primitive placed in the world by its transform."""

    kind: ShapeKind
    transform: Matrix = field(default_factory=lambda: identity(4))
    material: Material = field(default_factory=Material)
    id: int = 0
    minimum: float = -1.0
    maximum: float = 1.0
    capped: bool = False

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersections of a world-space ray with this shape."""
        return self.local_intersect(ray.transform(self.transform.inverse()))

    def local_intersect(self, ray: Ray) -> list[Intersection]:
        """Intersections of a ray already in object space."""
        if self.kind == ShapeKind.SPHERE:
            return self._sphere_hits(ray)
        if self.kind == ShapeKind.PLANE:
            return self._plane_hits(ray)
        if self.kind == ShapeKind.CYLINDER:
            return self._cylinder_hits(ray)
        if self.kind == ShapeKind.CONE:
            return self._cone_hits(ray)
        return []

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Unit surface normal in world space at a point on the shape."""
        inverse = self.transform.inverse()
        p = inverse.apply(world_point)
        if self.kind == ShapeKind.SPHERE:
            local = p - point(0, 0, 0)
        elif self.kind == ShapeKind.PLANE:
            local = vector(0, 1, 0)
        elif self.kind == ShapeKind.CYLINDER:
            local = self._cylinder_normal(p)
        else:
            local = self._cone_normal(p)
        world = inverse.transpose().apply(local)
        return replace(world, w=0).normalize()

    def _sphere_hits(self, ray: Ray) -> list[Intersection]:
        to_ray = ray.origin - point(0, 0, 0)
        a = ray.direction.dot(ray.direction)
        if a == 0:
            return []
        b = 2 * ray.direction.dot(to_ray)
        disc = b * b - 4 * a * (to_ray.dot(to_ray) - 1)
        if disc < 0:
            return []
        root = math.sqrt(disc)
        return [
            Intersection((-b - root) / (2 * a), self),
            Intersection((-b + root) / (2 * a), self),
        ]

    def _plane_hits(self, ray: Ray) -> list[Intersection]:
        if abs(ray.direction.y) < EPS:
            return []
        return [Intersection(-ray.origin.y / ray.direction.y, self)]

    def _within_height(self, ray: Ray, t: float) -> bool:
        y = ray.origin.y + t * ray.direction.y
        return -1 < y < 1

    def _caps(
        self, ray: Ray, inside: Callable[[float, float, float], bool]
    ) -> list[Intersection]:
        if not self.capped or abs(ray.direction.y) < EPS:
            return []
        hits = []
        for level in (self.minimum, self.maximum):
            t = (level - ray.origin.y) / ray.direction.y
            x = ray.origin.x + t * ray.direction.x
            z = ray.origin.z + t * ray.direction.z
            y = ray.origin.y + t * ray.direction.y
            if inside(x, y, z):
                hits.append(Intersection(t, self))
        return hits

    def _side_hits(self, ray: Ray, a: float, b: float, disc: float) -> list[Intersection]:
        root = math.sqrt(disc)
        candidates = ((-b - root) / (2 * a), (-b + root) / (2 * a))
        return [Intersection(t, self) for t in candidates if self._within_height(ray, t)]

    def _cylinder_hits(self, ray: Ray) -> list[Intersection]:
        caps = self._caps(ray, lambda x, y, z: x * x + z * z <= 1)
        d, o = ray.direction, ray.origin
        a = d.x**2 + d.z**2
        if abs(a) < EPS:
            return caps
        b = 2 * o.x * d.x + 2 * o.z * d.z
        c = o.x**2 + o.z**2 - 1
        disc = b * b - 4 * a * c
        if disc < 0:
            return caps
        return self._side_hits(ray, a, b, disc) + caps

    def _cone_hits(self, ray: Ray) -> list[Intersection]:
        d, o = ray.direction, ray.origin
        a = d.x**2 - d.y**2 + d.z**2
        b = 2 * o.x * d.x - 2 * o.y * d.y + 2 * o.z * d.z
        c = o.x**2 - o.y**2 + o.z**2
        if abs(a) < EPS and abs(b) < EPS:
            return []
        caps = self._caps(ray, lambda x, y, z: x * x + z * z <= abs(y))
        if abs(a) < EPS:
            return [Intersection(-c / (2 * b), self)] + caps
        disc = b * b - 4 * a * c
        if disc < 0:
            return caps
        return self._side_hits(ray, a, b, disc) + caps

    @staticmethod
    def _cylinder_normal(p: Tuple) -> Tuple:
        dist = p.x**2 + p.z**2
        if dist < 1 and abs(p.y - 1) < EPS:
            local = Tuple(0, 1, 0, POINT)
        elif dist < 1 and abs(p.y + 1) < EPS:
            local = vector(0, -1, 0)
        else:
            local = vector(p.x, 0, p.z)
        return local.normalize()

    @staticmethod
    def _cone_normal(p: Tuple) -> Tuple:
        dist = p.x**2 + p.z**2
        if dist < 1 and abs(p.y - 1) < EPS:
            local = vector(0, 1, 0)
        elif dist < 1 and abs(p.y + 1) < EPS:
            local = vector(0, -1, 0)
        else:
            y = math.sqrt(dist)
            if p.y > 0:
                y = -y
            local = vector(p.x, y, p.z)
        return local.normalize()


def reflect(incoming: Tuple, normal: Tuple) -> Tuple:
    """Mirror an incoming vector about a normal."""
    return incoming - normal * (2 * incoming.dot(normal))


def sphere() -> Shape:
    """A unit sphere at the origin."""
    return Shape(ShapeKind.SPHERE)


def plane() -> Shape:
    """The xz plane."""
    return Shape(ShapeKind.PLANE)


def cylinder() -> Shape:
    """A unit-radius open cylinder around the y axis, y in (-1, 1)."""
    return Shape(ShapeKind.CYLINDER)


def cone() -> Shape:
    """A double cone around the y axis, y in (-1, 1)."""
    return Shape(ShapeKind.CONE)