"""Scenes: ray casting against every object, lighting, shadows and reflection."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from minirt.ray import Ray
from minirt.shapes import Intersection, Shape, reflect
from minirt.tuples import EPS, Tuple, color

if TYPE_CHECKING:
    from minirt.camera import Camera

MAX_INTERSECTIONS = 1024
MAX_REFLECTION_DEPTH = 2

_BLACK = color(0, 0, 0)


@dataclass(frozen=True)
class Light:
    """A point light source."""

    position: Tuple
    intensity: Tuple


@dataclass(frozen=True)
class Computations:
    """Everything needed to shade the point where a ray hit a shape."""

    hit: Intersection
    shape: Shape
    point: Tuple
    eyev: Tuple
    normalv: Tuple
    reflectv: Tuple
    inside: bool
    above_point: Tuple
    under_point: Tuple


def hit(intersections: Iterable[Intersection]) -> Optional[Intersection]:
    """The nearest intersection with t greater than EPS, or None."""
    best: Optional[Intersection] = None
    for candidate in reversed(list(intersections)):
        if candidate.t > EPS and (best is None or best.t > candidate.t):
            best = candidate
    return best


def prepare_computations(
    intersections: Sequence[Intersection], ray: Ray
) -> Computations:
    """Shading data for the visible hit among the intersections."""
    nearest = hit(intersections)
    if nearest is None:
        raise ValueError("no visible intersection to prepare")
    shape = nearest.shape
    where = ray.position(nearest.t)
    eyev = ray.direction * -1
    normalv = shape.normal_at(where)
    inside = normalv.dot(eyev) < 0
    if inside:
        normalv = normalv * -1
    offset = normalv * EPS
    return Computations(
        hit=nearest,
        shape=shape,
        point=where,
        eyev=eyev,
        normalv=normalv,
        reflectv=reflect(ray.direction, normalv).normalize(),
        inside=inside,
        above_point=where + offset,
        under_point=where - offset,
    )


@dataclass
class Scene:
    """Objects, lights, ambient colour and the camera that views them."""

    objects: list[Shape] = field(default_factory=list)
    lights: list[Light] = field(default_factory=list)
    ambient: Tuple = _BLACK
    camera: Optional["Camera"] = None

    def intersect(self, ray: Ray) -> list[Intersection]:
        """All intersections of the ray with every object, in object order."""
        found: list[Intersection] = []
        for shape in self.objects:
            for item in shape.intersect(ray):
                if len(found) >= MAX_INTERSECTIONS:
                    return found
                found.append(item)
        return found

    def color_at(self, ray: Ray, depth: int = 0) -> Tuple:
        """Colour seen along a ray; black when nothing is hit."""
        intersections = self.intersect(ray)
        nearest = hit(intersections)
        if nearest is None or nearest.t < EPS:
            return _BLACK
        return self.shade_hit(prepare_computations(intersections, ray), depth)

    def shade_hit(self, comps: Computations, depth: int = 0) -> Tuple:
        """Sum of every light's contribution plus the reflected colour."""
        surface = _BLACK
        for light in self.lights:
            shadowed = self.is_shadowed(comps.above_point, light)
            surface = self.lighting(comps, light, shadowed) + surface
        return self.reflected_color(comps, depth) + surface

    def is_shadowed(self, point: Tuple, light: Light) -> bool:
        """True when an object lies between the point and the light."""
        to_light = light.position - point
        distance = to_light.magnitude()
        nearest = hit(self.intersect(Ray(point, to_light.normalize())))
        return nearest is not None and nearest.t > EPS and nearest.t - EPS <= distance

    def lighting(self, comps: Computations, light: Light, in_shadow: bool) -> Tuple:
        """Phong shading of the hit point by one light."""
        material = comps.shape.material
        surface = material.color
        if material.pattern.enabled:
            surface = material.pattern.color_at(comps.shape.transform, comps.point)
        effective = surface.hadamard(light.intensity)
        ambient = effective.hadamard(self.ambient)
        if in_shadow:
            return ambient
        lightv = (light.position - comps.point).normalize()
        return _diffuse_specular(lightv, comps, effective, light) + ambient

    def reflected_color(self, comps: Computations, depth: int = 0) -> Tuple:
        """Colour contributed by a mirror reflection, limited in depth."""
        depth += 1
        reflective = comps.shape.material.reflective
        if reflective < EPS or depth > MAX_REFLECTION_DEPTH:
            return _BLACK
        bounce = Ray(comps.above_point, comps.reflectv)
        return self.color_at(bounce, depth) * reflective


def _diffuse_specular(
    lightv: Tuple, comps: Computations, effective: Tuple, light: Light
) -> Tuple:
    material = comps.shape.material
    diffuse = _BLACK
    specular = _BLACK
    light_dot_normal = lightv.dot(comps.normalv)
    if light_dot_normal >= 0:
        diffuse = effective * (material.diffuse * light_dot_normal)
        reflect_dot_eye = reflect(lightv * -1, comps.normalv).dot(comps.eyev)
        if reflect_dot_eye > 0:
            factor = math.pow(reflect_dot_eye, material.shininess)
            specular = light.intensity * (material.specular * factor)
    return diffuse + specular


def _to_byte(channel: float) -> int:
    scaled = channel * 255
    if math.isnan(scaled):
        return 0
    if math.isinf(scaled):
        return 255 if scaled > 0 else 0
    rounded = int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))
    return max(0, min(255, rounded))


def rgb_to_int(c: Tuple) -> int:
    """Pack a colour into 0xRRGGBB, clamping each channel."""
    return (_to_byte(c.x) << 16) | (_to_byte(c.y) << 8) | _to_byte(c.z)


def limit_value(channel: float) -> float:
    """Scale a channel by 256 and clamp it to [0, 255]."""
    value = channel * 256
    if value < 0:
        return 0.0
    if value > 255:
        return 255.0
    return value