"""The camera: view transform, primary rays and rendering a whole image."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field

from minirt.canvas import Canvas
from minirt.matrix import Matrix, from_rows, identity, translation
from minirt.ray import Ray
from minirt.tuples import Tuple, point, vector
from minirt.world import Scene, rgb_to_int


def _single(value: float) -> float:
    """Round a value to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Camera:
    """A pinhole camera with a canvas size, field of view and transform."""

    horizontal_size: float
    vertical_size: float
    field_of_view: float
    transform: Matrix = field(default_factory=lambda: identity(4))
    half_width: float = field(init=False)
    half_height: float = field(init=False)
    pixel_size: float = field(init=False)

    def __post_init__(self) -> None:
        if self.horizontal_size <= 0 or self.vertical_size <= 0:
            raise ValueError("camera dimensions must be positive")
        half_view = math.tan(self.field_of_view / 2)
        aspect = _single(self.horizontal_size / self.vertical_size)
        if aspect >= 1:
            half_width = half_view
            half_height = half_width / aspect
        else:
            half_height = half_view
            half_width = aspect * half_height
        object.__setattr__(self, "half_width", half_width)
        object.__setattr__(self, "half_height", half_height)
        object.__setattr__(self, "pixel_size", 2 * half_width / self.horizontal_size)

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """The world-space ray through the centre of a pixel."""
        x_world = self.half_width - (px + 0.5) * self.pixel_size
        y_world = self.half_height - (py + 0.5) * self.pixel_size
        inverse = self.transform.inverse()
        pixel = inverse.apply(point(x_world, y_world, -1))
        origin = inverse.apply(point(0, 0, 0))
        return Ray(origin, (pixel - origin).normalize())


def _non_parallel(v: Tuple) -> Tuple:
    if v.cross(vector(0, 1, 0)).magnitude() != 0:
        return vector(0, 1, 0)
    if v.cross(vector(1, 0, 0)).magnitude() != 0:
        return vector(0, 0, 1)
    return vector(1, 0, 0)


def view_transform(origin: Tuple, orientation: Tuple) -> Matrix:
    """World-to-camera matrix for a camera at origin looking along orientation."""
    forward = orientation.normalize()
    up = _non_parallel(orientation).normalize()
    left = forward.cross(up).normalize()
    true_up = left.cross(forward)
    orient = from_rows(left, true_up, forward * -1, point(0, 0, 0))
    return orient @ translation(Tuple(-origin.x, -origin.y, -origin.z, 0))


def render(camera: Camera, scene: Scene) -> Canvas:
    """Trace one ray per pixel and paint the results onto a new canvas."""
    canvas = Canvas(int(camera.horizontal_size), int(camera.vertical_size))
    for x in range(canvas.width):
        for y in range(canvas.height):
            colour = scene.color_at(camera.ray_for_pixel(x, y), 0)
            canvas.put_pixel(x, y, rgb_to_int(colour))
    return canvas