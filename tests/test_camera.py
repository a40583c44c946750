import math
from dataclasses import replace

import pytest

from minirt.camera import Camera, render, view_transform
from minirt.matrix import identity
from minirt.tuples import color, point, vector
from minirt.world import Light, Scene


def test_pixel_size_horizontal_and_vertical_canvas():
    wide = Camera(200, 125, math.pi / 2)
    tall = Camera(125, 200, math.pi / 2)
    assert math.isclose(wide.pixel_size, 0.01, abs_tol=1e-6)
    assert math.isclose(tall.pixel_size, wide.pixel_size, abs_tol=1e-6)


def test_pixel_size_matches_half_width():
    cam = Camera(300, 200, 1.2)
    assert math.isclose(cam.pixel_size, 2 * cam.half_width / 300)
    assert cam.half_height < cam.half_width


def test_invalid_camera_size_raises():
    with pytest.raises(ValueError):
        Camera(0, 10, 1.0)


def test_ray_through_centre():
    cam = Camera(201, 101, math.pi / 2)
    ray = cam.ray_for_pixel(100, 50)
    assert ray.origin.approx_eq(point(0, 0, 0))
    assert ray.direction.approx_eq(vector(0, 0, -1))


def test_ray_origin_follows_transform():
    frm = point(1, 2, 3)
    cam = replace(Camera(11, 11, 1.0), transform=view_transform(frm, vector(0, 0, 1)))
    ray = cam.ray_for_pixel(3, 7)
    assert ray.origin.approx_eq(frm)
    assert math.isclose(ray.direction.magnitude(), 1.0, abs_tol=1e-9)


def test_default_orientation_gives_identity():
    m = view_transform(point(0, 0, 0), vector(0, 0, -1))
    expected = identity(4)
    for i in range(4):
        for j in range(4):
            assert m[i, j] == pytest.approx(expected[i, j], abs=1e-9)
    assert m.apply(point(1, 2, 3)).approx_eq(point(1, 2, 3))


@pytest.mark.parametrize(
    "direction",
    [vector(1, 0, 0), vector(0, 1, 0), vector(0, -1, 0), vector(1, 2, -3)],
)
def test_view_transform_maps_orientation_to_minus_z(direction):
    frm = point(4, -2, 7)
    m = view_transform(frm, direction)
    assert m.apply(frm).approx_eq(point(0, 0, 0))
    assert m.apply(direction.normalize()).approx_eq(vector(0, 0, -1))


def test_render_small_scene():
    from minirt.shapes import sphere

    scene = Scene(
        objects=[sphere()],
        lights=[Light(point(-10, 10, -10), color(1, 1, 1))],
        ambient=color(0.1, 0.1, 0.1),
    )
    cam = replace(
        Camera(11, 11, math.pi / 2),
        transform=view_transform(point(0, 0, -5), vector(0, 0, 1)),
    )
    canvas = render(cam, scene)
    assert (canvas.width, canvas.height) == (11, 11)
    assert canvas.get_pixel(5, 5) > 0
    assert canvas.get_pixel(0, 0) == 0