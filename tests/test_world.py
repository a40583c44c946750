import math
from dataclasses import replace

import pytest

from minirt.matrix import translation
from minirt.patterns import Material
from minirt.ray import Ray
from minirt.shapes import Intersection, plane, sphere
from minirt.tuples import color, point, vector
from minirt.world import (
    MAX_INTERSECTIONS,
    Light,
    Scene,
    hit,
    limit_value,
    prepare_computations,
    rgb_to_int,
)


def _lit_scene():
    return Scene(
        objects=[sphere()],
        lights=[Light(point(-10, 10, -10), color(1, 1, 1))],
        ambient=color(0.1, 0.1, 0.1),
    )


def test_hit_picks_smallest_positive():
    s = sphere()
    xs = [Intersection(5, s), Intersection(-3, s), Intersection(2, s)]
    assert hit(xs).t == 2


def test_hit_none_when_all_negative():
    s = sphere()
    assert hit([Intersection(-1, s), Intersection(-2, s)]) is None


def test_hit_ignores_values_below_eps():
    s = sphere()
    assert hit([Intersection(1e-7, s), Intersection(3, s)]).t == 3


def test_scene_intersect_points_lie_on_sphere():
    scene = Scene(objects=[sphere()])
    ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    xs = scene.intersect(ray)
    assert len(xs) == 2
    for item in xs:
        p = ray.position(item.t)
        assert math.isclose(math.sqrt(p.x**2 + p.y**2 + p.z**2), 1.0, abs_tol=1e-9)


def test_scene_intersect_is_capped():
    scene = Scene(objects=[sphere() for _ in range(600)])
    xs = scene.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
    assert len(xs) == MAX_INTERSECTIONS


def test_prepare_inside_flips_normal():
    ray = Ray(point(0, 0, 0), vector(0, 0, 1))
    s = sphere()
    comps = prepare_computations(s.intersect(ray), ray)
    assert comps.inside is True
    assert comps.normalv.dot(comps.eyev) > 0
    assert comps.shape is s


def test_prepare_outside_offsets_points():
    ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    comps = prepare_computations(sphere().intersect(ray), ray)
    assert comps.inside is False
    assert comps.above_point.z < comps.point.z < comps.under_point.z


def test_prepare_without_hit_raises():
    with pytest.raises(ValueError):
        prepare_computations([], Ray(point(0, 0, 0), vector(0, 0, 1)))


def test_color_at_miss_is_black():
    scene = _lit_scene()
    assert scene.color_at(Ray(point(0, 0, -5), vector(0, 1, 0))) == color(0, 0, 0)


def test_color_at_lit_is_brighter_than_ambient():
    scene = _lit_scene()
    c = scene.color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
    assert c.x > scene.ambient.x
    assert math.isclose(c.x, c.y) and math.isclose(c.y, c.z)


def test_is_shadowed_cases():
    scene = _lit_scene()
    light = scene.lights[0]
    assert scene.is_shadowed(point(10, -10, 10), light) is True
    assert scene.is_shadowed(point(0, 10, 0), light) is False
    assert scene.is_shadowed(point(-20, 20, -20), light) is False


def test_lighting_in_shadow_is_ambient_only():
    scene = _lit_scene()
    ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    comps = prepare_computations(scene.intersect(ray), ray)
    shaded = scene.lighting(comps, scene.lights[0], True)
    assert shaded.approx_eq(scene.ambient)
    lit = scene.lighting(comps, scene.lights[0], False)
    assert lit.x > shaded.x


def test_reflected_color_of_matte_surface_is_black():
    scene = _lit_scene()
    ray = Ray(point(0, 0, -5), vector(0, 0, 1))
    comps = prepare_computations(scene.intersect(ray), ray)
    assert scene.reflected_color(comps, 0) == color(0, 0, 0)


def _mirror_scene():
    floor = replace(plane(), material=Material(reflective=0.5))
    ball = replace(sphere(), transform=translation(vector(0, 2, 0)))
    scene = Scene(
        objects=[floor, ball],
        lights=[Light(point(-10, 10, -10), color(1, 1, 1))],
        ambient=color(0.1, 0.1, 0.1),
    )
    s = math.sqrt(2) / 2
    ray = Ray(point(0, 1, -3), vector(0, -s, s))
    return scene, ray


def test_reflected_color_sees_sphere():
    scene, ray = _mirror_scene()
    comps = prepare_computations(scene.intersect(ray), ray)
    assert comps.shape is scene.objects[0]
    assert scene.reflected_color(comps, 0).x > 0


def test_reflected_color_stops_at_depth_limit():
    scene, ray = _mirror_scene()
    comps = prepare_computations(scene.intersect(ray), ray)
    assert scene.reflected_color(comps, 2) == color(0, 0, 0)


def test_rgb_to_int_packing_and_clamping():
    assert rgb_to_int(color(1, 0, 0)) == 0xFF0000
    assert rgb_to_int(color(1, 1, 1)) == 0xFFFFFF
    assert rgb_to_int(color(0, 0, 0)) == 0
    assert rgb_to_int(color(5, -5, 0)) == 0xFF0000


def test_limit_value_clamps():
    assert limit_value(2.0) == 255
    assert limit_value(-1.0) == 0
    assert limit_value(0.5) == 128.0