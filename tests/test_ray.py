import pytest

from minirt.matrix import identity, scaling, translation
from minirt.ray import Ray
from minirt.tuples import POINT, VECTOR, point, vector


def test_position_at_zero_is_origin():
    r = Ray(point(2, 3, 4), vector(1, 0, 0))
    assert r.position(0) == r.origin


def test_position_along_ray():
    r = Ray(point(2, 3, 4), vector(1, 0, 0))
    assert r.position(-1).approx_eq(point(1, 3, 4))
    p = r.position(2.5)
    assert p.w == POINT
    assert p.approx_eq(r.origin + r.direction * 2.5)


def test_positions_are_evenly_spaced():
    r = Ray(point(0, 1, -2), vector(0.5, -1, 2))
    step = r.position(2) - r.position(1)
    assert step.approx_eq(r.direction)
    assert step.w == VECTOR


def test_translate_moves_origin_only():
    r = Ray(point(1, 2, 3), vector(0, 1, 0))
    offset = vector(3, 4, 5)
    moved = r.transform(translation(offset))
    assert moved.origin.approx_eq(r.origin + offset)
    assert moved.direction == r.direction


def test_scale_affects_both():
    r = Ray(point(1, 2, 3), vector(0, 1, 0))
    factors = vector(2, 3, 4)
    scaled = r.transform(scaling(factors))
    assert scaled.origin.approx_eq(r.origin.hadamard(factors))
    assert scaled.direction.approx_eq(r.direction.hadamard(factors))


def test_transform_round_trip():
    r = Ray(point(1, -2, 3), vector(0.3, 0.4, -0.5))
    m = translation(vector(1, 2, 3)) @ scaling(vector(2, 2, 2))
    back = r.transform(m).transform(m.inverse())
    assert back.origin.approx_eq(r.origin)
    assert back.direction.approx_eq(r.direction)


def test_identity_transform_is_noop():
    r = Ray(point(1, 2, 3), vector(4, 5, 6))
    assert r.transform(identity(4)) == r


def test_transform_rejects_small_matrix():
    r = Ray(point(1, 2, 3), vector(4, 5, 6))
    with pytest.raises(ValueError):
        r.transform(identity(3))