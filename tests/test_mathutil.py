import math

import pytest

from silhouette.mathutil import (
    FLOAT_EPSILON,
    Rect,
    Transform,
    Vec2,
    clamp,
    cos_deg,
    deg_to_rad,
    distance,
    distance_squared,
    float_equals,
    float_greater,
    float_greater_or_equal,
    float_is_zero,
    float_less,
    float_less_or_equal,
    float_nearly_equals,
    float_nearly_zero,
    float_sign,
    int_sign,
    length,
    length_squared,
    rotation_to_unit_vector,
    round_to_int_vec,
    sign,
    sin_deg,
    to_float_vec,
    truncate_to_int_vec,
)


@pytest.mark.parametrize("x", [-7, -1, 0, 1, 42])
def test_int_sign_times_abs_is_value(x):
    assert sign(x) * abs(x) == x
    assert sign(-x) == -sign(x)
    assert float_sign(x) == float(sign(x))


def test_float_sign_has_dead_zone():
    assert float_is_zero(sign(FLOAT_EPSILON / 2))
    assert float_is_zero(sign(-FLOAT_EPSILON / 2))
    assert sign(2.5) == -sign(-2.5)
    assert sign(2.5) > 0


@pytest.mark.parametrize("x", [-3.0, -0.0005, 0.0, 0.0005, 3.0])
def test_int_sign_matches_float_sign(x):
    result = int_sign(x)
    assert isinstance(result, int)
    assert result == int(sign(x))


def test_float_comparisons():
    assert float_equals(1.0, 1.0005)
    assert not float_equals(1.0, 1.002)
    assert float_nearly_equals(1.0, 1.4, 0.5)
    assert not float_less(1.0, 1.0005)
    assert float_less(1.0, 1.01)
    assert not float_greater(1.0005, 1.0)
    assert float_greater(1.01, 1.0)
    assert float_less_or_equal(1.0005, 1.0)
    assert float_greater_or_equal(0.9995, 1.0)
    assert float_nearly_zero(0.5, 1.0)
    assert not float_is_zero(0.01)


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10


def test_length_and_distance_are_consistent():
    v = Vec2(3, 4)
    assert math.isclose(length(v) ** 2, length_squared(v))
    p1, p2 = Vec2(1.0, 2.0), Vec2(-4.0, 7.5)
    assert math.isclose(distance(p1, p2), distance(p2, p1))
    assert math.isclose(distance_squared(p1, p2), length_squared(p2 - p1))


def test_trig_helpers():
    assert math.isclose(deg_to_rad(180.0), math.pi, rel_tol=1e-9)
    for angle in (0.0, 33.0, 210.0):
        assert math.isclose(sin_deg(angle) ** 2 + cos_deg(angle) ** 2, 1.0)
        assert math.isclose(length(rotation_to_unit_vector(angle)), 1.0)
    up = rotation_to_unit_vector(0.0)
    down = rotation_to_unit_vector(180.0)
    assert math.isclose(up.x, -down.x, abs_tol=1e-9)
    assert math.isclose(up.y, -down.y, abs_tol=1e-9)


def test_vector_conversions():
    assert round_to_int_vec(Vec2(2.5, -2.5)) == Vec2(3, -3)
    assert truncate_to_int_vec(Vec2(2.7, -2.7)) == Vec2(2, -2)
    original = Vec2(3, -4)
    converted = to_float_vec(original)
    assert isinstance(converted.x, float)
    assert round_to_int_vec(converted) == original


def test_vector_arithmetic():
    a, b = Vec2(1, 2), Vec2(3, 5)
    assert (a + b) - b == a
    assert -a + a == Vec2(0, 0)
    assert 2 * a == a + a
    assert tuple(a) == (1, 2)


def test_rect_intersects():
    a = Rect(0, 0, 10, 10)
    assert a.intersects(Rect(5, 5, 10, 10))
    assert Rect(5, 5, 10, 10).intersects(a)
    assert not a.intersects(Rect(10, 0, 5, 5))
    assert not a.intersects(Rect(0, 10, 5, 5))
    assert a.intersects(Rect(12, 12, -4, -4))


def test_rect_contains():
    r = Rect(2, 3, 4, 5)
    assert r.contains(Vec2(2, 3))
    assert not r.contains(Vec2(r.right, r.top))
    assert not r.contains(Vec2(r.left, r.bottom))
    assert r.contains(Vec2(r.right - 1, r.bottom - 1))


def test_rect_offset_and_vectors():
    r = Rect.from_vectors(Vec2(1, 2), Vec2(3, 4))
    assert r.position == Vec2(1, 2)
    assert r.size == Vec2(3, 4)
    assert r.offset(5, -1).position == Vec2(6, 1)
    assert r.offset(5, -1).size == r.size


def test_transform_identity_and_translation():
    p = Vec2(3.0, -2.0)
    assert Transform.identity().apply(p) == p
    offset = Vec2(10.0, 20.0)
    assert Transform.identity().translated(offset).apply(p) == p + offset


def test_transform_rotation_and_scale():
    rotated = Transform.identity().rotated(90.0).apply(Vec2(1.0, 0.0))
    assert math.isclose(rotated.x, 0.0, abs_tol=1e-9)
    assert math.isclose(rotated.y, 1.0)
    assert Transform.identity().scaled(2.0, 3.0).apply(Vec2(1.0, 1.0)) == Vec2(2.0, 3.0)


def test_transform_combine_applies_right_first():
    t1 = Transform.identity().rotated(30.0).scaled(2.0, 0.5)
    t2 = Transform.identity().translated(Vec2(4.0, -1.0))
    p = Vec2(1.5, 2.5)
    combined = t1.combine(t2).apply(p)
    sequential = t1.apply(t2.apply(p))
    assert math.isclose(combined.x, sequential.x)
    assert math.isclose(combined.y, sequential.y)


def test_gl_matrix_layout():
    t = Transform(1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
    m = t.gl_matrix
    assert (m[0], m[1], m[4], m[5], m[12], m[13]) == (t.a, t.d, t.b, t.e, t.c, t.f)