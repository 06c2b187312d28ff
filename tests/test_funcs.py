import math

import pytest

from mygl.funcs import cross, dot, length, normalize, radians, reflect, transpose
from mygl.matrix import Matrix, mat3
from mygl.vector import Vec2, Vec3


def test_dot_perpendicular_is_zero():
    assert dot(Vec3(1, 0, 0), Vec3(0, 1, 0)) == 0


def test_dot_with_self_is_squared_length():
    v = Vec3(1, 2, 2)
    assert dot(v, v) == pytest.approx(length(v) ** 2)


def test_dot_length_mismatch_raises():
    with pytest.raises(ValueError):
        dot(Vec2(1, 2), Vec3(1, 2, 3))


def test_normalize_has_unit_length():
    v = normalize(Vec3(3, -4, 12))
    assert length(v) == pytest.approx(1.0)


def test_normalize_keeps_direction():
    v = Vec3(0, 5, 0)
    assert normalize(v) == Vec3(0, 1, 0)


def test_transpose_involution_and_shape():
    m = Matrix([[1, 2, 3], [4, 5, 6]])
    t = transpose(m)
    assert t.shape == (3, 2)
    assert t[2][0] == m[0][2]
    assert transpose(t) == m


def test_cross_of_axes():
    assert cross(Vec3(1, 0, 0), Vec3(0, 1, 0)) == Vec3(0, 0, 1)


def test_cross_is_orthogonal_and_anticommutative():
    a = Vec3(1, 2, 3)
    b = Vec3(-2, 0.5, 4)
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0.0)
    assert dot(c, b) == pytest.approx(0.0)
    assert cross(b, a) == -c


def test_cross_requires_three_components():
    with pytest.raises(ValueError):
        cross(Vec2(1, 2), Vec2(3, 4))


def test_reflect_along_normal_returns_same_direction():
    r = reflect(Vec3(0, 2, 0), Vec3(0, 1, 0))
    assert list(r) == pytest.approx([0, 1, 0])


def test_reflect_preserves_unit_length():
    r = reflect(Vec3(1, 1, 0), Vec3(0, 1, 0))
    assert length(r) == pytest.approx(1.0)
    assert r.y == pytest.approx(1 / math.sqrt(2))


def test_radians_of_half_turn_is_pi_constant():
    assert radians(180.0) == pytest.approx(3.1415927)


def test_radians_is_linear():
    assert radians(90.0) * 2 == pytest.approx(radians(180.0))


def test_transpose_of_identity():
    assert transpose(mat3(1.0)) == mat3(1.0)