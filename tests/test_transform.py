import pytest

from mygl.funcs import length
from mygl.matrix import mat4
from mygl.transform import look_at, ortho, perspective, scale, translate
from mygl.vector import Vec3, Vec4


def test_scale_of_identity_puts_factors_on_diagonal():
    result = scale(mat4(1.0), Vec3(2.0, 3.0, 4.0))
    assert result == mat4(
        2.0, 0.0, 0.0, 0.0,
        0.0, 3.0, 0.0, 0.0,
        0.0, 0.0, 4.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    )


def test_scale_is_applied_after_existing_matrix():
    m = translate(mat4(1.0), Vec3(1.0, 2.0, 3.0))
    s = Vec3(2.0, 5.0, 7.0)
    assert scale(m, s) == scale(mat4(1.0), s) * m


def test_translate_moves_origin_to_offset():
    result = translate(mat4(1.0), Vec3(1.0, 2.0, 3.0)) * Vec4(0.0, 0.0, 0.0, 1.0)
    assert result == Vec4(1.0, 2.0, 3.0, 1.0)


def test_translations_compose_additively():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, 5.0, 6.0)
    assert translate(translate(mat4(1.0), a), b) == translate(mat4(1.0), a + b)


def test_look_at_default_orientation_is_identity():
    view = look_at(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0), Vec3(0.0, 1.0, 0.0))
    assert view == mat4(1.0)


def test_look_at_maps_eye_to_origin():
    eye = Vec3(1.0, 2.0, 3.0)
    view = look_at(eye, Vec3(1.0, 2.0, -2.0), Vec3(0.0, 1.0, 0.0))
    assert list(view * Vec4(1.0, 2.0, 3.0, 1.0)) == pytest.approx([0.0, 0.0, 0.0, 1.0])


def test_look_at_puts_focus_on_negative_z_axis():
    eye = Vec3(1.0, 2.0, 3.0)
    focus = Vec3(1.0, 2.0, -2.0)
    view = look_at(eye, focus, Vec3(0.0, 1.0, 0.0))
    x, y, z, w = view * Vec4(1.0, 2.0, -2.0, 1.0)
    assert (x, y, w) == pytest.approx((0.0, 0.0, 1.0))
    assert z == pytest.approx(-length(focus - eye))


def test_ortho_maps_near_corner_to_cube_corner():
    proj = ortho(0.0, 800.0, 0.0, 600.0, 1.0, -1000.0)
    result = proj * Vec4(0.0, 0.0, 1.0, 1.0)
    assert list(result) == pytest.approx([-1.0, -1.0, 1.0, 1.0])


def test_ortho_maps_far_corner_to_opposite_cube_corner():
    proj = ortho(0.0, 800.0, 0.0, 600.0, 1.0, -1000.0)
    result = proj * Vec4(800.0, 600.0, -1000.0, 1.0)
    assert list(result) == pytest.approx([1.0, 1.0, -1.0, 1.0])


def test_perspective_is_identity():
    assert perspective(45.0, 4.0 / 3.0, 0.1, 100.0) == mat4(1.0)