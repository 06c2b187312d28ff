from array import array

import pytest

from mygl.buffers import FrameBuffer
from mygl.enums import Capability, DrawMode
from mygl.matrix import mat4
from mygl.pipeline import draw_pixel, render
from mygl.shader import Shader, Var
from mygl.vector import Vec3, Vec4

W = H = 8
RED = Vec4(1.0, 0.0, 0.0, 1.0)
GREEN = Vec4(0.0, 1.0, 0.0, 1.0)


def viewport():
    return mat4(
        W / 2, 0.0, 0.0, W / 2,
        0.0, H / 2, 0.0, H / 2,
        0.0, 0.0, 0.5, 0.5,
        0.0, 0.0, 0.0, 1.0,
    )


def vertex(x, y, z=0.0):
    return {0: Var(Vec3(x, y, z))}


def position_shader(layout, uniforms):
    return layout[0].value.extend(1.0), {}


def uniform_color(frag_coord, uniforms, inputs):
    return uniforms["color"].value


def make_shader(color=RED):
    shader = Shader(position_shader, uniform_color)
    shader.set_uniform("color", color)
    return shader


def pixel(fbo, x, y):
    base = (y * fbo.width + x) * 4
    return bytes(fbo.color[base:base + 4])


def lit(fbo):
    return {
        ((i // 4) % fbo.width, (i // 4) // fbo.width)
        for i in range(0, len(fbo.color), 4)
        if any(fbo.color[i:i + 4])
    }


def draw(mode, vertices, shader=None, fbo=None, depth=False):
    fbo = fbo if fbo is not None else FrameBuffer(W, H)
    render(
        mode, fbo, W, H, viewport(), shader or make_shader(), vertices,
        {Capability.DEPTH_TEST: depth},
    )
    return fbo


BIG = [vertex(-1.0, -1.0), vertex(3.0, -1.0), vertex(-1.0, 3.0)]


def test_draw_pixel_writes_one_pixel():
    fbo = FrameBuffer(4, 3)
    draw_pixel(fbo, 4, 2, 1, (10, 20, 30, 40))
    assert pixel(fbo, 2, 1) == bytes([10, 20, 30, 40])
    assert lit(fbo) == {(2, 1)}


def test_draw_pixel_outside_raises():
    fbo = FrameBuffer(4, 3)
    with pytest.raises(IndexError):
        draw_pixel(fbo, 4, 0, 3, (1, 2, 3, 4))


def test_triangle_fills_interior():
    fbo = draw(DrawMode.TRIANGLES, BIG)
    assert pixel(fbo, 4, 4) == bytes([255, 0, 0, 255])
    assert len(lit(fbo)) > 1


def test_color_rounding_half_away_from_zero():
    fbo = draw(DrawMode.TRIANGLES, BIG, make_shader(Vec4(1.0, 0.5, 0.0, 1.0)))
    assert pixel(fbo, 4, 4) == bytes([255, 128, 0, 255])


def test_discarded_fragments_leave_buffer_untouched():
    shader = Shader(position_shader, lambda coord, uniforms, inputs: None)
    fbo = draw(DrawMode.TRIANGLES, BIG, shader)
    assert lit(fbo) == set()


def test_triangle_fully_outside_clip_is_dropped():
    fbo = draw(
        DrawMode.TRIANGLES, [vertex(2.0, 2.0), vertex(3.0, 2.0), vertex(2.0, 3.0)]
    )
    assert lit(fbo) == set()


def test_vertex_outputs_reach_fragment_stage():
    blue = Vec4(0.0, 0.0, 1.0, 1.0)

    def vs(layout, uniforms):
        return layout[0].value.extend(1.0), {"shade": Var(blue)}

    shader = Shader(vs, lambda coord, uniforms, inputs: inputs["shade"].value)
    fbo = draw(DrawMode.TRIANGLES, BIG, shader)
    pixels = lit(fbo)
    assert pixels
    assert {pixel(fbo, x, y) for x, y in pixels} == {bytes([0, 0, 255, 255])}


def _cleared():
    fbo = FrameBuffer(W, H)
    fbo.depth[:] = array("f", [-1.0]) * len(fbo.depth)
    return fbo


def test_depth_test_keeps_nearer_fragment():
    fbo = _cleared()
    near = [vertex(-1.0, -1.0, 0.5), vertex(3.0, -1.0, 0.5), vertex(-1.0, 3.0, 0.5)]
    far = [vertex(-1.0, -1.0, -0.5), vertex(3.0, -1.0, -0.5), vertex(-1.0, 3.0, -0.5)]
    draw(DrawMode.TRIANGLES, near, make_shader(RED), fbo, depth=True)
    draw(DrawMode.TRIANGLES, far, make_shader(GREEN), fbo, depth=True)
    assert pixel(fbo, 4, 4) == bytes([255, 0, 0, 255])


def test_without_depth_test_last_draw_wins():
    fbo = _cleared()
    near = [vertex(-1.0, -1.0, 0.5), vertex(3.0, -1.0, 0.5), vertex(-1.0, 3.0, 0.5)]
    far = [vertex(-1.0, -1.0, -0.5), vertex(3.0, -1.0, -0.5), vertex(-1.0, 3.0, -0.5)]
    draw(DrawMode.TRIANGLES, near, make_shader(RED), fbo)
    draw(DrawMode.TRIANGLES, far, make_shader(GREEN), fbo)
    assert pixel(fbo, 4, 4) == bytes([0, 255, 0, 255])


def test_horizontal_line_stays_on_one_row():
    fbo = draw(DrawMode.LINES, [vertex(-0.5, 0.0), vertex(0.5, 0.0)])
    pixels = lit(fbo)
    assert len(pixels) > 1
    assert len({y for _, y in pixels}) == 1


def test_lines_ignores_unpaired_vertex():
    paired = draw(DrawMode.LINES, [vertex(-0.5, 0.0), vertex(0.5, 0.0)])
    extra = draw(
        DrawMode.LINES, [vertex(-0.5, 0.0), vertex(0.5, 0.0), vertex(0.0, -0.5)]
    )
    assert extra.color == paired.color


def test_line_loop_single_vertex_draws_its_point():
    fbo = draw(DrawMode.LINE_LOOP, [vertex(0.0, 0.0)])
    assert len(lit(fbo)) == 1


def test_line_loop_empty_draws_nothing():
    fbo = draw(DrawMode.LINE_LOOP, [])
    assert lit(fbo) == set()


def test_line_strip_matches_lines_for_two_vertices():
    ends = [vertex(-0.5, -0.5), vertex(0.5, 0.25)]
    assert draw(DrawMode.LINE_STRIP, ends).color == draw(DrawMode.LINES, ends).color


def test_triangles_needs_three_vertices():
    fbo = draw(DrawMode.TRIANGLES, BIG[:2])
    assert lit(fbo) == set()


QUAD = [
    vertex(-0.75, -0.75),
    vertex(0.75, -0.75),
    vertex(0.75, 0.75),
    vertex(-0.75, 0.75),
]


def test_fan_equals_split_triangles():
    a, b, c, d = QUAD
    fan = draw(DrawMode.TRIANGLE_FAN, [a, b, c, d])
    tris = draw(DrawMode.TRIANGLES, [a, b, c, a, c, d])
    assert lit(fan)
    assert fan.color == tris.color


def test_strip_equals_split_triangles():
    a, b, c, d = QUAD
    strip = draw(DrawMode.TRIANGLE_STRIP, [a, b, d, c])
    tris = draw(DrawMode.TRIANGLES, [a, b, d, b, d, c])
    assert lit(strip)
    assert strip.color == tris.color


def test_point_draws_single_pixel():
    fbo = draw(DrawMode.POINTS, [vertex(0.5, 0.5)])
    pixels = lit(fbo)
    assert len(pixels) == 1
    ((x, y),) = pixels
    assert pixel(fbo, x, y) == bytes([255, 0, 0, 255])


def test_point_with_negative_coordinate_is_skipped():
    fbo = draw(DrawMode.POINTS, [vertex(-0.5, 0.5)])
    assert lit(fbo) == set()


def test_missing_stage_raises():
    with pytest.raises(ValueError):
        draw(DrawMode.TRIANGLES, BIG, Shader(position_shader, None))


def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        draw(99, BIG)