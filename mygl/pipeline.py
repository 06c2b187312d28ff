"""Primitive assembly, clipping and fragment output for a frame buffer."""

from __future__ import annotations

import math
from typing import Callable, Iterable, Mapping, Optional, Sequence

from mygl.buffers import FrameBuffer
from mygl.enums import Capability, DrawMode
from mygl.matrix import Matrix
from mygl.rasterizer import rasterize_line, rasterize_triangle
from mygl.shader import Shader, Var
from mygl.vector import Vec4, Vector

Vertex = Mapping[int, Var]


def _to_channel(value: float) -> int:
    """Scale a 0..1 colour component to a byte, rounding half away from zero."""
    scaled = 255.0 * value
    if scaled >= 0:
        rounded = math.floor(scaled + 0.5)
    else:
        rounded = -math.floor(-scaled + 0.5)
    return min(max(int(rounded), 0), 255)


def draw_pixel(fbo: FrameBuffer, width: int, x, y, rgba: Iterable[int]) -> None:
    """Write the RGBA bytes of the pixel at (``x``, ``y``) in a buffer ``width`` wide."""
    base = (int(y) * width + int(x)) * 4
    if base < 0 or base + 4 > len(fbo.color):
        raise IndexError(f"pixel ({x}, {y}) is outside the frame buffer")
    fbo.color[base:base + 4] = bytes(rgba)


def _in_screen(pos: Vector, width: int, height: int) -> bool:
    return 0.0 <= pos[0] < width and 0.0 <= pos[1] < height and 0.0 <= pos[2] <= 1.0


def _inside_clip(pos: Vector) -> bool:
    return all(-1.0 <= c <= 1.0 for c in pos[:3])


def _run_vertex(shader: Shader, vertex: Vertex) -> "tuple[Vec4, dict[str, Var]]":
    position, outputs = shader.vertex_shader(vertex, shader.uniforms)
    position = Vec4(*position)
    return position / position.w, dict(outputs)


def _shade(
    fbo: FrameBuffer,
    width: int,
    depth_test: bool,
    shader: Shader,
    pos: Vector,
    frag_coord: Vec4,
    inputs: Mapping[str, Var],
) -> None:
    if depth_test:
        index = int(pos[1]) * width + int(pos[0])
        if pos[2] > fbo.depth[index]:
            fbo.depth[index] = pos[2]
        else:
            return
    color = shader.fragment_shader(frag_coord, shader.uniforms, inputs)
    if color is None:
        return
    r, g, b, a = color
    draw_pixel(fbo, width, pos[0], pos[1], tuple(map(_to_channel, (r, g, b, a))))


def render(
    mode: DrawMode,
    fbo: FrameBuffer,
    width: int,
    height: int,
    viewport_matrix: Matrix,
    shader: Shader,
    vertices: Sequence[Vertex],
    enabled: Optional[Mapping[Capability, bool]] = None,
) -> None:
    """Run ``shader`` over ``vertices`` assembled as ``mode`` and write the fragments."""
    mode = DrawMode(mode)
    if shader.vertex_shader is None or shader.fragment_shader is None:
        raise ValueError("the shader needs both a vertex and a fragment stage")
    depth_test = bool((enabled or {}).get(Capability.DEPTH_TEST, False))

    def draw(primitive: Sequence[Vertex], rasterize: Callable[..., list]) -> None:
        shaded = [_run_vertex(shader, vertex) for vertex in primitive]
        if not any(_inside_clip(pos) for pos, _ in shaded):
            return
        screen = [((viewport_matrix * pos).truncate(3), outputs) for pos, outputs in shaded]
        for pos, inputs in rasterize(*screen):
            if not _in_screen(pos, width, height):
                continue
            _shade(fbo, width, depth_test, shader, pos, pos.extend(1.0), inputs)

    count = len(vertices)
    if mode == DrawMode.POINTS:
        for vertex in vertices:
            pos, outputs = _run_vertex(shader, vertex)
            if not _in_screen(pos, width, height):
                continue
            frag_coord = viewport_matrix * pos
            screen = frag_coord.truncate(3)
            if not (0.0 <= screen[0] < width and 0.0 <= screen[1] < height):
                continue
            _shade(fbo, width, depth_test, shader, screen, frag_coord, outputs)
    elif mode == DrawMode.LINES:
        for start in range(0, count - 1, 2):
            draw(vertices[start:start + 2], rasterize_line)
    elif mode == DrawMode.LINE_STRIP:
        for a, b in zip(vertices, vertices[1:]):
            draw((a, b), rasterize_line)
    elif mode == DrawMode.LINE_LOOP:
        if not vertices:
            return
        for a, b in zip(vertices, vertices[1:]):
            draw((a, b), rasterize_line)
        draw((vertices[-1], vertices[0]), rasterize_line)
    elif mode == DrawMode.TRIANGLES:
        for start in range(0, count - 2, 3):
            draw(vertices[start:start + 3], rasterize_triangle)
    elif mode == DrawMode.TRIANGLE_STRIP:
        for a, b, c in zip(vertices, vertices[1:], vertices[2:]):
            draw((a, b, c), rasterize_triangle)
    elif mode == DrawMode.TRIANGLE_FAN:
        if not vertices:
            return
        hub = vertices[0]
        for b, c in zip(vertices[1:], vertices[2:]):
            draw((hub, b, c), rasterize_triangle)