"""A software renderer holding the state that drawing commands use."""

from __future__ import annotations

import struct
from array import array
from typing import Optional, Sequence

from mygl.buffers import FrameBuffer
from mygl.enums import BufferBit, Capability, DataType, DrawMode
from mygl.matrix import Matrix, mat4
from mygl.pipeline import _to_channel, render
from mygl.shader import Shader, Var
from mygl.vector import Vec2, Vec3, Vec4
from mygl.vertex_array import VertexArray

_VECTORS = {2: Vec2, 3: Vec3, 4: Vec4}


class Renderer:
    """Draws bound vertex arrays with a bound shader into a frame buffer."""

    def __init__(
        self, fbo: FrameBuffer, screen_width: int = 800, screen_height: int = 600
    ) -> None:
        self.fbo = fbo
        self.vao: Optional[VertexArray] = None
        self.shader: Optional[Shader] = None
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.viewport_matrix: Matrix = mat4()
        self._clear_color = Vec4()
        self._enabled: dict[Capability, bool] = {Capability.DEPTH_TEST: False}

    @property
    def current_clear_color(self) -> Vec4:
        """The colour that clearing the colour buffer writes."""
        return self._clear_color.copy()

    def clear(self, mask: int) -> None:
        """Clear the buffers selected by ``mask`` (a combination of BufferBit)."""
        mask = int(mask)
        pixels = self.screen_width * self.screen_height
        if mask & BufferBit.COLOR:
            if len(self.fbo.color) < pixels * 4:
                raise ValueError("colour buffer is smaller than the screen")
            rgba = bytes(_to_channel(c) for c in self._clear_color)
            self.fbo.color[:pixels * 4] = rgba * pixels
        if mask & BufferBit.DEPTH:
            if len(self.fbo.depth) < pixels:
                raise ValueError("depth buffer is smaller than the screen")
            self.fbo.depth[:pixels] = array("f", [-1.0]) * pixels

    def clear_color(self, r: float, g: float, b: float, a: float) -> None:
        """Set the colour used when clearing the colour buffer."""
        self._clear_color = Vec4(r, g, b, a)

    def enable(self, cap: Capability) -> None:
        self._enabled[Capability(cap)] = True

    def disable(self, cap: Capability) -> None:
        self._enabled[Capability(cap)] = False

    def is_enabled(self, cap: Capability) -> bool:
        return self._enabled.get(Capability(cap), False)

    def bind_frame_buffer(self, fbo: FrameBuffer) -> None:
        self.fbo = fbo

    def bind_vertex_array(self, vao: VertexArray) -> None:
        self.vao = vao

    def bind_shader(self, shader: Shader) -> None:
        self.shader = shader

    def viewport(self, x: int, y: int, width: int, height: int) -> None:
        """Map normalized device coordinates onto the given screen rectangle."""
        half_w = width // 2
        half_h = height // 2
        self.viewport_matrix = mat4(
            float(half_w), 0.0, 0.0, float(half_w + x),
            0.0, float(half_h), 0.0, float(half_h + y),
            0.0, 0.0, 0.5, 0.5,
            0.0, 0.0, 0.0, 1.0,
        )

    def screen_changed(self, width: int, height: int) -> None:
        """Record a new screen size."""
        self.screen_width = width
        self.screen_height = height

    def _require_bound(self) -> "tuple[VertexArray, Shader]":
        if self.vao is None:
            raise RuntimeError("no vertex array is bound")
        if self.shader is None:
            raise RuntimeError("no shader is bound")
        return self.vao, self.shader

    @staticmethod
    def _gather_vertices(vao: VertexArray, first: int, count: int) -> "list[dict[int, Var]]":
        vertices: list[dict[int, Var]] = [{} for _ in range(count)]
        for vbo, attribs in vao.attributes.items():
            data = vbo.data
            if data is None:
                raise ValueError("vertex buffer has no storage")
            for attrib in attribs:
                if attrib.data_type != DataType.FLOAT or not 1 <= attrib.size <= 4:
                    raise ValueError(
                        "only float attributes of 1 to 4 components are supported"
                    )
                fmt = f"={attrib.size}f"
                needed = struct.calcsize(fmt)
                for i, vertex in enumerate(vertices, start=first):
                    offset = attrib.offset + i * attrib.stride
                    if offset < 0 or offset + needed > len(data):
                        raise IndexError(f"vertex {i} reads outside its buffer")
                    values = struct.unpack_from(fmt, data, offset)
                    if attrib.size == 1:
                        var = Var(values[0])
                    else:
                        var = Var(_VECTORS[attrib.size](*values))
                    vertex.setdefault(attrib.index, var)
        return vertices

    def _render(self, mode: DrawMode, shader: Shader, vertices) -> None:
        render(
            mode,
            self.fbo,
            self.screen_width,
            self.screen_height,
            self.viewport_matrix,
            shader,
            vertices,
            self._enabled,
        )

    def draw_arrays(self, mode: DrawMode, first: int, count: int) -> None:
        """Draw ``count`` consecutive vertices starting at ``first``."""
        vao, shader = self._require_bound()
        self._render(mode, shader, self._gather_vertices(vao, first, count))

    def draw_elements(
        self, mode: DrawMode, count: int, data_type: DataType, indices=None
    ) -> None:
        """Draw ``count`` vertices chosen by unsigned-int indices.

        With an element buffer bound, ``indices`` is a byte offset into it;
        otherwise it is a sequence of vertex indices.
        """
        if DataType(data_type) != DataType.UNSIGNED_INT:
            raise ValueError("element indices must be UNSIGNED_INT")
        vao, shader = self._require_bound()
        if vao.ebo is None and indices is None:
            raise ValueError("no element buffer is bound and no indices were given")

        vertex_array: list[dict[int, Var]] = []
        if vao.attributes:
            vbo, attribs = next(iter(vao.attributes.items()))
            stride = attribs[0].stride
            if stride <= 0:
                raise ValueError("the first attribute needs a positive stride")
            vertex_array = self._gather_vertices(vao, 0, vbo.size // stride)

        if vao.ebo is not None:
            data = vao.ebo.data
            if data is None:
                raise ValueError("element buffer has no storage")
            offset = 0 if indices is None else int(indices)
            if offset < 0 or offset + 4 * count > len(data):
                raise IndexError("indices read outside the element buffer")
            index_list: Sequence[int] = struct.unpack_from(f"={count}I", data, offset)
        else:
            index_list = list(indices)[:count]
            if len(index_list) < count:
                raise ValueError(f"{count} indices requested, {len(index_list)} given")

        vertices = []
        for index in index_list:
            if not 0 <= index < len(vertex_array):
                raise IndexError(f"vertex index {index} is out of range")
            vertices.append(vertex_array[index])
        self._render(mode, shader, vertices)