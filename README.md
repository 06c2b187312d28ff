# mygl

A small software rasterizer with an API modelled on OpenGL. It runs in plain
Python and needs no GPU or native library. You fill vertex buffers and describe
their layout with a vertex array. You write vertex and fragment shaders as
Python callables. Drawing goes into an RGBA frame buffer, and you can read the
result back as bytes.

MyGL uses a right-handed coordinate system. x points right, y points up and z
points towards the viewer.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `mygl.vector` has `Vector`, `Vec2`, `Vec3` and `Vec4`. Arithmetic works
  element by element, and vectors can be scaled by a number. Components are
  reached by index or by name (`x`/`y`/`z`/`w` or `r`/`g`/`b`/`a`). A vector
  can be multiplied by a matrix given as rows. There are also `copy`,
  `truncate` and `extend`.
- `mygl.matrix` has `Matrix`, a row-major matrix, with the `zeros` and
  `scalar` constructors, and the helpers `mat2`, `mat3` and `mat4`. Each
  helper builds a matrix in one of four ways: all zeros, a scalar on the
  diagonal, a copy of another matrix, or every component listed row by row.
  Matrices multiply with matrices, with vectors and with numbers. `m *= n`
  pre-multiplies, so `m` becomes `n * m`.
- `mygl.funcs` has `dot`, `length`, `normalize`, `transpose`, `cross`,
  `reflect` and `radians`.
- `mygl.transform` has `scale`, `translate`, `look_at`, `ortho` and
  `perspective`. `scale` and `translate` pre-multiply the matrix you give
  them.
- `mygl.camera` has `Camera`, a dataclass that holds `position`, `front` and
  `up`. By default it looks down -z. `view_matrix()` returns its view matrix.
- `mygl.buffers` has `Buffer`, a block of bytes for vertex and element data,
  with `set_data`, `sub_data` and `delete`. It also has `FrameBuffer`, which
  holds an RGBA `color` bytearray and a float `depth` array and has `resize`.
- `mygl.vertex_array` has `VertexArray` and `VertexAttrib`, which record the
  layout of attributes in buffers and the optional element buffer.
- `mygl.texture` has `Texture2D`, `TextureCubeMap` and `texture()`. `texture()`
  does nearest-pixel sampling and returns RGBA in the range 0..1.
- `mygl.shader` has `Var`, a value tagged with its `DataType` or `TextureType`.
  It also has `Shader`, which holds the two shader stages and the uniforms
  (`set_uniform`).
- `mygl.rasterizer` has `rasterize_line`, which uses Bresenham's algorithm.
  It also has `rasterize_triangle`, which tests the bounding box and uses
  barycentric interpolation.
- `mygl.pipeline` has `draw_pixel` and `render`. They assemble primitives,
  discard primitives that lie entirely outside clip space, and run the depth
  test.
- `mygl.renderer` has `Renderer`, the stateful front end. Its methods are
  `clear`, `clear_color`, `enable`, `disable`, `is_enabled`, `viewport`,
  `screen_changed`, the `bind_*` methods, `draw_arrays` and `draw_elements`.
- `mygl.debug` has `print_matrix`, `print_vector` and `show_vertex_array`.
  Each writes to stdout or to a file you pass.
- `mygl.enums` has `DataType`, `BufferBit`, `TextureType`, `DrawMode` and
  `Capability`.

## Shaders

A vertex shader is called as `vertex_shader(layout_in, uniforms)`:

- `layout_in` maps attribute locations to `Var`.
- `uniforms` maps names to `Var`.

It returns a pair:

- the clip-space position, which the pipeline divides by `w`;
- a dict from output names to `Var`.

Outputs of type int, byte, float, double and float vectors are interpolated
across lines and triangles.

A fragment shader is called as `fragment_shader(frag_coord, uniforms, inputs)`.
It returns an RGBA colour with components in 0..1, or `None` to discard the
fragment.

## Example

```python
import struct

from mygl.buffers import Buffer, FrameBuffer
from mygl.enums import BufferBit, Capability, DataType, DrawMode
from mygl.renderer import Renderer
from mygl.shader import Shader, Var
from mygl.vector import Vec4
from mygl.vertex_array import VertexArray

width, height = 64, 48
fbo = FrameBuffer(width, height)
renderer = Renderer(fbo, width, height)
renderer.viewport(0, 0, width, height)

positions = [-0.5, -0.5, 0.0,
              0.5, -0.5, 0.0,
              0.0,  0.5, 0.0]
data = struct.pack(f"={len(positions)}f", *positions)
vbo = Buffer(len(data), data)

vao = VertexArray()
vao.add_vertex_attrib(vbo, 0, 3, DataType.FLOAT, False, 12, 0)


def vertex_shader(layout_in, uniforms):
    position = layout_in[0].value.extend(1.0)
    return position, {"color": Var(uniforms["tint"].value)}


def fragment_shader(frag_coord, uniforms, inputs):
    return inputs["color"].value


shader = Shader(vertex_shader, fragment_shader)
shader.set_uniform("tint", Vec4(1.0, 0.5, 0.0, 1.0))

renderer.clear_color(0.0, 0.0, 0.0, 1.0)
renderer.enable(Capability.DEPTH_TEST)
renderer.clear(BufferBit.COLOR | BufferBit.DEPTH)
renderer.bind_shader(shader)
renderer.bind_vertex_array(vao)
renderer.draw_arrays(DrawMode.TRIANGLES, 0, 3)

pixels = bytes(fbo.color)  # RGBA, row by row, width * height * 4 bytes
```

`draw_elements` takes indices of type `DataType.UNSIGNED_INT`. If an element
buffer is bound, `indices` is a byte offset into that buffer. Otherwise
`indices` is a sequence of vertex indices.

## Draw modes and depth

`DrawMode` has `POINTS`, `LINES`, `LINE_STRIP`, `LINE_LOOP`, `TRIANGLES`,
`TRIANGLE_STRIP` and `TRIANGLE_FAN`. They group vertices the same way OpenGL
does.

When `Capability.DEPTH_TEST` is enabled, a fragment is kept only if its depth
is greater than the value already stored. Clearing the depth buffer sets every
entry to `-1.0`.

## Limitations

- The package draws only into memory. It opens no window, handles no input
  and has no render loop.
- It does not load images. To make a `Texture2D`, pass it raw pixel bytes.
- Vertex attributes must be floats with 1 to 4 components.
- `perspective()` returns the identity matrix.
- Sampling a `TextureCubeMap` always gives transparent black.
- Clearing with `BufferBit.STENCIL` does nothing.
- A primitive is drawn if at least one of its vertices lies inside clip space,
  and it is not clipped against the edges. Fragments that fall outside the
  screen are dropped.