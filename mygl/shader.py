"""Typed shader variables and programmable shader stages."""

from __future__ import annotations

import numbers
from typing import Any, Callable, Mapping, Optional, Union

from mygl.enums import DataType, TextureType
from mygl.matrix import Matrix
from mygl.texture import Texture2D
from mygl.vector import Vec4, Vector

VarType = Union[DataType, TextureType]

VertexShader = Callable[
    [Mapping[int, "Var"], Mapping[str, "Var"]], "tuple[Vector, dict[str, Var]]"
]
"""Called with the vertex attributes (by location) and the uniforms.

Returns the clip-space position and a mapping of output names to ``Var``.
"""

FragmentShader = Callable[
    [Vec4, Mapping[str, "Var"], Mapping[str, "Var"]], Optional[Vector]
]
"""Called with the fragment coordinate, the uniforms and the interpolated inputs.

Returns the RGBA colour in 0..1, or None to discard the fragment.
"""

_VECTOR_TYPES = {
    2: DataType.FLOAT_VEC2,
    3: DataType.FLOAT_VEC3,
    4: DataType.FLOAT_VEC4,
}
_MATRIX_TYPES = {
    2: DataType.FLOAT_MAT2,
    3: DataType.FLOAT_MAT3,
    4: DataType.FLOAT_MAT4,
}
_VECTOR_LENGTHS = {kind: size for size, kind in _VECTOR_TYPES.items()}
_MATRIX_SIZES = {kind: size for size, kind in _MATRIX_TYPES.items()}


def _to_byte(value: int) -> int:
    """Wrap an integer into the signed 8-bit range."""
    return (int(value) + 128) % 256 - 128


def _infer_type(value: Any) -> VarType:
    if isinstance(value, Texture2D):
        return TextureType.TEXTURE_2D
    if isinstance(value, Vector):
        kind = _VECTOR_TYPES.get(len(value))
        if kind is None:
            raise ValueError(f"no variable type for a vector of length {len(value)}")
        return kind
    if isinstance(value, Matrix):
        rows, columns = value.shape
        kind = _MATRIX_TYPES.get(rows) if rows == columns else None
        if kind is None:
            raise ValueError(f"no variable type for a {rows}x{columns} matrix")
        return kind
    if isinstance(value, numbers.Integral):
        return DataType.INT
    if isinstance(value, numbers.Real):
        return DataType.FLOAT
    raise TypeError(f"cannot store a {type(value).__name__} in a shader variable")


def _convert(value: Any, kind: VarType) -> Any:
    """Check that ``value`` suits ``kind`` and return the value to store."""
    if kind == TextureType.TEXTURE_2D:
        if not isinstance(value, Texture2D):
            raise TypeError("a TEXTURE_2D variable needs a Texture2D")
        return value
    if kind in (DataType.INT, DataType.BYTE):
        if not isinstance(value, numbers.Integral):
            raise TypeError(f"a {kind.name} variable needs an integer")
        return _to_byte(value) if kind == DataType.BYTE else int(value)
    if kind in (DataType.FLOAT, DataType.DOUBLE):
        if not isinstance(value, numbers.Real):
            raise TypeError(f"a {kind.name} variable needs a real number")
        return float(value)
    if kind in _VECTOR_LENGTHS:
        if not isinstance(value, Vector) or len(value) != _VECTOR_LENGTHS[kind]:
            raise TypeError(
                f"a {kind.name} variable needs a vector of length {_VECTOR_LENGTHS[kind]}"
            )
        return value.copy()
    if kind in _MATRIX_SIZES:
        size = _MATRIX_SIZES[kind]
        if not isinstance(value, Matrix) or value.shape != (size, size):
            raise TypeError(f"a {kind.name} variable needs a {size}x{size} matrix")
        return value.copy()
    raise ValueError(f"unsupported variable type {kind!r}")


class Var:
    """A value tagged with its shader data type.

    An empty variable has ``value`` and ``data_type`` both None. Vectors and
    matrices are copied on assignment; textures are held by reference.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any = None, data_type: Optional[VarType] = None) -> None:
        self.value: Any = None
        self.data_type: Optional[VarType] = None
        self.assign(value, data_type)

    def assign(self, value: Any, data_type: Optional[VarType] = None) -> "Var":
        """Store ``value``, inferring its type unless ``data_type`` is given."""
        if isinstance(value, Var):
            if data_type is None:
                data_type = value.data_type
            value = value.value
        if value is None:
            if data_type is not None:
                raise ValueError("an empty variable cannot have a data type")
            self.value = None
            self.data_type = None
            return self
        kind = _infer_type(value) if data_type is None else data_type
        if not isinstance(kind, (DataType, TextureType)):
            kind = _resolve_type(kind)
        self.value = _convert(value, kind)
        self.data_type = kind
        return self

    def copy(self) -> "Var":
        """Return an independent variable holding a copy of the value."""
        return Var(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Var):
            return NotImplemented
        return self.data_type == other.data_type and self.value == other.value

    def __repr__(self) -> str:
        kind = None if self.data_type is None else self.data_type.name
        return f"Var({self.value!r}, {kind})"


def _resolve_type(code: int) -> VarType:
    for enum in (DataType, TextureType):
        try:
            return enum(code)
        except ValueError:
            continue
    raise ValueError(f"unknown variable type {code!r}")


class Shader:
    """A vertex stage, a fragment stage and the uniforms they share."""

    def __init__(
        self,
        vertex_shader: Optional[VertexShader] = None,
        fragment_shader: Optional[FragmentShader] = None,
    ) -> None:
        self.vertex_shader = vertex_shader
        self.fragment_shader = fragment_shader
        self.uniforms: dict[str, Var] = {}

    def set_vertex_shader(self, vertex_shader: VertexShader) -> None:
        """Replace the vertex stage."""
        self.vertex_shader = vertex_shader

    def set_fragment_shader(self, fragment_shader: FragmentShader) -> None:
        """Replace the fragment stage."""
        self.fragment_shader = fragment_shader

    def set_uniform(self, name: str, value: Any) -> None:
        """Set the uniform ``name``, creating it if it does not exist yet."""
        existing = self.uniforms.get(name)
        if existing is None:
            self.uniforms[name] = Var(value)
        else:
            existing.assign(value)