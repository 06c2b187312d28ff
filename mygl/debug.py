"""Human-readable dumps of matrices, vectors and vertex arrays."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from mygl.enums import DataType
from mygl.matrix import Matrix
from mygl.vector import Vector
from mygl.vertex_array import VertexArray

_RULE = "-" * 77
_HALF_RULE = "-" * 35

_TYPE_NAMES = {
    DataType.BYTE: "byte",
    DataType.UNSIGNED_BYTE: "unsigned byte",
    DataType.SHORT: "short",
    DataType.UNSIGNED_SHORT: "unsigned short",
    DataType.INT: "int",
    DataType.UNSIGNED_INT: "unsigned int",
    DataType.FLOAT: "float",
}


def _fmt(value: Any) -> str:
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def _address(obj: Any) -> str:
    return "0" if obj is None else hex(id(obj))


def _offset(value: int) -> str:
    return "0" if value == 0 else hex(value)


def print_matrix(m: Matrix, name: str = "", file: Optional[TextIO] = None) -> None:
    """Write the matrix with its shape and name, one row per line."""
    out = file if file is not None else sys.stdout
    rows = list(m)
    print(file=out)
    print(f"matrix{len(rows)}x{len(rows[0])} {name}:", file=out)
    for row in rows:
        print("| " + "".join(f"{_fmt(v)} " for v in row) + "|", file=out)


def print_vector(v: Vector, name: str = "", file: Optional[TextIO] = None) -> None:
    """Write the vector with its length and name."""
    out = file if file is not None else sys.stdout
    print(file=out)
    print(f"vector{len(v)} {name}:", file=out)
    print("( " + ", ".join(_fmt(c) for c in v) + " )", file=out)


def show_vertex_array(
    vao: VertexArray, name: str = "", file: Optional[TextIO] = None
) -> None:
    """Write the element buffer and every buffer's attribute layouts."""
    out = file if file is not None else sys.stdout
    print(file=out)
    print(f"{_HALF_RULE}VAO {name}{_HALF_RULE}", file=out)
    print(f"ebo address:{_address(vao.ebo)}", file=out)
    print(_RULE, file=out)
    for vbo, attribs in vao.attributes.items():
        print(f"vbo address:{_address(vbo.data)}", file=out)
        for attrib in attribs:
            type_name = _TYPE_NAMES.get(attrib.data_type, "error")
            print(
                f"index:{attrib.index} ; size:{attrib.size} ; type:{type_name} ; "
                f"normalized:{int(attrib.normalized)} ; stride:{attrib.stride} ; "
                f"pointer:{_offset(attrib.offset)}",
                file=out,
            )
        print(_RULE, file=out)