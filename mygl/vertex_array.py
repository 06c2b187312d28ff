"""Vertex array objects describing how buffers feed vertex attributes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from mygl.buffers import Buffer
from mygl.enums import DataType


@dataclass(frozen=True)
class VertexAttrib:
    """Layout of one vertex attribute inside a buffer."""

    index: int
    size: int
    data_type: DataType
    normalized: bool
    stride: int
    offset: int


class VertexArray:
    """Maps each vertex buffer to the attributes read from it, plus an element buffer."""

    def __init__(self) -> None:
        self.attributes: dict[Buffer, list[VertexAttrib]] = {}
        self.ebo: Optional[Buffer] = None

    def add_vertex_attrib(
        self,
        vbo: Buffer,
        index: int,
        size: int,
        data_type: DataType,
        normalized: bool,
        stride: int,
        offset: int,
    ) -> None:
        """Record that attribute ``index`` is read from ``vbo`` with the given layout."""
        attrib = VertexAttrib(
            index, size, DataType(data_type), bool(normalized), stride, offset
        )
        self.attributes.setdefault(vbo, []).append(attrib)

    def set_element_buffer(self, ebo: Buffer) -> None:
        """Use ``ebo`` as the source of element indices."""
        self.ebo = ebo