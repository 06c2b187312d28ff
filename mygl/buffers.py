"""Raw data buffers and the colour/depth frame buffer."""

from __future__ import annotations

from array import array
from typing import Optional


def _as_bytes(data, size: int) -> bytes:
    raw = memoryview(data).cast("B")
    if len(raw) < size:
        raise ValueError(f"data holds {len(raw)} bytes, {size} requested")
    return bytes(raw[:size])


class Buffer:
    """A block of bytes used as a vertex or element buffer."""

    def __init__(self, size: Optional[int] = None, data=None) -> None:
        self._data: Optional[bytearray] = None
        self._size = 0
        if size is not None:
            self.set_data(size, data)

    @property
    def data(self) -> Optional[bytearray]:
        """The buffer contents, or None when no storage is allocated."""
        return self._data

    @property
    def size(self) -> int:
        """The size in bytes given when the data was last set."""
        return self._size

    def set_data(self, size: int, data=None) -> None:
        """Replace the storage with ``size`` bytes copied from ``data`` (or zeros)."""
        if size < 0:
            raise ValueError("buffer size cannot be negative")
        if data is None:
            contents = bytearray(size)
        else:
            contents = bytearray(_as_bytes(data, size))
        self._data = contents
        self._size = size

    def sub_data(self, offset: int, size: int, data) -> None:
        """Overwrite ``size`` bytes starting at ``offset`` with bytes from ``data``."""
        if self._data is None:
            raise ValueError("buffer has no storage")
        if offset < 0 or size < 0 or offset + size > len(self._data):
            raise ValueError(
                f"range {offset}..{offset + size} outside buffer of {len(self._data)} bytes"
            )
        self._data[offset:offset + size] = _as_bytes(data, size)

    def delete(self) -> None:
        """Release the storage."""
        self._data = None


class FrameBuffer:
    """RGBA colour bytes and per-pixel depth values for a render target."""

    def __init__(self, width: int, height: int) -> None:
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        """Reallocate both buffers for a new size."""
        if width < 0 or height < 0:
            raise ValueError("frame buffer size cannot be negative")
        self.width = width
        self.height = height
        self.color = bytearray(width * height * 4)
        self.depth = array("f", bytes(width * height * 4))