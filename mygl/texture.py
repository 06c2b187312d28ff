"""Two-dimensional and cube-map textures and sampling."""

from __future__ import annotations

from typing import Optional, Union

from mygl.vector import Vec4, Vector


class Texture2D:
    """An image stored as row-major bytes with ``channels`` bytes per pixel."""

    def __init__(self, data=None, width: int = 0, height: int = 0, channels: int = 0) -> None:
        self._buffer: Optional[bytes] = None
        self.width = 0
        self.height = 0
        self.channels = 0
        if data is not None:
            self.set_data(data, width, height, channels)

    @property
    def data(self) -> Optional[bytes]:
        """The pixel bytes, or None when the texture is empty."""
        return self._buffer

    def set_data(self, data, width: int, height: int, channels: int) -> None:
        """Copy ``width * height * channels`` bytes from ``data`` into the texture."""
        if data is None:
            raise ValueError("texture data is missing")
        if width < 0 or height < 0 or channels < 0:
            raise ValueError("texture dimensions cannot be negative")
        size = width * height * channels
        raw = memoryview(data).cast("B")
        if len(raw) < size:
            raise ValueError(f"data holds {len(raw)} bytes, {size} needed")
        self._buffer = bytes(raw[:size])
        self.width = width
        self.height = height
        self.channels = channels

    def delete(self) -> None:
        """Release the pixel data."""
        self._buffer = None


class TextureCubeMap:
    """A cube-map texture; sampling it yields transparent black."""


def texture(tex: Union[Texture2D, TextureCubeMap], coord: Vector) -> Vec4:
    """Sample ``tex`` at ``coord`` with nearest filtering, returning RGBA in 0..1."""
    if isinstance(tex, TextureCubeMap):
        return Vec4()
    buf = tex.data
    if buf is None:
        raise ValueError("texture has no data")
    x = int(coord[0] * tex.width)
    y = int(coord[1] * tex.height)
    has_alpha = tex.channels == 4
    base = (y * tex.width + x) * tex.channels
    end = base + (4 if has_alpha else 3)
    if base < 0 or end > len(buf):
        raise IndexError(f"texture coordinate {tuple(coord)} is outside the image")
    r, g, b = buf[base:base + 3]
    a = buf[base + 3] if has_alpha else 255
    return Vec4(r / 255.0, g / 255.0, b / 255.0, a / 255.0)