"""Enumerations for data types, buffer bits, textures, draw modes and capabilities."""

from enum import IntEnum, IntFlag


class DataType(IntEnum):
    """Types of vertex attributes and shader variables."""

    BYTE = 0x1400
    UNSIGNED_BYTE = 0x1401
    SHORT = 0x1402
    UNSIGNED_SHORT = 0x1403
    INT = 0x1404
    UNSIGNED_INT = 0x1405
    FLOAT = 0x1406
    BOOL = 0x8B56
    DOUBLE = 0x140A
    FLOAT_VEC2 = 0x8B50
    FLOAT_VEC3 = 0x8B51
    FLOAT_VEC4 = 0x8B52
    FLOAT_MAT2 = 0x8B5A
    FLOAT_MAT3 = 0x8B5B
    FLOAT_MAT4 = 0x8B5C


class BufferBit(IntFlag):
    """Bits selecting which buffers a clear operation touches."""

    COLOR = 0x00004000
    DEPTH = 0x00000100
    STENCIL = 0x00000400


class TextureType(IntEnum):
    """Kinds of texture."""

    TEXTURE_1D = 0x0DE0
    TEXTURE_2D = 0x0DE1
    CUBE_MAP = 0x8513


class DrawMode(IntEnum):
    """Primitive assembly modes."""

    POINTS = 0x0000
    LINES = 0x0001
    LINE_LOOP = 0x0002
    LINE_STRIP = 0x0003
    TRIANGLES = 0x0004
    TRIANGLE_STRIP = 0x0005
    TRIANGLE_FAN = 0x0006


class Capability(IntEnum):
    """Renderer features that can be switched on and off."""

    DEPTH_TEST = 0x0B71