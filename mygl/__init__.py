"""A small software rasterizer with an OpenGL-like API, vector and matrix math, and Python shaders."""

__version__ = "0.1.0"