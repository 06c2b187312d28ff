[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mygl"
version = "0.1.0"
description = "A small software rasterizer with an OpenGL-like API, vector and matrix math, and programmable shaders"
requires-python = ">=3.10"
dependencies = []
keywords = ["rasterizer", "software-rendering", "graphics", "3d", "shader", "linear-algebra"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mygl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
