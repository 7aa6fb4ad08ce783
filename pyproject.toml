[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadgfx"
version = "0.1.0"
description = "Backend-free 2D drawing primitives, RGBA images, sprite atlases, frame profiling and UI state building blocks"
requires-python = ">=3.10"
dependencies = ["pillow"]
keywords = ["graphics", "2d", "geometry", "atlas", "image", "profiler", "ui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quadgfx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
