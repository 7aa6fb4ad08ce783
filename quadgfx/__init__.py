"""Backend-free 2D drawing primitives, RGBA images, sprite atlases, timing, profiling and UI state building blocks."""

__version__ = "0.1.0"