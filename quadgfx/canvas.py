"""Core drawing primitives: vectors, colours, vertices and a batching canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Sequence


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vec2:
        return Vec2(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)


def _channel_to_byte(value: float) -> int:
    scaled = value * 255.0
    if math.isnan(scaled):
        return 0
    return max(0, min(255, int(scaled)))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with float channels nominally in the range 0..1."""

    r: float
    g: float
    b: float
    a: float

    def to_bytes(self) -> tuple[int, int, int, int]:
        """Return the colour as four saturated bytes."""
        return (
            _channel_to_byte(self.r),
            _channel_to_byte(self.g),
            _channel_to_byte(self.b),
            _channel_to_byte(self.a),
        )

    @classmethod
    def from_bytes(cls, data: Sequence[int]) -> Color:
        """Build a colour from four bytes."""
        if len(data) != 4:
            raise ValueError(f"expected 4 colour bytes, got {len(data)}")
        r, g, b, a = data
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)


@dataclass(frozen=True)
class Vertex:
    """A vertex with position, texture coordinates and colour."""

    x: float
    y: float
    z: float
    u: float
    v: float
    color: Color

    @property
    def position(self) -> Vec2:
        return Vec2(self.x, self.y)


class DrawMode(Enum):
    TRIANGLES = "triangles"
    LINES = "lines"


@dataclass
class DrawCall:
    """A batch of geometry sharing one texture and draw mode."""

    texture: Any
    mode: DrawMode
    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


class Canvas:
    """Collects geometry into draw calls, batching while the state is unchanged."""

    def __init__(self) -> None:
        self._texture: Any = None
        self._mode = DrawMode.TRIANGLES
        self.calls: list[DrawCall] = []

    def texture(self, texture: Any) -> None:
        """Set the texture used by following geometry (None for untextured)."""
        self._texture = texture

    def draw_mode(self, mode: DrawMode) -> None:
        """Set the primitive type used by following geometry."""
        self._mode = DrawMode(mode)

    def geometry(self, vertices: Iterable[Vertex], indices: Iterable[int]) -> None:
        """Append vertices and indices (relative to `vertices`) to the current batch."""
        vertices = list(vertices)
        indices = list(indices)
        for index in indices:
            if not 0 <= index < len(vertices):
                raise ValueError(
                    f"index {index} out of range for {len(vertices)} vertices"
                )
        if not vertices:
            return

        last = self.calls[-1] if self.calls else None
        if last is None or last.texture != self._texture or last.mode != self._mode:
            last = DrawCall(self._texture, self._mode)
            self.calls.append(last)

        offset = len(last.vertices)
        last.vertices.extend(vertices)
        last.indices.extend(offset + index for index in indices)

    def clear(self) -> None:
        """Drop all recorded draw calls."""
        self.calls.clear()