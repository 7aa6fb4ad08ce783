"""CPU-side RGBA images and axis-aligned rectangles."""

from __future__ import annotations

import io
import math
from dataclasses import dataclass
from os import PathLike
from typing import Iterable, Sequence

from PIL import Image as PilImage

from quadgfx.canvas import Color, Vec2

_U16_MAX = 0xFFFF


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle with its top-left corner at (x, y)."""

    x: float
    y: float
    w: float
    h: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def contains(self, point: Vec2) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        return self.x <= point.x < self.right and self.y <= point.y < self.bottom

    def overlaps(self, other: Rect) -> bool:
        """True if the two rectangles intersect or touch."""
        return (
            self.left <= other.right
            and self.right >= other.left
            and self.top <= other.bottom
            and self.bottom >= other.top
        )


def _to_index(value: float) -> int:
    """Truncate a float towards zero, saturating negatives and NaN to zero."""
    if math.isnan(value) or value <= 0:
        return 0
    return int(value)


def _check_dimension(name: str, value: int) -> None:
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{name} must be between 0 and {_U16_MAX}, got {value}")


@dataclass(repr=False)
class Image:
    """An RGBA8 image stored row by row in CPU memory."""

    width: int
    height: int
    bytes: bytearray

    def __post_init__(self) -> None:
        _check_dimension("width", self.width)
        _check_dimension("height", self.height)
        self.bytes = bytearray(self.bytes)
        expected = self.width * self.height * 4
        if len(self.bytes) != expected:
            raise ValueError(
                f"a {self.width}x{self.height} image needs {expected} bytes, "
                f"got {len(self.bytes)}"
            )

    def __repr__(self) -> str:
        return (
            f"Image(width={self.width}, height={self.height}, "
            f"bytes.len()={len(self.bytes)})"
        )

    @classmethod
    def empty(cls) -> Image:
        """Create a zero-sized image."""
        return cls(0, 0, bytearray())

    @classmethod
    def gen_image_color(cls, width: int, height: int, color: Color) -> Image:
        """Create an image filled with one colour."""
        _check_dimension("width", width)
        _check_dimension("height", height)
        pixel = bytearray(color.to_bytes())
        return cls(width, height, pixel * (width * height))

    @classmethod
    def from_file_with_format(cls, data: bytes, format: str | None = None) -> Image:
        """Decode an encoded image; `format` is a Pillow format name or None to guess."""
        formats = [format.upper()] if format else None
        try:
            with PilImage.open(io.BytesIO(data), formats=formats) as decoded:
                rgba = decoded.convert("RGBA")
        except (OSError, ValueError, SyntaxError) as exc:
            raise ValueError(f"cannot decode image: {exc}") from exc
        width, height = rgba.size
        return cls(width, height, bytearray(rgba.tobytes()))

    def copy(self) -> Image:
        """Return an independent copy of this image."""
        return Image(self.width, self.height, bytearray(self.bytes))

    def update(self, colors: Sequence[Color]) -> None:
        """Overwrite every pixel from a sequence of colours in row order."""
        if len(colors) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} colours, got {len(colors)}"
            )
        self.bytes[:] = b"".join(bytes(color.to_bytes()) for color in colors)

    def get_image_data(self) -> list[tuple[int, int, int, int]]:
        """Return the pixels as a list of RGBA byte tuples in row order."""
        data = self.bytes
        return [
            (data[i], data[i + 1], data[i + 2], data[i + 3])
            for i in range(0, self.width * self.height * 4, 4)
        ]

    def _pixel_offset(self, x: int, y: int) -> int:
        index = y * self.width + x
        if x < 0 or y < 0 or index >= self.width * self.height:
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return index * 4

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Set the colour of one pixel."""
        offset = self._pixel_offset(x, y)
        self.bytes[offset : offset + 4] = bytes(color.to_bytes())

    def get_pixel(self, x: int, y: int) -> Color:
        """Return the colour of one pixel."""
        offset = self._pixel_offset(x, y)
        return Color.from_bytes(self.bytes[offset : offset + 4])

    def sub_image(self, rect: Rect) -> Image:
        """Copy the pixels inside `rect` into a new image."""
        width = _to_index(rect.w)
        height = _to_index(rect.h)
        x = _to_index(rect.x)
        y = _to_index(rect.y)
        stride = self.width * 4
        out = bytearray()
        for row in range(y, y + height):
            start = row * stride + x * 4
            end = start + width * 4
            if width and end > len(self.bytes):
                raise IndexError("sub image rectangle exceeds the image bounds")
            out += self.bytes[start:end]
        return Image(width, height, out)

    def _rows(self) -> Iterable[bytes]:
        stride = self.width * 4
        for row in range(self.height):
            yield bytes(self.bytes[row * stride : (row + 1) * stride])

    def export_png(self, path: str | PathLike[str]) -> None:
        """Save the image as PNG, flipped vertically."""
        flipped = b"".join(reversed(list(self._rows())))
        PilImage.frombytes("RGBA", (self.width, self.height), flipped).save(
            path, format="PNG"
        )