"""A growing texture atlas that packs sprites into one RGBA image."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from quadgfx.canvas import Color
from quadgfx.image import Image, Rect

_TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Sprite:
    """Where a cached sprite sits inside the atlas image, in pixels."""

    rect: Rect


class Atlas:
    """Packs sprites row by row, doubling the image when it runs out of room."""

    GAP = 2
    UNIQUENESS_OFFSET = 100000

    def __init__(self, filter: Any = None, size: int = 512) -> None:
        self.image = Image.gen_image_color(size, size, _TRANSPARENT)
        self._texture = self.image.copy()
        self.sprites: dict[int, Sprite] = {}
        self.cursor_x = 0
        self.cursor_y = 0
        self.max_line_height = 0
        self.dirty = False
        self.filter = filter
        self.unique_id = self.UNIQUENESS_OFFSET

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def new_unique_id(self) -> int:
        """Return a fresh sprite key."""
        self.unique_id += 1
        return self.unique_id

    def get(self, key: int) -> Sprite | None:
        """Return the sprite cached under `key`, if any."""
        return self.sprites.get(key)

    def snapshot(self) -> Image:
        """Return the image last handed out, refreshing it if sprites changed since."""
        if self.dirty:
            self.dirty = False
            self._texture = self.image.copy()
        return self._texture

    def get_uv_rect(self, key: int) -> Rect | None:
        """Return the sprite's rectangle normalised to the last snapshot's size."""
        sprite = self.get(key)
        if sprite is None:
            return None
        w = self._texture.width
        h = self._texture.height
        return Rect(
            sprite.rect.x / w,
            sprite.rect.y / h,
            sprite.rect.w / w,
            sprite.rect.h / h,
        )

    def cache_sprite(self, key: int, sprite: Image) -> None:
        """Copy `sprite` into the atlas under `key`, growing the atlas if needed."""
        width, height = sprite.width, sprite.height

        if self.cursor_x + width < self.image.width:
            if height > self.max_line_height:
                self.max_line_height = height
            x = self.cursor_x + self.GAP
            self.cursor_x += width + self.GAP * 2
        else:
            self.cursor_y += self.max_line_height + self.GAP * 2
            self.cursor_x = width + self.GAP
            self.max_line_height = height
            x = self.GAP
        y = self.cursor_y

        if self.cursor_y + height > self.image.height:
            previous = list(self.sprites.items())
            self.sprites.clear()
            self.cursor_x = 0
            self.cursor_y = 0
            self.max_line_height = 0

            old_image = self.image
            self.image = Image.gen_image_color(
                old_image.width * 2, old_image.height * 2, _TRANSPARENT
            )

            for old_key, old_sprite in previous:
                self.cache_sprite(old_key, old_image.sub_image(old_sprite.rect))

            self.cache_sprite(key, sprite)
        else:
            self.dirty = True
            self._blit(sprite, x, y)
            self.sprites[key] = Sprite(Rect(x, y, width, height))

    def _blit(self, sprite: Image, x: int, y: int) -> None:
        row_bytes = sprite.width * 4
        target = self.image.bytes
        for j in range(sprite.height):
            source = sprite.bytes[j * row_bytes : (j + 1) * row_bytes]
            start = ((y + j) * self.image.width + x) * 4
            end = start + len(source)
            if end > len(target):
                raise IndexError("sprite does not fit inside the atlas image")
            target[start:end] = source