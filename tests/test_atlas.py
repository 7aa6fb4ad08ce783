import pytest

from quadgfx.atlas import Atlas, Sprite
from quadgfx.canvas import Color
from quadgfx.image import Image, Rect

RED = Color(1.0, 0.0, 0.0, 1.0)
BLUE = Color(0.0, 0.0, 1.0, 1.0)
GREEN = Color(0.0, 1.0, 0.0, 1.0)


def _sprite(width, height, color):
    return Image.gen_image_color(width, height, color)


def test_default_atlas_is_512_square_and_clean():
    atlas = Atlas()
    assert (atlas.width, atlas.height) == (512, 512)
    assert atlas.dirty is False
    assert atlas.sprites == {}


def test_unique_ids_start_after_offset():
    atlas = Atlas(size=16)
    assert atlas.new_unique_id() == Atlas.UNIQUENESS_OFFSET + 1
    assert atlas.new_unique_id() == Atlas.UNIQUENESS_OFFSET + 2


def test_first_sprite_placed_after_gap():
    atlas = Atlas(size=16)
    atlas.cache_sprite(1, _sprite(4, 3, RED))
    assert atlas.get(1) == Sprite(Rect(Atlas.GAP, 0, 4, 3))
    assert atlas.dirty is True


def test_cached_pixels_match_sprite():
    atlas = Atlas(size=16)
    sprite = _sprite(4, 3, RED)
    sprite.set_pixel(1, 2, BLUE)
    atlas.cache_sprite(7, sprite)
    assert atlas.image.sub_image(atlas.get(7).rect) == sprite


def test_second_sprite_follows_on_same_line():
    atlas = Atlas(size=64)
    atlas.cache_sprite(1, _sprite(5, 5, RED))
    atlas.cache_sprite(2, _sprite(3, 3, BLUE))
    first = atlas.get(1).rect
    second = atlas.get(2).rect
    assert second.y == first.y
    assert second.x == first.x + first.w + 2 * Atlas.GAP
    assert not first.overlaps(second)


def test_sprite_wraps_to_next_line():
    atlas = Atlas(size=16)
    atlas.cache_sprite(1, _sprite(10, 3, RED))
    atlas.cache_sprite(2, _sprite(10, 3, BLUE))
    second = atlas.get(2).rect
    assert second.x == Atlas.GAP
    assert second.y == 3 + 2 * Atlas.GAP
    assert atlas.image.sub_image(second) == _sprite(10, 3, BLUE)


def test_atlas_doubles_and_keeps_sprites():
    atlas = Atlas(size=16)
    red = _sprite(10, 10, RED)
    blue = _sprite(10, 10, BLUE)
    atlas.cache_sprite(1, red)
    atlas.cache_sprite(2, blue)
    assert (atlas.width, atlas.height) == (32, 32)
    assert set(atlas.sprites) == {1, 2}
    assert atlas.image.sub_image(atlas.get(1).rect) == red
    assert atlas.image.sub_image(atlas.get(2).rect) == blue
    assert not atlas.get(1).rect.overlaps(atlas.get(2).rect)


def test_get_missing_key():
    atlas = Atlas(size=16)
    assert atlas.get(99) is None
    assert atlas.get_uv_rect(99) is None


def test_uv_rect_is_normalised_by_snapshot_size():
    atlas = Atlas(size=16)
    atlas.cache_sprite(1, _sprite(4, 4, RED))
    uv = atlas.get_uv_rect(1)
    assert uv == Rect(Atlas.GAP / 16, 0.0, 4 / 16, 4 / 16)


def test_uv_rect_follows_snapshot_after_growth():
    atlas = Atlas(size=16)
    atlas.cache_sprite(1, _sprite(10, 10, RED))
    atlas.cache_sprite(2, _sprite(10, 10, GREEN))
    rect = atlas.get(2).rect
    before = atlas.get_uv_rect(2)
    assert before.w == rect.w / 16
    atlas.snapshot()
    after = atlas.get_uv_rect(2)
    assert after == Rect(rect.x / 32, rect.y / 32, rect.w / 32, rect.h / 32)


def test_snapshot_clears_dirty_and_matches_image():
    atlas = Atlas(size=16)
    atlas.cache_sprite(1, _sprite(2, 2, GREEN))
    image = atlas.snapshot()
    assert atlas.dirty is False
    assert image == atlas.image
    assert atlas.snapshot() is image


def test_snapshot_is_stale_until_dirty_again():
    atlas = Atlas(size=16)
    first = atlas.snapshot()
    atlas.cache_sprite(1, _sprite(2, 2, GREEN))
    updated = atlas.snapshot()
    assert updated != first
    assert updated.sub_image(atlas.get(1).rect) == _sprite(2, 2, GREEN)


def test_recaching_key_replaces_sprite():
    atlas = Atlas(size=64)
    atlas.cache_sprite(1, _sprite(2, 2, RED))
    atlas.cache_sprite(1, _sprite(3, 3, BLUE))
    assert len(atlas.sprites) == 1
    assert atlas.image.sub_image(atlas.get(1).rect) == _sprite(3, 3, BLUE)


def test_sprite_overflowing_last_row_raises():
    atlas = Atlas(size=4)
    with pytest.raises(IndexError):
        atlas.cache_sprite(1, _sprite(3, 4, RED))