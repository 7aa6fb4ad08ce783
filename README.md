# quadgfx

A small, backend-free toolkit for 2D game graphics. Nothing in it talks to a
GPU. Drawing calls turn shapes into vertex and index batches that you read off
a `Canvas` and hand to whatever renderer you use.

## What it provides

- **`quadgfx.canvas`**: `Vec2`, `Color` (with `to_bytes` / `from_bytes`),
  `Vertex`, `DrawMode`, `DrawCall` and `Canvas`. A `Canvas` collects geometry
  into draw calls through `texture`, `draw_mode`, `geometry` and `clear`.
- **`quadgfx.shapes`**: `draw_triangle`, `draw_triangle_lines`,
  `draw_rectangle`, `draw_rectangle_lines`, `draw_poly`, `draw_poly_lines`,
  `draw_circle`, `draw_circle_lines`, `draw_hexagon` and `draw_line`. Each one
  takes the canvas as its first argument. Circles are drawn as 20-sided
  polygons.
- **`quadgfx.image`**: `Rect` (`contains` leaves out the right and bottom edges;
  `overlaps`) and `Image`, an RGBA8 image. You can create it with
  `Image.empty`, `Image.gen_image_color` or `Image.from_file_with_format`, which
  decodes with Pillow and takes a Pillow format name or `None` to guess. It has
  `update`, `get_image_data`, `get_pixel`, `set_pixel` and `sub_image`.
  `export_png` writes the image flipped vertically.
- **`quadgfx.atlas`**: `Atlas` and `Sprite`. An atlas packs sprites row by row
  into one 512×512 image by default and doubles its size when it runs out of
  room. `snapshot` returns the image as it was last handed out. `get_uv_rect`
  gives a sprite's rectangle normalised to the size of that snapshot.
- **`quadgfx.timing`**: `Clock`, with `get_time`, `get_frame_time`, `get_fps`
  and `tick`. The time source can be injected.
- **`quadgfx.telemetry`**: `Profiler`, `Frame` and `Zone`. The profiler records
  nested timing zones, takes per-frame snapshots, keeps logged strings
  (`log_string`, and `log_time` as a context manager) and accepts capture
  requests.
- **`quadgfx.ui_input`**: `Input`, `InputCharacter`, `KeyCode` and
  `MemoryClipboard`. These hold the mouse and keyboard state of a UI frame.
- **`quadgfx.ui_tabs`**: `TabSelector`, which moves focus between widgets on
  Tab and Shift+Tab and wraps around. Also `AnyStorage`, which keeps values per
  widget id.
- **`quadgfx.ui_window`**: `Window`, `RectOffset` and `LayoutArea`. These cover
  window geometry: full, title and content rectangles, resizing and moving.

## Installation

```
pip install quadgfx
```

## Example

```python
from quadgfx.canvas import Canvas, Color
from quadgfx.shapes import draw_circle, draw_rectangle

canvas = Canvas()
red = Color(1.0, 0.0, 0.0, 1.0)

draw_rectangle(canvas, 10, 10, 100, 50, red)
draw_circle(canvas, 200, 120, 30, red)

for call in canvas.calls:
    print(call.mode, len(call.vertices), len(call.indices))
```

When geometry follows other geometry with the same texture and draw mode, it
is merged into the same `DrawCall`. Call `canvas.clear()` at the start of each
frame.

## Atlases

```python
from quadgfx.atlas import Atlas
from quadgfx.canvas import Color
from quadgfx.image import Image

atlas = Atlas()
key = atlas.new_unique_id()
atlas.cache_sprite(key, Image.gen_image_color(8, 8, Color(1.0, 1.0, 1.0, 1.0)))
print(atlas.get(key).rect, atlas.get_uv_rect(key))
```

## Profiling

```python
from quadgfx.telemetry import Profiler

profiler = Profiler()
profiler.enable()
profiler.reset(0.016)  # the enable request takes effect at the frame boundary

with profiler.zone("update"):
    ...

profiler.reset(0.016)
for zone in profiler.frame().zones:
    print(zone.name, zone.duration)
```

## What it does not do

- It does not draw textured sprites. There are no texture objects and no
  texture-drawing functions. `Canvas.texture` records whatever value you pass
  in, and the shape functions always pass `None`.
- It does not load fonts, lay out text or draw text. The atlas can hold glyph
  bitmaps, but you have to produce them yourself.
- It has no complete UI object that takes events and runs windows. The input,
  tab-focus, storage and window-geometry classes are building blocks that you
  wire together yourself.
- It does not render anything to a screen or a file, with one exception:
  `Image.export_png` saves an image as PNG.

## Running the tests

```
pip install -e ".[test]"
pytest
```