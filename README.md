# pixelsprite

Building blocks for a pixel-art editor:

- `pixelsprite.geometry`: the `Vec2`, `Rect` and `Region` types, `ensure_tl_br`, and `region_clipped` / `region_clipped_xy_wh`, which clip a region to a bounding size.
- `pixelsprite.raster`: `RGBA` colours and the `Raster` pixel buffer. `Raster.from_file` loads an image with Pillow. It raises `OSError` if the file cannot be read. `set_pixel` ignores positions outside the buffer. `get_pixel` raises `IndexError` for them.
- `pixelsprite.draw`: `draw_rect`, `draw_line`, `draw_circle` (outlined or filled) and `draw_ellipse`. Each one clips to the raster and returns the dirty `Region`. `draw_line` stops just before its end point.
- `pixelsprite.system`: helpers for time, paths and exiting:
  - `now_microseconds` and `now_milliseconds` read the monotonic clock.
  - `sleep_milliseconds` sleeps.
  - `path_basename` and `path_extension` accept both `/` and `\` as separators.
  - `abort` raises `SystemExit`.
- `pixelsprite.stbcompress`: the compression module.
  - `compress` is an LZ-style compressor. Its stream has a header and an Adler-32 trailer.
  - `adler32` continues an Adler-32 checksum.
  - `format_words` prints compressed data as little-endian 32-bit hex words.
- `pixelsprite.rectpack`: `Packer` is a skyline rectangle packer. It has bottom-left and best-fit heuristics (`Heuristic`) and places `PackRect` objects in place.

## Install

```
pip install .
```

## Example

```python
from pixelsprite.geometry import Rect, Vec2
from pixelsprite.raster import RGBA, Raster
from pixelsprite.draw import draw_line, draw_circle

canvas = Raster(Rect(32, 32))
red = RGBA(255, 0, 0, 255)
dirty = draw_line(canvas, red, Vec2(0, 0), Vec2(31, 31))
draw_circle(canvas, red, Vec2(16, 16), 8, True)
print(canvas.get_pixel(16, 16))
```

Packing rectangles:

```python
from pixelsprite.rectpack import Packer, PackRect

packer = Packer(64, 64, 64)
rects = [PackRect(id=i, w=16, h=8) for i in range(4)]
all_packed = packer.pack(rects)
print([(r.x, r.y, r.was_packed) for r in rects])
```

The packer places taller rectangles first. It gives empty rectangles the position (0, 0). Rectangles that do not fit get `rectpack.MAXVAL` as both coordinates and have `was_packed` set to `False`.

## Command line

```
pixelsprite-compress myfont.ttf
```

The command compresses the file and prints three things to standard output:

1. The compressed size.
2. The size rounded up to a multiple of four, followed by `/4`.
3. The data as comma-separated `0x........` words.

If you give no arguments, it prints a usage line. If the file cannot be read, it prints an error and exits with status 1.

## What it does not do

This package holds only the pieces listed above. It has no editor window and no user interface. It cannot save rasters back to image files. It has no decompressor for the `compress` stream.

## Tests

```
pip install .[test]
pytest
```