"""RGBA pixel buffers."""

from __future__ import annotations

from os import PathLike
from typing import NamedTuple, Union

from PIL import Image

from pixelsprite.geometry import Rect


class RGBA(NamedTuple):
    """An 8-bit-per-channel colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0


_CHANNELS_BY_MODE = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}


class Raster:
    """A row-major grid of :class:`RGBA` pixels, initially all zero."""

    def __init__(self, dim: Rect) -> None:
        self.dim = dim
        self.data: list[RGBA] = [RGBA()] * dim.area()

    @classmethod
    def from_file(cls, path: Union[str, PathLike]) -> Raster:
        """Load an image file; raises ``OSError`` if it cannot be read."""
        with Image.open(path) as img:
            mode = img.mode
            if mode not in _CHANNELS_BY_MODE:
                if mode in ("1", "I", "I;16", "F"):
                    mode = "L"
                elif mode == "PA" or "transparency" in img.info or img.mode.endswith("A"):
                    mode = "RGBA"
                else:
                    mode = "RGB"
            converted = img.convert(mode) if img.mode != mode else img.copy()
        w, h = converted.size
        if w < 1 or h < 1:
            raise ValueError(f"invalid image dimensions: {w}x{h}")

        raster = cls(Rect(w, h))
        channels = _CHANNELS_BY_MODE[mode]
        pixels = converted.getdata()
        if channels == 1:
            raster.data = [RGBA(v, v, v, 255) for v in pixels]
        elif channels == 2:
            raster.data = [RGBA(v, a, 0, 255) for v, a in pixels]
        elif channels == 3:
            raster.data = [RGBA(r, g, b, 255) for r, g, b in pixels]
        else:
            raster.data = [RGBA(*p) for p in pixels]
        return raster

    def is_invalid(self) -> bool:
        return self.dim.area() == 0

    def get_pixel(self, x: int, y: int) -> RGBA:
        if not (0 <= x < self.dim.w and 0 <= y < self.dim.h):
            raise IndexError(f"pixel ({x}, {y}) outside {self.dim.w}x{self.dim.h}")
        return self.data[y * self.dim.w + x]

    def set_pixel_unsafe(self, x: int, y: int, color: RGBA) -> None:
        """Write a pixel without bounds checking."""
        self.data[y * self.dim.w + x] = color

    def set_pixel(self, x: int, y: int, color: RGBA) -> None:
        """Write a pixel; positions outside the raster are ignored."""
        if 0 <= x < self.dim.w and 0 <= y < self.dim.h:
            self.set_pixel_unsafe(x, y, color)