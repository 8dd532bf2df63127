"""Integer vectors, rectangles and regions used by the raster code."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """A 2D integer point."""

    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    """A width/height pair."""

    w: int
    h: int

    def area(self) -> int:
        return self.w * self.h


@dataclass(frozen=True)
class Region:
    """An inclusive region spanning from ``min`` (top-left) to ``max``."""

    min: Vec2
    max: Vec2

    @classmethod
    def xy_wh(cls, x: int, y: int, w: int, h: int) -> Region:
        return cls(Vec2(x, y), Vec2(x + w, y + h))

    @classmethod
    def nil(cls) -> Region:
        return cls(Vec2(0, 0), Vec2(0, 0))

    def is_nil(self) -> bool:
        return self == Region.nil()

    def to_rect(self) -> Rect:
        """Size of the region, counting both edges."""
        lo, hi = ensure_tl_br(self.min, self.max)
        return Rect(hi.x - lo.x + 1, hi.y - lo.y + 1)


def ensure_tl_br(a: Vec2, b: Vec2) -> tuple[Vec2, Vec2]:
    """Return the corners reordered so the first is top-left, the second bottom-right."""
    return (
        Vec2(min(a.x, b.x), min(a.y, b.y)),
        Vec2(max(a.x, b.x), max(a.y, b.y)),
    )


def region_clipped(bounds: Rect, start: Vec2, end: Vec2) -> Region:
    """Region between two corners, clipped to ``bounds``."""
    lo, hi = ensure_tl_br(start, end)
    return Region(
        Vec2(max(lo.x, 0), max(lo.y, 0)),
        Vec2(
            bounds.w - 1 if hi.x >= bounds.w else hi.x,
            bounds.h - 1 if hi.y >= bounds.h else hi.y,
        ),
    )


def region_clipped_xy_wh(bounds: Rect, xy: Vec2, wh: Rect) -> Region:
    """Region from a corner and a size, clipped to ``bounds``."""
    return region_clipped(bounds, xy, Vec2(xy.x + wh.w, xy.y + wh.h))