"""Drawing primitives. Positions may lie outside the raster; clipping is handled here."""

from __future__ import annotations

from pixelsprite.geometry import Rect, Region, Vec2, region_clipped, region_clipped_xy_wh
from pixelsprite.raster import RGBA, Raster


def draw_rect(raster: Raster, color: RGBA, start: Vec2, end: Vec2) -> Region:
    """Fill the rectangle between two corners; returns the dirty region."""
    dirty = region_clipped(raster.dim, start, end)
    for y in range(dirty.min.y, dirty.max.y + 1):
        for x in range(dirty.min.x, dirty.max.x + 1):
            raster.set_pixel_unsafe(x, y, color)
    return dirty


def draw_line(raster: Raster, color: RGBA, start: Vec2, end: Vec2) -> Region:
    """Bresenham line from ``start`` up to, but not including, ``end``."""
    dirty = region_clipped(raster.dim, start, end)

    x, y = start.x, start.y
    dx, sx = abs(end.x - x), (1 if x < end.x else -1)
    dy, sy = -abs(end.y - y), (1 if y < end.y else -1)
    err = dx + dy

    while x != end.x or y != end.y:
        raster.set_pixel(x, y, color)
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy

    return dirty


def draw_circle(raster: Raster, color: RGBA, center: Vec2, radius: int, filled: bool) -> Region:
    """Midpoint circle, outlined or filled; returns the dirty region."""
    if radius < 0:
        raise ValueError("radius must not be negative")
    # The midpoint algorithm reaches r + 1, so shrink the radius by one.
    r = radius - 1
    cx, cy = center.x, center.y
    if r < 1:
        raster.set_pixel(cx, cy, color)
        return Region.xy_wh(cx, cy, 1, 1)

    x, y = 0, -r
    while x < -y:
        if 4 * x * x + 4 * y * y + 4 * y + 1 > 4 * r * r:
            y += 1

        octants = [
            (cx + x, cy + y), (cx - y, cy - x),
            (cx - y, cy + x), (cx + x, cy - y),
            (cx - x, cy - y), (cx + y, cy + x),
            (cx + y, cy - x), (cx - x, cy + y),
        ]

        if filled:
            for left, right in ((7, 0), (6, 1), (5, 2), (4, 3)):
                row = octants[left][1]
                for i in range(octants[left][0], octants[right][0] + 1):
                    raster.set_pixel(i, row, color)
        else:
            for px, py in octants:
                raster.set_pixel(px, py, color)
        x += 1

    return region_clipped_xy_wh(raster.dim, Vec2(cx - r, cy - r), Rect(r * 2, r * 2))


def draw_ellipse(raster: Raster, color: RGBA, start: Vec2, end: Vec2) -> Region:
    """Ellipse outline inscribed in the rectangle between two corners."""
    dirty = region_clipped(raster.dim, start, end)

    x0, y0, x1, y1 = start.x, start.y, end.x, end.y
    a = abs(x1 - x0)
    b = abs(y1 - y0)
    b1 = b & 1
    dx = 4 * (1 - a) * b * b
    dy = 4 * (b1 + 1) * a * a
    err = dx + dy + b1 * a * a

    if x0 > x1:
        x0 = x1
        x1 += a
    if y0 > y1:
        y0 = y1
    y0 += (b + 1) // 2
    y1 = y0 - b1
    a *= 8 * a
    b1 = 8 * b * b

    while True:
        raster.set_pixel(x1, y0, color)
        raster.set_pixel(x0, y0, color)
        raster.set_pixel(x0, y1, color)
        raster.set_pixel(x1, y1, color)

        e2 = 2 * err
        if e2 <= dy:
            y0 += 1
            y1 -= 1
            dy += a
            err += dy
        if e2 >= dx or 2 * err > dy:
            x0 += 1
            x1 -= 1
            dx += b1
            err += dx
        if x0 > x1:
            break

    while y0 - y1 < b:
        raster.set_pixel(x0 - 1, y0, color)
        raster.set_pixel(x0 + 1, y0, color)
        raster.set_pixel(x0 - 1, y1, color)
        raster.set_pixel(x1 + 1, y1, color)
        y0 += 1
        y1 -= 1

    return dirty