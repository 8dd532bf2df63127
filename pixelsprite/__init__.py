"""Pixel-art raster primitives, drawing, compression and rectangle packing."""

__version__ = "0.1.0"
__all__ = ["geometry", "raster", "draw", "system", "stbcompress", "rectpack"]