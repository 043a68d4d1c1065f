"""Raster rendering of canvases."""

from pixelart.image.style import PixelImageStyle
from pixelart.image.builder import PixelImageBuilder

__all__ = ["PixelImageStyle", "PixelImageBuilder"]
