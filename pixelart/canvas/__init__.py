"""Canvases and the tools that draw on them."""

from pixelart.canvas.base import BaseCanvas, PixelCanvas, MaybePixelCanvas
from pixelart.canvas.partition import CanvasPartition
from pixelart.canvas.pen import Pen, PenNotAttachedError
from pixelart.canvas.layered import LayerData, LayeredCanvas, DuplicateLayerTagError

__all__ = [
    "BaseCanvas",
    "PixelCanvas",
    "MaybePixelCanvas",
    "CanvasPartition",
    "Pen",
    "PenNotAttachedError",
    "LayerData",
    "LayeredCanvas",
    "DuplicateLayerTagError",
]
