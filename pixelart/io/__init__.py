"""I/O utilities for images, animations and templates."""

from pixelart.io.gif_exporter import GIFExporter, Repeat
from pixelart.io.image_io import (
    save_image,
    load_image,
    load_frames,
    canvas_from_image,
    flatten_rgba,
)
from pixelart.io.template_io import save_template, load_template

__all__ = [
    "GIFExporter",
    "Repeat",
    "save_image",
    "load_image",
    "load_frames",
    "canvas_from_image",
    "flatten_rgba",
    "save_template",
    "load_template",
]
