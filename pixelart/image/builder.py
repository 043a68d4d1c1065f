"""Render canvases to RGBA rasters."""

import logging
from pathlib import Path
from typing import Optional, Union

import numpy as np

from pixelart.image.style import PixelImageStyle

logger = logging.getLogger(__name__)


class PixelImageBuilder:
    """Turn a canvas into an RGBA image.

    The builder only reads the canvas; build again after changing it.
    """

    def __init__(self, canvas, style: Optional[PixelImageStyle] = None):
        """Initialize image builder.

        Args:
            canvas: Canvas to render
            style: Raster layout (default: 10 px cells, 1 px dark gray border)
        """
        self.canvas = canvas
        self.style = style if style is not None else PixelImageStyle()

    def with_scale(self, scale: int) -> "PixelImageBuilder":
        return PixelImageBuilder(self.canvas, self.style.with_scale(scale))

    @property
    def image_size(self):
        return self.style.image_size(self.canvas.height, self.canvas.width)

    def get_image(self) -> np.ndarray:
        """Render the canvas.

        The image starts fully transparent. Each non-empty cell gets its
        surrounding border and a block of its color; empty cells stay
        transparent, border included.

        Returns:
            Array of shape (H', W', 4), uint8
        """
        height, width = self.image_size
        image = np.zeros((height, width, 4), dtype=np.uint8)
        cells = self.canvas.to_rgba_array()

        pw = self.style.pixel_width
        bw = self.style.border_width
        border = np.array(self.style.border_color.rgba, dtype=np.uint8)

        for row, column in np.argwhere(cells[..., 3] > 0):
            top, left = self.style.cell_origin(row, column)
            if bw:
                image[top - bw:top + pw + bw, left - bw:left + pw + bw] = border
            image[top:top + pw, left:left + pw] = cells[row, column]

        return image

    def save(self, path: Union[str, Path], background=None):
        """Render and write the image; the format follows the file suffix.

        Args:
            path: Output path (.png, .jpg/.jpeg or .gif)
            background: Color under transparent cells for formats without alpha
        """
        from pixelart.io.image_io import save_image

        logger.debug("Saving %dx%d canvas to %s", self.canvas.height, self.canvas.width, path)
        save_image(self.get_image(), path, background=background)

    def view(self, *others: "PixelImageBuilder", title: str = "pixelart"):
        """Show this image, and any others in extra windows."""
        from pixelart.viewer.app import view

        view([self.get_image()], *([other.get_image()] for other in others), title=title)
