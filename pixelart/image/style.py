"""How canvas cells are laid out on a raster image."""

from dataclasses import dataclass, field, replace
from typing import Tuple

from pixelart.pixels.color import PixelColor


@dataclass(frozen=True)
class PixelImageStyle:
    """Raster layout of a canvas.

    Every cell becomes a ``pixel_width`` square block. Blocks are separated
    by ``border_width`` lines of ``border_color``, including an outer border,
    so an image of ``n`` cells is ``n * pixel_width + (n + 1) * border_width``
    pixels along that axis.
    """
    pixel_width: int = 10
    border_width: int = 1
    border_color: PixelColor = field(default_factory=lambda: PixelColor.splat(50))

    def __post_init__(self):
        if self.pixel_width <= 0:
            raise ValueError(f"pixel_width must be positive, got {self.pixel_width}")
        if self.border_width < 0:
            raise ValueError(f"border_width can not be negative, got {self.border_width}")
        # Frozen dataclass, so bypass __setattr__ to normalize the color
        object.__setattr__(self, "border_color", PixelColor.coerce(self.border_color))

    @classmethod
    def plain(cls) -> "PixelImageStyle":
        """One image pixel per cell and no border."""
        return cls(pixel_width=1, border_width=0)

    def with_scale(self, scale: int) -> "PixelImageStyle":
        """Multiply both pixel and border widths by ``scale``."""
        if scale <= 0:
            raise ValueError(f"Scale must be positive, got {scale}")
        return replace(
            self,
            pixel_width=self.pixel_width * scale,
            border_width=self.border_width * scale,
        )

    def image_size(self, height: int, width: int) -> Tuple[int, int]:
        """Raster (height, width) for a ``height`` x ``width`` canvas."""
        pw, bw = self.pixel_width, self.border_width
        return (height * pw + (height + 1) * bw, width * pw + (width + 1) * bw)

    def cell_origin(self, row: int, column: int) -> Tuple[int, int]:
        """Top left raster pixel of a cell's color block."""
        step = self.pixel_width + self.border_width
        return (row * step + self.border_width, column * step + self.border_width)
