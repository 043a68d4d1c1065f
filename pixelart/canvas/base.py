"""Fixed-size grids of pixel colors backed by numpy arrays."""

import numpy as np
from typing import Iterator, List, Optional, TYPE_CHECKING

from pixelart.pixels.color import ColorLike, PixelColor, WHITE, coerce_optional
from pixelart.pixels.pixel import Pixel, PixelIter
from pixelart.pixels.position import (
    Direction,
    PixelPositionOutOfBoundError,
    PositionLike,
    StrictPosition,
    StrictPositions,
    single_cycle,
    to_strict,
)

if TYPE_CHECKING:
    from pixelart.canvas.partition import CanvasPartition
    from pixelart.canvas.pen import Pen
    from pixelart.image.builder import PixelImageBuilder
    from pixelart.image.style import PixelImageStyle


class BaseCanvas:
    """Common base class for canvases.

    Cells live in two arrays: ``(H, W, 3)`` uint8 colors and an ``(H, W)``
    bool mask telling which cells hold a color. Dimensions never change
    after construction.
    """

    # Whether cells may be empty (transparent)
    allows_empty = False

    def __init__(self, height: int, width: Optional[int] = None, fill: Optional[ColorLike] = None):
        """Initialize canvas.

        Args:
            height: Number of rows
            width: Number of columns (defaults to ``height``)
            fill: Initial color of every cell, None for empty cells
        """
        width = height if width is None else width
        if height <= 0 or width <= 0:
            raise ValueError(f"Canvas size must be positive, got ({height}, {width})")
        self._height = int(height)
        self._width = int(width)
        self._colors = np.zeros((self._height, self._width, 3), dtype=np.uint8)
        self._mask = np.zeros((self._height, self._width), dtype=bool)
        self.fill(fill)

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def shape(self):
        return (self._height, self._width)

    @property
    def clear_value(self) -> Optional[PixelColor]:
        """Value every cell gets on ``clear()``."""
        return None if self.allows_empty else WHITE

    def _strict(self, position: PositionLike) -> StrictPosition:
        return to_strict(position, self._height, self._width)

    def _cell(self, row: int, column: int) -> Optional[PixelColor]:
        if not self._mask[row, column]:
            return None
        r, g, b = self._colors[row, column]
        return PixelColor(int(r), int(g), int(b))

    def _write(self, row: int, column: int, color: Optional[PixelColor]):
        if color is None:
            if not self.allows_empty:
                raise ValueError("Cells of an opaque canvas can not be empty")
            self._colors[row, column] = 0
            self._mask[row, column] = False
        else:
            self._colors[row, column] = color.rgb
            self._mask[row, column] = True

    def color_at(self, position: PositionLike) -> Optional[PixelColor]:
        """Color of the cell at ``position`` (None for an empty cell)."""
        row, column = self._strict(position).expand()
        return self._cell(row, column)

    def update_color_at(self, position: PositionLike,
                        color: Optional[ColorLike]) -> Optional[PixelColor]:
        """Set the color at ``position``.

        Returns:
            The previous color

        Raises:
            PixelPositionOutOfBoundError: If position is outside the canvas
            ValueError: If ``color`` is None on an opaque canvas
        """
        row, column = self._strict(position).expand()
        previous = self._cell(row, column)
        self._write(row, column, coerce_optional(color))
        return previous

    def __getitem__(self, position: PositionLike) -> Pixel:
        return Pixel(self, self._strict(position))

    def __setitem__(self, position: PositionLike, color: Optional[ColorLike]):
        self.update_color_at(position, color)

    def _positions(self) -> Iterator[StrictPosition]:
        for row in range(self._height):
            for column in range(self._width):
                yield StrictPosition(row, column, self._height, self._width)

    def iter_pixels(self) -> PixelIter:
        """Iterate every cell in row-major order."""
        return PixelIter(Pixel(self, position) for position in self._positions())

    def iter_existing_pixels(self) -> PixelIter:
        """Iterate the cells holding a color, in row-major order."""
        return PixelIter(
            Pixel(self, position) for position in self._positions()
            if self._mask[position.row, position.column]
        )

    def get_row(self, row: int) -> List[Optional[PixelColor]]:
        self._strict((row, 0))
        return [self._cell(row, column) for column in range(self._width)]

    def rows(self) -> Iterator[List[Optional[PixelColor]]]:
        for row in range(self._height):
            yield self.get_row(row)

    def fill(self, color: Optional[ColorLike]):
        """Set every cell to ``color``."""
        color = coerce_optional(color)
        if color is None:
            if not self.allows_empty:
                raise ValueError("Cells of an opaque canvas can not be empty")
            self._colors[...] = 0
            self._mask[...] = False
        else:
            self._colors[...] = color.rgb
            self._mask[...] = True

    def clear(self):
        """Reset every cell: white for opaque canvases, empty otherwise."""
        self.fill(self.clear_value)

    def fill_inside(self, color: Optional[ColorLike], point_inside: PositionLike) -> int:
        """Flood fill the 4-connected region that shares the color of ``point_inside``.

        Args:
            color: New color of the region
            point_inside: Any cell of the region

        Returns:
            Number of cells recolored
        """
        start = self._strict(point_inside)
        color = coerce_optional(color)
        base = self.color_at(start)
        if color == base:
            return 0

        filled = 0
        stack = [start]
        while stack:
            position = stack.pop()
            if self._cell(position.row, position.column) != base:
                continue
            self._write(position.row, position.column, color)
            filled += 1
            for direction in single_cycle(Direction.UP):
                if not direction.is_main:
                    continue
                try:
                    stack.append(position.checked_direction(direction, 1))
                except PixelPositionOutOfBoundError:
                    continue
        return filled

    def swap(self, first: PositionLike, second: PositionLike):
        """Exchange the values of two cells."""
        r1, c1 = self._strict(first).expand()
        r2, c2 = self._strict(second).expand()
        self._colors[[r1, r2], [c1, c2]] = self._colors[[r2, r1], [c2, c1]]
        self._mask[[r1, r2], [c1, c2]] = self._mask[[r2, r1], [c2, c1]]

    def _plain_class(self):
        return MaybePixelCanvas if self.allows_empty else PixelCanvas

    def _from_arrays_like(self, colors: np.ndarray, mask: np.ndarray) -> "BaseCanvas":
        canvas = self._plain_class()(self._height, self._width)
        canvas._colors[...] = colors
        canvas._mask[...] = mask
        return canvas

    def copy(self) -> "BaseCanvas":
        return self._from_arrays_like(self._colors, self._mask)

    def flip_horizontal(self) -> "BaseCanvas":
        """New canvas mirrored left to right."""
        return self._from_arrays_like(self._colors[:, ::-1], self._mask[:, ::-1])

    def flip_vertical(self) -> "BaseCanvas":
        """New canvas mirrored top to bottom."""
        return self._from_arrays_like(self._colors[::-1], self._mask[::-1])

    def filled_count(self) -> int:
        return int(self._mask.sum())

    def to_rgba_array(self) -> np.ndarray:
        """One RGBA value per cell, ``(0, 0, 0, 0)`` for empty cells.

        Returns:
            Array of shape (H, W, 4), uint8
        """
        rgba = np.zeros((self._height, self._width, 4), dtype=np.uint8)
        rgba[..., :3][self._mask] = self._colors[self._mask]
        rgba[..., 3][self._mask] = 255
        return rgba

    @classmethod
    def from_rgba_array(cls, rgba: np.ndarray) -> "BaseCanvas":
        """Build a canvas from an ``(H, W, 3|4)`` array; alpha 0 means empty."""
        rgba = np.asarray(rgba)
        if rgba.ndim != 3 or rgba.shape[2] not in (3, 4):
            raise ValueError(f"Expected an (H, W, 3) or (H, W, 4) array, got {rgba.shape}")
        height, width = rgba.shape[:2]
        canvas = cls(height, width)
        mask = np.ones((height, width), dtype=bool) if rgba.shape[2] == 3 else rgba[..., 3] > 0
        if not cls.allows_empty and not mask.all():
            raise ValueError("Cells of an opaque canvas can not be empty")
        canvas._colors[mask] = rgba[..., :3][mask].astype(np.uint8)
        canvas._mask[...] = mask
        return canvas

    def draw_on(self, canvas: "BaseCanvas", start: PositionLike = StrictPositions.TOP_LEFT):
        """Paste this canvas onto ``canvas`` with its top left cell at ``start``.

        Cells falling outside ``canvas`` are clipped and empty cells are skipped.
        """
        row, column = canvas._strict(start).expand()
        height = min(self._height, canvas.height - row)
        width = min(self._width, canvas.width - column)
        source_mask = self._mask[:height, :width]
        target = canvas._colors[row:row + height, column:column + width]
        target[source_mask] = self._colors[:height, :width][source_mask]
        canvas._mask[row:row + height, column:column + width] |= source_mask

    def draw(self, start: PositionLike, drawable):
        """Draw anything exposing ``draw_on(canvas, start)`` onto this canvas."""
        drawable.draw_on(self, start)

    def draw_exact_abs(self, drawable):
        """Draw a drawable of the exact same size at the top left corner."""
        if (drawable.height, drawable.width) != self.shape:
            raise ValueError(
                f"Drawable size ({drawable.height}, {drawable.width}) does not match "
                f"canvas size {self.shape}"
            )
        self.draw(StrictPositions.TOP_LEFT, drawable)

    def partition(self, top_left: PositionLike, bottom_right: PositionLike) -> "CanvasPartition":
        """Rectangular sub-region between two corners (inclusive)."""
        from pixelart.canvas.partition import CanvasPartition

        top_left = self._strict(top_left)
        bottom_right = self._strict(bottom_right)
        if bottom_right.row < top_left.row or bottom_right.column < top_left.column:
            raise ValueError(f"Bottom right {bottom_right} is above or left of top left {top_left}")
        return CanvasPartition(
            self,
            top_left,
            bottom_right.row - top_left.row + 1,
            bottom_right.column - top_left.column + 1,
        )

    def attach_new_pen(self, color: ColorLike, start: PositionLike) -> "Pen":
        from pixelart.canvas.pen import Pen

        return Pen(color).attach(self, start)

    def image_builder(self, style: Optional["PixelImageStyle"] = None) -> "PixelImageBuilder":
        from pixelart.image.builder import PixelImageBuilder

        return PixelImageBuilder(self, style)

    def default_image_builder(self) -> "PixelImageBuilder":
        return self.image_builder()

    def __eq__(self, other) -> bool:
        if not isinstance(other, BaseCanvas):
            return NotImplemented
        return (
            self.allows_empty == other.allows_empty
            and self.shape == other.shape
            and np.array_equal(self._mask, other._mask)
            and np.array_equal(self._colors[self._mask], other._colors[other._mask])
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(height={self._height}, width={self._width})"


class PixelCanvas(BaseCanvas):
    """Canvas whose cells always hold a color."""

    allows_empty = False

    def __init__(self, height: int, width: Optional[int] = None, fill: ColorLike = WHITE):
        super().__init__(height, width, fill)


class MaybePixelCanvas(BaseCanvas):
    """Canvas whose cells may be empty (transparent)."""

    allows_empty = True

    def __init__(self, height: int, width: Optional[int] = None,
                 fill: Optional[ColorLike] = None):
        super().__init__(height, width, fill)
