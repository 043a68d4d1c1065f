"""Movable rectangular sub-regions of a canvas."""

import numpy as np
from typing import Iterator, Optional, Tuple

from pixelart.canvas.base import BaseCanvas, MaybePixelCanvas
from pixelart.pixels.color import ColorLike
from pixelart.pixels.position import PositionLike, StrictPosition

# Colors and mask of a rectangular region
Cells = Tuple[np.ndarray, np.ndarray]


class CanvasPartition(MaybePixelCanvas):
    """A ``height`` x ``width`` region of a source canvas that can move around.

    The partition is itself a (transparent) canvas: draw on it with a pen or
    any canvas operation, then ``write_source()`` to paste it onto the source
    at its current position. Parts hanging over the right or bottom edge of
    the source are clipped.
    """

    def __init__(self, source: BaseCanvas, top_left: PositionLike, height: int, width: int):
        """Initialize partition.

        Args:
            source: Canvas the partition belongs to
            top_left: Position of the partition's top left cell on ``source``
            height: Partition height
            width: Partition width
        """
        super().__init__(height, width)
        self._source = source
        self._position = source._strict(top_left)
        # (position, (colors, mask) under the last paste, (colors, mask) it left)
        self._backing: Optional[Tuple[StrictPosition, Cells, Cells]] = None

        colors, mask = self._region(self._position)
        rows, columns = mask.shape
        self._colors[:rows, :columns] = colors
        self._mask[:rows, :columns] = mask

    @property
    def source(self) -> BaseCanvas:
        return self._source

    @property
    def position(self) -> StrictPosition:
        """Top left of the partition on the source canvas."""
        return self._position

    def _region_size(self, position: Optional[StrictPosition] = None) -> Tuple[int, int]:
        position = self._position if position is None else position
        rows = min(self.height, self._source.height - position.row)
        columns = min(self.width, self._source.width - position.column)
        return rows, columns

    def positions(self) -> Iterator[StrictPosition]:
        """Source positions covered by the partition, row-major and clipped."""
        row, column = self._position.expand()
        rows, columns = self._region_size()
        for r in range(row, row + rows):
            for c in range(column, column + columns):
                yield StrictPosition(r, c, self._source.height, self._source.width)

    def update_color(self, color: Optional[ColorLike]):
        """Color every cell of the partition and write it to the source."""
        self.fill(color)
        self.write_source()

    def _region(self, position: StrictPosition) -> Cells:
        """Views of the source colors and mask under the partition at ``position``."""
        row, column = position.expand()
        rows, columns = self._region_size(position)
        return (
            self._source._colors[row:row + rows, column:column + columns],
            self._source._mask[row:row + rows, column:column + columns],
        )

    @staticmethod
    def _same_cells(colors: np.ndarray, mask: np.ndarray,
                    other_colors: np.ndarray, other_mask: np.ndarray) -> np.ndarray:
        """Per cell, whether both regions hold the same value."""
        same_color = np.all(colors == other_colors, axis=-1)
        return (mask == other_mask) & (~mask | same_color)

    def _restore(self):
        """Put back the cells under the last paste that still show the paste."""
        if self._backing is None:
            return
        position, (under_colors, under_mask), (pasted_colors, pasted_mask) = self._backing
        colors, mask = self._region(position)
        untouched = self._same_cells(colors, mask, pasted_colors, pasted_mask)
        colors[untouched] = under_colors[untouched]
        mask[untouched] = under_mask[untouched]
        self._backing = None

    def write_source(self):
        """Paste the partition onto the source at its current position.

        Pasting remembers the source cells it covers so ``crop_to`` can put
        them back later. Cells changed on the source since the previous
        paste at the same position replace the remembered ones.
        """
        colors, mask = self._region(self._position)
        if self._backing is None or self._backing[0] != self._position:
            under = (colors.copy(), mask.copy())
        else:
            _, under, (pasted_colors, pasted_mask) = self._backing
            changed = ~self._same_cells(colors, mask, pasted_colors, pasted_mask)
            under[0][changed] = colors[changed]
            under[1][changed] = mask[changed]

        self.draw_on(self._source, self._position)
        self._backing = (self._position, under, (colors.copy(), mask.copy()))

    def copy_to(self, position: PositionLike):
        """Move and paste, leaving the previous area as it is."""
        self._position = self._source._strict(position)
        self._backing = None
        self.write_source()

    def crop_to(self, position: PositionLike):
        """Restore the previous area, then move and paste."""
        self._restore()
        self._position = self._source._strict(position)
        self.write_source()

    def _plain_class(self):
        return MaybePixelCanvas

    def __repr__(self) -> str:
        return (f"CanvasPartition(position={self._position}, height={self.height}, "
                f"width={self.width})")
