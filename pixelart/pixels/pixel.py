"""Live handles to single canvas cells and chainable iteration over them."""

from typing import Callable, Iterable, Iterator, List, Optional, TYPE_CHECKING

from pixelart.pixels.color import ColorLike, PixelColor, coerce_optional
from pixelart.pixels.position import StrictPosition

if TYPE_CHECKING:
    from pixelart.canvas.base import BaseCanvas


class Pixel:
    """A cell of a canvas, reading and writing through to the canvas."""

    def __init__(self, canvas: "BaseCanvas", position: StrictPosition):
        self._canvas = canvas
        self._position = position

    @property
    def position(self) -> StrictPosition:
        return self._position

    @property
    def color(self) -> Optional[PixelColor]:
        return self._canvas.color_at(self._position)

    @color.setter
    def color(self, value: Optional[ColorLike]):
        self._canvas.update_color_at(self._position, value)

    @property
    def has_color(self) -> bool:
        return self.color is not None

    def update_color(self, value: Optional[ColorLike]) -> Optional[PixelColor]:
        """Set a new color and return the previous one."""
        return self._canvas.update_color_at(self._position, value)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pixel):
            return NotImplemented
        return self._position == other._position and self.color == other.color

    def __repr__(self) -> str:
        return f"Pixel(position={self._position}, color={self.color})"


class PixelIter:
    """Row-major iteration over pixels with chainable filters.

    Example:
        >>> canvas.iter_pixels().filter_color(RED).update_colors(BLUE)
    """

    def __init__(self, pixels: Iterable[Pixel]):
        self._pixels = iter(pixels)

    def __iter__(self) -> Iterator[Pixel]:
        return self._pixels

    def __next__(self) -> Pixel:
        return next(self._pixels)

    def filter_position(self, predicate: Callable[[StrictPosition], bool]) -> "PixelIter":
        return PixelIter(p for p in self._pixels if predicate(p.position))

    def filter_color(self, color: Optional[ColorLike]) -> "PixelIter":
        target = coerce_optional(color)
        return PixelIter(p for p in self._pixels if p.color == target)

    def update_colors(self, color: Optional[ColorLike]) -> int:
        """Recolor every remaining pixel.

        Returns:
            Number of pixels updated
        """
        count = 0
        for pixel in self._pixels:
            pixel.color = color
            count += 1
        return count

    def positions(self) -> List[StrictPosition]:
        return [p.position for p in self._pixels]

    def count(self) -> int:
        return sum(1 for _ in self._pixels)
