"""Simple shapes as transparent canvases."""

from pixelart.canvas.base import MaybePixelCanvas
from pixelart.pixels.color import ColorLike, PixelColor
from pixelart.pixels.position import StrictPositions


def vertical_line(height: int, color: ColorLike) -> MaybePixelCanvas:
    """A one column line of ``height`` cells."""
    return MaybePixelCanvas(height, 1, fill=PixelColor.coerce(color))


def horizontal_line(width: int, color: ColorLike) -> MaybePixelCanvas:
    """A one row line of ``width`` cells."""
    return MaybePixelCanvas(1, width, fill=PixelColor.coerce(color))


def square(height: int, width: int, color: ColorLike) -> MaybePixelCanvas:
    """Border of a ``height`` x ``width`` rectangle, empty inside."""
    canvas = MaybePixelCanvas(height, width)

    canvas.draw(StrictPositions.TOP_LEFT, vertical_line(height, color))
    canvas.draw(StrictPositions.TOP_RIGHT, vertical_line(height, color))

    top_left = StrictPositions.TOP_LEFT.resolve(height, width)
    bottom_left = StrictPositions.BOTTOM_LEFT.resolve(height, width)
    canvas.draw(top_left.bounding_right(1), horizontal_line(width, color))
    canvas.draw(bottom_left.bounding_right(1), horizontal_line(width, color))

    return canvas
