"""Colors, positions and pixel handles."""

from pixelart.pixels.color import (
    PixelColor,
    InvalidColorError,
    WHITE,
    BLACK,
    RED,
    GREEN,
    BLUE,
    YELLOW,
    CYAN,
    MAGENTA,
)
from pixelart.pixels.position import (
    PixelPosition,
    StrictPosition,
    StrictPositions,
    PixelPositionOutOfBoundError,
    Direction,
    MAIN_DIRECTIONS,
    single_cycle,
    to_strict,
)
from pixelart.pixels.pixel import Pixel, PixelIter

__all__ = [
    "PixelColor",
    "InvalidColorError",
    "WHITE",
    "BLACK",
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
    "CYAN",
    "MAGENTA",
    "PixelPosition",
    "StrictPosition",
    "StrictPositions",
    "PixelPositionOutOfBoundError",
    "Direction",
    "MAIN_DIRECTIONS",
    "single_cycle",
    "to_strict",
    "Pixel",
    "PixelIter",
]
