"""pixelart: pixel art canvases rendered to images and GIF animations."""

__version__ = "0.1.0"

from pixelart.pixels import (
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
    PixelPosition,
    StrictPosition,
    StrictPositions,
    PixelPositionOutOfBoundError,
    Direction,
    Pixel,
    PixelIter,
)
from pixelart.pixels.position import (
    TOP_LEFT,
    TOP_RIGHT,
    BOTTOM_RIGHT,
    BOTTOM_LEFT,
    CENTER,
    TOP_CENTER,
    RIGHT_CENTER,
    BOTTOM_CENTER,
    LEFT_CENTER,
)
from pixelart.canvas import (
    PixelCanvas,
    MaybePixelCanvas,
    CanvasPartition,
    Pen,
    LayerData,
    LayeredCanvas,
    DuplicateLayerTagError,
)
from pixelart.canvas.templates import Template, get_template, list_templates
from pixelart.image import PixelImageStyle, PixelImageBuilder
from pixelart.animation import (
    Repeat,
    PixelAnimationBuilder,
    AnimationContext,
    Animated,
    Animation,
    create_simple_animation,
)

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
    "Pixel",
    "PixelIter",
    "TOP_LEFT",
    "TOP_RIGHT",
    "BOTTOM_RIGHT",
    "BOTTOM_LEFT",
    "CENTER",
    "TOP_CENTER",
    "RIGHT_CENTER",
    "BOTTOM_CENTER",
    "LEFT_CENTER",
    "PixelCanvas",
    "MaybePixelCanvas",
    "CanvasPartition",
    "Pen",
    "LayerData",
    "LayeredCanvas",
    "DuplicateLayerTagError",
    "Template",
    "get_template",
    "list_templates",
    "PixelImageStyle",
    "PixelImageBuilder",
    "Repeat",
    "PixelAnimationBuilder",
    "AnimationContext",
    "Animated",
    "Animation",
    "create_simple_animation",
]
