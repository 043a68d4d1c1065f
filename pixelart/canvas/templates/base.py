"""Base class for canvas templates."""

from abc import ABC, abstractmethod

from pixelart.canvas.base import BaseCanvas, MaybePixelCanvas
from pixelart.pixels.position import PositionLike, StrictPositions


class Template(ABC):
    """Abstract base class for templates.

    A template knows how to define a fixed-size drawing on a transparent
    canvas. Templates are drawables: ``canvas.draw(position, template)``.
    """

    @property
    @abstractmethod
    def height(self) -> int:
        """Return the height of this template."""
        pass

    @property
    @abstractmethod
    def width(self) -> int:
        """Return the width of this template."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this template."""
        pass

    @abstractmethod
    def define(self, canvas: BaseCanvas):
        """Draw the template on a canvas of the template's size.

        Args:
            canvas: Canvas to draw on, at least ``height`` x ``width``
        """
        pass

    def create(self) -> MaybePixelCanvas:
        """Draw the template on a new empty canvas."""
        canvas = MaybePixelCanvas(self.height, self.width)
        self.define(canvas)
        return canvas

    def apply_existing(self, canvas: BaseCanvas):
        self.define(canvas)

    def draw_on(self, canvas: BaseCanvas, start: PositionLike = StrictPositions.TOP_LEFT):
        self.create().draw_on(canvas, start)
