"""A pen that walks over a canvas, painting the cells it visits."""

from typing import Callable, Optional, TYPE_CHECKING

from pixelart.pixels.color import ColorLike, PixelColor
from pixelart.pixels.position import Direction, PositionLike, StrictPosition

if TYPE_CHECKING:
    from pixelart.canvas.base import BaseCanvas


class PenNotAttachedError(RuntimeError):
    """Raised when moving a pen that has no canvas."""


class Pen:
    """Pen drawing with a single color.

    A pen starts unattached; ``attach`` puts it on a canvas at a start
    position. Moves clamp at the canvas border and paint every visited cell
    while the pen is down (between ``start()`` and ``stop()``). Every method
    returns the pen so calls chain::

        Pen(BLACK).attach(canvas, TOP_LEFT).start().right(3).down(2)
    """

    def __init__(self, color: ColorLike, drawing: bool = False):
        self.color = PixelColor.coerce(color)
        self.drawing = drawing
        self._canvas: Optional["BaseCanvas"] = None
        self._position: Optional[StrictPosition] = None

    @property
    def attached(self) -> bool:
        return self._canvas is not None

    @property
    def canvas(self) -> Optional["BaseCanvas"]:
        return self._canvas

    @property
    def position(self) -> StrictPosition:
        self._require_canvas()
        return self._position

    def attach(self, canvas: "BaseCanvas", start: PositionLike) -> "Pen":
        """New pen on ``canvas`` at ``start``, not drawing yet."""
        pen = Pen(self.color)
        pen._canvas = canvas
        pen._position = canvas._strict(start)
        return pen

    def detach(self) -> "Pen":
        """Unattached pen keeping this pen's color and drawing state."""
        return Pen(self.color, self.drawing)

    def _require_canvas(self):
        if self._canvas is None:
            raise PenNotAttachedError("Pen must be attached to a canvas first")

    def _draw(self) -> "Pen":
        if self.drawing:
            self._canvas.update_color_at(self._position, self.color)
        return self

    def start(self) -> "Pen":
        """Put the pen down and paint the current cell."""
        self._require_canvas()
        self.drawing = True
        return self._draw()

    def stop(self) -> "Pen":
        self.drawing = False
        return self

    def go(self, direction: Direction, amount: int = 1) -> "Pen":
        """Walk ``amount`` cells in ``direction``, one cell at a time."""
        self._require_canvas()
        for _ in range(amount):
            self._position = self._position.bounding_direction(direction, 1)
            self._draw()
        return self

    def up(self, amount: int = 1) -> "Pen":
        return self.go(Direction.UP, amount)

    def down(self, amount: int = 1) -> "Pen":
        return self.go(Direction.DOWN, amount)

    def left(self, amount: int = 1) -> "Pen":
        return self.go(Direction.LEFT, amount)

    def right(self, amount: int = 1) -> "Pen":
        return self.go(Direction.RIGHT, amount)

    def up_right(self, amount: int = 1) -> "Pen":
        return self.go(Direction.UP_RIGHT, amount)

    def up_left(self, amount: int = 1) -> "Pen":
        return self.go(Direction.UP_LEFT, amount)

    def down_right(self, amount: int = 1) -> "Pen":
        return self.go(Direction.DOWN_RIGHT, amount)

    def down_left(self, amount: int = 1) -> "Pen":
        return self.go(Direction.DOWN_LEFT, amount)

    def branch(self, fn: Callable[["Pen"], object]) -> "Pen":
        """Run ``fn(pen)`` and then return to the position before it."""
        self._require_canvas()
        before = self._position
        fn(self)
        self._position = before
        return self

    def __repr__(self) -> str:
        return f"Pen(color={self.color}, drawing={self.drawing}, position={self._position})"
