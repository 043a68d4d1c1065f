"""Heart templates."""

from pixelart.canvas.base import BaseCanvas
from pixelart.canvas.templates.base import Template
from pixelart.pixels.color import BLACK, PixelColor
from pixelart.pixels.position import CENTER, TOP_CENTER, TOP_LEFT

HEART_RED = PixelColor(196, 0, 0)


class HalfHeart(Template):
    """Left half of a heart, 6 x 4."""

    @property
    def height(self) -> int:
        return 6

    @property
    def width(self) -> int:
        return 4

    @property
    def name(self) -> str:
        return "half_heart"

    def define(self, canvas: BaseCanvas):
        (canvas.attach_new_pen(BLACK, TOP_LEFT)
            .right(1)
            .start()
            .branch(lambda pen: pen.right(1).down_right(1))
            .branch(lambda pen: pen.down_left(1).down(1).down_right(3)))

        canvas.fill_inside(HEART_RED, CENTER)


class Heart(Template):
    """A full heart, 6 x 7: a half heart and its mirror image."""

    @property
    def height(self) -> int:
        return 6

    @property
    def width(self) -> int:
        return 7

    @property
    def name(self) -> str:
        return "heart"

    def define(self, canvas: BaseCanvas):
        canvas.draw(TOP_LEFT, HalfHeart())
        canvas.draw(TOP_CENTER, HalfHeart().create().flip_horizontal())
