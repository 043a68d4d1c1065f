"""Space invader style alien templates."""

from pixelart.canvas.base import BaseCanvas
from pixelart.canvas.templates.base import Template
from pixelart.pixels.color import BLACK, PixelColor
from pixelart.pixels.position import BOTTOM_LEFT, LEFT_CENTER, TOP_LEFT

ALIEN_PURPLE = PixelColor.from_red(106).with_blue(127)


class HalfAlienMonster(Template):
    """Right half of the alien monster, 17 x 10."""

    @property
    def height(self) -> int:
        return 17

    @property
    def width(self) -> int:
        return 10

    @property
    def name(self) -> str:
        return "half_alien_monster"

    def define(self, canvas: BaseCanvas):
        (canvas.attach_new_pen(BLACK, BOTTOM_LEFT)
            .up(4)
            .start()
            .right(1)
            .down(2)
            .right(5)
            .down(2)
            .left(2)
            .up(4)
            .right(2)
            .branch(lambda pen: pen.up(2))
            .right(1)
            .up(2)
            .right(1)
            .up(1)
            .right(1)
            .up(5)
            .left(2)
            .branch(lambda pen: pen.down(4))
            .up(2)
            .left(1)
            .branch(lambda pen: pen.up(2).left(2).down(4).right(1).down(1).right(1).down(3))
            .left(3)
            .branch(lambda pen: pen.down(1))
            .up(1)
            .left(2)
            .down(2)
            .left(1)
            .stop()
            .down(4)
            .right(2)
            .start()
            .down(2)
            .right(1)
            .up(2))

        # Body color, filled region by region
        canvas.fill_inside(ALIEN_PURPLE, LEFT_CENTER)
        canvas[(1, 5)] = ALIEN_PURPLE
        canvas.fill_inside(ALIEN_PURPLE, (3, 5))
        canvas.fill_inside(ALIEN_PURPLE, (5, 8))
        canvas[(15, 5)] = ALIEN_PURPLE


class AlienMonster(Template):
    """The whole alien monster, 17 x 20."""

    @property
    def height(self) -> int:
        return 17

    @property
    def width(self) -> int:
        return 20

    @property
    def name(self) -> str:
        return "alien_monster"

    def define(self, canvas: BaseCanvas):
        canvas.draw(TOP_LEFT, HalfAlienMonster().create().flip_horizontal())
        canvas.draw((0, 10), HalfAlienMonster())
