"""Animations of a single partition moving over a body canvas."""

from typing import Callable, Optional, Tuple

from pixelart.animation.base import Animated, AnimationContext, PixelAnimationBuilder
from pixelart.canvas.base import BaseCanvas
from pixelart.canvas.partition import CanvasPartition
from pixelart.image.style import PixelImageStyle
from pixelart.io.gif_exporter import Repeat
from pixelart.pixels.color import ColorLike
from pixelart.pixels.position import PositionLike


class SimpleAnimationContext(AnimationContext):
    """Context holding a body canvas and one partition of it."""

    def __init__(self, height: int, width: Optional[int], part_size: Tuple[int, int],
                 part_position: PositionLike, frame_count: Optional[int] = None,
                 builder: Optional[PixelAnimationBuilder] = None):
        super().__init__(height, width, frame_count=frame_count, builder=builder)
        part_height, part_width = part_size
        self._part = CanvasPartition(self.canvas, part_position, part_height, part_width)

    @property
    def body(self) -> BaseCanvas:
        return self.canvas

    @property
    def part(self) -> CanvasPartition:
        return self._part

    def update_part_color(self, color: Optional[ColorLike]) -> "SimpleAnimationContext":
        self._part.update_color(color)
        return self

    def update_body_color(self, color: ColorLike) -> "SimpleAnimationContext":
        self.canvas.fill(color)
        return self


SimpleCallback = Callable[[SimpleAnimationContext], object]
SimpleUpdater = Callable[[SimpleAnimationContext, int], bool]


class SimpleAnimation(Animated):
    """Animated partition over a body canvas, driven by callbacks."""

    def __init__(self, height: int, width: Optional[int], part_size: Tuple[int, int],
                 part_position: PositionLike, setup: SimpleCallback, updater: SimpleUpdater,
                 finisher: Optional[Callable[[SimpleAnimationContext, int], object]] = None,
                 frame_count: Optional[int] = None, scale: int = 1,
                 gif_repeat: Optional[Repeat] = None, style: Optional[PixelImageStyle] = None):
        """Initialize simple animation.

        Args:
            height: Body canvas height
            width: Body canvas width (defaults to ``height``)
            part_size: (height, width) of the partition
            part_position: Initial top left of the partition on the body
            setup: Called once with the context
            updater: Called with (context, frame index); False stops
            finisher: Called with (context, frame index) before each capture
            frame_count: Frames to try, None to run until ``updater`` stops
            scale: Image scale of captured frames
            gif_repeat: GIF loop mode (default: forever)
            style: Raster layout of captured frames
        """
        self.height = height
        self.width = width
        self.part_size = part_size
        self.part_position = part_position
        self.frame_count = frame_count
        self.scale = scale
        self.gif_repeat = gif_repeat if gif_repeat is not None else Repeat.infinite()
        self.style = style
        self._setup = setup
        self._updater = updater
        self._finisher = finisher

    def create_context(self) -> SimpleAnimationContext:
        builder = PixelAnimationBuilder(self.gif_repeat, self.scale, style=self.style)
        return SimpleAnimationContext(
            self.height, self.width, self.part_size, self.part_position,
            frame_count=self.frame_count, builder=builder,
        )

    def setup(self, ctx: SimpleAnimationContext):
        self._setup(ctx)

    def update(self, ctx: SimpleAnimationContext, i: int) -> bool:
        return bool(self._updater(ctx, i))

    def finisher(self, ctx: SimpleAnimationContext, i: int):
        if self._finisher is not None:
            self._finisher(ctx, i)


def create_simple_animation(height: int, width: Optional[int], part_size: Tuple[int, int],
                            part_position: PositionLike, setup: SimpleCallback,
                            updater: SimpleUpdater,
                            finisher: Optional[Callable[[SimpleAnimationContext, int], object]] = None,
                            frame_count: Optional[int] = None, scale: int = 1,
                            gif_repeat: Optional[Repeat] = None,
                            style: Optional[PixelImageStyle] = None) -> SimpleAnimationContext:
    """Build and run a ``SimpleAnimation``, returning its finished context."""
    return SimpleAnimation(
        height, width, part_size, part_position, setup, updater,
        finisher=finisher, frame_count=frame_count, scale=scale, gif_repeat=gif_repeat,
        style=style,
    ).create()
