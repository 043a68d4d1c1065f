"""Animation context over a layered canvas."""

from typing import Any, Optional

from pixelart.animation.base import AnimationContext, PixelAnimationBuilder
from pixelart.canvas.base import BaseCanvas
from pixelart.canvas.layered import LayeredCanvas
from pixelart.pixels.color import ColorLike, WHITE


class LayeredAnimationContext(AnimationContext):
    """Captures the composition of all layers.

    ``canvas`` is the base layer; move or redraw top layers between frames.
    """

    def __init__(self, height: int, width: Optional[int] = None,
                 frame_count: Optional[int] = None, extra: Any = None,
                 fill: ColorLike = WHITE, builder: Optional[PixelAnimationBuilder] = None):
        super().__init__(height, width, frame_count, extra, fill, builder)
        self.layered_canvas = LayeredCanvas(height, width, fill)
        self.canvas = self.layered_canvas.base_layer

    def capture_canvas(self) -> BaseCanvas:
        return self.layered_canvas.resulting_canvas()
