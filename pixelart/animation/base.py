"""Frame-by-frame animations rendered to GIF."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Union

import numpy as np

from pixelart.canvas.base import BaseCanvas, PixelCanvas
from pixelart.image.style import PixelImageStyle
from pixelart.io.gif_exporter import GIFExporter, Repeat
from pixelart.pixels.color import ColorLike, WHITE

logger = logging.getLogger(__name__)

# Upper bound on frames when an animation has no fixed frame count
MAX_FRAMES = 65535


class PixelAnimationBuilder:
    """Collects rendered frames and writes them as a GIF."""

    def __init__(self, repeat: Optional[Repeat] = None, scale: int = 1,
                 frames: Optional[Iterable[np.ndarray]] = None,
                 style: Optional[PixelImageStyle] = None,
                 frame_duration: float = 100):
        """Initialize animation builder.

        Args:
            repeat: GIF loop mode (default: forever)
            scale: Scale applied to ``style`` when rendering canvases
            frames: Already rendered frames
            style: Raster layout of canvas frames (default style if None)
            frame_duration: Frame duration in milliseconds
        """
        self.repeat = repeat if repeat is not None else Repeat.infinite()
        self.scale = scale
        self.style = style if style is not None else PixelImageStyle()
        self.frame_duration = frame_duration
        self.frames: List[np.ndarray] = list(frames) if frames is not None else []

    def push_frame(self, image: np.ndarray):
        self.frames.append(np.asarray(image))

    def render(self, canvas: BaseCanvas) -> np.ndarray:
        return canvas.image_builder(self.style).with_scale(self.scale).get_image()

    def push_frame_from_canvas(self, canvas: BaseCanvas):
        """Render ``canvas`` with this builder's style and scale and add it."""
        self.frames.append(self.render(canvas))

    def __len__(self) -> int:
        return len(self.frames)

    def save(self, output_path: Union[str, Path], background: Optional[ColorLike] = None):
        """Write the frames to a GIF file.

        Raises:
            ValueError: If there are no frames
        """
        exporter = GIFExporter(output_path, self.repeat, self.frame_duration, background)
        for frame in self.frames:
            exporter.add_frame(frame)
        exporter.export()

    def view(self, title: str = "pixelart"):
        from pixelart.viewer.app import view

        view(self.frames, title=title)


class AnimationContext:
    """State handed to animation callbacks: a canvas and the frames so far."""

    def __init__(self, height: int, width: Optional[int] = None,
                 frame_count: Optional[int] = None, extra: Any = None,
                 fill: ColorLike = WHITE, builder: Optional[PixelAnimationBuilder] = None):
        """Initialize animation context.

        Args:
            height: Canvas height
            width: Canvas width (defaults to ``height``)
            frame_count: Number of frames to try, None to run until the
                update callback returns False
            extra: Any user state carried between frames
            fill: Initial canvas color
            builder: Frame collector (a default one if None)
        """
        self.canvas: BaseCanvas = PixelCanvas(height, width, fill)
        self.frame_count = frame_count
        self.extra = extra
        self.builder = builder if builder is not None else PixelAnimationBuilder()

    def capture_canvas(self) -> BaseCanvas:
        """Canvas that ``capture()`` renders."""
        return self.canvas

    def capture(self) -> "AnimationContext":
        self.builder.push_frame_from_canvas(self.capture_canvas())
        return self

    def with_scale(self, scale: int) -> "AnimationContext":
        self.builder.scale = scale
        return self

    def with_gif_repeat(self, repeat: Repeat) -> "AnimationContext":
        self.builder.repeat = repeat
        return self

    def with_modified_canvas(self, modifier: Callable[[BaseCanvas], object]) -> "AnimationContext":
        modifier(self.canvas)
        return self

    def save(self, output_path: Union[str, Path], background: Optional[ColorLike] = None):
        self.builder.save(output_path, background)

    def view(self, title: str = "pixelart"):
        self.builder.view(title)

    def take_images(self) -> List[np.ndarray]:
        return self.builder.frames


class Animated(ABC):
    """Abstract base class for animations.

    ``create()`` builds a context, runs ``setup`` once, then calls
    ``update`` for frame 0, 1, ... A frame is captured (after ``finisher``)
    each time ``update`` returns True; the first False ends the animation.
    """

    @abstractmethod
    def create_context(self) -> AnimationContext:
        pass

    @abstractmethod
    def setup(self, ctx: AnimationContext):
        """Prepare the canvas before the first frame."""
        pass

    @abstractmethod
    def update(self, ctx: AnimationContext, i: int) -> bool:
        """Advance to frame ``i``.

        Returns:
            True to capture the frame, False to stop
        """
        pass

    def finisher(self, ctx: AnimationContext, i: int):
        """Called after a successful update, right before the capture."""
        pass

    def create(self) -> AnimationContext:
        ctx = self.create_context()
        self.setup(ctx)

        limit = ctx.frame_count if ctx.frame_count is not None else MAX_FRAMES
        for i in range(limit):
            if not self.update(ctx, i):
                break
            self.finisher(ctx, i)
            ctx.capture()
        else:
            if ctx.frame_count is None:
                logger.warning("Animation stopped after reaching %d frames", MAX_FRAMES)

        logger.debug("Animation created with %d frames", len(ctx.builder))
        return ctx


class Animation(Animated):
    """An animation assembled from callbacks."""

    def __init__(self, context_builder: Callable[[], AnimationContext],
                 setup: Callable[[AnimationContext], object],
                 updater: Callable[[AnimationContext, int], bool],
                 finisher: Optional[Callable[[AnimationContext, int], object]] = None):
        """Initialize animation.

        Args:
            context_builder: Returns a fresh context
            setup: Called once with the context
            updater: Called with (context, frame index); False stops
            finisher: Called with (context, frame index) before each capture
        """
        self._context_builder = context_builder
        self._setup = setup
        self._updater = updater
        self._finisher = finisher

    def create_context(self) -> AnimationContext:
        return self._context_builder()

    def setup(self, ctx: AnimationContext):
        self._setup(ctx)

    def update(self, ctx: AnimationContext, i: int) -> bool:
        return bool(self._updater(ctx, i))

    def finisher(self, ctx: AnimationContext, i: int):
        if self._finisher is not None:
            self._finisher(ctx, i)
