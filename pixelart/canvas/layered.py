"""A base canvas with transparent layers stacked on top of it."""

from typing import Callable, List, Optional, Tuple, Union

from pixelart.canvas.base import BaseCanvas, MaybePixelCanvas, PixelCanvas
from pixelart.pixels.color import ColorLike, WHITE
from pixelart.pixels.position import (
    PixelPosition,
    PositionLike,
    StrictPosition,
    StrictPositions,
)


class DuplicateLayerTagError(ValueError):
    """Raised when a layer is added with a tag that is already in use."""


class LayerData:
    """A transparent canvas, an optional tag and where to draw it.

    The drawing position is the top left of the layer on the layered canvas.
    It is kept unbounded; layers drawn past the border are clipped. Named
    positions such as ``CENTER`` refer to the layered canvas, so they are
    resolved once the layer is added to one.
    """

    def __init__(self, canvas: MaybePixelCanvas, tag: Optional[str] = None,
                 drawing_position: PositionLike = (0, 0)):
        self.canvas = canvas
        self.tag = tag
        self.drawing_position = PixelPosition(0, 0)
        # (height, width) of the layered canvas holding this layer
        self._area: Optional[Tuple[int, int]] = None
        self._anchor: Optional[StrictPositions] = None
        self._place(drawing_position)

    def _place(self, position: PositionLike):
        if isinstance(position, StrictPositions):
            if self._area is None:
                self._anchor = position
                return
            position = position.resolve(*self._area)
        self._anchor = None
        if isinstance(position, StrictPosition):
            position = position.unbound()
        elif not isinstance(position, PixelPosition):
            row, column = position
            position = PixelPosition(int(row), int(column))
        self.drawing_position = position

    def _attach(self, height: int, width: int):
        self._area = (height, width)
        if self._anchor is not None:
            self._place(self._anchor)

    @classmethod
    def build(cls, height: int, width: Optional[int] = None,
              builder: Optional[Callable[[MaybePixelCanvas], object]] = None,
              tag: Optional[str] = None) -> "LayerData":
        """Create a layer on a new empty canvas, filled in by ``builder``."""
        canvas = MaybePixelCanvas(height, width)
        if builder is not None:
            builder(canvas)
        return cls(canvas, tag)

    def with_tag(self, tag: str) -> "LayerData":
        self.tag = tag
        return self

    def with_drawing_position(self, position: PositionLike) -> "LayerData":
        self._place(position)
        return self

    def with_modified_canvas(self, modifier: Callable[[MaybePixelCanvas], object]) -> "LayerData":
        modifier(self.canvas)
        return self

    def update_drawing_position(self, updater: Callable[[PixelPosition], PositionLike]):
        """Replace the drawing position with ``updater(current_position)``."""
        self._place(updater(self.drawing_position))

    def __repr__(self) -> str:
        return f"LayerData(tag={self.tag!r}, drawing_position={self.drawing_position})"


class LayeredCanvas:
    """An opaque base layer plus an ordered list of transparent top layers."""

    def __init__(self, height: int, width: Optional[int] = None, fill: ColorLike = WHITE):
        self.base_layer = PixelCanvas(height, width, fill)
        self.top_layers: List[LayerData] = []

    @property
    def height(self) -> int:
        return self.base_layer.height

    @property
    def width(self) -> int:
        return self.base_layer.width

    def new_layer(self, layer: LayerData) -> int:
        """Add a layer on top of the others.

        Returns:
            Index of the new layer

        Raises:
            DuplicateLayerTagError: If another layer already has the same tag
        """
        if layer.tag is not None and any(t.tag == layer.tag for t in self.top_layers):
            raise DuplicateLayerTagError(f"Layer tag '{layer.tag}' is already used")
        layer._attach(self.height, self.width)
        self.top_layers.append(layer)
        return len(self.top_layers) - 1

    def top_layer(self, layer_id: Union[str, int]) -> Optional[LayerData]:
        """Find a top layer by tag or index, None if there is no such layer."""
        if isinstance(layer_id, str):
            for layer in self.top_layers:
                if layer.tag == layer_id:
                    return layer
            return None
        if 0 <= layer_id < len(self.top_layers):
            return self.top_layers[layer_id]
        return None

    def resulting_canvas(self) -> BaseCanvas:
        """Draw every top layer, in order, onto a copy of the base layer."""
        result = self.base_layer.copy()
        for layer in self.top_layers:
            row, column = layer.drawing_position.expand()
            if row >= result.height or column >= result.width:
                continue
            result.draw((row, column), layer.canvas)
        return result
