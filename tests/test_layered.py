"""Tests for layered canvases."""

import pytest
from pixelart.canvas import LayerData, LayeredCanvas, MaybePixelCanvas, DuplicateLayerTagError
from pixelart.pixels import RED, BLUE, WHITE
from pixelart.pixels.position import CENTER, BOTTOM_RIGHT


def test_new_layer_indices_and_tags():
    """Test layer indices and duplicate tags."""
    layered = LayeredCanvas(4)
    assert layered.new_layer(LayerData(MaybePixelCanvas(4), tag="a")) == 0
    assert layered.new_layer(LayerData(MaybePixelCanvas(4))) == 1
    assert layered.new_layer(LayerData(MaybePixelCanvas(4))) == 2

    with pytest.raises(DuplicateLayerTagError):
        layered.new_layer(LayerData(MaybePixelCanvas(4), tag="a"))

    assert layered.top_layer("a") is layered.top_layers[0]
    assert layered.top_layer(1) is layered.top_layers[1]
    assert layered.top_layer("missing") is None
    assert layered.top_layer(5) is None


def test_resulting_canvas():
    """Test layers are composed in order over the base."""
    layered = LayeredCanvas(4)
    bottom = LayerData.build(4, 4, lambda c: c.fill(BLUE), tag="bottom")
    top = LayerData(MaybePixelCanvas(4), tag="top", drawing_position=(1, 1))
    top.canvas[(0, 0)] = RED
    layered.new_layer(bottom.with_drawing_position((3, 3)))
    layered.new_layer(top)

    result = layered.resulting_canvas()
    assert result.color_at((1, 1)) == RED
    assert result.color_at((3, 3)) == BLUE
    assert result.color_at((0, 0)) == WHITE
    # The base layer is not modified
    assert layered.base_layer.color_at((1, 1)) == WHITE


def test_update_drawing_position():
    """Test moving a layer between compositions."""
    layered = LayeredCanvas(3)
    layer = LayerData(MaybePixelCanvas(1, fill=RED), tag="dot")
    layered.new_layer(layer)

    layered.top_layer("dot").update_drawing_position(lambda p: p.right(2))
    assert layered.resulting_canvas().color_at((0, 2)) == RED

    # Layers moved past the border are not drawn
    layer.update_drawing_position(lambda p: p.right(5))
    result = layered.resulting_canvas()
    assert result.iter_pixels().filter_color(RED).count() == 0


def red_cells(canvas):
    return [p.expand() for p in canvas.iter_pixels().filter_color(RED).positions()]


def test_named_positions_refer_to_layered_canvas():
    """Test named drawing positions are resolved on the layered canvas."""
    layered = LayeredCanvas(9)
    layer = LayerData(MaybePixelCanvas(1, fill=RED), drawing_position=CENTER)
    layered.new_layer(layer)
    assert layer.drawing_position.expand() == (4, 4)
    assert red_cells(layered.resulting_canvas()) == [(4, 4)]

    layer.with_drawing_position(BOTTOM_RIGHT)
    assert red_cells(layered.resulting_canvas()) == [(8, 8)]


def test_named_position_on_wide_canvas():
    """Test a named position uses both dimensions of the layered canvas."""
    layered = LayeredCanvas(3, 7)
    layer = LayerData(MaybePixelCanvas(2, fill=RED), drawing_position=CENTER)
    layered.new_layer(layer)
    assert layer.drawing_position.expand() == (1, 3)
    assert red_cells(layered.resulting_canvas()) == [(1, 3), (1, 4), (2, 3), (2, 4)]
