"""Tests for raster rendering."""

import numpy as np
import pytest
from pixelart.canvas import PixelCanvas, MaybePixelCanvas
from pixelart.image import PixelImageStyle, PixelImageBuilder
from pixelart.pixels import PixelColor, RED, BLUE


def test_default_style():
    """Test the default style values and image size."""
    style = PixelImageStyle()
    assert style.pixel_width == 10
    assert style.border_width == 1
    assert style.border_color == PixelColor.splat(50)
    assert style.image_size(2, 3) == (23, 34)
    assert style.cell_origin(1, 2) == (12, 23)


def test_with_scale_multiplies_widths():
    """Test scaling a style."""
    style = PixelImageStyle().with_scale(3)
    assert style.pixel_width == 30
    assert style.border_width == 3

    with pytest.raises(ValueError):
        PixelImageStyle().with_scale(0)


@pytest.mark.parametrize("scale", [1, 2, 5])
def test_plain_image_size_follows_scale(scale):
    """Test a plain image of scale k is (H*k, W*k) with k x k cell blocks."""
    canvas = PixelCanvas(3, 4)
    canvas[(1, 2)] = RED

    image = canvas.image_builder(PixelImageStyle.plain()).with_scale(scale).get_image()
    assert image.shape == (3 * scale, 4 * scale, 4)
    assert image.dtype == np.uint8

    block = image[scale:2 * scale, 2 * scale:3 * scale]
    assert (block == np.array([255, 0, 0, 255], dtype=np.uint8)).all()
    assert tuple(image[0, 0]) == (255, 255, 255, 255)


def test_borders_and_blocks():
    """Test a bordered cell is drawn with its border around the block."""
    canvas = PixelCanvas(1, 2, fill=BLUE)
    image = PixelImageBuilder(canvas, PixelImageStyle(4, 2, (9, 9, 9))).get_image()

    assert image.shape == (4 + 2 * 2, 2 * 4 + 3 * 2, 4)
    assert tuple(image[0, 0]) == (9, 9, 9, 255)
    assert tuple(image[2, 2]) == (0, 0, 255, 255)
    assert tuple(image[2, 5]) == (0, 0, 255, 255)
    # Borders of neighbouring cells overlap
    assert tuple(image[2, 6]) == (9, 9, 9, 255)
    assert tuple(image[2, 7]) == (9, 9, 9, 255)
    assert tuple(image[2, 8]) == (0, 0, 255, 255)


def test_empty_cells_are_transparent():
    """Test empty cells, border included, stay transparent."""
    canvas = MaybePixelCanvas(2)
    canvas[(0, 0)] = RED
    image = canvas.default_image_builder().get_image()

    assert image[..., 3].any()
    # Bottom right cell and its outer border are empty
    assert (image[12:, 12:, 3] == 0).all()


def test_builder_does_not_modify_canvas():
    """Test the builder only reads the canvas."""
    canvas = PixelCanvas(2, fill=RED)
    before = canvas.copy()
    canvas.default_image_builder().with_scale(2).get_image()
    assert canvas == before
