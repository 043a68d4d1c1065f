"""Tests for canvases."""

import numpy as np
import pytest
from pixelart.canvas import PixelCanvas, MaybePixelCanvas
from pixelart.canvas.templates import square
from pixelart.pixels import (
    PixelColor, PixelPositionOutOfBoundError, StrictPositions, WHITE, BLACK, RED, GREEN, BLUE
)


def test_canvas_creation():
    """Test canvas sizes and initial fill."""
    canvas = PixelCanvas(3, 4)
    assert canvas.shape == (3, 4)
    assert all(color == WHITE for row in canvas.rows() for color in row)

    square_canvas = PixelCanvas(5)
    assert square_canvas.shape == (5, 5)

    maybe = MaybePixelCanvas(2, 3)
    assert maybe.filled_count() == 0
    assert maybe.color_at((1, 2)) is None


def test_indexing_is_bounds_checked():
    """Test that out of range indexing raises."""
    canvas = PixelCanvas(3, 4)
    canvas[(2, 3)] = RED
    assert canvas[(2, 3)].color == RED

    with pytest.raises(PixelPositionOutOfBoundError):
        canvas[(3, 0)]
    with pytest.raises(PixelPositionOutOfBoundError):
        canvas[(0, 4)] = RED
    with pytest.raises(PixelPositionOutOfBoundError):
        canvas.color_at((10, 10))
    with pytest.raises(PixelPositionOutOfBoundError):
        canvas.get_row(3)
    with pytest.raises(PixelPositionOutOfBoundError):
        canvas[(-1, 0)]
    with pytest.raises(PixelPositionOutOfBoundError):
        canvas.get_row(-1)


def test_opaque_canvas_rejects_empty():
    """Test that an opaque canvas can not hold empty cells."""
    canvas = PixelCanvas(2)
    with pytest.raises(ValueError):
        canvas[(0, 0)] = None
    with pytest.raises(ValueError):
        canvas.fill(None)

    maybe = MaybePixelCanvas(2)
    maybe[(0, 0)] = RED
    maybe[(0, 0)] = None
    assert maybe.color_at((0, 0)) is None


def test_pixel_handle():
    """Test that pixel handles read and write through to the canvas."""
    canvas = MaybePixelCanvas(2)
    pixel = canvas[StrictPositions.BOTTOM_RIGHT]
    assert not pixel.has_color
    assert pixel.update_color(BLUE) is None
    assert canvas.color_at((1, 1)) == BLUE
    assert pixel.update_color(RED) == BLUE
    assert pixel.position.expand() == (1, 1)


def test_update_color_at_returns_previous():
    """Test update_color_at returns the replaced value."""
    canvas = PixelCanvas(2)
    assert canvas.update_color_at((0, 1), RED) == WHITE
    assert canvas.update_color_at((0, 1), BLUE) == RED


def test_pixel_iteration():
    """Test row-major iteration and filters."""
    canvas = PixelCanvas(2, 3)
    canvas[(0, 2)] = RED
    canvas[(1, 0)] = RED

    positions = [p.position.expand() for p in canvas.iter_pixels()]
    assert positions == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]

    reds = canvas.iter_pixels().filter_color(RED).positions()
    assert [p.expand() for p in reds] == [(0, 2), (1, 0)]

    updated = canvas.iter_pixels().filter_position(lambda p: p.row == 1).update_colors(GREEN)
    assert updated == 3
    assert canvas.get_row(1) == [GREEN, GREEN, GREEN]

    maybe = MaybePixelCanvas(3)
    maybe[(1, 1)] = RED
    assert maybe.iter_existing_pixels().count() == 1


def test_fill_and_clear():
    """Test filling and clearing."""
    canvas = PixelCanvas(2)
    canvas.fill(RED)
    assert canvas.iter_pixels().filter_color(RED).count() == 4
    canvas.clear()
    assert canvas.iter_pixels().filter_color(WHITE).count() == 4

    maybe = MaybePixelCanvas(2, fill=RED)
    assert maybe.filled_count() == 4
    maybe.clear()
    assert maybe.filled_count() == 0


def test_fill_inside():
    """Test flood fill stays inside a border."""
    canvas = PixelCanvas(5)
    canvas.draw_exact_abs(square(5, 5, BLACK))
    filled = canvas.fill_inside(GREEN, StrictPositions.CENTER)

    assert filled == 9
    assert canvas.color_at((0, 0)) == BLACK
    assert canvas.color_at((2, 2)) == GREEN
    assert canvas.color_at((1, 3)) == GREEN
    assert canvas.iter_pixels().filter_color(BLACK).count() == 16

    # Same color is a no-op
    assert canvas.fill_inside(GREEN, (2, 2)) == 0


def test_fill_inside_empty_region():
    """Test flood fill of empty cells on a transparent canvas."""
    canvas = MaybePixelCanvas(3)
    canvas[(1, 0)] = BLACK
    canvas[(1, 1)] = BLACK
    canvas[(1, 2)] = BLACK
    assert canvas.fill_inside(RED, (0, 0)) == 3
    assert canvas.get_row(2) == [None, None, None]


def test_swap_and_flip():
    """Test swapping cells and flipping canvases."""
    canvas = PixelCanvas(2, 3)
    canvas[(0, 0)] = RED
    canvas.swap((0, 0), (1, 2))
    assert canvas.color_at((1, 2)) == RED
    assert canvas.color_at((0, 0)) == WHITE

    flipped = canvas.flip_horizontal()
    assert flipped.color_at((1, 0)) == RED
    assert canvas.color_at((1, 2)) == RED

    flipped = canvas.flip_vertical()
    assert flipped.color_at((0, 2)) == RED
    assert isinstance(flipped, PixelCanvas)


def test_copy_is_independent():
    """Test copies do not share storage."""
    canvas = MaybePixelCanvas(2)
    clone = canvas.copy()
    clone[(0, 0)] = RED
    assert canvas.color_at((0, 0)) is None
    assert clone != canvas
    assert canvas.copy() == canvas


def test_draw_clips_and_skips_empty():
    """Test drawing a transparent canvas onto another."""
    canvas = PixelCanvas(4)
    stamp = MaybePixelCanvas(3)
    stamp[(0, 0)] = RED
    stamp[(2, 2)] = BLUE

    canvas.draw((2, 2), stamp)
    assert canvas.color_at((2, 2)) == RED
    # (2, 2) of the stamp lands outside the canvas
    assert canvas.iter_pixels().filter_color(BLUE).count() == 0
    # Empty stamp cells leave the canvas untouched
    assert canvas.color_at((3, 3)) == WHITE


def test_draw_exact_abs_size_mismatch():
    """Test draw_exact_abs requires same sized drawables."""
    canvas = PixelCanvas(4)
    with pytest.raises(ValueError):
        canvas.draw_exact_abs(MaybePixelCanvas(3))


def test_rgba_array():
    """Test conversion to and from RGBA arrays."""
    canvas = MaybePixelCanvas(2)
    canvas[(0, 1)] = PixelColor(1, 2, 3)

    rgba = canvas.to_rgba_array()
    assert rgba.shape == (2, 2, 4)
    assert rgba.dtype == np.uint8
    assert tuple(rgba[0, 1]) == (1, 2, 3, 255)
    assert tuple(rgba[0, 0]) == (0, 0, 0, 0)

    assert MaybePixelCanvas.from_rgba_array(rgba) == canvas


def test_partition_from_corners():
    """Test creating a partition from two corners."""
    canvas = PixelCanvas(5)
    part = canvas.partition((1, 1), (2, 3))
    assert part.shape == (2, 3)
    assert part.position.expand() == (1, 1)

    with pytest.raises(ValueError):
        canvas.partition((3, 3), (1, 1))
