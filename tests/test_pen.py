"""Tests for the drawing pen."""

import pytest
from pixelart.canvas import PixelCanvas, Pen, PenNotAttachedError
from pixelart.pixels import RED, WHITE


def test_pen_draws_only_when_started():
    """Test moves paint cells only while the pen is down."""
    canvas = PixelCanvas(4)
    pen = Pen(RED).attach(canvas, (0, 0)).right(2)
    assert canvas.iter_pixels().filter_color(RED).count() == 0

    pen.start()
    assert canvas.color_at((0, 2)) == RED
    pen.down(1).stop().down(1)
    assert canvas.color_at((1, 2)) == RED
    assert canvas.color_at((2, 2)) == WHITE
    assert pen.position.expand() == (2, 2)


def test_pen_clamps_at_border():
    """Test moves stop at the canvas border."""
    canvas = PixelCanvas(4)
    pen = canvas.attach_new_pen(RED, (0, 0)).start().down(10)
    assert pen.position.expand() == (3, 0)
    assert canvas.iter_pixels().filter_color(RED).count() == 4

    pen.up_right(10)
    assert pen.position.expand() == (0, 3)


def test_branch_restores_position():
    """Test branch returns to the position before it."""
    canvas = PixelCanvas(4)
    pen = canvas.attach_new_pen(RED, (1, 1)).start()
    pen.branch(lambda p: p.right(2).down(2))
    assert pen.position.expand() == (1, 1)
    assert canvas.color_at((3, 3)) == RED


def test_detach():
    """Test detached pens keep their state but can not move."""
    canvas = PixelCanvas(4)
    pen = canvas.attach_new_pen(RED, (0, 0)).start()
    loose = pen.detach()
    assert loose.color == RED
    assert loose.drawing
    assert not loose.attached

    with pytest.raises(PenNotAttachedError):
        loose.right(1)
