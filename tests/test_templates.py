"""Tests for templates."""

import pytest
from pixelart.canvas import PixelCanvas, MaybePixelCanvas
from pixelart.canvas.templates import (
    HalfHeart, Heart, HalfAlienMonster, AlienMonster, get_template, list_templates,
    square, vertical_line, horizontal_line,
)
from pixelart.canvas.templates.heart import HEART_RED
from pixelart.canvas.templates.alien_monster import ALIEN_PURPLE
from pixelart.pixels import BLACK, RED


def test_shapes():
    """Test line and square shapes."""
    line = vertical_line(3, RED)
    assert line.shape == (3, 1)
    assert line.filled_count() == 3
    assert horizontal_line(4, RED).shape == (1, 4)

    box = square(4, 5, BLACK)
    assert box.filled_count() == 14
    assert box.color_at((1, 1)) is None
    assert box.color_at((3, 4)) == BLACK


def test_half_heart():
    """Test the half heart outline and fill."""
    half = HalfHeart().create()
    assert half.shape == (6, 4)
    blacks = [p.expand() for p in half.iter_pixels().filter_color(BLACK).positions()]
    assert blacks == [(0, 1), (0, 2), (1, 0), (1, 3), (2, 0), (3, 1), (4, 2), (5, 3)]
    assert half.iter_pixels().filter_color(HEART_RED).count() == 8
    assert half.color_at((0, 0)) is None


def test_heart_is_symmetric():
    """Test the heart is a half heart and its mirror image."""
    heart = Heart().create()
    assert heart.shape == (6, 7)
    assert heart.filled_count() == 27
    assert heart.flip_horizontal() == heart
    assert heart.color_at((3, 3)) == HEART_RED


def test_alien_monster():
    """Test the alien monster size and symmetry."""
    half = HalfAlienMonster().create()
    assert half.shape == (17, 10)
    assert half.color_at((1, 5)) == ALIEN_PURPLE
    assert half.iter_pixels().filter_color(BLACK).count() > 0

    monster = AlienMonster().create()
    assert monster.shape == (17, 20)
    assert monster.flip_horizontal() == monster


def test_template_on_bigger_canvas():
    """Test drawing a template onto a canvas at an offset."""
    canvas = PixelCanvas(10)
    canvas.draw((2, 2), Heart())
    assert canvas.color_at((2, 3)) == BLACK
    assert canvas.color_at((5, 5)) == HEART_RED


def test_registry():
    """Test template lookup by name."""
    assert "heart" in list_templates()
    assert "alien_monster" in list_templates()
    assert get_template("Heart").name == "heart"

    with pytest.raises(ValueError):
        get_template("dragon")


def test_apply_existing():
    """Test defining a template on an existing canvas."""
    canvas = MaybePixelCanvas(6, 4)
    HalfHeart().apply_existing(canvas)
    assert canvas == HalfHeart().create()
