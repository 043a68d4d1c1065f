"""Tests for configuration."""

import os
import tempfile

import pytest
from pixelart.io import Repeat
from pixelart.pixels import PixelColor, InvalidColorError
from pixelart.utils.config import Config, load_config, save_config


def test_config_defaults():
    """Test the default configuration."""
    config = Config()
    assert config.pixel_width == 10
    assert config.border_width == 1
    assert config.border_color == [50, 50, 50]
    assert config.repeat() == Repeat.infinite()


def test_config_image_style():
    """Test the style built from a configuration."""
    config = Config(pixel_width=4, border_width=2, border_color=[1, 2, 3], scale=3)
    style = config.image_style()
    assert style.pixel_width == 12
    assert style.border_width == 6
    assert style.border_color == PixelColor(1, 2, 3)


def test_config_repeat():
    """Test finite repeats."""
    assert Config(gif_repeat=2).repeat() == Repeat.finite(2)
    assert Config(gif_repeat=0).repeat().loop_kwargs() == {}


def test_config_rejects_bad_color():
    """Test invalid border colors are rejected."""
    with pytest.raises(InvalidColorError):
        Config(border_color=[300, 0, 0])


@pytest.mark.parametrize("suffix", [".json", ".yaml"])
def test_config_save_load(suffix):
    """Test saving and loading configuration."""
    config = Config(pixel_width=6, scale=2, gif_repeat=3, template="heart")

    with tempfile.NamedTemporaryFile(mode='w', suffix=suffix, delete=False) as f:
        temp_path = f.name

    try:
        save_config(config, temp_path)
        loaded = load_config(temp_path)

        assert loaded == config
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)
