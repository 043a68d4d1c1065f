"""Tests for the command line interface."""

import sys

import pytest
from pixelart.cli.main import main
from pixelart.io import canvas_from_image, load_frames
from pixelart.canvas.templates import Heart
from pixelart.image import PixelImageStyle


def run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["pixelart", *argv])
    main()


def test_list_templates(monkeypatch, capsys):
    """Test listing templates."""
    run(monkeypatch, "--list-templates")
    out = capsys.readouterr().out
    assert "heart" in out
    assert "alien_monster" in out


def test_render_template(monkeypatch, tmp_path):
    """Test rendering a template adds a .png suffix."""
    output = tmp_path / "heart"
    run(monkeypatch, "--template", "heart", "--pixel-width", "3", "--output", str(output))

    path = tmp_path / "heart.png"
    assert path.exists()
    loaded = canvas_from_image(path, PixelImageStyle(pixel_width=3))
    assert loaded == Heart().create()


def test_render_unknown_template(monkeypatch, tmp_path):
    """Test an unknown template exits with an error."""
    with pytest.raises(SystemExit):
        run(monkeypatch, "--template", "dragon", "--output", str(tmp_path / "x.png"))


def test_render_animation(monkeypatch, tmp_path):
    """Test rendering a demo animation to GIF."""
    output = tmp_path / "alien.gif"
    run(monkeypatch, "--animation", "walking_alien", "--pixel-width", "2",
        "--border-width", "0", "--repeat", "1", "--output", str(output))

    frames = load_frames(output)
    assert len(frames) == 21
    assert frames[0].shape[:2] == (48, 80)
