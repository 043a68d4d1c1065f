"""Example of showing canvases in the viewer window."""

from pixelart import PixelCanvas, RED, GREEN, BLUE
from pixelart.canvas.templates import AlienMonster


def main():
    """Show a template, and a color stripe in a second window."""
    alien = PixelCanvas(AlienMonster().height, AlienMonster().width)
    alien.draw_exact_abs(AlienMonster())

    stripes = PixelCanvas(3, 9)
    for column, color in enumerate([RED, GREEN, BLUE] * 3):
        for row in range(stripes.height):
            stripes[(row, column)] = color

    alien.image_builder().with_scale(2).view(stripes.image_builder().with_scale(4),
                                             title="viewer example")


if __name__ == "__main__":
    main()
