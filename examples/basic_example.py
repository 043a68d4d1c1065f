"""Basic example of drawing on a canvas and saving it."""

from pixelart import PixelCanvas, PixelColor, BLACK, RED, BLUE
from pixelart.pixels.position import TOP_LEFT, BOTTOM_RIGHT


def main():
    """Draw a few cells, a border and a filled area."""
    canvas = PixelCanvas(8, 12)

    # Single cells
    canvas[TOP_LEFT] = RED
    canvas[BOTTOM_RIGHT] = BLUE
    canvas[(3, 5)] = PixelColor.from_hex("#ffa500")

    # Outline of the middle area, then fill its inside
    pen = canvas.attach_new_pen(BLACK, (2, 2))
    pen.start().right(7).down(4).left(7).up(4)
    filled = canvas.fill_inside(PixelColor(120, 200, 120), (4, 4))
    print(f"Filled {filled} cells")

    builder = canvas.default_image_builder()
    height, width = builder.image_size
    print(f"Saving {width}x{height} image...")
    builder.save("basic.png")
    canvas.image_builder().with_scale(3).save("basic_large.png")
    print("Done!")


if __name__ == "__main__":
    main()
