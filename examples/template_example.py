"""Example of using templates and template files."""

from pixelart import MaybePixelCanvas, PixelCanvas
from pixelart.canvas.templates import AlienMonster, Heart, list_templates
from pixelart.io import save_template, load_template


def main():
    """Draw built-in templates and round trip one through YAML."""
    print(f"Available templates: {list_templates()}")

    scene = PixelCanvas(20, 30)
    scene.draw((2, 0), AlienMonster())
    scene.draw((0, 22), Heart())
    scene.draw((8, 22), Heart())
    scene.default_image_builder().save("scene.png")

    # Templates are transparent, so they keep the background when saved as PNG
    heart = MaybePixelCanvas(Heart().height, Heart().width)
    heart.draw_exact_abs(Heart())
    save_template(heart, "heart.yaml")
    loaded = load_template("heart.yaml")
    print(f"Template round trip equal: {loaded == heart}")
    loaded.image_builder().with_scale(4).save("heart.png")


if __name__ == "__main__":
    main()
