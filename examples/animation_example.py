"""Example of building GIF animations."""

from pixelart import RED, BLUE, WHITE
from pixelart.animation import (
    Animation,
    LayeredAnimationContext,
    PixelAnimationBuilder,
    Repeat,
    create_simple_animation,
)
from pixelart.canvas import LayerData
from pixelart.canvas.templates import Heart


def moving_square():
    """A 2x2 red square walking over a blue canvas."""
    def setup(ctx):
        ctx.update_body_color(BLUE)
        ctx.update_part_color(RED)

    def update(ctx, i):
        following = ctx.part.position.next()
        if following is None:
            return False
        ctx.part.crop_to(following)
        return True

    ctx = create_simple_animation(6, 6, (2, 2), (0, 0), setup, update,
                                  gif_repeat=Repeat.finite(2))
    print(f"Moving square: {len(ctx.take_images())} frames")
    ctx.save("moving_square.gif")


def falling_heart():
    """A heart layer falling down a white canvas."""
    def build_context():
        builder = PixelAnimationBuilder(Repeat.infinite(), scale=2, frame_duration=80)
        return LayeredAnimationContext(20, 9, fill=WHITE, builder=builder)

    def setup(ctx):
        ctx.layered_canvas.new_layer(LayerData(Heart().create(), tag="heart",
                                               drawing_position=(0, 1)))

    def update(ctx, i):
        if i == 0:
            return True
        heart = ctx.layered_canvas.top_layer("heart")
        if heart.drawing_position.row >= ctx.canvas.height:
            return False
        heart.update_drawing_position(lambda p: p.down(1))
        return True

    ctx = Animation(build_context, setup, update).create()
    print(f"Falling heart: {len(ctx.take_images())} frames")
    ctx.save("falling_heart.gif")


def main():
    moving_square()
    falling_heart()
    print("Animations saved!")


if __name__ == "__main__":
    main()
