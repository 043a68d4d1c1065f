"""CLI main entry point."""

import argparse
import logging
import sys
from pathlib import Path

from pixelart.animation import (
    AnimationContext,
    LayeredAnimationContext,
    PixelAnimationBuilder,
    Animation,
    create_simple_animation,
)
from pixelart.canvas import LayerData, MaybePixelCanvas, Pen
from pixelart.canvas.templates import AlienMonster, Heart, get_template, list_templates
from pixelart.image import PixelImageStyle
from pixelart.pixels import PixelColor, RED, WHITE
from pixelart.pixels.position import LEFT_CENTER
from pixelart.utils.config import Config, load_config


def base_style(config: Config) -> PixelImageStyle:
    """Config style before scaling; animation builders apply the scale."""
    return PixelImageStyle(config.pixel_width, config.border_width, config.border_color)


def moving_plus(config: Config) -> AnimationContext:
    """A red plus sliding over a blue gradient, cell by cell."""
    def setup(ctx):
        for row in range(ctx.body.height):
            for column in range(ctx.body.width):
                ctx.body[(row, column)] = PixelColor.from_blue(max(255 - row * 20, 0))

        part = ctx.part
        part.clear()
        (Pen(RED).attach(part, LEFT_CENTER)
            .start()
            .right(1)
            .branch(lambda pen: pen.up(1))
            .branch(lambda pen: pen.down(1))
            .branch(lambda pen: pen.right(1)))
        part.write_source()

    def update(ctx, i):
        following = ctx.part.position.next()
        if following is None:
            return False
        ctx.part.crop_to(following)
        return True

    return create_simple_animation(
        10, 10, (3, 3), (0, 0), setup, update,
        scale=config.scale, gif_repeat=config.repeat(), style=base_style(config),
    )


def walking_alien(config: Config) -> AnimationContext:
    """An alien monster crossing a white field, with a heart above it."""
    def build_context():
        builder = PixelAnimationBuilder(
            config.repeat(), config.scale,
            style=base_style(config),
            frame_duration=config.frame_duration,
        )
        return LayeredAnimationContext(24, 40, frame_count=21, fill=WHITE, builder=builder)

    def setup(ctx):
        ctx.layered_canvas.new_layer(LayerData(AlienMonster().create(), tag="alien",
                                               drawing_position=(7, 0)))
        ctx.layered_canvas.new_layer(LayerData(Heart().create(), tag="heart",
                                               drawing_position=(0, 6)))

    def update(ctx, i):
        if i == 0:
            return True
        for tag in ("alien", "heart"):
            ctx.layered_canvas.top_layer(tag).update_drawing_position(lambda p: p.right(1))
        return True

    return Animation(build_context, setup, update).create()


ANIMATIONS = {
    'moving_plus': moving_plus,
    'walking_alien': walking_alien,
}


def output_file(output: str, default_suffix: str) -> Path:
    """Output path, with ``default_suffix`` added when it has none."""
    path = Path(output)
    if not path.suffix:
        path = path.with_suffix(default_suffix)
    return path


def render_template(config: Config, args):
    """Render a template to an image file."""
    template = get_template(config.template)
    canvas = MaybePixelCanvas(template.height, template.width)
    canvas.draw_exact_abs(template)

    builder = canvas.image_builder(config.image_style())
    path = output_file(config.output_path, '.png')
    print(f"Rendering template '{template.name}' ({template.height}x{template.width})...")
    builder.save(path)
    print(f"Image saved to {path}")

    if args.view:
        builder.view(title=template.name)


def render_animation(config: Config, args):
    """Run a demo animation and save it as GIF."""
    animation = ANIMATIONS.get(args.animation.lower())
    if animation is None:
        print(f"Unknown animation: {args.animation}. Available: {list(ANIMATIONS.keys())}")
        sys.exit(1)

    print(f"Creating animation '{args.animation}'...")
    ctx = animation(config)
    ctx.builder.frame_duration = config.frame_duration
    path = output_file(config.output_path, '.gif')
    print(f"Exporting {len(ctx.builder)} frames to {path}...")
    ctx.save(path)
    print("Animation complete!")

    if args.view:
        ctx.view(title=args.animation)


def main():
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="pixelart - render pixel art images and animations")

    # What to render
    parser.add_argument('--template', type=str, default=None,
                       help='Template to render (see --list-templates)')
    parser.add_argument('--animation', type=str, default=None,
                       choices=list(ANIMATIONS.keys()),
                       help='Demo animation to render as GIF')

    # Style
    parser.add_argument('--scale', type=int, default=None,
                       help='Image scale factor')
    parser.add_argument('--pixel-width', type=int, default=None,
                       help='Width of a cell in image pixels (default: 10)')
    parser.add_argument('--border-width', type=int, default=None,
                       help='Width of cell borders in image pixels (default: 1)')
    parser.add_argument('--repeat', type=int, default=None,
                       help='GIF repeat count (default: loop forever)')
    parser.add_argument('--frame-duration', type=float, default=None,
                       help='GIF frame duration in milliseconds (default: 100)')

    # Files
    parser.add_argument('--config', type=str, default=None,
                       help='Config file (.json or .yaml)')
    parser.add_argument('--output', type=str, default=None,
                       help='Output file (suffix picks the format)')
    parser.add_argument('--view', action='store_true',
                       help='Show the result in a viewer window')

    # Info
    parser.add_argument('--list-templates', action='store_true',
                       help='List available templates and exit')
    parser.add_argument('--list-animations', action='store_true',
                       help='List available demo animations and exit')
    parser.add_argument('--verbose', '-v', action='store_true',
                       help='Enable debug logging')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    if args.list_templates:
        print("Available templates:")
        for name in list_templates():
            print(f"  - {name}")
        return

    if args.list_animations:
        print("Available animations:")
        for name in ANIMATIONS:
            print(f"  - {name}")
        return

    config = load_config(args.config) if args.config else Config()

    # Command line overrides the config file
    if args.template is not None:
        config.template = args.template
    if args.scale is not None:
        config.scale = args.scale
    if args.pixel_width is not None:
        config.pixel_width = args.pixel_width
    if args.border_width is not None:
        config.border_width = args.border_width
    if args.repeat is not None:
        config.gif_repeat = args.repeat
    if args.frame_duration is not None:
        config.frame_duration = args.frame_duration
    if args.output is not None:
        config.output_path = args.output

    try:
        if args.animation:
            render_animation(config, args)
        else:
            render_template(config, args)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
