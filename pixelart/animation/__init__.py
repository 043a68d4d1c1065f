"""Animations built from canvas frames."""

from pixelart.io.gif_exporter import Repeat
from pixelart.animation.base import (
    MAX_FRAMES,
    PixelAnimationBuilder,
    AnimationContext,
    Animated,
    Animation,
)
from pixelart.animation.simple import (
    SimpleAnimationContext,
    SimpleAnimation,
    create_simple_animation,
)
from pixelart.animation.layered import LayeredAnimationContext

__all__ = [
    "Repeat",
    "MAX_FRAMES",
    "PixelAnimationBuilder",
    "AnimationContext",
    "Animated",
    "Animation",
    "SimpleAnimationContext",
    "SimpleAnimation",
    "create_simple_animation",
    "LayeredAnimationContext",
]
