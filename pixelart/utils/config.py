"""Configuration management."""

import json
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import List, Optional

import yaml

from pixelart.image.style import PixelImageStyle
from pixelart.io.gif_exporter import Repeat
from pixelart.pixels.color import PixelColor


@dataclass
class Config:
    """Rendering configuration."""
    # Image style
    pixel_width: int = 10
    border_width: int = 1
    border_color: List[int] = field(default_factory=lambda: [50, 50, 50])
    scale: int = 1

    # Animation parameters
    gif_repeat: Optional[int] = None  # None loops forever
    frame_duration: float = 100.0  # ms

    # Output
    output_path: str = "output"
    template: str = "alien_monster"

    def __post_init__(self):
        if self.border_color is None:
            self.border_color = [50, 50, 50]
        # Validates the color early
        self.border_color = list(PixelColor.coerce(self.border_color).rgb)

    def image_style(self) -> PixelImageStyle:
        """Image style with ``scale`` applied."""
        style = PixelImageStyle(self.pixel_width, self.border_width, self.border_color)
        return style.with_scale(self.scale)

    def repeat(self) -> Repeat:
        if self.gif_repeat is None:
            return Repeat.infinite()
        return Repeat.finite(self.gif_repeat)


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix == '.yaml' or config_path.suffix == '.yml':
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    return Config(**(data or {}))


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix == '.yaml' or output_path.suffix == '.yml':
            yaml.dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
