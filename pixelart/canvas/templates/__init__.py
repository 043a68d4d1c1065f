"""Ready-made drawings and simple shapes."""

from typing import Dict, List, Type

from pixelart.canvas.templates.base import Template
from pixelart.canvas.templates.shapes import vertical_line, horizontal_line, square
from pixelart.canvas.templates.heart import HalfHeart, Heart
from pixelart.canvas.templates.alien_monster import HalfAlienMonster, AlienMonster

TEMPLATES: Dict[str, Type[Template]] = {
    "half_heart": HalfHeart,
    "heart": Heart,
    "half_alien_monster": HalfAlienMonster,
    "alien_monster": AlienMonster,
}


def get_template(name: str) -> Template:
    """Get a template instance by name.

    Args:
        name: Template name (see ``list_templates()``)

    Returns:
        Template instance
    """
    try:
        return TEMPLATES[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown template: {name}. Available: {', '.join(list_templates())}"
        ) from None


def list_templates() -> List[str]:
    return sorted(TEMPLATES)


__all__ = [
    "Template",
    "vertical_line",
    "horizontal_line",
    "square",
    "HalfHeart",
    "Heart",
    "HalfAlienMonster",
    "AlienMonster",
    "TEMPLATES",
    "get_template",
    "list_templates",
]
