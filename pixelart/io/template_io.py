"""Saving and loading canvases as editable text templates."""

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from pixelart.canvas.base import BaseCanvas, MaybePixelCanvas
from pixelart.pixels.color import PixelColor

EMPTY_CELL = '.'
PALETTE_KEYS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"


def canvas_to_dict(canvas: BaseCanvas) -> Dict[str, Any]:
    """Describe a canvas as a palette plus one string per row.

    Every distinct color gets a one character key, in order of first
    appearance; empty cells are written as ``'.'``.
    """
    palette: Dict[str, list] = {}
    keys: Dict[PixelColor, str] = {}
    rows = []
    for row in canvas.rows():
        line = []
        for color in row:
            if color is None:
                line.append(EMPTY_CELL)
                continue
            if color not in keys:
                if len(keys) >= len(PALETTE_KEYS):
                    raise ValueError(f"Templates support at most {len(PALETTE_KEYS)} colors")
                key = PALETTE_KEYS[len(keys)]
                keys[color] = key
                palette[key] = list(color.rgb)
            line.append(keys[color])
        rows.append(''.join(line))

    return {
        'height': canvas.height,
        'width': canvas.width,
        'palette': palette,
        'rows': rows,
    }


def canvas_from_dict(data: Dict[str, Any]) -> MaybePixelCanvas:
    """Build a canvas from the output of ``canvas_to_dict``."""
    rows = data['rows']
    height = data.get('height', len(rows))
    width = data.get('width', len(rows[0]) if rows else 0)
    if len(rows) != height:
        raise ValueError(f"Expected {height} rows, got {len(rows)}")

    palette = {key: PixelColor.coerce(value) for key, value in data.get('palette', {}).items()}
    canvas = MaybePixelCanvas(height, width)
    for r, line in enumerate(rows):
        if len(line) != width:
            raise ValueError(f"Row {r} has {len(line)} cells, expected {width}")
        for c, key in enumerate(line):
            if key == EMPTY_CELL:
                continue
            if key not in palette:
                raise ValueError(f"Unknown palette key '{key}' at ({r}, {c})")
            canvas[(r, c)] = palette[key]
    return canvas


def save_template(canvas: BaseCanvas, output_path: Union[str, Path]):
    """Save a canvas to a template file.

    Args:
        canvas: Canvas to save
        output_path: Output file path (.json, .yaml or .yml)
    """
    output_path = Path(output_path)
    data = canvas_to_dict(canvas)

    if output_path.suffix in ('.yaml', '.yml'):
        with open(output_path, 'w') as f:
            yaml.safe_dump(data, f, default_flow_style=None, sort_keys=False)
    elif output_path.suffix == '.json':
        with open(output_path, 'w') as f:
            json.dump(data, f, indent=2)
    else:
        raise ValueError(f"Unsupported file format: {output_path.suffix}. Use .json or .yaml")


def load_template(input_path: Union[str, Path]) -> MaybePixelCanvas:
    """Load a canvas from a template file.

    Args:
        input_path: Input file path (.json, .yaml or .yml)

    Returns:
        MaybePixelCanvas
    """
    input_path = Path(input_path)

    if input_path.suffix in ('.yaml', '.yml'):
        with open(input_path, 'r') as f:
            data = yaml.safe_load(f)
    elif input_path.suffix == '.json':
        with open(input_path, 'r') as f:
            data = json.load(f)
    else:
        raise ValueError(f"Unsupported file format: {input_path.suffix}. Use .json or .yaml")

    return canvas_from_dict(data)
