"""Saving and loading raster images."""

import logging
from pathlib import Path
from typing import List, Optional, Union

import imageio.v3 as iio
import numpy as np

from pixelart.canvas.base import MaybePixelCanvas
from pixelart.image.style import PixelImageStyle
from pixelart.pixels.color import ColorLike, PixelColor, WHITE

logger = logging.getLogger(__name__)

PNG_SUFFIXES = ('.png',)
JPEG_SUFFIXES = ('.jpg', '.jpeg')
GIF_SUFFIXES = ('.gif',)
SUPPORTED_SUFFIXES = PNG_SUFFIXES + JPEG_SUFFIXES + GIF_SUFFIXES


def _check_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported file format: {path.suffix}. Use {', '.join(SUPPORTED_SUFFIXES)}"
        )
    return suffix


def flatten_rgba(image: np.ndarray, background: Optional[ColorLike] = None) -> np.ndarray:
    """Composite an RGBA image onto a solid background.

    Args:
        image: (H, W, 4) or (H, W, 3) uint8 array
        background: Color behind transparent areas (default: white)

    Returns:
        (H, W, 3) uint8 array
    """
    if image.ndim != 3 or image.shape[2] not in (3, 4):
        raise ValueError(f"Expected an (H, W, 3) or (H, W, 4) image, got {image.shape}")
    if image.shape[2] == 3:
        return image.astype(np.uint8)

    color = PixelColor.coerce(background) if background is not None else WHITE
    alpha = image[..., 3:].astype(np.float64) / 255.0
    base = np.array(color.rgb, dtype=np.float64)
    flat = image[..., :3].astype(np.float64) * alpha + base * (1.0 - alpha)
    return np.round(flat).astype(np.uint8)


def save_image(image: np.ndarray, output_path: Union[str, Path],
               background: Optional[ColorLike] = None):
    """Write a raster image; the format follows the file suffix.

    PNG keeps the alpha channel. JPEG and GIF have no (usable) alpha, so the
    image is flattened onto ``background`` first.

    Args:
        image: (H, W, 4) or (H, W, 3) uint8 array
        output_path: Output file path (.png, .jpg, .jpeg or .gif)
        background: Color behind transparent areas (default: white)
    """
    output_path = Path(output_path)
    suffix = _check_suffix(output_path)
    image = np.asarray(image)
    if image.dtype != np.uint8:
        raise ValueError(f"Expected a uint8 image, got {image.dtype}")

    if suffix not in PNG_SUFFIXES:
        image = flatten_rgba(image, background)

    iio.imwrite(output_path, image)
    logger.info("Saved %dx%d image to %s", image.shape[1], image.shape[0], output_path)


def load_image(input_path: Union[str, Path]) -> np.ndarray:
    """Read a raster image (the first frame of a GIF).

    Returns:
        (H, W, C) uint8 array
    """
    input_path = Path(input_path)
    _check_suffix(input_path)
    return np.asarray(iio.imread(input_path, index=0))


def canvas_from_image(source, style: Optional[PixelImageStyle] = None) -> MaybePixelCanvas:
    """Read the cells back from a raster rendered with ``style``.

    Each cell's color is sampled from the top left pixel of its block;
    transparent blocks become empty cells.

    Args:
        source: Image path or (H, W, C) array
        style: Style the raster was rendered with (default style if None)

    Returns:
        MaybePixelCanvas with one cell per block
    """
    style = style if style is not None else PixelImageStyle()
    if isinstance(source, (str, Path)):
        image = load_image(source)
    else:
        image = np.asarray(source)

    if image.ndim == 2:
        image = np.stack([image] * 3, axis=-1)
    if image.ndim != 3 or image.shape[2] not in (3, 4):
        raise ValueError(f"Expected an (H, W, 3) or (H, W, 4) image, got {image.shape}")

    step = style.pixel_width + style.border_width
    height = (image.shape[0] - style.border_width) // step
    width = (image.shape[1] - style.border_width) // step
    if height <= 0 or width <= 0 or style.image_size(height, width) != image.shape[:2]:
        raise ValueError(
            f"Image of size {image.shape[:2]} does not match style "
            f"(pixel_width={style.pixel_width}, border_width={style.border_width})"
        )

    rows = [style.cell_origin(r, 0)[0] for r in range(height)]
    columns = [style.cell_origin(0, c)[1] for c in range(width)]
    cells = image[np.ix_(rows, columns)]
    if cells.shape[2] == 3:
        alpha = np.full(cells.shape[:2] + (1,), 255, dtype=np.uint8)
        cells = np.concatenate([cells, alpha], axis=-1)

    return MaybePixelCanvas.from_rgba_array(cells.astype(np.uint8))


def load_frames(input_path: Union[str, Path]) -> List[np.ndarray]:
    """Read every frame of an image file, in order.

    GIF files give one array per frame; PNG and JPEG give a single frame.
    """
    input_path = Path(input_path)
    suffix = _check_suffix(input_path)
    if suffix in GIF_SUFFIXES:
        # index=... always yields a batch, (N, H, W) for grayscale frames
        stack = np.asarray(iio.imread(input_path, index=...))
        if stack.ndim == 3:
            stack = np.repeat(stack[..., np.newaxis], 3, axis=-1)
        return [frame for frame in stack]
    return [load_image(input_path)]
