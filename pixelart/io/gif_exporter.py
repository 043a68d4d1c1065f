"""GIF export functionality."""

import logging
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

import numpy as np
from PIL import GifImagePlugin, Image

from pixelart.io.image_io import flatten_rgba
from pixelart.pixels.color import ColorLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Repeat:
    """How many times a GIF plays after the first run.

    ``count`` None means forever.
    """
    count: Optional[int] = None

    def __post_init__(self):
        if self.count is not None and self.count < 0:
            raise ValueError(f"Repeat count can not be negative, got {self.count}")

    @classmethod
    def infinite(cls) -> "Repeat":
        return cls(None)

    @classmethod
    def finite(cls, count: int) -> "Repeat":
        return cls(count)

    @property
    def is_infinite(self) -> bool:
        return self.count is None

    def loop_kwargs(self) -> dict:
        """Encoder arguments for this repeat mode.

        GIF loop 0 plays forever; leaving the loop out plays once.
        """
        if self.count is None:
            return {"loop": 0}
        if self.count == 0:
            return {}
        return {"loop": self.count}


class GIFExporter:
    """Export RGBA frames to an animated GIF."""

    def __init__(self, output_path: Union[str, Path], repeat: Optional[Repeat] = None,
                 frame_duration: float = 100, background: Optional[ColorLike] = None):
        """Initialize GIF exporter.

        Args:
            output_path: Output file path (.gif)
            repeat: Loop mode (default: forever)
            frame_duration: Frame duration in milliseconds
            background: Color behind transparent areas (default: white)
        """
        self.output_path = Path(output_path)
        self.repeat = repeat if repeat is not None else Repeat.infinite()
        self.frame_duration = frame_duration
        self.background = background
        self.frames: List[np.ndarray] = []

    def add_frame(self, frame: np.ndarray):
        """Add a frame to the export queue.

        Args:
            frame: Image array (H, W, 3|4) uint8
        """
        frame = np.asarray(frame)
        if frame.dtype != np.uint8:
            # Normalize to 0-255
            frame = (frame * 255).astype(np.uint8)
        if self.frames and frame.shape[:2] != self.frames[0].shape[:2]:
            raise ValueError(
                f"Frame size {frame.shape[:2]} differs from first frame {self.frames[0].shape[:2]}"
            )
        self.frames.append(flatten_rgba(frame, self.background))

    def export(self):
        """Export all frames to GIF file.

        Every frame is written as its own image block with a local palette,
        so identical consecutive frames stay separate frames.
        """
        if not self.frames:
            raise ValueError("No frames to export")
        if self.output_path.suffix.lower() != '.gif':
            raise ValueError(f"Unsupported file format: {self.output_path.suffix}. Use .gif")

        height, width = self.frames[0].shape[:2]
        delay = max(int(round(self.frame_duration / 10)), 0)  # centiseconds
        loop = self.repeat.loop_kwargs().get("loop")

        with open(self.output_path, 'wb') as f:
            # Logical screen: no global color table, background 0, square pixels
            f.write(b"GIF89a" + struct.pack("<HHBBB", width, height, 0, 0, 0))
            if loop is not None:
                f.write(b"!\xff\x0bNETSCAPE2.0\x03\x01" + struct.pack("<H", loop) + b"\x00")
            for frame in self.frames:
                # Graphic control: no disposal, no transparency
                f.write(b"!\xf9\x04\x00" + struct.pack("<H", delay) + b"\x00\x00")
                image = Image.fromarray(np.ascontiguousarray(frame))
                image = image.convert("P", palette=Image.Palette.ADAPTIVE, colors=256)
                f.writelines(GifImagePlugin.getdata(image, include_color_table=True))
            f.write(b";")

        logger.info("Exported %d frames to %s", len(self.frames), self.output_path)
