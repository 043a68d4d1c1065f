"""Viewer window using tkinter and matplotlib."""

import argparse
import base64
import logging
import tkinter as tk
from tkinter import filedialog, messagebox
from typing import List, Optional, Sequence

import imageio.v3 as iio
import numpy as np
from matplotlib.figure import Figure
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from pixelart.canvas.templates import AlienMonster
from pixelart.image.style import PixelImageStyle
from pixelart.io.image_io import load_frames

logger = logging.getLogger(__name__)

# Delay between animation frames (ms)
FRAME_DELAY_MS = 100
MIN_WINDOW_SIZE = 200
DPI = 100

FILE_TYPES = [
    ("Images", "*.png *.jpg *.jpeg *.gif"),
    ("All files", "*.*"),
]


class FrameWindow:
    """A window showing a sequence of frames, looping when there are several."""

    def __init__(self, window, frames: Sequence[np.ndarray], title: str = "pixelart",
                 delay: int = FRAME_DELAY_MS):
        """Initialize frame window.

        Args:
            window: tk.Tk or tk.Toplevel to draw in
            frames: RGB or RGBA images
            title: Window title
            delay: Delay between frames in milliseconds
        """
        self.window = window
        self.window.title(title)
        self.delay = delay
        self.frames: List[np.ndarray] = []
        self.index = 0
        self._job = None

        self.figure = Figure(dpi=DPI)
        self.ax = self.figure.add_axes([0, 0, 1, 1])
        self.ax.axis('off')
        self.image = None

        self.canvas = FigureCanvasTkAgg(self.figure, master=self.window)
        self.canvas.get_tk_widget().pack(fill='both', expand=True)

        self.show(frames)

    def show(self, frames: Sequence[np.ndarray]):
        """Replace the displayed frames."""
        if not frames:
            raise ValueError("No frames to show")
        self._cancel()
        self.frames = [np.asarray(frame) for frame in frames]
        self.index = 0

        self.ax.clear()
        self.ax.axis('off')
        self.image = self.ax.imshow(self.frames[0], interpolation='nearest')

        height, width = self.frames[0].shape[:2]
        self.figure.set_size_inches(max(width, MIN_WINDOW_SIZE) / DPI,
                                    max(height, MIN_WINDOW_SIZE) / DPI)
        self.canvas.draw()

        if len(self.frames) > 1:
            self._job = self.window.after(self.delay, self._next_frame)

    def _next_frame(self):
        self.index = (self.index + 1) % len(self.frames)
        self.image.set_data(self.frames[self.index])
        self.canvas.draw_idle()
        self._job = self.window.after(self.delay, self._next_frame)

    def _cancel(self):
        if self._job is not None:
            self.window.after_cancel(self._job)
            self._job = None


class PixelViewerApp(FrameWindow):
    """Main viewer window with a File menu."""

    def __init__(self, root, frames: Optional[Sequence[np.ndarray]] = None,
                 title: str = "pixelart"):
        self.root = root
        self._create_menu(root)
        self._set_icon(root)
        if not frames:
            frames = [icon_image()]
        super().__init__(root, frames, title)

    def _create_menu(self, root):
        menubar = tk.Menu(root)
        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label="Open...", command=self.open_file)
        file_menu.add_separator()
        file_menu.add_command(label="Quit", command=root.destroy)
        menubar.add_cascade(label="File", menu=file_menu)
        root.config(menu=menubar)

    def _set_icon(self, root):
        png = iio.imwrite("<bytes>", icon_image(), extension=".png")
        # Keep a reference, tk does not
        self._icon = tk.PhotoImage(data=base64.b64encode(png))
        root.iconphoto(True, self._icon)

    def open_file(self):
        """Ask for an image file and show it."""
        path = filedialog.askopenfilename(title="Open image", filetypes=FILE_TYPES)
        if not path:
            return
        try:
            frames = load_frames(path)
        except (OSError, ValueError) as e:
            logger.error("Failed to open %s: %s", path, e)
            messagebox.showerror("Error", f"Failed to open {path}: {str(e)}")
            return
        logger.info("Opened %s (%d frames)", path, len(frames))
        self.window.title(path)
        self.show(frames)


def icon_image() -> np.ndarray:
    """The alien monster, rendered small."""
    style = PixelImageStyle(pixel_width=2, border_width=0)
    return AlienMonster().create().image_builder(style).get_image()


def view(*sequences: Sequence[np.ndarray], title: str = "pixelart"):
    """Show image sequences and block until the main window is closed.

    The first sequence goes to the main window, every other one to its own
    extra window.

    Args:
        sequences: Lists of RGB or RGBA frames
        title: Main window title
    """
    if not sequences:
        raise ValueError("Nothing to view")

    root = tk.Tk()
    app = PixelViewerApp(root, sequences[0], title)
    windows = [app]
    for i, frames in enumerate(sequences[1:], start=2):
        windows.append(FrameWindow(tk.Toplevel(root), frames, f"{title} ({i})"))
    root.mainloop()


def run_viewer():
    """Run viewer application."""
    parser = argparse.ArgumentParser(description='Pixel art viewer')
    parser.add_argument('files', nargs='*', help='PNG, JPEG or GIF files to open')
    args = parser.parse_args()

    sequences = [load_frames(path) for path in args.files]
    if not sequences:
        sequences = [[icon_image()]]
    view(*sequences, title=args.files[0] if args.files else "pixelart")


if __name__ == '__main__':
    run_viewer()
