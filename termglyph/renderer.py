"""
Frame renderer - turn one RGB bitmap into glyph text for the terminal.

Example:
    import numpy as np
    from termglyph import FrameRenderer, RenderConfig, TerminalScreen

    screen = TerminalScreen()
    renderer = FrameRenderer(RenderConfig(colorize=True, resize=True), screen)
    renderer.render(np.zeros((32, 32, 3), dtype=np.uint8))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from .config import RenderConfig
from .palette import HEAT_MAP, SOLID_GLYPH, glyph_indices
from .resize import resize_bitmap

if TYPE_CHECKING:
    from .terminal import TerminalScreen

# ANSI escape codes
ESC = "\033"
RESET = f"{ESC}[0m"
CURSOR_HOME = f"{ESC}[H"
CLEAR_SCREEN = f"{ESC}[2J"


def as_rgb(bitmap: np.ndarray) -> np.ndarray:
    """
    Normalize a gray, RGB or RGBA array to an (h, w, 3) uint8 bitmap.

    :raises ValueError: for empty or otherwise unsupported arrays
    """
    pixels = np.asarray(bitmap)
    if pixels.ndim == 2:
        # Grayscale - expand to RGB
        pixels = np.stack([pixels, pixels, pixels], axis=-1)
    elif pixels.ndim == 3 and pixels.shape[2] == 4:
        # RGBA - drop alpha
        pixels = pixels[:, :, :3]
    if pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Unsupported bitmap shape {pixels.shape}")
    if pixels.shape[0] == 0 or pixels.shape[1] == 0:
        raise ValueError("Bitmap must not be empty")
    if pixels.dtype != np.uint8:
        pixels = np.clip(pixels, 0, 255).astype(np.uint8)
    return pixels


class FrameRenderer:
    """
    Draws bitmaps as heat map glyphs, optionally in true color.

    The cursor is moved home before each frame instead of clearing the
    screen, and every frame is written and flushed in one piece so rows
    never appear one by one.
    """

    def __init__(self, config: RenderConfig, screen: "TerminalScreen"):
        """
        :param config: Rendering options of this run
        :param screen: Provides the output stream and the terminal geometry
        """
        self.config = config
        self.screen = screen

    def prepare(self, bitmap: np.ndarray) -> np.ndarray:
        """Normalize the bitmap and, if enabled, fit it to the terminal."""
        pixels = as_rgb(bitmap)
        if self.config.resize:
            pixels = resize_bitmap(pixels, self.screen.geometry())
        return pixels

    def compose(self, bitmap: np.ndarray) -> str:
        """
        Build the text of one frame, one line per pixel row.

        :param bitmap: (h, w, 3) uint8 array, used as is
        :return: The glyph rows, each terminated by a newline
        """
        if self.config.block_characters:
            glyphs = np.full(bitmap.shape[:2], SOLID_GLYPH, dtype=object)
        else:
            glyphs = np.asarray(HEAT_MAP, dtype=object)[glyph_indices(bitmap)]

        rows = []
        for y, row in enumerate(glyphs):
            if self.config.colorize:
                chars = []
                for x, glyph in enumerate(row):
                    r, g, b = bitmap[y, x]
                    chars.append(f"{ESC}[38;2;{r};{g};{b}m{glyph}")
                chars.append(RESET)
                rows.append("".join(chars))
            else:
                rows.append("".join(row))
        return "".join(f"{line}\n" for line in rows)

    def render(self, bitmap: np.ndarray) -> None:
        """
        Draw a frame at the top left of the terminal.

        :param bitmap: Gray, RGB or RGBA array
        :raises TerminalTooSmall: if resizing is enabled and the terminal is too small
        :raises OSError: if writing to the output stream fails
        """
        text = self.compose(self.prepare(bitmap))
        stream = self.screen.stream
        stream.write(CURSOR_HOME + text)
        stream.flush()


__all__ = ["FrameRenderer", "as_rgb", "ESC", "RESET", "CURSOR_HOME", "CLEAR_SCREEN"]
