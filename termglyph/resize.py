"""
Aspect-correct resizing of bitmaps to the terminal's character grid.

Each rendered pixel occupies :data:`GLYPH_WIDTH` columns and one row, and
:data:`RESERVED_ROWS` rows are left free at the bottom of the terminal.
"""

from __future__ import annotations

from typing import NamedTuple

import PIL.Image
import numpy as np

from .config import GLYPH_WIDTH, RESERVED_ROWS
from .errors import TerminalTooSmall


class TerminalGeometry(NamedTuple):
    """Terminal size in character cells."""

    columns: int
    rows: int


def canvas_size(geometry: TerminalGeometry) -> tuple[int, int]:
    """
    Pixel canvas available inside the terminal.

    :param geometry: Current terminal size
    :return: (width, height) in pixels
    :raises TerminalTooSmall: if either canvas dimension collapses to zero
    """
    width = geometry.columns // GLYPH_WIDTH
    height = geometry.rows - RESERVED_ROWS
    if width <= 0 or height <= 0:
        raise TerminalTooSmall(geometry.columns, geometry.rows)
    return width, height


def fit_size(
    src_width: int, src_height: int, geometry: TerminalGeometry
) -> tuple[int, int]:
    """
    Compute the target size of a src_width x src_height image.

    The image is height-constrained when the source height divided by the
    canvas height exceeds the source height divided by the canvas width,
    otherwise it is width-constrained. The free dimension is scaled
    proportionally and clamped to the canvas.

    :return: (width, height) in pixels, each at least 1
    """
    canvas_w, canvas_h = canvas_size(geometry)
    width_ratio = src_height // canvas_w
    height_ratio = src_height // canvas_h
    if height_ratio > width_ratio:
        new_w, new_h = canvas_h * src_width // src_height, canvas_h
        if new_w > canvas_w:
            new_w, new_h = canvas_w, canvas_w * src_height // src_width
    else:
        new_w, new_h = canvas_w, canvas_w * src_height // src_width
        if new_h > canvas_h:
            new_w, new_h = canvas_h * src_width // src_height, canvas_h
    return max(1, new_w), max(1, new_h)


def resize_bitmap(bitmap: np.ndarray, geometry: TerminalGeometry) -> np.ndarray:
    """
    Resize an RGB bitmap so it fits the terminal, preserving its aspect ratio.

    Uses nearest-neighbor resampling to keep hard edges.

    :param bitmap: (h, w, 3) uint8 array
    :param geometry: Current terminal size
    :return: The resized (h', w', 3) uint8 array
    """
    src_h, src_w = bitmap.shape[:2]
    size = fit_size(src_w, src_h, geometry)
    if size == (src_w, src_h):
        return bitmap
    image = PIL.Image.fromarray(bitmap)
    return np.asarray(image.resize(size, resample=PIL.Image.Resampling.NEAREST))


__all__ = ["TerminalGeometry", "canvas_size", "fit_size", "resize_bitmap"]
