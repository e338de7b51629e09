"""
Glyph palette - map pixel luminance to one of 16 three-character glyphs.

The heat map is ordered from the sparsest glyph (blank) to the densest one
(solid block), so brighter pixels are drawn with denser glyphs.
"""

from __future__ import annotations

import numpy as np

HEAT_MAP: tuple[str, ...] = (
    "   ",
    "...",
    "´´´",
    ":::",
    "~~~",
    "+++",
    "iii",
    "xxx",
    "!!!",
    "III",
    "###",
    "$$$",
    "XXX",
    "▄▄▄",
    "■■■",
    "███",
)

HEAT_MAP_LENGTH = len(HEAT_MAP)
SOLID_GLYPH = HEAT_MAP[-1]

# Width of one luminance band, 256 / 16 = 16
_BAND = 256 // HEAT_MAP_LENGTH


def luminance(r: int, g: int, b: int) -> int:
    """Unweighted mean of the three channels in [0, 255]."""
    return (int(r) + int(g) + int(b)) // 3


def glyph_index(value: int) -> int:
    """Index into :data:`HEAT_MAP` for a luminance value in [0, 255]."""
    return int(value) // _BAND


def glyph_for(
    pixel: tuple[int, int, int], block_characters: bool = False
) -> tuple[str, tuple[int, int, int]]:
    """
    Select the glyph for a single RGB pixel.

    :param pixel: The (r, g, b) triple
    :param block_characters: Always return the solid block glyph
    :return: The glyph string and the color to draw it with
    """
    r, g, b = (int(c) for c in pixel)
    if block_characters:
        return SOLID_GLYPH, (r, g, b)
    return HEAT_MAP[glyph_index(luminance(r, g, b))], (r, g, b)


def glyph_indices(pixels: np.ndarray) -> np.ndarray:
    """
    Vectorized :func:`glyph_index` for a whole (h, w, 3) uint8 bitmap.

    :return: int array of shape (h, w) with values in [0, 16)
    """
    lum = pixels[:, :, :3].astype(np.uint16).sum(axis=2) // 3
    return (lum // _BAND).astype(np.intp)


__all__ = [
    "HEAT_MAP",
    "HEAT_MAP_LENGTH",
    "SOLID_GLYPH",
    "luminance",
    "glyph_index",
    "glyph_for",
    "glyph_indices",
]
