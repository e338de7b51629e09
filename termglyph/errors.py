"""Error types raised by termglyph.

Rendering and playback surface a small, closed set of failures. Output
failures are the built-in :class:`OSError` (``IOError`` / ``BrokenPipeError``)
and are propagated unchanged.
"""

from __future__ import annotations


class TermGlyphError(Exception):
    """Base class of all termglyph specific errors."""


class TerminalTooSmall(TermGlyphError, ValueError):
    """The terminal leaves no room for a single rendered pixel."""

    def __init__(self, columns: int, rows: int):
        self.columns = columns
        self.rows = rows
        super().__init__(
            f"Terminal of {columns}x{rows} cells is too small to render into"
        )


class FrameSourceError(TermGlyphError, RuntimeError):
    """A frame source failed to open or to deliver the next frame."""


class UnsupportedMediaError(TermGlyphError):
    """The file type is none of the supported video, still or GIF formats."""


class InvalidSourceError(TermGlyphError):
    """The location is neither a webcam, an existing file nor a URL."""


__all__ = [
    "TermGlyphError",
    "TerminalTooSmall",
    "FrameSourceError",
    "UnsupportedMediaError",
    "InvalidSourceError",
]
